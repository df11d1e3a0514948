from __future__ import annotations

import logging
from contextlib import aclosing
from dataclasses import dataclass
from enum import StrEnum

from cachecluster.controller.managed import ExternalConnecter, ExternalObservation
from cachecluster.models.resource import CacheCluster

logger = logging.getLogger(__name__)


class ReconcileAction(StrEnum):
    NONE = "none"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True, slots=True)
class ReconcileResult:
    action: ReconcileAction
    observation: ExternalObservation


async def reconcile_once(connecter: ExternalConnecter, cr: CacheCluster) -> ReconcileResult:
    """Run one reconciliation tick: observe, then at most one mutating call.

    Errors from any step propagate unchanged; scheduling the next attempt is
    the caller's job.
    """

    async with aclosing(await connecter.connect(cr)) as external:
        observation = await external.observe(cr)

        if cr.deletion_requested:
            if not observation.resource_exists:
                return ReconcileResult(ReconcileAction.NONE, observation)
            await external.delete(cr)
            action = ReconcileAction.DELETE
        elif not observation.resource_exists:
            await external.create(cr)
            action = ReconcileAction.CREATE
        elif not observation.resource_up_to_date:
            await external.update(cr)
            action = ReconcileAction.UPDATE
        else:
            action = ReconcileAction.NONE

    logger.debug("reconciled cache cluster %r: %s", cr.metadata.name, action)
    return ReconcileResult(action, observation)
