"""Status conditions exposing a resource's lifecycle phase.

Conditions are upserted by type: setting a condition replaces any earlier
entry of the same type in place and leaves every other entry untouched, so a
status never holds two conditions of one type. The lifecycle conditions
(``creating``, ``available``, ``deleting``) all share the ``Ready`` type and
therefore replace each other.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import AliasChoices, Field

from cachecluster.models.common import CacheModel


class ConditionType(StrEnum):
    READY = "Ready"


class ConditionStatus(StrEnum):
    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


class ConditionReason(StrEnum):
    CREATING = "Creating"
    AVAILABLE = "Available"
    DELETING = "Deleting"


def _now() -> datetime:
    return datetime.now(UTC)


class Condition(CacheModel):
    type: str
    status: ConditionStatus = ConditionStatus.UNKNOWN
    reason: str = ""
    message: str | None = None
    last_transition_time: datetime = Field(
        default_factory=_now,
        validation_alias=AliasChoices("last_transition_time", "lastTransitionTime"),
    )

    def equal(self, other: Condition) -> bool:
        """Compare conditions ignoring ``last_transition_time``."""

        return (
            self.type == other.type
            and self.status == other.status
            and self.reason == other.reason
            and self.message == other.message
        )


def creating() -> Condition:
    return Condition(type=ConditionType.READY, status=ConditionStatus.FALSE, reason=ConditionReason.CREATING)


def available() -> Condition:
    return Condition(type=ConditionType.READY, status=ConditionStatus.TRUE, reason=ConditionReason.AVAILABLE)


def deleting() -> Condition:
    return Condition(type=ConditionType.READY, status=ConditionStatus.FALSE, reason=ConditionReason.DELETING)


class ConditionedStatus(CacheModel):
    conditions: list[Condition] = Field(default_factory=list)

    def _index(self) -> dict[str, int]:
        return {condition.type: position for position, condition in enumerate(self.conditions)}

    def get_condition(self, condition_type: str) -> Condition:
        position = self._index().get(condition_type)
        if position is None:
            return Condition(type=condition_type, status=ConditionStatus.UNKNOWN)
        return self.conditions[position]

    def set_conditions(self, *conditions: Condition) -> None:
        index = self._index()
        for condition in conditions:
            position = index.get(condition.type)
            if position is None:
                index[condition.type] = len(self.conditions)
                self.conditions.append(condition)
                continue
            # An unchanged condition keeps its original transition time.
            if not self.conditions[position].equal(condition):
                self.conditions[position] = condition

    def has_reason(self, condition_type: str, reason: str) -> bool:
        return self.get_condition(condition_type).reason == reason
