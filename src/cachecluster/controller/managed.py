"""Contract between a reconciliation scheduler and an external resource client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from cachecluster.models.resource import CacheCluster


@dataclass(frozen=True, slots=True)
class ExternalObservation:
    resource_exists: bool = False
    resource_up_to_date: bool = False


@dataclass(frozen=True, slots=True)
class ExternalCreation:
    pass


@dataclass(frozen=True, slots=True)
class ExternalUpdate:
    pass


class ExternalClient(Protocol):
    async def observe(self, cr: CacheCluster) -> ExternalObservation: ...

    async def create(self, cr: CacheCluster) -> ExternalCreation: ...

    async def update(self, cr: CacheCluster) -> ExternalUpdate: ...

    async def delete(self, cr: CacheCluster) -> None: ...

    async def aclose(self) -> None: ...


class ExternalConnecter(Protocol):
    async def connect(self, cr: CacheCluster) -> ExternalClient: ...
