"""In-memory test double for ``CacheClusterAPI``."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from cachecluster.models.cache_clusters import (
    CacheClusterRecord,
    CreateCacheClusterRequest,
    ModifyCacheClusterRequest,
)


def raises(exc: BaseException) -> Callable[..., Any]:
    """Build a mock behaviour that raises ``exc`` when called."""

    def behaviour(*_args: Any) -> Any:
        raise exc

    return behaviour


@dataclass
class MockCacheClusterAPI:
    """Cache cluster API whose calls are answered by injected callables.

    Calls are recorded in ``calls`` as ``(operation, argument)`` pairs. Calling an
    operation without a configured behaviour fails the test with AssertionError.
    """

    mock_describe: Callable[[str], list[CacheClusterRecord]] | None = None
    mock_create: Callable[[CreateCacheClusterRequest], CacheClusterRecord | None] | None = None
    mock_modify: Callable[[ModifyCacheClusterRequest], CacheClusterRecord | None] | None = None
    mock_delete: Callable[[str], CacheClusterRecord | None] | None = None
    calls: list[tuple[str, object]] = field(default_factory=list)

    def _call(self, operation: str, behaviour: Callable[[Any], Any] | None, argument: object) -> Any:
        self.calls.append((operation, argument))
        if behaviour is None:
            raise AssertionError(f"unexpected {operation} call")
        return behaviour(argument)

    def calls_to(self, operation: str) -> list[object]:
        return [argument for name, argument in self.calls if name == operation]

    async def describe(self, cache_cluster_id: str) -> list[CacheClusterRecord]:
        return self._call("describe", self.mock_describe, cache_cluster_id)

    async def create(self, spec: CreateCacheClusterRequest) -> CacheClusterRecord | None:
        return self._call("create", self.mock_create, spec)

    async def modify(self, spec: ModifyCacheClusterRequest) -> CacheClusterRecord | None:
        return self._call("modify", self.mock_modify, spec)

    async def delete(self, cache_cluster_id: str) -> CacheClusterRecord | None:
        return self._call("delete", self.mock_delete, cache_cluster_id)
