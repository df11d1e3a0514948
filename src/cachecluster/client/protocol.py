from __future__ import annotations

from typing import Protocol

from cachecluster.models.cache_clusters import (
    CacheClusterRecord,
    CreateCacheClusterRequest,
    ModifyCacheClusterRequest,
)


class CacheClusterAPI(Protocol):
    """Remote lifecycle calls the controller depends on.

    Implemented by ``CacheClustersService`` against the live API and by
    ``MockCacheClusterAPI`` in tests.
    """

    async def describe(self, cache_cluster_id: str) -> list[CacheClusterRecord]: ...

    async def create(self, spec: CreateCacheClusterRequest) -> CacheClusterRecord | None: ...

    async def modify(self, spec: ModifyCacheClusterRequest) -> CacheClusterRecord | None: ...

    async def delete(self, cache_cluster_id: str) -> CacheClusterRecord | None: ...
