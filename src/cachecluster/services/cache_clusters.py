from __future__ import annotations

from urllib.parse import quote

from cachecluster.models.cache_clusters import (
    CacheClusterRecord,
    CacheClusterResponse,
    CreateCacheClusterRequest,
    DescribeCacheClustersResponse,
    ModifyCacheClusterRequest,
)
from cachecluster.services.base import ServiceBase


class CacheClustersService(ServiceBase):
    """Cache cluster lifecycle operations for the client's region."""

    def _collection(self) -> str:
        return f"/v1/regions/{quote(self._client.region, safe='')}/cache-clusters"

    def _item(self, cache_cluster_id: str) -> str:
        return f"{self._collection()}/{quote(cache_cluster_id, safe='')}"

    async def describe(self, cache_cluster_id: str) -> list[CacheClusterRecord]:
        data = await self._client._request_json(
            "GET",
            self._collection(),
            params={"cacheClusterId": cache_cluster_id},
        )
        return DescribeCacheClustersResponse.model_validate(data).cacheClusters

    async def create(self, spec: CreateCacheClusterRequest) -> CacheClusterRecord | None:
        payload: dict[str, object] = {
            "cacheClusterId": spec.cache_cluster_id,
            "cacheNodeType": spec.cache_node_type,
            "numCacheNodes": spec.num_cache_nodes,
            "engine": spec.engine,
            "engineVersion": spec.engine_version,
            "port": spec.port,
            "preferredAvailabilityZone": spec.preferred_availability_zone,
            "cacheParameterGroupName": spec.cache_parameter_group_name,
            "snapshotRetentionLimit": spec.snapshot_retention_limit,
            "tags": [{"key": key, "value": value} for key, value in spec.tags.items()],
        }
        data = await self._client._request_json(
            "POST",
            self._collection(),
            json_data={key: value for key, value in payload.items() if value is not None},
        )
        return CacheClusterResponse.model_validate(data).cacheCluster

    async def modify(self, spec: ModifyCacheClusterRequest) -> CacheClusterRecord | None:
        payload = {
            "cacheNodeType": spec.cache_node_type,
            "numCacheNodes": spec.num_cache_nodes,
            "applyImmediately": spec.apply_immediately,
        }
        data = await self._client._request_json(
            "PATCH",
            self._item(spec.cache_cluster_id),
            json_data=payload,
            content_type="application/merge-patch+json",
        )
        return CacheClusterResponse.model_validate(data).cacheCluster

    async def delete(self, cache_cluster_id: str) -> CacheClusterRecord | None:
        data = await self._client._request_json("DELETE", self._item(cache_cluster_id))
        return CacheClusterResponse.model_validate(data).cacheCluster
