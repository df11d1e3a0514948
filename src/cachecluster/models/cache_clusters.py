from __future__ import annotations

from pydantic import Field

from cachecluster.models.common import CacheModel


class Endpoint(CacheModel):
    address: str | None = None
    port: int | None = None


class CacheClusterRecord(CacheModel):
    """A cache cluster as reported by the provider API."""

    cacheClusterId: str | None = None
    cacheClusterStatus: str | None = None
    cacheNodeType: str | None = None
    numCacheNodes: int | None = None
    engine: str | None = None
    engineVersion: str | None = None
    configurationEndpoint: Endpoint | None = None


class DescribeCacheClustersResponse(CacheModel):
    cacheClusters: list[CacheClusterRecord] = Field(default_factory=list)


class CacheClusterResponse(CacheModel):
    cacheCluster: CacheClusterRecord | None = None


class CreateCacheClusterRequest(CacheModel):
    """User-facing request model for cache cluster creation."""

    cache_cluster_id: str
    cache_node_type: str
    num_cache_nodes: int = Field(default=1, ge=1)
    engine: str | None = None
    engine_version: str | None = None
    port: int | None = None
    preferred_availability_zone: str | None = None
    cache_parameter_group_name: str | None = None
    snapshot_retention_limit: int | None = None
    tags: dict[str, str] = Field(default_factory=dict)


class ModifyCacheClusterRequest(CacheModel):
    """User-facing request model for cache cluster modification."""

    cache_cluster_id: str
    cache_node_type: str
    num_cache_nodes: int = Field(default=1, ge=1)
    apply_immediately: bool = True
