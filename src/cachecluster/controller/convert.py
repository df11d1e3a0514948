"""Conversions between the managed resource and provider API shapes."""

from __future__ import annotations

from collections.abc import Sequence

from cachecluster.models.cache_clusters import (
    CacheClusterRecord,
    CreateCacheClusterRequest,
    ModifyCacheClusterRequest,
)
from cachecluster.models.resource import CacheClusterObservation, CacheClusterParameters, ClusterStatus


def select_record(records: Sequence[CacheClusterRecord], cache_cluster_id: str) -> CacheClusterRecord | None:
    """Pick the record for ``cache_cluster_id``, falling back to the first one returned."""

    for record in records:
        if record.cacheClusterId == cache_cluster_id:
            return record
    return records[0] if records else None


def generate_observation(record: CacheClusterRecord) -> CacheClusterObservation:
    return CacheClusterObservation(
        cache_cluster_id=record.cacheClusterId,
        cache_cluster_status=record.cacheClusterStatus,
        cache_node_type=record.cacheNodeType,
        num_cache_nodes=record.numCacheNodes,
        engine=record.engine,
        engine_version=record.engineVersion,
        configuration_endpoint=record.configurationEndpoint,
    )


def is_up_to_date(params: CacheClusterParameters, observation: CacheClusterObservation) -> bool:
    return (
        observation.cache_cluster_status == ClusterStatus.AVAILABLE
        and observation.cache_node_type == params.cache_node_type
        and observation.num_cache_nodes == params.num_cache_nodes
    )


def generate_create_request(name: str, params: CacheClusterParameters) -> CreateCacheClusterRequest:
    return CreateCacheClusterRequest(
        cache_cluster_id=name,
        cache_node_type=params.cache_node_type,
        num_cache_nodes=params.num_cache_nodes,
        engine=params.engine,
        engine_version=params.engine_version,
        port=params.port,
        preferred_availability_zone=params.preferred_availability_zone,
        cache_parameter_group_name=params.cache_parameter_group_name,
        snapshot_retention_limit=params.snapshot_retention_limit,
        tags=dict(params.tags),
    )


def generate_modify_request(name: str, params: CacheClusterParameters) -> ModifyCacheClusterRequest:
    return ModifyCacheClusterRequest(
        cache_cluster_id=name,
        cache_node_type=params.cache_node_type,
        num_cache_nodes=params.num_cache_nodes,
    )
