from cachecluster.models.cache_clusters import (
    CacheClusterRecord,
    CacheClusterResponse,
    CreateCacheClusterRequest,
    DescribeCacheClustersResponse,
    Endpoint,
    ModifyCacheClusterRequest,
)
from cachecluster.models.common import CacheModel, ObjectMeta
from cachecluster.models.conditions import (
    Condition,
    ConditionedStatus,
    ConditionReason,
    ConditionStatus,
    ConditionType,
    available,
    creating,
    deleting,
)
from cachecluster.models.resource import (
    CacheCluster,
    CacheClusterObservation,
    CacheClusterParameters,
    CacheClusterSpec,
    CacheClusterStatus,
    ClusterStatus,
    set_external_name,
)

__all__ = [
    "CacheCluster",
    "CacheClusterObservation",
    "CacheClusterParameters",
    "CacheClusterRecord",
    "CacheClusterResponse",
    "CacheClusterSpec",
    "CacheClusterStatus",
    "CacheModel",
    "ClusterStatus",
    "Condition",
    "ConditionReason",
    "ConditionStatus",
    "ConditionType",
    "ConditionedStatus",
    "CreateCacheClusterRequest",
    "DescribeCacheClustersResponse",
    "Endpoint",
    "ModifyCacheClusterRequest",
    "ObjectMeta",
    "available",
    "creating",
    "deleting",
    "set_external_name",
]
