from cachecluster.client import AsyncCacheClient, CacheClusterAPI, MockCacheClusterAPI
from cachecluster.config import ProfileConfig, ProviderConfig, load_config
from cachecluster.controller import (
    ClusterConnector,
    ClusterExternal,
    ExternalCreation,
    ExternalObservation,
    ExternalUpdate,
    ReconcileAction,
    ReconcileResult,
    reconcile_once,
)
from cachecluster.errors import (
    APIError,
    CacheClusterError,
    ConfigError,
    ConnectError,
    CreateError,
    DeleteError,
    LifecycleError,
    NotFoundError,
    ObserveError,
    RequestError,
    UpdateError,
)
from cachecluster.manifest import load_cache_cluster
from cachecluster.models import CacheCluster, CacheClusterObservation, CacheClusterParameters

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "APIError",
    "AsyncCacheClient",
    "CacheCluster",
    "CacheClusterAPI",
    "CacheClusterError",
    "CacheClusterObservation",
    "CacheClusterParameters",
    "ClusterConnector",
    "ClusterExternal",
    "ConfigError",
    "ConnectError",
    "CreateError",
    "DeleteError",
    "ExternalCreation",
    "ExternalObservation",
    "ExternalUpdate",
    "LifecycleError",
    "MockCacheClusterAPI",
    "NotFoundError",
    "ObserveError",
    "ProfileConfig",
    "ProviderConfig",
    "ReconcileAction",
    "ReconcileResult",
    "RequestError",
    "UpdateError",
    "load_cache_cluster",
    "load_config",
    "reconcile_once",
]
