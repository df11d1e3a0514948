"""Client entrypoints."""

from cachecluster.client.async_client import AsyncCacheClient
from cachecluster.client.fake import MockCacheClusterAPI
from cachecluster.client.protocol import CacheClusterAPI

__all__ = [
    "AsyncCacheClient",
    "CacheClusterAPI",
    "MockCacheClusterAPI",
]
