from cachecluster.services.cache_clusters import CacheClustersService

__all__ = ["CacheClustersService"]
