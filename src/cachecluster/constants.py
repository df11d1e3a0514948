DEFAULT_CONFIG_DIR = "~/.config/cachecluster"
DEFAULT_BASE_URL = "http://127.0.0.1:8080"
DEFAULT_REQUEST_TIMEOUT_SECONDS = 30.0

EXTERNAL_NAME_ANNOTATION = "cachecluster.io/external-name"
NOT_FOUND_ERROR_CODES = frozenset({"CacheClusterNotFound", "CacheClusterNotFoundFault"})
