from cachecluster.config.loader import (
    CONFIG_PATH_ENVS,
    decode_document,
    default_config_candidates,
    load_config,
    parse_document,
    save_config,
)
from cachecluster.config.models import (
    ConfigInput,
    ProfileConfig,
    ProviderConfig,
    ResolvedConfig,
)

__all__ = [
    "CONFIG_PATH_ENVS",
    "ConfigInput",
    "ProfileConfig",
    "ProviderConfig",
    "ResolvedConfig",
    "decode_document",
    "default_config_candidates",
    "load_config",
    "parse_document",
    "save_config",
]
