from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from cachecluster.config.loader import parse_document
from cachecluster.errors import ConfigError
from cachecluster.models.resource import CacheCluster


def load_cache_cluster(source: str | Path | Mapping[str, Any]) -> CacheCluster:
    """Load a ``CacheCluster`` from a yaml/json/toml manifest file or a mapping."""

    if isinstance(source, Mapping):
        payload = dict(source)
        origin = "<mapping>"
    else:
        path = Path(source).expanduser()
        payload = parse_document(path)
        origin = str(path)

    kind = payload.get("kind", "CacheCluster")
    if kind != "CacheCluster":
        raise ConfigError(f"unsupported manifest kind '{kind}' in {origin}")

    try:
        return CacheCluster.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"invalid cache cluster manifest {origin}: {exc}") from exc
