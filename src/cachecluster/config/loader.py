from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w
import yaml
from pydantic import ValidationError

from cachecluster.config.models import ConfigInput, ProviderConfig, ResolvedConfig
from cachecluster.constants import DEFAULT_CONFIG_DIR
from cachecluster.errors import ConfigError

CONFIG_PATH_ENVS = ("CACHECLUSTER_CONFIG", "CACHECLUSTER_CONFIG_FILE")


def _default_config_dir() -> Path:
    return Path(DEFAULT_CONFIG_DIR).expanduser()


def default_config_candidates() -> list[Path]:
    base = _default_config_dir()
    return [
        base / "config.yml",
        base / "config.yaml",
        base / "config.toml",
        base / "config.json",
    ]


def decode_document(raw: str, *, suffix: str) -> dict[str, Any]:
    """Decode a yaml, json or toml document into a mapping."""

    if suffix in {".yaml", ".yml"}:
        parsed = yaml.safe_load(raw) or {}
    elif suffix == ".json":
        parsed = json.loads(raw)
    elif suffix == ".toml":
        parsed = tomllib.loads(raw)
    else:
        # Extension-less: TOML, then YAML (a superset of JSON).
        for decode in (tomllib.loads, yaml.safe_load):
            try:
                parsed = decode(raw) or {}
                break
            except (tomllib.TOMLDecodeError, yaml.YAMLError):
                continue
        else:
            raise ConfigError("failed to auto-detect document format (expected yaml/json/toml)")

    if not isinstance(parsed, dict):
        raise ConfigError("document must decode to an object/map")
    return parsed


def parse_document(path: Path) -> dict[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
        return decode_document(raw, suffix=path.suffix.lower())
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise ConfigError(f"failed to parse '{path}': {exc}") from exc


def _load_from_path(path: Path, *, source: str) -> ResolvedConfig:
    payload = parse_document(path)
    try:
        data = ProviderConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"invalid config structure for '{path}': {exc}") from exc

    return ResolvedConfig(source=source, path=path.resolve(), data=data)


def load_config(
    config: ConfigInput | str | Path | None = None,
    *,
    config_path: str | Path | None = None,
) -> ResolvedConfig:
    """Load and validate provider configuration.

    Precedence: runtime dict/model, explicit path, ``CACHECLUSTER_CONFIG``
    environment variables, then the default config directory. Nothing found
    yields an empty configuration.
    """

    if isinstance(config, (str, Path)) and config_path is None:
        config_path = config
        config = None

    if config is not None:
        if isinstance(config, ProviderConfig):
            return ResolvedConfig(source="runtime-model", data=config)
        try:
            return ResolvedConfig(source="runtime-dict", data=ProviderConfig.model_validate(config))
        except ValidationError as exc:
            raise ConfigError(f"invalid config structure: {exc}") from exc

    if config_path is not None:
        path = Path(config_path).expanduser().resolve()
        if not path.exists():
            return ResolvedConfig(source="explicit-path-missing", path=path, data=ProviderConfig())
        return _load_from_path(path, source="explicit-path")

    for env_name in CONFIG_PATH_ENVS:
        env_path = os.getenv(env_name)
        if not env_path:
            continue
        path = Path(env_path).expanduser().resolve()
        if not path.exists():
            return ResolvedConfig(source=f"env:{env_name}:missing", path=path, data=ProviderConfig())
        return _load_from_path(path, source=f"env:{env_name}")

    for candidate in default_config_candidates():
        if candidate.exists():
            return _load_from_path(candidate.expanduser().resolve(), source="default-path")

    return ResolvedConfig(
        source="default-empty",
        path=default_config_candidates()[0].expanduser().resolve(),
        data=ProviderConfig(),
    )


def save_config(config: ProviderConfig, *, path: Path | None = None) -> Path:
    target = (path or default_config_candidates()[0]).expanduser()
    target.parent.mkdir(parents=True, exist_ok=True)
    suffix = target.suffix.lower()

    payload = config.model_dump(mode="json", exclude_none=True)
    for name, profile in config.profiles.items():
        if profile.api_token is not None:
            payload["profiles"][name]["api_token"] = profile.api_token.get_secret_value()

    if suffix in {"", ".yaml", ".yml"}:
        rendered = yaml.safe_dump(payload, sort_keys=False)
    elif suffix == ".json":
        rendered = json.dumps(payload, indent=2) + "\n"
    elif suffix == ".toml":
        rendered = tomli_w.dumps(payload)
    else:
        raise ConfigError(f"unsupported config extension: {suffix}")

    target.write_text(rendered, encoding="utf-8")
    target.chmod(0o600)
    return target.resolve()
