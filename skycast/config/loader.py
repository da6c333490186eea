"""YAML config loader with dotted-key lookup and API key resolution."""

import os
from pathlib import Path
from typing import Any

import yaml

from skycast.config.schema import ProviderConfig, SkycastConfig
from skycast.errors import ConfigurationError


def load_config(path: str | Path | None = None) -> SkycastConfig:
    """Load and validate config from a YAML file.

    A missing or empty file yields the defaults.
    """
    if path is None:
        return SkycastConfig()
    path = Path(path)
    if not path.exists():
        return SkycastConfig()
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return SkycastConfig(**raw)


def get_config_value(config: SkycastConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'search.debounce_ms'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict) and part in obj:
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def resolve_api_key(provider: ProviderConfig, explicit: str | None = None) -> str:
    """Return the provider API key or raise ConfigurationError."""
    key = explicit or os.environ.get(provider.api_key_env, "")
    if not key:
        raise ConfigurationError(f"{provider.api_key_env} not set")
    return key
