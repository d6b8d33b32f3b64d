"""YAML config loader with environment overrides and runtime get/set."""

import json
import os
from pathlib import Path
from typing import Any

import yaml

from weatherdash.config.schema import DashboardConfig

WEATHERAPI_KEY_ENV = "WEATHERAPI_KEY"
OPENWEATHER_KEY_ENV = "OPENWEATHER_API_KEY"


def load_config(
    path: str | Path | None = None, environ: dict[str, str] | None = None
) -> DashboardConfig:
    """Load and validate config from an optional YAML file.

    A missing or empty file yields the defaults. API keys found in the
    environment take precedence over the file.
    """
    raw: dict[str, Any] = {}
    if path is not None and Path(path).exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    env = os.environ if environ is None else environ
    for section, var in (
        ("weatherapi", WEATHERAPI_KEY_ENV),
        ("openweather", OPENWEATHER_KEY_ENV),
    ):
        if env.get(var):
            if not raw.get(section):
                raw[section] = {}
            raw[section]["api_key"] = env[var]

    return DashboardConfig(**raw)


def get_config_value(config: DashboardConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'display.default_city'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(
    config: DashboardConfig, dotted_key: str, value: Any
) -> DashboardConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new DashboardConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        if part not in target:
            raise KeyError(f"Config key not found: {dotted_key}")
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    # Strings from the CLI are coerced by pydantic, except for booleans
    old_value = target[parts[-1]]
    if isinstance(old_value, bool) and isinstance(value, str):
        value = value.strip().lower() in ("1", "true", "yes", "on")
    target[parts[-1]] = value
    return DashboardConfig(**data)


def redacted(config: DashboardConfig) -> dict[str, Any]:
    """Config as a plain dict with API keys masked for display."""
    data = json.loads(config.model_dump_json())
    for section in ("weatherapi", "openweather"):
        if data[section]["api_key"]:
            data[section]["api_key"] = "****"
    return data
