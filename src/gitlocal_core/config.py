"""Optional TOML settings file for the CLI."""

from __future__ import annotations

import copy
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import ConfigError

ENV_CONFIG_PATH = "GIT_LOCAL_CONFIG"
DEFAULT_CONFIG_PATH = "gitlocal.toml"
DEFAULT_CONFIG: Dict[str, Any] = {
    "provider": {
        "path": None,
    },
    "log": {
        "verbosity": "warning",
    },
}
LOG_LEVELS = ("debug", "info", "warning", "error")


def resolve_config_path(config_path: Optional[Path] = None, cwd: Optional[Path] = None) -> Optional[Path]:
    """Explicit path, then $GIT_LOCAL_CONFIG, then ./gitlocal.toml if it exists."""
    if config_path is not None:
        return config_path
    raw = os.getenv(ENV_CONFIG_PATH)
    if raw:
        return Path(raw)
    candidate = (cwd or Path.cwd()) / DEFAULT_CONFIG_PATH
    if candidate.exists():
        return candidate
    return None


def load_config(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid config TOML: {path} ({exc})") from exc
    for section in ("provider", "log"):
        if section in data and not isinstance(data[section], dict):
            raise ConfigError(f"[{section}] must be a table: {path}")
    return data


def default_config() -> Dict[str, Any]:
    return copy.deepcopy(DEFAULT_CONFIG)


def merge_defaults(defaults: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_defaults(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(config_path: Optional[Path] = None, cwd: Optional[Path] = None) -> Dict[str, Any]:
    """Defaults merged with the settings file, when one is found."""
    path = resolve_config_path(config_path, cwd)
    if path is None:
        return default_config()
    settings = merge_defaults(default_config(), load_config(path))
    verbosity = str(settings["log"].get("verbosity", "warning")).strip().lower()
    if verbosity not in LOG_LEVELS:
        raise ConfigError(f"[log].verbosity must be one of {', '.join(LOG_LEVELS)}: {path}")
    settings["log"]["verbosity"] = verbosity
    return settings


def provider_config(settings: Dict[str, Any], path_override: Optional[str] = None) -> Dict[str, Any]:
    """Config mapping handed to the provider; ``--path`` wins over the file."""
    config = dict(settings.get("provider") or {})
    if path_override is not None:
        config["path"] = path_override
    config.setdefault("path", None)
    return config
