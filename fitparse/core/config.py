"""Configuration loading and persistence."""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # Python 3.9-3.10
    import tomli as tomllib  # type: ignore[no-redef]


class ConfigError(RuntimeError):
    """Raised when config file parsing fails."""


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def expand_path(path_str: str) -> Path:
    """Expand user/env vars and return absolute path."""
    return Path(os.path.expandvars(path_str)).expanduser().resolve()


def default_data_dir() -> Path:
    """Resolve XDG-style data directory with env override."""
    raw = os.getenv("FITPARSE_DATA_DIR", "~/.local/share/fitparse")
    return expand_path(raw)


def default_config_path() -> Path:
    """Get default config file path."""
    raw = os.getenv("FITPARSE_CONFIG_FILE", "~/.config/fitparse/config.toml")
    return expand_path(raw)


def _default_config() -> Dict[str, Any]:
    data_dir = default_data_dir()
    return {
        "vocabulary": {},
        "storage": {
            "activity_log": str(data_dir / "activities.jsonl"),
            "common_logs": str(data_dir / "common_logs.json"),
            "common_logs_limit": 10,
        },
        "parser": {
            "split_segments": True,
        },
    }


DEFAULT_CONFIG: Dict[str, Any] = _default_config()


def _read_config(path: Path) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    try:
        text = path.read_text()
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        if suffix in {".toml", ""}:
            loaded = tomllib.loads(text)
        else:
            loaded = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in config file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config file {path}: {exc}") from exc

    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file {path} must contain an object/table at the root")
    return loaded


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from disk, merged with defaults."""
    cfg_path = path or default_config_path()
    cfg = _default_config()
    if cfg_path.exists():
        cfg = _deep_merge(cfg, _read_config(cfg_path))
    return cfg


def resolve_storage_path(config: Dict[str, Any], key: str) -> Path:
    """Resolve a storage file path (activity_log or common_logs) from env/config."""
    env_name = f"FITPARSE_{key.upper()}"
    raw = os.getenv(env_name) or config.get("storage", {}).get(key)
    if not raw:
        raw = str(_default_config()["storage"][key])
    return expand_path(str(raw))


def split_enabled(config: Dict[str, Any]) -> bool:
    return bool(config.get("parser", {}).get("split_segments", True))


def common_logs_limit(config: Dict[str, Any]) -> int:
    try:
        return max(int(config.get("storage", {}).get("common_logs_limit", 10)), 1)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"storage.common_logs_limit must be an integer: {exc}") from exc
