"""Load configuration defaults from config.yml."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

# Project root (same dir as pyproject.toml), not the working directory
_DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config.yml"
_CONFIG_PATH = Path(os.environ.get("FORBIDDEN_DOMAINS_CONFIG_PATH", _DEFAULT_CONFIG_PATH))

_cache: dict | None = None


def _load() -> dict:
    global _cache
    if _cache is None:
        with open(_CONFIG_PATH) as f:
            loaded = yaml.safe_load(f)
        _cache = loaded if isinstance(loaded, dict) else {}
    return _cache


def get_defaults() -> dict:
    """Return the defaults section, or empty dict if config is unavailable."""
    try:
        defaults = _load().get("defaults")
    except (OSError, yaml.YAMLError):
        return {}
    return defaults if isinstance(defaults, dict) else {}
