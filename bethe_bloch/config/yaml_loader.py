"""Bundled defaults for the chart viewer.

defaults.yaml ships inside this package and mirrors the literals in
defaults.py. It is parsed once on first access and cached; callers get
copies, so the cache cannot be edited through a returned dict.

A different file can be used by pointing BETHE_BLOCH_DEFAULTS_PATH at it
and calling reload_defaults(). This module imports nothing else from the
config package, so every other config module may import it.

Usage:
    from bethe_bloch.config.yaml_loader import get_default, get_defaults
    x_max = get_default('stopping_power.x_max')
"""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULTS_ENV_VAR = "BETHE_BLOCH_DEFAULTS_PATH"
BUNDLED_DEFAULTS = Path(__file__).with_name("defaults.yaml")

_cache: dict[str, Any] | None = None


def _defaults_path() -> Path:
    """Resolve which YAML file to read.

    An existing file named by BETHE_BLOCH_DEFAULTS_PATH takes precedence over
    the bundled one.

    Raises:
        FileNotFoundError: If neither file exists
    """
    override = os.getenv(DEFAULTS_ENV_VAR)
    if override:
        path = Path(override)
        if path.exists():
            return path
        logger.warning(f"{DEFAULTS_ENV_VAR}={override} does not exist, using bundled defaults")

    if not BUNDLED_DEFAULTS.exists():
        raise FileNotFoundError(
            f"Bundled defaults missing at {BUNDLED_DEFAULTS}; "
            f"point {DEFAULTS_ENV_VAR} at a defaults file"
        )
    return BUNDLED_DEFAULTS


def _read_defaults() -> dict[str, Any]:
    path = _defaults_path()
    logger.debug(f"Loading defaults from {path}")
    with open(path, encoding="utf-8") as f:
        # An empty file parses to None
        return yaml.safe_load(f) or {}


def _defaults() -> dict[str, Any]:
    global _cache
    if _cache is None:
        _cache = _read_defaults()
    return _cache


def get_defaults() -> dict[str, Any]:
    """All defaults as a nested dict (deep copy).

    Example:
        >>> get_defaults()['energy']['x_max']
        5.0
    """
    return copy.deepcopy(_defaults())


def get_default(key_path: str, default: Any = None) -> Any:
    """Look up one default by dotted path, e.g. 'material.a'.

    Missing keys, paths that run through a non-mapping, and null values all
    yield ``default``.

    Example:
        >>> get_default('material.z_big')
        1
        >>> get_default('nonexistent.key', 'fallback')
        'fallback'
    """
    node: Any = _defaults()
    for key in key_path.split("."):
        if not isinstance(node, dict) or node.get(key) is None:
            return default
        node = node[key]
    return node


def reload_defaults() -> None:
    """Drop the cache and re-read the defaults file."""
    global _cache
    _cache = _read_defaults()
