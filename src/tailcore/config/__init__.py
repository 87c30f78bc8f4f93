"""Configuration module.

Exports the loaders and the ``UserConfig`` / ``ResolvedConfig`` value
objects.
"""
from __future__ import annotations

from tailcore.config.loader import (
    CONFIG_FILENAMES,
    find_config,
    load_config,
    parse_config,
    resolve_config,
)
from tailcore.config.model import ResolvedConfig, UserConfig

__all__ = [
    "CONFIG_FILENAMES",
    "ResolvedConfig",
    "UserConfig",
    "find_config",
    "load_config",
    "parse_config",
    "resolve_config",
]
