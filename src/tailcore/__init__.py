"""tailcore: design-token resolution and content scanning for utility-CSS builds.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import tailcore

    # Resolve theme overrides against the built-in tokens
    table = tailcore.resolve(
        tailcore.DEFAULT_THEME,
        {"extend": {"spacing": {"128": "32rem"}}},
    )
    table["spacing"]["128"]
    '32rem'

    # Collect candidate class names from project content
    candidates = tailcore.scan(["*.html", "./src/**/*.rs"], ["."])

    # Or do both from a configuration file
    pipeline = tailcore.Pipeline.from_file("tailcore.config.yaml")
    snapshot = pipeline.build(["."])

    tailcore.__version__
    '0.1.0'
"""
from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from tailcore.errors import ConfigError, GlobSyntaxError
from tailcore.pipeline import BuildSnapshot, Pipeline
from tailcore.theme.defaults import DEFAULT_THEME

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from tailcore.config.model import ResolvedConfig
    from tailcore.theme.tokens import OverrideTree, TokenTable, TokenTree


def resolve(
    base: "TokenTree",
    override: "OverrideTree | Mapping[str, Any] | None" = None,
) -> "TokenTable":
    """Resolve ``override`` against ``base``.

    Parameters
    ----------
    base:
        The base token tree, usually ``DEFAULT_THEME``.
    override:
        An ``OverrideTree`` or a ``{"extend": ..., "replace": ...}`` mapping.

    Returns
    -------
    TokenTable
        The resolved, read-only token table.

    Raises
    ------
    tailcore.ConfigError
        If either tree is malformed.
    """
    from tailcore.theme.resolver import resolve as _resolve

    return _resolve(base, override)


def scan(
    patterns: Iterable[str],
    roots: Iterable[str | os.PathLike[str]],
) -> frozenset[str]:
    """Return the candidate class names found under ``roots``.

    Parameters
    ----------
    patterns:
        Content glob patterns.
    roots:
        Directories relative patterns are resolved against.

    Returns
    -------
    frozenset[str]
        Every candidate extracted; unreadable files are skipped.
    """
    from tailcore.scanner.scanner import scan as _scan

    return _scan(patterns, roots)


def load(path: str | os.PathLike[str]) -> "ResolvedConfig":
    """Load a configuration file and resolve its theme.

    Raises
    ------
    tailcore.ConfigError
        If the file is missing, undecodable, or malformed.
    """
    from tailcore.config.loader import load_config, resolve_config

    return resolve_config(load_config(path))


__all__ = [
    "__version__",
    "BuildSnapshot",
    "ConfigError",
    "DEFAULT_THEME",
    "GlobSyntaxError",
    "Pipeline",
    "load",
    "resolve",
    "scan",
]
