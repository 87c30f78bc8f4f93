"""Configuration value objects.

``UserConfig`` is the validated form of a configuration file before
theme resolution; ``ResolvedConfig`` is built from it exactly once per
process and handed to every consumer explicitly.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tailcore.diagnostics import Diagnostic
from tailcore.scanner.scanner import RawContent
from tailcore.theme.tokens import OverrideTree, TokenTable


@dataclass(frozen=True)
class UserConfig:
    """Configuration as written by the user, shape-checked.

    Parameters
    ----------
    content:
        Content glob patterns, in configuration order.
    raw_content:
        Inline ``{raw, extension}`` content entries.
    theme:
        Per-scale overrides from the ``theme`` section.
    plugins:
        Opaque plugin handles, passed through untouched.
    safelist:
        Class names always added to the candidate set.
    source:
        Path the configuration was loaded from, if any.
    """

    content: tuple[str, ...] = ()
    raw_content: tuple[RawContent, ...] = ()
    theme: OverrideTree = field(default_factory=OverrideTree)
    plugins: tuple[Any, ...] = ()
    safelist: tuple[str, ...] = ()
    source: str | None = None


@dataclass(frozen=True)
class ResolvedConfig:
    """Process-wide, read-only configuration for every build.

    Parameters
    ----------
    content:
        Content glob patterns, in configuration order.
    raw_content:
        Inline content entries.
    theme:
        The resolved token table.
    plugins:
        Opaque plugin handles.
    safelist:
        Class names always present in the candidate set.
    diagnostics:
        Non-fatal findings raised while resolving the theme.
    source:
        Path the configuration was loaded from, if any.
    """

    content: tuple[str, ...]
    raw_content: tuple[RawContent, ...]
    theme: TokenTable
    plugins: tuple[Any, ...] = ()
    safelist: frozenset[str] = frozenset()
    diagnostics: tuple[Diagnostic, ...] = ()
    source: str | None = None
