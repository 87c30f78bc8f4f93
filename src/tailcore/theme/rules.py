"""Checks run against an override tree before it is resolved.

Each rule is a callable that accepts the base ``TokenTree`` and an
``OverrideTree`` and returns a list of ``Diagnostic`` objects.  None of
these conditions stop resolution; they flag overrides that are likely
mistakes.

Rule codes:

    TC101  Override names a scale the base tree does not define
    TC102  Scale is both extended and replaced; extend entries dropped
    TC103  Replacement leaves a scale with no tokens
"""
from __future__ import annotations

from typing import Callable

from tailcore.diagnostics import (
    EMPTY_REPLACEMENT,
    EXTEND_SHADOWED,
    UNKNOWN_SCALE,
    Diagnostic,
)
from tailcore.theme.tokens import OverrideTree, Replace, TokenTree

Rule = Callable[[TokenTree, OverrideTree], list[Diagnostic]]


def rule_unknown_scale(base: TokenTree, override: OverrideTree) -> list[Diagnostic]:
    """TC101: the scale is added verbatim but nothing will consume it."""
    return [
        Diagnostic.warning(
            UNKNOWN_SCALE,
            f"Scale {scale!r} is not part of the base theme; it will be added "
            "but no generator reads it.",
            path=f"theme.{scale}",
            suggestion="Check the scale name for typos",
        )
        for scale in override
        if scale not in base
    ]


def rule_extend_shadowed(base: TokenTree, override: OverrideTree) -> list[Diagnostic]:
    """TC102: ``theme.<scale>`` and ``theme.extend.<scale>`` were both given."""
    return [
        Diagnostic.warning(
            EXTEND_SHADOWED,
            f"Scale {scale!r} is replaced, so its extend entries are ignored.",
            path=f"theme.extend.{scale}",
            suggestion=f"Move the entries into theme.{scale} or drop the replacement",
        )
        for scale in sorted(override.shadowed)
    ]


def rule_empty_replacement(base: TokenTree, override: OverrideTree) -> list[Diagnostic]:
    """TC103: an empty replacement removes every token of the scale."""
    return [
        Diagnostic.warning(
            EMPTY_REPLACEMENT,
            f"Replacement for scale {scale!r} is empty; no utilities will use it.",
            path=f"theme.{scale}",
        )
        for scale, entry in override.items()
        if isinstance(entry, Replace) and not entry.values
    ]


DEFAULT_RULES: list[Rule] = [
    rule_unknown_scale,
    rule_extend_shadowed,
    rule_empty_replacement,
]
