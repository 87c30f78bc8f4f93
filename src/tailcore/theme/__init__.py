"""Theme module.

Exports the token data model, the built-in ``DEFAULT_THEME``, and the
``ThemeResolver`` with its ``resolve`` convenience function.
"""
from __future__ import annotations

from tailcore.theme.defaults import DEFAULT_THEME
from tailcore.theme.resolver import ThemeResolver, resolve
from tailcore.theme.rules import DEFAULT_RULES, Rule
from tailcore.theme.tokens import (
    Extend,
    OverrideTree,
    Replace,
    ScaleOverride,
    TokenTable,
    TokenTree,
)

__all__ = [
    "DEFAULT_THEME",
    "DEFAULT_RULES",
    "Extend",
    "OverrideTree",
    "Replace",
    "Rule",
    "ScaleOverride",
    "ThemeResolver",
    "TokenTable",
    "TokenTree",
    "resolve",
]
