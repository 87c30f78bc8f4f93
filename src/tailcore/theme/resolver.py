"""Token resolver: merge a base token tree with user overrides.

For every scale exactly one path applies:

- ``Replace``: the scale becomes the replacement mapping, the base
  values are discarded;
- ``Extend``: the base mapping with the extension written on top, the
  override winning on key collisions;
- no override: the base mapping unchanged.

Scales that only the override names are added verbatim.

Usage
-----
::

    from tailcore.theme import DEFAULT_THEME, ThemeResolver

    resolver = ThemeResolver(DEFAULT_THEME)
    table = resolver.resolve({"extend": {"spacing": {"128": "32rem"}}})
    table["spacing"]["128"]
    '32rem'
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from tailcore.diagnostics import Diagnostic
from tailcore.theme.rules import DEFAULT_RULES, Rule
from tailcore.theme.tokens import (
    Extend,
    OverrideTree,
    Replace,
    TokenTable,
    TokenTree,
    check_tree,
)

logger = logging.getLogger(__name__)


def _as_override(override: OverrideTree | Mapping[str, Any] | None) -> OverrideTree:
    if override is None:
        return OverrideTree()
    if isinstance(override, OverrideTree):
        return override
    return OverrideTree.from_mapping(override)


class ThemeResolver:
    """Resolve override trees against a fixed base tree.

    Parameters
    ----------
    base:
        The built-in token tree.  Checked once on construction.
    rules:
        Checks run by ``check``.  Defaults to ``DEFAULT_RULES``.

    Raises
    ------
    ConfigError
        If ``base`` is not a mapping of scale to string mappings.
    """

    def __init__(self, base: TokenTree, rules: list[Rule] | None = None) -> None:
        self._base: dict[str, dict[str, str]] = check_tree(base, "base")
        self._rules: list[Rule] = rules if rules is not None else list(DEFAULT_RULES)

    def resolve(self, override: OverrideTree | Mapping[str, Any] | None = None) -> TokenTable:
        """Return the resolved ``TokenTable`` for ``override``.

        ``override`` may be an ``OverrideTree`` or a plain
        ``{"extend": ..., "replace": ...}`` mapping.

        Raises
        ------
        ConfigError
            If ``override`` is malformed.
        """
        tree = _as_override(override)
        resolved: dict[str, dict[str, str]] = {}

        for scale, base_values in self._base.items():
            entry = tree.get(scale)
            if isinstance(entry, Replace):
                resolved[scale] = dict(entry.values)
            elif isinstance(entry, Extend):
                resolved[scale] = {**base_values, **entry.values}
            else:
                resolved[scale] = dict(base_values)

        for scale, entry in tree.items():
            if scale in self._base:
                continue
            logger.warning(
                "Scale %r is not in the base theme; adding it with %d token(s).",
                scale,
                len(entry.values),
            )
            resolved[scale] = dict(entry.values)

        logger.debug(
            "Resolved %d scale(s) (%d overridden).", len(resolved), len(tree)
        )
        return TokenTable(resolved)

    def check(self, override: OverrideTree | Mapping[str, Any] | None = None) -> list[Diagnostic]:
        """Run every rule against ``override`` and return the findings."""
        tree = _as_override(override)
        diagnostics: list[Diagnostic] = []
        for rule in self._rules:
            diagnostics.extend(rule(self._base, tree))
        diagnostics.sort(key=lambda d: (d.code, d.path))
        return diagnostics

    def add_rule(self, rule: Rule) -> None:
        """Add a custom check to this resolver instance."""
        self._rules.append(rule)

    @property
    def base(self) -> TokenTable:
        """The base tree as an immutable table."""
        return TokenTable(self._base)


def resolve(
    base: TokenTree,
    override: OverrideTree | Mapping[str, Any] | None = None,
) -> TokenTable:
    """Convenience function: resolve ``override`` against ``base``.

    Parameters
    ----------
    base:
        The base token tree.
    override:
        An ``OverrideTree`` or ``{"extend": ..., "replace": ...}`` mapping.

    Returns
    -------
    TokenTable
        The resolved, immutable token table.
    """
    return ThemeResolver(base).resolve(override)
