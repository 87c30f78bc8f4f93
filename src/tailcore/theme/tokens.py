"""Design-token data model.

A *token tree* maps a scale name (``"spacing"``, ``"colors"``) to a
mapping of token key to value.  Values are opaque strings such as
``"32rem"`` or ``"#ef4444"``; nothing in this package parses them.

User overrides are carried per scale as a tagged variant: a scale is
either *extended* (``Extend``) or *replaced* (``Replace``), never both.
The resolved result is a ``TokenTable``, a read-only mapping that is
built once and shared by every consumer of a build.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Union

from tailcore.errors import ConfigError

logger = logging.getLogger(__name__)

TokenTree = Mapping[str, Mapping[str, str]]


# ---------------------------------------------------------------------------
# Shape checks
# ---------------------------------------------------------------------------


def check_scale(values: object, path: str) -> dict[str, str]:
    """Return a plain copy of one scale mapping, raising on a bad shape.

    Parameters
    ----------
    values:
        The candidate ``key -> value`` mapping.
    path:
        Dotted path of the scale, used in error messages.

    Raises
    ------
    ConfigError
        If ``values`` is not a mapping of string to string.
    """
    if not isinstance(values, Mapping):
        raise ConfigError(
            f"expected a mapping of token key to value, got {type(values).__name__}",
            path,
        )
    checked: dict[str, str] = {}
    for key, value in values.items():
        if not isinstance(key, str):
            raise ConfigError(
                f"token key {key!r} must be a string (quote it in YAML)",
                f"{path}.{key}",
            )
        if not isinstance(value, str):
            raise ConfigError(
                f"token value must be a string, got {type(value).__name__}",
                f"{path}.{key}",
            )
        checked[key] = value
    return checked


def check_tree(tree: object, path: str) -> dict[str, dict[str, str]]:
    """Return a plain copy of a whole token tree, raising on a bad shape."""
    if not isinstance(tree, Mapping):
        raise ConfigError(
            f"expected a mapping of scale name to tokens, got {type(tree).__name__}",
            path,
        )
    checked: dict[str, dict[str, str]] = {}
    for scale, values in tree.items():
        if not isinstance(scale, str):
            raise ConfigError(f"scale name {scale!r} must be a string", path)
        checked[scale] = check_scale(values, f"{path}.{scale}" if path else scale)
    return checked


def _section(data: Mapping[str, Any], key: str) -> object:
    """Return ``data[key]``, with a missing or null section read as empty."""
    value = data.get(key)
    return {} if value is None else value


# ---------------------------------------------------------------------------
# Override variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Extend:
    """Entries written on top of the base scale; new keys are added."""

    values: Mapping[str, str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))


@dataclass(frozen=True, slots=True)
class Replace:
    """A mapping that substitutes the base scale entirely."""

    values: Mapping[str, str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))


ScaleOverride = Union[Extend, Replace]


class OverrideTree(Mapping[str, ScaleOverride]):
    """Per-scale overrides: scale name -> ``Extend`` or ``Replace``.

    Build one from configuration data with ``from_theme`` or
    ``from_mapping``; both validate the shape and raise ``ConfigError``
    with the path of the first malformed entry.

    Parameters
    ----------
    overrides:
        Already-tagged overrides keyed by scale name.
    shadowed:
        Scales whose ``extend`` entries were dropped because the same
        scale was also replaced.
    """

    __slots__ = ("_overrides", "_shadowed")

    def __init__(
        self,
        overrides: Mapping[str, ScaleOverride] | None = None,
        shadowed: frozenset[str] = frozenset(),
    ) -> None:
        self._overrides: dict[str, ScaleOverride] = dict(overrides or {})
        self._shadowed = shadowed

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], path: str = "override") -> "OverrideTree":
        """Build from ``{"extend": {...}, "replace": {...}}``."""
        if not isinstance(data, Mapping):
            raise ConfigError(
                f"expected a mapping with 'extend' and/or 'replace', got {type(data).__name__}",
                path,
            )
        unknown = sorted(set(data) - {"extend", "replace"})
        if unknown:
            raise ConfigError(
                f"unexpected override section(s) {', '.join(map(repr, unknown))}; "
                "use 'extend' or 'replace'",
                path,
            )
        extend = check_tree(_section(data, "extend"), f"{path}.extend")
        replace = check_tree(_section(data, "replace"), f"{path}.replace")
        return cls._combine(extend, replace)

    @classmethod
    def from_theme(cls, theme: Mapping[str, Any] | None, path: str = "theme") -> "OverrideTree":
        """Build from a configuration ``theme`` section.

        ``theme.extend.<scale>`` extends a scale; any other
        ``theme.<scale>`` key replaces it.
        """
        if theme is None:
            return cls()
        if not isinstance(theme, Mapping):
            raise ConfigError(f"expected a mapping, got {type(theme).__name__}", path)
        extend = check_tree(_section(theme, "extend"), f"{path}.extend")
        replace = check_tree(
            {scale: values for scale, values in theme.items() if scale != "extend"},
            path,
        )
        return cls._combine(extend, replace)

    @classmethod
    def _combine(
        cls,
        extend: dict[str, dict[str, str]],
        replace: dict[str, dict[str, str]],
    ) -> "OverrideTree":
        overrides: dict[str, ScaleOverride] = {
            scale: Extend(values) for scale, values in extend.items()
        }
        shadowed = frozenset(scale for scale in replace if scale in extend)
        for scale in sorted(shadowed):
            logger.warning(
                "Scale %r is both extended and replaced; the replacement wins "
                "and %d extend entr(ies) are dropped.",
                scale,
                len(extend[scale]),
            )
        for scale, values in replace.items():
            overrides[scale] = Replace(values)
        return cls(overrides, shadowed)

    @property
    def shadowed(self) -> frozenset[str]:
        """Scales whose extend entries lost to a replacement."""
        return self._shadowed

    def __getitem__(self, scale: str) -> ScaleOverride:
        return self._overrides[scale]

    def __iter__(self) -> Iterator[str]:
        return iter(self._overrides)

    def __len__(self) -> int:
        return len(self._overrides)

    def __repr__(self) -> str:
        return f"OverrideTree({self._overrides!r})"


# ---------------------------------------------------------------------------
# Resolved table
# ---------------------------------------------------------------------------


class TokenTable(Mapping[str, Mapping[str, str]]):
    """Immutable resolved token tree: scale -> key -> value.

    Scale mappings are exposed as read-only views.  Equality with any
    other mapping is structural, so key order never matters.
    """

    __slots__ = ("_scales",)

    def __init__(self, scales: Mapping[str, Mapping[str, str]]) -> None:
        self._scales: dict[str, Mapping[str, str]] = {
            scale: MappingProxyType(dict(values)) for scale, values in scales.items()
        }

    def __getitem__(self, scale: str) -> Mapping[str, str]:
        return self._scales[scale]

    def __iter__(self) -> Iterator[str]:
        return iter(self._scales)

    def __len__(self) -> int:
        return len(self._scales)

    def __hash__(self) -> int:
        return hash(
            frozenset(
                (scale, frozenset(values.items())) for scale, values in self._scales.items()
            )
        )

    def __repr__(self) -> str:
        return f"TokenTable(scales={sorted(self._scales)})"

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Return a mutable deep copy with scales and keys sorted."""
        return {
            scale: dict(sorted(self._scales[scale].items()))
            for scale in sorted(self._scales)
        }
