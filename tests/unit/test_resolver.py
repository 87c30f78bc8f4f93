"""Unit tests for tailcore.theme.resolver and tailcore.theme.rules."""
from __future__ import annotations

import logging

import pytest

from tailcore.diagnostics import DiagnosticSeverity
from tailcore.errors import ConfigError
from tailcore.theme import DEFAULT_THEME, OverrideTree, ThemeResolver, resolve
from tailcore.theme.rules import (
    DEFAULT_RULES,
    rule_empty_replacement,
    rule_extend_shadowed,
    rule_unknown_scale,
)

_BASE = {
    "spacing": {"1": "0.25rem", "2": "0.5rem", "3": "0.75rem", "4": "1rem"},
    "colors": {"black": "#000", "white": "#fff"},
}


# ===========================================================================
# Resolution semantics
# ===========================================================================


class TestResolve:
    def test_extend_adds_new_key(self) -> None:
        base = {"spacing": {"4": "1rem"}}
        table = resolve(base, {"extend": {"spacing": {"128": "32rem"}}})
        assert table["spacing"] == {"4": "1rem", "128": "32rem"}

    def test_extend_overrides_existing_key(self) -> None:
        table = resolve(_BASE, {"extend": {"spacing": {"4": "2rem"}}})
        assert table["spacing"]["4"] == "2rem"
        assert table["spacing"]["1"] == "0.25rem"

    def test_replace_substitutes_scale(self) -> None:
        table = resolve(_BASE, {"replace": {"spacing": {"1": "10px"}}})
        assert table["spacing"] == {"1": "10px"}

    def test_replace_fully_shadows_base(self) -> None:
        table = resolve(_BASE, {"replace": {"spacing": {"1": "10px"}}})
        for key in ("2", "3", "4"):
            assert key not in table["spacing"]

    def test_unrelated_scales_untouched(self) -> None:
        table = resolve(_BASE, {"extend": {"spacing": {"128": "32rem"}}})
        assert table["colors"] == _BASE["colors"]

    def test_unknown_scale_added_verbatim(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            table = resolve(_BASE, {"extend": {"animation": {"spin": "spin 1s"}}})
        assert table["animation"] == {"spin": "spin 1s"}
        assert "animation" in caplog.text

    def test_unknown_replaced_scale_added_verbatim(self) -> None:
        table = resolve(_BASE, {"replace": {"cursor": {"wait": "wait"}}})
        assert table["cursor"] == {"wait": "wait"}

    def test_none_override_returns_base(self) -> None:
        assert resolve(_BASE, None) == _BASE

    def test_accepts_override_tree(self) -> None:
        tree = OverrideTree.from_theme({"extend": {"spacing": {"128": "32rem"}}})
        assert resolve(_BASE, tree)["spacing"]["128"] == "32rem"

    def test_values_are_opaque(self) -> None:
        table = resolve(_BASE, {"extend": {"spacing": {"weird": "not a length!"}}})
        assert table["spacing"]["weird"] == "not a length!"

    def test_base_is_not_mutated(self) -> None:
        base = {"spacing": {"4": "1rem"}}
        resolve(base, {"extend": {"spacing": {"128": "32rem"}}})
        assert base == {"spacing": {"4": "1rem"}}

    def test_malformed_override_raises(self) -> None:
        with pytest.raises(ConfigError) as info:
            resolve(_BASE, {"extend": {"spacing": {"128": 32}}})
        assert info.value.path == "override.extend.spacing.128"

    def test_malformed_base_raises(self) -> None:
        with pytest.raises(ConfigError) as info:
            resolve({"spacing": ["1rem"]}, {})
        assert info.value.path == "base.spacing"


class TestResolveProperties:
    @pytest.mark.parametrize(
        "override",
        [
            {},
            {"extend": {"spacing": {"128": "32rem"}}},
            {"replace": {"spacing": {"1": "10px"}}},
            {"extend": {"colors": {"brand": "#123"}}, "replace": {"spacing": {}}},
            {"extend": {"animation": {"spin": "spin 1s"}}},
        ],
    )
    def test_idempotent(self, override: dict) -> None:
        once = resolve(_BASE, override)
        assert resolve(once, {}) == once

    def test_deterministic(self) -> None:
        override = {"extend": {"spacing": {"128": "32rem"}}}
        assert resolve(_BASE, override) == resolve(_BASE, override)

    def test_default_theme_resolves(self) -> None:
        table = resolve(DEFAULT_THEME, {"extend": {"spacing": {"128": "32rem"}}})
        assert table["spacing"]["128"] == "32rem"
        assert table["spacing"]["4"] == "1rem"
        assert table["colors"] == DEFAULT_THEME["colors"]


# ===========================================================================
# ThemeResolver and rules
# ===========================================================================


class TestThemeResolver:
    def test_base_property(self) -> None:
        assert ThemeResolver(_BASE).base == _BASE

    def test_reuse_for_several_overrides(self) -> None:
        resolver = ThemeResolver(_BASE)
        a = resolver.resolve({"extend": {"spacing": {"5": "1.25rem"}}})
        b = resolver.resolve({"replace": {"spacing": {}}})
        assert "5" in a["spacing"]
        assert b["spacing"] == {}

    def test_check_clean_override(self) -> None:
        assert ThemeResolver(_BASE).check({"extend": {"spacing": {"5": "x"}}}) == []

    def test_check_collects_all_rules(self) -> None:
        tree = OverrideTree.from_theme(
            {
                "spacing": {},
                "extend": {"spacing": {"5": "x"}, "animation": {"spin": "s"}},
            }
        )
        codes = [d.code for d in ThemeResolver(_BASE).check(tree)]
        assert codes == ["TC101", "TC102", "TC103"]

    def test_custom_rule(self) -> None:
        resolver = ThemeResolver(_BASE, rules=[])
        assert resolver.check({"extend": {"nope": {"a": "b"}}}) == []
        resolver.add_rule(rule_unknown_scale)
        assert len(resolver.check({"extend": {"nope": {"a": "b"}}})) == 1


class TestRules:
    def test_default_rules_registered(self) -> None:
        assert rule_unknown_scale in DEFAULT_RULES
        assert rule_extend_shadowed in DEFAULT_RULES
        assert rule_empty_replacement in DEFAULT_RULES

    def test_unknown_scale_is_warning_with_path(self) -> None:
        tree = OverrideTree.from_mapping({"extend": {"spacng": {"1": "x"}}})
        [finding] = rule_unknown_scale(_BASE, tree)
        assert finding.severity == DiagnosticSeverity.WARNING
        assert finding.path == "theme.spacng"
        assert finding.suggestion is not None

    def test_shadowed_extend_reported(self) -> None:
        tree = OverrideTree.from_theme(
            {"colors": {"a": "b"}, "extend": {"colors": {"c": "d"}}}
        )
        [finding] = rule_extend_shadowed(_BASE, tree)
        assert finding.path == "theme.extend.colors"

    def test_empty_replacement_reported(self) -> None:
        tree = OverrideTree.from_mapping({"replace": {"colors": {}}})
        [finding] = rule_empty_replacement(_BASE, tree)
        assert finding.code == "TC103"

    def test_empty_extend_is_not_reported(self) -> None:
        tree = OverrideTree.from_mapping({"extend": {"colors": {}}})
        assert rule_empty_replacement(_BASE, tree) == []
