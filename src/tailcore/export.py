"""Snapshot serialization for the external generator.

A ``BuildSnapshot`` is turned into a plain dict with every collection
sorted, so two snapshots of the same inputs serialize identically.
The dict maps directly onto JSON and YAML.

Usage
-----
::

    from tailcore.export import SnapshotSerializer

    serializer = SnapshotSerializer()
    json_text = serializer.to_json(snapshot)
    yaml_text = serializer.to_yaml(snapshot)
"""
from __future__ import annotations

import json
from typing import Any

import yaml

from tailcore.diagnostics import Diagnostic
from tailcore.pipeline import BuildSnapshot
from tailcore.theme.tokens import TokenTable


class SnapshotSerializer:
    """Converts ``BuildSnapshot`` objects to plain data, JSON, or YAML."""

    def to_dict(self, snapshot: BuildSnapshot) -> dict[str, Any]:
        """Serialize a snapshot to a JSON-compatible dict."""
        return {
            "theme": self.theme_to_dict(snapshot.theme),
            "candidates": sorted(snapshot.candidates),
            "plugins": [self._plugin_to_data(p) for p in snapshot.plugins],
            "files": sorted(snapshot.files),
            "warnings": [self._diagnostic_to_dict(w) for w in snapshot.warnings],
        }

    def theme_to_dict(self, theme: TokenTable) -> dict[str, dict[str, str]]:
        """Serialize a token table with scales and keys sorted."""
        return theme.to_dict()

    def _diagnostic_to_dict(self, d: Diagnostic) -> dict[str, object]:
        return {
            "severity": d.severity.name,
            "code": d.code,
            "message": d.message,
            "path": d.path,
            "pattern": d.pattern,
        }

    def _plugin_to_data(self, plugin: object) -> object:
        if isinstance(plugin, (str, int, float, bool)) or plugin is None:
            return plugin
        if isinstance(plugin, (dict, list)):
            return plugin
        return repr(plugin)

    def to_json(self, snapshot: BuildSnapshot, indent: int | None = 2) -> str:
        """Serialize a snapshot to a JSON string."""
        return json.dumps(self.to_dict(snapshot), indent=indent, ensure_ascii=False)

    def to_yaml(self, snapshot: BuildSnapshot) -> str:
        """Serialize a snapshot to a YAML string."""
        return yaml.safe_dump(
            self.to_dict(snapshot), sort_keys=False, allow_unicode=True
        )
