"""Tests for tailcore.export.SnapshotSerializer."""
from __future__ import annotations

import json
from pathlib import Path

import yaml

from tailcore.export import SnapshotSerializer
from tailcore.pipeline import BuildSnapshot, Pipeline


def _snapshot(project: Path, config_file: Path) -> BuildSnapshot:
    snapshot = Pipeline.from_file(config_file).build([project])
    assert snapshot is not None
    return snapshot


class TestSnapshotSerializer:
    def test_to_dict_keys(self, project: Path, config_file: Path) -> None:
        data = SnapshotSerializer().to_dict(_snapshot(project, config_file))
        assert list(data) == ["theme", "candidates", "plugins", "files", "warnings"]

    def test_collections_sorted(self, project: Path, config_file: Path) -> None:
        data = SnapshotSerializer().to_dict(_snapshot(project, config_file))
        assert data["candidates"] == sorted(data["candidates"])
        assert data["files"] == sorted(data["files"])
        assert list(data["theme"]) == sorted(data["theme"])

    def test_json_round_trips_theme(self, project: Path, config_file: Path) -> None:
        text = SnapshotSerializer().to_json(_snapshot(project, config_file))
        data = json.loads(text)
        assert data["theme"]["spacing"]["128"] == "32rem"
        assert "p-128" in data["candidates"]

    def test_yaml_output(self, project: Path, config_file: Path) -> None:
        text = SnapshotSerializer().to_yaml(_snapshot(project, config_file))
        data = yaml.safe_load(text)
        assert data["theme"]["spacing"]["128"] == "32rem"

    def test_same_inputs_serialize_identically(self, project: Path, config_file: Path) -> None:
        serializer = SnapshotSerializer()
        first = serializer.to_json(_snapshot(project, config_file))
        second = serializer.to_json(_snapshot(project, config_file))
        assert first == second

    def test_warnings_serialized(self, tmp_path: Path) -> None:
        (tmp_path / "bad.html").write_bytes(b"\x00")
        snapshot = Pipeline.from_mapping({"content": ["*.html"]}).build([tmp_path])
        assert snapshot is not None
        [warning] = SnapshotSerializer().to_dict(snapshot)["warnings"]
        assert warning["severity"] == "WARNING"
        assert warning["code"] == "TC202"
        assert warning["path"] == str(tmp_path / "bad.html")

    def test_opaque_plugin_uses_repr(self, tmp_path: Path) -> None:
        class Handle:
            def __repr__(self) -> str:
                return "<Handle forms>"

        pipeline = Pipeline.from_mapping({"plugins": ["typography", Handle()]})
        snapshot = pipeline.build([tmp_path])
        assert snapshot is not None
        plugins = SnapshotSerializer().to_dict(snapshot)["plugins"]
        assert plugins == ["typography", "<Handle forms>"]
