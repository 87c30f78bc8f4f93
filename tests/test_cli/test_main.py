"""Tests for the tailcore CLI (click commands driven through CliRunner)."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from tailcore.cli.main import cli


def _make_runner() -> CliRunner:
    return CliRunner()


class TestVersion:
    def test_version_command(self, expected_version: str) -> None:
        result = _make_runner().invoke(cli, ["version"])
        assert result.exit_code == 0
        assert expected_version in result.output


class TestResolveCommand:
    def test_single_scale(self, config_file: Path) -> None:
        result = _make_runner().invoke(
            cli, ["resolve", "--config", str(config_file), "--scale", "spacing"]
        )
        assert result.exit_code == 0
        assert "32rem" in result.output
        assert "1rem" in result.output

    def test_unknown_scale_exits_1(self, config_file: Path) -> None:
        result = _make_runner().invoke(
            cli, ["resolve", "--config", str(config_file), "--scale", "nope"]
        )
        assert result.exit_code == 1
        assert "Unknown scale" in result.output

    def test_defaults_without_config(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        result = _make_runner().invoke(cli, ["resolve", "--scale", "opacity"])
        assert result.exit_code == 0
        assert "No configuration file found" in result.output

    def test_bad_config_exits_1(self, tmp_path: Path) -> None:
        path = tmp_path / "tailcore.config.yaml"
        path.write_text("theme:\n  spacing:\n    - 1px\n", encoding="utf-8")
        result = _make_runner().invoke(cli, ["resolve", "--config", str(path)])
        assert result.exit_code == 1
        assert "Config error" in result.output


class TestScanCommand:
    def test_scan_with_patterns(self, project: Path) -> None:
        result = _make_runner().invoke(cli, ["scan", str(project), "-p", "*.html"])
        assert result.exit_code == 0
        assert "p-128" in result.output.splitlines()
        assert "mx-2" not in result.output.splitlines()

    def test_scan_with_config(self, project: Path, config_file: Path) -> None:
        result = _make_runner().invoke(
            cli, ["scan", str(project), "--config", str(config_file)]
        )
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert "p-128" in lines
        assert "border-gray-300" in lines

    def test_scan_reports_warnings(self, tmp_path: Path) -> None:
        (tmp_path / "bad.html").write_bytes(b"\x00")
        result = _make_runner().invoke(cli, ["scan", str(tmp_path), "-p", "*.html"])
        assert result.exit_code == 0
        assert "TC202" in result.output


class TestBuildCommand:
    def test_build_to_file(self, project: Path, config_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "snapshot.json"
        result = _make_runner().invoke(
            cli,
            ["build", str(project), "--config", str(config_file), "-o", str(out)],
        )
        assert result.exit_code == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["theme"]["spacing"]["128"] == "32rem"
        assert "p-128" in data["candidates"]

    def test_build_yaml_to_stdout(self, project: Path, config_file: Path) -> None:
        result = _make_runner().invoke(
            cli, ["build", str(project), "--config", str(config_file), "--format", "yaml"]
        )
        assert result.exit_code == 0
        assert "candidates:" in result.output


class TestCheckCommand:
    def test_clean_config(self, config_file: Path) -> None:
        result = _make_runner().invoke(cli, ["check", "--config", str(config_file)])
        assert result.exit_code == 0
        assert result.output.lstrip().startswith("OK")

    def test_findings_are_warnings(self, tmp_path: Path) -> None:
        path = tmp_path / "tailcore.config.yaml"
        path.write_text(
            "theme:\n  extend:\n    spacng:\n      \"1\": 1px\n", encoding="utf-8"
        )
        result = _make_runner().invoke(cli, ["check", "--config", str(path)])
        assert result.exit_code == 0
        assert "TC101" in result.output

    def test_missing_config_exits_1(self, tmp_path: Path) -> None:
        result = _make_runner().invoke(
            cli, ["check", "--config", str(tmp_path / "missing.yaml")]
        )
        assert result.exit_code == 1

    def test_non_utf8_config_exits_1(self, tmp_path: Path) -> None:
        path = tmp_path / "tailcore.config.yaml"
        path.write_bytes(b"content: ['caf\xe9']\n")
        result = _make_runner().invoke(cli, ["check", "--config", str(path)])
        assert result.exit_code == 1
        assert "Config error" in result.output
