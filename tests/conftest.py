"""Shared test fixtures for tailcore.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "tailcore"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def project(tmp_path: Path) -> Path:
    """A small site: two HTML pages, Rust sources, and unrelated files."""
    (tmp_path / "index.html").write_text('<div class="p-128">', encoding="utf-8")
    (tmp_path / "notes.txt").write_text("remember text-red-500", encoding="utf-8")
    src = tmp_path / "src"
    (src / "components").mkdir(parents=True)
    (src / "lib.rs").write_text(
        'view! { <p class="mx-2 mb-1">{word}</p> }', encoding="utf-8"
    )
    (src / "components" / "field.rs").write_text(
        'class="w-full py-1 px-2 border border-gray-300"', encoding="utf-8"
    )
    (src / "about.html").write_text('<span class="hidden md:block">', encoding="utf-8")
    return tmp_path


@pytest.fixture()
def config_file(project: Path) -> Path:
    """A YAML configuration that mirrors a typical project setup."""
    path = project / "tailcore.config.yaml"
    path.write_text(
        "content:\n"
        '  - "*.html"\n'
        '  - "./src/**/*.rs"\n'
        "theme:\n"
        "  extend:\n"
        "    spacing:\n"
        '      "128": 32rem\n'
        "plugins: []\n",
        encoding="utf-8",
    )
    return path
