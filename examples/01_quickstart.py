#!/usr/bin/env python3
"""Example: Quickstart for tailcore

Minimal working example: resolve theme overrides against the built-in
tokens, then collect candidate class names from a small site.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install tailcore
"""
from __future__ import annotations

import tempfile
from pathlib import Path

import tailcore


def main() -> None:
    print(f"tailcore version: {tailcore.__version__}")

    # Step 1: Resolve overrides; extend keeps the built-in spacing keys
    table = tailcore.resolve(
        tailcore.DEFAULT_THEME,
        {"extend": {"spacing": {"128": "32rem"}}, "replace": {"opacity": {"50": "0.5"}}},
    )
    print(f"spacing-128 = {table['spacing']['128']}, spacing-4 = {table['spacing']['4']}")
    print(f"opacity keys after replace: {sorted(table['opacity'])}")

    # Step 2: Scan content
    with tempfile.TemporaryDirectory() as root:
        (Path(root) / "index.html").write_text('<div class="p-128 md:flex">', encoding="utf-8")
        candidates = tailcore.scan(["*.html"], [root])
        print(f"Candidates: {sorted(candidates)}")


if __name__ == "__main__":
    main()
