#!/usr/bin/env python3
"""Example: Build pipeline for tailcore

Load a configuration mapping, build a snapshot for a project directory,
and print the snapshot as JSON for an external generator.

Usage:
    python examples/02_pipeline.py [ROOT]

Requirements:
    pip install tailcore
"""
from __future__ import annotations

import sys

from tailcore import Pipeline
from tailcore.export import SnapshotSerializer

CONFIG = {
    "content": ["**/*.html", "./src/**/*.rs", "!**/dist/**"],
    "theme": {"extend": {"spacing": {"128": "32rem"}}},
    "safelist": ["sr-only"],
    "plugins": [],
}


def main() -> None:
    root = sys.argv[1] if len(sys.argv) > 1 else "."
    pipeline = Pipeline.from_mapping(CONFIG)
    snapshot = pipeline.build([root])
    if snapshot is None:
        print("Build superseded.")
        return

    for warning in snapshot.warnings:
        print(f"  {warning}")
    print(SnapshotSerializer().to_json(snapshot))


if __name__ == "__main__":
    main()
