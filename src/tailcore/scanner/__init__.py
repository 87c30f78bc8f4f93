"""Content scanner module.

Exports glob compilation, candidate extraction, the ``ContentScanner``
with its ``scan`` convenience function, and ``ScanSession`` for
discarding superseded scans.
"""
from __future__ import annotations

from tailcore.scanner.extractor import CANDIDATE_RE, Extractor, extract_candidates
from tailcore.scanner.glob import GlobPattern, compile_pattern
from tailcore.scanner.scanner import (
    DEFAULT_IGNORE_DIRS,
    ContentScanner,
    RawContent,
    ScanResult,
    scan,
)
from tailcore.scanner.session import ScanSession

__all__ = [
    "CANDIDATE_RE",
    "DEFAULT_IGNORE_DIRS",
    "ContentScanner",
    "Extractor",
    "GlobPattern",
    "RawContent",
    "ScanResult",
    "ScanSession",
    "compile_pattern",
    "extract_candidates",
    "scan",
]
