"""Build pipeline: resolved configuration in, generator snapshot out.

A ``Pipeline`` is created once from a ``ResolvedConfig`` and reused for
every build.  Each ``build`` call scans afresh and returns a new
``BuildSnapshot``; the theme table inside it is shared and read-only.

Example
-------
::

    from tailcore import Pipeline

    pipeline = Pipeline.from_file("tailcore.config.yaml")
    snapshot = pipeline.build(["."])
    snapshot.theme["spacing"]["128"]
    '32rem'
"""
from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from tailcore.config.loader import load_config, parse_config, resolve_config
from tailcore.config.model import ResolvedConfig
from tailcore.diagnostics import Diagnostic
from tailcore.scanner.extractor import Extractor
from tailcore.scanner.scanner import ContentScanner, ScanResult
from tailcore.scanner.session import ScanSession
from tailcore.theme.defaults import DEFAULT_THEME
from tailcore.theme.tokens import TokenTable, TokenTree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildSnapshot:
    """Everything the external generator needs for one build.

    Parameters
    ----------
    theme:
        The resolved token table.
    candidates:
        Candidate class names, safelist included.
    plugins:
        Opaque plugin handles from configuration.
    files:
        Files the candidates were extracted from.
    warnings:
        Theme and scan findings that did not stop the build.
    """

    theme: TokenTable
    candidates: frozenset[str]
    plugins: tuple[Any, ...]
    files: frozenset[str]
    warnings: tuple[Diagnostic, ...]


class Pipeline:
    """Resolve once, scan per build.

    Parameters
    ----------
    config:
        The process-wide resolved configuration.
    max_workers:
        Thread-pool size for file reads.
    extractors:
        Per-extension extractors passed to the ``ContentScanner``.
    """

    def __init__(
        self,
        config: ResolvedConfig,
        max_workers: int | None = None,
        extractors: Mapping[str, Extractor] | None = None,
    ) -> None:
        self._config = config
        self._scanner = ContentScanner(
            config.content, max_workers=max_workers, extractors=extractors
        )
        self._session: ScanSession[ScanResult] = ScanSession()

    @classmethod
    def from_file(
        cls, path: str | Path, base: TokenTree = DEFAULT_THEME, **kwargs: Any
    ) -> "Pipeline":
        """Load, shape-check and resolve a configuration file."""
        return cls(resolve_config(load_config(path), base), **kwargs)

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any], base: TokenTree = DEFAULT_THEME, **kwargs: Any
    ) -> "Pipeline":
        """Shape-check and resolve an in-memory configuration."""
        return cls(resolve_config(parse_config(data), base), **kwargs)

    @property
    def config(self) -> ResolvedConfig:
        """The resolved configuration this pipeline was built with."""
        return self._config

    @property
    def theme(self) -> TokenTable:
        """The resolved token table."""
        return self._config.theme

    @property
    def session(self) -> ScanSession[ScanResult]:
        """Tracks which scan result is current."""
        return self._session

    def scan(self, roots: Iterable[str | os.PathLike[str]]) -> ScanResult:
        """Scan content, raw entries and safelist into one fresh result."""
        result = self._scanner.scan(roots, raw=self._config.raw_content)
        if not self._config.safelist:
            return result
        return ScanResult(
            files=result.files,
            candidates=result.candidates | self._config.safelist,
            warnings=result.warnings,
        )

    def build(self, roots: Iterable[str | os.PathLike[str]]) -> BuildSnapshot | None:
        """Run one build and return its snapshot.

        Returns ``None`` when another build was started while this one
        was scanning; the stale scan is dropped rather than merged.
        """
        ticket = self._session.begin()
        result = self.scan(roots)
        if not self._session.commit(ticket, result):
            return None
        snapshot = BuildSnapshot(
            theme=self._config.theme,
            candidates=result.candidates,
            plugins=self._config.plugins,
            files=result.files,
            warnings=self._config.diagnostics + result.warnings,
        )
        logger.info(
            "Build %d: %d candidate(s) from %d file(s).",
            ticket,
            len(snapshot.candidates),
            len(snapshot.files),
        )
        return snapshot
