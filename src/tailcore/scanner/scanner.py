"""Content scanner: expand content globs and collect candidate class names.

Scanning runs in two steps.  Expansion walks each root and collects
every file matched by an include pattern and by no exclusion pattern.
Extraction reads those files on a thread pool and merges the per-file
candidate sets with a single reducer.

Failures never stop a scan.  A missing root, an invalid pattern, an
unreadable or binary file each become a WARNING ``Diagnostic`` on the
result and a log record; the candidates from everything else are kept.

Usage
-----
::

    from tailcore.scanner import ContentScanner

    result = ContentScanner(["*.html", "./src/**/*.rs"]).scan(["."])
    "p-128" in result.candidates
"""
from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Final

from tailcore.diagnostics import (
    BINARY_FILE,
    INVALID_GLOB,
    MISSING_ROOT,
    UNREADABLE_FILE,
    Diagnostic,
)
from tailcore.errors import GlobSyntaxError
from tailcore.scanner.extractor import Extractor, extract_candidates
from tailcore.scanner.glob import GlobPattern, compile_pattern

logger = logging.getLogger(__name__)

DEFAULT_IGNORE_DIRS: Final[frozenset[str]] = frozenset({".git", "node_modules"})

# Bytes inspected for a NUL when deciding whether a file is binary.
_BINARY_SNIFF: Final[int] = 8192


@dataclass(frozen=True)
class RawContent:
    """Inline content scanned without touching the file system.

    Parameters
    ----------
    raw:
        The text to extract candidates from.
    extension:
        File extension the text would have on disk; selects the extractor.
    """

    raw: str
    extension: str = "html"


@dataclass(frozen=True)
class ScanResult:
    """Outcome of one scan.

    Parameters
    ----------
    files:
        Absolute paths of every matched file (the FileSet).
    candidates:
        Every candidate string extracted (the CandidateSet).
    warnings:
        Recovered failures, sorted by code, path and pattern.
    """

    files: frozenset[str] = field(default_factory=frozenset)
    candidates: frozenset[str] = field(default_factory=frozenset)
    warnings: tuple[Diagnostic, ...] = ()

    @property
    def ok(self) -> bool:
        """Return True if nothing had to be skipped."""
        return not self.warnings


@dataclass(frozen=True)
class _FileOutcome:
    candidates: frozenset[str] = frozenset()
    warning: Diagnostic | None = None


def _sorted_warnings(warnings: Iterable[Diagnostic]) -> tuple[Diagnostic, ...]:
    return tuple(sorted(set(warnings), key=lambda d: (d.code, d.path, d.pattern or "")))


def _extension(path: str) -> str:
    return os.path.splitext(path)[1].lstrip(".").lower()


class ContentScanner:
    """Scanner bound to a fixed list of content patterns.

    Parameters
    ----------
    patterns:
        Content globs as written in configuration.  Order is kept for
        diagnostics only; it never changes the result.
    max_workers:
        Thread-pool size for file reads.  ``None`` lets
        ``ThreadPoolExecutor`` choose.
    ignore_dirs:
        Directory names pruned while walking below a pattern's base
        directory.
    extractors:
        Per-extension extractors (``{"md": my_extractor}``); files with
        other extensions use ``extract_candidates``.
    """

    def __init__(
        self,
        patterns: Iterable[str],
        max_workers: int | None = None,
        ignore_dirs: Iterable[str] = DEFAULT_IGNORE_DIRS,
        extractors: Mapping[str, Extractor] | None = None,
    ) -> None:
        self._sources: tuple[str, ...] = tuple(patterns)
        self._max_workers = max_workers
        self._ignore_dirs = frozenset(ignore_dirs)
        self._extractors: dict[str, Extractor] = {
            ext.lstrip(".").lower(): fn for ext, fn in (extractors or {}).items()
        }
        self._includes: list[GlobPattern] = []
        self._excludes: list[GlobPattern] = []
        self._pattern_warnings: list[Diagnostic] = []
        for source in self._sources:
            try:
                compiled = compile_pattern(source)
            except GlobSyntaxError as exc:
                logger.warning("Skipping content pattern %r: %s", source, exc.glob_message)
                self._pattern_warnings.append(
                    Diagnostic.warning(INVALID_GLOB, exc.glob_message, pattern=source)
                )
                continue
            (self._excludes if compiled.negated else self._includes).append(compiled)

    @property
    def patterns(self) -> tuple[str, ...]:
        """The content patterns in configuration order."""
        return self._sources

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def scan(
        self,
        roots: Iterable[str | os.PathLike[str]],
        raw: Iterable[RawContent] = (),
    ) -> ScanResult:
        """Expand the patterns under ``roots`` and extract candidates.

        Parameters
        ----------
        roots:
            Directories relative patterns are resolved against.
        raw:
            Inline content extracted alongside the files.

        Returns
        -------
        ScanResult
            A fresh result; nothing from a previous scan is reused.
        """
        warnings = list(self._pattern_warnings)
        files = self._collect(roots, warnings)
        paths = sorted(files)

        candidates: set[str] = set()
        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            for outcome in pool.map(self._read_file, paths, [files[p] for p in paths]):
                candidates.update(outcome.candidates)
                if outcome.warning is not None:
                    warnings.append(outcome.warning)

        for entry in raw:
            candidates.update(self._extractor_for(entry.extension)(entry.raw))

        logger.debug(
            "Scanned %d file(s): %d candidate(s), %d warning(s).",
            len(files),
            len(candidates),
            len(warnings),
        )
        return ScanResult(
            files=frozenset(files),
            candidates=frozenset(candidates),
            warnings=_sorted_warnings(warnings),
        )

    def expand(
        self,
        roots: Iterable[str | os.PathLike[str]],
        warnings: list[Diagnostic] | None = None,
    ) -> set[str]:
        """Return the absolute paths matched under ``roots`` (the FileSet).

        Recovered problems are appended to ``warnings`` when given.
        """
        sink: list[Diagnostic] = warnings if warnings is not None else []
        return set(self._collect(roots, sink))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _collect(
        self,
        roots: Iterable[str | os.PathLike[str]],
        sink: list[Diagnostic],
    ) -> dict[str, str]:
        """Map each matched absolute path to the first pattern that matched it."""
        files: dict[str, str] = {}
        for pattern in self._includes:
            if pattern.absolute:
                self._walk(pattern, pattern.base_dir, None, sink, files)
        for root in sorted({os.path.abspath(os.fspath(r)) for r in roots}):
            if not os.path.isdir(root):
                logger.warning("Scan root %s is not a directory; skipping it.", root)
                sink.append(
                    Diagnostic.warning(MISSING_ROOT, "root directory does not exist", path=root)
                )
                continue
            for pattern in self._includes:
                if pattern.absolute:
                    continue
                start = os.path.normpath(os.path.join(root, pattern.base_dir))
                self._walk(pattern, start, root, sink, files)
        return files

    def _walk(
        self,
        pattern: GlobPattern,
        start: str,
        anchor: str | None,
        sink: list[Diagnostic],
        matched: dict[str, str],
    ) -> None:
        """Walk ``start`` and record files matching ``pattern`` in ``matched``.

        ``anchor`` is the root that relative paths are computed from;
        ``None`` means the pattern is matched against absolute paths.
        Paths already recorded keep their earlier pattern.
        """
        if not os.path.isdir(start):
            return

        def on_error(exc: OSError) -> None:
            logger.warning("Cannot list %s for pattern %r: %s", exc.filename, pattern.source, exc)
            sink.append(
                Diagnostic.warning(
                    UNREADABLE_FILE,
                    f"cannot list directory: {exc.strerror or exc}",
                    path=str(exc.filename or start),
                    pattern=pattern.source,
                )
            )

        for dirpath, dirnames, filenames in os.walk(start, onerror=on_error):
            dirnames[:] = [d for d in dirnames if d not in self._ignore_dirs]
            for name in filenames:
                full = os.path.join(dirpath, name)
                candidate = self._match_path(full, anchor)
                if pattern.matches(candidate) and not self._excluded(full, anchor):
                    matched.setdefault(os.path.abspath(full), pattern.source)

    @staticmethod
    def _match_path(full: str, anchor: str | None) -> str:
        if anchor is None:
            return os.path.abspath(full).replace(os.sep, "/")
        return os.path.relpath(full, anchor).replace(os.sep, "/")

    def _excluded(self, full: str, anchor: str | None) -> bool:
        for pattern in self._excludes:
            if pattern.absolute:
                target = self._match_path(full, None)
            elif anchor is not None:
                target = self._match_path(full, anchor)
            else:
                continue
            if pattern.matches(target):
                return True
        return False

    def _extractor_for(self, extension: str) -> Extractor:
        return self._extractors.get(extension.lstrip(".").lower(), extract_candidates)

    def _read_file(self, path: str, pattern: str | None = None) -> _FileOutcome:
        """Read one file and extract its candidates; never raises OSError."""
        try:
            with open(path, "rb") as handle:
                data = handle.read()
        except OSError as exc:
            logger.warning("Skipping unreadable file %s: %s", path, exc)
            return _FileOutcome(
                warning=Diagnostic.warning(
                    UNREADABLE_FILE,
                    f"cannot read file: {exc.strerror or exc}",
                    path=path,
                    pattern=pattern,
                )
            )

        if b"\0" in data[:_BINARY_SNIFF]:
            logger.warning("Skipping binary file %s", path)
            return _FileOutcome(
                warning=Diagnostic.warning(
                    BINARY_FILE, "file looks binary", path=path, pattern=pattern
                )
            )
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            logger.warning("Skipping non-UTF-8 file %s: %s", path, exc.reason)
            return _FileOutcome(
                warning=Diagnostic.warning(
                    BINARY_FILE,
                    f"file is not valid UTF-8 ({exc.reason})",
                    path=path,
                    pattern=pattern,
                )
            )
        return _FileOutcome(candidates=self._extractor_for(_extension(path))(text))


def scan(
    patterns: Iterable[str],
    roots: Iterable[str | os.PathLike[str]],
    max_workers: int | None = None,
) -> frozenset[str]:
    """Convenience function: return the candidate set for ``patterns``.

    Warnings are logged and otherwise dropped; use ``ContentScanner``
    to inspect them.
    """
    return ContentScanner(patterns, max_workers=max_workers).scan(roots).candidates
