"""Diagnostic types shared by the theme resolver and the content scanner.

A ``Diagnostic`` is a recoverable finding attached to a configuration
path, a file, or a glob pattern.  Fatal problems are raised as
``ConfigError`` instead; everything reported through this module lets
the build continue.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class DiagnosticSeverity(Enum):
    """Severity levels for diagnostics, aligned with LSP conventions."""

    ERROR = auto()
    WARNING = auto()
    INFORMATION = auto()
    HINT = auto()


@dataclass(frozen=True)
class Diagnostic:
    """A single resolution or scan finding.

    Parameters
    ----------
    severity:
        How serious this finding is.
    code:
        A short machine-readable identifier, e.g. ``"TC201"``.
    message:
        Human-readable description of the problem.
    path:
        Dotted configuration path or file-system path the finding is about.
    pattern:
        The glob pattern involved, for scan findings.
    suggestion:
        Optional human-readable fix suggestion.
    """

    severity: DiagnosticSeverity
    code: str
    message: str
    path: str = field(default="")
    pattern: str | None = field(default=None)
    suggestion: str | None = field(default=None)

    def __str__(self) -> str:
        prefix = f"[{self.code}] {self.severity.name}"
        where = f" at {self.path}" if self.path else ""
        pattern_part = f" (pattern {self.pattern!r})" if self.pattern else ""
        suggestion_part = f" (hint: {self.suggestion})" if self.suggestion else ""
        return f"{prefix}{where}{pattern_part}: {self.message}{suggestion_part}"

    @property
    def is_error(self) -> bool:
        """Return True if this diagnostic should fail a check run."""
        return self.severity == DiagnosticSeverity.ERROR

    @classmethod
    def warning(
        cls,
        code: str,
        message: str,
        path: str = "",
        pattern: str | None = None,
        suggestion: str | None = None,
    ) -> "Diagnostic":
        """Build a WARNING-level diagnostic for a recovered condition."""
        return cls(
            severity=DiagnosticSeverity.WARNING,
            code=code,
            message=message,
            path=path,
            pattern=pattern,
            suggestion=suggestion,
        )


# Codes
UNKNOWN_SCALE = "TC101"
EXTEND_SHADOWED = "TC102"
EMPTY_REPLACEMENT = "TC103"
UNREADABLE_FILE = "TC201"
BINARY_FILE = "TC202"
INVALID_GLOB = "TC203"
MISSING_ROOT = "TC204"
