"""Exception types raised by tailcore.

Both exceptions carry the location of the problem as a structured
attribute so that the CLI can point the user at the offending scale,
key, or pattern.
"""
from __future__ import annotations


class ConfigError(ValueError):
    """Raised when configuration or an override tree is malformed.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    path:
        Dotted path of the offending entry, e.g. ``"theme.extend.spacing.128"``.
    """

    def __init__(self, message: str, path: str = "") -> None:
        where = f" at {path}" if path else ""
        super().__init__(f"ConfigError{where}: {message}")
        self.config_message = message
        self.path = path


class GlobSyntaxError(ValueError):
    """Raised when a content glob pattern cannot be compiled.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    pattern:
        The pattern text as written in the configuration.
    """

    def __init__(self, message: str, pattern: str) -> None:
        super().__init__(f"GlobSyntaxError in {pattern!r}: {message}")
        self.glob_message = message
        self.pattern = pattern
