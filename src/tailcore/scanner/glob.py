"""Glob pattern compilation for content sources.

Patterns are matched against ``/``-separated paths relative to a scan
root.  Supported syntax:

    ``*``       any run of characters except ``/``
    ``**``      as a whole segment, zero or more full path segments
    ``?``       exactly one character except ``/``
    ``[abc]``   character class; ``[!abc]`` or ``[^abc]`` negates it
    ``{a,b}``   alternation, may be nested
    ``\\x``     the literal character ``x``

A leading ``./`` is ignored and a leading ``!`` turns the pattern into
an exclusion.  Patterns starting with ``/`` are absolute and are
matched against absolute paths instead.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from tailcore.errors import GlobSyntaxError

_MAGIC: Final[frozenset[str]] = frozenset("*?[{\\")


@dataclass(frozen=True)
class GlobPattern:
    """A compiled content pattern.

    Parameters
    ----------
    source:
        The pattern exactly as written in the configuration.
    regex:
        Compiled regex; a path matches when the regex matches all of it.
    base_dir:
        The literal leading directories of the pattern (``""`` for the
        root), i.e. the deepest directory every match lives under.
    negated:
        ``True`` for ``!`` exclusion patterns.
    absolute:
        ``True`` when the pattern is rooted at ``/``.
    """

    source: str
    regex: re.Pattern[str]
    base_dir: str
    negated: bool = False
    absolute: bool = False

    def matches(self, path: str) -> bool:
        """Return True if ``path`` (posix, relative or absolute) matches."""
        if self.absolute:
            path = path.lstrip("/")
        return self.regex.fullmatch(path) is not None

    def __str__(self) -> str:
        return self.source


def compile_pattern(pattern: str) -> GlobPattern:
    """Compile a glob pattern.

    Raises
    ------
    GlobSyntaxError
        If the pattern is empty or has an unterminated ``[`` or ``{``.
    """
    text = pattern.strip()
    negated = text.startswith("!")
    if negated:
        text = text[1:]
    while text.startswith("./"):
        text = text[2:]
    absolute = text.startswith("/")
    text = text.lstrip("/")
    if not text:
        raise GlobSyntaxError("pattern is empty", pattern)

    alternatives = [_translate(alt, pattern) for alt in _expand_braces(text, pattern)]
    regex = re.compile("|".join(f"(?:{alt})" for alt in alternatives))

    segments = [s for s in text.split("/") if s]
    literal: list[str] = []
    for segment in segments[:-1]:
        if _MAGIC.intersection(segment):
            break
        literal.append(segment)
    base_dir = "/".join(literal)
    if absolute:
        base_dir = "/" + base_dir

    return GlobPattern(
        source=pattern,
        regex=regex,
        base_dir=base_dir,
        negated=negated,
        absolute=absolute,
    )


# ---------------------------------------------------------------------------
# Brace expansion
# ---------------------------------------------------------------------------


def _split_top_level(inner: str) -> list[str]:
    """Split brace contents on commas that are neither escaped nor nested."""
    options: list[str] = []
    depth = 0
    current: list[str] = []
    chars = iter(inner)
    for ch in chars:
        if ch == "\\":
            current.append(ch)
            current.append(next(chars, ""))
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        elif ch == "," and depth == 0:
            options.append("".join(current))
            current = []
            continue
        current.append(ch)
    options.append("".join(current))
    return options


def _expand_braces(text: str, pattern: str) -> list[str]:
    depth = 0
    start = -1
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "{":
            if depth == 0:
                start = i
            depth += 1
        elif ch == "}" and depth:
            depth -= 1
            if depth == 0:
                prefix, suffix = text[:start], text[i + 1:]
                expanded: list[str] = []
                for option in _split_top_level(text[start + 1:i]):
                    expanded.extend(_expand_braces(prefix + option + suffix, pattern))
                return expanded
        i += 1
    if depth:
        raise GlobSyntaxError("unterminated '{' alternation", pattern)
    return [text]


# ---------------------------------------------------------------------------
# Translation
# ---------------------------------------------------------------------------


def _translate(text: str, pattern: str) -> str:
    segments = [s for s in text.split("/") if s]
    parts: list[str] = []
    for index, segment in enumerate(segments):
        last = index == len(segments) - 1
        if segment == "**":
            parts.append(".*" if last else "(?:[^/]*/)*")
        else:
            parts.append(_translate_segment(segment, pattern))
            if not last:
                parts.append("/")
    return "".join(parts)


def _translate_segment(segment: str, pattern: str) -> str:
    out: list[str] = []
    i = 0
    n = len(segment)
    while i < n:
        ch = segment[i]
        if ch == "*":
            while i + 1 < n and segment[i + 1] == "*":
                i += 1
            out.append("[^/]*")
        elif ch == "?":
            out.append("[^/]")
        elif ch == "\\":
            if i + 1 < n:
                i += 1
                out.append(re.escape(segment[i]))
            else:
                out.append(re.escape(ch))
        elif ch == "[":
            end = i + 1
            if end < n and segment[end] in "!^":
                end += 1
            if end < n and segment[end] == "]":
                end += 1
            while end < n and segment[end] != "]":
                end += 1
            if end >= n:
                raise GlobSyntaxError("unterminated '[' character class", pattern)
            body = segment[i + 1:end]
            negate = body[0] in "!^"
            if negate:
                body = body[1:]
            body = body.replace("\\", "\\\\").replace("[", "\\[")
            out.append(f"[^{body}/]" if negate else f"[{body}]")
            i = end
        else:
            out.append(re.escape(ch))
        i += 1
    return "".join(out)
