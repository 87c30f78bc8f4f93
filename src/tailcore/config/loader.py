"""Configuration loading.

Reads a YAML or JSON configuration file of the shape::

    content:
      - "*.html"
      - "./src/**/*.rs"
      - raw: '<div class="hidden">'
        extension: html
    theme:
      extend:
        spacing:
          "128": 32rem
    plugins: []
    safelist: [sr-only]

``content`` may also be written as ``{files: [...]}``.  Token keys and
values must be strings; quote numeric keys in YAML.  Every malformed
entry raises ``ConfigError`` naming its dotted path.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

import yaml

from tailcore.config.model import ResolvedConfig, UserConfig
from tailcore.errors import ConfigError
from tailcore.scanner.scanner import RawContent
from tailcore.theme.defaults import DEFAULT_THEME
from tailcore.theme.resolver import ThemeResolver
from tailcore.theme.tokens import OverrideTree, TokenTree

logger = logging.getLogger(__name__)

CONFIG_FILENAMES: Final[tuple[str, ...]] = (
    "tailcore.config.yaml",
    "tailcore.config.yml",
    "tailcore.config.json",
)

_KNOWN_KEYS: Final[frozenset[str]] = frozenset({"content", "theme", "plugins", "safelist"})


# ---------------------------------------------------------------------------
# Section parsers
# ---------------------------------------------------------------------------


def _parse_content(value: object) -> tuple[tuple[str, ...], tuple[RawContent, ...]]:
    path = "content"
    if value is None:
        return (), ()
    if isinstance(value, Mapping):
        for key in sorted(set(value) - {"files"}):
            logger.warning("Ignoring unsupported key %r in content section.", key)
        value = value.get("files")
        if value is None:
            value = []
        path = "content.files"
    if isinstance(value, (str, bytes)) or not isinstance(value, list):
        raise ConfigError(
            f"expected a list of glob patterns, got {type(value).__name__}", path
        )

    patterns: list[str] = []
    raw: list[RawContent] = []
    for index, entry in enumerate(value):
        where = f"{path}[{index}]"
        if isinstance(entry, str):
            patterns.append(entry)
        elif isinstance(entry, Mapping) and "raw" in entry:
            text = entry["raw"]
            extension = entry.get("extension", "html")
            if not isinstance(text, str):
                raise ConfigError("'raw' must be a string", f"{where}.raw")
            if not isinstance(extension, str):
                raise ConfigError("'extension' must be a string", f"{where}.extension")
            raw.append(RawContent(raw=text, extension=extension))
        else:
            raise ConfigError(
                "expected a glob pattern string or a {raw, extension} mapping", where
            )
    return tuple(patterns), tuple(raw)


def _parse_string_list(value: object, path: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ConfigError(f"expected a list of strings, got {type(value).__name__}", path)
    for index, item in enumerate(value):
        if not isinstance(item, str):
            raise ConfigError(
                f"expected a string, got {type(item).__name__}", f"{path}[{index}]"
            )
    return tuple(value)


def _parse_plugins(value: object) -> tuple[Any, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ConfigError(f"expected a list, got {type(value).__name__}", "plugins")
    return tuple(value)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_config(data: Mapping[str, Any] | None, source: str | None = None) -> UserConfig:
    """Shape-check an in-memory configuration mapping.

    Parameters
    ----------
    data:
        The decoded configuration document.  ``None`` (an empty file)
        is treated as an empty configuration.
    source:
        Where ``data`` came from, kept for diagnostics.

    Raises
    ------
    ConfigError
        On the first malformed entry.
    """
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ConfigError(
            f"configuration must be a mapping, got {type(data).__name__}", ""
        )
    for key in sorted(set(data) - _KNOWN_KEYS):
        logger.warning("Ignoring unknown configuration key %r.", key)

    content, raw_content = _parse_content(data.get("content"))
    if not content and not raw_content:
        logger.warning("No content sources configured; the candidate set will be empty.")

    return UserConfig(
        content=content,
        raw_content=raw_content,
        theme=OverrideTree.from_theme(data.get("theme")),
        plugins=_parse_plugins(data.get("plugins")),
        safelist=_parse_string_list(data.get("safelist"), "safelist"),
        source=source,
    )


def load_config(path: str | Path) -> UserConfig:
    """Read and shape-check a configuration file.

    ``.json`` files are decoded as JSON, everything else as YAML.

    Raises
    ------
    ConfigError
        If the file cannot be read or decoded, or is malformed.
    """
    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(
            f"cannot read configuration: {exc.strerror or exc}", str(config_path)
        ) from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(
            f"configuration is not valid UTF-8 ({exc.reason})", str(config_path)
        ) from exc

    try:
        if config_path.suffix.lower() == ".json":
            data = json.loads(text) if text.strip() else None
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"cannot decode configuration: {exc}", str(config_path)) from exc

    logger.debug("Loaded configuration from %s", config_path)
    return parse_config(data, source=str(config_path))


def find_config(directory: str | Path = ".") -> Path | None:
    """Return the first ``tailcore.config.*`` file in ``directory``, if any."""
    base = Path(directory)
    for name in CONFIG_FILENAMES:
        candidate = base / name
        if candidate.is_file():
            return candidate
    return None


def resolve_config(user: UserConfig, base: TokenTree = DEFAULT_THEME) -> ResolvedConfig:
    """Resolve ``user`` against ``base`` into the build-wide configuration.

    Raises
    ------
    ConfigError
        If ``base`` is malformed.
    """
    resolver = ThemeResolver(base)
    diagnostics = resolver.check(user.theme)
    return ResolvedConfig(
        content=user.content,
        raw_content=user.raw_content,
        theme=resolver.resolve(user.theme),
        plugins=user.plugins,
        safelist=frozenset(user.safelist),
        diagnostics=tuple(diagnostics),
        source=user.source,
    )
