"""Generation settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

try:
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - python<3.11
    import tomli as tomllib

from api_docs_tools.builder import coerce_indent_level
from api_docs_tools.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_TABLE = "api-docs"

_INDENT_KEYS = ("indent-level", "indent_level", "indentLevel")


class GenerateStyle(str, Enum):
    """Whether resolved references embed the package name."""

    PREFIX = "prefix"
    NONE = "none"


@dataclass(frozen=True)
class DocsConfig:
    """Settings shared by builders and reference resolution."""

    style: GenerateStyle = GenerateStyle.NONE
    indent_level: int = 0

    def builder_options(self) -> dict[str, Any]:
        return {"indentLevel": self.indent_level}


def config_from_mapping(data: Mapping[str, Any]) -> DocsConfig:
    """Build a :class:`DocsConfig` from a mapping of settings."""
    style = _parse_style(data.get("style", GenerateStyle.NONE))
    indent_raw: Any = 0
    for key in _INDENT_KEYS:
        if key in data:
            indent_raw = data[key]
            break
    return DocsConfig(style=style, indent_level=coerce_indent_level(indent_raw))


def load_config(text: str) -> DocsConfig:
    """Parse a TOML document and return its settings.

    The ``[api-docs]`` table is used when present, the top-level table
    otherwise.
    """
    try:
        document = tomllib.loads(text)
    except tomllib.TOMLDecodeError as err:
        raise ConfigError(f"invalid configuration document: {err}") from err

    table = document.get(CONFIG_TABLE, document)
    if not isinstance(table, dict):
        raise ConfigError(f"config '{CONFIG_TABLE}' must be a table")
    config = config_from_mapping(table)
    logger.debug("loaded config %r", config)
    return config


def _parse_style(value: Any) -> GenerateStyle:
    if isinstance(value, GenerateStyle):
        return value
    if isinstance(value, str):
        try:
            return GenerateStyle(value.lower())
        except ValueError as err:
            raise ConfigError(f"unknown generate style '{value}'") from err
    raise ConfigError("config style must be a string")
