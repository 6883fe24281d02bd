"""Indentation-aware text accumulation."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from api_docs_tools.errors import IndentationUnderflowError

logger = logging.getLogger(__name__)

INDENT_UNIT = "  "

_INDENT_OPTION_KEYS = ("indentLevel", "indent_level")


class ContentBuilder:
    """Accumulate text while tracking an indentation depth.

    The depth is only rendered when a line break is emitted, so callers may
    adjust it ahead of a block that decides on its own when to break.

    Parameters
    ----------
    indent_level:
        Initial depth. Values that are not integer-like fall back to ``0``.
    """

    def __init__(self, indent_level: Any = 0) -> None:
        self._indent_level = coerce_indent_level(indent_level)
        self._content = ""

    @property
    def indent_level(self) -> int:
        return self._indent_level

    @property
    def content(self) -> str:
        return self._content

    def push(self, content: str) -> None:
        """Append *content* verbatim."""
        self._content += content

    def newline(self) -> None:
        """Break the line and indent to the current level."""
        self._newline(self._indent_level)

    def pushline(self, content: str) -> None:
        """Append *content* followed by a line break."""
        self.push(content)
        self.newline()

    def indent(self, without_line_break: bool = False) -> None:
        """Increase the depth, breaking the line unless *without_line_break*."""
        self._indent_level += 1
        if not without_line_break:
            self._newline(self._indent_level)

    def deindent(self, without_line_break: bool = False) -> None:
        """Decrease the depth, breaking the line unless *without_line_break*.

        The depth is not bounded here; a negative depth is only rejected by
        the next line break.
        """
        self._indent_level -= 1
        if not without_line_break:
            self._newline(self._indent_level)

    def _newline(self, level: int) -> None:
        if level < 0:
            logger.warning("line break requested at indent level %d", level)
            raise IndentationUnderflowError(level)
        self.push("\n" + INDENT_UNIT * level)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(indent_level={self._indent_level}, "
            f"length={len(self._content)})"
        )


def create_content_builder(options: Mapping[str, Any] | None = None) -> ContentBuilder:
    """Create a :class:`ContentBuilder` from an *options* mapping.

    The only recognized option is ``indentLevel`` (``indent_level`` is
    accepted as well). Other keys are ignored.
    """
    indent_level: Any = 0
    if options:
        for key in _INDENT_OPTION_KEYS:
            if key in options:
                indent_level = options[key]
                break
    return ContentBuilder(indent_level=indent_level)


def coerce_indent_level(value: Any) -> int:
    """Return *value* as an indent level, or ``0`` if it is not integer-like."""
    if isinstance(value, bool):
        logger.debug("ignoring boolean indent level %r", value)
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if value is not None:
        logger.debug("ignoring non-integer indent level %r", value)
    return 0
