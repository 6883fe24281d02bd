"""Exceptions raised by api-docs-tools."""

from __future__ import annotations


class ApiDocsError(Exception):
    """Base class for all api-docs-tools errors."""


class IndentationUnderflowError(ApiDocsError, ValueError):
    """Raised when a line break is requested at a negative indent level."""

    def __init__(self, indent_level: int) -> None:
        super().__init__(f"cannot emit a line break at negative indent level {indent_level}")
        self.indent_level = indent_level


class ConfigError(ApiDocsError, ValueError):
    """Raised for an invalid configuration document."""
