"""Errors raised while rendering templates."""

from __future__ import annotations

__all__ = [
    "TemplateError",
    "FormatError",
    "CustomError",
    "JsonError",
    "YamlError",
]


class TemplateError(Exception):
    """Base class of every error raised while rendering a template.

    The wrapped error is kept in ``source``.
    """

    _prefix = ""

    def __init__(self, source: object = None) -> None:
        super().__init__(source)
        self.source = source

    def __str__(self) -> str:
        return f"{self._prefix}{self.source}"


class FormatError(TemplateError):
    """Writing the rendered output failed."""

    _prefix = "formatting error: "
    _default_message = "an error occurred when formatting an argument"

    def __str__(self) -> str:
        detail = self._default_message if self.source is None else self.source
        return f"{self._prefix}{detail}"


class CustomError(TemplateError):
    """An error raised by code that a template called."""


class JsonError(TemplateError):
    """Converting a value to JSON failed."""

    _prefix = "json conversion error: "


class YamlError(TemplateError):
    """Converting a value to YAML failed."""

    _prefix = "yaml conversion error: "