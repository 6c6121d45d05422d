"""Base class for renderable templates."""

from __future__ import annotations

import abc
import io
from typing import BinaryIO, ClassVar, Optional, TextIO

from tplrt.errors import CustomError, FormatError, TemplateError

__all__ = ["Template"]


class Template(abc.ABC):
    """A template bound to its context.

    Subclasses write their output in ``render_into`` and describe themselves
    with the ``EXTENSION``, ``SIZE_HINT`` and ``MIME_TYPE`` class attributes.
    """

    EXTENSION: ClassVar[Optional[str]] = None
    SIZE_HINT: ClassVar[int] = 0
    MIME_TYPE: ClassVar[str] = "text/plain; charset=utf-8"

    @abc.abstractmethod
    def render_into(self, writer: TextIO) -> None:
        """Write the rendered template to a text writer."""

    def _render_checked(self) -> str:
        buffer = io.StringIO()
        try:
            self.render_into(buffer)
        except TemplateError:
            raise
        except Exception as exc:
            raise CustomError(exc) from exc
        return buffer.getvalue()

    def render(self) -> str:
        """Render the template into a new string."""
        return self._render_checked()

    def write_into(self, writer: BinaryIO) -> None:
        """Write the rendered template, UTF-8 encoded, to a binary writer."""
        try:
            text = self._render_checked()
        except TemplateError as exc:
            raise OSError(str(exc)) from exc
        writer.write(text.encode("utf-8"))

    def extension(self) -> Optional[str]:
        """The template's extension, if any."""
        return self.EXTENSION

    def size_hint(self) -> int:
        """A rough estimate of the rendered length."""
        return self.SIZE_HINT

    def mime_type(self) -> str:
        """The content type of the rendered output."""
        return self.MIME_TYPE

    def __str__(self) -> str:
        try:
            return self._render_checked()
        except TemplateError as exc:
            raise FormatError() from exc