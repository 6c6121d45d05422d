"""Turning rendered templates into HTTP responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Dict

from tplrt.errors import TemplateError
from tplrt.template import Template

__all__ = ["Response", "to_response", "into_response"]

_ERROR_CONTENT_TYPE = "text/plain; charset=utf-8"


@dataclass
class Response:
    """A minimal HTTP response: status, headers and body."""

    status: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300


def _ok(template: Template, body: str) -> Response:
    return Response(
        status=HTTPStatus.OK,
        headers={"Content-Type": template.mime_type()},
        body=body.encode("utf-8"),
    )


def to_response(template: Template) -> Response:
    """Render a template; on failure answer 500 with the error's message."""
    try:
        body = template.render()
    except TemplateError as err:
        return Response(
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            headers={"Content-Type": _ERROR_CONTENT_TYPE},
            body=str(err).encode("utf-8"),
        )
    return _ok(template, body)


def into_response(template: Template) -> Response:
    """Render a template; on failure answer a bare 500."""
    try:
        body = template.render()
    except TemplateError:
        return Response(status=HTTPStatus.INTERNAL_SERVER_ERROR)
    return _ok(template, body)