"""Built-in filter functions for templates."""

from __future__ import annotations

import builtins
import json as _json
import math
import numbers
from typing import Any, Iterable
from urllib.parse import quote

import yaml as _yaml

from tplrt.errors import FormatError, JsonError, YamlError

__all__ = [
    "filesizeformat",
    "urlencode",
    "urlencode_strict",
    "linebreaks",
    "linebreaksbr",
    "paragraphbreaks",
    "lower",
    "lowercase",
    "upper",
    "uppercase",
    "trim",
    "truncate",
    "indent",
    "into_f64",
    "into_isize",
    "join",
    "abs",
    "capitalize",
    "center",
    "wordcount",
    "json",
    "yaml",
]

_DECIMAL_UNITS = ("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
_DECIMAL_BASE = 1000

_ISIZE_MIN = -(2**63)
_ISIZE_MAX = 2**63 - 1

_JSON_ESCAPES = {
    ord("&"): "\\u0026",
    ord("'"): "\\u0027",
    ord("<"): "\\u003c",
    ord(">"): "\\u003e",
}


def filesizeformat(b: numbers.Real) -> str:
    """Format a byte count with decimal (SI) units, e.g. ``1.02 kB``."""
    size = float(b)
    scale = 0
    while builtins.abs(size) >= _DECIMAL_BASE and scale < len(_DECIMAL_UNITS) - 1:
        size /= _DECIMAL_BASE
        scale += 1
    text = f"{size:.2f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return f"{text} {_DECIMAL_UNITS[scale]}"


def urlencode(s: Any) -> str:
    """Percent-encode everything but ASCII letters, digits and ``_.-~/``."""
    return quote(str(s), safe="/")


def urlencode_strict(s: Any) -> str:
    """Percent-encode everything but ASCII letters, digits and ``_.-~``."""
    return quote(str(s), safe="")


def linebreaks(s: Any) -> str:
    """Turn blank lines into paragraph breaks and newlines into ``<br/>``."""
    text = str(s).replace("\n\n", "</p><p>").replace("\n", "<br/>")
    return f"<p>{text}</p>"


def linebreaksbr(s: Any) -> str:
    """Turn every newline into ``<br/>``."""
    return str(s).replace("\n", "<br/>")


def paragraphbreaks(s: Any) -> str:
    """Turn blank lines into paragraph breaks, dropping empty paragraphs."""
    text = str(s).replace("\n\n", "</p><p>").replace("<p></p>", "")
    return f"<p>{text}</p>"


def lower(s: Any) -> str:
    """Convert to lowercase."""
    return str(s).lower()


def lowercase(s: Any) -> str:
    """Alias of :func:`lower`."""
    return lower(s)


def upper(s: Any) -> str:
    """Convert to uppercase."""
    return str(s).upper()


def uppercase(s: Any) -> str:
    """Alias of :func:`upper`."""
    return upper(s)


def trim(s: Any) -> str:
    """Strip leading and trailing whitespace."""
    return str(s).strip()


def truncate(s: Any, length: int) -> str:
    """Limit to ``length`` UTF-8 bytes, extended to a character boundary, adding ``...``."""
    if length < 0:
        raise ValueError("length must not be negative")
    data = str(s).encode("utf-8")
    if len(data) <= length:
        return data.decode("utf-8")
    cut = length
    while cut < len(data) and (data[cut] & 0xC0) == 0x80:
        cut += 1
    return data[:cut].decode("utf-8") + "..."


def indent(s: Any, width: int) -> str:
    """Indent every line after the first with ``width`` spaces."""
    if width < 0:
        raise ValueError("width must not be negative")
    text = str(s)
    padded = "\n" + " " * width
    if text.endswith("\n"):
        return text[:-1].replace("\n", padded) + "\n"
    return text.replace("\n", padded)


def into_f64(number: numbers.Real) -> float:
    """Cast a number to a float."""
    if not isinstance(number, numbers.Real):
        raise TypeError(f"expected a number, got {type(number).__name__}")
    try:
        return float(number)
    except (OverflowError, ValueError) as exc:
        raise FormatError() from exc


def into_isize(number: numbers.Real) -> int:
    """Cast a number to a 64-bit signed integer, truncating toward zero."""
    if not isinstance(number, numbers.Real):
        raise TypeError(f"expected a number, got {type(number).__name__}")
    if isinstance(number, numbers.Integral):
        value = int(number)
    else:
        as_float = float(number)
        if not math.isfinite(as_float):
            raise FormatError()
        value = math.trunc(as_float)
    if not _ISIZE_MIN <= value <= _ISIZE_MAX:
        raise FormatError()
    return value


def join(iterable: Iterable[Any], separator: str) -> str:
    """Join the items of an iterable with ``separator``."""
    return str(separator).join(str(item) for item in iterable)


def abs(number: Any) -> Any:  # noqa: A001 - filter name
    """Absolute value."""
    return builtins.abs(number)


def capitalize(s: Any) -> str:
    """Uppercase the first character and lowercase the rest."""
    text = str(s)
    if not text:
        return text
    return text[0].upper() + text[1:].lower()


def center(src: Any, dst_len: int) -> str:
    """Center the value in a field ``dst_len`` bytes wide."""
    text = str(src)
    length = len(text.encode("utf-8"))
    if dst_len <= length:
        return text
    diff = dst_len - length
    mid, rest = divmod(diff, 2)
    return " " * mid + text + " " * (mid + rest)


def wordcount(s: Any) -> int:
    """Count whitespace-separated words."""
    return len(str(s).split())


def _finite_floats(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _finite_floats(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite_floats(item) for item in value]
    return value


def json(value: Any) -> str:
    """Serialize to pretty JSON with ``& ' < >`` escaped."""
    try:
        text = _json.dumps(
            _finite_floats(value), indent=2, ensure_ascii=False, allow_nan=False
        )
    except (TypeError, ValueError) as exc:
        raise JsonError(exc) from exc
    return text.translate(_JSON_ESCAPES)


def yaml(value: Any) -> str:
    """Serialize to YAML."""
    try:
        text = _yaml.safe_dump(
            value, allow_unicode=True, sort_keys=False, default_flow_style=False
        )
    except _yaml.YAMLError as exc:
        raise YamlError(exc) from exc
    if text.endswith("\n...\n"):
        text = text[: -len("...\n")]
    return text