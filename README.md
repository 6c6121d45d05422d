# tplrt

Runtime support for templates written in a Jinja-like syntax. It provides
the pieces that rendered templates rely on:

- `tplrt.template.Template`: an abstract base class for templates. A
  subclass implements `render_into(writer)`, writing text to a text writer,
  and gets:
  - `render()`, which returns the output as a new string;
  - `write_into(writer)`, which writes the output UTF-8 encoded to a binary
    writer;
  - `str(template)`, which renders the template;
  - `extension()`, `size_hint()` and `mime_type()`, which return the class
    attributes `EXTENSION` (default `None`), `SIZE_HINT` (default `0`) and
    `MIME_TYPE` (default `"text/plain; charset=utf-8"`).
- `tplrt.filters`: the built-in filters `lower`, `lowercase`, `upper`,
  `uppercase`, `capitalize`, `trim`, `truncate`, `indent`, `center`,
  `wordcount`, `join`, `linebreaks`, `linebreaksbr`, `paragraphbreaks`,
  `urlencode`, `urlencode_strict`, `filesizeformat`, `into_f64`,
  `into_isize`, `abs`, `json` and `yaml`.
- `tplrt.responses`: `to_response(template)` and `into_response(template)`
  turn a template into a `Response` dataclass with `status`, `headers`
  (holding `Content-Type`), `body` (bytes) and an `is_success` property.
- `tplrt.errors`: `TemplateError` and its kinds `FormatError`,
  `CustomError`, `JsonError` and `YamlError`. Each keeps the wrapped error
  in `source`.

## Installation

```
pip install tplrt
```

## Example

```python
from tplrt.template import Template
from tplrt import filters


class Hello(Template):
    EXTENSION = "html"
    SIZE_HINT = 16
    MIME_TYPE = "text/html; charset=utf-8"

    def __init__(self, name):
        self.name = name

    def render_into(self, writer):
        writer.write(f"Hello, {filters.capitalize(self.name)}!")


print(Hello("world").render())          # Hello, World!

print(filters.truncate("hello", 2))     # he...
print(filters.urlencode("/a b"))        # /a%20b
print(filters.center("f", 3))           # " f "
```

## Filters in brief

- `truncate(s, length)` and `center(src, dst_len)` count UTF-8 bytes;
  `truncate` extends the cut to the next character boundary and appends
  `...`.
- `indent(s, width)` indents every line after the first; a trailing
  newline gets no indentation.
- `urlencode` leaves ASCII letters, digits and `_.-~/` as they are;
  `urlencode_strict` encodes `/` as well.
- `filesizeformat` uses decimal units (`999 B`, `1 kB`, `1.02 kB`).
- `into_isize` truncates toward zero and raises `FormatError` for values
  that are not finite or do not fit in a 64-bit signed integer.
- `json` writes pretty JSON with `&`, `'`, `<` and `>` escaped as `\uXXXX`
  and raises `JsonError` on failure; `yaml` writes YAML and raises
  `YamlError` on failure.

## Errors

`render()` lets a `TemplateError` raised in `render_into` through and wraps
any other exception in a `CustomError`, whose message is that of the wrapped
exception. `write_into` reports a failure as `OSError`, and `str(template)`
as `FormatError`.

`to_response` answers a failed render with status 500 and the error message
as a plain-text body; `into_response` answers it with a bare 500.

## What this package does not do

It does not read, parse or compile template source text. Templates are
Python subclasses of `Template` whose `render_into` is written out by hand
(or by some other tool). It has no helper for loop bookkeeping such as
index, first and last. `tplrt.responses` only builds `Response` values; it
does not run a web server.

## Running the tests

```
pip install -e ".[test]"
pytest
```