"""Runtime support for Jinja-like templates: base class, filters, errors and responses."""

__version__ = "0.1.0"

__all__ = ["errors", "filters", "responses", "template"]