"""Shared helpers for plotspecs (exceptions and numeric coercion)."""

from .exceptions import ConfigurationError, PlotSpecsError, ValidationError, explain_exception
from .int_utils import coerce_to_int, require_int, require_number

__all__ = [
    "PlotSpecsError",
    "ValidationError",
    "ConfigurationError",
    "explain_exception",
    "coerce_to_int",
    "require_int",
    "require_number",
]
