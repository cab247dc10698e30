"""Formatting primitives for gnuplot option fragments.

Every optional clause of a plot entry goes through :func:`option_value_str`,
which returns an empty string for unset values. Callers can therefore join
fragments unconditionally and clean up with :func:`remove_extra_whitespaces`.
"""

from __future__ import annotations

from numbers import Integral

import numpy as np

# Line width applied to every plot entry unless configured otherwise.
DEFAULT_LINEWIDTH = 2

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def option_value_str(option: str, value: str | None) -> str:
    """Return ``"<option> <value> "`` or an empty string when *value* is unset."""
    if not value:
        return ""
    return f"{option} {value} "


def quoted_str(text: str) -> str:
    """Return *text* as a double-quoted gnuplot string literal."""
    return '"' + "".join(_ESCAPES.get(ch, ch) for ch in text) + '"'


def title_str(text: str) -> str:
    """Return the literal used after the ``title`` keyword."""
    return quoted_str(text)


def color_str(color: str) -> str:
    """Return a gnuplot color spec such as ``rgb "#ff0000"``."""
    return "rgb " + quoted_str(color)


def format_number(value: int | float) -> str:
    """Render a numeric option the way gnuplot reads it back.

    Integers are printed verbatim; floats use the shortest positional form
    with a trailing ``.0`` trimmed, so ``2.0`` becomes ``"2"``.
    """
    if isinstance(value, Integral):
        return str(int(value))
    return np.format_float_positional(float(value), trim="-")


def remove_extra_whitespaces(text: str) -> str:
    """Collapse whitespace runs into single spaces and strip both ends."""
    return " ".join(text.split())


__all__ = [
    "DEFAULT_LINEWIDTH",
    "option_value_str",
    "quoted_str",
    "title_str",
    "color_str",
    "format_number",
    "remove_extra_whitespaces",
]
