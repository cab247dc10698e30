"""Utility helpers for safely normalising numeric plot options."""

from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Any

import numpy as np

from .exceptions import ValidationError

# gnuplot stores integer constants as signed 64-bit values.
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def coerce_to_int(value: Any) -> int | None:
    """Return *value* converted to an ``int`` when safe, otherwise ``None``.

    Python and numpy integers are accepted, as are integral floats. Booleans
    are rejected so that ``True`` never turns into column ``1``.
    """
    if value is None or isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return int(value)
    return None


def require_int(value: Any, *, name: str) -> int:
    """Return *value* as an ``int`` or raise :class:`ValidationError`."""
    result = coerce_to_int(value)
    if result is None:
        raise ValidationError(
            f"{name} must be an integer, got {value!r}",
            details={"param": name, "value": repr(value), "expected_type": "int"},
        )
    return result


def require_number(value: Any, *, name: str, minimum: float | None = None) -> int | float:
    """Return *value* as a finite ``int``/``float`` or raise :class:`ValidationError`.

    Parameters
    ----------
    value : Any
        Candidate numeric option.
    name : str
        Option name reported in the error details.
    minimum : float, optional
        Inclusive lower bound.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, Real):
        raise ValidationError(
            f"{name} must be a number, got {value!r}",
            details={"param": name, "value": repr(value), "expected_type": "number"},
        )
    try:
        finite = math.isfinite(float(value))
    except OverflowError:
        finite = False
    if not finite:
        raise ValidationError(
            f"{name} must be finite, got {value!r}",
            details={"param": name, "value": repr(value), "requirement": "finite"},
        )
    if isinstance(value, Integral) and not _INT64_MIN <= int(value) <= _INT64_MAX:
        raise ValidationError(
            f"{name} does not fit a gnuplot integer, got {value!r}",
            details={"param": name, "value": repr(value), "requirement": "64-bit integer"},
        )
    number: int | float = int(value) if isinstance(value, Integral) else float(value)
    if minimum is not None and number < minimum:
        raise ValidationError(
            f"{name} must be >= {minimum}, got {number}",
            details={"param": name, "value": number, "minimum": minimum},
        )
    return number


__all__ = ["coerce_to_int", "require_int", "require_number"]
