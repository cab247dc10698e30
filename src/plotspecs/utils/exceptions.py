"""Exception hierarchy for plotspecs.

All library errors inherit from :class:`PlotSpecsError` and accept a
structured ``details`` payload describing the offending input.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "PlotSpecsError",
    "ValidationError",
    "ConfigurationError",
    "explain_exception",
]


class PlotSpecsError(Exception):
    """Base class for library-specific errors."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Attach structured error details alongside the user-facing message."""
        super().__init__(message)
        self.details: dict[str, Any] | None = details

    def __repr__(self) -> str:
        """Return the exception representation with the message payload."""
        cls = self.__class__.__name__
        return f"{cls}({super().__str__()!r})"


class ValidationError(PlotSpecsError):
    """A plot option or serialized payload failed validation."""


class ConfigurationError(PlotSpecsError):
    """A configured default (pyproject or environment) could not be used."""


def explain_exception(e: Exception) -> str:
    """Return a human-readable multi-line description of an exception.

    Parameters
    ----------
    e : Exception
        The exception to format.

    Returns
    -------
    str
        For :class:`PlotSpecsError` the class name, message and details dict
        (when present); for other exceptions ``str(e)``.

    Examples
    --------
    >>> from plotspecs.utils.exceptions import ValidationError, explain_exception
    >>> e = ValidationError("bad column", details={"slot": "xcol", "value": "a"})
    >>> print(explain_exception(e))
    ValidationError: bad column
      Details: {'slot': 'xcol', 'value': 'a'}
    """
    if isinstance(e, PlotSpecsError):
        lines = [f"{e.__class__.__name__}: {str(e)}"]
        if e.details is not None:
            lines.append(f"  Details: {e.details}")
        return "\n".join(lines)
    return str(e)
