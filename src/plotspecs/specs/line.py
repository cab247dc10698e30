"""Line style options of a plot entry."""

from __future__ import annotations

from typing import Any, Dict

from ..gnuplot import color_str, format_number, option_value_str
from ..utils.int_utils import require_int, require_number


class LineSpecs:
    """Fluent builder for ``linestyle``/``linetype``/``linewidth``/``linecolor``/``dashtype``."""

    def __init__(self) -> None:
        """Start with every line option unset."""
        self._style: int | None = None
        self._type: int | None = None
        self._width: int | float | None = None
        self._color: str | None = None
        self._dash: int | None = None

    def line_style(self, value: int) -> LineSpecs:
        """Select a predefined gnuplot line style by index."""
        self._style = require_int(value, name="line_style")
        return self

    def line_type(self, value: int) -> LineSpecs:
        """Select a gnuplot line type by index."""
        self._type = require_int(value, name="line_type")
        return self

    def line_width(self, value: int | float) -> LineSpecs:
        """Set the line width; must be non-negative."""
        self._width = require_number(value, name="line_width", minimum=0)
        return self

    def line_color(self, value: str) -> LineSpecs:
        """Set the line color as a name (``"red"``) or hex string (``"#ff0000"``).

        An empty string unsets the color.
        """
        self._color = str(value) or None
        return self

    def dash_type(self, value: int) -> LineSpecs:
        """Select a gnuplot dash pattern by index."""
        self._dash = require_int(value, name="dash_type")
        return self

    def render(self) -> str:
        """Return the gnuplot fragment for the options set so far."""
        return "".join(
            [
                option_value_str("linestyle", None if self._style is None else str(self._style)),
                option_value_str("linetype", None if self._type is None else str(self._type)),
                option_value_str(
                    "linewidth", None if self._width is None else format_number(self._width)
                ),
                option_value_str("linecolor", None if self._color is None else color_str(self._color)),
                option_value_str("dashtype", None if self._dash is None else str(self._dash)),
            ]
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the set options keyed by setter name."""
        state = {
            "line_style": self._style,
            "line_type": self._type,
            "line_width": self._width,
            "line_color": self._color,
            "dash_type": self._dash,
        }
        return {key: value for key, value in state.items() if value is not None}


__all__ = ["LineSpecs"]
