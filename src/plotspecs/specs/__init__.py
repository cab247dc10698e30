"""Plot entry specification and its style traits."""

from .fill import FillSpecs
from .line import LineSpecs
from .plotspec import AUTO, COLUMN_SLOTS, PlotSpec
from .point import PointSpecs

__all__ = ["AUTO", "COLUMN_SLOTS", "PlotSpec", "LineSpecs", "PointSpecs", "FillSpecs"]
