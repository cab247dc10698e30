"""
plotspecs.

Builds the per-entry fragments of a gnuplot ``plot`` command: what to plot,
which data columns to use, the legend title, and line/point/fill styling.
"""

import logging as _logging

from .gnuplot import DEFAULT_LINEWIDTH
from .serializers import PLOTSPEC_VERSION, plotspec_from_dict, plotspec_to_dict, validate_plotspec
from .specs import AUTO, FillSpecs, LineSpecs, PlotSpec, PointSpecs
from .utils.exceptions import ConfigurationError, PlotSpecsError, ValidationError

# Provide a default no-op handler to avoid "No handler" warnings for library users.
_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "AUTO",
    "DEFAULT_LINEWIDTH",
    "PlotSpec",
    "LineSpecs",
    "PointSpecs",
    "FillSpecs",
    "PlotSpecsError",
    "ValidationError",
    "ConfigurationError",
    "plotspec_to_dict",
    "plotspec_from_dict",
    "validate_plotspec",
    "PLOTSPEC_VERSION",
]
