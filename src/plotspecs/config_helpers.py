"""Configuration lookup for plotspecs defaults.

Defaults are read from the environment first and then from the
``[tool.plotspecs]`` table of the ``pyproject.toml`` in the working directory.
"""

from __future__ import annotations

import logging
import math
import os
from pathlib import Path
from typing import Any, Dict, Sequence

try:
    import tomllib as _tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for <3.11
    import tomli as _tomllib  # type: ignore[no-redef]

from .gnuplot import DEFAULT_LINEWIDTH
from .utils.exceptions import ConfigurationError

_logger = logging.getLogger(__name__)

LINEWIDTH_ENV_VAR = "PLOTSPECS_DEFAULT_LINEWIDTH"
_CONFIG_SECTION = ("tool", "plotspecs")


def read_pyproject_section(path: Sequence[str]) -> Dict[str, Any]:
    """Return a mapping from the requested ``pyproject.toml`` section.

    Parameters
    ----------
    path : Sequence[str]
        Nested keys to traverse, e.g. ``("tool", "plotspecs")`` for the
        ``[tool.plotspecs]`` table.

    Returns
    -------
    Dict[str, Any]
        The requested section, or an empty dict if the file is missing,
        unreadable, or does not contain the section.
    """
    candidate = Path.cwd() / "pyproject.toml"
    if not candidate.exists():
        return {}
    try:
        with candidate.open("rb") as fh:
            data = _tomllib.load(fh)
    except (OSError, _tomllib.TOMLDecodeError) as exc:
        _logger.warning("Ignoring unreadable %s: %s", candidate, exc)
        return {}

    cursor: Any = data
    for key in path:
        if isinstance(cursor, dict) and key in cursor:
            cursor = cursor[key]
        else:
            return {}
    if isinstance(cursor, dict):
        return dict(cursor)
    return {}


def _parse_line_width(raw: Any, *, source: str) -> int | float:
    if isinstance(raw, bool):
        value = None
    elif isinstance(raw, (int, float)):
        value = raw
    else:
        try:
            value = float(str(raw).strip())
        except ValueError:
            value = None
        if value is not None and value.is_integer():
            value = int(value)
    if value is None or not math.isfinite(value) or value < 0:
        raise ConfigurationError(
            f"invalid default line width {raw!r} from {source}",
            details={"source": source, "value": repr(raw), "requirement": "non-negative number"},
        )
    return value


def default_line_width() -> int | float:
    """Return the line width applied to newly constructed plot entries.

    ``PLOTSPECS_DEFAULT_LINEWIDTH`` takes precedence over
    ``[tool.plotspecs] default_line_width``; without either the built-in
    :data:`~plotspecs.gnuplot.DEFAULT_LINEWIDTH` is used.

    Raises
    ------
    ConfigurationError
        If the configured value is not a non-negative number.
    """
    env_value = os.environ.get(LINEWIDTH_ENV_VAR)
    if env_value is not None and env_value.strip():
        return _parse_line_width(env_value, source=LINEWIDTH_ENV_VAR)

    config = read_pyproject_section(_CONFIG_SECTION)
    if "default_line_width" in config:
        return _parse_line_width(
            config["default_line_width"], source="[tool.plotspecs] default_line_width"
        )
    return DEFAULT_LINEWIDTH


__all__ = ["LINEWIDTH_ENV_VAR", "read_pyproject_section", "default_line_width"]
