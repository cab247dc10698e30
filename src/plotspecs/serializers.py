"""PlotSpec serialization and validation helpers.

Provides a small stable envelope for PlotSpec -> dict and back, and a
lightweight validator. The serialized envelope contains ``plotspec_version``
to allow future evolution. Rebuilding a spec from its envelope yields the same
``render()`` output.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from .specs.plotspec import COLUMN_SLOTS, PlotSpec
from .utils.exceptions import ValidationError, explain_exception

_logger = logging.getLogger(__name__)

PLOTSPEC_VERSION = "1.0.0"

_LINE_SETTERS = ("line_style", "line_type", "line_color", "dash_type")
_POINT_SETTERS = ("point_type", "point_size")


def plotspec_to_dict(spec: PlotSpec) -> Dict[str, Any]:
    """Serialize a PlotSpec to a plain JSON-serializable dict envelope."""
    payload: Dict[str, Any] = {
        "plotspec_version": PLOTSPEC_VERSION,
        "subject": spec.subject,
        "render_mode": spec.render_mode,
    }
    if spec.notitle:
        payload["title"] = {"notitle": True}
    elif spec.title_column is not None:
        payload["title"] = {"columnheader": spec.title_column}
    elif spec.title_text is not None:
        payload["title"] = {"text": spec.title_text}

    if spec.columns:
        payload["columns"] = spec.columns

    payload["line"] = spec.line.to_dict()
    payload["point"] = spec.point.to_dict()
    payload["fill"] = spec.fill.to_dict()
    return payload


def plotspec_from_dict(obj: Dict[str, Any]) -> PlotSpec:
    """Deserialize a dict envelope to a PlotSpec.

    Raises
    ------
    ValidationError
        For payloads rejected by :func:`validate_plotspec` or carrying
        invalid option values.
    """
    try:
        validate_plotspec(obj)
    except ValidationError as exc:
        _logger.debug("Rejected PlotSpec envelope\n%s", explain_exception(exc))
        raise

    line = obj.get("line") or {}
    # without a recorded width the configured default applies
    spec = PlotSpec(obj["subject"], obj["render_mode"], line_width=line.get("line_width"))

    title = obj.get("title")
    if title is not None:
        if title.get("notitle"):
            spec.no_title()
        elif "columnheader" in title:
            column = title["columnheader"]
            spec.title_from_column_header(None if column is True else column)
        elif "text" in title:
            spec.title(title["text"])

    columns = obj.get("columns") or {}
    spec.use(**{slot: columns.get(slot) for slot in COLUMN_SLOTS})

    for setter in _LINE_SETTERS:
        if setter in line:
            getattr(spec, setter)(line[setter])
    point = obj.get("point") or {}
    for setter in _POINT_SETTERS:
        if setter in point:
            getattr(spec, setter)(point[setter])

    fill = obj.get("fill") or {}
    # intensity and pattern outlive mode switches, so restore both before the mode
    if fill.get("intensity") is not None:
        spec.fill_intensity(fill["intensity"])
    if fill.get("pattern") is not None:
        spec.fill_pattern(fill["pattern"])
    mode = fill.get("mode")
    if mode == "empty":
        spec.fill_empty()
    elif mode == "pattern":
        spec.fill_pattern(fill.get("pattern", 0))
    elif mode == "solid":
        spec.fill_solid()
    if fill.get("transparent"):
        spec.fill_transparent(True)
    if fill.get("color") is not None:
        spec.fill_color(fill["color"])
    return spec


def validate_plotspec(obj: Dict[str, Any]) -> None:
    """Lightweight validation for a PlotSpec envelope.

    Raises
    ------
    ValidationError
        When the payload is not a dict, has an unsupported version, lacks a
        subject or render mode, or names unknown column slots or fill modes.
    """
    if not isinstance(obj, dict):
        raise ValidationError(
            "PlotSpec payload must be a dict",
            details={"expected_type": "dict", "actual_type": type(obj).__name__},
        )

    version = obj.get("plotspec_version")
    if version != PLOTSPEC_VERSION:
        raise ValidationError(
            f"unsupported or missing plotspec_version: {version}",
            details={"expected_version": PLOTSPEC_VERSION, "actual_version": version},
        )

    missing = [key for key in ("subject", "render_mode") if not obj.get(key)]
    if missing:
        raise ValidationError(
            f"PlotSpec payload missing required fields: {', '.join(missing)}",
            details={"missing_fields": missing},
        )

    for section in ("title", "columns", "line", "point", "fill"):
        value = obj.get(section)
        if value is not None and not isinstance(value, dict):
            raise ValidationError(
                f"PlotSpec {section} must be a dict",
                details={
                    "field": section,
                    "expected_type": "dict",
                    "actual_type": type(value).__name__,
                },
            )

    unknown = sorted(set(obj.get("columns") or {}) - set(COLUMN_SLOTS))
    if unknown:
        raise ValidationError(
            f"unknown column slots: {', '.join(unknown)}",
            details={"unknown_slots": unknown, "allowed_slots": list(COLUMN_SLOTS)},
        )

    mode = (obj.get("fill") or {}).get("mode")
    if mode is not None and mode not in ("solid", "pattern", "empty"):
        raise ValidationError(
            f"unknown fill mode: {mode}",
            details={"field": "fill.mode", "value": mode},
        )


__all__ = ["plotspec_to_dict", "plotspec_from_dict", "validate_plotspec", "PLOTSPEC_VERSION"]
