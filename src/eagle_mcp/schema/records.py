"""Already-parsed EAGLE attribute records (mm / degrees, as in the file).

Records are produced by a format parser; :meth:`from_dict` builds them from
flat attribute mappings (e.g. XML attributes) and validates every field.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ..constants import PIN_LENGTHS
from ..exceptions import ValidationError
from ..validation import (
    ValidationResult,
    validate_dimension,
    validate_keyword,
    validate_layer_id,
    validate_number,
    validate_positive,
    validate_text,
)

_MISSING = object()

THT_PAD_SHAPES = ("square", "round", "octagon", "long")


def _get(
    attrs: Mapping[str, Any],
    key: str,
    validator: Callable[..., ValidationResult],
    default: Any = _MISSING,
    **kwargs: Any,
) -> Any:
    value = attrs.get(key)
    if value is None or value == "":
        if default is _MISSING:
            raise ValidationError(f"Missing required attribute '{key}'", field=key)
        return default
    result = validator(value, name=key, **kwargs)
    if not result.valid:
        raise ValidationError(result.error or f"Invalid attribute '{key}'", field=key)
    return result.value


def parse_rotation(value: Any) -> float:
    """Parse an EAGLE ``rot`` attribute such as ``"R90"`` or ``"MR270"``.

    Mirror (``M``) and spin (``S``) flags are accepted and dropped; plain
    numbers are taken as degrees.
    """
    if value is None or value == "":
        return 0.0
    if isinstance(value, str):
        text = value.strip().upper().lstrip("MS")
        if text.startswith("R"):
            text = text[1:]
        value = text
    result = validate_number(value, name="rot")
    if not result.valid:
        raise ValidationError(result.error or "Invalid rotation", field="rot")
    return result.value


def _rotation(attrs: Mapping[str, Any]) -> float:
    if "rotation" in attrs:
        return _get(attrs, "rotation", validate_number, 0.0)
    return parse_rotation(attrs.get("rot"))


@dataclass(frozen=True)
class VertexRecord:
    x: float
    y: float
    curve: float = 0.0

    @classmethod
    def from_dict(cls, attrs: Mapping[str, Any]) -> VertexRecord:
        return cls(
            x=_get(attrs, "x", validate_number),
            y=_get(attrs, "y", validate_number),
            curve=_get(attrs, "curve", validate_number, 0.0),
        )


@dataclass(frozen=True)
class WireRecord:
    """A straight line segment; ``width`` may be invalid and is checked on joining."""

    x1: float
    y1: float
    x2: float
    y2: float
    width: float
    layer: int

    @classmethod
    def from_dict(cls, attrs: Mapping[str, Any]) -> WireRecord:
        return cls(
            x1=_get(attrs, "x1", validate_number),
            y1=_get(attrs, "y1", validate_number),
            x2=_get(attrs, "x2", validate_number),
            y2=_get(attrs, "y2", validate_number),
            width=_get(attrs, "width", validate_number),
            layer=_get(attrs, "layer", validate_layer_id),
        )


@dataclass(frozen=True)
class RectangleRecord:
    x1: float
    y1: float
    x2: float
    y2: float
    layer: int
    rotation: float = 0.0

    @classmethod
    def from_dict(cls, attrs: Mapping[str, Any]) -> RectangleRecord:
        return cls(
            x1=_get(attrs, "x1", validate_number),
            y1=_get(attrs, "y1", validate_number),
            x2=_get(attrs, "x2", validate_number),
            y2=_get(attrs, "y2", validate_number),
            layer=_get(attrs, "layer", validate_layer_id),
            rotation=_rotation(attrs),
        )


@dataclass(frozen=True)
class PolygonRecord:
    layer: int
    width: float = 0.0
    vertices: tuple[VertexRecord, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, attrs: Mapping[str, Any]) -> PolygonRecord:
        raw_vertices = attrs.get("vertices") or []
        if not isinstance(raw_vertices, (list, tuple)):
            raise ValidationError("'vertices' must be a list", field="vertices")
        return cls(
            layer=_get(attrs, "layer", validate_layer_id),
            width=_get(attrs, "width", validate_dimension, 0.0),
            vertices=tuple(VertexRecord.from_dict(v) for v in raw_vertices),
        )


@dataclass(frozen=True)
class CircleRecord:
    x: float
    y: float
    radius: float
    width: float
    layer: int

    @classmethod
    def from_dict(cls, attrs: Mapping[str, Any]) -> CircleRecord:
        return cls(
            x=_get(attrs, "x", validate_number),
            y=_get(attrs, "y", validate_number),
            radius=_get(attrs, "radius", validate_positive),
            width=_get(attrs, "width", validate_dimension, 0.0),
            layer=_get(attrs, "layer", validate_layer_id),
        )


@dataclass(frozen=True)
class HoleRecord:
    x: float
    y: float
    drill: float

    @classmethod
    def from_dict(cls, attrs: Mapping[str, Any]) -> HoleRecord:
        return cls(
            x=_get(attrs, "x", validate_number),
            y=_get(attrs, "y", validate_number),
            drill=_get(attrs, "drill", validate_positive),
        )


@dataclass(frozen=True)
class ThtPadRecord:
    name: str
    x: float
    y: float
    drill: float
    diameter: float | None = None
    shape: str = "round"
    rotation: float = 0.0

    @classmethod
    def from_dict(cls, attrs: Mapping[str, Any]) -> ThtPadRecord:
        return cls(
            name=_get(attrs, "name", validate_text, ""),
            x=_get(attrs, "x", validate_number),
            y=_get(attrs, "y", validate_number),
            drill=_get(attrs, "drill", validate_positive),
            diameter=_get(attrs, "diameter", validate_positive, None),
            shape=_get(attrs, "shape", validate_keyword, "round", allowed=THT_PAD_SHAPES),
            rotation=_rotation(attrs),
        )


@dataclass(frozen=True)
class SmtPadRecord:
    name: str
    x: float
    y: float
    dx: float
    dy: float
    layer: int
    roundness: float = 0.0  # percent
    rotation: float = 0.0

    @classmethod
    def from_dict(cls, attrs: Mapping[str, Any]) -> SmtPadRecord:
        layer = _get(attrs, "layer", validate_layer_id)
        if layer not in (1, 16):
            raise ValidationError(f"SMD pads must be on layer 1 or 16, got {layer}", field="layer")
        roundness = _get(attrs, "roundness", validate_dimension, 0.0)
        if roundness > 100:
            raise ValidationError(f"roundness must be <= 100, got {roundness}", field="roundness")
        return cls(
            name=_get(attrs, "name", validate_text, ""),
            x=_get(attrs, "x", validate_number),
            y=_get(attrs, "y", validate_number),
            dx=_get(attrs, "dx", validate_positive),
            dy=_get(attrs, "dy", validate_positive),
            layer=layer,
            roundness=roundness,
            rotation=_rotation(attrs),
        )


@dataclass(frozen=True)
class TextRecord:
    """A text element; ``size`` is kept for completeness but not converted."""

    value: str
    x: float
    y: float
    layer: int
    size: float = 0.0
    rotation: float = 0.0

    @classmethod
    def from_dict(cls, attrs: Mapping[str, Any]) -> TextRecord:
        return cls(
            value=_get(attrs, "value", validate_text, ""),
            x=_get(attrs, "x", validate_number),
            y=_get(attrs, "y", validate_number),
            layer=_get(attrs, "layer", validate_layer_id),
            size=_get(attrs, "size", validate_dimension, 0.0),
            rotation=_rotation(attrs),
        )


@dataclass(frozen=True)
class PinRecord:
    name: str
    x: float
    y: float
    length: str = "long"
    rotation: float = 0.0

    @classmethod
    def from_dict(cls, attrs: Mapping[str, Any]) -> PinRecord:
        return cls(
            name=_get(attrs, "name", validate_text, ""),
            x=_get(attrs, "x", validate_number),
            y=_get(attrs, "y", validate_number),
            length=_get(attrs, "length", validate_keyword, "long", allowed=PIN_LENGTHS),
            rotation=_rotation(attrs),
        )
