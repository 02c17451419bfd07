"""Typed data models: native fixed-point elements and foreign EAGLE records."""

from .common import (
    Alignment,
    Angle,
    Circle,
    HAlign,
    Length,
    Path,
    Point,
    VAlign,
    Vertex,
)
from .layers import BOARD_LAYERS, SCHEMATIC_LAYERS, Layer, inner_copper
from .library import (
    ComponentSide,
    FootprintPad,
    Hole,
    PackagePad,
    PadHole,
    PadShape,
    Primitive,
    StrokeText,
    SymbolPin,
)
from .records import (
    CircleRecord,
    HoleRecord,
    PinRecord,
    PolygonRecord,
    RectangleRecord,
    SmtPadRecord,
    TextRecord,
    ThtPadRecord,
    VertexRecord,
    WireRecord,
)

__all__ = [
    "BOARD_LAYERS",
    "SCHEMATIC_LAYERS",
    "Alignment",
    "Angle",
    "Circle",
    "CircleRecord",
    "ComponentSide",
    "FootprintPad",
    "HAlign",
    "Hole",
    "HoleRecord",
    "Layer",
    "Length",
    "PackagePad",
    "PadHole",
    "PadShape",
    "Path",
    "PinRecord",
    "Point",
    "PolygonRecord",
    "Primitive",
    "RectangleRecord",
    "SmtPadRecord",
    "StrokeText",
    "SymbolPin",
    "TextRecord",
    "ThtPadRecord",
    "VAlign",
    "Vertex",
    "VertexRecord",
    "WireRecord",
    "inner_copper",
]
