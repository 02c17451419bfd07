"""Typed models for converted library elements (symbols and footprints)."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .common import Alignment, Angle, Circle, Length, Path, Point, Vertex, path_to_dicts
from .layers import Layer


def new_uuid() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Primitive:
    """A polygon-like graphics element on a foreign layer id."""

    layer_id: int
    line_width: Length
    filled: bool
    grab_area: bool
    path: Path
    circle: Circle | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "layer_id": self.layer_id,
            "line_width": self.line_width,
            "filled": self.filled,
            "grab_area": self.grab_area,
            "path": path_to_dicts(self.path),
        }
        if self.circle is not None:
            d["circle"] = self.circle.to_dict()
        return d


@dataclass(frozen=True)
class Hole:
    """A non-plated hole; ``path`` holds a single vertex for round holes."""

    diameter: Length
    path: Path
    uuid: str = field(default_factory=new_uuid, compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {"uuid": self.uuid, "diameter": self.diameter, "path": path_to_dicts(self.path)}


@dataclass(frozen=True)
class PadHole:
    """A plated hole of a pad, positioned relative to the pad origin."""

    diameter: Length
    path: Path = (Vertex(Point()),)
    uuid: str = field(default_factory=new_uuid, compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {"uuid": self.uuid, "diameter": self.diameter, "path": path_to_dicts(self.path)}


class PadShape(str, Enum):
    ROUNDED_RECT = "roundrect"
    ROUNDED_OCTAGON = "octagon"


class ComponentSide(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class PackagePad:
    """Logical pad of a package."""

    name: str
    uuid: str = field(default_factory=new_uuid, compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {"uuid": self.uuid, "name": self.name}


@dataclass(frozen=True)
class FootprintPad:
    """Geometric pad placement referencing a :class:`PackagePad`."""

    package_pad_uuid: str = field(compare=False)
    position: Point
    rotation: Angle
    shape: PadShape
    width: Length
    height: Length
    radius: float  # corner radius ratio, 0.0 .. 1.0
    component_side: ComponentSide
    holes: tuple[PadHole, ...] = ()
    uuid: str = field(default_factory=new_uuid, compare=False)

    @property
    def is_tht(self) -> bool:
        return bool(self.holes)

    def to_dict(self) -> dict[str, Any]:
        return {
            "uuid": self.uuid,
            "package_pad": self.package_pad_uuid,
            "position": self.position.to_dict(),
            "rotation": self.rotation,
            "shape": self.shape.value,
            "width": self.width,
            "height": self.height,
            "radius": self.radius,
            "side": self.component_side.value,
            "holes": [h.to_dict() for h in self.holes],
        }


@dataclass(frozen=True)
class StrokeText:
    """Text rendered with the native stroke font.

    ``letter_spacing``/``line_spacing`` of ``None`` mean automatic spacing.
    """

    layer: Layer
    text: str
    position: Point
    rotation: Angle
    height: Length
    stroke_width: Length = 0
    letter_spacing: float | None = None
    line_spacing: float | None = None
    align: Alignment = Alignment()
    mirrored: bool = False
    auto_rotate: bool = True
    uuid: str = field(default_factory=new_uuid, compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "uuid": self.uuid,
            "layer": self.layer.id,
            "text": self.text,
            "position": self.position.to_dict(),
            "rotation": self.rotation,
            "height": self.height,
            "stroke_width": self.stroke_width,
            "letter_spacing": "auto" if self.letter_spacing is None else self.letter_spacing,
            "line_spacing": "auto" if self.line_spacing is None else self.line_spacing,
            "align": self.align.to_dict(),
            "mirror": self.mirrored,
            "auto_rotate": self.auto_rotate,
        }


@dataclass(frozen=True)
class SymbolPin:
    """A pin of a schematic symbol."""

    name: str
    position: Point
    length: Length
    rotation: Angle
    uuid: str = field(default_factory=new_uuid, compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "uuid": self.uuid,
            "name": self.name,
            "position": self.position.to_dict(),
            "length": self.length,
            "rotation": self.rotation,
        }
