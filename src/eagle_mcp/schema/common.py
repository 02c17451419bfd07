"""Common fixed-point value types shared by all converted elements.

Lengths are integer nanometers, angles are integer micro-degrees.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

Length = int
Angle = int

DEG90 = 90_000_000
DEG180 = 180_000_000
DEG360 = 360_000_000


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    magnitude = abs(value)
    rounded = math.floor(magnitude)
    if magnitude - rounded >= 0.5:
        rounded += 1
    return rounded if value >= 0 else -rounded


@dataclass(frozen=True)
class Point:
    """2D position (nm)."""

    x: Length = 0
    y: Length = 0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def rotated(self, angle: Angle, center: Point | None = None) -> Point:
        """Rotate counter-clockwise by ``angle`` around ``center``.

        Multiples of 90 degrees are exact; anything else goes through
        floating point and is rounded back to the grid.
        """
        center = center or Point()
        dx = self.x - center.x
        dy = self.y - center.y
        angle %= DEG360
        if angle == 0:
            return self
        if angle == DEG90:
            return Point(center.x - dy, center.y + dx)
        if angle == DEG180:
            return Point(center.x - dx, center.y - dy)
        if angle == 3 * DEG90:
            return Point(center.x + dy, center.y - dx)
        rad = math.radians(angle / 1e6)
        cos, sin = math.cos(rad), math.sin(rad)
        return Point(
            center.x + round_half_away(dx * cos - dy * sin),
            center.y + round_half_away(dx * sin + dy * cos),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Vertex:
    """Path vertex; ``angle`` is the bulge of the arc towards the next vertex."""

    pos: Point
    angle: Angle = 0

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = self.pos.to_dict()
        if self.angle != 0:
            d["angle"] = self.angle
        return d


Path = tuple[Vertex, ...]


def path_to_dicts(path: Path) -> list[dict[str, Any]]:
    return [v.to_dict() for v in path]


def is_closed(path: Path) -> bool:
    """True if the path ends where it starts."""
    return len(path) > 1 and path[0].pos == path[-1].pos


@dataclass(frozen=True)
class Circle:
    """Exact circle for consumers that can represent one natively."""

    center: Point
    diameter: Length

    def to_dict(self) -> dict[str, Any]:
        return {"center": self.center.to_dict(), "diameter": self.diameter}


class HAlign(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VAlign(str, Enum):
    BOTTOM = "bottom"
    CENTER = "center"
    TOP = "top"


@dataclass(frozen=True)
class Alignment:
    h: HAlign = HAlign.LEFT
    v: VAlign = VAlign.BOTTOM

    def to_dict(self) -> dict[str, Any]:
        return {"h": self.h.value, "v": self.v.value}
