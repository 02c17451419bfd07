"""Scalar conversion from EAGLE millimeters/degrees to fixed-point units."""

from __future__ import annotations

from ..constants import MICRODEGREES_PER_DEGREE, NANOMETERS_PER_MM
from ..schema.common import Angle, Length, Point, Vertex, round_half_away
from ..schema.records import VertexRecord


def convert_length(mm: float) -> Length:
    """Millimeters to nanometers."""
    return round_half_away(mm * NANOMETERS_PER_MM)


def convert_point(x: float, y: float) -> Point:
    return Point(convert_length(x), convert_length(y))


def convert_angle(deg: float) -> Angle:
    """Degrees to micro-degrees."""
    return round_half_away(deg * MICRODEGREES_PER_DEGREE)


def convert_vertex(vertex: VertexRecord) -> Vertex:
    """Convert one polygon vertex; its ``curve`` becomes the bulge angle."""
    return Vertex(convert_point(vertex.x, vertex.y), convert_angle(vertex.curve))
