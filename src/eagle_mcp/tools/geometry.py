"""Geometry tools: convert wires and graphics primitives."""

from __future__ import annotations

from typing import Any

from ..convert import shapes
from ..convert.wires import convert_and_join_wires
from ..exceptions import EagleMcpError
from ..logging_config import conversion_batch
from ..schema.records import (
    CircleRecord,
    HoleRecord,
    PolygonRecord,
    RectangleRecord,
    WireRecord,
)
from .helpers import parse_records
from .registry import register_tool


def _convert_wires_handler(wires: list[dict[str, Any]], grab_area: bool = False) -> dict[str, Any]:
    """Convert EAGLE wires and join connected ones into paths.

    Args:
        wires: Wire attributes (x1, y1, x2, y2, width, layer).
        grab_area: Grab area flag applied to every resulting path.
    """
    with conversion_batch():
        try:
            records = parse_records(wires, WireRecord.from_dict, "wires")
        except EagleMcpError as exc:
            return exc.to_dict()
        errors: list[str] = []
        primitives = convert_and_join_wires(records, grab_area, errors)
    return {
        "count": len(primitives),
        "paths": [p.to_dict() for p in primitives],
        "errors": errors,
    }


def _convert_shapes_handler(
    rectangles: list[dict[str, Any]] | None = None,
    polygons: list[dict[str, Any]] | None = None,
    circles: list[dict[str, Any]] | None = None,
    holes: list[dict[str, Any]] | None = None,
    grab_area: bool = False,
) -> dict[str, Any]:
    """Convert rectangles, polygons, circles and holes.

    Args:
        rectangles: Rectangle attributes (x1, y1, x2, y2, layer, rot).
        polygons: Polygon attributes (layer, width, vertices[x, y, curve]).
        circles: Circle attributes (x, y, radius, width, layer).
        holes: Hole attributes (x, y, drill).
        grab_area: Grab area flag for rectangles, polygons and circles.
    """
    with conversion_batch():
        try:
            rects = parse_records(rectangles, RectangleRecord.from_dict, "rectangles")
            polys = parse_records(polygons, PolygonRecord.from_dict, "polygons")
            circs = parse_records(circles, CircleRecord.from_dict, "circles")
            drills = parse_records(holes, HoleRecord.from_dict, "holes")
        except EagleMcpError as exc:
            return exc.to_dict()
        primitives = [
            *(shapes.convert_rectangle(r, grab_area) for r in rects),
            *(shapes.convert_polygon(p, grab_area) for p in polys),
            *(shapes.convert_circle(c, grab_area) for c in circs),
        ]
        converted_holes = [shapes.convert_hole(h) for h in drills]
    return {
        "primitives": [p.to_dict() for p in primitives],
        "holes": [h.to_dict() for h in converted_holes],
    }


register_tool(
    name="convert_wires",
    description=(
        "Convert EAGLE wires to native paths, joining wires with equal layer"
        " and width at shared endpoints. Invalid widths are reported in 'errors'."
    ),
    handler=_convert_wires_handler,
    category="geometry",
)

register_tool(
    name="convert_shapes",
    description="Convert EAGLE rectangles, polygons, circles and holes to native geometry.",
    handler=_convert_shapes_handler,
    category="geometry",
)
