"""Tests for attribute record construction (schema/records.py)."""

from __future__ import annotations

import pytest

from eagle_mcp.exceptions import ValidationError
from eagle_mcp.schema.records import (
    CircleRecord,
    HoleRecord,
    PinRecord,
    PolygonRecord,
    RectangleRecord,
    SmtPadRecord,
    TextRecord,
    ThtPadRecord,
    WireRecord,
    parse_rotation,
)


class TestParseRotation:
    @pytest.mark.parametrize(
        "raw,expected",
        [(None, 0.0), ("", 0.0), ("R90", 90.0), ("R0", 0.0), ("MR270", 270.0), ("SR45", 45.0),
         ("r180", 180.0), (30, 30.0)],
    )
    def test_valid(self, raw: object, expected: float) -> None:
        assert parse_rotation(raw) == expected

    def test_invalid(self) -> None:
        with pytest.raises(ValidationError, match="rot"):
            parse_rotation("Rfoo")


class TestWireRecord:
    def test_from_strings(self) -> None:
        wire = WireRecord.from_dict(
            {"x1": "1", "y1": "2", "x2": "3", "y2": "4", "width": "0.254", "layer": "1"}
        )
        assert wire == WireRecord(1.0, 2.0, 3.0, 4.0, 0.254, 1)

    def test_negative_width_accepted(self) -> None:
        wire = WireRecord.from_dict(
            {"x1": 0, "y1": 0, "x2": 1, "y2": 1, "width": -1, "layer": 2}
        )
        assert wire.width == -1.0

    def test_missing_attribute(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            WireRecord.from_dict({"x1": 0, "y1": 0, "x2": 1, "width": 1, "layer": 1})
        assert exc_info.value.field == "y2"

    def test_non_numeric(self) -> None:
        with pytest.raises(ValidationError, match="x1"):
            WireRecord.from_dict(
                {"x1": "abc", "y1": 0, "x2": 1, "y2": 1, "width": 1, "layer": 1}
            )

    def test_non_finite(self) -> None:
        with pytest.raises(ValidationError, match="finite"):
            WireRecord.from_dict(
                {"x1": "inf", "y1": 0, "x2": 1, "y2": 1, "width": 1, "layer": 1}
            )


class TestShapeRecords:
    def test_rectangle_rotation(self) -> None:
        rect = RectangleRecord.from_dict(
            {"x1": 1, "y1": 2, "x2": 4, "y2": 3, "layer": 1, "rot": "R90"}
        )
        assert rect.rotation == 90.0

    def test_rectangle_numeric_rotation(self) -> None:
        rect = RectangleRecord.from_dict(
            {"x1": 1, "y1": 2, "x2": 4, "y2": 3, "layer": 1, "rotation": 45}
        )
        assert rect.rotation == 45.0

    def test_polygon_vertices(self) -> None:
        poly = PolygonRecord.from_dict(
            {
                "layer": "1",
                "width": "2.54",
                "vertices": [{"x": "1", "y": "2", "curve": "45"}, {"x": "3", "y": "4"}],
            }
        )
        assert poly.layer == 1
        assert poly.width == 2.54
        assert [(v.x, v.y, v.curve) for v in poly.vertices] == [(1, 2, 45), (3, 4, 0)]

    def test_polygon_vertices_must_be_list(self) -> None:
        with pytest.raises(ValidationError):
            PolygonRecord.from_dict({"layer": 1, "vertices": "nope"})

    def test_circle_defaults(self) -> None:
        circle = CircleRecord.from_dict({"x": 1, "y": 2, "radius": 3.5, "layer": 1})
        assert circle.width == 0.0

    def test_circle_radius_positive(self) -> None:
        with pytest.raises(ValidationError, match="radius"):
            CircleRecord.from_dict({"x": 1, "y": 2, "radius": 0, "layer": 1})

    def test_hole(self) -> None:
        assert HoleRecord.from_dict({"x": 1, "y": 2, "drill": "3.5"}) == HoleRecord(1, 2, 3.5)

    def test_layer_must_be_integer(self) -> None:
        with pytest.raises(ValidationError, match="layer"):
            CircleRecord.from_dict({"x": 1, "y": 2, "radius": 1, "layer": 1.5})


class TestPadRecords:
    def test_tht_defaults(self) -> None:
        pad = ThtPadRecord.from_dict({"name": "P$1", "x": 1, "y": 2, "drill": 1.5})
        assert pad.shape == "round"
        assert pad.diameter is None
        assert pad.rotation == 0.0

    def test_tht_shape_normalized(self) -> None:
        pad = ThtPadRecord.from_dict({"name": "1", "x": 0, "y": 0, "drill": 1, "shape": "Square"})
        assert pad.shape == "square"

    def test_tht_unknown_shape(self) -> None:
        with pytest.raises(ValidationError, match="shape"):
            ThtPadRecord.from_dict({"name": "1", "x": 0, "y": 0, "drill": 1, "shape": "star"})

    def test_smd(self) -> None:
        pad = SmtPadRecord.from_dict(
            {"name": "P$1", "x": 1, "y": 2, "dx": 3, "dy": 4, "layer": 16, "rot": "R90"}
        )
        assert pad.layer == 16
        assert pad.rotation == 90.0
        assert pad.roundness == 0.0

    def test_smd_layer_restricted(self) -> None:
        with pytest.raises(ValidationError, match="layer 1 or 16"):
            SmtPadRecord.from_dict({"name": "1", "x": 0, "y": 0, "dx": 1, "dy": 1, "layer": 21})

    def test_smd_roundness_bounded(self) -> None:
        with pytest.raises(ValidationError, match="roundness"):
            SmtPadRecord.from_dict(
                {"name": "1", "x": 0, "y": 0, "dx": 1, "dy": 1, "layer": 1, "roundness": 150}
            )


class TestTextAndPinRecords:
    def test_text(self) -> None:
        text = TextRecord.from_dict({"value": ">NAME", "x": 1, "y": 2, "size": 3, "layer": 25})
        assert text == TextRecord(">NAME", 1, 2, 25, 3.0, 0.0)

    def test_text_missing_value(self) -> None:
        assert TextRecord.from_dict({"x": 0, "y": 0, "layer": 25}).value == ""

    def test_pin_default_length(self) -> None:
        assert PinRecord.from_dict({"name": "A", "x": 0, "y": 0}).length == "long"

    def test_pin_invalid_length(self) -> None:
        with pytest.raises(ValidationError, match="length"):
            PinRecord.from_dict({"name": "A", "x": 0, "y": 0, "length": "huge"})
