"""Tests for fixed-point unit conversion (convert/units.py, schema/common.py)."""

from __future__ import annotations

import pytest

from eagle_mcp.convert.units import convert_angle, convert_length, convert_point, convert_vertex
from eagle_mcp.schema.common import DEG90, DEG180, Point, Vertex, round_half_away
from eagle_mcp.schema.records import VertexRecord


class TestRoundHalfAway:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (0.0, 0),
            (0.49999999999999994, 0),
            (-0.49999999999999994, 0),
            (0.5, 1),
            (-0.5, -1),
            (2.5, 3),
            (-2.5, -3),
            (1.4, 1),
            (-1.6, -2),
        ],
    )
    def test_ties_away_from_zero(self, value: float, expected: int) -> None:
        assert round_half_away(value) == expected

    def test_large_odd_integers_unchanged(self) -> None:
        assert round_half_away(float(2**53 - 1)) == 2**53 - 1
        assert round_half_away(-float(2**53 - 1)) == -(2**53 - 1)


class TestConvertLength:
    def test_zero(self) -> None:
        assert convert_length(0) == 0

    def test_positive(self) -> None:
        assert convert_length(1.234567) == 1234567

    def test_negative(self) -> None:
        assert convert_length(-1.234567) == -1234567

    def test_grid_values(self) -> None:
        assert convert_length(2.54) == 2540000
        assert convert_length(0.254) == 254000
        assert convert_length(-6.35) == -6350000

    def test_returns_int(self) -> None:
        assert isinstance(convert_length(1.5), int)


class TestConvertAngle:
    def test_zero(self) -> None:
        assert convert_angle(0) == 0

    def test_sign_preserved(self) -> None:
        assert convert_angle(1.234567) == 1234567
        assert convert_angle(-1.234567) == -1234567

    def test_right_angle(self) -> None:
        assert convert_angle(90) == DEG90
        assert convert_angle(-180) == -DEG180


class TestConvertPoint:
    def test_origin(self) -> None:
        assert convert_point(0, 0) == Point(0, 0)

    def test_componentwise(self) -> None:
        assert convert_point(-1.234567, 1.234567) == Point(-1234567, 1234567)


class TestConvertVertex:
    def test_straight(self) -> None:
        assert convert_vertex(VertexRecord(0, 0)) == Vertex(Point(0, 0), 0)

    def test_curve_becomes_bulge(self) -> None:
        vertex = convert_vertex(VertexRecord(-6.35, 2.54, curve=90))
        assert vertex == Vertex(Point(-6350000, 2540000), 90000000)


class TestPointRotation:
    def test_quarter_turns_are_exact(self) -> None:
        p = Point(1000, 0)
        assert p.rotated(DEG90) == Point(0, 1000)
        assert p.rotated(DEG180) == Point(-1000, 0)
        assert p.rotated(3 * DEG90) == Point(0, -1000)
        assert p.rotated(-DEG90) == Point(0, -1000)

    def test_full_turn_is_identity(self) -> None:
        p = Point(123, -456)
        assert p.rotated(4 * DEG90) == p

    def test_around_center(self) -> None:
        assert Point(1000000, 2000000).rotated(DEG90, Point(2500000, 2500000)) == Point(
            3000000, 1000000
        )

    def test_arbitrary_angle_rounds_to_grid(self) -> None:
        assert Point(1000000, 0).rotated(45000000) == Point(707107, 707107)
