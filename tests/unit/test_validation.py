"""Tests for input validation (validation.py)."""

from __future__ import annotations

import math

from eagle_mcp.validation import (
    validate_dimension,
    validate_keyword,
    validate_layer_id,
    validate_number,
    validate_positive,
    validate_text,
)


class TestValidateNumber:
    def test_float(self) -> None:
        assert validate_number(1.5).value == 1.5

    def test_string(self) -> None:
        assert validate_number("-2.54").value == -2.54

    def test_invalid(self) -> None:
        result = validate_number("abc", "x")
        assert not result.valid
        assert "x must be a number" in (result.error or "")

    def test_bool_rejected(self) -> None:
        assert not validate_number(True).valid

    def test_nan_rejected(self) -> None:
        assert not validate_number(math.nan).valid
        assert not validate_number("-inf").valid


class TestValidateDimensions:
    def test_dimension_allows_zero(self) -> None:
        assert validate_dimension(0).valid
        assert not validate_dimension(-0.1).valid

    def test_positive_rejects_zero(self) -> None:
        assert validate_positive(0.1).valid
        assert not validate_positive(0).valid


class TestValidateLayerId:
    def test_int_and_string(self) -> None:
        assert validate_layer_id(16).value == 16
        assert validate_layer_id("94").value == 94

    def test_integral_float(self) -> None:
        assert validate_layer_id(21.0).value == 21

    def test_invalid(self) -> None:
        assert not validate_layer_id(1.5).valid
        assert not validate_layer_id("top").valid
        assert not validate_layer_id(False).valid


class TestValidateKeyword:
    def test_normalized(self) -> None:
        assert validate_keyword(" Long ", ("short", "long")).value == "long"

    def test_not_allowed(self) -> None:
        result = validate_keyword("huge", ("short", "long"), "length")
        assert not result.valid
        assert "short, long" in (result.error or "")

    def test_non_string(self) -> None:
        assert not validate_keyword(3, ("a",)).valid


class TestValidateText:
    def test_none_is_empty(self) -> None:
        assert validate_text(None).value == ""

    def test_non_string(self) -> None:
        assert not validate_text(42).valid
