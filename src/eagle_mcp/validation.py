"""Input validation utilities for foreign attribute records.

Provides validation for the attribute types found on EAGLE elements:
- Coordinates and angles (finite floats, mm / degrees)
- Dimensions (non-negative or positive floats, mm)
- Layer ids (integers)
- Keywords (one of a fixed set of strings)
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass
class ValidationResult:
    """Result of a validation operation."""

    valid: bool
    value: Any = None
    error: str | None = None

    @classmethod
    def success(cls, value: Any = None) -> ValidationResult:
        return cls(valid=True, value=value)

    @classmethod
    def failure(cls, error: str) -> ValidationResult:
        return cls(valid=False, error=error)


def validate_number(value: Any, name: str = "value") -> ValidationResult:
    """Validate a finite number (coordinates, angles, curves).

    Strings are accepted since parsed attributes usually arrive as text.

    Args:
        value: The value to validate.
        name: The parameter name for error messages.

    Returns:
        ValidationResult with the validated float or error.
    """
    if isinstance(value, bool):
        return ValidationResult.failure(f"{name} must be a number, got bool")
    try:
        number = float(value)
    except (TypeError, ValueError):
        return ValidationResult.failure(f"{name} must be a number, got {value!r}")

    if not math.isfinite(number):
        return ValidationResult.failure(f"{name} must be finite, got {number}")

    return ValidationResult.success(number)


def validate_dimension(value: Any, name: str = "dimension") -> ValidationResult:
    """Validate a dimension (must be >= 0)."""
    result = validate_number(value, name)
    if not result.valid:
        return result
    if result.value < 0:
        return ValidationResult.failure(f"{name} must be >= 0, got {result.value}")
    return result


def validate_positive(value: Any, name: str = "dimension") -> ValidationResult:
    """Validate a strictly positive dimension (drills, pad sizes)."""
    result = validate_number(value, name)
    if not result.valid:
        return result
    if result.value <= 0:
        return ValidationResult.failure(f"{name} must be > 0, got {result.value}")
    return result


def validate_layer_id(value: Any, name: str = "layer") -> ValidationResult:
    """Validate a foreign layer id (integer, possibly given as text)."""
    if isinstance(value, bool):
        return ValidationResult.failure(f"{name} must be an integer, got bool")
    if isinstance(value, float):
        if not value.is_integer():
            return ValidationResult.failure(f"{name} must be an integer, got {value}")
        return ValidationResult.success(int(value))
    try:
        return ValidationResult.success(int(value))
    except (TypeError, ValueError):
        return ValidationResult.failure(f"{name} must be an integer, got {value!r}")


def validate_keyword(
    value: Any, allowed: Iterable[str], name: str = "keyword"
) -> ValidationResult:
    """Validate a keyword attribute against a fixed set (case-insensitive)."""
    allowed = tuple(allowed)
    if not isinstance(value, str):
        return ValidationResult.failure(f"{name} must be a string, got {type(value).__name__}")
    keyword = value.strip().lower()
    if keyword not in allowed:
        return ValidationResult.failure(
            f"{name} must be one of {', '.join(allowed)}, got {value!r}"
        )
    return ValidationResult.success(keyword)


def validate_text(value: Any, name: str = "text") -> ValidationResult:
    """Validate a free-text attribute; ``None`` becomes the empty string."""
    if value is None:
        return ValidationResult.success("")
    if not isinstance(value, str):
        return ValidationResult.failure(f"{name} must be a string, got {type(value).__name__}")
    return ValidationResult.success(value)
