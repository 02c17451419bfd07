"""Shared plumbing for tool handlers."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from ..exceptions import ValidationError

R = TypeVar("R")


def parse_records(
    items: list[Mapping[str, Any]] | None,
    factory: Callable[[Mapping[str, Any]], R],
    kind: str,
) -> list[R]:
    """Build records from attribute dicts, tagging errors with the item index."""
    records: list[R] = []
    for i, attrs in enumerate(items or []):
        if not isinstance(attrs, Mapping):
            raise ValidationError(f"{kind}[{i}] must be an object", field=kind, index=i)
        try:
            records.append(factory(attrs))
        except ValidationError as exc:
            raise ValidationError(
                f"{kind}[{i}]: {exc.message}", field=exc.field, kind=kind, index=i
            ) from exc
    return records
