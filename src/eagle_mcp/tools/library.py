"""Library element tools: pads, texts and symbol pins."""

from __future__ import annotations

from typing import Any

from ..convert import shapes
from ..exceptions import EagleMcpError, UnknownElementError
from ..logging_config import conversion_batch
from ..schema.records import PinRecord, SmtPadRecord, TextRecord, ThtPadRecord
from .helpers import parse_records
from .registry import register_tool


def _convert_pads_handler(
    pads: list[dict[str, Any]] | None = None,
    smds: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Convert through-hole and SMD pads into package/footprint pad pairs.

    Args:
        pads: THT pad attributes (name, x, y, drill, diameter, shape, rot).
        smds: SMD pad attributes (name, x, y, dx, dy, layer, roundness, rot).
    """
    with conversion_batch():
        try:
            tht = parse_records(pads, ThtPadRecord.from_dict, "pads")
            smt = parse_records(smds, SmtPadRecord.from_dict, "smds")
        except EagleMcpError as exc:
            return exc.to_dict()
        pairs = [shapes.convert_tht_pad(p) for p in tht]
        pairs += [shapes.convert_smt_pad(p) for p in smt]
    return {
        "count": len(pairs),
        "package_pads": [pkg.to_dict() for pkg, _ in pairs],
        "footprint_pads": [fpt.to_dict() for _, fpt in pairs],
    }


def _convert_texts_handler(texts: list[dict[str, Any]], target: str = "board") -> dict[str, Any]:
    """Convert texts with the fixed house style; unmapped layers are skipped.

    Args:
        texts: Text attributes (value, x, y, size, layer, rot).
        target: 'board' (footprint texts) or 'schematic' (symbol texts).
    """
    converters = {
        "board": shapes.try_convert_board_text,
        "schematic": shapes.try_convert_schematic_text,
    }
    if target not in converters:
        return UnknownElementError(f"Unknown text target {target!r}", kind=target).to_dict()
    with conversion_batch():
        try:
            records = parse_records(texts, TextRecord.from_dict, "texts")
        except EagleMcpError as exc:
            return exc.to_dict()
        converted = []
        skipped = []
        for i, record in enumerate(records):
            text = converters[target](record)
            if text is None:
                skipped.append({"index": i, "layer": record.layer})
            else:
                converted.append(text.to_dict())
    return {"target": target, "texts": converted, "skipped": skipped}


def _convert_pins_handler(pins: list[dict[str, Any]]) -> dict[str, Any]:
    """Convert symbol pins.

    Args:
        pins: Pin attributes (name, x, y, length, rot).
    """
    with conversion_batch():
        try:
            records = parse_records(pins, PinRecord.from_dict, "pins")
        except EagleMcpError as exc:
            return exc.to_dict()
        converted = [shapes.convert_symbol_pin(p) for p in records]
    return {"count": len(converted), "pins": [p.to_dict() for p in converted]}


register_tool(
    name="convert_pads",
    description=(
        "Convert EAGLE THT pads and SMDs to package pads and footprint pads."
        " Pad names are sanitized, THT pads default to 1.5x drill diameter."
    ),
    handler=_convert_pads_handler,
    category="library",
)

register_tool(
    name="convert_texts",
    description=(
        "Convert EAGLE texts to stroke texts using the fixed house style."
        " Texts on layers without a native equivalent are reported in 'skipped'."
    ),
    handler=_convert_texts_handler,
    category="library",
)

register_tool(
    name="convert_pins",
    description="Convert EAGLE symbol pins (name, position, length keyword, rotation).",
    handler=_convert_pins_handler,
    category="library",
)
