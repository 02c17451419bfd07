"""Name tools: sanitize EAGLE names and look up layer ids."""

from __future__ import annotations

from typing import Any

from ..convert import layers, names
from ..exceptions import EagleMcpError, UnknownElementError, ValidationError
from ..logging_config import conversion_batch
from ..validation import validate_layer_id
from .registry import register_tool

_NAME_CONVERTERS = {
    "element": names.convert_element_name,
    "description": names.convert_element_description,
    "component": names.convert_component_name,
    "gate": names.convert_gate_name,
    "pin": names.convert_pin_or_pad_name,
    "pad": names.convert_pin_or_pad_name,
    "text": names.convert_text_value,
}


def _sanitize_name_handler(kind: str, raw: str, suffix: str = "") -> dict[str, Any]:
    """Sanitize a name of the given kind.

    Args:
        kind: element, description, component, device, gate, pin, pad or text.
        raw: The name as found in the EAGLE file.
        suffix: Device (package variant) name, only used for kind 'device'.
    """
    with conversion_batch():
        try:
            if kind == "device":
                name = names.convert_device_name(raw, suffix)
            elif kind in _NAME_CONVERTERS:
                name = _NAME_CONVERTERS[kind](raw)
            else:
                raise UnknownElementError(f"Unknown name kind {kind!r}", kind=kind)
        except EagleMcpError as exc:
            return exc.to_dict()
    return {"kind": kind, "raw": raw, "name": name}


def _lookup_layer_handler(layer: int, target: str = "board") -> dict[str, Any]:
    """Look up the native layer for an EAGLE layer id.

    Args:
        layer: EAGLE layer id (e.g. 1 = top copper, 94 = symbols).
        target: 'board' or 'schematic'.
    """
    result = validate_layer_id(layer)
    if not result.valid:
        message = result.error or "Invalid layer id"
        return ValidationError(message, field="layer").to_dict()
    if target == "board":
        native = layers.try_convert_board_layer(result.value)
    elif target == "schematic":
        native = layers.try_convert_schematic_layer(result.value)
    else:
        return UnknownElementError(f"Unknown layer target {target!r}", kind=target).to_dict()
    return {
        "layer": result.value,
        "target": target,
        "mapped": native is not None,
        "native": native.to_dict() if native is not None else None,
    }


register_tool(
    name="sanitize_name",
    description=(
        "Normalize an EAGLE name into a valid native identifier."
        " Kinds: element, description, component, device, gate, pin, pad, text."
    ),
    handler=_sanitize_name_handler,
    category="names",
)

register_tool(
    name="lookup_layer",
    description="Map an EAGLE layer id to its native board or schematic layer, if any.",
    handler=_lookup_layer_handler,
    category="names",
)
