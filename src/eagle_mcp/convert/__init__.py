"""EAGLE to native conversion: units, names, layers, shapes and wires."""

from .layers import try_convert_board_layer, try_convert_schematic_layer
from .names import (
    convert_component_name,
    convert_device_name,
    convert_element_description,
    convert_element_name,
    convert_gate_name,
    convert_pin_or_pad_name,
    convert_text_value,
)
from .shapes import (
    convert_circle,
    convert_hole,
    convert_polygon,
    convert_rectangle,
    convert_smt_pad,
    convert_symbol_pin,
    convert_tht_pad,
    convert_vertices,
    try_convert_board_text,
    try_convert_schematic_text,
)
from .units import convert_angle, convert_length, convert_point, convert_vertex
from .wires import convert_and_join_wires, join_segments

__all__ = [
    "convert_and_join_wires",
    "convert_angle",
    "convert_circle",
    "convert_component_name",
    "convert_device_name",
    "convert_element_description",
    "convert_element_name",
    "convert_gate_name",
    "convert_hole",
    "convert_length",
    "convert_pin_or_pad_name",
    "convert_point",
    "convert_polygon",
    "convert_rectangle",
    "convert_smt_pad",
    "convert_symbol_pin",
    "convert_text_value",
    "convert_tht_pad",
    "convert_vertex",
    "convert_vertices",
    "join_segments",
    "try_convert_board_layer",
    "try_convert_board_text",
    "try_convert_schematic_layer",
    "try_convert_schematic_text",
]
