"""Global constants for the EAGLE import MCP server."""

# Unit scaling
NANOMETERS_PER_MM = 1_000_000
"""Fixed-point length units per foreign millimeter."""

MICRODEGREES_PER_DEGREE = 1_000_000
"""Fixed-point angle units per foreign degree."""

# Name sanitizing
UNNAMED = "Unnamed"
"""Fallback label for names that end up empty."""

NAME_SEPARATORS = "-_"
"""Characters accepted as separators between device name and suffix."""

# Text placeholders
TEXT_PLACEHOLDERS = {
    ">NAME": "{{NAME}}",
    ">VALUE": "{{VALUE}}",
}
"""Reserved foreign value tokens and their native attribute placeholders."""

# House style for imported texts (nanometers)
SCHEMATIC_TEXT_HEIGHT = 2_500_000
BOARD_TEXT_HEIGHT = 1_000_000
BOARD_TEXT_STROKE_WIDTH = 200_000

# Pads
THT_PAD_DIAMETER_FACTOR = 1.5
"""Pad diameter relative to the drill when no diameter is given."""

# Symbol pin lengths (nanometers)
PIN_LENGTHS = {
    "point": 0,
    "short": 2_540_000,
    "middle": 5_080_000,
    "long": 7_620_000,
}
DEFAULT_PIN_LENGTH = "long"
