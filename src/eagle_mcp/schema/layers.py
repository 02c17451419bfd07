"""Native layer identifiers and the fixed EAGLE layer-id tables."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

INNER_COPPER_COUNT = 14


@dataclass(frozen=True)
class Layer:
    """A native layer, identified by its stable string id."""

    id: str
    name: str

    @property
    def is_copper(self) -> bool:
        return self.id.endswith("_cu")

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}


# Schematic layers
SYMBOL_OUTLINES = Layer("sym_outlines", "Outlines")
SYMBOL_NAMES = Layer("sym_names", "Names")
SYMBOL_VALUES = Layer("sym_values", "Values")
SYMBOL_PIN_NAMES = Layer("sym_pin_names", "Pin Names")
SCHEMATIC_DOCUMENTATION = Layer("schematic_documentation", "Documentation")
SCHEMATIC_GUIDE = Layer("schematic_guide", "Guide")

# Board layers
BOARD_OUTLINES = Layer("brd_outlines", "Board Outlines")
BOARD_CUTOUTS = Layer("brd_cutouts", "Board Cutouts")
BOARD_MEASURES = Layer("brd_measures", "Measures")
BOARD_DOCUMENTATION = Layer("brd_documentation", "Documentation")
TOP_COPPER = Layer("top_cu", "Top Copper")
BOT_COPPER = Layer("bot_cu", "Bottom Copper")
TOP_LEGEND = Layer("top_legend", "Top Legend")
BOT_LEGEND = Layer("bot_legend", "Bottom Legend")
TOP_NAMES = Layer("top_names", "Top Names")
BOT_NAMES = Layer("bot_names", "Bottom Names")
TOP_VALUES = Layer("top_values", "Top Values")
BOT_VALUES = Layer("bot_values", "Bottom Values")
TOP_STOP_MASK = Layer("top_stop_mask", "Top Stop Mask")
BOT_STOP_MASK = Layer("bot_stop_mask", "Bottom Stop Mask")
TOP_SOLDER_PASTE = Layer("top_solder_paste", "Top Solder Paste")
BOT_SOLDER_PASTE = Layer("bot_solder_paste", "Bottom Solder Paste")
TOP_GLUE = Layer("top_glue", "Top Glue")
BOT_GLUE = Layer("bot_glue", "Bottom Glue")
TOP_COURTYARD = Layer("top_courtyard", "Top Courtyard")
BOT_COURTYARD = Layer("bot_courtyard", "Bottom Courtyard")
TOP_DOCUMENTATION = Layer("top_documentation", "Top Documentation")
BOT_DOCUMENTATION = Layer("bot_documentation", "Bottom Documentation")


def inner_copper(number: int) -> Layer:
    """Inner copper layer ``number`` (1-indexed)."""
    if not 1 <= number <= INNER_COPPER_COUNT:
        raise ValueError(f"Inner copper layer {number} out of range 1..{INNER_COPPER_COUNT}")
    return Layer(f"in{number}_cu", f"Inner Copper {number}")


SCHEMATIC_LAYERS: MappingProxyType[int, Layer] = MappingProxyType(
    {
        93: SYMBOL_PIN_NAMES,  # Pins
        94: SYMBOL_OUTLINES,  # Symbols
        95: SYMBOL_NAMES,  # Names
        96: SYMBOL_VALUES,  # Values
        97: SCHEMATIC_DOCUMENTATION,  # Info
        98: SCHEMATIC_GUIDE,  # Guide
    }
)

BOARD_LAYERS: MappingProxyType[int, Layer] = MappingProxyType(
    {
        1: TOP_COPPER,
        **{eagle_id: inner_copper(eagle_id - 1) for eagle_id in range(2, 16)},
        16: BOT_COPPER,
        20: BOARD_OUTLINES,  # Dimension
        21: TOP_LEGEND,  # tPlace
        22: BOT_LEGEND,  # bPlace
        25: TOP_NAMES,
        26: BOT_NAMES,
        27: TOP_VALUES,
        28: BOT_VALUES,
        29: TOP_STOP_MASK,
        30: BOT_STOP_MASK,
        31: TOP_SOLDER_PASTE,  # tCream
        32: BOT_SOLDER_PASTE,  # bCream
        35: TOP_GLUE,
        36: BOT_GLUE,
        39: TOP_COURTYARD,  # tKeepout
        40: BOT_COURTYARD,  # bKeepout
        46: BOARD_CUTOUTS,  # Milling
        47: BOARD_MEASURES,
        48: BOARD_DOCUMENTATION,  # Document
        49: BOARD_DOCUMENTATION,  # Reference
        51: TOP_DOCUMENTATION,  # tDocu
        52: BOT_DOCUMENTATION,  # bDocu
    }
)
