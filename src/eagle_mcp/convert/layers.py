"""Foreign layer id lookup; ``None`` means "no mapping", never an error."""

from __future__ import annotations

from ..logging_config import create_logger
from ..schema.layers import BOARD_LAYERS, SCHEMATIC_LAYERS, Layer

logger = create_logger(__name__)


def try_convert_schematic_layer(layer_id: int) -> Layer | None:
    layer = SCHEMATIC_LAYERS.get(layer_id)
    if layer is None:
        logger.debug("No schematic layer for EAGLE layer %d", layer_id)
    return layer


def try_convert_board_layer(layer_id: int) -> Layer | None:
    layer = BOARD_LAYERS.get(layer_id)
    if layer is None:
        logger.debug("No board layer for EAGLE layer %d", layer_id)
    return layer
