"""Per-primitive conversion of EAGLE geometry into native elements."""

from __future__ import annotations

from collections.abc import Sequence

from ..constants import (
    BOARD_TEXT_HEIGHT,
    BOARD_TEXT_STROKE_WIDTH,
    DEFAULT_PIN_LENGTH,
    PIN_LENGTHS,
    SCHEMATIC_TEXT_HEIGHT,
    THT_PAD_DIAMETER_FACTOR,
)
from ..logging_config import create_logger
from ..schema.common import DEG180, Alignment, Circle, HAlign, Path, Point, VAlign, Vertex
from ..schema.layers import Layer
from ..schema.library import (
    ComponentSide,
    FootprintPad,
    Hole,
    PackagePad,
    PadHole,
    PadShape,
    Primitive,
    StrokeText,
    SymbolPin,
)
from ..schema.records import (
    CircleRecord,
    HoleRecord,
    PinRecord,
    PolygonRecord,
    RectangleRecord,
    SmtPadRecord,
    TextRecord,
    ThtPadRecord,
    VertexRecord,
)
from .layers import try_convert_board_layer, try_convert_schematic_layer
from .names import convert_pin_or_pad_name, convert_text_value
from .units import convert_angle, convert_length, convert_point, convert_vertex

logger = create_logger(__name__)

# shape keyword -> (shape, corner radius ratio, width factor)
_THT_PAD_SHAPES: dict[str, tuple[PadShape, float, int]] = {
    "square": (PadShape.ROUNDED_RECT, 0.0, 1),
    "round": (PadShape.ROUNDED_RECT, 1.0, 1),
    "octagon": (PadShape.ROUNDED_OCTAGON, 0.0, 1),
    "long": (PadShape.ROUNDED_RECT, 1.0, 2),
}


def convert_vertices(vertices: Sequence[VertexRecord], close_to_first: bool) -> Path:
    """Convert vertices keeping their curves; optionally close the path."""
    path = [convert_vertex(v) for v in vertices]
    if close_to_first and path:
        path.append(Vertex(path[0].pos))
    return tuple(path)


def convert_rectangle(rect: RectangleRecord, grab_area: bool) -> Primitive:
    """Rectangles are always filled, optionally rotated about their center."""
    corners = [
        convert_point(rect.x1, rect.y1),
        convert_point(rect.x2, rect.y1),
        convert_point(rect.x2, rect.y2),
        convert_point(rect.x1, rect.y2),
    ]
    rotation = convert_angle(rect.rotation)
    if rotation:
        first, opposite = corners[0], corners[2]
        center = Point(_midpoint(first.x, opposite.x), _midpoint(first.y, opposite.y))
        corners = [c.rotated(rotation, center) for c in corners]
    path = tuple(Vertex(c) for c in [*corners, corners[0]])
    return Primitive(
        layer_id=rect.layer,
        line_width=0,
        filled=True,
        grab_area=grab_area,
        path=path,
    )


def _midpoint(a: int, b: int) -> int:
    """Integer midpoint, truncated toward zero."""
    total = a + b
    return total // 2 if total >= 0 else -(-total // 2)


def convert_polygon(polygon: PolygonRecord, grab_area: bool) -> Primitive:
    return Primitive(
        layer_id=polygon.layer,
        line_width=convert_length(polygon.width),
        filled=True,
        grab_area=grab_area,
        path=convert_vertices(polygon.vertices, True),
    )


def convert_circle(circle: CircleRecord, grab_area: bool) -> Primitive:
    """Convert a circle; zero line width means a filled disc.

    The path is two half circles so no consumer has to deal with a single
    360 degree arc; :attr:`Primitive.circle` carries the exact shape.
    """
    center = convert_point(circle.x, circle.y)
    radius = convert_length(circle.radius)
    line_width = convert_length(circle.width)
    first = Point(center.x + radius, center.y)
    path = (
        Vertex(first, -DEG180),
        Vertex(Point(center.x - radius, center.y), -DEG180),
        Vertex(first),
    )
    return Primitive(
        layer_id=circle.layer,
        line_width=line_width,
        filled=line_width == 0,
        grab_area=grab_area,
        path=path,
        circle=Circle(center, 2 * radius),
    )


def convert_hole(hole: HoleRecord) -> Hole:
    return Hole(
        diameter=convert_length(hole.drill),
        path=(Vertex(convert_point(hole.x, hole.y)),),
    )


def convert_tht_pad(pad: ThtPadRecord) -> tuple[PackagePad, FootprintPad]:
    """Convert a through-hole pad into a package pad and its footprint pad."""
    keyword = pad.shape.strip().lower()
    if keyword not in _THT_PAD_SHAPES:
        logger.warning("Unknown pad shape %r on pad %r, using 'round'", pad.shape, pad.name)
        keyword = "round"
    shape, radius, width_factor = _THT_PAD_SHAPES[keyword]
    drill = convert_length(pad.drill)
    if pad.diameter:
        size = convert_length(pad.diameter)
    else:
        size = convert_length(pad.drill * THT_PAD_DIAMETER_FACTOR)
    package_pad = PackagePad(name=convert_pin_or_pad_name(pad.name))
    footprint_pad = FootprintPad(
        package_pad_uuid=package_pad.uuid,
        position=convert_point(pad.x, pad.y),
        rotation=convert_angle(pad.rotation),
        shape=shape,
        width=size * width_factor,
        height=size,
        radius=radius,
        component_side=ComponentSide.TOP,
        holes=(PadHole(diameter=drill),),
    )
    return package_pad, footprint_pad


def convert_smt_pad(pad: SmtPadRecord) -> tuple[PackagePad, FootprintPad]:
    """Convert an SMD pad; layer 16 places it on the bottom side."""
    side = ComponentSide.BOTTOM if pad.layer == 16 else ComponentSide.TOP
    package_pad = PackagePad(name=convert_pin_or_pad_name(pad.name))
    footprint_pad = FootprintPad(
        package_pad_uuid=package_pad.uuid,
        position=convert_point(pad.x, pad.y),
        rotation=convert_angle(pad.rotation),
        shape=PadShape.ROUNDED_RECT,
        width=convert_length(pad.dx),
        height=convert_length(pad.dy),
        radius=pad.roundness / 100,
        component_side=side,
    )
    return package_pad, footprint_pad


def _convert_text(text: TextRecord, layer: Layer, **style: object) -> StrokeText:
    return StrokeText(
        layer=layer,
        text=convert_text_value(text.value),
        position=convert_point(text.x, text.y),
        rotation=convert_angle(text.rotation),
        align=Alignment(HAlign.LEFT, VAlign.BOTTOM),
        **style,  # type: ignore[arg-type]
    )


def try_convert_schematic_text(text: TextRecord) -> StrokeText | None:
    """Convert a symbol text with the schematic house style, if its layer maps."""
    layer = try_convert_schematic_layer(text.layer)
    if layer is None:
        return None
    return _convert_text(text, layer, height=SCHEMATIC_TEXT_HEIGHT)


def try_convert_board_text(text: TextRecord) -> StrokeText | None:
    """Convert a footprint text with the board house style, if its layer maps."""
    layer = try_convert_board_layer(text.layer)
    if layer is None:
        return None
    return _convert_text(
        text,
        layer,
        height=BOARD_TEXT_HEIGHT,
        stroke_width=BOARD_TEXT_STROKE_WIDTH,
        letter_spacing=None,
        line_spacing=None,
        mirrored=False,
        auto_rotate=True,
    )


def convert_symbol_pin(pin: PinRecord) -> SymbolPin:
    keyword = pin.length.strip().lower() or DEFAULT_PIN_LENGTH
    if keyword not in PIN_LENGTHS:
        logger.warning(
            "Unknown pin length %r on pin %r, using %r", pin.length, pin.name, DEFAULT_PIN_LENGTH
        )
        keyword = DEFAULT_PIN_LENGTH
    return SymbolPin(
        name=convert_pin_or_pad_name(pin.name),
        position=convert_point(pin.x, pin.y),
        length=PIN_LENGTHS[keyword],
        rotation=convert_angle(pin.rotation),
    )
