"""Join loose EAGLE wires into continuous paths.

Wires are partitioned by ``(layer, width)``; inside a partition each chain
is seeded with the first unused wire and grown at its tail, then at its
head, with unused wires sharing the exact (converted) endpoint.
"""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Sequence

from ..logging_config import create_logger
from ..schema.common import Length, Point, Vertex
from ..schema.library import Primitive
from ..schema.records import WireRecord
from .units import convert_length, convert_point

logger = create_logger(__name__)

Segment = tuple[Point, Point]


class _EndpointIndex:
    """Unused segments by endpoint, for one partition."""

    def __init__(self, segments: Sequence[Segment]):
        self._segments = segments
        self._consumed = [False] * len(segments)
        self._by_point: dict[Point, list[int]] = defaultdict(list)
        for i, (a, b) in enumerate(segments):
            self._by_point[a].append(i)
            if b != a:
                self._by_point[b].append(i)

    def consume(self, i: int) -> bool:
        if self._consumed[i]:
            return False
        self._consumed[i] = True
        return True

    def take(self, point: Point) -> Point | None:
        """Consume an unused segment touching ``point`` and return its far end."""
        for i in self._by_point.get(point, ()):
            if self.consume(i):
                a, b = self._segments[i]
                return b if a == point else a
        return None


def join_segments(segments: Sequence[Segment]) -> list[list[Point]]:
    """Merge connected segments into maximal point chains.

    Every segment ends up in exactly one chain. A chain stops growing once
    it returns to its start point.
    """
    index = _EndpointIndex(segments)
    chains: list[list[Point]] = []
    for seed, (a, b) in enumerate(segments):
        if not index.consume(seed):
            continue
        chain = deque([a, b])
        while not (len(chain) > 2 and chain[0] == chain[-1]):
            tail = index.take(chain[-1])
            if tail is not None:
                chain.append(tail)
                continue
            head = index.take(chain[0])
            if head is not None:
                chain.appendleft(head)
                continue
            break
        chains.append(list(chain))
    return chains


def convert_and_join_wires(
    wires: Iterable[WireRecord],
    grab_area: bool,
    errors: list[str] | None = None,
) -> list[Primitive]:
    """Convert wires to unfilled straight paths, joining connected ones.

    Wires with a non-positive width are skipped and reported through
    ``errors`` (if given); they never abort the batch.
    """
    partitions: dict[tuple[int, Length], list[Segment]] = defaultdict(list)
    rejected = 0
    for wire in wires:
        width = convert_length(wire.width)
        if width <= 0:
            message = f"Wire on layer {wire.layer} has invalid width {wire.width} mm, ignored."
            logger.warning(message)
            if errors is not None:
                errors.append(message)
            rejected += 1
            continue
        partitions[(wire.layer, width)].append(
            (convert_point(wire.x1, wire.y1), convert_point(wire.x2, wire.y2))
        )

    primitives = []
    for (layer_id, width), segments in sorted(partitions.items()):
        for chain in join_segments(segments):
            primitives.append(
                Primitive(
                    layer_id=layer_id,
                    line_width=width,
                    filled=False,
                    grab_area=grab_area,
                    path=tuple(Vertex(p) for p in chain),
                )
            )
    logger.debug(
        "Joined %d wire(s) in %d partition(s) into %d path(s), %d rejected",
        sum(len(s) for s in partitions.values()),
        len(partitions),
        len(primitives),
        rejected,
    )
    return primitives
