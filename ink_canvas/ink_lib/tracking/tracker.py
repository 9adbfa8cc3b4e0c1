"""Pointer-to-stroke bookkeeping.

StrokeTracker keeps every stroke ever drawn on a multi-pointer surface
and decides which stroke a moving pointer extends. PenPath is the
degenerate single-pointer case: one running path made of sub-paths.

The association rule: for a pointer id, the most recently begun segment
with that id is the live one. Older segments with the same id are history
from an earlier gesture, because the input system reuses ids once a finger
lifts. Pointer-up changes nothing; a lifted pointer simply stops showing
up in move snapshots until a new pointer-down begins a fresh segment.
"""

from __future__ import annotations
import logging
from typing import Dict, Iterable, Iterator, List, Mapping, Sequence, Tuple, Union

from ..domain.geometry import ORIGIN, Point, Segment

_logger = logging.getLogger(__name__)

ActivePointers = Union[Mapping[int, Point], Iterable[Tuple[int, Point]]]


class StrokeTracker:
    """Ordered, append-only record of segments keyed by pointer id.

    Segments live in an arena in creation order: ``_ids`` holds each
    segment's pointer id and ``_points`` its point list. ``_latest`` maps
    each pointer id to the arena index of its most recent segment, which is
    the segment a newest-to-oldest scan of the arena would find first.
    Callers only ever see frozen Segment snapshots.

    Example:
        >>> tracker = StrokeTracker()
        >>> tracker.begin(1, Point(0, 0))
        >>> tracker.extend({1: Point(1, 1)})
        1
        >>> [p.to_tuple() for p in tracker.segments()[0]]
        [(0, 0), (1, 1)]
    """

    def __init__(self):
        self._ids: List[int] = []
        self._points: List[List[Point]] = []
        self._latest: Dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._ids)

    def begin(self, pointer_id: int, point: Point) -> None:
        """Start a new segment for ``pointer_id`` at ``point``.

        Reusing an id is expected; the new segment shadows older ones.
        """
        self._ids.append(pointer_id)
        self._points.append([point])
        self._latest[pointer_id] = len(self._ids) - 1

    def extend(self, active_pointers: ActivePointers) -> int:
        """Append each active pointer's point to its live segment.

        Args:
            active_pointers: Mapping or pairs of ``pointer_id -> point`` for
                every pointer currently down.

        Returns:
            Number of segments extended. Pointers without a segment are
            skipped, and each pointer extends at most one segment per call.
        """
        items = active_pointers.items() if isinstance(active_pointers, Mapping) else active_pointers
        consumed = set()
        extended = 0
        for pointer_id, point in items:
            if pointer_id in consumed:
                continue
            index = self._latest.get(pointer_id)
            if index is None:
                _logger.debug("no segment for pointer_id=%s, skipping", pointer_id)
                continue
            self._points[index].append(point)
            consumed.add(pointer_id)
            extended += 1
        return extended

    def end(self, pointer_id: int) -> None:
        """Note that ``pointer_id`` lifted. The segment list is unchanged."""
        index = self._latest.get(pointer_id)
        points = len(self._points[index]) if index is not None else 0
        _logger.debug("pointer up, pointer_id=%s, points=%d", pointer_id, points)

    def segments(self) -> Sequence[Segment]:
        """Snapshots of all segments in creation order.

        Each call builds fresh frozen Segments, so later moves never change
        a sequence that was already returned.
        """
        return tuple(Segment(pid, tuple(pts)) for pid, pts in zip(self._ids, self._points))

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments())

    def clear(self) -> None:
        self._ids.clear()
        self._points.clear()
        self._latest.clear()


class PenPath:
    """A single running path, the way a host toolkit path accumulates.

    ``move_to`` opens a new sub-path and ``line_to`` appends to the last
    one. A ``line_to`` on an empty path opens a sub-path at the origin
    first.
    """

    def __init__(self):
        self._subpaths: List[List[Point]] = []

    def __len__(self) -> int:
        return len(self._subpaths)

    @property
    def is_empty(self) -> bool:
        return not self._subpaths

    def move_to(self, point: Point) -> None:
        self._subpaths.append([point])

    def line_to(self, point: Point) -> None:
        if not self._subpaths:
            self._subpaths.append([ORIGIN])
        self._subpaths[-1].append(point)

    def subpaths(self) -> Sequence[Sequence[Point]]:
        return tuple(tuple(sp) for sp in self._subpaths)
