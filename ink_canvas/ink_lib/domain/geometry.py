"""Geometric value objects for ink strokes."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Tuple


@dataclass(frozen=True)
class Point:
    """Immutable 2D point."""
    x: float
    y: float

    def to_tuple(self) -> Tuple[float, float]:
        """Convert to tuple for compatibility."""
        return (self.x, self.y)

    def to_list(self) -> List[float]:
        """Convert to list for JSON serialization."""
        return [float(self.x), float(self.y)]


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class Segment:
    """A continuous stroke drawn by one pointer between its down and up.

    Segments handed out by a tracker are read-only snapshots; only the
    tracker appends points. Several segments may carry the same
    ``pointer_id`` because the input system reuses ids once a finger lifts.
    """
    pointer_id: int
    points: Tuple[Point, ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, idx) -> Point:
        return self.points[idx]

    def to_dict(self) -> dict:
        """Convert to dict for JSON serialization."""
        return {
            'pointer_id': self.pointer_id,
            'points': [p.to_list() for p in self.points],
        }
