"""Domain objects for ink strokes.

Geometry classes:
    Point: Immutable 2D point.
    Segment: Read-only stroke tagged with the pointer id that drew it.

Example usage::

    from ink_lib.domain import Point, Segment

    seg = Segment(pointer_id=0, points=(Point(0, 0), Point(3, 4)))
    print(seg.to_dict())
"""

from .geometry import ORIGIN, Point, Segment

__all__ = ['Point', 'Segment', 'ORIGIN']
