"""Single-pen canvas: permanently stores and shows the traces of one pen."""

from __future__ import annotations
from typing import Iterator, Sequence

from ..domain.geometry import Point
from ..tracking.events import MotionAction, MotionEvent
from ..tracking.tracker import PenPath
from .surface import DrawingSurface


class CanvasView(DrawingSurface):
    """Surface that follows only the primary pointer.

    DOWN starts a new sub-path and MOVE extends it. Secondary pointers
    going down or up are ignored, as is UP.
    """

    kind = 'single'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.path = PenPath()

    def on_touch_event(self, event: MotionEvent) -> bool:
        point = Point(event.x, event.y)
        if event.action is MotionAction.DOWN:
            self.path.move_to(point)
        elif event.action is MotionAction.MOVE:
            self.path.line_to(point)
        self.invalidate()
        return True

    def polylines(self) -> Iterator[Sequence[Point]]:
        return iter(self.path.subpaths())

    def _reset(self) -> None:
        self.path = PenPath()

    def to_dict(self) -> dict:
        return {'kind': self.kind, 'revision': self.revision,
                'segments': [{'points': [p.to_list() for p in sp]} for sp in self.path.subpaths()]}
