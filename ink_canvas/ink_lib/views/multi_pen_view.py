"""Multi-pen canvas: permanently stores and shows the traces of many pens.

Every pointer-down starts a new segment, however close it lands to the
end of an earlier one. Move events carry all active pointers and each of
them extends its own live segment; see ``ink_lib.tracking.tracker`` for
how a reused pointer id is routed to the newest segment.
"""

from __future__ import annotations
import logging
from typing import Callable, Dict, Iterator, Sequence

from ..domain.geometry import Point, Segment
from ..tracking.events import MotionAction, MotionEvent
from ..tracking.tracker import StrokeTracker
from .surface import DrawingSurface

logger = logging.getLogger(__name__)


class MultiPenCanvasView(DrawingSurface):
    """Surface that keeps one segment per pointer gesture."""

    kind = 'multi'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.tracker = StrokeTracker()
        self._handlers: Dict[MotionAction, Callable[[MotionEvent], None]] = {
            MotionAction.DOWN: self._on_pointer_down,
            MotionAction.POINTER_DOWN: self._on_pointer_down,
            MotionAction.MOVE: self._on_move,
            MotionAction.POINTER_UP: self._on_pointer_up,
            MotionAction.UP: self._on_pointer_up,
        }

    def on_touch_event(self, event: MotionEvent) -> bool:
        handler = self._handlers.get(event.action)
        if handler is not None:
            handler(event)
        self.invalidate()
        return True

    def _on_pointer_down(self, event: MotionEvent) -> None:
        pointer_id = event.action_pointer_id
        self.tracker.begin(pointer_id, event.action_point)
        logger.debug("add a new segment, pointer_id=%s, pointer_index=%d, pointer_count=%d",
                     pointer_id, event.action_index, event.pointer_count)

    def _on_move(self, event: MotionEvent) -> None:
        self.tracker.extend(event.active_pointers())

    def _on_pointer_up(self, event: MotionEvent) -> None:
        pointer_id = event.action_pointer_id
        self.tracker.end(pointer_id)
        logger.debug("pointer up, pointer_id=%s, pointer_index=%d, pointer_count=%d",
                     pointer_id, event.action_index, event.pointer_count)

    def segments(self) -> Sequence[Segment]:
        return self.tracker.segments()

    def polylines(self) -> Iterator[Sequence[Point]]:
        for segment in self.tracker.segments():
            yield segment.points

    def _reset(self) -> None:
        self.tracker.clear()

    def to_dict(self) -> dict:
        return {'kind': self.kind, 'revision': self.revision,
                'segments': [s.to_dict() for s in self.tracker.segments()]}
