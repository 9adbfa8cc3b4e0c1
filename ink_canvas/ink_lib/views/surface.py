"""Shared interface of the drawing surfaces.

A DrawingSurface is a clearable, drawable target for pointer events. The
host framework feeds it MotionEvents one at a time through
``on_touch_event`` and asks it to paint itself through ``on_draw``. Each
update calls ``invalidate``, which bumps ``revision`` and fires the
optional redraw hook.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, Iterator, Optional, Sequence

from ..domain.geometry import Point
from ..tracking.events import MotionEvent
from ..utils.rendering import Paint


class DrawingSurface(ABC):
    """Base class for surfaces that store and show ink strokes.

    Subclasses implement ``on_touch_event``, ``polylines``, ``_reset`` and
    ``to_dict``.

    Args:
        paint: Stroke style used by ``on_draw``. Defaults to a 5px red pen.
        on_invalidate: Called with the surface after every update.
    """

    def __init__(self, paint: Optional[Paint] = None,
                 on_invalidate: Optional[Callable[['DrawingSurface'], None]] = None):
        self.paint = paint or Paint()
        self.on_invalidate = on_invalidate
        self.revision = 0

    @abstractmethod
    def on_touch_event(self, event: MotionEvent) -> bool:
        """Process one event. Returns True when the event was consumed."""
        pass

    @abstractmethod
    def polylines(self) -> Iterator[Sequence[Point]]:
        """Yield the point sequences to draw, in draw order."""
        pass

    @abstractmethod
    def _reset(self) -> None:
        pass

    @abstractmethod
    def to_dict(self) -> dict:
        """Stored strokes as a JSON-serializable dict."""
        pass

    def clear(self) -> None:
        """Erase every stroke."""
        self._reset()
        self.invalidate()

    def on_draw(self, canvas) -> None:
        """Draw every polyline onto ``canvas`` with this surface's paint."""
        for points in self.polylines():
            canvas.draw_polyline(points, self.paint)

    def invalidate(self) -> None:
        """Request a redraw."""
        self.revision += 1
        if self.on_invalidate is not None:
            self.on_invalidate(self)
