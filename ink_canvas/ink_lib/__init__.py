"""Ink canvas package.

Stores and shows freehand ink strokes drawn with touch input. Two
surfaces share one interface: a single-pen canvas that keeps one running
path, and a multi-pen canvas that attributes each pointer's motion to the
right stroke even when several fingers are down and when a pointer id is
reused after a finger lifts.

The package is organized into the following modules:
    domain: Value objects (Point, Segment).
    tracking: Motion events and the stroke bookkeeping (StrokeTracker, PenPath).
    views: The drawing surfaces (DrawingSurface, CanvasView, MultiPenCanvasView).
    utils: Pillow rendering of surfaces.

Example usage::

    from ink_lib import MotionAction, MotionEvent, MultiPenCanvasView, PointerSample, Point

    view = MultiPenCanvasView()
    view.on_touch_event(MotionEvent(MotionAction.DOWN, (PointerSample(0, Point(0, 0)),)))
    view.on_touch_event(MotionEvent(MotionAction.MOVE, (PointerSample(0, Point(5, 5)),)))
    print(view.segments())

Attributes:
    __version__ (str): Package version string.
"""

from .domain import Point, Segment
from .tracking import (
    InvalidEventError,
    MotionAction,
    MotionEvent,
    PenPath,
    PointerSample,
    StrokeTracker,
    parse_events,
)
from .utils import ImageCanvas, Paint, ink_mask, render_png, render_surface
from .views import CanvasView, DrawingSurface, MultiPenCanvasView

__all__ = [
    # Domain objects
    'Point', 'Segment',
    # Tracking
    'MotionAction', 'MotionEvent', 'PointerSample', 'InvalidEventError',
    'parse_events', 'StrokeTracker', 'PenPath',
    # Surfaces
    'DrawingSurface', 'CanvasView', 'MultiPenCanvasView',
    # Rendering
    'Paint', 'ImageCanvas', 'render_surface', 'render_png', 'ink_mask',
]

__version__ = '1.0.0'
