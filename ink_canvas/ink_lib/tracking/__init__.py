"""Input events and stroke bookkeeping.

The module exports the following:
    MotionAction, MotionEvent, PointerSample: Host input boundary.
    InvalidEventError: Raised for malformed event payloads.
    parse_events: Parse one event or a batch from JSON.
    StrokeTracker: Multi-pointer segment bookkeeping.
    PenPath: Single running path for the one-pen canvas.
"""

from .events import (
    InvalidEventError,
    MotionAction,
    MotionEvent,
    PointerSample,
    parse_events,
)
from .tracker import PenPath, StrokeTracker

__all__ = [
    'MotionAction', 'MotionEvent', 'PointerSample', 'InvalidEventError',
    'parse_events', 'StrokeTracker', 'PenPath',
]
