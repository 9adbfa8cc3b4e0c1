"""Pointer events delivered by the host view framework.

This module models the input boundary of a drawing surface. A
MotionEvent is a snapshot taken by the input system at one instant: the
kind of action, which pointer the action concerns, and the coordinates of
every pointer that is currently down.

Pointer ids and pointer indexes are different things. The id identifies
one physical contact for its whole down-to-up lifetime and is reused once
that contact lifts. The index is the position of the pointer inside one
event's pointer list, and it shifts left when an earlier pointer leaves::

    pointer ids:      0, 1, 2
                      |  |  |
    pointer indexes:  0, 1, 2

    after pointer 1 lifts:
    pointer ids:      0, 1, 2
                      |    /
    pointer indexes:  0, 1

The module provides:
    MotionAction: Enumeration of the event kinds.
    PointerSample: One pointer's id and coordinate inside an event.
    MotionEvent: The full event with Android-style accessors.
    InvalidEventError: Raised when a JSON payload cannot be parsed.

Example usage::

    from ink_lib.tracking.events import MotionEvent

    event = MotionEvent.from_dict({
        'action': 'pointer_down',
        'action_index': 1,
        'pointers': [{'id': 0, 'x': 10, 'y': 10}, {'id': 1, 'x': 50, 'y': 20}],
    })
    event.action_pointer_id    # 1
    event.active_pointers()    # {0: Point(10, 10), 1: Point(50, 20)}
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

from ..domain.geometry import Point


class InvalidEventError(ValueError):
    """A motion event payload is malformed."""


class MotionAction(Enum):
    """Kinds of motion event.

    DOWN: The first pointer touched the surface.
    POINTER_DOWN: A further pointer touched while others are down.
    MOVE: One or more pointers moved.
    POINTER_UP: A pointer lifted while others stay down.
    UP: The last pointer lifted.
    CANCEL: The gesture was aborted by the host.
    OUTSIDE: A touch landed outside the surface bounds.
    """
    DOWN = 'down'
    POINTER_DOWN = 'pointer_down'
    MOVE = 'move'
    POINTER_UP = 'pointer_up'
    UP = 'up'
    CANCEL = 'cancel'
    OUTSIDE = 'outside'

    @classmethod
    def parse(cls, value: Any) -> MotionAction:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvalidEventError(f"Unknown action: {value!r}") from None


@dataclass(frozen=True)
class PointerSample:
    """One pointer inside a motion event."""
    pointer_id: int
    point: Point

    def to_dict(self) -> dict:
        return {'id': self.pointer_id, 'x': self.point.x, 'y': self.point.y}


@dataclass(frozen=True)
class MotionEvent:
    """Snapshot of all active pointers at one input event.

    Attributes:
        action: The kind of event.
        pointers: Every pointer currently down, in pointer-index order.
            For POINTER_UP and UP the lifting pointer is still listed.
        action_index: Index into ``pointers`` of the pointer that went
            down or up. Ignored for MOVE.
    """
    action: MotionAction
    pointers: Tuple[PointerSample, ...] = field(default_factory=tuple)
    action_index: int = 0

    @property
    def pointer_count(self) -> int:
        return len(self.pointers)

    def get_pointer_id(self, index: int) -> int:
        return self.pointers[index].pointer_id

    def find_pointer_index(self, pointer_id: int) -> int:
        """Return the index of ``pointer_id``, or -1 if it is not down."""
        for index, sample in enumerate(self.pointers):
            if sample.pointer_id == pointer_id:
                return index
        return -1

    def get_point(self, index: int) -> Point:
        return self.pointers[index].point

    def get_x(self, index: int) -> float:
        return self.pointers[index].point.x

    def get_y(self, index: int) -> float:
        return self.pointers[index].point.y

    @property
    def x(self) -> float:
        """X of the primary pointer."""
        return self.get_x(0)

    @property
    def y(self) -> float:
        """Y of the primary pointer."""
        return self.get_y(0)

    @property
    def action_pointer_id(self) -> int:
        return self.get_pointer_id(self.action_index)

    @property
    def action_point(self) -> Point:
        return self.get_point(self.action_index)

    def active_pointers(self) -> Dict[int, Point]:
        """Map every pointer id in this event to its coordinate."""
        return {s.pointer_id: s.point for s in self.pointers}

    def to_dict(self) -> dict:
        return {
            'action': self.action.value,
            'action_index': self.action_index,
            'pointers': [s.to_dict() for s in self.pointers],
        }

    @classmethod
    def from_dict(cls, data: Any) -> MotionEvent:
        """Parse a JSON event payload.

        Args:
            data: Dict with ``action``, ``pointers`` (list of
                ``{'id', 'x', 'y'}``) and optional ``action_index``.

        Returns:
            The parsed MotionEvent.

        Raises:
            InvalidEventError: If a field is missing or has the wrong type,
                if a coordinate is NaN or infinite,
                if the pointer list is empty, if a pointer id repeats, or if
                ``action_index`` is out of range.
        """
        if not isinstance(data, dict):
            raise InvalidEventError("Event must be an object")
        if 'action' not in data:
            raise InvalidEventError("Missing 'action'")
        action = MotionAction.parse(data['action'])

        raw_pointers = data.get('pointers')
        if not isinstance(raw_pointers, list) or not raw_pointers:
            raise InvalidEventError("'pointers' must be a non-empty list")
        pointers = tuple(_parse_pointer(p) for p in raw_pointers)

        ids = [p.pointer_id for p in pointers]
        if len(set(ids)) != len(ids):
            raise InvalidEventError(f"Duplicate pointer ids: {ids}")

        action_index = data.get('action_index', 0)
        if isinstance(action_index, bool) or not isinstance(action_index, int):
            raise InvalidEventError("'action_index' must be an integer")
        if not 0 <= action_index < len(pointers):
            raise InvalidEventError(
                f"'action_index' {action_index} out of range for {len(pointers)} pointers")

        return cls(action=action, pointers=pointers, action_index=action_index)


def _parse_pointer(raw: Any) -> PointerSample:
    if not isinstance(raw, dict):
        raise InvalidEventError("Pointer must be an object")
    try:
        pointer_id = raw['id']
        x, y = raw['x'], raw['y']
    except KeyError as e:
        raise InvalidEventError(f"Pointer missing {e.args[0]!r}") from None
    if isinstance(pointer_id, bool) or not isinstance(pointer_id, int):
        raise InvalidEventError("Pointer 'id' must be an integer")
    for value in (x, y):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidEventError("Pointer 'x' and 'y' must be numbers")
        if not math.isfinite(value):
            raise InvalidEventError("Pointer 'x' and 'y' must be finite")
    return PointerSample(pointer_id, Point(float(x), float(y)))


def parse_events(payload: Any) -> List[MotionEvent]:
    """Parse either a single event or ``{'events': [...]}``."""
    if isinstance(payload, dict) and 'events' in payload:
        raw_events = payload['events']
        if not isinstance(raw_events, list):
            raise InvalidEventError("'events' must be a list")
        return [MotionEvent.from_dict(e) for e in raw_events]
    return [MotionEvent.from_dict(payload)]
