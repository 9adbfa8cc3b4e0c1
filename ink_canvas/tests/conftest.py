"""Shared pytest fixtures for the ink_canvas test suite.

Fixtures:
    multi_view: Fresh MultiPenCanvasView
    single_view: Fresh CanvasView
    make_event: Factory building MotionEvents from (id, x, y) tuples
    flask_client: Flask test client with route registration and clean surfaces
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from ink_lib.domain.geometry import Point  # noqa: E402
from ink_lib.tracking.events import MotionAction, MotionEvent, PointerSample  # noqa: E402
from ink_lib.views import CanvasView, MultiPenCanvasView  # noqa: E402


def build_event(action, pointers, action_index=0):
    """Build a MotionEvent from ``[(pointer_id, x, y), ...]``."""
    return MotionEvent(
        action=MotionAction(action) if isinstance(action, str) else action,
        pointers=tuple(PointerSample(pid, Point(x, y)) for pid, x, y in pointers),
        action_index=action_index,
    )


@pytest.fixture
def make_event():
    return build_event


@pytest.fixture
def multi_view():
    return MultiPenCanvasView()


@pytest.fixture
def single_view():
    return CanvasView()


@pytest.fixture
def flask_client():
    """Create a Flask test client with empty surfaces.

    Example:
        def test_index(flask_client):
            response = flask_client.get('/')
            assert response.status_code == 200
    """
    from canvas_flask import app, registry
    import canvas_routes  # noqa: F401 - registers routes

    app.config['TESTING'] = True
    registry.reset()

    with app.test_client() as client:
        yield client
