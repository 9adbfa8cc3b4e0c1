"""Flask application setup and shared utilities for the ink canvas.

This module is the central hub of the web app. It provides:

    - The Flask application instance shared by the route module
    - Application-wide logging configuration
    - The surface registry holding one drawing surface per kind
    - Request helpers for surface lookup and render size parsing

The browser is the host input system: it posts Pointer Events as JSON
motion events, and the server-side surfaces process them in order.

Architecture:
    - canvas_flask.py: App instance, logging, registry, helpers (this module)
    - canvas_routes.py: HTTP routes
    - canvas_editor.py: Entry point that registers routes and runs the server

Example:
    Looking up a surface inside a route::

        from canvas_flask import app, get_surface_or_error

        @app.route('/api/<kind>/count')
        def count(kind):
            entry, err = get_surface_or_error(kind)
            if err:
                return err
            with entry.lock:
                return jsonify(revision=entry.surface.revision)

Attributes:
    app (Flask): The Flask application instance.
    registry (SurfaceRegistry): Surfaces served by this app.
"""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass, field

from flask import Flask, jsonify, request

from canvas_config import (
    DEFAULT_CANVAS_HEIGHT, DEFAULT_CANVAS_WIDTH,
    MAX_RENDER_SIZE, STROKE_COLOR, STROKE_WIDTH,
)
import ink_lib
from ink_lib.utils.rendering import Paint
from ink_lib.views import CanvasView, DrawingSurface, MultiPenCanvasView

# Module logger
logger = logging.getLogger(__name__)


def configure_logging(level: str = 'INFO', log_file: str | None = None) -> None:
    """Configure application-wide logging.

    Call this at application startup before importing route modules.

    Args:
        level: Log level string ('DEBUG', 'INFO', 'WARNING', 'ERROR').
        log_file: Optional path to log file. If None, logs to stderr only.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)-8s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Set third-party loggers to WARNING to reduce noise
    logging.getLogger('werkzeug').setLevel(logging.WARNING)
    logging.getLogger('PIL').setLevel(logging.WARNING)

    logger.info("Logging configured: level=%s, file=%s", level, log_file or 'stderr')


# Flask application; page templates are ink_lib package data
TEMPLATE_DIR = os.path.join(os.path.dirname(ink_lib.__file__), 'templates')
app = Flask(__name__, template_folder=TEMPLATE_DIR)


@dataclass
class SurfaceEntry:
    """A surface plus the lock that serialises its event processing."""
    surface: DrawingSurface
    lock: threading.Lock = field(default_factory=threading.Lock)


class SurfaceRegistry:
    """One drawing surface per kind for the lifetime of the app.

    Flask may serve requests on several threads while a surface expects
    its events one at a time, so every access goes through the entry lock.
    """

    def __init__(self):
        self._entries: dict[str, SurfaceEntry] = {}
        self.reset()

    def reset(self) -> None:
        """Replace every surface with a fresh, empty one."""
        paint = Paint(color=STROKE_COLOR, stroke_width=STROKE_WIDTH)
        self._entries = {
            CanvasView.kind: SurfaceEntry(CanvasView(paint=paint)),
            MultiPenCanvasView.kind: SurfaceEntry(MultiPenCanvasView(paint=paint)),
        }

    def kinds(self) -> list[str]:
        return sorted(self._entries)

    def get(self, kind: str) -> SurfaceEntry | None:
        return self._entries.get(kind)


registry = SurfaceRegistry()


def get_surface_or_error(kind: str) -> tuple[SurfaceEntry | None, tuple | None]:
    """Look up a surface by kind.

    Returns:
        tuple: ``(entry, None)`` on success, or ``(None, (response, 404))``
            for an unknown kind.
    """
    entry = registry.get(kind)
    if entry is None:
        logger.warning("Unknown surface kind: %s", kind)
        return None, (jsonify(error=f"Unknown surface '{kind}'", kinds=registry.kinds()), 404)
    return entry, None


def get_render_size_or_error() -> tuple[tuple[int, int] | None, tuple | None]:
    """Read ``?w=`` and ``?h=`` from the request, with config defaults.

    Returns:
        tuple: ``((width, height), None)`` if valid, otherwise
            ``(None, (response, 400))``.
    """
    try:
        width = int(request.args.get('w', DEFAULT_CANVAS_WIDTH))
        height = int(request.args.get('h', DEFAULT_CANVAS_HEIGHT))
    except ValueError:
        return None, (jsonify(error="Width and height must be integers"), 400)
    if not (0 < width <= MAX_RENDER_SIZE and 0 < height <= MAX_RENDER_SIZE):
        return None, (jsonify(error=f"Size must be within 1..{MAX_RENDER_SIZE}"), 400)
    return (width, height), None

