"""Shared configuration for the ink canvas web app.

This module centralizes values used by:
    - canvas_flask.py (surface registry, logging)
    - canvas_routes.py (render size limits)
    - canvas_editor.py (server defaults)
"""

# Default rendering size when the client does not pass ?w= and ?h=
DEFAULT_CANVAS_WIDTH = 800
DEFAULT_CANVAS_HEIGHT = 600

# Largest image the render endpoint will produce
MAX_RENDER_SIZE = 4096

# Pen style shared by both surfaces
STROKE_COLOR = (255, 0, 0)
STROKE_WIDTH = 5.0
BACKGROUND_COLOR = (255, 255, 255)

# Server defaults
DEFAULT_HOST = '127.0.0.1'
DEFAULT_PORT = 5000
DEFAULT_LOG_LEVEL = 'INFO'
