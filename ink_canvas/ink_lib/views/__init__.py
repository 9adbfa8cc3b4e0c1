"""Drawing surfaces.

DrawingSurface is the shared interface; CanvasView keeps one pen's path,
MultiPenCanvasView keeps one segment per pointer gesture.
"""

from .canvas_view import CanvasView
from .multi_pen_view import MultiPenCanvasView
from .surface import DrawingSurface

__all__ = ['DrawingSurface', 'CanvasView', 'MultiPenCanvasView']
