"""Rendering utilities for drawing surfaces.

Example usage::

    from ink_lib.utils import render_png

    png_bytes = render_png(view, 400, 300)
"""

from .rendering import RED, WHITE, ImageCanvas, Paint, ink_mask, render_png, render_surface

__all__ = [
    'Paint', 'ImageCanvas', 'render_surface', 'render_png', 'ink_mask',
    'RED', 'WHITE',
]
