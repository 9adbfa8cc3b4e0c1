"""Stroke rendering with Pillow.

This module is the drawing backend for the surfaces in ``ink_lib.views``.
A surface hands its polylines to a canvas object exposing
``draw_polyline(points, paint)``; ImageCanvas implements that on top of a
Pillow image.

The module provides the following:
    Paint: Stroke style (colour and width).
    ImageCanvas: Polyline canvas backed by a PIL image.
    render_surface: Draw a surface into a new image.
    render_png: Same, encoded as PNG bytes.
    ink_mask: Boolean numpy mask of the pixels that carry ink.

Example usage::

    from ink_lib.utils.rendering import render_surface, ink_mask

    img = render_surface(view, 400, 300)
    mask = ink_mask(img)
    print(f"{mask.sum()} inked pixels")
"""

from __future__ import annotations
import io
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np
from PIL import Image, ImageDraw

from ..domain.geometry import Point

RGB = Tuple[int, int, int]

RED: RGB = (255, 0, 0)
WHITE: RGB = (255, 255, 255)


@dataclass(frozen=True)
class Paint:
    """Stroke style owned by the renderer."""
    color: RGB = RED
    stroke_width: float = 5.0


class ImageCanvas:
    """Polyline canvas drawing into a Pillow RGB image.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        background: Fill colour of the empty canvas.
    """

    def __init__(self, width: int, height: int, background: RGB = WHITE):
        self.background = background
        self.image = Image.new('RGB', (width, height), background)
        self._draw = ImageDraw.Draw(self.image)

    def draw_polyline(self, points: Sequence[Point], paint: Paint) -> None:
        """Draw ``points`` as one connected line.

        Fewer than two points draw nothing; a bare move leaves no ink.
        """
        if len(points) < 2:
            return
        width = max(1, int(round(paint.stroke_width)))
        self._draw.line([p.to_tuple() for p in points], fill=paint.color,
                        width=width, joint='curve')


def render_surface(surface, width: int, height: int,
                   background: RGB = WHITE) -> Image.Image:
    """Render a drawing surface into a new image.

    Args:
        surface: Any object with ``on_draw(canvas)``, normally a
            DrawingSurface.
        width: Image width in pixels.
        height: Image height in pixels.
        background: Background colour.

    Returns:
        RGB PIL image.
    """
    canvas = ImageCanvas(width, height, background)
    surface.on_draw(canvas)
    return canvas.image


def render_png(surface, width: int, height: int, background: RGB = WHITE) -> bytes:
    """Render a drawing surface and encode it as PNG."""
    img = render_surface(surface, width, height, background)
    buf = io.BytesIO()
    img.save(buf, format='PNG')
    return buf.getvalue()


def ink_mask(img: Image.Image, background: RGB = WHITE) -> np.ndarray:
    """Return a boolean (height, width) mask of non-background pixels."""
    arr = np.asarray(img.convert('RGB'))
    return np.any(arr != np.array(background, dtype=arr.dtype), axis=-1)
