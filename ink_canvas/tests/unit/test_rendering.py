"""Unit tests for Pillow rendering of drawing surfaces."""

import io
import unittest

import numpy as np
from PIL import Image

from ink_lib.domain.geometry import Point
from ink_lib.tracking.events import MotionAction, MotionEvent, PointerSample
from ink_lib.utils.rendering import (
    RED,
    WHITE,
    ImageCanvas,
    Paint,
    ink_mask,
    render_png,
    render_surface,
)
from ink_lib.views import MultiPenCanvasView


def _event(action, *pointers, action_index=0):
    return MotionEvent(action, tuple(PointerSample(pid, Point(x, y)) for pid, x, y in pointers),
                       action_index)


class TestImageCanvas(unittest.TestCase):

    def test_blank_canvas(self):
        canvas = ImageCanvas(20, 10)
        self.assertEqual(canvas.image.size, (20, 10))
        self.assertFalse(ink_mask(canvas.image).any())

    def test_draws_polyline(self):
        canvas = ImageCanvas(100, 100)
        canvas.draw_polyline([Point(10, 50), Point(90, 50)], Paint(stroke_width=5))

        mask = ink_mask(canvas.image)
        self.assertTrue(mask[50, 50])
        self.assertFalse(mask[10, 50])
        self.assertEqual(canvas.image.getpixel((50, 50)), RED)

    def test_single_point_draws_nothing(self):
        canvas = ImageCanvas(50, 50)
        canvas.draw_polyline([Point(25, 25)], Paint())

        self.assertFalse(ink_mask(canvas.image).any())

    def test_custom_background(self):
        canvas = ImageCanvas(5, 5, background=(0, 0, 0))
        self.assertEqual(canvas.image.getpixel((2, 2)), (0, 0, 0))
        self.assertFalse(ink_mask(canvas.image, background=(0, 0, 0)).any())


class TestRenderSurface(unittest.TestCase):

    def setUp(self):
        self.view = MultiPenCanvasView()
        self.view.on_touch_event(_event(MotionAction.DOWN, (0, 10, 10)))
        self.view.on_touch_event(_event(MotionAction.POINTER_DOWN, (0, 10, 10), (1, 10, 80),
                                        action_index=1))
        self.view.on_touch_event(_event(MotionAction.MOVE, (0, 90, 10), (1, 90, 80)))

    def test_both_segments_rendered(self):
        img = render_surface(self.view, 100, 100)
        mask = ink_mask(img)

        self.assertTrue(mask[10, 50])
        self.assertTrue(mask[80, 50])
        self.assertFalse(mask[45, 50])

    def test_ink_mask_shape(self):
        img = render_surface(self.view, 120, 60)
        mask = ink_mask(img)
        self.assertEqual(mask.shape, (60, 120))
        self.assertEqual(mask.dtype, np.bool_)

    def test_render_png(self):
        png = render_png(self.view, 64, 32, WHITE)
        img = Image.open(io.BytesIO(png))

        self.assertEqual(img.format, 'PNG')
        self.assertEqual(img.size, (64, 32))

    def test_cleared_surface_renders_blank(self):
        self.view.clear()
        self.assertFalse(ink_mask(render_surface(self.view, 100, 100)).any())


if __name__ == '__main__':
    unittest.main()
