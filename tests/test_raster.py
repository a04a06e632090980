"""Tests for rasterization utilities."""

import numpy as np
import pytest

from circdraw.raster import (
    clear, draw_text, new_canvas, rasterize_circle, rasterize_filled_circle,
    rasterize_filled_rectangle, rasterize_line, rgb_to_bgr, to_uint8,
)


@pytest.fixture
def blank():
    return np.zeros((64, 64), dtype=np.float32)


@pytest.fixture
def canvas():
    return new_canvas(64, 48)


class TestCanvas:
    def test_shape_and_dtype(self, canvas):
        assert canvas.shape == (48, 64, 3)
        assert canvas.dtype == np.float32

    def test_filled_with_background(self, canvas):
        assert (canvas == 1.0).all()

    def test_clear(self, canvas):
        rasterize_circle(canvas, (32, 24), 10, (0.0, 0.0, 0.0))
        clear(canvas, (0.5, 0.5, 0.5))
        assert np.allclose(canvas, 0.5)


class TestRasterizeCircle:
    def test_draws_pixels(self, blank):
        rasterize_circle(blank, (32, 32), 15)
        assert blank.sum() > 0

    def test_outline_leaves_centre_empty(self, blank):
        rasterize_circle(blank, (32, 32), 15)
        assert blank[32, 32] == 0

    def test_small_radius(self, blank):
        rasterize_circle(blank, (32, 32), 0.5)
        assert blank.sum() > 0

    def test_thickness(self, blank):
        thin = blank.copy()
        rasterize_circle(thin, (32, 32), 20, thickness=1)
        thick = blank.copy()
        rasterize_circle(thick, (32, 32), 20, thickness=5)
        assert thick.sum() > thin.sum()

    def test_rgb_colour(self, canvas):
        rasterize_circle(canvas, (32, 24), 10, (0.0, 0.0, 0.0), thickness=2)
        assert canvas.min() < 0.5


class TestFilledCircle:
    def test_fills_centre(self, blank):
        rasterize_filled_circle(blank, (32, 32), 10)
        assert blank[32, 32] == pytest.approx(1.0)

    def test_alpha_blends(self, canvas):
        rasterize_filled_circle(canvas, (32, 24), 10, (0.0, 0.0, 0.0), alpha=0.5)
        assert canvas[24, 32, 0] == pytest.approx(0.5, abs=0.01)
        assert canvas[0, 0, 0] == pytest.approx(1.0)


class TestOtherPrimitives:
    def test_line(self, blank):
        rasterize_line(blank, (0, 32), (63, 32))
        assert blank[32, :].sum() > 0

    def test_filled_rectangle(self, blank):
        rasterize_filled_rectangle(blank, (10, 10), (20, 20))
        assert blank[15, 15] == pytest.approx(1.0)

    def test_text(self, canvas):
        draw_text(canvas, "Undo", (4, 20), (0.0, 0.0, 0.0))
        assert canvas.min() < 1.0


class TestConversions:
    def test_to_uint8(self, canvas):
        out = to_uint8(canvas)
        assert out.dtype == np.uint8
        assert (out == 255).all()

    def test_to_uint8_clips(self):
        img = np.array([[-0.5, 1.5]], dtype=np.float32)
        assert to_uint8(img).tolist() == [[0, 255]]

    def test_rgb_to_bgr(self):
        img = np.zeros((2, 2, 3), dtype=np.uint8)
        img[..., 0] = 200
        out = rgb_to_bgr(img)
        assert (out[..., 2] == 200).all()
        assert (out[..., 0] == 0).all()
