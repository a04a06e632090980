"""
Adjustment panel and undo/redo toolbar, painted over a copy of the surface.

The panel is a bottom drawer covering ``PANEL_HEIGHT_FRACTION`` of the
surface.  It is only shown while the circle at the history cursor is still
being drawn; its title names the circle's position and the slider bar shows
the working diameter within the configured bounds.
"""

import numpy as np

from circdraw.config import DISABLED_TEXT, PANEL_BACKGROUND, PANEL_HEIGHT_FRACTION, STROKE
from circdraw.raster import (
    draw_text, rasterize_circle, rasterize_filled_rectangle, rasterize_line,
)
from circdraw.session import panel_title, panel_visible, redo_disabled, undo_disabled


def panel_rect(width, height):
    """(top-left, bottom-right) corners of the drawer strip."""
    top = int(round(height * (1.0 - PANEL_HEIGHT_FRACTION)))
    return (0, top), (width - 1, height - 1)


def slider_fraction(state):
    b = state.bounds
    if b.max == b.min:
        return 0.0
    return (state.slider_value - b.min) / (b.max - b.min)


def render_panel(img, state):
    """Draw the drawer in place.  Returns True if it was visible."""
    if not panel_visible(state):
        return False
    h, w = img.shape[:2]
    (x0, y0), (x1, y1) = panel_rect(w, h)
    rasterize_filled_rectangle(img, (x0, y0), (x1, y1), PANEL_BACKGROUND)
    rasterize_line(img, (x0, y0), (x1, y0), DISABLED_TEXT)
    draw_text(img, panel_title(state), (x0 + 12, y0 + 22), STROKE)

    # Slider bar with a knob at the working diameter
    bar_y = y0 + (y1 - y0) * 0.6
    left, right = x0 + 20, x1 - 60
    rasterize_line(img, (left, bar_y), (right, bar_y), DISABLED_TEXT, 2)
    knob_x = left + (right - left) * slider_fraction(state)
    rasterize_circle(img, (knob_x, bar_y), 6, STROKE, -1)
    draw_text(img, f"{state.slider_value:g}", (right + 12, bar_y + 5), STROKE)
    return True


def render_toolbar(img, state):
    """Undo / Redo labels in the top-left corner, greyed out when disabled."""
    undo_color = DISABLED_TEXT if undo_disabled(state) else STROKE
    redo_color = DISABLED_TEXT if redo_disabled(state) else STROKE
    draw_text(img, "Undo", (8, 18), undo_color)
    draw_text(img, "Redo", (60, 18), redo_color)
    return img


def compose_frame(surface, state):
    """Surface pixels plus toolbar and (when open) the adjustment panel."""
    frame = np.ascontiguousarray(surface.image.copy())
    render_toolbar(frame, state)
    render_panel(frame, state)
    return frame
