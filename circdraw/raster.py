"""
Low-level rasterization utilities backed by OpenCV.

All drawing functions operate on float32 numpy arrays in [0, 1] range, either
single-channel ``[H, W]`` (colour given as a float) or RGB ``[H, W, 3]``
(colour given as an RGB triple).  Anti-aliased rendering (LINE_AA) is used
wherever OpenCV supports it.
"""

import cv2
import numpy as np


def new_canvas(width, height, color=(1.0, 1.0, 1.0)):
    """Allocate an RGB float32 raster filled with *color*."""
    img = np.empty((int(height), int(width), 3), dtype=np.float32)
    img[...] = color
    return img


def clear(img, color=(1.0, 1.0, 1.0)):
    """Fill the whole raster in place."""
    img[...] = color
    return img


def _cv_color(color):
    if np.isscalar(color):
        return float(color)
    return tuple(float(c) for c in color)


def _pt(p):
    return int(round(p[0])), int(round(p[1]))


# ---------------------------------------------------------------------------
# Core primitives
# ---------------------------------------------------------------------------

def rasterize_circle(img, center, radius, color=1.0, thickness=1):
    """Draw an anti-aliased circle outline."""
    cv2.circle(
        img,
        _pt(center),
        int(max(round(radius), 1)),
        _cv_color(color),
        thickness,
        lineType=cv2.LINE_AA,
    )
    return img


def rasterize_filled_circle(img, center, radius, color=1.0, alpha=1.0):
    """Draw a filled circle, optionally blended over what is already there."""
    if alpha >= 1.0:
        cv2.circle(img, _pt(center), int(max(round(radius), 1)),
                   _cv_color(color), -1, lineType=cv2.LINE_AA)
        return img
    layer = img.copy()
    cv2.circle(layer, _pt(center), int(max(round(radius), 1)),
               _cv_color(color), -1, lineType=cv2.LINE_AA)
    cv2.addWeighted(layer, float(alpha), img, 1.0 - float(alpha), 0.0, dst=img)
    return img


def rasterize_line(img, p1, p2, color=1.0, thickness=1):
    """Draw an anti-aliased line segment."""
    cv2.line(img, _pt(p1), _pt(p2), _cv_color(color), thickness, lineType=cv2.LINE_AA)
    return img


def rasterize_filled_rectangle(img, corner1, corner2, color=1.0):
    """Draw a filled rectangle (thickness=-1)."""
    cv2.rectangle(img, _pt(corner1), _pt(corner2), _cv_color(color), -1,
                  lineType=cv2.LINE_AA)
    return img


def draw_text(img, text, origin, color=0.0, scale=0.5, thickness=1):
    """Render a single line of text with its baseline at *origin*."""
    cv2.putText(img, text, _pt(origin), cv2.FONT_HERSHEY_SIMPLEX, scale,
                _cv_color(color), thickness, lineType=cv2.LINE_AA)
    return img


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------

def to_uint8(img):
    """float32 [0, 1] -> uint8 [0, 255], same channel order."""
    return (np.clip(img, 0.0, 1.0) * 255).round().astype(np.uint8)


def rgb_to_bgr(img):
    """Channel swap for OpenCV's highgui, which expects BGR."""
    return cv2.cvtColor(img, cv2.COLOR_RGB2BGR)
