"""
Drawing surface: turns a circle list into pixels and pointer events into
positions.

The surface is cleared and fully repainted on every ``render`` call; there is
no incremental invalidation.
"""

from circdraw.config import (
    BACKGROUND, CANVAS_HEIGHT, CANVAS_WIDTH, HIGHLIGHT, STROKE, STROKE_THICKNESS,
)
from circdraw.geometry import Position
from circdraw.raster import (
    clear, new_canvas, rasterize_circle, rasterize_filled_circle, rgb_to_bgr, to_uint8,
)


class CircleSurface:
    """Exclusively-owned RGB raster the session renders into."""

    def __init__(self, width=CANVAS_WIDTH, height=CANVAS_HEIGHT,
                 background=BACKGROUND, stroke=STROKE, highlight=HIGHLIGHT,
                 thickness=STROKE_THICKNESS):
        self.background = background
        self.stroke = stroke
        self.highlight = highlight
        self.thickness = thickness
        self.resize(width, height)

    @property
    def size(self):
        return self.width, self.height

    def resize(self, width, height):
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.image = new_canvas(self.width, self.height, self.background)

    # ------------------------------------------------------------------
    # core -> surface
    # ------------------------------------------------------------------

    def render(self, circles):
        """Clear, then stroke every circle in order (later ones on top)."""
        clear(self.image, self.background)
        for circle in circles:
            center = circle.position.as_tuple()
            if circle.highlight:
                rasterize_filled_circle(self.image, center, circle.radius,
                                        self.highlight, alpha=0.6)
            rasterize_circle(self.image, center, circle.radius,
                             self.stroke, self.thickness)
        return self.image

    # ------------------------------------------------------------------
    # surface -> core
    # ------------------------------------------------------------------

    def to_position(self, px, py):
        """Surface-relative pointer coordinates as a Position, None if outside."""
        if not (0 <= px < self.width and 0 <= py < self.height):
            return None
        return Position(float(px), float(py))

    # ------------------------------------------------------------------
    # Output conversions
    # ------------------------------------------------------------------

    def to_uint8(self):
        return to_uint8(self.image)

    def to_bgr(self):
        return rgb_to_bgr(self.to_uint8())
