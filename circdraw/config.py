"""
Global configuration: diameter control bounds, surface defaults, colours.

Colours are RGB triples in [0, 1] because every raster in the package is a
float32 numpy image in that range (see ``circdraw.raster``).
"""

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Action registry (only one kind exists today)
# ---------------------------------------------------------------------------

ACTION_DRAW_CIRCLE = "drawCircle"

# ---------------------------------------------------------------------------
# Diameter control
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DiameterRange:
    """Bounds and starting value of the diameter slider."""
    default: float
    min: float
    max: float

    def clamp(self, value):
        return float(min(max(value, self.min), self.max))


DIAMETER_RANGE = DiameterRange(default=10, min=1, max=50)

# ---------------------------------------------------------------------------
# Surface
# ---------------------------------------------------------------------------

CANVAS_WIDTH = 640
CANVAS_HEIGHT = 480

BACKGROUND = (1.0, 1.0, 1.0)
STROKE = (0.0, 0.0, 0.0)
HIGHLIGHT = (211 / 255, 211 / 255, 211 / 255)     # in-progress circle shade
STROKE_THICKNESS = 1

# Bottom drawer holding the diameter slider, as a fraction of surface height
PANEL_HEIGHT_FRACTION = 0.3
PANEL_BACKGROUND = (0.96, 0.96, 0.96)
DISABLED_TEXT = (0.6, 0.6, 0.6)

# ---------------------------------------------------------------------------
# Interactive window
# ---------------------------------------------------------------------------

WINDOW_NAME = "circdraw"
TRACKBAR_NAME = "diameter"

KEYS_UNDO = (ord("u"), ord("z"))
KEYS_REDO = (ord("r"), ord("y"))
KEYS_CONFIRM = (13, 10, ord(" "))
KEYS_QUIT = (27, ord("q"))
