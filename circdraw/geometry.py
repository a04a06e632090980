"""Position and circle descriptors shared by every layer of the package."""

from dataclasses import dataclass, replace
from enum import Enum

from circdraw.config import ACTION_DRAW_CIRCLE


@dataclass(frozen=True)
class Position:
    """Circle centre, relative to the drawing surface's top-left corner."""
    x: float
    y: float

    def __post_init__(self):
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Position must be non-negative, got ({self.x}, {self.y})")

    def as_tuple(self):
        return (self.x, self.y)


class ActionState(Enum):
    DRAWING = "drawing"    # awaiting diameter confirmation
    DRAWN = "drawn"        # diameter frozen


@dataclass(frozen=True)
class CircleAction:
    """One history entry: place a circle, or commit its diameter."""
    position: Position
    diameter: float
    state: ActionState
    highlight: bool = False
    name: str = ACTION_DRAW_CIRCLE

    def __post_init__(self):
        if self.diameter <= 0:
            raise ValueError(f"Diameter must be positive, got {self.diameter}")

    @classmethod
    def drawing(cls, position, diameter):
        return cls(position, float(diameter), ActionState.DRAWING, highlight=True)

    @classmethod
    def drawn(cls, position, diameter):
        return cls(position, float(diameter), ActionState.DRAWN, highlight=False)

    @property
    def is_drawing(self):
        return self.state is ActionState.DRAWING

    @property
    def radius(self):
        return self.diameter / 2

    def with_diameter(self, diameter):
        """Copy with a new diameter.  Only an in-progress circle may change size."""
        if not self.is_drawing:
            raise ValueError("Diameter of a drawn circle is frozen")
        return replace(self, diameter=float(diameter))

    def finalize(self, diameter):
        """The single drawing -> drawn transition, at the same position."""
        if not self.is_drawing:
            raise ValueError("Circle is already drawn")
        return CircleAction.drawn(self.position, diameter)
