"""
Edit session: the interactive lifecycle of each circle.

A click places an in-progress circle (pushes a ``drawing`` entry and opens the
adjustment panel), slider moves change only the displayed diameter, and
closing the panel pushes a second, ``drawn`` entry carrying the chosen
diameter.  Each circle therefore occupies two history slots, so "open panel"
and "confirm diameter" are separately undoable.

All session data lives in one immutable ``SessionState``; the module-level
functions are pure transitions over it.  ``EditSessionController`` is the thin
stateful shell a UI drives: it keeps the current state and repaints the
surface once for every history change.
"""

from dataclasses import dataclass, field, replace
from typing import Callable, Optional

from circdraw.config import DIAMETER_RANGE, DiameterRange
from circdraw.geometry import CircleAction, Position
from circdraw.history import ActionHistory, Push, Redo, Undo, reduce
from circdraw.projector import project


@dataclass(frozen=True)
class SessionState:
    history: ActionHistory = field(default_factory=ActionHistory)
    panel_position: Position = Position(0.0, 0.0)
    slider_value: float = float(DIAMETER_RANGE.default)
    bounds: DiameterRange = DIAMETER_RANGE

    @classmethod
    def initial(cls, bounds=DIAMETER_RANGE):
        return cls(slider_value=float(bounds.default), bounds=bounds)


# ---------------------------------------------------------------------------
# Derived views
# ---------------------------------------------------------------------------

def panel_visible(state):
    current = state.history.current
    return current is not None and current.is_drawing


def undo_disabled(state):
    return state.history.undo_disabled


def redo_disabled(state):
    return state.history.redo_disabled


def panel_title(state):
    p = state.panel_position
    return f"Adjust diameter of Circle at ({p.x:g}, {p.y:g})"


def visible_circles(state):
    """Projection with the live slider value applied to the in-progress circle."""
    circles = project(state.history)
    if circles and circles[-1].is_drawing and panel_visible(state):
        circles = circles[:-1] + (circles[-1].with_diameter(state.slider_value),)
    return circles


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------

def click(state, position):
    if panel_visible(state):
        return state
    action = CircleAction.drawing(position, state.bounds.default)
    history, _ = reduce(state.history, Push(action))
    return replace(state, history=history, panel_position=position,
                   slider_value=action.diameter)


def change_diameter(state, value):
    if not panel_visible(state):
        return state
    value = state.bounds.clamp(value)
    if value == state.slider_value:
        return state
    return replace(state, slider_value=value)


def confirm(state):
    if not panel_visible(state):
        return state
    action = state.history.current.finalize(state.slider_value)
    history, _ = reduce(state.history, Push(action))
    return replace(state, history=history, slider_value=float(state.bounds.default))


def undo(state):
    return _move(state, Undo())


def redo(state):
    return _move(state, Redo())


def _move(state, command):
    history, position = reduce(state.history, command)
    if history is state.history:
        return state
    changes = {"history": history}
    if position is not None:
        changes["panel_position"] = position
    # A reopened panel starts from the entry's own diameter.
    if history.current is not None and history.current.is_drawing:
        changes["slider_value"] = history.current.diameter
    return replace(state, **changes)


# ---------------------------------------------------------------------------
# Stateful controller
# ---------------------------------------------------------------------------

class EditSessionController:
    """Owns the session state and keeps a surface in sync with it.

    Every transition that changes the history triggers exactly one redraw.
    A live slider change repaints the in-progress circle preview; any other
    no-op transition draws nothing.  *listener* is called with the new state
    after every change.
    """

    def __init__(self, surface, bounds: DiameterRange = DIAMETER_RANGE,
                 listener: Optional[Callable[[SessionState], None]] = None):
        self.surface = surface
        self.listener = listener
        self.redraw_count = 0
        self.state = SessionState.initial(bounds)
        self._redraw()

    # -- derived ---------------------------------------------------------

    @property
    def history(self):
        return self.state.history

    @property
    def panel_visible(self):
        return panel_visible(self.state)

    @property
    def panel_title(self):
        return panel_title(self.state)

    @property
    def undo_disabled(self):
        return undo_disabled(self.state)

    @property
    def redo_disabled(self):
        return redo_disabled(self.state)

    # -- input events ----------------------------------------------------

    def click(self, px, py):
        """Pointer click in surface pixels.  Returns True if a circle was placed."""
        position = self.surface.to_position(px, py)
        if position is None:
            return False
        return self._apply(click(self.state, position))

    def change_diameter(self, value):
        return self._apply(change_diameter(self.state, value))

    def confirm(self):
        return self._apply(confirm(self.state))

    def undo(self):
        return self._apply(undo(self.state))

    def redo(self):
        return self._apply(redo(self.state))

    # -- internals -------------------------------------------------------

    def _apply(self, new_state):
        if new_state is self.state:
            return False
        self.state = new_state
        self._redraw()
        if self.listener is not None:
            self.listener(new_state)
        return True

    def _redraw(self):
        self.surface.render(visible_circles(self.state))
        self.redraw_count += 1
