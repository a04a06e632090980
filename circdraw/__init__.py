"""circdraw - click to place circles, adjust their diameter, undo/redo every step."""

from circdraw.geometry import ActionState, CircleAction, Position
from circdraw.history import ActionHistory, Push, Redo, Undo, reduce
from circdraw.projector import project
from circdraw.session import EditSessionController, SessionState
