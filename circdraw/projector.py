"""Derive the render-ready circle list from a history."""

from typing import Tuple

from circdraw.geometry import ActionState, CircleAction
from circdraw.history import ActionHistory


def project(history: ActionHistory) -> Tuple[CircleAction, ...]:
    """Circles visible at the history's cursor.

    Drawn entries up to and including the cursor come first, in entry order.
    A drawing entry exactly at the cursor is appended last so the in-progress
    circle is painted on top.  Drawing entries below the cursor are skipped.
    """
    visible = [a for a in history.active if a.state is ActionState.DRAWN]
    current = history.current
    if current is not None and current.state is ActionState.DRAWING:
        visible.append(current)
    return tuple(visible)
