"""
Action history: an append/truncate log of circle actions with a cursor.

The log is an immutable value.  Every transition goes through ``reduce``, which
returns a *new* ``ActionHistory`` (or the very same object when the command is
a boundary no-op) together with an optional position that the caller should
show as the adjustment panel's title context.

Cursor semantics::

    cursor == -1                  nothing active
    0 <= cursor < len(entries)    entries[:cursor + 1] are active
    entries[cursor + 1:]          redo-able future, dropped by the next push

Position reporting on undo/redo is asymmetric: a position is only reported
when the cursor *before* the move was not 0, so undoing away from the first
entry, or redoing away from it, reports nothing.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from circdraw.geometry import CircleAction, Position


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Push:
    action: CircleAction


@dataclass(frozen=True)
class Undo:
    pass


@dataclass(frozen=True)
class Redo:
    pass


Command = Union[Push, Undo, Redo]


# ---------------------------------------------------------------------------
# History value
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ActionHistory:
    entries: Tuple[CircleAction, ...] = field(default_factory=tuple)
    cursor: int = -1

    def __post_init__(self):
        if not -1 <= self.cursor <= len(self.entries) - 1:
            raise ValueError(
                f"cursor {self.cursor} out of range for {len(self.entries)} entries")

    def __len__(self):
        return len(self.entries)

    @property
    def current(self) -> Optional[CircleAction]:
        """Entry at the cursor, or None before the first push."""
        if self.cursor < 0:
            return None
        return self.entries[self.cursor]

    @property
    def active(self):
        return self.entries[:self.cursor + 1]

    @property
    def undo_disabled(self):
        return self.cursor == -1

    @property
    def redo_disabled(self):
        # Also true for an empty history: nothing to redo.
        return self.cursor == len(self.entries) - 1

    def push(self, action):
        return reduce(self, Push(action))[0]

    def undo(self):
        return reduce(self, Undo())

    def redo(self):
        return reduce(self, Redo())


# ---------------------------------------------------------------------------
# Reducer
# ---------------------------------------------------------------------------

def reduce(history: ActionHistory, command: Command) -> Tuple[ActionHistory, Optional[Position]]:
    """Apply *command* and return ``(new_history, position_or_None)``."""
    entries = history.entries
    cur = history.cursor

    if isinstance(command, Push):
        return ActionHistory(entries[:cur + 1] + (command.action,), cur + 1), None

    if isinstance(command, Undo):
        if cur < 0:
            return history, None
        position = entries[cur - 1].position if cur != 0 else None
        return ActionHistory(entries, cur - 1), position

    if isinstance(command, Redo):
        if not entries or cur >= len(entries) - 1:
            return history, None
        position = entries[cur + 1].position if cur != 0 else None
        return ActionHistory(entries, cur + 1), position

    raise AssertionError(f"unknown history command: {command!r}")
