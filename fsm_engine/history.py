"""History — linear undo/redo timeline of visited states."""
from __future__ import annotations

from fsm_engine.types import StateId


class History:
    """Ordered list of visited states with a cursor marking the active entry.

    Pushing after stepping back discards everything past the cursor, so the
    timeline is always a single line. ``can_undo`` and ``can_redo`` are
    derived from the cursor on every read.
    """

    def __init__(self, initial: StateId) -> None:
        self._entries: list[StateId] = [initial]
        self._cursor: int = 0

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def current(self) -> StateId:
        """Entry under the cursor."""
        return self._entries[self._cursor]

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._entries) - 1

    def entries(self) -> tuple[StateId, ...]:
        """Return a copy of all recorded entries, oldest first."""
        return tuple(self._entries)

    def push(self, state: StateId) -> None:
        """Drop the redo branch, append ``state`` and move the cursor onto it."""
        del self._entries[self._cursor + 1:]
        self._entries.append(state)
        self._cursor = len(self._entries) - 1

    def back(self) -> StateId | None:
        """Step the cursor back. Returns the new entry, or None at the start."""
        if not self.can_undo:
            return None
        self._cursor -= 1
        return self._entries[self._cursor]

    def forward(self) -> StateId | None:
        """Step the cursor forward. Returns the new entry, or None at the end."""
        if not self.can_redo:
            return None
        self._cursor += 1
        return self._entries[self._cursor]

    def clear(self, initial: StateId) -> None:
        """Reset to a single ``initial`` entry."""
        self._entries = [initial]
        self._cursor = 0
