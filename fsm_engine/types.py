"""Shared type aliases and errors for the FSM engine."""

from __future__ import annotations

StateId = str
EventId = str


class InvalidStateError(KeyError):
    """Raised when asked to move to a state that is not configured."""

    def __init__(self, state: StateId, message: str) -> None:
        self.state = state
        super().__init__(message)


class InvalidEventError(KeyError):
    """Raised when an event has no transition from the active state."""

    def __init__(self, event: EventId, state: StateId, message: str) -> None:
        self.event = event
        self.state = state
        super().__init__(message)
