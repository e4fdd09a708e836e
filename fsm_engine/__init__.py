"""fsm-engine - Event-driven finite state machine with undo/redo history."""
from __future__ import annotations

from fsm_engine.config import FSMConfig, StateDef
from fsm_engine.history import History
from fsm_engine.machine import FSM
from fsm_engine.types import EventId, InvalidEventError, InvalidStateError, StateId

__all__ = [
    "FSM",
    "FSMConfig",
    "StateDef",
    "History",
    "StateId",
    "EventId",
    "InvalidStateError",
    "InvalidEventError",
]
