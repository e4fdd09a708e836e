"""FSM engine: active state, transition table and undo/redo history."""
from __future__ import annotations

import logging
from typing import Any, Mapping

from fsm_engine.config import FSMConfig
from fsm_engine.history import History
from fsm_engine.types import EventId, InvalidEventError, InvalidStateError, StateId

logger = logging.getLogger(__name__)


class FSM:
    """Finite state machine driven by named events, with linear undo/redo.

    ``config`` is an :class:`FSMConfig` or plain data in the
    ``{"initial": ..., "states": {name: {"transitions": {...}}}}`` shape.
    The configuration is copied and never changes afterwards.

    Forward moves (``change_state``/``trigger``) truncate the redo branch and
    append to the history. ``undo``/``redo`` only move the history cursor.
    ``reset`` and ``clear_history`` are independent: ``reset`` moves the
    active state back to ``initial`` without touching history, and
    ``clear_history`` rewinds the history to ``[initial]`` without touching
    the active state.

    Not thread-safe. A forward move updates several fields in sequence;
    callers sharing one instance must serialize access themselves.
    """

    def __init__(self, config: FSMConfig | Mapping[str, Any]) -> None:
        if not isinstance(config, FSMConfig):
            config = FSMConfig.from_dict(config)
        self._config = config
        self._state: StateId = config.initial
        self._history = History(config.initial)

    # --- Queries ---

    @property
    def config(self) -> FSMConfig:
        return self._config

    @property
    def initial(self) -> StateId:
        return self._config.initial

    @property
    def state(self) -> StateId:
        """Active state. Same as ``get_state()``."""
        return self._state

    @property
    def history(self) -> tuple[StateId, ...]:
        """Recorded states, oldest first."""
        return self._history.entries()

    @property
    def cursor(self) -> int:
        """Index of the active entry in ``history``."""
        return self._history.cursor

    @property
    def undo_available(self) -> bool:
        return self._history.can_undo

    @property
    def redo_available(self) -> bool:
        return self._history.can_redo

    def get_state(self) -> StateId:
        """Return the active state."""
        return self._state

    def get_states(self, event: EventId | None = None) -> list[StateId]:
        """Return configured states, in configuration order.

        With ``event``, only the states whose transition table handles it.
        """
        states = self._config.states
        if event is None:
            return list(states)
        return [name for name, sdef in states.items() if event in sdef.transitions]

    # --- Forward moves ---

    def change_state(self, state: StateId) -> None:
        """Go to ``state``. Raises InvalidStateError if it is not configured."""
        if state not in self._config.states:
            raise InvalidStateError(state, f"State {state!r} does not exist")
        old = self._state
        self._history.push(state)
        self._state = state
        logger.debug("FSM %s -> %s", old, state)

    def trigger(self, event: EventId) -> None:
        """Fire ``event`` from the active state.

        Raises InvalidEventError if the active state has no transition for
        it, and InvalidStateError if the transition targets an unknown state.
        """
        transitions = self._config.states[self._state].transitions
        if event not in transitions:
            raise InvalidEventError(
                event,
                self._state,
                f"Event {event!r} is not defined for state {self._state!r}",
            )
        logger.debug("FSM event %r in state %s", event, self._state)
        self.change_state(transitions[event])

    def reset(self) -> None:
        """Set the active state back to ``initial``. History is untouched."""
        self._state = self._config.initial
        logger.debug("FSM reset to %s", self._state)

    # --- History navigation ---

    def undo(self) -> bool:
        """Step back one history entry. Returns False if already at the start."""
        state = self._history.back()
        if state is None:
            return False
        logger.debug("FSM undo %s -> %s", self._state, state)
        self._state = state
        return True

    def redo(self) -> bool:
        """Step forward one history entry. Returns False if already at the end."""
        state = self._history.forward()
        if state is None:
            return False
        logger.debug("FSM redo %s -> %s", self._state, state)
        self._state = state
        return True

    def clear_history(self) -> None:
        """Rewind history to a single ``initial`` entry.

        The active state is left as is, so it can differ from ``history[0]``
        until the next forward move.
        """
        self._history.clear(self._config.initial)
        logger.debug("FSM history cleared (active state %s)", self._state)
