"""FSM configuration dataclasses."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from fsm_engine.types import EventId, StateId


@dataclass(frozen=True)
class StateDef:
    """Immutable state descriptor.

    Attributes:
        transitions: Maps event names to target state names.
    """

    transitions: Mapping[EventId, StateId] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "transitions", MappingProxyType(dict(self.transitions))
        )


@dataclass(frozen=True)
class FSMConfig:
    """Immutable FSM configuration.

    ``initial`` is not checked against ``states``; a config whose initial
    state is missing is the caller's mistake and surfaces on first use.

    Attributes:
        initial: Name of the starting state.
        states: Maps state names to their descriptors.
    """

    initial: StateId
    states: Mapping[StateId, StateDef] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "states", MappingProxyType(dict(self.states)))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FSMConfig:
        """Build a config from ``{"initial": ..., "states": {...}}`` plain data.

        A state without a ``"transitions"`` key gets an empty table.
        Raises KeyError if ``initial`` or ``states`` is missing.
        """
        states = {
            name: StateDef(transitions=desc.get("transitions", {}))
            for name, desc in data["states"].items()
        }
        return cls(initial=data["initial"], states=states)

    def to_dict(self) -> dict[str, Any]:
        """Return a fresh plain-data copy in the ``from_dict`` shape."""
        return {
            "initial": self.initial,
            "states": {
                name: {"transitions": dict(sdef.transitions)}
                for name, sdef in self.states.items()
            },
        }
