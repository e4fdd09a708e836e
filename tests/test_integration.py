"""Integration tests: end-to-end scenarios on small machines."""
import logging

from fsm_engine import FSM

TOGGLE = {
    "initial": "off",
    "states": {
        "off": {"transitions": {"toggle": "on"}},
        "on": {"transitions": {"toggle": "off"}},
    },
}


class TestToggleScenario:
    def test_toggle_then_undo_to_start(self):
        """Two toggles, then undo back past the start."""
        fsm = FSM(TOGGLE)

        fsm.trigger("toggle")
        assert fsm.get_state() == "on"
        fsm.trigger("toggle")
        assert fsm.get_state() == "off"

        assert fsm.undo() is True
        assert fsm.get_state() == "on"
        assert fsm.undo() is True
        assert fsm.get_state() == "off"
        assert fsm.undo() is False
        assert fsm.get_state() == "off"

    def test_independent_instances(self):
        """Two machines from one config share no state."""
        a = FSM(TOGGLE)
        b = FSM(TOGGLE)

        a.trigger("toggle")

        assert a.get_state() == "on"
        assert b.get_state() == "off"
        assert b.history == ("off",)


class TestLogging:
    def test_transitions_logged_at_debug(self, caplog):
        fsm = FSM(TOGGLE)
        with caplog.at_level(logging.DEBUG, logger="fsm_engine.machine"):
            fsm.trigger("toggle")
            fsm.undo()
            fsm.redo()
            fsm.clear_history()

        messages = [r.getMessage() for r in caplog.records]
        assert "FSM off -> on" in messages
        assert "FSM undo on -> off" in messages
        assert "FSM redo off -> on" in messages
        assert any("history cleared" in m for m in messages)

    def test_failed_call_logs_nothing(self, caplog):
        fsm = FSM(TOGGLE)
        with caplog.at_level(logging.DEBUG, logger="fsm_engine.machine"):
            fsm.undo()
            fsm.redo()
        assert caplog.records == []
