"""
Unit tests for SessionStateMachine class.
Tests all state transitions.
"""
import pytest
from shared.state_machine import (
    SessionStateMachine,
    SessionState,
)


class TestSessionStateEnum:
    """Tests for SessionState enum."""

    def test_all_states_exist(self):
        """All expected states should exist."""
        assert SessionState.RESUMED.value == "RESUMED"
        assert SessionState.PAUSED.value == "PAUSED"

    def test_state_is_string_enum(self):
        """States should compare equal to their string values."""
        assert SessionState.PAUSED == "PAUSED"


class TestStateMachineInit:
    """Tests for SessionStateMachine initialization."""

    def test_default_initial_state(self):
        """New sessions start RESUMED."""
        assert SessionStateMachine().state == SessionState.RESUMED

    def test_custom_initial_state(self):
        sm = SessionStateMachine(SessionState.PAUSED)
        assert sm.state == SessionState.PAUSED


class TestTransitions:
    """Tests for pause/resume/reset transitions."""

    def test_pause(self):
        sm = SessionStateMachine()
        assert sm.transition("pause") == SessionState.PAUSED

    def test_pause_is_idempotent(self):
        sm = SessionStateMachine()
        sm.transition("pause")
        assert sm.transition("pause") == SessionState.PAUSED

    def test_resume_after_pause(self):
        sm = SessionStateMachine()
        sm.transition("pause")
        assert sm.transition("resume") == SessionState.RESUMED

    def test_resume_is_idempotent(self):
        sm = SessionStateMachine()
        assert sm.transition("resume") == SessionState.RESUMED

    @pytest.mark.parametrize("initial", [SessionState.RESUMED, SessionState.PAUSED])
    def test_reset_always_resumes(self, initial):
        sm = SessionStateMachine(initial)
        assert sm.transition("reset") == SessionState.RESUMED

    def test_unknown_action_raises(self):
        sm = SessionStateMachine()
        with pytest.raises(ValueError) as exc_info:
            sm.transition("explode")
        assert "explode" in str(exc_info.value)
        assert sm.state == SessionState.RESUMED

    def test_memory_does_not_grow_with_transitions(self):
        """Long-lived sessions keep only their current state."""
        sm = SessionStateMachine()
        for _ in range(5000):
            sm.transition("pause")
            sm.transition("resume")

        assert vars(sm) == {"_state": SessionState.RESUMED}
