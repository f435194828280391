from enum import Enum
from dataclasses import dataclass


class SessionState(str, Enum):
    RESUMED = "RESUMED"
    PAUSED = "PAUSED"


@dataclass
class Transition:
    from_state: SessionState
    to_state: SessionState
    action: str


class SessionStateMachine:
    """Lifecycle of a player's game session.

    pause and resume are idempotent; reset always lands in RESUMED.
    Only the current state is kept.
    """

    TRANSITIONS = [
        Transition(SessionState.RESUMED, SessionState.PAUSED, "pause"),
        Transition(SessionState.PAUSED, SessionState.PAUSED, "pause"),
        Transition(SessionState.PAUSED, SessionState.RESUMED, "resume"),
        Transition(SessionState.RESUMED, SessionState.RESUMED, "resume"),
        Transition(SessionState.RESUMED, SessionState.RESUMED, "reset"),
        Transition(SessionState.PAUSED, SessionState.RESUMED, "reset"),
    ]

    def __init__(self, initial_state: SessionState = SessionState.RESUMED):
        self._state = initial_state

    @property
    def state(self) -> SessionState:
        return self._state

    def transition(self, action: str) -> SessionState:
        for t in self.TRANSITIONS:
            if t.from_state == self._state and t.action == action:
                self._state = t.to_state
                return self._state

        raise ValueError(f"Unknown session action '{action}'")
