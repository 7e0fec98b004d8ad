"""Session state machine.

A typing session starts Idle, runs from the first keystroke, and ends either
Finished (text completed or time up) or Aborted (quit). Restart replaces the
session with a fresh Idle one.
"""

from enum import Enum


class SessionState(Enum):
    """Lifecycle states of one typing session."""

    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"
    ABORTED = "aborted"


class InvalidTransitionError(Exception):
    """Raised when an invalid state transition is attempted."""

    def __init__(self, current: SessionState, target: SessionState) -> None:
        self.current = current
        self.target = target
        super().__init__(f"Invalid transition from {current.value} to {target.value}")


class EmptyTargetTextError(ValueError):
    """Raised when a session would start with no text to type."""


# Valid state transitions table. Restart is modelled as a transition back
# to IDLE; the controller swaps in a brand new session when it happens.
VALID_TRANSITIONS: dict[SessionState, set[SessionState]] = {
    SessionState.IDLE: {
        SessionState.RUNNING,
        SessionState.IDLE,  # Restart before typing
        SessionState.ABORTED,
    },
    SessionState.RUNNING: {
        SessionState.FINISHED,
        SessionState.IDLE,  # Restart
        SessionState.ABORTED,
    },
    SessionState.FINISHED: {
        SessionState.IDLE,  # Restart
        SessionState.ABORTED,
    },
    # Terminal
    SessionState.ABORTED: set(),
}

TERMINAL_STATES: frozenset[SessionState] = frozenset(
    {SessionState.FINISHED, SessionState.ABORTED}
)


def can_transition(current: SessionState, target: SessionState) -> bool:
    return target in VALID_TRANSITIONS[current]


def validate_transition(current: SessionState, target: SessionState) -> None:
    """Raise InvalidTransitionError unless ``current -> target`` is allowed."""
    if not can_transition(current, target):
        raise InvalidTransitionError(current, target)
