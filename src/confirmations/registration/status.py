"""Send status: the observable state of the confirmation workflow.

State Machine:
    IDLE → SENDING → SUCCESS
    IDLE → SENDING → FAILED
    IDLE → SENDING → ERROR
    SUCCESS | FAILED | ERROR → SENDING   (next attempt)
    SUCCESS | FAILED | ERROR → IDLE      (reset)

The presentation layer subscribes to transitions instead of reading shared
flags; every subscriber is called with ``(previous, current)``.
"""

from collections.abc import Callable
from enum import Enum

import structlog
from protean.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class SendState(Enum):
    IDLE = "Idle"
    SENDING = "Sending"
    SUCCESS = "Success"
    FAILED = "Failed"
    ERROR = "Error"


class SendOutcome(Enum):
    SUCCESS = "Success"
    FAILED = "Failed"
    ERROR = "Error"

    @property
    def state(self) -> SendState:
        return SendState(self.value)


TERMINAL_STATES = frozenset({SendState.SUCCESS, SendState.FAILED, SendState.ERROR})

_VALID_TRANSITIONS = {
    SendState.IDLE: {SendState.SENDING},
    SendState.SENDING: {SendState.SUCCESS, SendState.FAILED, SendState.ERROR},
    SendState.SUCCESS: {SendState.SENDING, SendState.IDLE},
    SendState.FAILED: {SendState.SENDING, SendState.IDLE},
    SendState.ERROR: {SendState.SENDING, SendState.IDLE},
}

Subscriber = Callable[[SendState, SendState], None]


class SendStatus:
    """State container for one send surface (one form, one button)."""

    def __init__(self) -> None:
        self._state = SendState.IDLE
        self._subscribers: list[Subscriber] = []

    @property
    def state(self) -> SendState:
        return self._state

    @property
    def is_sending(self) -> bool:
        return self._state == SendState.SENDING

    @property
    def is_terminal(self) -> bool:
        return self._state in TERMINAL_STATES

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a transition callback; returns a function that removes it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _assert_can_transition(self, target: SendState) -> None:
        if target not in _VALID_TRANSITIONS[self._state]:
            raise ValidationError({"state": [f"Cannot transition from {self._state.value} to {target.value}"]})

    def _transition(self, target: SendState) -> None:
        self._assert_can_transition(target)
        previous, self._state = self._state, target
        logger.debug("Send state changed", previous=previous.value, current=target.value)
        for callback in list(self._subscribers):
            try:
                callback(previous, target)
            except Exception:
                # Observers never block a transition
                logger.exception("Send status subscriber raised", previous=previous.value, current=target.value)

    def begin(self) -> None:
        """Enter SENDING at the start of a provider call."""
        self._transition(SendState.SENDING)

    def settle(self, outcome: SendOutcome) -> None:
        """Leave SENDING with the attempt's outcome."""
        self._transition(outcome.state)

    def reset(self) -> None:
        """Return a settled surface to IDLE."""
        if self._state != SendState.IDLE:
            self._transition(SendState.IDLE)
