"""Tests for the send status state machine and its subscribers."""

import pytest
from protean.exceptions import ValidationError
from structlog.testing import capture_logs

from confirmations.registration.status import SendOutcome, SendState, SendStatus


def _status_at(state):
    status = SendStatus()
    if state == SendState.IDLE:
        return status
    status.begin()
    if state == SendState.SENDING:
        return status
    status.settle(SendOutcome(state.value))
    return status


class TestValidTransitions:
    def test_starts_idle(self):
        status = SendStatus()
        assert status.state == SendState.IDLE
        assert status.is_sending is False
        assert status.is_terminal is False

    def test_idle_to_sending(self):
        status = _status_at(SendState.IDLE)
        status.begin()
        assert status.state == SendState.SENDING
        assert status.is_sending is True

    @pytest.mark.parametrize("outcome", list(SendOutcome))
    def test_sending_settles_on_outcome(self, outcome):
        status = _status_at(SendState.SENDING)
        status.settle(outcome)
        assert status.state == outcome.state
        assert status.is_terminal is True
        assert status.is_sending is False

    @pytest.mark.parametrize("state", [SendState.SUCCESS, SendState.FAILED, SendState.ERROR])
    def test_terminal_allows_next_attempt(self, state):
        status = _status_at(state)
        status.begin()
        assert status.state == SendState.SENDING

    @pytest.mark.parametrize("state", [SendState.SUCCESS, SendState.FAILED, SendState.ERROR])
    def test_reset_returns_to_idle(self, state):
        status = _status_at(state)
        status.reset()
        assert status.state == SendState.IDLE

    def test_reset_when_idle_is_a_no_op(self):
        status = SendStatus()
        calls = []
        status.subscribe(lambda previous, current: calls.append(current))
        status.reset()
        assert status.state == SendState.IDLE
        assert calls == []


class TestInvalidTransitions:
    def test_cannot_begin_while_sending(self):
        status = _status_at(SendState.SENDING)
        with pytest.raises(ValidationError):
            status.begin()
        assert status.state == SendState.SENDING

    @pytest.mark.parametrize("outcome", list(SendOutcome))
    def test_cannot_settle_without_sending(self, outcome):
        status = SendStatus()
        with pytest.raises(ValidationError):
            status.settle(outcome)

    def test_cannot_reset_mid_flight(self):
        status = _status_at(SendState.SENDING)
        with pytest.raises(ValidationError):
            status.reset()


class TestSubscribers:
    def test_subscriber_sees_each_transition(self):
        status = SendStatus()
        seen = []
        status.subscribe(lambda previous, current: seen.append((previous, current)))

        status.begin()
        status.settle(SendOutcome.FAILED)

        assert seen == [
            (SendState.IDLE, SendState.SENDING),
            (SendState.SENDING, SendState.FAILED),
        ]

    def test_unsubscribe_stops_notifications(self):
        status = SendStatus()
        seen = []
        unsubscribe = status.subscribe(lambda previous, current: seen.append(current))

        status.begin()
        unsubscribe()
        status.settle(SendOutcome.SUCCESS)

        assert seen == [SendState.SENDING]

    def test_unsubscribe_twice_is_harmless(self):
        status = SendStatus()
        unsubscribe = status.subscribe(lambda previous, current: None)
        unsubscribe()
        unsubscribe()

    def test_outcome_maps_to_matching_state(self):
        assert SendOutcome.SUCCESS.state == SendState.SUCCESS
        assert SendOutcome.FAILED.state == SendState.FAILED
        assert SendOutcome.ERROR.state == SendState.ERROR


class TestSubscriberFailures:
    def test_raising_subscriber_does_not_block_transition(self):
        status = SendStatus()
        seen = []

        def explode(previous, current):
            raise RuntimeError("observer down")

        status.subscribe(explode)
        status.subscribe(lambda previous, current: seen.append(current))

        with capture_logs() as logs:
            status.begin()

        assert status.state == SendState.SENDING
        assert seen == [SendState.SENDING]
        errors = [entry for entry in logs if entry["log_level"] == "error"]
        assert len(errors) == 1
        assert errors[0]["event"] == "Send status subscriber raised"
        assert errors[0]["current"] == "Sending"
