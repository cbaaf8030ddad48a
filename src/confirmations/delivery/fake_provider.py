"""Configurable fake delivery provider for development and testing.

Records every payload in memory and can be told to accept, refuse, or
raise, so each dispatch outcome can be produced on demand without any
external calls.
"""

from confirmations.delivery.port import ConfigurationStatus, DeliveryPort
from confirmations.registration.request import RegistrationConfirmation


class FakeDeliveryError(ConnectionError):
    """Raised by the fake provider to simulate a transport failure."""


class FakeDeliveryProvider(DeliveryPort):
    """Delivery provider that records confirmations for test assertions."""

    def __init__(self) -> None:
        self.sent: list[RegistrationConfirmation] = []
        self.calls: int = 0
        self.should_succeed: bool = True
        self.error: Exception | None = None
        self.configured: bool = True

    def configure(
        self,
        should_succeed: bool = True,
        error: Exception | None = None,
        configured: bool = True,
    ) -> None:
        """Configure the fake provider behavior for testing."""
        self.should_succeed = should_succeed
        self.error = error
        self.configured = configured

    async def send_notification(self, payload: RegistrationConfirmation) -> bool:
        self.calls += 1

        if self.error is not None:
            raise self.error

        if not self.should_succeed:
            return False

        self.sent.append(payload)
        return True

    def configuration_status(self) -> ConfigurationStatus:
        if self.configured:
            return ConfigurationStatus(
                configured=True,
                message="Fake delivery provider is ready (messages are kept in memory).",
            )
        return ConfigurationStatus(
            configured=False,
            message="Fake delivery provider is switched off.",
        )

    def reset(self) -> None:
        """Clear recorded confirmations and restore default behavior."""
        self.sent.clear()
        self.calls = 0
        self.should_succeed = True
        self.error = None
        self.configured = True
