"""Delivery provider port (abstract interface).

Defines the contract every email delivery binding must implement. The
dispatch workflow only sees this boolean-success contract; wire protocols
stay inside the adapters.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from confirmations.registration.request import RegistrationConfirmation


@dataclass(frozen=True)
class ConfigurationStatus:
    """Snapshot of whether the provider binding is ready to send."""

    configured: bool
    message: str


class DeliveryPort(ABC):
    """Abstract interface for email delivery providers."""

    @abstractmethod
    async def send_notification(self, payload: RegistrationConfirmation) -> bool:
        """Hand one confirmation to the provider.

        Returns True when the provider accepted the request and False when
        it explicitly refused it. Transport failures raise.
        """
        ...

    @abstractmethod
    def configuration_status(self) -> ConfigurationStatus:
        """Report whether the binding has everything it needs to send."""
        ...
