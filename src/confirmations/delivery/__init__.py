"""Delivery provider registry: pluggable email delivery bindings.

Provides singleton access to the active provider. Uses the fake provider
by default; set CONFIRMATIONS_DELIVERY=emailjs to send through EmailJS.
"""

import os

from confirmations.delivery.port import ConfigurationStatus, DeliveryPort

_provider_instance: DeliveryPort | None = None


def get_provider() -> DeliveryPort:
    """Return the configured delivery provider (singleton)."""
    global _provider_instance
    if _provider_instance is None:
        binding = os.environ.get("CONFIRMATIONS_DELIVERY", "fake")
        if binding == "fake":
            from confirmations.delivery.fake_provider import FakeDeliveryProvider

            _provider_instance = FakeDeliveryProvider()
        elif binding == "emailjs":
            from confirmations.delivery.emailjs import EmailJSProvider

            _provider_instance = EmailJSProvider.from_env()
        else:
            raise ValueError(f"Unknown delivery provider: {binding}")
    return _provider_instance


def set_provider(provider: DeliveryPort) -> None:
    """Override the active delivery provider (useful for tests)."""
    global _provider_instance
    _provider_instance = provider


def reset_provider() -> None:
    """Reset the provider singleton (useful for testing)."""
    global _provider_instance
    _provider_instance = None


def get_configuration_status() -> ConfigurationStatus:
    """Read the active provider's configuration status."""
    return get_provider().configuration_status()
