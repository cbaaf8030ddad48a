"""Confirmation dispatcher: runs one send attempt end to end.

Validates the form, assembles a fresh RegistrationConfirmation, calls the
delivery provider exactly once, and maps the verdict to a terminal
outcome. Provider errors are logged and converted to ERROR; nothing the
provider raises escapes ``send``.

The dispatcher does not queue or serialize attempts. Callers gate
re-entry with ``can_send`` while an attempt is in flight.
"""

from collections.abc import Callable
from dataclasses import dataclass

import structlog

from confirmations.delivery.port import ConfigurationStatus, DeliveryPort
from confirmations.registration.confirmation_number import generate_confirmation_number
from confirmations.registration.feedback import OperatorMessage, render_message
from confirmations.registration.request import (
    RegistrationConfirmation,
    RegistrationForm,
    format_registration_date,
)
from confirmations.registration.status import SendOutcome, SendStatus
from confirmations.registration.validation import Rejection, is_sendable

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class AttemptResult:
    """What one call to ``send`` produced."""

    message: OperatorMessage
    outcome: SendOutcome | None = None
    rejection: Rejection | None = None
    confirmation_number: str | None = None

    @property
    def rejected(self) -> bool:
        return self.rejection is not None


def _log_message(message: OperatorMessage) -> None:
    logger.info(
        "Operator notified",
        title=message.title,
        description=message.description,
        variant=message.variant.value,
    )


class ConfirmationDispatcher:
    """Owns the send lifecycle for one send surface."""

    def __init__(
        self,
        provider: DeliveryPort,
        configuration_status: Callable[[], ConfigurationStatus] | None = None,
        notify: Callable[[OperatorMessage], None] | None = None,
        status: SendStatus | None = None,
        organizer_email: str | None = None,
    ) -> None:
        self.provider = provider
        self.configuration_status = configuration_status or provider.configuration_status
        self.notify = notify or _log_message
        self.status = status or SendStatus()
        self.organizer_email = organizer_email

    @property
    def can_send(self) -> bool:
        """True when the provider is configured and no attempt is in flight."""
        return self.configuration_status().configured and not self.status.is_sending

    async def send(self, form: RegistrationForm) -> AttemptResult:
        config = self.configuration_status()
        verdict = is_sendable(config, form.to_email)
        if not verdict.ok:
            logger.info("Confirmation send rejected", reason=verdict.reason.value)
            message = render_message(verdict.reason, {"configuration_message": config.message})
            self._surface(message)
            return AttemptResult(message=message, rejection=verdict.reason)

        payload = RegistrationConfirmation.from_form(
            form,
            confirmation_number=generate_confirmation_number(),
            registration_date=format_registration_date(),
            organizer=self.organizer_email,
        )

        with structlog.contextvars.bound_contextvars(confirmation_number=payload.confirmation_number):
            outcome = await self._dispatch(payload)

        message = render_message(outcome, {"recipient_email": payload.recipient_email})
        self._surface(message)
        return AttemptResult(
            message=message,
            outcome=outcome,
            confirmation_number=payload.confirmation_number,
        )

    def _surface(self, message: OperatorMessage) -> None:
        try:
            self.notify(message)
        except Exception:
            logger.exception("Operator notification failed", title=message.title)

    async def _dispatch(self, payload: RegistrationConfirmation) -> SendOutcome:
        """Call the provider once and settle the status on every exit path."""
        self.status.begin()
        outcome = None
        try:
            accepted = await self.provider.send_notification(payload)
        except Exception:
            outcome = SendOutcome.ERROR
            logger.exception(
                "Confirmation dispatch raised",
                recipient_email=payload.recipient_email,
                provider=type(self.provider).__name__,
            )
        else:
            if accepted:
                outcome = SendOutcome.SUCCESS
                logger.info("Confirmation sent", recipient_email=payload.recipient_email)
            else:
                outcome = SendOutcome.FAILED
                logger.warning(
                    "Provider rejected confirmation",
                    recipient_email=payload.recipient_email,
                    provider=type(self.provider).__name__,
                )
        finally:
            # Cancellation skips both branches above
            self.status.settle(outcome or SendOutcome.ERROR)

        return outcome
