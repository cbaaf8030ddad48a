"""Operator feedback: one status message per send attempt.

Each message class knows its variant and how to render title and
description from the attempt context, mirroring how notification
templates render subject and body. Pre-flight messages ask the operator
to fix their input; post-flight messages report that the send did not go
through without exposing diagnostic detail.
"""

from dataclasses import dataclass
from enum import Enum

from confirmations.registration.status import SendOutcome
from confirmations.registration.validation import Rejection


class MessageVariant(Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


@dataclass(frozen=True)
class OperatorMessage:
    title: str
    description: str
    variant: MessageVariant = MessageVariant.DEFAULT


class MissingRecipientMessage:
    variant = MessageVariant.DESTRUCTIVE

    @staticmethod
    def render(context: dict) -> dict:
        return {
            "title": "Missing Email",
            "description": "Please enter a recipient email address.",
        }


class InvalidRecipientMessage:
    variant = MessageVariant.DESTRUCTIVE

    @staticmethod
    def render(context: dict) -> dict:
        return {
            "title": "Invalid Email",
            "description": "Please enter a valid email address.",
        }


class NotConfiguredMessage:
    variant = MessageVariant.DESTRUCTIVE

    @staticmethod
    def render(context: dict) -> dict:
        return {
            "title": "Email Not Configured",
            "description": context.get("configuration_message")
            or "Email delivery is not configured. Check the delivery settings.",
        }


class ConfirmationSentMessage:
    variant = MessageVariant.DEFAULT

    @staticmethod
    def render(context: dict) -> dict:
        recipient = context.get("recipient_email", "the recipient")
        return {
            "title": "Confirmation Email Sent!",
            "description": f"Confirmation email sent successfully to {recipient}",
        }


class ConfirmationFailedMessage:
    variant = MessageVariant.DESTRUCTIVE

    @staticmethod
    def render(context: dict) -> dict:
        return {
            "title": "Email Failed",
            "description": "Failed to send the confirmation email. Check the logs for details.",
        }


class ConfirmationErrorMessage:
    variant = MessageVariant.DESTRUCTIVE

    @staticmethod
    def render(context: dict) -> dict:
        return {
            "title": "Email Error",
            "description": "An error occurred while sending the confirmation email. Check the logs for details.",
        }


MESSAGE_REGISTRY: dict[Rejection | SendOutcome, type] = {
    Rejection.MISSING_RECIPIENT: MissingRecipientMessage,
    Rejection.INVALID_RECIPIENT: InvalidRecipientMessage,
    Rejection.NOT_CONFIGURED: NotConfiguredMessage,
    SendOutcome.SUCCESS: ConfirmationSentMessage,
    SendOutcome.FAILED: ConfirmationFailedMessage,
    SendOutcome.ERROR: ConfirmationErrorMessage,
}


def render_message(key: Rejection | SendOutcome, context: dict | None = None) -> OperatorMessage:
    """Render the operator message for a rejection reason or outcome."""
    message_cls = MESSAGE_REGISTRY.get(key)
    if message_cls is None:
        raise ValueError(f"No operator message registered for: {key}")
    rendered = message_cls.render(context or {})
    return OperatorMessage(
        title=rendered["title"],
        description=rendered["description"],
        variant=message_cls.variant,
    )
