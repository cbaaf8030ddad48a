"""Pre-flight validation for confirmation sends.

Pure, synchronous checks run before every attempt. Nothing here is cached:
the recipient can change between attempts, so callers re-evaluate each time.
"""

from dataclasses import dataclass
from enum import Enum

_WHITESPACE = (" ", "\t", "\n", "\r", "\f", "\v")
_FORBIDDEN = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")

MAX_EMAIL_LENGTH = 254
MAX_LOCAL_PART_LENGTH = 64


class Rejection(Enum):
    MISSING_RECIPIENT = "MissingRecipient"
    INVALID_RECIPIENT = "InvalidRecipient"
    NOT_CONFIGURED = "NotConfigured"


@dataclass(frozen=True)
class Sendability:
    """Verdict of a pre-flight check."""

    ok: bool
    reason: Rejection | None = None


SENDABLE = Sendability(ok=True)


def is_valid_email(value: str) -> bool:
    """Check that a string is a conventional ``local@domain.tld`` address."""
    if not value or any(ch in value for ch in _WHITESPACE):
        return False

    if len(value) > MAX_EMAIL_LENGTH:
        return False

    if any(ch in value for ch in _FORBIDDEN):
        return False

    if value.count("@") != 1:
        return False

    local_part, domain_part = value.split("@", 1)

    if len(local_part) > MAX_LOCAL_PART_LENGTH:
        return False

    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        return False

    if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
        return False

    if "." not in domain_part:
        return False

    if ".." in local_part or ".." in domain_part:
        return False

    # Hyphens may not open or close a domain label
    for label in domain_part.split("."):
        if label.startswith("-") or label.endswith("-"):
            return False

    return True


def is_sendable(config_status, recipient_email: str | None) -> Sendability:
    """Decide whether an attempt may reach the delivery provider.

    Args:
        config_status: ConfigurationStatus snapshot from the provider binding.
        recipient_email: Raw recipient address as typed by the operator.
    """
    if recipient_email is None or not recipient_email.strip():
        return Sendability(ok=False, reason=Rejection.MISSING_RECIPIENT)

    if not is_valid_email(recipient_email.strip()):
        return Sendability(ok=False, reason=Rejection.INVALID_RECIPIENT)

    if not config_status.configured:
        return Sendability(ok=False, reason=Rejection.NOT_CONFIGURED)

    return SENDABLE
