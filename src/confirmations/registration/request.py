"""Registration confirmation payload.

``RegistrationForm`` is what the operator types; ``RegistrationConfirmation``
is the immutable payload handed to the delivery provider, assembled fresh
for every attempt from the form, two derived fields (registration date and
confirmation number) and the deployment's static defaults.
"""

import os
from dataclasses import dataclass
from datetime import date

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import List, String, Text

from confirmations.domain import confirmations
from confirmations.registration.validation import is_valid_email

DEFAULT_ORGANIZER_EMAIL = "events@gamesandconnect.com"
DEFAULT_EVENT_DESCRIPTION = (
    "This is a test email to verify the email notification system is working correctly."
)
DEFAULT_EVENT_REQUIREMENTS = ("Valid ID", "Comfortable gaming attire")
DEFAULT_EVENT_INCLUDES = ("Refreshments", "Gaming equipment", "Prizes")

# en-GB ordering: day/month/year
REGISTRATION_DATE_FORMAT = "%d/%m/%Y"


def organizer_email() -> str:
    """Organizer address for this deployment."""
    return os.environ.get("CONFIRMATIONS_ORGANIZER_EMAIL", DEFAULT_ORGANIZER_EMAIL)


def format_registration_date(today: date | None = None) -> str:
    return (today or date.today()).strftime(REGISTRATION_DATE_FORMAT)


@dataclass(frozen=True)
class RegistrationForm:
    """Operator input for a single confirmation send."""

    to_email: str = ""
    to_name: str = "Test User"
    event_title: str = "Sample Gaming Event"
    event_date: str = "2025-01-15"
    event_time: str = "2:00 PM"
    event_location: str = "Games & Connect Community Center"
    event_price: str = "₵25"


@confirmations.value_object
class RegistrationConfirmation:
    """Confirmation email payload for one event registration.

    Only the recipient address is validated; every other field is
    free-form text copied from the form or the deployment defaults.
    """

    recipient_name: Text(default="")
    recipient_email: String(required=True, max_length=254)

    event_title: Text(default="")
    event_date: Text(default="")
    event_time: Text(default="")
    event_location: Text(default="")
    event_price: Text(default="")

    registration_date: String(required=True, max_length=10)
    confirmation_number: String(required=True, max_length=50)

    event_description: Text()
    event_requirements: List(content_type=String)
    event_includes: List(content_type=String)

    organizer_email: String(required=True, max_length=254)

    @invariant.post
    def recipient_email_is_well_formed(self):
        if not is_valid_email(self.recipient_email):
            raise ValidationError(
                {"recipient_email": [f"Invalid recipient email address: {self.recipient_email!r}"]}
            )

    @classmethod
    def from_form(
        cls,
        form: RegistrationForm,
        confirmation_number: str,
        registration_date: str,
        organizer: str | None = None,
    ) -> "RegistrationConfirmation":
        return cls(
            recipient_name=form.to_name,
            recipient_email=form.to_email.strip(),
            event_title=form.event_title,
            event_date=form.event_date,
            event_time=form.event_time,
            event_location=form.event_location,
            event_price=form.event_price,
            registration_date=registration_date,
            confirmation_number=confirmation_number,
            event_description=DEFAULT_EVENT_DESCRIPTION,
            event_requirements=list(DEFAULT_EVENT_REQUIREMENTS),
            event_includes=list(DEFAULT_EVENT_INCLUDES),
            organizer_email=organizer or organizer_email(),
        )

    def template_params(self) -> dict:
        """Flatten the payload for template-based providers."""
        return {
            "to_name": self.recipient_name or "",
            "to_email": self.recipient_email,
            "event_title": self.event_title or "",
            "event_date": self.event_date or "",
            "event_time": self.event_time or "",
            "event_location": self.event_location or "",
            "event_price": self.event_price or "",
            "registration_date": self.registration_date,
            "confirmation_number": self.confirmation_number,
            "event_description": self.event_description or "",
            "event_requirements": "\n".join(f"• {item}" for item in self.event_requirements or []),
            "event_includes": "\n".join(f"• {item}" for item in self.event_includes or []),
            "organizer_email": self.organizer_email,
            "reply_to": self.organizer_email,
        }
