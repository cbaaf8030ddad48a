"""Pydantic request/response models for the Confirmations API.

API schemas are separate from the domain payload (anti-corruption pattern).
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Models
# ---------------------------------------------------------------------------
class SendConfirmationRequest(BaseModel):
    to_email: str = Field("", examples=["test@example.com"])
    to_name: str = Field("Test User")
    event_title: str = Field("Sample Gaming Event")
    event_date: str = Field("2025-01-15")
    event_time: str = Field("2:00 PM")
    event_location: str = Field("Games & Connect Community Center")
    event_price: str = Field("₵25")


# ---------------------------------------------------------------------------
# Response Models
# ---------------------------------------------------------------------------
class ConfigurationStatusResponse(BaseModel):
    configured: bool
    message: str
    can_send: bool


class SendConfirmationResponse(BaseModel):
    outcome: str
    confirmation_number: str
    title: str
    description: str
    variant: str


class RejectionResponse(BaseModel):
    rejection: str
    title: str
    description: str
