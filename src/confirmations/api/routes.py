"""FastAPI routes for the Confirmations domain.

Thin adapters that translate HTTP requests into dispatch attempts.
No business logic, just schema→form→response translation.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from confirmations.api.schemas import (
    ConfigurationStatusResponse,
    RejectionResponse,
    SendConfirmationRequest,
    SendConfirmationResponse,
)
from confirmations.delivery import get_provider
from confirmations.registration.dispatch import ConfirmationDispatcher
from confirmations.registration.request import RegistrationForm

router = APIRouter(prefix="/confirmations", tags=["confirmations"])


@router.get("/status", response_model=ConfigurationStatusResponse)
async def get_status() -> ConfigurationStatusResponse:
    """Report whether confirmation emails can be sent right now.

    Each request runs its own attempt with its own send status, so
    ``can_send`` here reflects provider configuration only. Single-flight
    gating of an in-flight attempt belongs to the client surface.
    """
    dispatcher = ConfirmationDispatcher(get_provider())
    status = dispatcher.configuration_status()
    return ConfigurationStatusResponse(
        configured=status.configured,
        message=status.message,
        can_send=dispatcher.can_send,
    )


@router.post(
    "/send",
    response_model=SendConfirmationResponse,
    responses={422: {"model": RejectionResponse}},
)
async def send_confirmation(body: SendConfirmationRequest):
    """Run one confirmation send attempt."""
    dispatcher = ConfirmationDispatcher(get_provider())
    result = await dispatcher.send(RegistrationForm(**body.model_dump()))

    if result.rejected:
        return JSONResponse(
            status_code=422,
            content=RejectionResponse(
                rejection=result.rejection.value,
                title=result.message.title,
                description=result.message.description,
            ).model_dump(),
        )

    return SendConfirmationResponse(
        outcome=result.outcome.value,
        confirmation_number=result.confirmation_number,
        title=result.message.title,
        description=result.message.description,
        variant=result.message.variant.value,
    )
