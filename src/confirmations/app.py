"""Confirmations FastAPI application.

Usage:
    uvicorn confirmations.app:create_app --factory --host 0.0.0.0 --port 8000 --reload
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from confirmations.api import router as confirmations_router
from confirmations.domain import confirmations
from confirmations.utils.logging import configure_logging


def create_app() -> FastAPI:
    """Initialize logging and the domain, then build the web app."""
    configure_logging()
    confirmations.init()

    app = FastAPI(
        title="Registration Confirmations API",
        description="Send and monitor event-registration confirmation emails",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the confirmations domain context for each request."""
        with confirmations.domain_context():
            response = await call_next(request)
        return response

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    app.include_router(confirmations_router)
    return app
