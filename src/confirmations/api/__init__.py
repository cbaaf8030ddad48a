"""Confirmations domain API package."""

from confirmations.api.routes import router

__all__ = ["router"]
