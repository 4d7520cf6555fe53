"""API routes."""

from .sessions import create_sessions_router
from .webhooks import create_webhook_router

__all__ = ["create_sessions_router", "create_webhook_router"]
