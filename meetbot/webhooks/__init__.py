"""Webhook ingestion module."""

from .auth import WebhookSecretDependency, verify_secret
from .handler import IWebhookHandler, WebhookHandler, is_private_command

__all__ = [
    "IWebhookHandler",
    "WebhookHandler",
    "WebhookSecretDependency",
    "is_private_command",
    "verify_secret",
]
