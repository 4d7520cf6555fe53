"""Meeting-bot webhook receiver and recording control."""

from .app import Application, IApplication
from .bot_api import IBotClient, RecallClient, send_chat_message
from .config import Settings
from .errors import (
    AuthenticationError,
    BotApiError,
    MalformedEventError,
    OrchestrationError,
    WebhookError,
)
from .models import (
    ChatMessage,
    ChatOutcome,
    EventKind,
    PauseResumeWorkflow,
    WorkflowStep,
)
from .recording import IPauseResumeOrchestrator, PauseResumeOrchestrator
from .storage import ISessionStore, MemorySessionStore, SqliteSessionStore
from .webhooks import IWebhookHandler, WebhookHandler, verify_secret

__all__ = [
    # Application
    "Application",
    "IApplication",
    "Settings",
    # Models
    "ChatMessage",
    "ChatOutcome",
    "EventKind",
    "PauseResumeWorkflow",
    "WorkflowStep",
    # Errors
    "WebhookError",
    "AuthenticationError",
    "MalformedEventError",
    "BotApiError",
    "OrchestrationError",
    # Components
    "ISessionStore",
    "MemorySessionStore",
    "SqliteSessionStore",
    "IBotClient",
    "RecallClient",
    "send_chat_message",
    "IPauseResumeOrchestrator",
    "PauseResumeOrchestrator",
    "IWebhookHandler",
    "WebhookHandler",
    "verify_secret",
]
