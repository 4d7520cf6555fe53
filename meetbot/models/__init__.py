"""Core data models for the meeting-bot webhook service."""

from .events import (
    ChatMessageData,
    ChatOutcome,
    ChatWebhookRequest,
    EventKind,
    TranscriptionData,
    TranscriptionWebhookRequest,
    WebhookAck,
)
from .session import ChatMessage, TranscriptFragment
from .workflow import PauseResumeWorkflow, WorkflowStep

__all__ = [
    # Session
    "ChatMessage",
    "TranscriptFragment",
    # Events
    "EventKind",
    "ChatOutcome",
    "ChatWebhookRequest",
    "ChatMessageData",
    "TranscriptionData",
    "TranscriptionWebhookRequest",
    "WebhookAck",
    # Workflow
    "PauseResumeWorkflow",
    "WorkflowStep",
]
