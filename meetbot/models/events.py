"""Inbound webhook event models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EventKind(str, Enum):
    """Event tags sent by the bot platform that this service acts on."""

    CHAT_MESSAGE = "bot.chat_message"


class ChatOutcome(str, Enum):
    """What the chat handler did with an event."""

    IGNORED = "ignored"
    RECORDED = "recorded"
    TRIGGERED = "triggered"


class TranscriptionData(BaseModel):
    """Body ``data`` of a real-time transcription webhook."""

    model_config = ConfigDict(extra="allow")

    bot_id: str
    transcript: Any = Field(...)


class TranscriptionWebhookRequest(BaseModel):
    """Real-time transcription webhook."""

    model_config = ConfigDict(extra="allow")

    data: TranscriptionData


class ChatWebhookRequest(BaseModel):
    """Any event posted to the chat endpoint; ``data`` is checked later."""

    model_config = ConfigDict(extra="allow")

    event: Any = None
    data: Any = None


class ChatMessageData(BaseModel):
    """``data`` of a ``bot.chat_message`` event."""

    model_config = ConfigDict(extra="allow")

    bot_id: str | None = None
    sender: dict[str, Any] | None = None
    text: str | None = None


class WebhookAck(BaseModel):
    """Successful webhook acknowledgement."""

    success: bool = True
    message: str | None = None
