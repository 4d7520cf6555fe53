"""Session read-back routes."""

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ...app import IApplication
from ...errors import WebhookError
from ...logging_config import get_logger
from ...webhooks import WebhookSecretDependency

logger = get_logger(__name__)


class TranscriptsResponse(BaseModel):
    """Response model for a bot's transcript."""

    bot_id: str
    transcripts: list[Any]


class ChatMessageResponse(BaseModel):
    """Response model for one chat message."""

    sender: dict[str, Any] | None
    text: str | None


class ChatLogResponse(BaseModel):
    """Response model for a bot's chat log."""

    bot_id: str
    messages: list[ChatMessageResponse]


def create_sessions_router(app: IApplication) -> APIRouter:
    """Create sessions router."""
    router = APIRouter(
        prefix="/api/bots",
        tags=["sessions"],
        dependencies=[Depends(WebhookSecretDependency(app.settings.webhook_secret))],
    )

    @router.get("/{bot_id}/transcripts", response_model=TranscriptsResponse)
    async def get_transcripts(bot_id: str) -> dict:
        """Get transcript fragments recorded for a bot, oldest first."""
        try:
            transcripts = await app.store.get_transcripts(bot_id)
        except Exception as e:
            logger.error("Failed to read transcripts: %s", e, exc_info=True)
            raise WebhookError() from e
        return {"bot_id": bot_id, "transcripts": transcripts}

    @router.get("/{bot_id}/chat", response_model=ChatLogResponse)
    async def get_chat(bot_id: str) -> dict:
        """Get chat messages recorded for a bot, oldest first."""
        try:
            messages = await app.store.get_chat_messages(bot_id)
        except Exception as e:
            logger.error("Failed to read chat messages: %s", e, exc_info=True)
            raise WebhookError() from e
        return {"bot_id": bot_id, "messages": [m.to_dict() for m in messages]}

    return router
