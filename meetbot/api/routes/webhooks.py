"""Inbound webhook routes."""

from fastapi import APIRouter, Depends

from ...app import IApplication
from ...errors import WebhookError
from ...logging_config import get_logger
from ...models import (
    ChatOutcome,
    ChatWebhookRequest,
    TranscriptionWebhookRequest,
    WebhookAck,
)
from ...webhooks import WebhookSecretDependency

logger = get_logger(__name__)


def create_webhook_router(app: IApplication) -> APIRouter:
    """Create webhook router. Every route checks the shared secret first."""
    router = APIRouter(
        tags=["webhooks"],
        dependencies=[Depends(WebhookSecretDependency(app.settings.webhook_secret))],
    )

    @router.post(
        "/transcription",
        response_model=WebhookAck,
        response_model_exclude_none=True,
    )
    async def receive_transcription(request: TranscriptionWebhookRequest) -> dict:
        """Receive a real-time transcription fragment from a bot."""
        logger.info(
            "Transcription webhook received for bot %s",
            request.data.bot_id,
            extra={"bot_id": request.data.bot_id},
        )
        try:
            await app.webhook_handler.handle_transcription(
                request.data.bot_id, request.data.transcript
            )
            return {"success": True}
        except WebhookError:
            raise
        except Exception as e:
            logger.error(
                "Unexpected error in transcription webhook handler: %s",
                e,
                exc_info=True,
            )
            raise WebhookError() from e

    @router.post(
        "/chat",
        response_model=WebhookAck,
        response_model_exclude_none=True,
    )
    async def receive_chat(request: ChatWebhookRequest) -> dict:
        """Receive a chat event; ``private`` pauses recording for a while."""
        logger.info("Chat webhook received: %s", request.event)
        try:
            outcome = await app.webhook_handler.handle_chat(request.event, request.data)
        except WebhookError:
            raise
        except Exception as e:
            logger.error(
                "Unexpected error in chat webhook handler: %s", e, exc_info=True
            )
            raise WebhookError() from e

        if outcome is ChatOutcome.IGNORED:
            return {"success": True, "message": "Ignored non-chat event"}
        return {"success": True}

    return router
