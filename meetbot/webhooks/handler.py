"""Webhook event handling: classify, record, kick off recording control."""

from typing import Any, Protocol

from pydantic import ValidationError

from ..errors import MalformedEventError
from ..logging_config import get_logger
from ..models import (
    ChatMessage,
    ChatMessageData,
    ChatOutcome,
    EventKind,
    TranscriptFragment,
)
from ..recording import IPauseResumeOrchestrator
from ..storage import ISessionStore

logger = get_logger(__name__)

PRIVATE_COMMAND = "private"


def is_private_command(text: str | None) -> bool:
    """True when a chat line is the pause command, in any casing."""
    return isinstance(text, str) and text.lower() == PRIVATE_COMMAND


class IWebhookHandler(Protocol):
    """Applies authenticated webhook events to the session store."""

    async def handle_transcription(
        self, bot_id: str, transcript: TranscriptFragment
    ) -> None:
        """Record one transcript fragment."""
        ...

    async def handle_chat(self, event: Any, data: Any) -> ChatOutcome:
        """Record a chat message and detect the pause command."""
        ...


class WebhookHandler:
    """Records transcripts and chat; triggers pause/resume on command."""

    def __init__(
        self,
        store: ISessionStore,
        orchestrator: IPauseResumeOrchestrator,
    ):
        self._store = store
        self._orchestrator = orchestrator

    async def handle_transcription(
        self, bot_id: str, transcript: TranscriptFragment
    ) -> None:
        """Append a fragment to the bot's transcript."""
        await self._store.append_transcript(bot_id, transcript)
        logger.info("Transcript fragment recorded for bot %s", bot_id)

    async def handle_chat(self, event: Any, data: Any) -> ChatOutcome:
        """Handle a chat-endpoint event.

        Irrelevant events return IGNORED. A chat event without ``bot_id``
        raises MalformedEventError before anything is stored.
        """
        if event != EventKind.CHAT_MESSAGE.value or data is None:
            logger.info("Ignoring non-chat event %s", event)
            return ChatOutcome.IGNORED

        if not isinstance(data, dict):
            logger.warning("Chat message data is not an object: %r", data)
            raise MalformedEventError("Invalid chat message data")

        try:
            chat = ChatMessageData.model_validate(data)
        except ValidationError as e:
            logger.warning("Invalid chat message data: %s", e)
            raise MalformedEventError("Invalid chat message data") from e

        if not chat.bot_id:
            logger.error("Missing bot_id in chat webhook data")
            raise MalformedEventError("Missing bot_id")

        message = ChatMessage(sender=chat.sender, text=chat.text)
        await self._store.append_chat_message(chat.bot_id, message)

        if not is_private_command(chat.text):
            logger.info(
                "Received message from %s for bot %s, not triggering pause/resume",
                message.sender_name,
                chat.bot_id,
            )
            return ChatOutcome.RECORDED

        logger.info(
            "Private command from %s, pausing recording for bot %s",
            message.sender_name,
            chat.bot_id,
            extra={"bot_id": chat.bot_id},
        )
        try:
            self._orchestrator.trigger(chat.bot_id)
        except Exception as e:
            # The platform must not redeliver because recording control failed.
            logger.error(
                "Failed to start pause/resume for bot %s: %s",
                chat.bot_id,
                e,
                exc_info=True,
                extra={"bot_id": chat.bot_id},
            )
        return ChatOutcome.TRIGGERED
