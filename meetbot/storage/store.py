"""Session store protocol and in-memory implementation."""

from typing import Protocol

from ..models import ChatMessage, TranscriptFragment


class ISessionStore(Protocol):
    """Per-bot transcript and chat sequences with append semantics."""

    async def init(self) -> None:
        """Prepare the backend."""
        ...

    async def close(self) -> None:
        """Release backend resources."""
        ...

    # Transcripts
    async def append_transcript(
        self, bot_id: str, fragment: TranscriptFragment
    ) -> None:
        """Append a fragment to the bot's transcript, creating it if absent."""
        ...

    async def get_transcripts(self, bot_id: str) -> list[TranscriptFragment]:
        """Get the bot's transcript fragments in arrival order."""
        ...

    # Chat
    async def append_chat_message(self, bot_id: str, message: ChatMessage) -> None:
        """Append a chat message to the bot's chat log, creating it if absent."""
        ...

    async def get_chat_messages(self, bot_id: str) -> list[ChatMessage]:
        """Get the bot's chat messages in arrival order."""
        ...

    # Lifecycle
    async def clear(self) -> None:
        """Clear all data."""
        ...


class MemorySessionStore:
    """Dict-of-lists store living in the event loop's process."""

    def __init__(self):
        self._transcripts: dict[str, list[TranscriptFragment]] = {}
        self._chat: dict[str, list[ChatMessage]] = {}

    async def init(self) -> None:
        return

    async def close(self) -> None:
        return

    async def append_transcript(
        self, bot_id: str, fragment: TranscriptFragment
    ) -> None:
        self._transcripts.setdefault(bot_id, []).append(fragment)

    async def get_transcripts(self, bot_id: str) -> list[TranscriptFragment]:
        return list(self._transcripts.get(bot_id, []))

    async def append_chat_message(self, bot_id: str, message: ChatMessage) -> None:
        self._chat.setdefault(bot_id, []).append(message)

    async def get_chat_messages(self, bot_id: str) -> list[ChatMessage]:
        return list(self._chat.get(bot_id, []))

    async def clear(self) -> None:
        self._transcripts.clear()
        self._chat.clear()
