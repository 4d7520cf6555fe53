"""SIM implementation - replays a scripted meeting against the webhooks."""

import asyncio
import random
from typing import Any

import httpx

from meetbot.logging_config import get_logger

logger = get_logger(__name__)


SCRIPT: list[tuple[str, str, str]] = [
    ("transcript", "Alice", "Good morning everyone, let's get started."),
    ("transcript", "Bob", "Morning. I have the quarterly numbers ready."),
    ("chat", "Charlie", "Slides are in the shared folder"),
    ("transcript", "Alice", "Great, before that one confidential item."),
    ("chat", "Alice", "Private"),
    ("transcript", "Bob", "Back on the record, revenue is up four percent."),
    ("chat", "Bob", "thanks all"),
]


class Sim:
    """Posts transcript and chat webhooks the way the bot platform would."""

    def __init__(
        self,
        api_url: str = "http://localhost:8000",
        secret: str = "",
        bot_id: str = "sim-bot",
        transport: httpx.AsyncBaseTransport | None = None,
        delay: tuple[float, float] = (0.5, 1.5),
    ):
        self._api_url = api_url
        self._secret = secret
        self._bot_id = bot_id
        self._delay = delay
        self._client = httpx.AsyncClient(base_url=api_url, transport=transport)
        self._transcript_id = 0

    async def close(self) -> None:
        await self._client.aclose()

    async def run_scenario(self, include_private: bool = True) -> list[int]:
        """Replay the script. Returns the status code of every delivery."""
        statuses = []
        for kind, speaker, text in SCRIPT:
            if kind == "chat" and text.lower() == "private" and not include_private:
                continue

            if kind == "transcript":
                statuses.append(await self.send_transcript(speaker, text))
            else:
                statuses.append(await self.send_chat(speaker, text))

            low, high = self._delay
            if high > 0:
                await asyncio.sleep(random.uniform(low, high))

        logger.info("SIM: scenario finished for bot %s: %s", self._bot_id, statuses)
        return statuses

    async def send_transcript(self, speaker: str, text: str) -> int:
        """Deliver one final transcript fragment."""
        self._transcript_id += 1
        fragment = {
            "original_transcript_id": self._transcript_id,
            "speaker": speaker,
            "is_final": True,
            "words": [{"text": word} for word in text.split()],
        }
        return await self._post(
            "/transcription",
            {"data": {"bot_id": self._bot_id, "transcript": fragment}},
        )

    async def send_chat(self, sender: str, text: str) -> int:
        """Deliver one chat message event."""
        return await self._post(
            "/chat",
            {
                "event": "bot.chat_message",
                "data": {
                    "bot_id": self._bot_id,
                    "sender": {"name": sender},
                    "text": text,
                },
            },
        )

    async def _post(self, path: str, body: dict[str, Any]) -> int:
        try:
            response = await self._client.post(
                path,
                params={"secret": self._secret},
                json=body,
                timeout=10.0,
            )
        except httpx.HTTPError as e:
            logger.error("SIM: Failed to deliver %s: %s", path, e)
            return 0

        if response.status_code != 200:
            logger.error("SIM: %s returned %s", path, response.status_code)
        else:
            logger.info("SIM: %s -> %s", path, response.json())
        return response.status_code
