"""Bot platform API client using httpx."""

import os
from typing import Any, Protocol

import httpx

from ..config import DEFAULT_API_BASE_URL, DEFAULT_API_TIMEOUT
from ..errors import BotApiError
from ..logging_config import get_logger

logger = get_logger(__name__)


class IBotClient(Protocol):
    """Narrow capability for calling the bot platform."""

    async def send(
        self,
        path: str,
        method: str = "POST",
        body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Issue one request. Raises BotApiError on any failure."""
        ...

    async def close(self) -> None:
        """Release the underlying connection pool."""
        ...


def pause_recording_path(bot_id: str) -> str:
    return f"/api/v1/bot/{bot_id}/pause_recording"


def resume_recording_path(bot_id: str) -> str:
    return f"/api/v1/bot/{bot_id}/resume_recording"


def send_chat_message_path(bot_id: str) -> str:
    return f"/api/v1/bot/{bot_id}/send_chat_message/"


class RecallClient:
    """Authenticated client for the Recall bot API."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = DEFAULT_API_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = api_key or os.getenv("RECALL_API_KEY")
        if not self._api_key:
            raise ValueError("RECALL_API_KEY environment variable not set")

        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={
                "Authorization": f"Token {self._api_key}",
                "Accept": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    async def send(
        self,
        path: str,
        method: str = "POST",
        body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Issue one request and decode the JSON response."""
        try:
            response = await self._client.request(method, path, json=body)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise BotApiError(
                f"Bot API error: {method} {path} returned {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise BotApiError(f"Bot API error: {method} {path} failed: {e}") from e

        logger.debug("Bot API %s %s -> %s", method, path, response.status_code)

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            return {"raw": response.text}

    async def close(self) -> None:
        await self._client.aclose()


async def send_chat_message(
    client: IBotClient, bot_id: str, message: str
) -> dict[str, Any]:
    """Post ``message`` to everyone in the bot's meeting chat."""
    response = await client.send(
        send_chat_message_path(bot_id),
        method="POST",
        body={"to": "everyone", "message": message},
    )
    logger.info("Chat message sent for bot %s: %s", bot_id, message)
    return response
