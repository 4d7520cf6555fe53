"""Tests for the bot platform API client."""

import json

import httpx
import pytest

from meetbot.bot_api import RecallClient, send_chat_message
from meetbot.errors import BotApiError


def make_client(handler, **kwargs) -> RecallClient:
    return RecallClient(
        api_key="test_key",
        base_url="https://api.example.test",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


class TestRecallClientInit:
    """Tests for RecallClient initialization."""

    def test_init_with_env_api_key(self, monkeypatch):
        """Test initialization from RECALL_API_KEY."""
        monkeypatch.setenv("RECALL_API_KEY", "env_key")
        client = RecallClient()
        assert client._api_key == "env_key"

    def test_init_without_api_key(self, monkeypatch):
        """Test initialization without API key raises error."""
        monkeypatch.delenv("RECALL_API_KEY", raising=False)
        with pytest.raises(ValueError, match="RECALL_API_KEY"):
            RecallClient()


class TestRecallClientSend:
    """Tests for RecallClient.send()."""

    async def test_send_uses_base_url_and_token(self):
        """Test request URL, method and auth header."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"ok": True})

        client = make_client(handler)
        response = await client.send("/api/v1/bot/b1/pause_recording")
        await client.close()

        assert response == {"ok": True}
        assert seen[0].method == "POST"
        assert str(seen[0].url) == "https://api.example.test/api/v1/bot/b1/pause_recording"
        assert seen[0].headers["Authorization"] == "Token test_key"

    async def test_send_json_body(self):
        """Test that body is sent as JSON."""
        bodies = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(200, json={})

        client = make_client(handler)
        await client.send("/x", body={"to": "everyone", "message": "hi"})
        await client.close()

        assert bodies == [{"to": "everyone", "message": "hi"}]

    async def test_empty_response_body(self):
        """Test that an empty body decodes to an empty dict."""
        client = make_client(lambda request: httpx.Response(204))
        assert await client.send("/x") == {}
        await client.close()

    async def test_http_error_status(self):
        """Test that non-2xx responses raise BotApiError with the status."""
        client = make_client(lambda request: httpx.Response(502, text="bad gateway"))

        with pytest.raises(BotApiError) as exc_info:
            await client.send("/api/v1/bot/b1/resume_recording")
        await client.close()

        assert exc_info.value.status_code == 502
        assert "resume_recording" in str(exc_info.value)

    async def test_network_error(self):
        """Test that transport failures raise BotApiError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)
        with pytest.raises(BotApiError) as exc_info:
            await client.send("/x")
        await client.close()

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    async def test_timeout_is_configured(self):
        """Test that the client carries an explicit timeout."""
        client = make_client(lambda request: httpx.Response(200), timeout=3.5)
        assert client._client.timeout.read == 3.5
        await client.close()


class TestSendChatMessage:
    """Tests for send_chat_message()."""

    async def test_posts_to_everyone(self, bot_client):
        """Test path and body of the chat-send call."""
        await send_chat_message(bot_client, "b1", "hello")

        assert bot_client.calls == [
            (
                "POST",
                "/api/v1/bot/b1/send_chat_message/",
                {"to": "everyone", "message": "hello"},
            )
        ]

    async def test_propagates_failure(self, bot_client):
        """Test that failures are not swallowed."""
        bot_client.fail_on = "send_chat_message"
        with pytest.raises(BotApiError):
            await send_chat_message(bot_client, "b1", "hello")
