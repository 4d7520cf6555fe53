"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from unittest.mock import AsyncMock

import httpx
import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from meetbot.errors import BotApiError  # noqa: E402

SECRET = "s3cret"


class FakeBotClient:
    """Records outbound calls in order; fails on paths containing ``fail_on``."""

    def __init__(self):
        self.calls: list[tuple] = []
        self.fail_on: str | None = None
        self.closed = False

    async def send(self, path, method="POST", body=None):
        self.calls.append((method, path, body))
        if self.fail_on and self.fail_on in path:
            raise BotApiError(f"Bot API error: {method} {path} returned 502", 502)
        return {}

    async def close(self):
        self.closed = True

    @property
    def paths(self) -> list[str]:
        return [call[1] for call in self.calls]


@pytest.fixture
def settings():
    """Settings with a known secret."""
    from meetbot.config import Settings

    return Settings(webhook_secret=SECRET, api_key="test_key", pause_seconds=30)


@pytest.fixture
def memory_store():
    """Create in-memory session store."""
    from meetbot.storage import MemorySessionStore

    return MemorySessionStore()


@pytest_asyncio.fixture
async def sqlite_store():
    """Create SQLite session store backed by :memory:."""
    from meetbot.storage import SqliteSessionStore

    st = SqliteSessionStore(":memory:")
    await st.init()
    yield st
    await st.close()


@pytest.fixture
def bot_client():
    """Create fake bot API client."""
    return FakeBotClient()


@pytest.fixture
def fake_sleep(bot_client):
    """Sleep that returns at once and shows up in the call log."""

    def record(seconds):
        bot_client.calls.append(("SLEEP", seconds, None))

    return AsyncMock(side_effect=record)


@pytest.fixture
def orchestrator(bot_client, fake_sleep):
    """Create orchestrator with fake client and sleep."""
    from meetbot.recording import PauseResumeOrchestrator

    return PauseResumeOrchestrator(bot_client, pause_seconds=30, sleep=fake_sleep)


@pytest_asyncio.fixture
async def application(settings, memory_store, bot_client, fake_sleep):
    """Create and start an Application with injected fakes."""
    from meetbot.app import Application

    app = Application(
        settings=settings,
        store=memory_store,
        bot_client=bot_client,
        sleep=fake_sleep,
    )
    await app.start()
    yield app
    await app.stop()


@pytest_asyncio.fixture
async def client(application):
    """HTTP client talking to the FastAPI app in-process."""
    from meetbot.api import create_fastapi_app

    fastapi_app = create_fastapi_app(application)
    transport = httpx.ASGITransport(app=fastapi_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
