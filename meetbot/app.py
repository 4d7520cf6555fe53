"""Application bootstrap and lifecycle management."""

from typing import Protocol

from .bot_api import IBotClient, RecallClient
from .config import Settings
from .logging_config import get_logger
from .recording import PauseResumeOrchestrator
from .recording.orchestrator import Sleep
from .storage import ISessionStore, MemorySessionStore, SqliteSessionStore
from .webhooks import IWebhookHandler, WebhookHandler

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    settings: Settings

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...

    async def reset(self) -> None:
        """Clear recorded sessions."""
        ...

    @property
    def store(self) -> ISessionStore: ...

    @property
    def webhook_handler(self) -> IWebhookHandler: ...


class Application:
    """Main application bootstrap.

    Store and bot client are built from settings unless injected.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        store: ISessionStore | None = None,
        bot_client: IBotClient | None = None,
        sleep: Sleep | None = None,
    ):
        self.settings = settings or Settings.from_env()
        self._injected_store = store
        self._injected_client = bot_client
        self._sleep = sleep

        # Components (will be initialized in start())
        self._store: ISessionStore | None = None
        self._bot_client: IBotClient | None = None
        self._orchestrator: PauseResumeOrchestrator | None = None
        self._webhook_handler: WebhookHandler | None = None

    def _build_store(self) -> ISessionStore:
        if self._injected_store is not None:
            return self._injected_store
        if self.settings.session_store == "sqlite":
            return SqliteSessionStore(self.settings.db_path)
        return MemorySessionStore()

    def _build_bot_client(self) -> IBotClient:
        if self._injected_client is not None:
            return self._injected_client
        return RecallClient(
            api_key=self.settings.api_key,
            base_url=self.settings.api_base_url,
            timeout=self.settings.api_timeout,
        )

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info("Starting application")

        # 1. Store (no dependencies)
        self._store = self._build_store()
        await self._store.init()
        logger.info("Session store initialized (%s)", type(self._store).__name__)

        # 2. Bot API client (no internal dependencies)
        self._bot_client = self._build_bot_client()
        logger.info("Bot API client initialized")

        # 3. Orchestrator (depends on bot client)
        orchestrator_kwargs = {"pause_seconds": self.settings.pause_seconds}
        if self._sleep is not None:
            orchestrator_kwargs["sleep"] = self._sleep
        self._orchestrator = PauseResumeOrchestrator(
            self._bot_client, **orchestrator_kwargs
        )

        # 4. Webhook handler (depends on store + orchestrator)
        self._webhook_handler = WebhookHandler(self._store, self._orchestrator)
        logger.info("All components initialized successfully")

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        if self._orchestrator:
            await self._orchestrator.stop()
        if self._bot_client:
            await self._bot_client.close()
            logger.info("Bot API client closed")
        if self._store:
            await self._store.close()
            logger.info("Session store closed")

    async def reset(self) -> None:
        """Clear recorded sessions."""
        if self._store:
            await self._store.clear()
            logger.info("Session store cleared")

    @property
    def store(self) -> ISessionStore:
        """Get session store instance."""
        if not self._store:
            raise RuntimeError("Application not started")
        return self._store

    @property
    def orchestrator(self) -> PauseResumeOrchestrator:
        """Get pause/resume orchestrator instance."""
        if not self._orchestrator:
            raise RuntimeError("Application not started")
        return self._orchestrator

    @property
    def webhook_handler(self) -> WebhookHandler:
        """Get webhook handler instance."""
        if not self._webhook_handler:
            raise RuntimeError("Application not started")
        return self._webhook_handler
