"""Project-level configuration and path helpers."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = PROJECT_ROOT / "03_data"
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_DB_PATH = DATA_DIR / "meetbot.db"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"

DEFAULT_API_BASE_URL = "https://us-west-2.recall.ai"
DEFAULT_API_TIMEOUT = 10.0
DEFAULT_PAUSE_SECONDS = 30.0


PathLike = Union[str, Path]


def resolve_db_path(env_value: PathLike | None = None) -> PathLike:
    """Resolve DATABASE_URL to an absolute path."""
    if not env_value:
        DATA_DIR.mkdir(parents=True, exist_ok=True)
        return DEFAULT_DB_PATH

    if str(env_value) == ":memory:":
        return ":memory:"

    candidate = Path(env_value)
    return candidate if candidate.is_absolute() else PROJECT_ROOT / candidate


@dataclass
class Settings:
    """Runtime settings, read from the environment."""

    webhook_secret: str
    api_key: str | None = None
    api_base_url: str = DEFAULT_API_BASE_URL
    api_timeout: float = DEFAULT_API_TIMEOUT
    pause_seconds: float = DEFAULT_PAUSE_SECONDS
    session_store: str = "memory"
    db_path: PathLike = ":memory:"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        webhook_secret = os.getenv("WEBHOOK_SECRET")
        if not webhook_secret:
            raise ValueError("WEBHOOK_SECRET environment variable not set")

        session_store = os.getenv("SESSION_STORE", "memory").lower()
        if session_store not in ("memory", "sqlite"):
            raise ValueError(f"Unknown SESSION_STORE: {session_store}")

        return cls(
            webhook_secret=webhook_secret,
            api_key=os.getenv("RECALL_API_KEY"),
            api_base_url=os.getenv("RECALL_API_BASE_URL", DEFAULT_API_BASE_URL),
            api_timeout=float(os.getenv("RECALL_API_TIMEOUT", DEFAULT_API_TIMEOUT)),
            pause_seconds=float(os.getenv("PAUSE_SECONDS", DEFAULT_PAUSE_SECONDS)),
            session_store=session_store,
            db_path=resolve_db_path(os.getenv("DATABASE_URL")),
        )
