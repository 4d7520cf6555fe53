"""SQLite session store implementation."""

import json
from pathlib import Path

import aiosqlite

from ..config import resolve_db_path
from ..models import ChatMessage, TranscriptFragment


class SqliteSessionStore:
    """SQLite-backed session store. Arrival order is the autoincrement seq."""

    def __init__(self, db_path: str | Path | None = None):
        if db_path is None:
            self._db_path = resolve_db_path()
        else:
            self._db_path = resolve_db_path(db_path)
        self._conn: aiosqlite.Connection | None = None

    async def init(self) -> None:
        """Open the connection and create tables."""
        self._conn = await aiosqlite.connect(self._db_path)

        schema_path = Path(__file__).parent / "schema.sql"
        with open(schema_path, "r", encoding="utf-8") as f:
            schema_sql = f.read()
        await self._conn.executescript(schema_sql)
        await self._conn.commit()

    async def close(self) -> None:
        """Close database connection."""
        if self._conn:
            await self._conn.close()
            self._conn = None

    def _require_conn(self) -> aiosqlite.Connection:
        if not self._conn:
            raise RuntimeError("Storage not initialized")
        return self._conn

    # Transcripts
    async def append_transcript(
        self, bot_id: str, fragment: TranscriptFragment
    ) -> None:
        conn = self._require_conn()
        await conn.execute(
            "INSERT INTO transcripts (bot_id, fragment) VALUES (?, ?)",
            (bot_id, json.dumps(fragment)),
        )
        await conn.commit()

    async def get_transcripts(self, bot_id: str) -> list[TranscriptFragment]:
        conn = self._require_conn()
        cursor = await conn.execute(
            """
            SELECT fragment
            FROM transcripts
            WHERE bot_id = ?
            ORDER BY seq ASC
            """,
            (bot_id,),
        )
        rows = await cursor.fetchall()
        return [json.loads(row[0]) for row in rows]

    # Chat
    async def append_chat_message(self, bot_id: str, message: ChatMessage) -> None:
        conn = self._require_conn()
        await conn.execute(
            "INSERT INTO chat_messages (bot_id, sender, text) VALUES (?, ?, ?)",
            (bot_id, json.dumps(message.sender), message.text),
        )
        await conn.commit()

    async def get_chat_messages(self, bot_id: str) -> list[ChatMessage]:
        conn = self._require_conn()
        cursor = await conn.execute(
            """
            SELECT sender, text
            FROM chat_messages
            WHERE bot_id = ?
            ORDER BY seq ASC
            """,
            (bot_id,),
        )
        rows = await cursor.fetchall()
        return [ChatMessage(sender=json.loads(row[0]), text=row[1]) for row in rows]

    # Lifecycle
    async def clear(self) -> None:
        """Clear all data."""
        conn = self._require_conn()
        for table in ("transcripts", "chat_messages"):
            await conn.execute(f"DELETE FROM {table}")
        await conn.commit()
