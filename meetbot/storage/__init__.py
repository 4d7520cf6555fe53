"""Session storage module."""

from .sqlite import SqliteSessionStore
from .store import ISessionStore, MemorySessionStore

__all__ = ["ISessionStore", "MemorySessionStore", "SqliteSessionStore"]
