"""Session data models: what the store keeps per bot."""

from dataclasses import dataclass
from typing import Any

# Platform-defined payload, stored as received.
TranscriptFragment = Any


@dataclass(frozen=True)
class ChatMessage:
    """A chat line posted in the meeting."""

    sender: dict[str, Any] | None = None
    text: str | None = None

    @property
    def sender_name(self) -> str:
        if not self.sender:
            return "unknown"
        return str(self.sender.get("name", "unknown"))

    def to_dict(self) -> dict[str, Any]:
        return {"sender": self.sender, "text": self.text}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ChatMessage":
        return cls(sender=data.get("sender"), text=data.get("text"))
