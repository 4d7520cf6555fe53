"""Bot platform API module."""

from .client import (
    IBotClient,
    RecallClient,
    pause_recording_path,
    resume_recording_path,
    send_chat_message,
    send_chat_message_path,
)

__all__ = [
    "IBotClient",
    "RecallClient",
    "pause_recording_path",
    "resume_recording_path",
    "send_chat_message",
    "send_chat_message_path",
]
