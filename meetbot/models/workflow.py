"""Pause/resume workflow models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class WorkflowStep(str, Enum):
    """Pause/resume workflow states, in order."""

    IDLE = "idle"
    PAUSING = "pausing"
    PAUSED = "paused"
    WAITING = "waiting"
    RESUMING = "resuming"
    RESUMED = "resumed"
    DONE = "done"


@dataclass
class PauseResumeWorkflow:
    """One in-flight pause/resume run for a bot."""

    bot_id: str
    started_at: datetime
    step: WorkflowStep = WorkflowStep.IDLE
    error: str | None = None
