"""Recording control module."""

from .orchestrator import IPauseResumeOrchestrator, PauseResumeOrchestrator

__all__ = ["IPauseResumeOrchestrator", "PauseResumeOrchestrator"]
