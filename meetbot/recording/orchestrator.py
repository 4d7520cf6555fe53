"""Timed pause/resume of a bot's recording."""

import asyncio
import functools
from datetime import datetime, timezone
from typing import Awaitable, Callable, Protocol

from ..bot_api import (
    IBotClient,
    pause_recording_path,
    resume_recording_path,
    send_chat_message,
)
from ..config import DEFAULT_PAUSE_SECONDS
from ..errors import OrchestrationError
from ..logging_config import get_logger
from ..models import PauseResumeWorkflow, WorkflowStep

logger = get_logger(__name__)


Sleep = Callable[[float], Awaitable[None]]


class IPauseResumeOrchestrator(Protocol):
    """Starts pause/resume workflows in the background."""

    def trigger(self, bot_id: str) -> asyncio.Task:
        """Spawn a workflow for the bot without waiting for it."""
        ...


class PauseResumeOrchestrator:
    """Pauses a bot's recording, waits, then resumes it.

    At most one workflow runs per bot id; a trigger for a bot whose
    workflow is still in flight returns the running task. Workflows for
    different bots are independent. A failed resume leaves the bot paused.
    """

    def __init__(
        self,
        client: IBotClient,
        pause_seconds: float = DEFAULT_PAUSE_SECONDS,
        sleep: Sleep = asyncio.sleep,
    ):
        self._client = client
        self._pause_seconds = pause_seconds
        self._sleep = sleep
        self._workflows: dict[str, PauseResumeWorkflow] = {}
        self._tasks: dict[str, asyncio.Task] = {}

    @property
    def paused_message(self) -> str:
        return f"The recording has been paused for {self._pause_seconds:g} seconds."

    @property
    def resumed_message(self) -> str:
        return "The recording has been resumed."

    def active(self, bot_id: str) -> PauseResumeWorkflow | None:
        """Get the in-flight workflow for a bot, if any."""
        return self._workflows.get(bot_id)

    def trigger(self, bot_id: str) -> asyncio.Task:
        """Spawn a workflow as a background task; errors go to the log."""
        running = self._tasks.get(bot_id)
        if running and not running.done():
            logger.warning(
                "Pause/resume already in progress for bot %s, ignoring trigger",
                bot_id,
                extra={"bot_id": bot_id},
            )
            return running

        task = asyncio.create_task(self.run(bot_id), name=f"pause-resume:{bot_id}")
        self._tasks[bot_id] = task
        task.add_done_callback(functools.partial(self._on_done, bot_id))
        return task

    def _on_done(self, bot_id: str, task: asyncio.Task) -> None:
        if self._tasks.get(bot_id) is task:
            del self._tasks[bot_id]

        if task.cancelled():
            logger.info("Pause/resume for bot %s cancelled", bot_id)
            return

        exc = task.exception()
        if exc is not None:
            # Already logged with traceback by run().
            logger.debug("Pause/resume for bot %s aborted: %s", bot_id, exc)
        else:
            logger.info("Pause and resume completed for bot %s", bot_id)

    async def run(self, bot_id: str) -> PauseResumeWorkflow:
        """Run the workflow to completion. Raises OrchestrationError."""
        workflow = PauseResumeWorkflow(
            bot_id=bot_id, started_at=datetime.now(timezone.utc)
        )
        self._workflows[bot_id] = workflow

        try:
            workflow.step = WorkflowStep.PAUSING
            logger.info("Pausing recording for bot %s", bot_id)
            await self._client.send(pause_recording_path(bot_id), method="POST")

            workflow.step = WorkflowStep.PAUSED
            await send_chat_message(self._client, bot_id, self.paused_message)

            workflow.step = WorkflowStep.WAITING
            logger.info(
                "Recording paused for bot %s, waiting %s seconds",
                bot_id,
                self._pause_seconds,
            )
            await self._sleep(self._pause_seconds)

            workflow.step = WorkflowStep.RESUMING
            logger.info("Resuming recording for bot %s", bot_id)
            await self._client.send(resume_recording_path(bot_id), method="POST")

            workflow.step = WorkflowStep.RESUMED
            await send_chat_message(self._client, bot_id, self.resumed_message)

            workflow.step = WorkflowStep.DONE
            logger.info("Recording resumed for bot %s", bot_id)
            return workflow

        except asyncio.CancelledError:
            raise
        except Exception as e:
            workflow.error = str(e)
            logger.error(
                "Pause/resume error for bot %s at step %s: %s",
                bot_id,
                workflow.step.value,
                e,
                exc_info=True,
                extra={"bot_id": bot_id, "step": workflow.step.value},
            )
            raise OrchestrationError(bot_id, workflow.step.value) from e

        finally:
            if self._workflows.get(bot_id) is workflow:
                del self._workflows[bot_id]

    async def join(self) -> None:
        """Wait for every in-flight workflow to finish."""
        tasks = list(self._tasks.values())
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    async def stop(self) -> None:
        """Cancel in-flight workflows (application shutdown only)."""
        tasks = list(self._tasks.values())
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
