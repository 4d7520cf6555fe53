"""Error taxonomy for webhook ingestion and recording control."""


class WebhookError(Exception):
    """An error that maps directly onto a webhook HTTP response."""

    status_code = 500
    error = "Internal server error"

    def __init__(self, error: str | None = None, status_code: int | None = None):
        if error is not None:
            self.error = error
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.error)


class AuthenticationError(WebhookError):
    """Caller-supplied secret is missing or does not match."""

    status_code = 401
    error = "Unauthorized"


class MalformedEventError(WebhookError):
    """A recognized event is missing a required field."""

    status_code = 400
    error = "Invalid payload"


class BotApiError(Exception):
    """An outbound call to the bot platform failed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class OrchestrationError(Exception):
    """A pause/resume workflow aborted at ``step``."""

    def __init__(self, bot_id: str, step: str):
        super().__init__(f"Pause/resume failed for bot {bot_id} at step {step}")
        self.bot_id = bot_id
        self.step = step
