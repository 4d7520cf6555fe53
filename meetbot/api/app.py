"""FastAPI application setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..app import Application
from ..errors import WebhookError
from ..logging_config import get_logger
from .routes import create_sessions_router, create_webhook_router

logger = get_logger(__name__)


async def webhook_error_handler(request: Request, exc: WebhookError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.error})


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning("Rejected invalid payload on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid payload"})


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s: %s", request.url.path, exc, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_fastapi_app(application: Application | None = None) -> FastAPI:
    """Create and configure FastAPI application."""
    application = application or Application()

    @asynccontextmanager
    async def lifespan(fastapi_app: FastAPI):
        """Manage application lifespan."""
        await application.start()
        yield
        await application.stop()

    fastapi_app = FastAPI(
        title="Meeting Bot Webhooks",
        description="Webhook receiver and recording control for meeting bots",
        version="0.1.0",
        lifespan=lifespan,
    )
    fastapi_app.state.application = application

    fastapi_app.add_exception_handler(WebhookError, webhook_error_handler)
    fastapi_app.add_exception_handler(RequestValidationError, validation_error_handler)
    fastapi_app.add_exception_handler(Exception, unexpected_error_handler)

    @fastapi_app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    fastapi_app.include_router(create_webhook_router(application))
    fastapi_app.include_router(create_sessions_router(application))

    return fastapi_app
