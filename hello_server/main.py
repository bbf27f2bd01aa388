"""Server entry point: FastAPI app and uvicorn runner."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from hello_server.api.router import api_router
from hello_server.core.config import get_settings
from hello_server.core.errors import register_exception_handlers
from hello_server.core.logging_config import resolve_log_level, setup_logging
from hello_server.core.request_logging_middleware import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events (startup/shutdown)."""
    # Startup: configure logging (app.log + access.log)
    setup_logging()
    logger.info("%s started", app.title)
    yield
    logger.info("%s stopped", app.title)


# Docs and OpenAPI routes are disabled: "/" is the only route served.
app = FastAPI(
    title=get_settings().APP_NAME,
    version="1.0.0",
    description="Responds 'Hello World!' on / and 404 everywhere else.",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

register_exception_handlers(app)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(api_router)


def run(host: Optional[str] = None, port: Optional[int] = None) -> None:
    """Serve the app with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        app,
        host=host if host is not None else settings.HOST,
        port=port if port is not None else settings.PORT,
        log_level=resolve_log_level(settings.LOG_LEVEL),
    )


if __name__ == "__main__":
    run()
