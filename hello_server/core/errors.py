"""Exception handlers that render HTTP errors in the API response envelope."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from hello_server.schemas.response import error_response

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Render a Starlette/FastAPI HTTPException (404 unknown route, 405 wrong method)
    as {"status": 0, "message": <detail>, "data": null}, keeping status code and headers.
    """
    if exc.status_code == 404:
        logger.debug("No route for %s %s", request.method, request.url.path)
    body = error_response(message=str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(),
        headers=exc.headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the envelope handler to the given app."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
