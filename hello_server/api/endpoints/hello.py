"""Root hello-world endpoint."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from hello_server.core.enums import Greeting

router = APIRouter()


@router.api_route("/", methods=["GET", "HEAD"], response_class=PlainTextResponse)
async def hello() -> str:
    """Return the plain-text greeting."""
    return Greeting.HELLO_WORLD.value
