"""Router aggregating all endpoint routers."""

from fastapi import APIRouter

from hello_server.api.endpoints import hello

api_router = APIRouter()

api_router.include_router(hello.router, tags=["hello"])
