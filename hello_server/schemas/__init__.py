"""Pydantic schemas."""

from hello_server.schemas.response import ApiResponse, error_response

__all__ = ["ApiResponse", "error_response"]
