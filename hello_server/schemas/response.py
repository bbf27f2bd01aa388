"""Global API response schema used for error bodies."""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """
    Standard API response envelope.

    - status: always 0; only errors are rendered in this envelope.
    - message: error description when status=0.
    - data: optional payload; null when no data to return.
    """

    status: int  # 0 = error
    message: str
    data: Optional[T] = None


def error_response(message: str, data: Any = None) -> ApiResponse[Any]:
    """Build an error API response (status=0)."""
    return ApiResponse(status=0, message=message, data=data)
