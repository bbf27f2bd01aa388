"""
Centralized enums for repeated string values used across the server.

Use .value when a plain string is required (e.g. response bodies).
"""

from enum import Enum


class Greeting(str, Enum):
    """Body text returned by the root route."""

    HELLO_WORLD = "Hello World!"
