"""Exception types raised by osenv."""
from __future__ import annotations


class OsenvError(Exception):
    """Base class for osenv errors."""


class MissingEnvironmentVariableError(OsenvError, RuntimeError):
    """Raised when a required environment variable is unset or empty."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Missing required environment variable: {name}")
