"""Typed access to environment variables with default-value fallback."""
from __future__ import annotations

from loguru import logger

from .converters import (
    BoolConverter,
    Converter,
    FloatConverter,
    IntConverter,
    StringConverter,
    TypeAdapterConverter,
)
from .env import get, get_bool, get_float, get_int, get_required_string, get_string
from .errors import MissingEnvironmentVariableError, OsenvError
from .schemas.conversion import Conversion, resolve

# Silent unless the application calls logger.enable("osenv")
logger.disable(__name__)

__all__ = [
    "get",
    "get_string",
    "get_int",
    "get_bool",
    "get_float",
    "get_required_string",
    "Converter",
    "StringConverter",
    "IntConverter",
    "BoolConverter",
    "FloatConverter",
    "TypeAdapterConverter",
    "Conversion",
    "resolve",
    "OsenvError",
    "MissingEnvironmentVariableError",
]
