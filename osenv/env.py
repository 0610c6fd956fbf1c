"""Environment variable utilities.

Typed getters fall back to the caller's default whenever a variable is
unset, empty, or cannot be converted. They never raise.
"""
from __future__ import annotations

import os
from typing import TypeVar

from loguru import logger

from .converters import BoolConverter, Converter, FloatConverter, IntConverter
from .errors import MissingEnvironmentVariableError
from .schemas.conversion import resolve

T = TypeVar("T")


def get(name: str, converter: Converter[T]) -> T:
    """Retrieve an environment variable converted by ``converter``.

    Args:
        name: Environment variable name
        converter: Strategy providing the default value and the conversion

    Returns:
        Converted value, or the converter's default if the variable is
        unset, empty or fails conversion
    """
    default = converter.default_value()
    raw = os.getenv(name)
    if not raw:
        logger.debug(f"{name} is unset or empty, using default")
        return default

    conversion = converter.convert(raw)
    if not conversion.ok:
        logger.debug(f"{name} could not be converted ({conversion.error}), using default")
    return resolve(conversion, default)


def get_string(name: str, default: str) -> str:
    """Retrieve an environment variable as a string.

    Args:
        name: Environment variable name
        default: Value returned if the variable is unset or empty

    Returns:
        Environment variable value or default
    """
    value = os.getenv(name)
    if not value:
        return default
    return value


def get_int(name: str, default: int) -> int:
    """Retrieve an environment variable as a base-10 integer.

    Args:
        name: Environment variable name
        default: Value returned if the variable is unset, empty or not an integer

    Returns:
        Parsed integer or default
    """
    return get(name, IntConverter(default=default))


def get_bool(name: str, default: bool) -> bool:
    """Retrieve an environment variable as a boolean.

    Accepts 1, t, T, TRUE, true, True as true and 0, f, F, FALSE, false,
    False as false. Anything else yields the default.

    Args:
        name: Environment variable name
        default: Value returned if the variable is unset, empty or not a boolean literal

    Returns:
        Parsed boolean or default
    """
    return get(name, BoolConverter(default=default))


def get_float(name: str, default: float) -> float:
    """Retrieve an environment variable as a float.

    Args:
        name: Environment variable name
        default: Value returned if the variable is unset, empty or not a float

    Returns:
        Parsed float or default
    """
    return get(name, FloatConverter(default=default))


def get_required_string(name: str) -> str:
    """Retrieve a required environment variable or raise an error.

    Args:
        name: Environment variable name

    Returns:
        Environment variable value

    Raises:
        MissingEnvironmentVariableError: If the environment variable is unset or empty
    """
    value = os.getenv(name)
    if not value:
        raise MissingEnvironmentVariableError(name)
    return value
