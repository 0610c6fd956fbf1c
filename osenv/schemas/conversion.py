"""Result model returned by conversion strategies."""
from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Conversion(BaseModel, Generic[T]):
    """Outcome of parsing a raw environment value.

    Either ``value`` holds the parsed result, or ``error`` explains why the
    raw string could not be converted.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: T | None = Field(default=None, description="Parsed value when conversion succeeded")
    error: str | None = Field(default=None, description="Reason the conversion failed")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any) -> Conversion:
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> Conversion:
        return cls(error=error)


def resolve(conversion: Conversion[T], default: T) -> T:
    """Return the converted value, or ``default`` if the conversion failed.

    Args:
        conversion: Result produced by a converter
        default: Value to fall back to

    Returns:
        The parsed value on success, otherwise the default
    """
    if conversion.ok:
        return conversion.value  # type: ignore[return-value]
    return default
