"""Conversion strategies for environment variable values.

A converter knows its default value and how to turn a raw string into the
target type. Anything exposing ``default_value()`` and ``convert(raw)`` can be
passed to :func:`osenv.get`; the classes here are the built-in ones.
"""
from __future__ import annotations

import re
from typing import Any, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, TypeAdapter, ValidationError

from .schemas.conversion import Conversion

T_co = TypeVar("T_co", covariant=True)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


@runtime_checkable
class Converter(Protocol[T_co]):
    """Strategy for turning a raw environment string into a typed value."""

    def default_value(self) -> T_co:
        ...

    def convert(self, raw: str) -> Conversion:
        ...


class _DefaultConverter(BaseModel):
    # The default is handed back exactly as the caller passed it
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    default: Any = Field(description="Value used when the variable is unset, empty or fails conversion")

    def default_value(self) -> Any:
        return self.default


class StringConverter(_DefaultConverter):
    """Returns the raw value unchanged."""

    def convert(self, raw: str) -> Conversion:
        return Conversion.success(raw)


class IntConverter(_DefaultConverter):
    """Parses a base-10 signed integer such as ``42``, ``-7`` or ``+3``."""

    def convert(self, raw: str) -> Conversion:
        if not _INT_PATTERN.fullmatch(raw):
            return Conversion.failure("not a base-10 integer")
        return Conversion.success(int(raw))


class BoolConverter(_DefaultConverter):
    """Parses a boolean literal.

    True: 1, t, T, TRUE, true, True
    False: 0, f, F, FALSE, false, False

    Any other string is a conversion failure.
    """

    def convert(self, raw: str) -> Conversion:
        if raw in TRUE_LITERALS:
            return Conversion.success(True)
        if raw in FALSE_LITERALS:
            return Conversion.success(False)
        return Conversion.failure("not a boolean literal")


class FloatConverter(_DefaultConverter):
    """Parses a float literal (``1.5``, ``-2e3``, ``inf``)."""

    def convert(self, raw: str) -> Conversion:
        # float() tolerates padding and digit separators, env values must not
        if raw != raw.strip() or "_" in raw:
            return Conversion.failure("not a float literal")
        try:
            return Conversion.success(float(raw))
        except ValueError:
            return Conversion.failure("not a float literal")


class TypeAdapterConverter(_DefaultConverter):
    """Parses the raw value into any type pydantic can validate.

    The raw string is validated as-is first (covers ``datetime``, enums,
    numbers and other string-coercible types), then as JSON text (covers
    lists, dicts and models). Validation uses pydantic's lax rules, so a
    ``bool`` target also accepts tokens such as ``yes``, ``on`` and ``off``
    that :class:`BoolConverter` rejects.

    The adapter is built when the converter is constructed, so a target
    pydantic cannot handle raises ``PydanticSchemaGenerationError`` there
    rather than on a later read.

    Example:
        >>> get("PORTS", TypeAdapterConverter(target=list[int], default=[]))
    """
    target: Any = Field(description="Type the raw value is validated against")

    _adapter: TypeAdapter = PrivateAttr()

    def model_post_init(self, __context: Any) -> None:
        self._adapter = TypeAdapter(self.target)

    def convert(self, raw: str) -> Conversion:
        try:
            value = self._adapter.validate_python(raw)
        except ValidationError:
            try:
                value = self._adapter.validate_json(raw)
            except ValidationError as e:
                return Conversion.failure(f"{e.error_count()} validation error(s) for {e.title}")
        return Conversion.success(value)
