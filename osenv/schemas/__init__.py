"""Schemas shared by the converters and the accessor."""
from __future__ import annotations

from .conversion import Conversion, resolve

__all__ = ["Conversion", "resolve"]
