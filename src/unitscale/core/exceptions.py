"""
unitscale.core.exceptions
=========================

Error types raised by unitscale.

Each error also derives from the closest built-in exception so code that
catches ``ValueError``/``KeyError``/``TypeError`` keeps working.
"""

from __future__ import annotations

from typing import Any


class UnitscaleError(Exception):
    """Base class for all unitscale errors."""


class ConfigurationError(UnitscaleError, ValueError):
    """A scale table does not agree with its enumeration.

    Raised while a table is being built (at import time for the shipped
    tables), never during a conversion.
    """


class UndefinedUnitError(UnitscaleError, KeyError):
    """A unit outside the closed enumeration reached dispatch."""

    def __init__(self, unit: Any, enum_type: type | None = None) -> None:
        self.unit = unit
        self.enum_type = enum_type
        if enum_type is None:
            msg = f"Undefined unit: {unit!r}"
        else:
            msg = f"Undefined unit: {unit!r} is not a member of {enum_type.__name__}"
        super().__init__(msg)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class DimensionMismatchError(UnitscaleError, TypeError):
    """Units from different physical dimensions were mixed."""


__all__ = [
    "UnitscaleError",
    "ConfigurationError",
    "UndefinedUnitError",
    "DimensionMismatchError",
]
