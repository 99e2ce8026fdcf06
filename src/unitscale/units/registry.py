"""
unitscale.units.registry
========================

Registry of converters, one per unit enumeration (i.e. per physical
dimension), and the public `convert` entry point used by the metadata model.

- Encapsulates global state in a `ConverterRegistry` class (thread-safe).
- Converters are registered once, when the default registry is bootstrapped.
- `convert(quantity, unit)` dispatches on the enumeration of the quantity's
  unit, then on the (source, destination) pair inside that enumeration.

Only the power dimension is shipped; other dimensions plug in by registering
a `Converter` built from their own enumeration and `ScaleTable`.
"""
from __future__ import annotations

import threading
from enum import Enum
from typing import Dict, Mapping

from unitscale.core.converter import Converter
from unitscale.core.exceptions import (
    ConfigurationError,
    DimensionMismatchError,
    UndefinedUnitError,
)
from unitscale.core.quantity import Quantity
from unitscale.logger import logger
from unitscale.units.power import POWER_CONVERTER


class ConverterRegistry:
    """Thread-safe mapping from unit enumeration type to its `Converter`."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._converters: Dict[type[Enum], Converter] = {}

    def __contains__(self, enum_type: object) -> bool:
        return self.has(enum_type)

    # -------------------------- public API ---------------------------------
    def register(self, converter: Converter, replace: bool = False) -> None:
        """Register (or overwrite if replace is True) the converter for its enumeration."""
        enum_type = converter.enum_type
        with self._lock:
            if not replace and enum_type in self._converters:
                msg = (
                    f"Cannot register converter for '{enum_type.__name__}': "
                    "a converter for this enumeration already exists."
                )
                logger.error(msg)
                raise ConfigurationError(msg)
            self._converters[enum_type] = converter
        logger.debug("Registered %r", converter)

    def has(self, enum_type: object) -> bool:
        with self._lock:
            return enum_type in self._converters

    def get(self, enum_type: type[Enum]) -> Converter:
        """Lookup the converter for ``enum_type``.

        Raises `UndefinedUnitError` if no converter is registered.
        """
        with self._lock:
            converter = self._converters.get(enum_type)
        if converter is None:
            raise UndefinedUnitError(enum_type)
        return converter

    def all(self) -> Mapping[type[Enum], Converter]:
        with self._lock:
            return dict(self._converters)

    def convert(self, quantity: Quantity, unit: Enum) -> Quantity:
        """Return ``quantity`` expressed in ``unit``.

        Raises
        ------
        DimensionMismatchError
            If ``unit`` belongs to a different registered enumeration.
        UndefinedUnitError
            If either unit is outside every registered enumeration.
        """
        if not isinstance(quantity, Quantity):
            raise TypeError(f"Expected a Quantity, got {type(quantity).__name__}")

        converter = self.get(type(quantity.unit))
        if not converter.accepts(unit):
            if isinstance(unit, Enum) and self.has(type(unit)):
                other = self.get(type(unit))
                raise DimensionMismatchError(
                    f"Cannot convert '{quantity.unit.value}' "
                    f"({converter.enum_type.__name__}, {converter.table.dimension!r}) "
                    f"to '{unit.value}' "
                    f"({other.enum_type.__name__}, {other.table.dimension!r})"
                )
            raise UndefinedUnitError(unit, converter.enum_type)
        return converter(quantity, unit)


# ---------------------------------------------------------------------------
# Bootstrap a default registry
# ---------------------------------------------------------------------------

def _bootstrap_default_registry() -> ConverterRegistry:
    reg = ConverterRegistry()
    reg.register(POWER_CONVERTER)
    return reg


# Public, shared default registry
DEFAULT_REGISTRY: ConverterRegistry = _bootstrap_default_registry()


def convert(quantity: Quantity, unit: Enum) -> Quantity:
    """Convert ``quantity`` to ``unit`` using the default registry."""
    return DEFAULT_REGISTRY.convert(quantity, unit)


__all__ = [
    "ConverterRegistry",
    "DEFAULT_REGISTRY",
    "convert",
]
