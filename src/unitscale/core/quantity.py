"""
unitscale.core.quantity
=======================

Defines the immutable `Quantity` value type: a number tagged with one member
of a closed unit enumeration.

The represented physical magnitude is ``value * 10**scale(unit)`` in the
dimension's base unit. Equality and ordering compare those magnitudes, so
``Quantity(1.0, KILOWATT) == Quantity(1000.0, WATT)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from math import isclose
from numbers import Real
from typing import TYPE_CHECKING, Generic, TypeVar, Union

from unitscale.core.exceptions import DimensionMismatchError

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from unitscale.core.converter import Converter
    from unitscale.core.dimensions import Dim

Number = Union[int, float, Decimal, Real]

E = TypeVar("E", bound=Enum)
V = TypeVar("V", bound=Number)

# Relative tolerance for physical equality of float quantities.
REL_TOL = 1e-12
# Documented bound on the relative error of a float round trip U1 -> U2 -> U1.
ROUND_TRIP_REL_TOL = 1e-9


def _converter_for(unit: Enum) -> "Converter":
    # Import here to avoid a circular import with the registry.
    from unitscale.units.registry import DEFAULT_REGISTRY
    return DEFAULT_REGISTRY.get(type(unit))


def _is_registered(unit: Enum) -> bool:
    from unitscale.units.registry import DEFAULT_REGISTRY
    return DEFAULT_REGISTRY.has(type(unit))


def _format_value(value: Number) -> str:
    if isinstance(value, float):
        return f"{value:.15g}"
    return str(value)


@dataclass(frozen=True, slots=True, eq=False)
class Quantity(Generic[E, V]):
    """
    A measurement expressed in one unit of a closed enumeration.

    Attributes
    ----------
    value : V
        Numeric magnitude in ``unit`` (float, int, Fraction or Decimal).
    unit : E
        Enumeration member the value is expressed in (e.g. ``UnitsPower.KILOWATT``).

    `Quantity` is not hashable because equality is tolerant; use `as_key`
    to build dictionary keys.
    """

    value: V
    unit: E

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (Real, Decimal)):
            raise TypeError(
                f"Quantity value must be a real number, got {type(self.value).__name__}"
            )
        if not isinstance(self.unit, Enum):
            raise TypeError(
                f"Quantity unit must be an Enum member, got {type(self.unit).__name__}"
            )

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------
    @property
    def dim(self) -> "Dim":
        return _converter_for(self.unit).table.dimension

    @property
    def magnitude(self) -> V:
        """The value expressed in the base unit of the dimension."""
        return _converter_for(self.unit).to_base(self)

    def to(self, unit: E) -> "Quantity[E, V]":
        """Return the same magnitude expressed in ``unit``."""
        from unitscale.units.registry import DEFAULT_REGISTRY
        return DEFAULT_REGISTRY.convert(self, unit)

    def to_base(self) -> "Quantity[E, V]":
        """Return the quantity expressed in the base unit of its dimension."""
        return self.to(_converter_for(self.unit).table.base)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------
    def _other_value(self, other: "Quantity") -> Number:
        """Value of ``other`` expressed in ``self.unit``."""
        if type(other.unit) is not type(self.unit):
            raise DimensionMismatchError(
                f"Cannot compare quantities with different dimensions: "
                f"'{self.unit.value}' and '{other.unit.value}'"
            )
        if other.unit is self.unit:
            return other.value
        if not _is_registered(self.unit):
            raise TypeError(
                f"Cannot compare '{self.unit.value}' and '{other.unit.value}': "
                f"no converter registered for {type(self.unit).__name__}"
            )
        return _converter_for(self.unit)(other, self.unit).value

    def _is_close(self, other_value: Number) -> bool:
        a, b = self.value, other_value
        if isinstance(a, float) or isinstance(b, float):
            return isclose(a, b, rel_tol=REL_TOL, abs_tol=0.0)
        return a == b

    def _check_compatible(self, other: object) -> Number:
        if not isinstance(other, Quantity):
            raise TypeError(f"Cannot compare Quantity with type {type(other)}")
        return self._other_value(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        if type(other.unit) is not type(self.unit):
            return False
        if other.unit is not self.unit and not _is_registered(self.unit):
            # no scale table to bring both values to one unit
            return NotImplemented
        return self._is_close(self._other_value(other))

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        ov = self._check_compatible(other)
        # Strictly less than AND not fuzzy-equal
        return self.value < ov and not self._is_close(ov)

    def __le__(self, other: object) -> bool:
        ov = self._check_compatible(other)
        return self.value < ov or self._is_close(ov)

    def __gt__(self, other: object) -> bool:
        ov = self._check_compatible(other)
        return self.value > ov and not self._is_close(ov)

    def __ge__(self, other: object) -> bool:
        ov = self._check_compatible(other)
        return self.value > ov or self._is_close(ov)

    def as_key(self, precision: int = 12) -> tuple:
        """
        Returns a hashable, discretized key for this quantity.

        The base-unit magnitude is rounded to ``precision`` significant
        digits (not decimal places: power magnitudes span 10⁻²⁴ to 10²⁴).

        Usage:
        >>> q1 = Quantity(1.0, UnitsPower.KILOWATT)
        >>> q2 = Quantity(1000.0 + 1e-10, UnitsPower.WATT)
        >>> q1.as_key() == q2.as_key()
        True

        Returns
        -------
        tuple
            ``(dimension, rounded_base_magnitude)``.
        """
        rounded = float(f"{float(self.magnitude):.{precision}g}")
        # -0.0 and 0.0 compare equal but must share a key
        if rounded == 0.0:
            rounded = 0.0
        return (self.dim, rounded)

    # ------------------------------------------------------------------
    # Representation
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"{_format_value(self.value)} {self.unit.value}"

    def __format__(self, spec: str) -> str:
        """
        Supported specifiers
        --------------------
        "" (empty), or "native"
            Display the quantity in its current unit (default).
        "base"
            Display the quantity converted to the base unit (e.g. W).

        Raises
        ------
        ValueError
            If the format specifier is not one of "", "native", or "base".
        """
        spec = (spec or "").strip().lower()
        if spec in ("", "native"):
            return repr(self)
        if spec == "base":
            return repr(self.to_base())
        raise ValueError("Unknown format spec; use '', 'native', or 'base'")


__all__ = ["Quantity", "REL_TOL", "ROUND_TRIP_REL_TOL"]
