"""
unitscale.core.converter
========================

The conversion engine: power-of-ten rescaling of a numeric value and the
two-level (source unit, destination unit) dispatch over a `ScaleTable`.

Conversions route through the canonical (base-unit) representation, but the
two steps collapse into one exponent shift ``scale(src) - scale(dest)`` so
that no intermediate rounding takes place.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from fractions import Fraction
from math import copysign, inf, isfinite
from numbers import Real
from typing import Generic, TypeVar

from unitscale.core.quantity import Quantity, V
from unitscale.core.table import ScaleTable

E = TypeVar("E", bound=Enum)

_TEN = Fraction(10)


def rescale(value: V, shift: int) -> V:
    """
    Multiply ``value`` by ``10**shift`` without accumulating rounding error.

    - ``shift == 0`` returns ``value`` itself.
    - ``float``: the correctly rounded float of the exact product; results
      beyond the float range saturate to ``±inf`` (or underflow to ``±0.0``).
    - ``int``: stays an ``int`` while the result is integral, else ``Fraction``.
    - ``Fraction`` and ``Decimal``: exact.
    """
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise TypeError(f"Cannot rescale value of type {type(value).__name__}")
    if shift == 0:
        return value

    if isinstance(value, Decimal):
        return value.scaleb(shift)  # type: ignore[return-value]

    if isinstance(value, int):
        if shift > 0:
            return value * 10 ** shift  # type: ignore[return-value]
        exact = Fraction(value) * _TEN ** shift
        return exact.numerator if exact.denominator == 1 else exact  # type: ignore[return-value]

    if isinstance(value, Fraction):
        return value * _TEN ** shift  # type: ignore[return-value]

    x = float(value)
    if x == 0.0 or not isfinite(x):
        # keeps the sign of zero and the kind of non-finite value
        return x * 10.0 ** shift  # type: ignore[return-value]
    try:
        # Fraction -> float rounds correctly (round-half-even)
        return float(Fraction(x) * _TEN ** shift)  # type: ignore[return-value]
    except OverflowError:
        # beyond the float range: saturate like plain float arithmetic
        return copysign(inf, x)  # type: ignore[return-value]


class Converter(Generic[E, V]):
    """
    Converts quantities between the units of one enumeration.

    The converter is generic over the enumeration (one physical dimension)
    and over the numeric type of the quantity's value. Other dimensions plug
    in by supplying their own enumeration and `ScaleTable`.

    Examples
    --------
    >>> convert = Converter(POWER_TABLE)
    >>> convert(Quantity(1.0, UnitsPower.KILOWATT), UnitsPower.WATT)
    1000 W
    """

    __slots__ = ("_table",)

    def __init__(self, table: ScaleTable[E]) -> None:
        self._table = table

    @property
    def table(self) -> ScaleTable[E]:
        return self._table

    @property
    def enum_type(self) -> type[E]:
        return self._table.enum_type

    def __call__(self, quantity: Quantity[E, V], unit: E) -> Quantity[E, V]:
        src = quantity.unit
        # raises UndefinedUnitError for units outside the enumeration
        shift = self._table.shift(src, unit)
        if unit is src:
            return Quantity(quantity.value, unit)
        return Quantity(rescale(quantity.value, shift), unit)

    def to_base(self, quantity: Quantity[E, V]) -> V:
        """Magnitude of ``quantity`` in the base unit (canonical representation)."""
        return rescale(quantity.value, self._table.scale_of(quantity.unit))

    def from_base(self, value: V, unit: E) -> Quantity[E, V]:
        """Express a base-unit magnitude in ``unit``."""
        return Quantity(rescale(value, -self._table.scale_of(unit)), unit)

    def accepts(self, unit: object) -> bool:
        return unit in self._table

    def __repr__(self) -> str:
        return f"Converter({self._table.enum_type.__name__})"


__all__ = ["Converter", "rescale"]
