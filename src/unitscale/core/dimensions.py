# unitscale.core.dimensions
"""
SI dimension vectors.

A `Dimension` is descriptive metadata on a `ScaleTable` (reported by
`Quantity.dim`, used in `Quantity.as_key` and in error messages). Conversion
safety itself is enforced by enumeration type: each enumeration has exactly
one converter, and units of two different enumerations are never converted
into each other, even when their tables carry the same dimension.
"""

from __future__ import annotations
from typing import Iterable, Union, Tuple, TypeAlias, Any

# --- Public typing -----------------------------------------------------------
Dim: TypeAlias = "Dimension"
DimTuple = Tuple[int, int, int, int, int, int, int]
DimLike = Union["Dimension", DimTuple, Iterable[int]]

_NAMES = ("L", "M", "T", "I", "Θ", "N", "J")

# --- Core object -------------------------------------------------------------

class Dimension(tuple):
    """
    Immutable 7-length vector of integer exponents for SI base dimensions.

    Every scale table is tagged with one of these so that quantities from
    different physical dimensions (power, length, time, ...) can never be
    converted into each other.
    """

    __slots__ = ()

    def __new__(cls, data: DimLike = (0, 0, 0, 0, 0, 0, 0)) -> "Dimension":
        if isinstance(data, Dimension):
            return tuple.__new__(cls, data)

        t = tuple(data)
        if len(t) != 7:
            raise ValueError("Dimension must have length 7 (L, M, T, I, Θ, N, J).")
        if not all(isinstance(x, int) and not isinstance(x, bool) for x in t):
            raise TypeError("Dimension exponents must be integers.")
        return tuple.__new__(cls, t)

    # --- Algebra (operator overloads) ---
    def __mul__(self, other: DimLike) -> "Dimension": # type: ignore[override]
        o = Dimension(other)
        return Dimension(x + y for x, y in zip(self, o, strict=True))

    def __truediv__(self, other: DimLike) -> "Dimension":
        o = Dimension(other)
        return Dimension(x - y for x, y in zip(self, o, strict=True))

    def __pow__(self, n: int, modulo: Any | None = None) -> "Dimension":
        if modulo is not None:
            raise TypeError("Modulo exponentiation is not supported for Dimension.")
        if not isinstance(n, int) or isinstance(n, bool):
            raise TypeError(f"Exponent must be int, got {type(n).__name__}")
        return Dimension(e * n for e in self)

    def __rmul__(self, other: Any) -> "Dimension":
        """Prevent (int * Dimension) from falling back to tuple repetition."""
        return NotImplemented

    def __add__(self, other: Any) -> "Dimension":
        """Block tuple concatenation (e.g., LENGTH + MASS)."""
        return NotImplemented

    def __radd__(self, other: Any) -> "Dimension":
        return NotImplemented

    # --- Helpers ---
    @property
    def is_dimensionless(self) -> bool:
        return all(x == 0 for x in self)

    def as_tuple(self) -> DimTuple:
        return tuple(self)  # type: ignore[return-value]

    def __repr__(self) -> str:
        parts = ""
        for n, v in zip(_NAMES, self, strict=True):
            if v != 0:
                parts += f"[{n}^{v}]"
        return parts or "[1]"

# --- Public constants --------------------------------------------------------

DIM_0: Dim       = Dimension((0, 0, 0, 0, 0, 0, 0))
LENGTH: Dim      = Dimension((1, 0, 0, 0, 0, 0, 0))
MASS: Dim        = Dimension((0, 1, 0, 0, 0, 0, 0))
TIME: Dim        = Dimension((0, 0, 1, 0, 0, 0, 0))
CURRENT: Dim     = Dimension((0, 0, 0, 1, 0, 0, 0))
TEMPERATURE: Dim = Dimension((0, 0, 0, 0, 1, 0, 0))
AMOUNT: Dim      = Dimension((0, 0, 0, 0, 0, 1, 0))
LUMINOUS: Dim    = Dimension((0, 0, 0, 0, 0, 0, 1))

# W = J/s = kg·m²/s³
POWER: Dim       = MASS * LENGTH ** 2 / TIME ** 3
