"""
unitscale.core.table
====================

Static association between the members of a unit enumeration and their
decimal exponent relative to the dimension's base unit.

A `ScaleTable` is built once (at import time for the shipped tables) and is
read-only afterwards. Construction checks that the table and the enumeration
agree member for member, so a conversion can never meet a unit without a
scale.
"""

from __future__ import annotations

from enum import Enum
from fractions import Fraction
from types import MappingProxyType
from typing import Generic, Iterator, Mapping, TypeVar

from unitscale.core.dimensions import DIM_0, Dim
from unitscale.core.exceptions import ConfigurationError, UndefinedUnitError
from unitscale.logger import logger

E = TypeVar("E", bound=Enum)


def _fail(msg: str) -> ConfigurationError:
    logger.error(msg)
    return ConfigurationError(msg)


class ScaleTable(Generic[E]):
    """
    Exponent table for one closed unit enumeration.

    Parameters
    ----------
    enum_type : type[Enum]
        The enumeration whose members are the units of this dimension.
    exponents : Mapping[E, int]
        Power-of-ten exponent of every member relative to the base unit.
    base : E
        The unscaled reference unit; its exponent must be 0.
    dimension : Dim
        Physical dimension shared by every member.
    ordered : bool
        If true, exponents must strictly decrease in declaration order
        (the metric-prefix convention: yotta first, yocto last).

    Raises
    ------
    ConfigurationError
        If the table and the enumeration diverge or the data is malformed.
    """

    __slots__ = ("_enum", "_exponents", "_shifts", "_base", "_dim")

    def __init__(
        self,
        enum_type: type[E],
        exponents: Mapping[E, int],
        *,
        base: E,
        dimension: Dim = DIM_0,
        ordered: bool = True,
    ) -> None:
        if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
            raise _fail(f"{enum_type!r} is not an Enum type")

        members = list(enum_type)
        name = enum_type.__name__

        missing = [m.name for m in members if m not in exponents]
        if missing:
            raise _fail(f"{name}: no scale entry for {', '.join(missing)}")

        extra = [repr(k) for k in exponents if not isinstance(k, enum_type)]
        if extra:
            raise _fail(f"{name}: scale entries for non-members {', '.join(extra)}")

        for m in members:
            exp = exponents[m]
            if not isinstance(exp, int) or isinstance(exp, bool):
                raise _fail(f"{name}.{m.name}: exponent must be an int, got {exp!r}")

        seen: dict[int, E] = {}
        for m in members:
            other = seen.setdefault(exponents[m], m)
            if other is not m:
                raise _fail(
                    f"{name}: {other.name} and {m.name} share exponent {exponents[m]}"
                )

        if ordered:
            for prev, cur in zip(members, members[1:]):
                if exponents[cur] >= exponents[prev]:
                    raise _fail(
                        f"{name}: exponents must strictly decrease in declaration order "
                        f"({prev.name}={exponents[prev]}, {cur.name}={exponents[cur]})"
                    )

        if not isinstance(base, enum_type):
            raise _fail(f"{name}: base unit {base!r} is not a member")
        if exponents[base] != 0:
            raise _fail(f"{name}: base unit {base.name} must have exponent 0")

        table = {m: exponents[m] for m in members}
        # (src, dest) -> exponent shift, for every ordered pair
        shifts = {
            src: MappingProxyType({dst: table[src] - table[dst] for dst in members})
            for src in members
        }

        self._enum = enum_type
        self._exponents = MappingProxyType(table)
        self._shifts = MappingProxyType(shifts)
        self._base = base
        self._dim = dimension

        logger.debug("Built scale table for %s (%d units, dim %r)", name, len(members), dimension)

    # -------------------------- public API ---------------------------------
    @property
    def enum_type(self) -> type[E]:
        return self._enum

    @property
    def base(self) -> E:
        return self._base

    @property
    def dimension(self) -> Dim:
        return self._dim

    @property
    def exponents(self) -> Mapping[E, int]:
        return self._exponents

    def scale_of(self, unit: E) -> int:
        """Return the power-of-ten exponent of ``unit`` relative to the base unit."""
        try:
            return self._exponents[unit]
        except (KeyError, TypeError):
            raise UndefinedUnitError(unit, self._enum) from None

    def factor_of(self, unit: E) -> Fraction:
        """Exact scale factor ``10**scale_of(unit)``."""
        return Fraction(10) ** self.scale_of(unit)

    def shift(self, src: E, dest: E) -> int:
        """Exponent difference ``scale_of(src) - scale_of(dest)``."""
        try:
            row = self._shifts[src]
        except (KeyError, TypeError):
            raise UndefinedUnitError(src, self._enum) from None
        try:
            return row[dest]
        except (KeyError, TypeError):
            raise UndefinedUnitError(dest, self._enum) from None

    # ------------------------- container protocol --------------------------
    def __contains__(self, unit: object) -> bool:
        try:
            return unit in self._exponents
        except TypeError:
            return False

    def __iter__(self) -> Iterator[E]:
        return iter(self._exponents)

    def __len__(self) -> int:
        return len(self._exponents)

    def __repr__(self) -> str:
        return f"ScaleTable({self._enum.__name__}, base={self._base.name}, dim={self._dim!r})"


__all__ = ["ScaleTable"]
