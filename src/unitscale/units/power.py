"""
unitscale.units.power
=====================

Metric-prefixed watts, yotta- through yocto-.

Member values are the unit symbols used by the surrounding metadata schema;
exponents live in `POWER_TABLE` and are checked against the enumeration
when this module is imported.
"""

from enum import Enum

from unitscale.core.converter import Converter
from unitscale.core.dimensions import POWER
from unitscale.core.table import ScaleTable


class UnitsPower(Enum):
    """Power units, ordered from the largest to the smallest prefix."""

    YOTTAWATT = "YW"
    ZETTAWATT = "ZW"
    EXAWATT = "EW"
    PETAWATT = "PW"
    TERAWATT = "TW"
    GIGAWATT = "GW"
    MEGAWATT = "MW"
    KILOWATT = "kW"
    HECTOWATT = "hW"
    DECAWATT = "daW"
    WATT = "W"
    DECIWATT = "dW"
    CENTIWATT = "cW"
    MILLIWATT = "mW"
    MICROWATT = "µW"
    NANOWATT = "nW"
    PICOWATT = "pW"
    FEMTOWATT = "fW"
    ATTOWATT = "aW"
    ZEPTOWATT = "zW"
    YOCTOWATT = "yW"

    @property
    def symbol(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


# (unit, power-of-ten exponent relative to W)
_POWER_EXPONENTS = (
    (UnitsPower.YOTTAWATT,  24),
    (UnitsPower.ZETTAWATT,  21),
    (UnitsPower.EXAWATT,    18),
    (UnitsPower.PETAWATT,   15),
    (UnitsPower.TERAWATT,   12),
    (UnitsPower.GIGAWATT,    9),
    (UnitsPower.MEGAWATT,    6),
    (UnitsPower.KILOWATT,    3),
    (UnitsPower.HECTOWATT,   2),
    (UnitsPower.DECAWATT,    1),
    (UnitsPower.WATT,        0),
    (UnitsPower.DECIWATT,   -1),
    (UnitsPower.CENTIWATT,  -2),
    (UnitsPower.MILLIWATT,  -3),
    (UnitsPower.MICROWATT,  -6),
    (UnitsPower.NANOWATT,   -9),
    (UnitsPower.PICOWATT,  -12),
    (UnitsPower.FEMTOWATT, -15),
    (UnitsPower.ATTOWATT,  -18),
    (UnitsPower.ZEPTOWATT, -21),
    (UnitsPower.YOCTOWATT, -24),
)

POWER_TABLE: ScaleTable[UnitsPower] = ScaleTable(
    UnitsPower,
    dict(_POWER_EXPONENTS),
    base=UnitsPower.WATT,
    dimension=POWER,
)

POWER_CONVERTER: Converter = Converter(POWER_TABLE)


__all__ = ["UnitsPower", "POWER_TABLE", "POWER_CONVERTER"]
