# tests/conftest.py
from enum import Enum

import pytest

from unitscale.core.converter import Converter
from unitscale.core.dimensions import LENGTH
from unitscale.core.table import ScaleTable
from unitscale.units.registry import DEFAULT_REGISTRY as _reg


class UnitsLength(Enum):
    KILOMETER = "km"
    METER = "m"
    CENTIMETER = "cm"
    MILLIMETER = "mm"


@pytest.fixture(scope="session")
def registry():
    return _reg


@pytest.fixture(scope="session")
def length_converter():
    """A second dimension, built the same way as the shipped power table."""
    table = ScaleTable(
        UnitsLength,
        {
            UnitsLength.KILOMETER: 3,
            UnitsLength.METER: 0,
            UnitsLength.CENTIMETER: -2,
            UnitsLength.MILLIMETER: -3,
        },
        base=UnitsLength.METER,
        dimension=LENGTH,
    )
    return Converter(table)
