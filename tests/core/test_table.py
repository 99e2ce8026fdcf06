from enum import Enum
from fractions import Fraction

import pytest

from unitscale.core.dimensions import DIM_0, LENGTH
from unitscale.core.exceptions import ConfigurationError, UndefinedUnitError
from unitscale.core.table import ScaleTable


class Tiny(Enum):
    BIG = "B"
    BASE = "b"
    SMALL = "s"


GOOD = {Tiny.BIG: 3, Tiny.BASE: 0, Tiny.SMALL: -3}


@pytest.fixture()
def table():
    return ScaleTable(Tiny, GOOD, base=Tiny.BASE, dimension=LENGTH)


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

def test_properties(table):
    assert table.enum_type is Tiny
    assert table.base is Tiny.BASE
    assert table.dimension == LENGTH
    assert dict(table.exponents) == GOOD


def test_default_dimension_is_dimensionless():
    assert ScaleTable(Tiny, GOOD, base=Tiny.BASE).dimension == DIM_0


def test_scale_and_factor(table):
    assert table.scale_of(Tiny.BIG) == 3
    assert table.scale_of(Tiny.SMALL) == -3
    assert table.factor_of(Tiny.BIG) == 1000
    assert table.factor_of(Tiny.SMALL) == Fraction(1, 1000)
    assert isinstance(table.factor_of(Tiny.BASE), Fraction)


def test_shift_covers_every_ordered_pair(table):
    for src in Tiny:
        for dst in Tiny:
            assert table.shift(src, dst) == GOOD[src] - GOOD[dst]


def test_container_protocol(table):
    assert len(table) == 3
    assert list(table) == list(Tiny)
    assert Tiny.BIG in table
    assert "B" not in table
    assert [] not in table


def test_exponents_are_read_only(table):
    with pytest.raises(TypeError):
        table.exponents[Tiny.BIG] = 6  # type: ignore[index]


def test_source_mapping_is_copied():
    data = dict(GOOD)
    table = ScaleTable(Tiny, data, base=Tiny.BASE)
    data[Tiny.BIG] = 99
    assert table.scale_of(Tiny.BIG) == 3


@pytest.mark.parametrize("bad", ["B", 3, None, []])
def test_undefined_unit(table, bad):
    with pytest.raises(UndefinedUnitError) as exc:
        table.scale_of(bad)
    assert "Undefined unit" in str(exc.value)
    with pytest.raises(UndefinedUnitError):
        table.shift(bad, Tiny.BASE)
    with pytest.raises(UndefinedUnitError):
        table.shift(Tiny.BASE, bad)


def test_undefined_unit_is_a_key_error(table):
    with pytest.raises(KeyError):
        table.scale_of("B")


def test_repr(table):
    assert repr(table) == "ScaleTable(Tiny, base=BASE, dim=[L^1])"


# ---------------------------------------------------------------------------
# Construction-time validation
# ---------------------------------------------------------------------------

def test_missing_member():
    with pytest.raises(ConfigurationError, match="SMALL"):
        ScaleTable(Tiny, {Tiny.BIG: 3, Tiny.BASE: 0}, base=Tiny.BASE)


def test_extra_key():
    with pytest.raises(ConfigurationError, match="non-members"):
        ScaleTable(Tiny, {**GOOD, "mega": 6}, base=Tiny.BASE)


@pytest.mark.parametrize("exp", [3.0, True, "3", Fraction(3)])
def test_non_int_exponent(exp):
    with pytest.raises(ConfigurationError, match="must be an int"):
        ScaleTable(Tiny, {**GOOD, Tiny.BIG: exp}, base=Tiny.BASE)


def test_duplicate_exponent():
    with pytest.raises(ConfigurationError, match="share exponent"):
        ScaleTable(Tiny, {Tiny.BIG: 0, Tiny.BASE: 0, Tiny.SMALL: -3}, base=Tiny.BASE, ordered=False)


def test_order_must_strictly_decrease():
    with pytest.raises(ConfigurationError, match="strictly decrease"):
        ScaleTable(Tiny, {Tiny.BIG: -3, Tiny.BASE: 0, Tiny.SMALL: 3}, base=Tiny.BASE)


def test_unordered_table_allowed_when_requested():
    t = ScaleTable(Tiny, {Tiny.BIG: -3, Tiny.BASE: 0, Tiny.SMALL: 3}, base=Tiny.BASE, ordered=False)
    assert t.shift(Tiny.SMALL, Tiny.BIG) == 6


def test_base_must_have_zero_exponent():
    with pytest.raises(ConfigurationError, match="exponent 0"):
        ScaleTable(Tiny, GOOD, base=Tiny.BIG)


def test_base_must_be_member():
    with pytest.raises(ConfigurationError, match="not a member"):
        ScaleTable(Tiny, GOOD, base="b")


def test_enum_type_must_be_enum():
    with pytest.raises(ConfigurationError):
        ScaleTable(dict, GOOD, base=Tiny.BASE)


def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        ScaleTable(Tiny, {}, base=Tiny.BASE)


def test_configuration_error_is_logged(caplog):
    with caplog.at_level("ERROR", logger="unitscale"):
        with pytest.raises(ConfigurationError):
            ScaleTable(Tiny, {}, base=Tiny.BASE)
    assert any("no scale entry" in r.getMessage() for r in caplog.records)
