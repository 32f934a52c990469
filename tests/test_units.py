"""Tests for the weight unit model."""

import itertools

import pytest

from shoplist.units import (
    CountType,
    GRAM_PER_KG,
    KG_PER_LB,
    OZ_PER_LB,
    System,
    Unit,
    UnknownUnitError,
    convert_weight,
    count_type_to_string,
    count_type_to_unit,
    string_to_unit,
    unit_system,
    unit_to_count_type,
    unit_to_string,
)

WEIGHTS = [0.0, 0.1, 0.5, 1.0, 2.75, 16.0, 1234.5]


def test_constants():
    assert OZ_PER_LB == 16
    assert KG_PER_LB == 0.45359237
    assert GRAM_PER_KG == 1000


@pytest.mark.parametrize("unit, system", [
    (Unit.OUNCE, System.IMPERIAL),
    (Unit.POUND, System.IMPERIAL),
    (Unit.KILOGRAM, System.METRIC),
    (Unit.GRAM, System.METRIC),
])
def test_unit_system(unit, system):
    assert unit_system(unit) is system


@pytest.mark.parametrize("unit", list(Unit))
def test_count_type_round_trip(unit):
    count_type = unit_to_count_type(unit)
    assert count_type_to_unit(count_type) is unit
    assert unit_to_count_type(count_type_to_unit(count_type)) is count_type


def test_quantity_has_no_unit():
    assert count_type_to_unit(CountType.QUANTITY) is None


def test_unit_strings():
    assert [unit_to_string(u) for u in Unit] == ["oz", "lb", "kg", "g"]
    assert count_type_to_string(CountType.QUANTITY) == "ea"
    assert count_type_to_string(CountType.GRAM) == "g"


@pytest.mark.parametrize("text, expected", [
    ("oz", Unit.OUNCE),
    ("lb", Unit.POUND),
    ("kg", Unit.KILOGRAM),
    ("g", Unit.GRAM),
    ("LB", None),
    ("lbs", None),
    ("ea", None),
    ("", None),
    (" kg", None),
])
def test_string_to_unit(text, expected):
    assert string_to_unit(text) is expected


def test_unknown_unit_is_rejected():
    with pytest.raises(UnknownUnitError):
        unit_system("lb")
    with pytest.raises(UnknownUnitError):
        unit_to_string(CountType.POUND)


@pytest.mark.parametrize("unit", list(Unit))
@pytest.mark.parametrize("weight", WEIGHTS + [1e-300, 3.3333333333333335])
def test_identity_conversion_is_exact(unit, weight):
    assert convert_weight(weight, unit, unit) == weight


@pytest.mark.parametrize("weight, from_unit, to_unit, expected", [
    (1, Unit.POUND, Unit.OUNCE, 16),
    (8, Unit.OUNCE, Unit.POUND, 0.5),
    (1, Unit.POUND, Unit.KILOGRAM, 0.45359237),
    (1, Unit.POUND, Unit.GRAM, 453.59237),
    (2, Unit.KILOGRAM, Unit.GRAM, 2000),
    (250, Unit.GRAM, Unit.KILOGRAM, 0.25),
    (1, Unit.KILOGRAM, Unit.POUND, 1 / 0.45359237),
    (1, Unit.OUNCE, Unit.GRAM, 28.349523125),
    (100, Unit.GRAM, Unit.OUNCE, 100 / 28.349523125),
    (1, Unit.KILOGRAM, Unit.OUNCE, 16 / 0.45359237),
])
def test_convert_weight_matches_direct_formula(weight, from_unit, to_unit, expected):
    assert convert_weight(weight, from_unit, to_unit) == pytest.approx(expected, rel=1e-9)


@pytest.mark.parametrize("a, b, c", list(itertools.product(Unit, repeat=3)))
def test_conversion_composes(a, b, c):
    for weight in WEIGHTS:
        via_b = convert_weight(convert_weight(weight, a, b), b, c)
        assert via_b == pytest.approx(convert_weight(weight, a, c), rel=1e-9, abs=1e-12)
