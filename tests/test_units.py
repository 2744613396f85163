"""
Test unit constants and conversion helpers
"""
import pytest

from boxsize.model.units import UnitOfMeasure, round_to, to_meters, to_centimeters, to_millimeters


@pytest.mark.parametrize("unit, filler", [
    (UnitOfMeasure.MILLIMETER, 100),
    (UnitOfMeasure.CENTIMETER, 10),
    (UnitOfMeasure.METER, 0.1),
])
def test_filler(unit, filler):
    assert unit.filler == filler


@pytest.mark.parametrize("unit, max_value", [
    (UnitOfMeasure.MILLIMETER, 10000),
    (UnitOfMeasure.CENTIMETER, 1000),
    (UnitOfMeasure.METER, 10),
])
def test_max_value_is_ten_meters(unit, max_value):
    assert unit.max_value == max_value


def test_units_accept_plain_strings():
    assert UnitOfMeasure("mm") is UnitOfMeasure.MILLIMETER
    assert UnitOfMeasure("cm") is UnitOfMeasure.CENTIMETER
    assert UnitOfMeasure("m") is UnitOfMeasure.METER
    with pytest.raises(ValueError):
        UnitOfMeasure("ft")


def test_to_meters():
    assert to_meters(2500, UnitOfMeasure.MILLIMETER) == 2.5
    assert to_meters(250, UnitOfMeasure.CENTIMETER) == 2.5
    assert to_meters(2.5, UnitOfMeasure.METER) == 2.5


def test_to_centimeters_rounds_to_one_decimal():
    assert to_centimeters(1234, UnitOfMeasure.MILLIMETER) == 123.4
    assert to_centimeters(12.34, UnitOfMeasure.CENTIMETER) == 12.3
    assert to_centimeters(1.5, UnitOfMeasure.METER) == 150.0


def test_to_millimeters_rounds_to_integer():
    assert to_millimeters(12.7, UnitOfMeasure.MILLIMETER) == 13
    assert to_millimeters(4.5, UnitOfMeasure.CENTIMETER) == 45
    assert to_millimeters(0.0014, UnitOfMeasure.METER) == 1


@pytest.mark.parametrize("value, digits, expected", [
    (0.05, 1, 0.0),
    (0.15, 1, 0.2),
    (0.25, 1, 0.2),
    (12.34, 1, 12.3),
    (0.5, 0, 0.0),
    (1.5, 0, 2.0),
])
def test_round_to_scales_before_rounding(value, digits, expected):
    assert round_to(value, digits) == expected


def test_to_centimeters_midpoint():
    assert to_centimeters(0.0005, UnitOfMeasure.METER) == 0.0
    assert to_centimeters(0.05, UnitOfMeasure.CENTIMETER) == 0.0
