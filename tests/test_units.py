# -*- coding: utf-8 -*-
"""Tests for Unit algebra, comparison and formatting."""

import math

import pytest

from amounts.dimensions import UnitType
from amounts.exceptions import InvalidArgumentError, UnitConversionError
from amounts.standard_units import si
from amounts.units import (
    Unit,
    float_power,
    format_scalar,
    sanitize_unit_string,
    true_divide,
)


@pytest.fixture
def meter():
    return Unit("meter", "m", si.LENGTH)


@pytest.fixture
def kilometer(meter):
    return Unit("kilometer", "km", 1000.0 * meter)


@pytest.fixture
def second():
    return Unit("second", "s", si.TIME)


# ==============================================================================
# Float helpers
# ==============================================================================

class TestFloatHelpers:

    def test_true_divide(self):
        assert true_divide(6, 3) == 2.0
        assert true_divide(1, 0) == math.inf
        assert true_divide(-1, 0) == -math.inf
        assert true_divide(1, -0.0) == -math.inf
        assert math.isnan(true_divide(0, 0))

    def test_float_power(self):
        assert float_power(2.0, 3) == 8.0
        assert float_power(2.0, -1) == 0.5
        assert float_power(0.0, -1) == math.inf
        assert float_power(1e300, 2) == math.inf

    def test_format_scalar(self):
        assert format_scalar(1000.0) == "1000"
        assert format_scalar(0.001) == "0.001"
        assert format_scalar(2.5) == "2.5"

    def test_sanitize_unit_string(self):
        assert sanitize_unit_string("m**2") == "m*2"
        assert sanitize_unit_string("m////s") == "m/s"
        assert sanitize_unit_string("km/h") == "km/h"


# ==============================================================================
# Construction
# ==============================================================================

class TestUnitConstruction:

    def test_base_unit(self, meter):
        assert meter.name == "meter"
        assert meter.symbol == "m"
        assert meter.factor == 1.0
        assert meter.unit_type == si.LENGTH
        assert meter.is_named

    def test_unit_from_unit(self, kilometer):
        assert kilometer.factor == 1000.0
        assert kilometer.unit_type == si.LENGTH
        assert kilometer.is_named

    def test_invalid_base(self):
        with pytest.raises(InvalidArgumentError):
            Unit("bad", "b", 42)

    def test_symbol_is_sanitized(self, meter):
        assert Unit("odd", "m**2//s", meter).symbol == "m*2/s"

    def test_none_unit(self):
        assert Unit.NONE.factor == 1.0
        assert Unit.NONE.unit_type.is_none
        assert Unit.NONE.symbol == ""


# ==============================================================================
# Algebra
# ==============================================================================

class TestUnitAlgebra:

    def test_divide_units(self, kilometer, second):
        speed = kilometer / second

        assert speed.name == "(kilometer/second)"
        assert speed.symbol == "km/s"
        assert speed.factor == 1000.0
        assert speed.unit_type == si.LENGTH / si.TIME
        assert not speed.is_named

    def test_multiply_units(self, meter, kilometer):
        area = meter * kilometer

        assert area.name == "(meter*kilometer)"
        assert area.symbol == "m*km"
        assert area.factor == 1000.0
        assert area.unit_type == si.LENGTH ** 2

    def test_power(self, kilometer):
        cube = kilometer.power(3)

        assert cube.name == "(kilometer^3)"
        assert cube.symbol == "km^3"
        assert cube.factor == 1e9
        assert cube.unit_type == si.LENGTH ** 3
        assert (kilometer ** 3) == cube

    def test_power_identities(self, meter, kilometer):
        assert meter.power(1) == meter

        zeroth = kilometer.power(0)
        assert zeroth.factor == 1.0
        assert zeroth.unit_type.is_none
        assert zeroth == Unit.NONE

    def test_scale(self, meter):
        scaled = 1000.0 * meter

        assert scaled.name == "(1000*meter)"
        assert scaled.symbol == "1000*m"
        assert scaled.factor == 1000.0
        assert meter * 2 == meter.scale(2)

    def test_scale_by_one_is_identity(self, meter):
        assert meter.scale(1) is meter

    def test_divide_by_scalar(self, meter):
        milli = meter / 1000

        assert milli.name == "(meter/1000)"
        assert milli.factor == 0.001
        assert milli.unit_type == si.LENGTH

    def test_inverse(self, second):
        hertz = 1 / second

        assert hertz.name == "(1/second)"
        assert hertz.symbol == "1/s"
        assert hertz.unit_type == si.TIME ** -1

    def test_divide_by_zero_factor(self, meter):
        zero = 0.0 * meter

        assert (meter / zero).factor == math.inf

    def test_unsupported_operand(self, meter):
        with pytest.raises(TypeError):
            meter * "m"


# ==============================================================================
# Comparison
# ==============================================================================

class TestUnitComparison:

    def test_equal_by_factor_and_dimension(self, meter):
        alias = Unit("metre", "mtr", meter)

        assert alias == meter
        assert hash(alias) == hash(meter)

    def test_derived_equals_named(self, meter, second):
        velocity = Unit("meter/second", "m/s", meter / second)

        assert meter / second == velocity

    def test_not_equal(self, meter, kilometer, second):
        assert meter != kilometer
        assert meter != second
        assert meter.__eq__("m") is NotImplemented

    def test_ordering(self, meter, kilometer):
        assert meter < kilometer
        assert kilometer > meter
        assert meter <= Unit("metre", "mtr", meter)
        assert meter.compare_to(kilometer) == -1
        assert kilometer.compare_to(meter) == 1

    def test_ordering_incompatible(self, meter, second):
        with pytest.raises(UnitConversionError):
            meter < second

    def test_compatibility(self, meter, kilometer, second):
        assert meter.is_compatible_to(kilometer)
        assert not meter.is_compatible_to(second)
        assert Unit.NONE.is_compatible_to(None)

        with pytest.raises(UnitConversionError):
            meter.assert_compatibility(second)

    def test_custom_dimension(self):
        eur = Unit("euro", "EUR", UnitType("test currency"))

        assert not eur.is_compatible_to(Unit.NONE)


# ==============================================================================
# Formatting
# ==============================================================================

class TestUnitFormatting:

    def test_format(self, kilometer):
        assert kilometer.format("UN") == "kilometer"
        assert kilometer.format("US") == "km"
        assert kilometer.format() == "km"

    def test_format_protocol(self, kilometer):
        assert f"{kilometer}" == "km"
        assert f"{kilometer:UN}" == "kilometer"
        assert str(kilometer) == "km"

    def test_repr(self, kilometer):
        assert repr(kilometer) == (
            "Unit(name='kilometer', symbol='km', factor=1000.0, unit_type='metre^1')"
        )
