# -*- coding: utf-8 -*-
"""Tests for amount formatting and locale-aware number parsing."""

import pytest
from babel import Locale

from amounts.amount import Amount
from amounts.exceptions import AmountParseError, UnknownUnitError
from amounts.formatting import (
    format_amount,
    format_general,
    format_number,
    normalize_locale,
    parse_number,
)
from amounts.standard_units.length import KILOMETER, METER
from amounts.standard_units.relative import PERCENTAGE
from amounts.standard_units.time import HOUR


@pytest.fixture
def distance(manager):
    return Amount(12345.6789, METER)


@pytest.fixture
def speed(manager):
    return Amount(-0.45, KILOMETER / HOUR)


class TestNumberHelpers:

    def test_normalize_locale(self):
        assert normalize_locale("nl_BE") == Locale.parse("nl_BE")
        assert normalize_locale("en-US") == Locale.parse("en_US")
        assert normalize_locale(None) == Locale.parse("en_US")

        locale = Locale.parse("fr_FR")
        assert normalize_locale(locale) is locale

    def test_format_general(self):
        assert format_general(12.3456789) == "12.3456789"
        assert format_general(12.3456789, "nl_BE") == "12,3456789"
        assert format_general(-2.5, "en_US") == "-2.5"
        assert format_general(1e20) == "1E20"
        assert format_general(-2.5e-7, "nl_BE") == "-2,5E-7"

    def test_format_general_non_finite(self):
        assert format_general(float("inf")) == "∞"
        assert format_general(float("-inf")) == "-∞"
        assert format_general(float("nan")) == "NaN"

    def test_format_number(self):
        assert format_number(12345.6789, locale="en_US") == "12,345.68"
        assert format_number(12345.6789, locale="nl_BE") == "12.345,68"
        assert format_number(1.5, "0.000", "en_US") == "1.500"

    def test_parse_number(self):
        assert parse_number("12,345.6789", "en_US") == 12345.6789
        assert parse_number("12.345,6789", "nl_BE") == 12345.6789

        with pytest.raises(AmountParseError) as exc_info:
            parse_number("abc", "en_US")
        assert exc_info.value.offset == 0


class TestFormatCodes:

    def test_default_format(self, manager):
        assert Amount(12.3456789, KILOMETER).format() == "12.3456789 km"
        assert str(Amount(12.3456789, KILOMETER)) == "12.3456789 km"

    def test_general_name(self, manager):
        amount = Amount(12.3456789, KILOMETER)

        assert amount.format("GN", "nl_BE") == "12,3456789 kilometer"
        assert amount.format("GS", "nl_BE") == "12,3456789 km"

    def test_numeric_symbol(self, manager, distance):
        assert Amount(12.3456789, KILOMETER).format("NS", "nl_BE") == "12,35 km"
        assert distance.format("NS", "nl_BE") == "12.345,68 m"
        assert distance.format("NS", "en_US") == "12,345.68 m"

    def test_negative_derived_unit(self, speed):
        assert speed.format("NS", "en_US") == "-0.45 km/h"
        assert speed.format("NN", "en_US") == "-0.45 (kilometer/hour)"
        assert speed.format("NG", "en_US") == "-0.45 km/h"

    def test_division_by_zero(self, manager):
        speed = Amount(32, KILOMETER) / Amount(0, HOUR)

        assert speed.format("GS") == "∞ km/h"
        assert (Amount(0, KILOMETER) / Amount(0, HOUR)).format("GS") == "NaN km/h"

    def test_product_unit(self, manager):
        area = Amount(5.0, METER) * Amount(5.136, METER)

        assert area.format("NS", "en_US") == "25.68 m*m"

    def test_dimensionless_none_unit(self, manager):
        assert Amount(3, "absolute").format("GS") == "3 -"
        assert Amount.parse("3").format("GS") == "3"

    def test_format_protocol(self, manager, distance):
        assert f"{distance:NS}" == "12,345.68 m"
        assert f"{distance}" == "12345.6789 m"


class TestCustomPatterns:

    def test_decimal_pattern(self, speed):
        assert speed.format("0.000 US", "nl_BE") == "-0,450 km/h"

    def test_negative_subpattern(self, speed):
        assert speed.format("0.000 US;[0.000] US", "nl_BE") == "[0,450] km/h"

    def test_unit_name_placeholder(self, manager):
        assert Amount(1234.5678, METER).format("#,##0.000 UN", "en_US") == "1,234.568 meter"

    def test_general_placeholder(self, manager):
        assert Amount(2, KILOMETER).format("0 UG") == "2 km"

    def test_percentage_symbol(self, manager):
        assert Amount(15, PERCENTAGE).format("0 US") == "15 %"
        assert Amount(8.5, PERCENTAGE).format("0.00 US") == "8.50 %"


class TestConversionSuffix:

    def test_convert_to_named_unit(self, distance):
        assert distance.format("NN|kilometer", "en_US") == "12.35 kilometer"
        assert distance.format("#,##0.000 US|kilometer", "en_US") == "12.346 km"

    def test_plus_prefix(self, distance):
        assert distance.format("+#,##0.000 US|kilometer", "en_US") == "+12.346 km"

    def test_negative_subpattern_with_conversion(self, distance):
        fmt = "#,##0.000 US pos;#,##0.000 US neg|kilometer"

        assert (-distance).format(fmt, "en_US") == "12.346 km neg"
        assert distance.format(fmt, "en_US") == "12.346 km pos"

    def test_convert_to_expression(self, speed):
        assert speed.format("GS|m/s", "en_US") == "-0.125 m/s"

    def test_question_mark_resolves_named_unit(self, speed):
        assert speed.format("GN|?", "en_US") == "-0.45 kilometer/hour"

    def test_unknown_target(self, distance):
        with pytest.raises(UnknownUnitError):
            distance.format("NS|furlong")


class TestFormatterHook:

    def test_formatter_takes_precedence(self, distance):
        def formatter(fmt, amount, locale):
            if fmt == "X":
                return f"<{amount.value:.1f}|{locale}>"
            return None

        assert distance.format("X", "nl_BE", formatter) == "<12345.7|nl_BE>"
        assert distance.format("NS", "en_US", formatter) == "12,345.68 m"

    def test_format_amount_function(self, distance):
        assert format_amount(distance, "NS", "nl_BE") == "12.345,68 m"


class TestToString:

    def test_none(self):
        assert Amount.to_string(None) == ""

    def test_amount(self, distance):
        assert Amount.to_string(distance, "NS", "en_US") == "12,345.68 m"
