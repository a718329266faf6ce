# -*- coding: utf-8 -*-
"""Tests for amount aggregates."""

import pytest

from amounts.aggregates import average, limit, max_amount, min_amount, sum_amounts
from amounts.amount import Amount
from amounts.exceptions import InvalidArgumentError, UnitConversionError
from amounts.standard_units.length import KILOMETER, METER
from amounts.standard_units.mass import KILOGRAM
from amounts.units import Unit


class TestSum:

    def test_sum_in_first_unit(self, manager):
        total = sum_amounts([Amount(2, KILOMETER), Amount(500, METER)])

        assert total.value == 2.5
        assert total.unit is KILOMETER

    def test_sum_with_selector(self, manager):
        legs = [{"leg": 1, "distance": Amount(800, METER)}, {"leg": 2, "distance": Amount(1.2, KILOMETER)}]
        total = sum_amounts(legs, lambda leg: leg["distance"])

        assert total == Amount(2, KILOMETER)
        assert total.unit is METER

    def test_sum_of_generator(self, manager):
        total = sum_amounts(Amount(i, METER) for i in range(1, 5))

        assert total.value == 10.0

    def test_empty_sum(self, manager):
        total = sum_amounts([])

        assert total.value == 0.0
        assert total.unit is Unit.NONE

    def test_incompatible(self, manager):
        with pytest.raises(UnitConversionError):
            sum_amounts([Amount(1, METER), Amount(1, KILOGRAM)])


class TestAverage:

    def test_average(self, manager):
        result = average([Amount(2, KILOMETER), Amount(4000, METER)])

        assert result.value == 3.0
        assert result.unit is KILOMETER

    def test_average_with_selector(self, manager):
        result = average([2, 4, 9], lambda n: Amount(n, METER))

        assert result.value == 5.0

    def test_empty(self, manager):
        with pytest.raises(InvalidArgumentError):
            average([])


class TestMinMaxLimit:

    def test_max_and_min(self, manager):
        short = Amount(900, METER)
        long = Amount(1, KILOMETER)

        assert max_amount(short, long) is long
        assert max_amount(long, short) is long
        assert min_amount(short, long) is short
        assert min_amount(long, short) is short

    def test_equal_returns_right(self, manager):
        left = Amount(1, KILOMETER)
        right = Amount(1000, METER)

        assert max_amount(left, right) is right
        assert min_amount(left, right) is right

    def test_limit(self, manager):
        low = Amount(1, KILOMETER)
        high = Amount(5, KILOMETER)

        assert limit(Amount(3000, METER), low, high).value == 3000.0
        assert limit(Amount(10, METER), low, high) is low
        assert limit(Amount(9, KILOMETER), low, high) is high

    def test_incompatible(self, manager):
        with pytest.raises(UnitConversionError):
            max_amount(Amount(1, METER), Amount(1, KILOGRAM))
