# -*- coding: utf-8 -*-
"""Tests for UnitManager registration, lookup and conversion."""

import math
import threading

import pytest

from amounts.amount import Amount
from amounts.dimensions import UnitType
from amounts.exceptions import InvalidArgumentError, UnitConversionError, UnknownUnitError
from amounts.manager import UnitManager, get_manager, reset_manager, set_manager
from amounts.standard_units import si
from amounts.standard_units.length import KILOMETER, METER
from amounts.standard_units.mass import KILOGRAM
from amounts.standard_units.speed import KILOMETER_PER_HOUR
from amounts.standard_units.time import HOUR
from amounts.units import Unit

CURRENCY = UnitType("test currency")
EURO = Unit("euro", "EUR", CURRENCY)
CENT = Unit("cent", "ct", 0.01 * EURO)


# ==============================================================================
# Registration
# ==============================================================================

class TestRegistration:

    def test_register_and_lookup(self, empty_manager):
        empty_manager.register_unit(EURO)

        assert empty_manager.get_unit_by_name("euro") is EURO
        assert empty_manager.get_unit_by_symbol("EUR") is EURO
        assert empty_manager.is_registered(EURO)

    def test_register_is_idempotent(self, empty_manager):
        empty_manager.register_unit(EURO)
        empty_manager.register_unit(EURO)

        assert empty_manager.get_units() == [EURO]

    def test_register_rejects_non_units(self, empty_manager):
        with pytest.raises(InvalidArgumentError):
            empty_manager.register_unit("euro")

    def test_latest_registration_wins_lookups(self, empty_manager):
        other = Unit("euro", "€", 1.0 * EURO)
        empty_manager.register_units([EURO, other])

        assert empty_manager.get_unit_by_name("euro") is other
        assert empty_manager.get_unit_by_symbol("EUR") is EURO
        assert len(empty_manager.get_units(CURRENCY)) == 2

    def test_get_units_by_type(self, empty_manager):
        empty_manager.register_units([EURO, CENT, METER])

        assert empty_manager.get_units(CURRENCY) == [EURO, CENT]
        assert empty_manager.get_units(si.LENGTH) == [METER]
        assert empty_manager.get_units(UnitType("test unused")) == []
        assert set(empty_manager.get_unit_types()) == {CURRENCY, si.LENGTH}

    def test_concurrent_registration(self, empty_manager):
        units = [Unit(f"unit {i}", f"u{i}", EURO) for i in range(200)]

        threads = [
            threading.Thread(target=empty_manager.register_units, args=(units[i::4],))
            for i in range(4)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(empty_manager.get_units()) == 200


# ==============================================================================
# Lookup
# ==============================================================================

class TestLookup:

    def test_try_lookups_return_none(self, empty_manager):
        assert empty_manager.try_get_unit_by_name("euro") is None
        assert empty_manager.try_get_unit_by_symbol("EUR") is None

    def test_get_lookups_raise(self, empty_manager):
        with pytest.raises(UnknownUnitError) as exc_info:
            empty_manager.get_unit_by_name("euro")
        assert exc_info.value.context == {"name": "euro", "lookup": "name"}

        with pytest.raises(UnknownUnitError) as exc_info:
            empty_manager.get_unit_by_symbol("EUR")
        assert exc_info.value.context == {"symbol": "EUR", "lookup": "symbol"}

    def test_resolver_registers_unit(self, empty_manager):
        calls = []

        def resolver(name):
            calls.append(name)
            return EURO if name == "euro" else None

        empty_manager.add_resolver(resolver)

        assert empty_manager.get_unit_by_name("euro") is EURO
        assert empty_manager.is_registered(EURO)
        assert empty_manager.get_unit_by_name("euro") is EURO
        assert calls == ["euro"]
        assert empty_manager.try_get_unit_by_name("dollar") is None

    def test_resolvers_not_used_for_symbols(self, empty_manager):
        empty_manager.add_resolver(lambda name: EURO)

        assert empty_manager.try_get_unit_by_symbol("EUR") is None

    def test_resolvers_in_order(self, empty_manager):
        empty_manager.add_resolver(lambda name: None)
        empty_manager.add_resolver(lambda name: CENT)
        empty_manager.add_resolver(lambda name: EURO)

        assert empty_manager.get_unit_by_name("anything") is CENT

    def test_remove_resolver(self, empty_manager):
        def resolver(name):
            return EURO

        empty_manager.add_resolver(resolver)
        empty_manager.remove_resolver(resolver)
        empty_manager.remove_resolver(resolver)

        assert empty_manager.try_get_unit_by_name("euro") is None

    def test_resolve_to_named_unit(self, manager):
        derived = KILOMETER / HOUR

        assert manager.resolve_to_named_unit(derived) is KILOMETER_PER_HOUR
        assert manager.resolve_to_named_unit(METER) is METER

        odd = 7.0 * METER
        assert manager.resolve_to_named_unit(odd) is odd
        assert manager.resolve_to_named_unit(odd, self_if_absent=False) is None


# ==============================================================================
# Conversion
# ==============================================================================

class TestConversion:

    def test_identity_returns_same_amount(self, manager):
        amount = Amount(5, METER)

        assert manager.convert_to(amount, METER) is amount

    def test_linear(self, manager):
        result = manager.convert_to(Amount(1500, METER), KILOMETER)

        assert result.value == 1.5
        assert result.unit is KILOMETER

    def test_linear_to_equal_unit(self, manager):
        alias = Unit("metre", "mtr", METER)
        result = manager.convert_to(Amount(5, METER), alias)

        assert result.value == 5.0
        assert result.unit is alias

    def test_linear_to_zero_factor(self, manager):
        result = manager.convert_to(Amount(5, METER), 0.0 * METER)

        assert result.value == math.inf

    def test_incompatible(self, manager):
        with pytest.raises(UnitConversionError):
            manager.convert_to(Amount(1, METER), KILOGRAM)

        assert not manager.is_convertible(METER, KILOGRAM)
        assert manager.is_convertible(METER, KILOMETER)

    def test_conversion_function(self, empty_manager):
        points = Unit("point", "pt", UnitType("test loyalty points"))

        empty_manager.register_conversion(
            points, CENT, lambda amount: Amount(amount.value * 2, CENT),
        )

        result = empty_manager.convert_to(Amount(150, points), EURO)

        assert result.value == 3.0
        assert result.unit is EURO
        assert empty_manager.is_convertible(points, EURO)
        assert not empty_manager.is_convertible(EURO, points)

    def test_conversion_function_input_is_converted_first(self, empty_manager):
        points = Unit("point", "pt", UnitType("test loyalty points"))
        kilopoints = Unit("kilopoint", "kpt", 1000.0 * points)
        seen = []

        def to_cents(amount):
            seen.append(amount.unit)
            return Amount(amount.value, CENT)

        empty_manager.register_conversion(points, CENT, to_cents)

        assert empty_manager.convert_to(Amount(2, kilopoints), CENT).value == 2000.0
        assert seen == [points]


# ==============================================================================
# Read models
# ==============================================================================

class TestReadModels:

    def test_describe_units(self, empty_manager):
        empty_manager.register_units([EURO, CENT])
        infos = empty_manager.describe_units(CURRENCY)

        assert [info.name for info in infos] == ["euro", "cent"]
        assert infos[1].factor == 0.01
        assert infos[0].dimension == {"test currency": 1}
        assert infos[0].dimension_text == "test currency^1"
        assert infos[0].is_named

    def test_describe_conversions(self, manager):
        infos = manager.describe_conversions()
        pairs = {(info.from_symbol, info.to_symbol) for info in infos}

        assert ("°C", "°F") in pairs
        assert ("K", "°F") in pairs
        assert len(infos) == 6

    def test_statistics(self, empty_manager):
        empty_manager.register_units([EURO, CENT, METER])
        empty_manager.add_resolver(lambda name: None)
        stats = empty_manager.get_statistics()

        assert stats.total_units == 3
        assert stats.named_units == 3
        assert stats.unit_types == 2
        assert stats.conversion_functions == 0
        assert stats.resolvers == 1
        assert stats.symbols == 3
        assert stats.units_by_dimension == {"test currency^1": 2, "metre^1": 1}


# ==============================================================================
# Metrics
# ==============================================================================

class TestManagerMetrics:

    def test_name(self, manager):
        assert manager.name == "test"
        assert UnitManager().name == "default"

    def test_gauges_are_labelled_per_manager(self):
        prometheus_client = pytest.importorskip("prometheus_client")
        registry = prometheus_client.REGISTRY

        first = UnitManager(name="gauge one")
        first.register_units([EURO, CENT])
        second = UnitManager(name="gauge two")
        second.register_unit(METER)

        assert registry.get_sample_value(
            "amounts_units_registered", {"manager": "gauge one"}
        ) == 2.0
        assert registry.get_sample_value(
            "amounts_units_registered", {"manager": "gauge two"}
        ) == 1.0


# ==============================================================================
# Default instance
# ==============================================================================

class TestDefaultManager:

    def test_default_manager_has_standard_units(self):
        mgr = get_manager()

        assert mgr is get_manager()
        assert mgr.get_unit_by_symbol("km") is KILOMETER

    def test_set_and_reset(self):
        custom = UnitManager()
        set_manager(custom)
        assert get_manager() is custom

        reset_manager()
        assert get_manager() is not custom
