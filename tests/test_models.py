# -*- coding: utf-8 -*-
"""Tests for the registry read models."""

import pytest
from pydantic import ValidationError

from amounts.models import ConversionInfo, RegistryStatistics, UnitInfo
from amounts.standard_units.length import KILOMETER


class TestUnitInfo:

    def test_from_manager(self, manager):
        info = next(i for i in manager.describe_units(KILOMETER.unit_type) if i.symbol == "km")

        assert info.name == "kilometer"
        assert info.factor == 1000.0
        assert info.dimension == {"metre": 1}
        assert info.is_named

    def test_frozen(self):
        info = UnitInfo(name="meter", symbol="m", factor=1.0)

        with pytest.raises(ValidationError):
            info.name = "metre"

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError):
            UnitInfo(name="meter", symbol="m", factor=1.0, alias="metre")

    def test_serialization(self):
        info = UnitInfo(name="meter", symbol="m", factor=1.0, dimension={"metre": 1})

        assert info.model_dump()["dimension"] == {"metre": 1}
        assert UnitInfo.model_validate_json(info.model_dump_json()) == info


class TestConversionInfo:

    def test_required_fields(self):
        with pytest.raises(ValidationError):
            ConversionInfo(from_unit="degree celsius")

    def test_defaults(self):
        info = ConversionInfo(
            from_unit="degree celsius", from_symbol="°C",
            to_unit="Kelvin", to_symbol="K",
        )

        assert info.from_dimension == ""


class TestRegistryStatistics:

    def test_counts_are_non_negative(self):
        with pytest.raises(ValidationError):
            RegistryStatistics(total_units=-1)

    def test_defaults(self):
        stats = RegistryStatistics()

        assert stats.total_units == 0
        assert stats.units_by_dimension == {}
