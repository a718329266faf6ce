# -*- coding: utf-8 -*-
"""Energy and power units."""

from __future__ import annotations

from amounts.manager import UnitManager
from amounts.standard_units.length import METER
from amounts.standard_units.mass import KILOGRAM
from amounts.standard_units.time import HOUR, SECOND
from amounts.units import Unit

JOULE = Unit("joule", "J", METER.power(2) * KILOGRAM * SECOND.power(-2))
KILOJOULE = Unit("kilojoule", "kJ", 1000.0 * JOULE)
MEGAJOULE = Unit("megajoule", "MJ", 1000000.0 * JOULE)
GIGAJOULE = Unit("gigajoule", "GJ", 1000000000.0 * JOULE)
WATT = Unit("watt", "W", JOULE / SECOND)
KILOWATT = Unit("kilowatt", "kW", 1000.0 * WATT)
MEGAWATT = Unit("megawatt", "MW", 1000000.0 * WATT)
WATT_SECOND = Unit("watt-second", "Wsec", WATT * SECOND)
WATT_HOUR = Unit("watt-hour", "Wh", WATT * HOUR)
KILOWATT_HOUR = Unit("kilowatt-hour", "kWh", 1000.0 * WATT_HOUR)
CALORIE = Unit("calorie", "cal", 4.1868 * JOULE)
KILOCALORIE = Unit("kilocalorie", "kcal", 1000.0 * CALORIE)
HORSEPOWER = Unit("horsepower", "hp", 0.73549875 * KILOWATT)

UNITS = [
    JOULE, KILOJOULE, MEGAJOULE, GIGAJOULE, WATT, KILOWATT, MEGAWATT,
    WATT_SECOND, WATT_HOUR, KILOWATT_HOUR, CALORIE, KILOCALORIE, HORSEPOWER,
]


def register(manager: UnitManager) -> None:
    """Register the energy and power units."""
    manager.register_units(UNITS)
