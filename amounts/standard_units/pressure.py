# -*- coding: utf-8 -*-
"""Pressure units."""

from __future__ import annotations

from amounts.manager import UnitManager
from amounts.standard_units.force import NEWTON
from amounts.standard_units.length import METER
from amounts.units import Unit

PASCAL = Unit("pascal", "Pa", NEWTON * METER.power(-2))
HECTOPASCAL = Unit("hectopascal", "hPa", 100.0 * PASCAL)
KILOPASCAL = Unit("kilopascal", "KPa", 1000.0 * PASCAL)
BAR = Unit("bar", "bar", 100000.0 * PASCAL)
MILLIBAR = Unit("millibar", "mbar", 0.001 * BAR)
ATMOSPHERE = Unit("atmosphere", "atm", 101325.0 * PASCAL)

UNITS = [PASCAL, HECTOPASCAL, KILOPASCAL, BAR, MILLIBAR, ATMOSPHERE]


def register(manager: UnitManager) -> None:
    """Register the pressure units."""
    manager.register_units(UNITS)
