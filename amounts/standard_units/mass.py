# -*- coding: utf-8 -*-
"""Mass units."""

from __future__ import annotations

from amounts.manager import UnitManager
from amounts.standard_units import si
from amounts.units import Unit

KILOGRAM = Unit("kilogram", "Kg", si.MASS)
GRAM = Unit("gram", "g", 0.001 * KILOGRAM)
MILLIGRAM = Unit("milligram", "mg", 0.001 * GRAM)
TON = Unit("ton", "ton", 1000.0 * KILOGRAM)

UNITS = [KILOGRAM, GRAM, MILLIGRAM, TON]


def register(manager: UnitManager) -> None:
    """Register the mass units."""
    manager.register_units(UNITS)
