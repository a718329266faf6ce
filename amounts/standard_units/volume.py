# -*- coding: utf-8 -*-
"""Volume units."""

from __future__ import annotations

from amounts.manager import UnitManager
from amounts.standard_units.length import DECIMETER, METER
from amounts.units import Unit

LITER = Unit("liter", "L", DECIMETER.power(3))
MILLILITER = Unit("milliliter", "mL", 0.001 * LITER)
CENTILITER = Unit("centiliter", "cL", 0.01 * LITER)
DECILITER = Unit("deciliter", "dL", 0.1 * LITER)
HECTOLITER = Unit("hectoliter", "hL", 100.0 * LITER)
METER3 = Unit("meter³", "m³", METER.power(3))

UNITS = [LITER, MILLILITER, CENTILITER, DECILITER, HECTOLITER, METER3]


def register(manager: UnitManager) -> None:
    """Register the volume units."""
    manager.register_units(UNITS)
