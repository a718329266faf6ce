# -*- coding: utf-8 -*-
"""Surface units."""

from __future__ import annotations

from amounts.manager import UnitManager
from amounts.standard_units.length import KILOMETER, METER
from amounts.units import Unit

METER2 = Unit("meter²", "m²", METER.power(2))
ARE = Unit("are", "are", 100.0 * METER2)
HECTARE = Unit("hectare", "ha", 10000.0 * METER2)
KILOMETER2 = Unit("kilometer²", "Km²", KILOMETER.power(2))

UNITS = [METER2, ARE, HECTARE, KILOMETER2]


def register(manager: UnitManager) -> None:
    """Register the surface units."""
    manager.register_units(UNITS)
