# -*- coding: utf-8 -*-
"""Force units."""

from __future__ import annotations

from amounts.manager import UnitManager
from amounts.standard_units.length import METER
from amounts.standard_units.mass import KILOGRAM
from amounts.standard_units.time import SECOND
from amounts.units import Unit

NEWTON = Unit("newton", "N", METER * KILOGRAM * SECOND.power(-2))
MICRONEWTON = Unit("micronewton", "mN", 0.000001 * NEWTON)

UNITS = [NEWTON, MICRONEWTON]


def register(manager: UnitManager) -> None:
    """Register the force units."""
    manager.register_units(UNITS)
