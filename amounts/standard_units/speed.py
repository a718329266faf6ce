# -*- coding: utf-8 -*-
"""Speed units."""

from __future__ import annotations

from amounts.manager import UnitManager
from amounts.standard_units.length import KILOMETER, METER, MILE
from amounts.standard_units.time import HOUR, SECOND
from amounts.units import Unit

METER_PER_SECOND = Unit("meter/second", "m/s", METER / SECOND)
KILOMETER_PER_HOUR = Unit("kilometer/hour", "km/h", KILOMETER / HOUR)
MILE_PER_HOUR = Unit("mile/hour", "mi/h", MILE / HOUR)
KNOT = Unit("knot", "kn", 1.852 * KILOMETER_PER_HOUR)

UNITS = [METER_PER_SECOND, KILOMETER_PER_HOUR, MILE_PER_HOUR, KNOT]


def register(manager: UnitManager) -> None:
    """Register the speed units."""
    manager.register_units(UNITS)
