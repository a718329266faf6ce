# -*- coding: utf-8 -*-
"""Time units."""

from __future__ import annotations

from amounts.manager import UnitManager
from amounts.standard_units import si
from amounts.units import Unit

SECOND = Unit("second", "s", si.TIME)
MICROSECOND = Unit("microsecond", "μs", 0.000001 * SECOND)
MILLISECOND = Unit("millisecond", "ms", 0.001 * SECOND)
MINUTE = Unit("minute", "min", 60.0 * SECOND)
HOUR = Unit("hour", "h", 3600.0 * SECOND)
DAY = Unit("day", "d", 24.0 * HOUR)

UNITS = [SECOND, MICROSECOND, MILLISECOND, MINUTE, HOUR, DAY]


def register(manager: UnitManager) -> None:
    """Register the time units."""
    manager.register_units(UNITS)
