# -*- coding: utf-8 -*-
"""Frequency units."""

from __future__ import annotations

from amounts.manager import UnitManager
from amounts.standard_units.time import MINUTE, SECOND
from amounts.units import Unit

HERTZ = Unit("Hertz", "hz", SECOND.power(-1))
MEGAHERTZ = Unit("MegaHertz", "Mhz", 1000000.0 * HERTZ)
RPM = Unit("Rounds per minute", "rpm", MINUTE.power(-1))

UNITS = [HERTZ, MEGAHERTZ, RPM]


def register(manager: UnitManager) -> None:
    """Register the frequency units."""
    manager.register_units(UNITS)
