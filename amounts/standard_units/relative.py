# -*- coding: utf-8 -*-
"""Dimensionless units."""

from __future__ import annotations

from amounts.manager import UnitManager
from amounts.units import Unit

ABSOLUTE = Unit("absolute", "-", Unit.NONE)
PERCENTAGE = Unit("percentage", "%", 0.01 * Unit.NONE)

UNITS = [ABSOLUTE, PERCENTAGE]


def register(manager: UnitManager) -> None:
    """Register the dimensionless units."""
    manager.register_units(UNITS)
