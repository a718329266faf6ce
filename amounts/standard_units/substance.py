# -*- coding: utf-8 -*-
"""Amount of substance units."""

from __future__ import annotations

from amounts.manager import UnitManager
from amounts.standard_units import si
from amounts.units import Unit

MOLE = Unit("mole", "mol", si.AMOUNT_OF_SUBSTANCE)

UNITS = [MOLE]


def register(manager: UnitManager) -> None:
    """Register the amount of substance units."""
    manager.register_units(UNITS)
