# -*- coding: utf-8 -*-
"""Electric units."""

from __future__ import annotations

from amounts.manager import UnitManager
from amounts.standard_units import si
from amounts.standard_units.energy import WATT
from amounts.standard_units.time import SECOND
from amounts.units import Unit

AMPERE = Unit("ampere", "A", si.ELECTRIC_CURRENT)
MILLIAMPERE = Unit("milliampere", "mA", 0.001 * AMPERE)
COULOMB = Unit("coulomb", "C", SECOND * AMPERE)
VOLT = Unit("volt", "V", WATT / AMPERE)
OHM = Unit("ohm", "Ω", VOLT / AMPERE)
FARAD = Unit("farad", "F", COULOMB / VOLT)

UNITS = [AMPERE, MILLIAMPERE, COULOMB, VOLT, OHM, FARAD]


def register(manager: UnitManager) -> None:
    """Register the electric units."""
    manager.register_units(UNITS)
