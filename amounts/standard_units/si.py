# -*- coding: utf-8 -*-
"""SI base dimensions used by the standard unit catalogs."""

from amounts.dimensions import UnitType

LENGTH = UnitType("metre")
MASS = UnitType("kilogram")
TIME = UnitType("second")
ELECTRIC_CURRENT = UnitType("ampere")
THERMODYNAMIC_TEMPERATURE = UnitType("kelvin")
AMOUNT_OF_SUBSTANCE = UnitType("mole")
LUMINOUS_INTENSITY = UnitType("candela")

__all__ = [
    "LENGTH",
    "MASS",
    "TIME",
    "ELECTRIC_CURRENT",
    "THERMODYNAMIC_TEMPERATURE",
    "AMOUNT_OF_SUBSTANCE",
    "LUMINOUS_INTENSITY",
]
