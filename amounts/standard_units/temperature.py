# -*- coding: utf-8 -*-
"""
Temperature units and their conversion functions

Celsius and Fahrenheit scales are offset from Kelvin, so they cannot be
expressed as a factor of it. Each scale gets its own dimension and the
scales are connected through registered conversion functions:

    °C -> °F, °F -> °C, °C -> K, K -> °C
    °F -> K and K -> °F (through °C)
"""

from __future__ import annotations

from amounts.amount import Amount
from amounts.dimensions import UnitType
from amounts.manager import UnitManager
from amounts.standard_units import si
from amounts.units import Unit

KELVIN = Unit("Kelvin", "K", si.THERMODYNAMIC_TEMPERATURE)
DEGREE_CELSIUS = Unit("degree celsius", "°C", UnitType("celsius temperature"))
DEGREE_FAHRENHEIT = Unit("degree fahrenheit", "°F", UnitType("fahrenheit temperature"))

UNITS = [KELVIN, DEGREE_CELSIUS, DEGREE_FAHRENHEIT]

ABSOLUTE_ZERO_CELSIUS = 273.15


def register(manager: UnitManager) -> None:
    """Register the temperature units."""
    manager.register_units(UNITS)


def register_conversions(manager: UnitManager) -> None:
    """Register the conversion functions between the temperature scales.

    Args:
        manager: Registry receiving the functions. The Fahrenheit/Kelvin
            functions convert through Celsius using this same registry.
    """

    def celsius_to_fahrenheit(amount: Amount) -> Amount:
        return Amount(amount.value * 9.0 / 5.0 + 32.0, DEGREE_FAHRENHEIT)

    def fahrenheit_to_celsius(amount: Amount) -> Amount:
        return Amount((amount.value - 32.0) / 9.0 * 5.0, DEGREE_CELSIUS)

    def celsius_to_kelvin(amount: Amount) -> Amount:
        return Amount(amount.value + ABSOLUTE_ZERO_CELSIUS, KELVIN)

    def kelvin_to_celsius(amount: Amount) -> Amount:
        return Amount(amount.value - ABSOLUTE_ZERO_CELSIUS, DEGREE_CELSIUS)

    def fahrenheit_to_kelvin(amount: Amount) -> Amount:
        celsius = manager.convert_to(amount, DEGREE_CELSIUS)
        return manager.convert_to(celsius, KELVIN)

    def kelvin_to_fahrenheit(amount: Amount) -> Amount:
        celsius = manager.convert_to(amount, DEGREE_CELSIUS)
        return manager.convert_to(celsius, DEGREE_FAHRENHEIT)

    manager.register_conversion(DEGREE_CELSIUS, DEGREE_FAHRENHEIT, celsius_to_fahrenheit)
    manager.register_conversion(DEGREE_FAHRENHEIT, DEGREE_CELSIUS, fahrenheit_to_celsius)
    manager.register_conversion(DEGREE_CELSIUS, KELVIN, celsius_to_kelvin)
    manager.register_conversion(KELVIN, DEGREE_CELSIUS, kelvin_to_celsius)
    manager.register_conversion(DEGREE_FAHRENHEIT, KELVIN, fahrenheit_to_kelvin)
    manager.register_conversion(KELVIN, DEGREE_FAHRENHEIT, kelvin_to_fahrenheit)
