# -*- coding: utf-8 -*-
"""Length units (metric, imperial and nautical)."""

from __future__ import annotations

from amounts.manager import UnitManager
from amounts.standard_units import si
from amounts.units import Unit

METER = Unit("meter", "m", si.LENGTH)
PICOMETER = Unit("picometer", "pm", 0.000000000001 * METER)
NANOMETER = Unit("nanometer", "nm", 0.000000001 * METER)
MICROMETER = Unit("micrometer", "µm", 0.000001 * METER)
MILLIMETER = Unit("millimeter", "mm", 0.001 * METER)
CENTIMETER = Unit("centimeter", "cm", 0.01 * METER)
DECIMETER = Unit("decimeter", "dm", 0.1 * METER)
DECAMETER = Unit("decameter", "Dm", 10.0 * METER)
HECTOMETER = Unit("hectometer", "Hm", 100.0 * METER)
KILOMETER = Unit("kilometer", "km", 1000.0 * METER)
INCH = Unit("inch", "in", 0.0254 * METER)
FOOT = Unit("foot", "ft", 12.0 * INCH)
YARD = Unit("yard", "yd", 36.0 * INCH)
MILE = Unit("mile", "mi", 5280.0 * FOOT)
NAUTICAL_MILE = Unit("nautical mile", "nmi", 1852.0 * METER)
LIGHT_YEAR = Unit("light-year", "ly", 9460730472580800.0 * METER)

UNITS = [
    METER, PICOMETER, NANOMETER, MICROMETER, MILLIMETER, CENTIMETER,
    DECIMETER, DECAMETER, HECTOMETER, KILOMETER, INCH, FOOT, YARD, MILE,
    NAUTICAL_MILE, LIGHT_YEAR,
]


def register(manager: UnitManager) -> None:
    """Register the length units."""
    manager.register_units(UNITS)
