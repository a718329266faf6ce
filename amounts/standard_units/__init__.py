# -*- coding: utf-8 -*-
"""
Standard Unit Catalogs

One module per physical quantity, each exposing its units as module
constants and a ``register(manager)`` function. Nothing is registered on
import; call ``register_all`` (the default manager does so on creation
unless ``AMOUNTS_REGISTER_STANDARD_UNITS`` is false).

Example:
    >>> from amounts.manager import UnitManager
    >>> from amounts.standard_units import register_all, length
    >>> manager = UnitManager()
    >>> register_all(manager)
    >>> manager.get_unit_by_symbol("km") is length.KILOMETER
    True
"""

from __future__ import annotations

import logging

from amounts.manager import UnitManager
from amounts.standard_units import (
    electric,
    energy,
    force,
    frequency,
    length,
    mass,
    pressure,
    relative,
    si,
    speed,
    substance,
    surface,
    temperature,
    time,
    volume,
)

logger = logging.getLogger(__name__)

CATALOGS = (
    length,
    mass,
    time,
    surface,
    volume,
    speed,
    energy,
    force,
    pressure,
    electric,
    frequency,
    relative,
    substance,
    temperature,
)


def register_all(manager: UnitManager) -> None:
    """Register every standard unit catalog and the temperature conversions.

    Args:
        manager: Registry to populate.
    """
    for catalog in CATALOGS:
        catalog.register(manager)
    temperature.register_conversions(manager)

    logger.info(
        "Registered standard units (%d catalogs, %d units)",
        len(CATALOGS), len(manager.get_units()),
    )


__all__ = [
    "CATALOGS",
    "register_all",
    "si",
    "length",
    "mass",
    "time",
    "surface",
    "volume",
    "speed",
    "energy",
    "force",
    "pressure",
    "electric",
    "frequency",
    "relative",
    "substance",
    "temperature",
]
