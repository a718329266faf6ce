"""
Amounts: dimension-safe quantities
==================================

Values tied to units of measure, with dimension-checked arithmetic,
conversion through a registry of units and conversion functions, a small
unit-expression parser and locale-aware formatting.

The standard unit catalogs live in ``amounts.standard_units`` and are
registered in the default manager on first use.
"""

from ._version import __version__

from amounts.aggregates import average, limit, max_amount, min_amount, sum_amounts
from amounts.amount import Amount
from amounts.config import AmountsConfig, get_config, reset_config, set_config
from amounts.dimensions import UnitType
from amounts.exceptions import (
    AmountParseError,
    AmountsException,
    InvalidArgumentError,
    ParseException,
    UnitConversionError,
    UnitException,
    UnitParseError,
    UnknownUnitError,
)
from amounts.formatting import format_amount
from amounts.manager import UnitManager, get_manager, reset_manager, set_manager
from amounts.models import ConversionInfo, RegistryStatistics, UnitInfo
from amounts.parser import UnitParser, parse_unit
from amounts.units import Unit

__all__ = [
    "__version__",
    # Core types
    "Amount",
    "Unit",
    "UnitType",
    # Registry
    "UnitManager",
    "get_manager",
    "set_manager",
    "reset_manager",
    # Parsing and formatting
    "UnitParser",
    "parse_unit",
    "format_amount",
    # Aggregates
    "sum_amounts",
    "average",
    "max_amount",
    "min_amount",
    "limit",
    # Configuration
    "AmountsConfig",
    "get_config",
    "set_config",
    "reset_config",
    # Read models
    "UnitInfo",
    "ConversionInfo",
    "RegistryStatistics",
    # Exceptions
    "AmountsException",
    "UnitException",
    "UnknownUnitError",
    "UnitConversionError",
    "InvalidArgumentError",
    "ParseException",
    "UnitParseError",
    "AmountParseError",
]
