# -*- coding: utf-8 -*-
"""
Amounts Registry Data Models

Pydantic v2 read models describing the contents of a ``UnitManager``.
They are snapshots: building one never mutates the registry, and mutating
one never affects it.

Models:
    - UnitInfo: a registered unit
    - ConversionInfo: a registered conversion function entry
    - RegistryStatistics: registry summary counters
"""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, Field


class UnitInfo(BaseModel):
    """Description of a registered unit."""
    name: str = Field(..., description="Unit name")
    symbol: str = Field(..., description="Unit symbol")
    factor: float = Field(..., description="Scale relative to the dimension-native base unit")
    dimension: Dict[str, int] = Field(
        default_factory=dict,
        description="Exponent per base dimension name (nonzero entries only)",
    )
    dimension_text: str = Field(default="", description="Rendered dimension vector")
    is_named: bool = Field(default=True, description="Declared with an explicit name and symbol")

    model_config = {"extra": "forbid", "frozen": True}


class ConversionInfo(BaseModel):
    """Description of a registered conversion function entry."""
    from_unit: str = Field(..., description="Name of the unit the function accepts")
    from_symbol: str = Field(..., description="Symbol of the unit the function accepts")
    to_unit: str = Field(..., description="Name of the unit the function produces")
    to_symbol: str = Field(..., description="Symbol of the unit the function produces")
    from_dimension: str = Field(default="", description="Source dimension vector")
    to_dimension: str = Field(default="", description="Target dimension vector")

    model_config = {"extra": "forbid", "frozen": True}


class RegistryStatistics(BaseModel):
    """Summary counters of a unit registry."""
    total_units: int = Field(default=0, ge=0, description="Registered units")
    named_units: int = Field(default=0, ge=0, description="Registered named units")
    unit_types: int = Field(default=0, ge=0, description="Distinct dimension vectors")
    conversion_functions: int = Field(default=0, ge=0, description="Registered conversion functions")
    resolvers: int = Field(default=0, ge=0, description="Registered name resolvers")
    symbols: int = Field(default=0, ge=0, description="Distinct symbols in the symbol table")
    units_by_dimension: Dict[str, int] = Field(
        default_factory=dict,
        description="Registered unit count per rendered dimension vector",
    )

    model_config = {"extra": "forbid"}


__all__ = [
    "UnitInfo",
    "ConversionInfo",
    "RegistryStatistics",
]
