# -*- coding: utf-8 -*-
"""
Unit Manager - registry of units and conversion functions

Thread-safe in-memory registry with indexed lookups of units by name, by
symbol and by dimension vector, plus a directed table of conversion
functions keyed by ``(from dimension, to dimension)``. The manager is the
single authority deciding how an amount is converted:

    1. identity: the amount already carries the target unit object
    2. linear: the units share a dimension and differ only in factor
    3. function: a conversion function is registered for the dimension pair
    4. otherwise UnitConversionError

A process-wide default manager is available through ``get_manager()``;
tests and embedding applications can install their own with
``set_manager()``.

Example:
    >>> from amounts.manager import UnitManager
    >>> manager = UnitManager()
    >>> manager.register_unit(meter)
    >>> manager.get_unit_by_symbol("m") is meter
    True
"""

from __future__ import annotations

import logging
import threading
import time
from collections import defaultdict
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, Iterable, List, Optional, Set, Tuple

from amounts.config import get_config
from amounts.dimensions import UnitType
from amounts.exceptions import InvalidArgumentError, UnitConversionError, UnknownUnitError
from amounts.metrics import (
    record_conversion,
    record_unit_lookup,
    update_conversions_count,
    update_units_count,
)
from amounts.models import ConversionInfo, RegistryStatistics, UnitInfo
from amounts.units import Unit, true_divide

if TYPE_CHECKING:
    from amounts.amount import Amount

logger = logging.getLogger(__name__)

ConversionFunction = Callable[["Amount"], "Amount"]
UnitResolver = Callable[[str], Optional[Unit]]


@dataclass(frozen=True)
class ConversionEntry:
    """A conversion function registered between two dimensions.

    Attributes:
        from_unit: Unit the function expects its input in.
        to_unit: Unit the function produces its output in.
        function: The transform itself.
    """
    from_unit: Unit
    to_unit: Unit
    function: ConversionFunction


class UnitManager:
    """Thread-safe registry of units and conversion functions.

    Example:
        >>> manager = UnitManager()
        >>> manager.register_units([meter, kilometer])
        >>> manager.convert_to(Amount(1500, meter), kilometer).value
        1.5
    """

    def __init__(self, name: str = "default") -> None:
        """Initialize an empty UnitManager.

        Args:
            name: Label under which the registry size gauges are reported.
        """
        self._name = name

        # Primary storage, in registration order
        self._all_units: List[Unit] = []
        self._registered_ids: Set[int] = set()

        # Indexes for fast lookup
        self._by_name: Dict[str, Unit] = {}
        self._by_symbol: Dict[str, Unit] = {}
        self._by_type: Dict[UnitType, List[Unit]] = defaultdict(list)

        # (from dimension, to dimension) -> conversion entry
        self._conversions: Dict[Tuple[UnitType, UnitType], ConversionEntry] = {}

        # Last-chance name resolvers
        self._resolvers: List[UnitResolver] = []

        # Thread safety
        self._lock = threading.RLock()

        logger.info("UnitManager '%s' initialized", name)

    @property
    def name(self) -> str:
        return self._name

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_unit(self, unit: Unit) -> None:
        """Register a unit in the name, symbol and dimension tables.

        Registering the same unit object twice is a no-op. Name and symbol
        collisions are overwritten by the latest registration; the
        dimension table keeps every registered unit.

        Args:
            unit: Unit to register.

        Raises:
            InvalidArgumentError: If ``unit`` is not a Unit.
        """
        if not isinstance(unit, Unit):
            raise InvalidArgumentError(
                message="Only Unit instances can be registered.",
                context={"argument": "unit", "type": type(unit).__name__},
            )

        with self._lock:
            if id(unit) in self._registered_ids:
                return

            self._all_units.append(unit)
            self._registered_ids.add(id(unit))
            self._by_type[unit.unit_type].append(unit)
            self._by_name[unit.name] = unit
            self._by_symbol[unit.symbol] = unit
            count = len(self._all_units)

        update_units_count(count, self._name)
        logger.debug("Registered unit '%s' (%s)", unit.name, unit.symbol)

    def register_units(self, units: Iterable[Unit]) -> None:
        """Register several units in order."""
        for unit in units:
            self.register_unit(unit)

    def register_conversion(
        self,
        from_unit: Unit,
        to_unit: Unit,
        function: ConversionFunction,
    ) -> None:
        """Register a conversion function between two dimensions.

        The entry applies to every unit of ``from_unit``'s dimension
        converted to any unit of ``to_unit``'s dimension. Conversions are
        directional; register the reverse transform separately.

        Args:
            from_unit: Unit the function expects its input in.
            to_unit: Unit the function returns its output in.
            function: Callable taking and returning an Amount.
        """
        key = (from_unit.unit_type, to_unit.unit_type)
        with self._lock:
            self._conversions[key] = ConversionEntry(from_unit, to_unit, function)
            count = len(self._conversions)

        update_conversions_count(count, self._name)
        logger.debug(
            "Registered conversion '%s' -> '%s'", from_unit.name, to_unit.name,
        )

    # ------------------------------------------------------------------
    # Resolvers
    # ------------------------------------------------------------------

    def add_resolver(self, resolver: UnitResolver) -> None:
        """Add a callback consulted when a unit name is not registered.

        Args:
            resolver: Callable receiving the requested name and returning a
                Unit or None. A returned unit is registered automatically.
        """
        with self._lock:
            self._resolvers.append(resolver)

    def remove_resolver(self, resolver: UnitResolver) -> None:
        """Remove a previously added resolver (no-op when absent)."""
        with self._lock:
            if resolver in self._resolvers:
                self._resolvers.remove(resolver)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def try_get_unit_by_name(self, name: str) -> Optional[Unit]:
        """Look up a unit by name, falling back to the resolvers.

        Returns:
            The unit, or None when neither the table nor any resolver
            knows the name.
        """
        unit = self._by_name.get(name)
        if unit is not None:
            record_unit_lookup("name", "hit")
            return unit

        with self._lock:
            resolvers = list(self._resolvers)

        for resolver in resolvers:
            unit = resolver(name)
            if unit is not None:
                self.register_unit(unit)
                record_unit_lookup("name", "resolver")
                logger.debug("Resolved unit name '%s' through a resolver", name)
                return unit

        record_unit_lookup("name", "miss")
        return None

    def get_unit_by_name(self, name: str) -> Unit:
        """Look up a unit by name, falling back to the resolvers.

        Raises:
            UnknownUnitError: If the name cannot be resolved.
        """
        unit = self.try_get_unit_by_name(name)
        if unit is None:
            raise UnknownUnitError(
                message=f"No unit found named '{name}'.",
                context={"name": name, "lookup": "name"},
            )
        return unit

    def try_get_unit_by_symbol(self, symbol: str) -> Optional[Unit]:
        """Look up a unit by symbol; resolvers are not consulted."""
        unit = self._by_symbol.get(symbol)
        record_unit_lookup("symbol", "hit" if unit is not None else "miss")
        return unit

    def get_unit_by_symbol(self, symbol: str) -> Unit:
        """Look up a unit by symbol.

        Raises:
            UnknownUnitError: If no unit is registered with the symbol.
        """
        unit = self.try_get_unit_by_symbol(symbol)
        if unit is None:
            raise UnknownUnitError(
                message=f"No unit found with symbol '{symbol}'.",
                context={"symbol": symbol, "lookup": "symbol"},
            )
        return unit

    # ------------------------------------------------------------------
    # Inventory
    # ------------------------------------------------------------------

    def get_units(self, unit_type: Optional[UnitType] = None) -> List[Unit]:
        """Return registered units, optionally only those of one dimension.

        Args:
            unit_type: Dimension filter. An unknown dimension yields an
                empty list.

        Returns:
            Units in registration order.
        """
        with self._lock:
            if unit_type is None:
                return list(self._all_units)
            return list(self._by_type.get(unit_type, ()))

    def get_unit_types(self) -> List[UnitType]:
        """Return the distinct dimension vectors of the registered units."""
        with self._lock:
            return list(self._by_type.keys())

    def is_registered(self, unit: Unit) -> bool:
        """Whether this very unit object has been registered."""
        return id(unit) in self._registered_ids

    def resolve_to_named_unit(self, unit: Unit, self_if_absent: bool = True) -> Optional[Unit]:
        """Find the registered named unit with the same dimension and factor.

        Args:
            unit: Unit to resolve.
            self_if_absent: Return ``unit`` itself when no match exists,
                otherwise None.

        Returns:
            ``unit`` when it is named, the first registered match, or the
            fallback described above.
        """
        if unit.is_named:
            return unit
        for candidate in self.get_units(unit.unit_type):
            if candidate.factor == unit.factor:
                return candidate
        return unit if self_if_absent else None

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def is_convertible(self, from_unit: Unit, to_unit: Unit) -> bool:
        """Whether ``convert_to`` would succeed between the two units."""
        if from_unit.is_compatible_to(to_unit):
            return True
        return (from_unit.unit_type, to_unit.unit_type) in self._conversions

    def convert_to(self, amount: "Amount", to_unit: Unit) -> "Amount":
        """Convert an amount to another unit.

        Args:
            amount: Amount to convert.
            to_unit: Target unit.

        Returns:
            The converted amount; ``amount`` itself when it already carries
            the target unit object.

        Raises:
            UnitConversionError: If the units share no dimension and no
                conversion function is registered between them.
        """
        start = time.perf_counter()
        try:
            result, path = self._convert(amount, to_unit)
        except UnitConversionError:
            record_conversion("none", "error", time.perf_counter() - start)
            raise
        record_conversion(path, "success", time.perf_counter() - start)
        return result

    def _convert(self, amount: "Amount", to_unit: Unit) -> Tuple["Amount", str]:
        from amounts.amount import Amount

        unit = amount.unit
        if unit is to_unit:
            return amount, "identity"

        if unit.is_compatible_to(to_unit):
            value = true_divide(amount.value * unit.factor, to_unit.factor)
            return Amount(value, to_unit), "linear"

        entry = self._conversions.get((unit.unit_type, to_unit.unit_type))
        if entry is None:
            raise UnitConversionError(from_unit=unit, to_unit=to_unit)

        converted = entry.function(self._convert(amount, entry.from_unit)[0])
        logger.debug(
            "Converted '%s' to '%s' through a conversion function",
            unit.name, to_unit.name,
        )
        return self._convert(converted, to_unit)[0], "function"

    # ------------------------------------------------------------------
    # Read models
    # ------------------------------------------------------------------

    def describe_units(self, unit_type: Optional[UnitType] = None) -> List[UnitInfo]:
        """Return read models of the registered units."""
        return [
            UnitInfo(
                name=unit.name,
                symbol=unit.symbol,
                factor=unit.factor,
                dimension=unit.unit_type.to_mapping(),
                dimension_text=str(unit.unit_type),
                is_named=unit.is_named,
            )
            for unit in self.get_units(unit_type)
        ]

    def describe_conversions(self) -> List[ConversionInfo]:
        """Return read models of the registered conversion functions."""
        with self._lock:
            entries = list(self._conversions.values())
        return [
            ConversionInfo(
                from_unit=entry.from_unit.name,
                from_symbol=entry.from_unit.symbol,
                to_unit=entry.to_unit.name,
                to_symbol=entry.to_unit.symbol,
                from_dimension=str(entry.from_unit.unit_type),
                to_dimension=str(entry.to_unit.unit_type),
            )
            for entry in entries
        ]

    def get_statistics(self) -> RegistryStatistics:
        """Get registry statistics summary."""
        with self._lock:
            return RegistryStatistics(
                total_units=len(self._all_units),
                named_units=sum(1 for unit in self._all_units if unit.is_named),
                unit_types=len(self._by_type),
                conversion_functions=len(self._conversions),
                resolvers=len(self._resolvers),
                symbols=len(self._by_symbol),
                units_by_dimension={
                    str(unit_type): len(units)
                    for unit_type, units in self._by_type.items()
                },
            )


# ---------------------------------------------------------------------------
# Default instance
# ---------------------------------------------------------------------------

_manager_instance: Optional[UnitManager] = None
_manager_lock = threading.Lock()


def get_manager() -> UnitManager:
    """Return the default UnitManager, creating it on first use.

    When ``AmountsConfig.register_standard_units`` is set, the new manager
    is populated with the standard unit catalogs.
    """
    global _manager_instance
    if _manager_instance is None:
        with _manager_lock:
            if _manager_instance is None:
                manager = UnitManager()
                if get_config().register_standard_units:
                    from amounts.standard_units import register_all

                    register_all(manager)
                _manager_instance = manager
    return _manager_instance


def set_manager(manager: UnitManager) -> None:
    """Replace the default UnitManager (useful for testing).

    Args:
        manager: Manager to install.
    """
    global _manager_instance
    with _manager_lock:
        _manager_instance = manager
    logger.info("Default UnitManager replaced programmatically")


def reset_manager() -> None:
    """Drop the default UnitManager (primarily for test teardown)."""
    global _manager_instance
    with _manager_lock:
        _manager_instance = None


__all__ = [
    "ConversionEntry",
    "ConversionFunction",
    "UnitResolver",
    "UnitManager",
    "get_manager",
    "set_manager",
    "reset_manager",
]
