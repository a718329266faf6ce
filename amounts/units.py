# -*- coding: utf-8 -*-
"""
Units - scaled, dimensioned units of measure

A ``Unit`` pairs a scale ``factor`` with a ``UnitType`` dimension vector.
Units declared with a name and symbol are *named*; units produced by
algebra (products, quotients, powers, scalar scaling) are unnamed and carry
a synthesized name and symbol.

Two units with the same factor and dimension are equal, whatever their
names: ``joule`` and ``watt * second`` are the same unit numerically.

Example:
    >>> from amounts.dimensions import UnitType
    >>> from amounts.units import Unit
    >>> meter = Unit("meter", "m", UnitType("metre"))
    >>> kilometer = Unit("kilometer", "km", 1000.0 * meter)
    >>> second = Unit("second", "s", UnitType("second"))
    >>> speed = kilometer / second
    >>> speed.symbol, speed.factor
    ('km/s', 1000.0)
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import TYPE_CHECKING, Optional, Union

from amounts.dimensions import UnitType
from amounts.exceptions import InvalidArgumentError, UnitConversionError

if TYPE_CHECKING:
    from amounts.manager import UnitManager

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Float helpers
# ---------------------------------------------------------------------------


def true_divide(dividend: float, divisor: float) -> float:
    """Divide two floats with IEEE-754 semantics.

    Division by zero yields a signed infinity and ``0 / 0`` yields NaN
    instead of raising ``ZeroDivisionError``.

    Args:
        dividend: Numerator.
        divisor: Denominator.

    Returns:
        The quotient.
    """
    dividend = float(dividend)
    divisor = float(divisor)
    if divisor == 0.0:
        if dividend == 0.0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)
    return dividend / divisor


def float_power(base: float, exponent: int) -> float:
    """Raise a float to an integer power with IEEE-754 overflow semantics.

    ``0.0 ** -1`` yields infinity and overflowing results yield a signed
    infinity instead of raising.
    """
    base = float(base)
    try:
        return base ** exponent
    except ZeroDivisionError:
        if exponent % 2 and math.copysign(1.0, base) < 0:
            return -math.inf
        return math.inf
    except OverflowError:
        if exponent % 2 and base < 0:
            return -math.inf
        return math.inf


def format_scalar(value: float) -> str:
    """Render a scalar the way it appears in synthesized unit names."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def sanitize_unit_string(text: str) -> str:
    """Collapse ``**`` to ``*`` and ``//`` to ``/`` until nothing changes."""
    while "**" in text:
        text = text.replace("**", "*")
    while "//" in text:
        text = text.replace("//", "/")
    return text


def is_scalar(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


# ---------------------------------------------------------------------------
# Unit
# ---------------------------------------------------------------------------


class Unit:
    """Immutable unit of measure.

    Attributes:
        name: Unit name (synthesized for derived units).
        symbol: Unit symbol, sanitized on construction.
        factor: Scale relative to the dimension-native base unit.
        unit_type: Dimension vector.
        is_named: True when declared directly with a name and symbol.
    """

    __slots__ = ("_name", "_symbol", "_factor", "_unit_type", "_is_named")

    NONE: "Unit"

    def __init__(
        self,
        name: str,
        symbol: str,
        base: Union[UnitType, "Unit"],
    ) -> None:
        """Create a named unit.

        Args:
            name: Unit name, e.g. "kilometer".
            symbol: Unit symbol, e.g. "km".
            base: Either a dimension vector (the unit gets factor 1.0) or
                an existing unit whose factor and dimension are inherited.

        Raises:
            InvalidArgumentError: If ``base`` is neither a UnitType nor a Unit.
        """
        if isinstance(base, Unit):
            factor, unit_type = base._factor, base._unit_type
        elif isinstance(base, UnitType):
            factor, unit_type = 1.0, base
        else:
            raise InvalidArgumentError(
                message="A unit must be based on a UnitType or another Unit.",
                context={"argument": "base", "type": type(base).__name__},
            )
        self._init(name, symbol, factor, unit_type, True)

    def _init(
        self,
        name: str,
        symbol: str,
        factor: float,
        unit_type: UnitType,
        is_named: bool,
    ) -> None:
        self._name = name
        self._symbol = sanitize_unit_string(symbol)
        self._factor = float(factor)
        self._unit_type = unit_type
        self._is_named = is_named

    @classmethod
    def _derived(
        cls,
        name: str,
        symbol: str,
        factor: float,
        unit_type: UnitType,
    ) -> Unit:
        unit = cls.__new__(cls)
        unit._init(name, symbol, factor, unit_type, False)
        return unit

    @staticmethod
    def parse(text: Optional[str], manager: Optional["UnitManager"] = None) -> Unit:
        """Parse a unit expression such as ``"m³/h"`` or ``"1000*Kg"``.

        Args:
            text: Unit expression.
            manager: Registry used to resolve unit names and symbols
                (the default manager when omitted).

        Returns:
            The resulting unit.
        """
        from amounts.parser import UnitParser

        return UnitParser(manager).parse(text)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def factor(self) -> float:
        return self._factor

    @property
    def unit_type(self) -> UnitType:
        return self._unit_type

    @property
    def is_named(self) -> bool:
        return self._is_named

    # ------------------------------------------------------------------
    # Compatibility
    # ------------------------------------------------------------------

    def is_compatible_to(self, other: Optional[Unit]) -> bool:
        """Whether both units share a dimension. ``None`` counts as NONE."""
        other = other if other is not None else Unit.NONE
        return self._unit_type == other._unit_type

    def assert_compatibility(self, other: Optional[Unit]) -> None:
        """Raise UnitConversionError unless the units share a dimension."""
        if not self.is_compatible_to(other):
            raise UnitConversionError(from_unit=self, to_unit=other)

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def power(self, power: int) -> Unit:
        """Raise the unit to an integer power (``meter.power(3)`` is m^3)."""
        return Unit._derived(
            f"({self._name}^{power})",
            f"{self._symbol}^{power}",
            float_power(self._factor, power),
            self._unit_type.power(power),
        )

    def multiply(self, other: Union[Unit, float]) -> Unit:
        """Multiply by another unit or by a scalar."""
        if isinstance(other, Unit):
            return Unit._derived(
                f"({self._name}*{other._name})",
                f"{self._symbol}*{other._symbol}",
                self._factor * other._factor,
                self._unit_type.multiply(other._unit_type),
            )
        return self.scale(other)

    def divide(self, other: Union[Unit, float]) -> Unit:
        """Divide by another unit or by a scalar."""
        if isinstance(other, Unit):
            return Unit._derived(
                f"({self._name}/{other._name})",
                f"{self._symbol}/{other._symbol}",
                true_divide(self._factor, other._factor),
                self._unit_type.divide(other._unit_type),
            )
        scalar = format_scalar(other)
        return Unit._derived(
            f"({self._name}/{scalar})",
            f"{self._symbol}/{scalar}",
            true_divide(self._factor, other),
            self._unit_type,
        )

    def scale(self, scalar: float) -> Unit:
        """Return ``scalar * unit``; scaling by 1 returns the unit itself."""
        if scalar == 1:
            return self
        text = format_scalar(scalar)
        return Unit._derived(
            f"({text}*{self._name})",
            f"{text}*{self._symbol}",
            scalar * self._factor,
            self._unit_type,
        )

    def inverse(self, scalar: float = 1.0) -> Unit:
        """Return ``scalar / unit`` (the dimension is inverted)."""
        text = format_scalar(scalar)
        return Unit._derived(
            f"({text}/{self._name})",
            f"{text}/{self._symbol}",
            true_divide(scalar, self._factor),
            self._unit_type.power(-1),
        )

    def __mul__(self, other: Union[Unit, float]) -> Unit:
        if isinstance(other, Unit) or is_scalar(other):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other: float) -> Unit:
        if is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other: Union[Unit, float]) -> Unit:
        if isinstance(other, Unit) or is_scalar(other):
            return self.divide(other)
        return NotImplemented

    def __rtruediv__(self, other: float) -> Unit:
        if is_scalar(other):
            return self.inverse(other)
        return NotImplemented

    def __pow__(self, power: int) -> Unit:
        return self.power(power)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def compare_to(self, other: Unit) -> int:
        """Order two compatible units by factor.

        Returns:
            -1, 0 or 1.

        Raises:
            UnitConversionError: If the units are not compatible.
        """
        self.assert_compatibility(other)
        if self._factor < other._factor:
            return -1
        if self._factor > other._factor:
            return 1
        return 0

    def __lt__(self, other: Unit) -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: Unit) -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: Unit) -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: Unit) -> bool:
        return self.compare_to(other) >= 0

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Unit):
            return NotImplemented
        return self._factor == other._factor and self._unit_type == other._unit_type

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash((self._factor, self._unit_type))

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format(self, fmt: Optional[str] = None) -> str:
        """Render the unit: ``"UN"`` gives the name, anything else the symbol."""
        if fmt == "UN":
            return self._name
        return self._symbol

    def __format__(self, format_spec: str) -> str:
        return self.format(format_spec or None)

    def __str__(self) -> str:
        return self._symbol

    def __repr__(self) -> str:
        return (
            f"Unit(name={self._name!r}, symbol={self._symbol!r}, "
            f"factor={self._factor!r}, unit_type={str(self._unit_type)!r})"
        )


Unit.NONE = Unit("", "", UnitType.NONE)


__all__ = [
    "Unit",
    "true_divide",
    "float_power",
    "format_scalar",
    "sanitize_unit_string",
    "is_scalar",
]
