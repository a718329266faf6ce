# -*- coding: utf-8 -*-
"""
Amount - a float value expressed in a unit

``Amount`` is an immutable ``(value, unit)`` pair with dimension-checked
arithmetic:

    - ``+`` and ``-`` convert the right operand into the left operand's unit
    - ``*`` and ``/`` between amounts combine the units without converting
    - comparisons convert the right operand into the left operand's unit
      and treat values equal to ``AmountsConfig.equality_precision``
      decimals as equal

Conversions go through a ``UnitManager``; operators use the default
manager, the named methods accept an explicit one.

Example:
    >>> from amounts import Amount
    >>> from amounts.standard_units import length, time
    >>> speed = Amount(120, length.KILOMETER / time.HOUR)
    >>> distance = (speed * Amount(15, time.MINUTE)).converted_to(length.KILOMETER, 4)
    >>> distance.value
    30.0
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence, Union

from amounts.config import get_config
from amounts.exceptions import (
    AmountParseError,
    InvalidArgumentError,
    UnitConversionError,
    UnitParseError,
    UnknownUnitError,
)
from amounts.formatting import AmountFormatter, LocaleLike, format_amount, parse_number
from amounts.manager import UnitManager, get_manager
from amounts.metrics import record_parse
from amounts.units import Unit, float_power, format_scalar, is_scalar, true_divide

logger = logging.getLogger(__name__)

UnitLike = Union[Unit, str]


def _manager(manager: Optional[UnitManager]) -> UnitManager:
    return manager if manager is not None else get_manager()


def _resolve_unit(unit: UnitLike, manager: Optional[UnitManager]) -> Unit:
    if isinstance(unit, Unit):
        return unit
    if isinstance(unit, str):
        return _manager(manager).get_unit_by_name(unit)
    raise InvalidArgumentError(
        message="A unit must be given as a Unit or a unit name.",
        context={"argument": "unit", "type": type(unit).__name__},
    )


def _truncate(value: float) -> float:
    if math.isfinite(value):
        return float(math.trunc(value))
    return value


class Amount:
    """Immutable value expressed in a unit.

    Attributes:
        value: The scalar value.
        unit: The unit the value is expressed in.
    """

    __slots__ = ("_value", "_unit")

    def __init__(
        self,
        value: float,
        unit: UnitLike,
        manager: Optional[UnitManager] = None,
    ) -> None:
        """Create an amount.

        Args:
            value: Scalar value.
            unit: A Unit, or the name of a registered unit.
            manager: Registry used to resolve a unit name.

        Raises:
            UnknownUnitError: If a unit name cannot be resolved.
        """
        self._value = float(value)
        self._unit = _resolve_unit(unit, manager)

    @classmethod
    def zero(cls, unit: UnitLike, manager: Optional[UnitManager] = None) -> Amount:
        """Return a zero amount in the given unit."""
        return cls(0.0, unit, manager)

    @property
    def value(self) -> float:
        return self._value

    @property
    def unit(self) -> Unit:
        return self._unit

    def as_unit(self) -> Unit:
        """Return a named unit worth this amount (``Amount(5, kg)`` is ``5*Kg``)."""
        scalar = format_scalar(self._value)
        return Unit(
            f"{scalar}*{self._unit.name}",
            f"{scalar}*{self._unit.symbol}",
            self._unit.scale(self._value),
        )

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def converted_to(
        self,
        unit: UnitLike,
        decimals: Optional[int] = None,
        manager: Optional[UnitManager] = None,
    ) -> Amount:
        """Convert to another unit.

        Args:
            unit: Target unit or unit name.
            decimals: Round the converted value to this many decimals.
            manager: Registry performing the conversion.

        Returns:
            The converted amount.

        Raises:
            UnitConversionError: If the units are not convertible.
        """
        mgr = _manager(manager)
        unit = _resolve_unit(unit, mgr)
        result = mgr.convert_to(self, unit)
        if decimals is not None:
            return Amount(round(result.value, decimals), unit)
        return result

    def split(
        self,
        units: Sequence[UnitLike],
        decimals: int = 0,
        manager: Optional[UnitManager] = None,
    ) -> List[Amount]:
        """Split into whole parts of successively finer units.

        Every unit but the last receives the truncated whole value of what
        remains; the last receives the remainder rounded to ``decimals``.
        Rounding may carry the last part up to the next unit's boundary
        (59.9999 seconds becomes 60 seconds).

        Args:
            units: Units from coarsest to finest.
            decimals: Decimals of the last part.
            manager: Registry performing the conversions.

        Returns:
            One amount per unit.

        Raises:
            UnitConversionError: If a unit is not compatible with this one.
        """
        mgr = _manager(manager)
        targets = [_resolve_unit(unit, mgr) for unit in units]
        if not targets:
            return []
        for unit in targets:
            self._unit.assert_compatibility(unit)

        parts: List[Amount] = []
        rest = self
        for unit in targets[:-1]:
            part = Amount(_truncate(rest.converted_to(unit, manager=mgr).value), unit)
            parts.append(part)
            rest = rest.subtract(part, mgr)
        parts.append(rest.converted_to(targets[-1], decimals, mgr))
        return parts

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: Amount, manager: Optional[UnitManager] = None) -> Amount:
        """Add an amount; the result is expressed in this amount's unit."""
        converted = other.converted_to(self._unit, manager=manager)
        return Amount(self._value + converted._value, self._unit)

    def subtract(self, other: Amount, manager: Optional[UnitManager] = None) -> Amount:
        """Subtract an amount; the result is expressed in this amount's unit."""
        converted = other.converted_to(self._unit, manager=manager)
        return Amount(self._value - converted._value, self._unit)

    def negate(self) -> Amount:
        return Amount(-self._value, self._unit)

    def abs(self) -> Amount:
        """Return the amount with a non-negative value, in the same unit."""
        return Amount(abs(self._value), self._unit)

    def multiply(self, other: Union[Amount, float]) -> Amount:
        """Multiply by an amount (units combine) or by a scalar."""
        if isinstance(other, Amount):
            return Amount(self._value * other._value, self._unit * other._unit)
        return Amount(self._value * other, self._unit)

    def divide(self, other: Union[Amount, float]) -> Amount:
        """Divide by an amount (units combine) or by a scalar.

        Division by zero yields an infinite or NaN value, not an error.
        """
        if isinstance(other, Amount):
            return Amount(true_divide(self._value, other._value), self._unit / other._unit)
        return Amount(true_divide(self._value, other), self._unit)

    def inverse(self) -> Amount:
        """Return ``1 / amount`` with the unit inverted."""
        return Amount(true_divide(1.0, self._value), self._unit.inverse())

    def power(self, power: int) -> Amount:
        return Amount(float_power(self._value, power), self._unit.power(power))

    def __add__(self, other: Amount) -> Amount:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Amount) -> Amount:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> Amount:
        return self.negate()

    def __pos__(self) -> Amount:
        return self

    def __abs__(self) -> Amount:
        return self.abs()

    def __mul__(self, other: Union[Amount, float]) -> Amount:
        if isinstance(other, Amount) or is_scalar(other):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other: float) -> Amount:
        if is_scalar(other):
            return Amount(other * self._value, self._unit)
        return NotImplemented

    def __truediv__(self, other: Union[Amount, float]) -> Amount:
        if isinstance(other, Amount) or is_scalar(other):
            return self.divide(other)
        return NotImplemented

    def __rtruediv__(self, other: float) -> Amount:
        if is_scalar(other):
            return Amount(true_divide(other, self._value), self._unit.inverse())
        return NotImplemented

    def __pow__(self, power: int) -> Amount:
        return self.power(power)

    def __round__(self, ndigits: Optional[int] = None) -> Amount:
        return Amount(round(self._value, ndigits or 0), self._unit)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    @staticmethod
    def _rounded_equal(left: float, right: float) -> bool:
        precision = get_config().equality_precision
        return round(left, precision) == round(right, precision)

    def equals(self, other: Optional[Amount], manager: Optional[UnitManager] = None) -> bool:
        """Whether both amounts are equal to the configured precision.

        Amounts of units that cannot be converted into each other are
        never equal.
        """
        if other is None:
            return False
        if self is other:
            return True
        mgr = _manager(manager)
        if not mgr.is_convertible(other._unit, self._unit):
            return False
        converted = mgr.convert_to(other, self._unit)
        return self._rounded_equal(self._value, converted._value)

    def compare_to(self, other: Amount, manager: Optional[UnitManager] = None) -> int:
        """Compare with another amount.

        Returns:
            -1, 0 or 1.

        Raises:
            UnitConversionError: If the amounts cannot be converted.
        """
        converted = other.converted_to(self._unit, manager=manager)
        if self._rounded_equal(self._value, converted._value):
            return 0
        return -1 if self._value < converted._value else 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return not self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: Amount) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Amount) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Amount) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Amount) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.compare_to(other) >= 0

    # ------------------------------------------------------------------
    # Numeric casts
    # ------------------------------------------------------------------

    def __float__(self) -> float:
        try:
            return self.converted_to(Unit.NONE).value
        except UnitConversionError as exc:
            raise TypeError(
                "An amount can only be cast to a number when it is expressed "
                "in a dimensionless unit."
            ) from exc

    def __int__(self) -> int:
        return int(float(self))

    # ------------------------------------------------------------------
    # Formatting and parsing
    # ------------------------------------------------------------------

    def format(
        self,
        fmt: Optional[str] = None,
        locale: LocaleLike = None,
        formatter: Optional[AmountFormatter] = None,
        manager: Optional[UnitManager] = None,
    ) -> str:
        """Render the amount, e.g. ``amount.format("NS", "nl_BE")``.

        See ``amounts.formatting`` for the format grammar.
        """
        return format_amount(self, fmt, locale, formatter, manager)

    @staticmethod
    def to_string(
        amount: Optional[Amount],
        fmt: Optional[str] = None,
        locale: LocaleLike = None,
        formatter: Optional[AmountFormatter] = None,
    ) -> str:
        """Format an amount, returning an empty string for None."""
        if amount is None:
            return ""
        return amount.format(fmt, locale, formatter)

    def __format__(self, format_spec: str) -> str:
        return self.format(format_spec or None)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Amount({self._value!r}, {self._unit.name!r})"

    @staticmethod
    def parse(
        text: Optional[str],
        locale: LocaleLike = None,
        manager: Optional[UnitManager] = None,
    ) -> Optional[Amount]:
        """Parse an amount such as ``"12,345.6789 m"`` or ``"-0.45 (km/h)"``.

        The text is split at the first space into a number and a unit
        expression. The unit may be wrapped in parentheses and may end
        with ``" neg"`` (inside or after the parentheses), which negates the
        value. Without a space the text is a bare number in ``Unit.NONE``.

        Args:
            text: Text to parse. Empty or None yields None.
            locale: Locale of the number.
            manager: Registry resolving the unit expression.

        Returns:
            The parsed amount, or None for empty input.

        Raises:
            AmountParseError: If the number cannot be parsed.
            UnknownUnitError: If the unit expression cannot be resolved.
        """
        if not text:
            return None

        try:
            amount = Amount._parse(text, locale, manager)
        except (AmountParseError, UnitParseError, UnknownUnitError):
            record_parse("amount", "error")
            raise
        record_parse("amount", "success")
        return amount

    @staticmethod
    def _parse(text: str, locale: LocaleLike, manager: Optional[UnitManager]) -> Amount:
        number, space, unit_text = text.partition(" ")
        value = parse_number(number, locale)
        if not space:
            return Amount(value, Unit.NONE)

        if unit_text.startswith("("):
            unit_text = unit_text[1:]
        if unit_text.endswith(")"):
            unit_text = unit_text[:-1]
        negative = unit_text.endswith(" neg")
        if negative:
            unit_text = unit_text[:-4]
            if unit_text.endswith(")"):
                unit_text = unit_text[:-1]

        unit = Unit.parse(unit_text, manager)
        return Amount(-value if negative else value, unit)


__all__ = [
    "Amount",
    "UnitLike",
]
