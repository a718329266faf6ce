# -*- coding: utf-8 -*-
"""
Aggregates over amounts

Sequence helpers built on ``Amount`` arithmetic. Sums are expressed in the
unit of the first amount; every other amount is converted into it.

Example:
    >>> from amounts.aggregates import average, sum_amounts
    >>> total = sum_amounts([Amount(2, kilometer), Amount(500, meter)])
    >>> total.value, total.unit.symbol
    (2.5, 'km')
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional, TypeVar

from amounts.amount import Amount
from amounts.exceptions import InvalidArgumentError
from amounts.units import Unit

T = TypeVar("T")


def sum_amounts(
    items: Iterable[T],
    selector: Optional[Callable[[T], Amount]] = None,
) -> Amount:
    """Sum amounts, optionally selected from arbitrary items.

    Args:
        items: Amounts, or items to select amounts from.
        selector: Callable returning the amount of an item.

    Returns:
        The sum in the unit of the first amount, or a dimensionless zero
        for an empty sequence.

    Raises:
        UnitConversionError: If the amounts are not mutually convertible.
    """
    total: Optional[Amount] = None
    for item in items:
        amount = selector(item) if selector is not None else item
        total = amount if total is None else total + amount
    if total is None:
        return Amount.zero(Unit.NONE)
    return total


def average(
    items: Iterable[T],
    selector: Optional[Callable[[T], Amount]] = None,
) -> Amount:
    """Average amounts, optionally selected from arbitrary items.

    Raises:
        InvalidArgumentError: If the sequence is empty.
        UnitConversionError: If the amounts are not mutually convertible.
    """
    amounts = [selector(item) if selector is not None else item for item in items]
    if not amounts:
        raise InvalidArgumentError(
            message="Cannot average an empty sequence of amounts.",
            context={"argument": "items"},
        )
    return sum_amounts(amounts) / len(amounts)


def max_amount(left: Amount, right: Amount) -> Amount:
    """Return the larger amount (``right`` when they are equal)."""
    return left if left > right else right


def min_amount(left: Amount, right: Amount) -> Amount:
    """Return the smaller amount (``right`` when they are equal)."""
    return left if left < right else right


def limit(amount: Amount, minimum: Amount, maximum: Amount) -> Amount:
    """Clamp an amount between ``minimum`` and ``maximum``."""
    return max_amount(minimum, min_amount(amount, maximum))


__all__ = [
    "sum_amounts",
    "average",
    "max_amount",
    "min_amount",
    "limit",
]
