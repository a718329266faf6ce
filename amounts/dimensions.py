# -*- coding: utf-8 -*-
"""
Dimensions - base dimension registry and dimension vectors

A dimension is a named base axis ("metre", "kilogram", ...). Names are
interned once per process to a stable integer index and never removed.
A ``UnitType`` is an immutable vector of integer exponents over those
indices and describes the shape of a unit: velocity is
``metre^1 * second^-1``.

Example:
    >>> from amounts.dimensions import UnitType
    >>> length = UnitType("metre")
    >>> time = UnitType("second")
    >>> velocity = length / time
    >>> print(velocity)
    metre^1 * second^-1
    >>> (velocity * time) == length
    True
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from amounts.exceptions import InvalidArgumentError
from amounts.metrics import update_dimensions_count

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Dimension registry
# ---------------------------------------------------------------------------

_SEPARATOR = "|"

_names: List[str] = []
_indices: Dict[str, int] = {}
_lock = threading.Lock()


def intern(name: str) -> int:
    """Return the stable index of a dimension name, registering it if new.

    Args:
        name: Dimension name. Must not contain ``'|'``.

    Returns:
        Index of the dimension for the lifetime of the process.

    Raises:
        InvalidArgumentError: If the name contains the ``'|'`` character.
    """
    if _SEPARATOR in name:
        raise InvalidArgumentError(
            message="The name of a dimension must not contain the '|' (pipe) character.",
            context={"argument": "name", "value": name},
        )

    index = _indices.get(name)
    if index is not None:
        return index

    with _lock:
        index = _indices.get(name)
        if index is None:
            index = len(_names)
            _names.append(name)
            _indices[name] = index
            update_dimensions_count(len(_names))
            logger.debug("Interned dimension '%s' at index %d", name, index)
    return index


def name_of(index: int) -> str:
    """Return the dimension name registered at ``index``.

    Raises:
        IndexError: If no dimension was interned at that index.
    """
    return _names[index]


def registered_dimensions() -> List[str]:
    """Return all interned dimension names in index order."""
    return list(_names)


# ---------------------------------------------------------------------------
# UnitType
# ---------------------------------------------------------------------------


def _trim(exponents: Iterable[int]) -> Tuple[int, ...]:
    values = list(exponents)
    while values and values[-1] == 0:
        values.pop()
    return tuple(values)


class UnitType:
    """Immutable sparse vector of integer exponents over interned dimensions.

    Exponents are stored without trailing zeros, so two vectors compare and
    hash equal whenever they agree after zero extension.

    Attributes:
        exponents: Exponent per dimension index, trailing zeros removed.
    """

    __slots__ = ("_exponents", "_hash")

    NONE: "UnitType"

    def __init__(self, name: str) -> None:
        """Create the vector of a single base dimension.

        Args:
            name: Dimension name, interned on first use.
        """
        index = intern(name)
        exponents = [0] * (index + 1)
        exponents[index] = 1
        self._exponents: Tuple[int, ...] = tuple(exponents)
        self._hash: Optional[int] = None

    @classmethod
    def _from_exponents(cls, exponents: Iterable[int]) -> UnitType:
        result = cls.__new__(cls)
        result._exponents = _trim(exponents)
        result._hash = None
        return result

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, int]) -> UnitType:
        """Build a vector from ``{dimension name: exponent}``.

        Args:
            mapping: Exponent per dimension name; names are interned.

        Returns:
            The matching UnitType.
        """
        exponents: List[int] = []
        for name, exponent in mapping.items():
            index = intern(name)
            if index >= len(exponents):
                exponents.extend([0] * (index + 1 - len(exponents)))
            exponents[index] = int(exponent)
        return cls._from_exponents(exponents)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def exponents(self) -> Tuple[int, ...]:
        return self._exponents

    @property
    def is_none(self) -> bool:
        """True for the dimensionless identity vector."""
        return not self._exponents

    def to_mapping(self) -> Dict[str, int]:
        """Return ``{dimension name: exponent}`` for nonzero exponents."""
        return {
            name_of(index): exponent
            for index, exponent in enumerate(self._exponents)
            if exponent != 0
        }

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def power(self, power: int) -> UnitType:
        """Return the vector raised to ``power`` (every exponent times power)."""
        return UnitType._from_exponents(e * power for e in self._exponents)

    def multiply(self, other: UnitType) -> UnitType:
        """Return the product vector (exponents added)."""
        return UnitType._from_exponents(self._combine(other, 1))

    def divide(self, other: UnitType) -> UnitType:
        """Return the quotient vector (exponents subtracted)."""
        return UnitType._from_exponents(self._combine(other, -1))

    def _combine(self, other: UnitType, sign: int) -> List[int]:
        left, right = self._exponents, other._exponents
        length = max(len(left), len(right))
        result = list(left) + [0] * (length - len(left))
        for index, exponent in enumerate(right):
            result[index] += sign * exponent
        return result

    def equals(self, other: Optional[UnitType]) -> bool:
        if other is None:
            return False
        return self._exponents == other._exponents

    # ------------------------------------------------------------------
    # Operator sugar
    # ------------------------------------------------------------------

    def __mul__(self, other: UnitType) -> UnitType:
        if not isinstance(other, UnitType):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: UnitType) -> UnitType:
        if not isinstance(other, UnitType):
            return NotImplemented
        return self.divide(other)

    def __pow__(self, power: int) -> UnitType:
        return self.power(power)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnitType):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, UnitType):
            return NotImplemented
        return not self.equals(other)

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(self._exponents)
        return self._hash

    def __str__(self) -> str:
        return " * ".join(
            f"{name_of(index)}^{exponent}"
            for index, exponent in enumerate(self._exponents)
            if exponent != 0
        )

    def __repr__(self) -> str:
        return f"UnitType({str(self)!r})"


UnitType.NONE = UnitType._from_exponents(())


__all__ = [
    "intern",
    "name_of",
    "registered_dimensions",
    "UnitType",
]
