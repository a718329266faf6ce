# -*- coding: utf-8 -*-
"""
Unit Expression Parser

Turns textual unit expressions into ``Unit`` objects, resolving every unit
term against a ``UnitManager``:

    "m/s"         meter / second
    "m³/h/m*Kg"   ((cubic meter / hour) / meter) * kilogram
    "1000*Kg"     1000 * kilogram
    "(km/h)"      kilometer / hour
    "s^-2"        second.power(-2)

Terms are separated by ``*`` and ``/`` and evaluated strictly left to right.
A numeric first term is held back and applied to the result after the
whole expression has been folded.

Example:
    >>> from amounts.parser import UnitParser
    >>> unit = UnitParser(manager).parse("km/h")
    >>> unit.symbol
    'km/h'
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import List, Optional, Tuple

from amounts.exceptions import UnitParseError, UnknownUnitError
from amounts.manager import UnitManager, get_manager
from amounts.metrics import record_parse
from amounts.units import Unit, sanitize_unit_string

logger = logging.getLogger(__name__)

_OPERATOR_RE = re.compile(r"([*/])")
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


class TermKind(str, Enum):
    """Classification of a token in a unit expression."""

    UNIT = "unit"
    MULTIPLIER = "multiplier"
    DIVIDER = "divider"
    NUMERIC = "numeric"


class _Term:
    """One token of an expression with its offset in the normalized text."""

    __slots__ = ("text", "offset", "kind", "number")

    def __init__(self, text: str, offset: int) -> None:
        self.text = text
        self.offset = offset
        self.number: Optional[float] = None
        if text == "*":
            self.kind = TermKind.MULTIPLIER
        elif text == "/":
            self.kind = TermKind.DIVIDER
        elif _NUMBER_RE.fullmatch(text):
            self.number = float(text)
            self.kind = TermKind.NUMERIC
        else:
            self.kind = TermKind.UNIT


class UnitParser:
    """Parses unit expressions against a unit registry.

    Args:
        manager: Registry used for name and symbol lookups. When omitted the
            default manager is looked up at parse time.
    """

    def __init__(self, manager: Optional[UnitManager] = None) -> None:
        self._manager = manager

    @property
    def manager(self) -> UnitManager:
        return self._manager if self._manager is not None else get_manager()

    def parse(self, text: Optional[str]) -> Unit:
        """Parse a unit expression.

        Args:
            text: Expression to parse. Empty or None yields ``Unit.NONE``.

        Returns:
            The resulting unit.

        Raises:
            UnknownUnitError: If a term resolves to no registered unit.
            UnitParseError: If the expression contains an empty term.
        """
        if not text:
            return Unit.NONE

        try:
            unit = self._evaluate(text)
        except (UnknownUnitError, UnitParseError):
            record_parse("unit", "error")
            raise
        record_parse("unit", "success")
        logger.debug("Parsed unit expression '%s' as '%s'", text, unit.symbol)
        return unit

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _normalize(text: str) -> str:
        if text.startswith("("):
            text = text[1:]
        if text.endswith(")"):
            text = text[:-1]
        return sanitize_unit_string(text)

    def _tokenize(self, original: str, expression: str) -> List[_Term]:
        terms: List[_Term] = []
        offset = 0
        for token in _OPERATOR_RE.split(expression):
            term = _Term(token, offset)
            if not token.strip():
                raise UnitParseError(
                    message=f"Empty term at offset {offset} in unit expression '{original}'.",
                    text=original,
                    offset=offset,
                )
            terms.append(term)
            offset += len(token)
        return terms

    def _evaluate(self, text: str) -> Unit:
        expression = self._normalize(text)
        terms = self._tokenize(text, expression)

        if len(terms) == 1:
            term = terms[0]
            if term.kind is TermKind.NUMERIC:
                return Unit.NONE.scale(term.number)
            return self._resolve(term.text)

        multiplier = 1.0
        result: Optional[Unit] = None
        first = terms[0]
        if first.kind is TermKind.NUMERIC:
            multiplier = first.number
        else:
            result = self._resolve(first.text)

        for operator, operand in self._pairs(terms[1:]):
            value = operand.number if operand.kind is TermKind.NUMERIC else self._resolve(operand.text)
            if result is None:
                if operator.kind is TermKind.MULTIPLIER:
                    result = value if isinstance(value, Unit) else Unit.NONE.scale(value)
                else:
                    result = Unit.NONE / value
            elif operator.kind is TermKind.MULTIPLIER:
                result = result * value
            else:
                result = result / value

        return result.scale(multiplier)

    @staticmethod
    def _pairs(terms: List[_Term]) -> List[Tuple[_Term, _Term]]:
        return [(terms[i], terms[i + 1]) for i in range(0, len(terms) - 1, 2)]

    def _resolve(self, term: str) -> Unit:
        manager = self.manager
        unit = manager.try_get_unit_by_name(term)
        if unit is None:
            unit = manager.try_get_unit_by_symbol(term)
        if unit is not None:
            return unit

        base, caret, exponent = term.rpartition("^")
        if caret and base:
            try:
                power = int(exponent)
            except ValueError:
                power = None
            if power is not None:
                return self._resolve(base).power(power)

        raise UnknownUnitError(
            message=f"No unit found named or with symbol '{term}'.",
            context={"term": term, "lookup": "expression"},
        )


def parse_unit(text: Optional[str], manager: Optional[UnitManager] = None) -> Unit:
    """Parse a unit expression with the given (or the default) manager."""
    return UnitParser(manager).parse(text)


__all__ = [
    "TermKind",
    "UnitParser",
    "parse_unit",
]
