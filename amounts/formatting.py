# -*- coding: utf-8 -*-
"""
Amount Formatting

Renders amounts as text and parses locale-formatted numbers. Number
rendering and parsing are delegated to Babel; this module owns only the
placement of the unit.

Format strings:
    GG, GN, GS, NG, NN, NS
        First letter is the value style: ``G`` general (up to 15
        significant digits), ``N`` numeric (``#,##0.00``). Second letter is
        the unit style: ``G`` general and ``S`` symbol, ``N`` name.
    Custom patterns
        Any Babel/LDML number pattern. The placeholders ``UG``, ``UN`` and
        ``US`` are replaced by the unit symbol, name and symbol, e.g.
        ``"#,##0.000 US"`` or ``"0.000 US;[0.000] US"``.
    ``|<unit>`` suffix
        Converts the amount first. ``|?`` converts to the registered named
        unit with the same factor.

Example:
    >>> format_amount(Amount(12345.6789, meter), "NS", "nl_BE")
    '12.345,68 m'
    >>> format_amount(Amount(12345.6789, meter), "#,##0.000 UN|kilometer")
    '12.346 kilometer'
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Callable, Optional, Union

from babel import Locale
from babel.numbers import (
    NumberFormatError,
    format_decimal,
    get_decimal_symbol,
    get_exponential_symbol,
    get_infinity_symbol,
    get_minus_sign_symbol,
    parse_decimal,
)

from amounts.config import get_config
from amounts.exceptions import AmountParseError
from amounts.manager import UnitManager, get_manager
from amounts.units import Unit

if TYPE_CHECKING:
    from amounts.amount import Amount

logger = logging.getLogger(__name__)

LocaleLike = Union[str, Locale, None]
AmountFormatter = Callable[[str, "Amount", Optional[Locale]], Optional[str]]

NUMERIC_PATTERN = "#,##0.00"

_CODES = ("GG", "GN", "GS", "NG", "NN", "NS")

# Private-use characters stand in for unit text while Babel formats the
# number, so unit symbols such as "%" or "m2" never reach the pattern parser.
_PLACEHOLDERS = (
    ("UG", "\ue000", "US"),
    ("UN", "\ue001", "UN"),
    ("US", "\ue002", "US"),
)


# ---------------------------------------------------------------------------
# Locale and number helpers
# ---------------------------------------------------------------------------


def normalize_locale(locale: LocaleLike = None) -> Locale:
    """Return a Babel Locale for a locale identifier or Locale.

    Args:
        locale: ``"en_US"``, ``"en-US"``, a Locale, or None for the
            configured default locale.
    """
    if isinstance(locale, Locale):
        return locale
    if locale is None:
        locale = get_config().default_locale
    return Locale.parse(locale.replace("-", "_"))


def format_general(value: float, locale: LocaleLike = None) -> str:
    """Format a number with up to 15 significant digits.

    Decimal, minus, exponent, infinity and NaN symbols come from the locale,
    e.g. ``1E20`` and ``∞`` for en_US.
    """
    loc = normalize_locale(locale)
    value = float(value)
    minus = get_minus_sign_symbol(loc)
    if math.isnan(value):
        return loc.number_symbols.get("latn", {}).get("nan", "NaN")
    if math.isinf(value):
        infinity = get_infinity_symbol(loc)
        return minus + infinity if value < 0 else infinity

    mantissa, marker, exponent = format(value, ".15g").partition("e")
    text = mantissa.replace("-", minus).replace(".", get_decimal_symbol(loc))
    if marker:
        text += get_exponential_symbol(loc) + str(int(exponent)).replace("-", minus)
    return text


def format_number(value: float, pattern: str = NUMERIC_PATTERN, locale: LocaleLike = None) -> str:
    """Format a number with a Babel number pattern."""
    return format_decimal(value, format=pattern, locale=normalize_locale(locale))


def parse_number(text: str, locale: LocaleLike = None) -> float:
    """Parse a locale-formatted number such as ``"12,345.6789"``.

    Raises:
        AmountParseError: If the text is not a number in the locale.
    """
    try:
        return float(parse_decimal(text.strip(), locale=normalize_locale(locale)))
    except NumberFormatError as exc:
        raise AmountParseError(
            message=f"'{text}' is not a valid number.",
            text=text,
            offset=0,
        ) from exc


# ---------------------------------------------------------------------------
# Amount formatting
# ---------------------------------------------------------------------------


def _apply_code(amount: "Amount", code: str, locale: Locale) -> str:
    if code[0] == "G":
        value = format_general(amount.value, locale)
    else:
        value = format_number(amount.value, NUMERIC_PATTERN, locale)
    unit = amount.unit.format("UN" if code[1] == "N" else "US")
    return f"{value} {unit}".rstrip()


def _apply_pattern(amount: "Amount", pattern: str, locale: Locale) -> str:
    for placeholder, sentinel, _ in _PLACEHOLDERS:
        pattern = pattern.replace(placeholder, sentinel)

    text = format_number(amount.value, pattern, locale)
    for _, sentinel, unit_format in _PLACEHOLDERS:
        text = text.replace(sentinel, amount.unit.format(unit_format))
    return text.rstrip()


def format_amount(
    amount: "Amount",
    fmt: Optional[str] = None,
    locale: LocaleLike = None,
    formatter: Optional[AmountFormatter] = None,
    manager: Optional[UnitManager] = None,
) -> str:
    """Render an amount as text.

    Args:
        amount: Amount to format.
        fmt: Format string (see module docstring). Defaults to the
            configured default format.
        locale: Locale for number rendering.
        formatter: Optional callable tried first; returning None falls
            through to the built-in grammar.
        manager: Registry used for ``|`` conversions.

    Returns:
        The formatted amount.
    """
    if fmt is None:
        fmt = get_config().default_format
    loc = normalize_locale(locale)

    if formatter is not None:
        text = formatter(fmt, amount, loc)
        if text is not None:
            return text

    fmt, separator, target = fmt.partition("|")
    if separator:
        manager = manager if manager is not None else get_manager()
        if target == "?":
            to_unit = manager.resolve_to_named_unit(amount.unit, True)
        else:
            to_unit = Unit.parse(target, manager)
        amount = manager.convert_to(amount, to_unit)

    if fmt in _CODES:
        return _apply_code(amount, fmt, loc)
    return _apply_pattern(amount, fmt, loc)


__all__ = [
    "AmountFormatter",
    "LocaleLike",
    "NUMERIC_PATTERN",
    "normalize_locale",
    "format_general",
    "format_number",
    "parse_number",
    "format_amount",
]
