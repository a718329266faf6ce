# -*- coding: utf-8 -*-
"""Amounts Exception Hierarchy.

This module provides the exception hierarchy for the amounts library with
rich error context for debugging, logging, and user feedback.

Exception Hierarchy:
    AmountsException (base)
    ├── UnitException
    │   ├── UnknownUnitError
    │   ├── UnitConversionError
    │   └── InvalidArgumentError
    └── ParseException
        ├── UnitParseError
        └── AmountParseError

All exceptions include rich context:
- error_code: Unique error identifier
- context: Dictionary with error-specific details
- timestamp: When the error occurred

Example:
    >>> from amounts.exceptions import UnknownUnitError
    >>> raise UnknownUnitError(
    ...     message="No unit found named 'furlong'.",
    ...     context={"name": "furlong", "lookup": "name"}
    ... )
"""

from __future__ import annotations

import json
import re
from datetime import datetime
from typing import Any, Dict, Optional


# ==============================================================================
# Base Exception
# ==============================================================================

class AmountsException(Exception):
    """Base exception for all amounts errors.

    Attributes:
        message: Human-readable error message
        error_code: Unique error identifier (e.g., "AM_UNIT_UNKNOWN_UNIT_ERROR")
        context: Dictionary with error-specific details
        timestamp: When the error occurred
    """

    # Base error code prefix
    ERROR_PREFIX = "AM"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        """Initialize exception with rich context.

        Args:
            message: Human-readable error message
            error_code: Unique error identifier (auto-generated if not provided)
            context: Dictionary with error-specific details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self._generate_error_code()
        self.context = context or {}
        self.timestamp = datetime.now()

    def _generate_error_code(self) -> str:
        """Generate error code based on exception class.

        Returns:
            Error code like "AM_UNIT_UNKNOWN_UNIT_ERROR"
        """
        class_name = self.__class__.__name__
        # Convert CamelCase to SCREAMING_SNAKE_CASE
        error_type = re.sub(r'(?<!^)(?=[A-Z])', '_', class_name).upper()
        return f"{self.ERROR_PREFIX}_{error_type}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization.

        Returns:
            Dictionary with all error details
        """
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }

    def to_json(self) -> str:
        """Convert exception to JSON string.

        Returns:
            JSON string representation
        """
        return json.dumps(self.to_dict(), indent=2, default=str)

    def __str__(self) -> str:
        """String representation with error code and message."""
        return f"[{self.error_code}] - {self.message}"

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"message='{self.message}', "
            f"error_code='{self.error_code}')"
        )


# ==============================================================================
# Unit Exceptions
# ==============================================================================

class UnitException(AmountsException):
    """Base exception for unit resolution and conversion errors."""
    ERROR_PREFIX = "AM_UNIT"


class UnknownUnitError(UnitException):
    """A unit name or symbol could not be resolved.

    Raised by name lookups after the resolver chain is exhausted, and by
    symbol lookups immediately. The ``try_*`` lookups of the manager return
    ``None`` instead.

    Example:
        >>> raise UnknownUnitError(
        ...     message="No unit found with symbol 'fur'.",
        ...     context={"symbol": "fur", "lookup": "symbol"}
        ... )
    """


class UnitConversionError(UnitException):
    """Two units are not convertible.

    Raised when the dimension vectors differ and no conversion function is
    registered for the dimension pair, and when comparing or combining
    amounts of such units.

    Example:
        >>> raise UnitConversionError(from_unit=meter, to_unit=kilogram)
    """

    def __init__(
        self,
        message: Optional[str] = None,
        from_unit: Any = None,
        to_unit: Any = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        """Initialize conversion error.

        Args:
            message: Error message (built from the units when omitted)
            from_unit: Source unit
            to_unit: Target unit
            context: Error context
        """
        context = context or {}
        if from_unit is not None:
            context["from_unit"] = getattr(from_unit, "name", str(from_unit))
            context["from_type"] = str(getattr(from_unit, "unit_type", ""))
        if to_unit is not None:
            context["to_unit"] = getattr(to_unit, "name", str(to_unit))
            context["to_type"] = str(getattr(to_unit, "unit_type", ""))
        if message is None:
            message = (
                f"Failed to convert from unit '{context.get('from_unit')}' to "
                f"unit '{context.get('to_unit')}'. Units are not compatible "
                f"and no conversions are defined."
            )
        super().__init__(message, context=context)
        self.from_unit = from_unit
        self.to_unit = to_unit


class InvalidArgumentError(UnitException, ValueError):
    """Malformed construction input.

    Example:
        >>> raise InvalidArgumentError(
        ...     message="The name of a dimension must not contain '|'.",
        ...     context={"argument": "name", "value": "a|b"}
        ... )
    """


# ==============================================================================
# Parse Exceptions
# ==============================================================================

class ParseException(AmountsException, ValueError):
    """Base exception for textual parse failures.

    Carries the text being parsed and the character offset where parsing
    failed so that adapters can report positional context.
    """
    ERROR_PREFIX = "AM_PARSE"

    def __init__(
        self,
        message: str,
        text: Optional[str] = None,
        offset: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        """Initialize parse error.

        Args:
            message: Error message
            text: The text that failed to parse
            offset: Character offset of the failure within ``text``
            context: Error context
        """
        context = context or {}
        if text is not None:
            context["text"] = text
        if offset is not None:
            context["offset"] = offset
        super().__init__(message, context=context)
        self.text = text
        self.offset = offset


class UnitParseError(ParseException):
    """A unit expression is malformed (e.g. an empty term in ``"m/"``)."""


class AmountParseError(ParseException):
    """The numeric part of an amount string could not be parsed."""


# ==============================================================================
# Utilities
# ==============================================================================

def format_exception_chain(exc: BaseException) -> str:
    """Format exception chain for logging/display.

    Args:
        exc: Exception to format

    Returns:
        Formatted string with full exception chain
    """
    lines = []
    current: Optional[BaseException] = exc

    while current is not None:
        if isinstance(current, AmountsException):
            lines.append(str(current))
            lines.append(f"  Context: {current.context}")
        else:
            lines.append(f"{type(current).__name__}: {current}")

        # Get cause
        current = getattr(current, "__cause__", None)

    return "\n".join(lines)


__all__ = [
    "AmountsException",
    "UnitException",
    "UnknownUnitError",
    "UnitConversionError",
    "InvalidArgumentError",
    "ParseException",
    "UnitParseError",
    "AmountParseError",
    "format_exception_chain",
]
