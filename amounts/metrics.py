# -*- coding: utf-8 -*-
"""
Prometheus Metrics - Amounts

Prometheus metrics for unit registry and conversion monitoring with
graceful fallback when prometheus_client is not installed.

Metrics:
    1. amounts_conversions_total (Counter)
    2. amounts_conversion_duration_seconds (Histogram)
    3. amounts_unit_lookups_total (Counter)
    4. amounts_parse_operations_total (Counter)
    5. amounts_units_registered (Gauge, per manager)
    6. amounts_conversion_functions_registered (Gauge, per manager)
    7. amounts_dimensions_interned (Gauge)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Graceful prometheus_client import
# ---------------------------------------------------------------------------

try:
    from prometheus_client import Counter, Gauge, Histogram
    PROMETHEUS_AVAILABLE = True
except ImportError:
    PROMETHEUS_AVAILABLE = False
    logger.info(
        "prometheus_client not installed; amounts metrics disabled"
    )


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

if PROMETHEUS_AVAILABLE:
    # 1. Conversions by path (identity, linear, function) and result
    amounts_conversions_total = Counter(
        "amounts_conversions_total",
        "Total amount conversions performed",
        labelnames=["path", "result"],
    )

    # 2. Conversion duration
    amounts_conversion_duration_seconds = Histogram(
        "amounts_conversion_duration_seconds",
        "Amount conversion duration in seconds",
        labelnames=["path"],
        buckets=(0.00001, 0.00005, 0.0001, 0.0005, 0.001, 0.005, 0.01),
    )

    # 3. Unit lookups by method (name, symbol) and outcome (hit, resolver, miss)
    amounts_unit_lookups_total = Counter(
        "amounts_unit_lookups_total",
        "Total unit lookups against the unit registry",
        labelnames=["method", "outcome"],
    )

    # 4. Parse operations
    amounts_parse_operations_total = Counter(
        "amounts_parse_operations_total",
        "Total unit expression and amount parse operations",
        labelnames=["kind", "result"],
    )

    # 5. Registered units gauge
    amounts_units_registered = Gauge(
        "amounts_units_registered",
        "Current number of units registered in a unit manager",
        labelnames=["manager"],
    )

    # 6. Registered conversion functions gauge
    amounts_conversion_functions_registered = Gauge(
        "amounts_conversion_functions_registered",
        "Current number of conversion functions registered in a unit manager",
        labelnames=["manager"],
    )

    # 7. Interned dimensions gauge
    amounts_dimensions_interned = Gauge(
        "amounts_dimensions_interned",
        "Current number of interned base dimensions",
    )

else:
    # No-op placeholders
    amounts_conversions_total = None  # type: ignore[assignment]
    amounts_conversion_duration_seconds = None  # type: ignore[assignment]
    amounts_unit_lookups_total = None  # type: ignore[assignment]
    amounts_parse_operations_total = None  # type: ignore[assignment]
    amounts_units_registered = None  # type: ignore[assignment]
    amounts_conversion_functions_registered = None  # type: ignore[assignment]
    amounts_dimensions_interned = None  # type: ignore[assignment]


# ---------------------------------------------------------------------------
# Helper functions (safe to call even without prometheus_client)
# ---------------------------------------------------------------------------


def record_conversion(path: str, result: str, duration_seconds: float) -> None:
    """Record an amount conversion.

    Args:
        path: Conversion path ("identity", "linear" or "function").
        result: Conversion result ("success" or "error").
        duration_seconds: Conversion duration in seconds.
    """
    if not PROMETHEUS_AVAILABLE:
        return
    amounts_conversions_total.labels(path=path, result=result).inc()
    amounts_conversion_duration_seconds.labels(path=path).observe(
        duration_seconds,
    )


def record_unit_lookup(method: str, outcome: str) -> None:
    """Record a unit lookup.

    Args:
        method: Lookup method ("name" or "symbol").
        outcome: Lookup outcome ("hit", "resolver" or "miss").
    """
    if not PROMETHEUS_AVAILABLE:
        return
    amounts_unit_lookups_total.labels(method=method, outcome=outcome).inc()


def record_parse(kind: str, result: str) -> None:
    """Record a parse operation.

    Args:
        kind: What was parsed ("unit" or "amount").
        result: Parse result ("success" or "error").
    """
    if not PROMETHEUS_AVAILABLE:
        return
    amounts_parse_operations_total.labels(kind=kind, result=result).inc()


def update_units_count(count: int, manager: str = "default") -> None:
    """Set the registered units gauge of one unit manager.

    Args:
        count: Current number of registered units.
        manager: Name of the reporting unit manager.
    """
    if not PROMETHEUS_AVAILABLE:
        return
    amounts_units_registered.labels(manager=manager).set(count)


def update_conversions_count(count: int, manager: str = "default") -> None:
    """Set the registered conversion functions gauge of one unit manager.

    Args:
        count: Current number of registered conversion functions.
        manager: Name of the reporting unit manager.
    """
    if not PROMETHEUS_AVAILABLE:
        return
    amounts_conversion_functions_registered.labels(manager=manager).set(count)


def update_dimensions_count(count: int) -> None:
    """Set the interned dimensions gauge.

    Args:
        count: Current number of interned dimensions.
    """
    if not PROMETHEUS_AVAILABLE:
        return
    amounts_dimensions_interned.set(count)


__all__ = [
    "PROMETHEUS_AVAILABLE",
    # Metric objects
    "amounts_conversions_total",
    "amounts_conversion_duration_seconds",
    "amounts_unit_lookups_total",
    "amounts_parse_operations_total",
    "amounts_units_registered",
    "amounts_conversion_functions_registered",
    "amounts_dimensions_interned",
    # Helper functions
    "record_conversion",
    "record_unit_lookup",
    "record_parse",
    "update_units_count",
    "update_conversions_count",
    "update_dimensions_count",
]
