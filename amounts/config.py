# -*- coding: utf-8 -*-
"""
Amounts Configuration

Centralized configuration for the amounts library covering:
- Equality precision used when comparing amounts
- Default amount format string and locale
- Whether the default unit manager is pre-populated with the standard
  unit catalogs

All settings can be overridden via environment variables with the
``AMOUNTS_`` prefix (e.g. ``AMOUNTS_EQUALITY_PRECISION``).

Example:
    >>> from amounts.config import get_config
    >>> cfg = get_config()
    >>> print(cfg.equality_precision, cfg.default_locale)
"""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass
from typing import Any, Optional

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Environment variable prefix
# ---------------------------------------------------------------------------

_ENV_PREFIX = "AMOUNTS_"


# ---------------------------------------------------------------------------
# AmountsConfig
# ---------------------------------------------------------------------------


@dataclass
class AmountsConfig:
    """Complete configuration for the amounts library.

    All attributes can be overridden via environment variables using the
    ``AMOUNTS_`` prefix.

    Attributes:
        equality_precision: Number of decimals to which two amounts are
            rounded before being compared for equality.
        default_format: Format string used when an amount is formatted
            without an explicit format.
        default_locale: Babel locale identifier used for number formatting
            and parsing when no locale is given.
        register_standard_units: Whether the default unit manager registers
            the standard unit catalogs when it is first created.
    """

    # -- Comparison ----------------------------------------------------------
    equality_precision: int = 8

    # -- Formatting ----------------------------------------------------------
    default_format: str = "GG"
    default_locale: str = "en_US"

    # -- Registry ------------------------------------------------------------
    register_standard_units: bool = True

    # ------------------------------------------------------------------
    # Factory helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> AmountsConfig:
        """Build an AmountsConfig from environment variables.

        Every field can be overridden via ``AMOUNTS_<FIELD_UPPER>``.
        Boolean values accept ``true/1/yes`` (case-insensitive).
        Integer values are parsed via ``int()``.

        Returns:
            Populated AmountsConfig instance.
        """
        prefix = _ENV_PREFIX

        def _env(name: str, default: Any = None) -> Optional[str]:
            return os.environ.get(f"{prefix}{name}", default)

        def _bool(name: str, default: bool) -> bool:
            val = _env(name)
            if val is None:
                return default
            return val.lower() in ("true", "1", "yes")

        def _int(name: str, default: int) -> int:
            val = _env(name)
            if val is None:
                return default
            try:
                return int(val)
            except ValueError:
                logger.warning(
                    "Invalid integer for %s%s=%s, using default %d",
                    prefix, name, val, default,
                )
                return default

        def _str(name: str, default: str) -> str:
            val = _env(name)
            if val is None:
                return default
            return val

        config = cls(
            equality_precision=_int(
                "EQUALITY_PRECISION", cls.equality_precision,
            ),
            default_format=_str("DEFAULT_FORMAT", cls.default_format),
            default_locale=_str("DEFAULT_LOCALE", cls.default_locale),
            register_standard_units=_bool(
                "REGISTER_STANDARD_UNITS", cls.register_standard_units,
            ),
        )

        logger.info(
            "AmountsConfig loaded: precision=%d, format=%s, locale=%s, "
            "standard_units=%s",
            config.equality_precision,
            config.default_format,
            config.default_locale,
            config.register_standard_units,
        )
        return config


# ---------------------------------------------------------------------------
# Thread-safe singleton accessor
# ---------------------------------------------------------------------------

_config_instance: Optional[AmountsConfig] = None
_config_lock = threading.Lock()


def get_config() -> AmountsConfig:
    """Return the singleton AmountsConfig, creating from env if needed.

    Returns:
        AmountsConfig singleton instance.
    """
    global _config_instance
    if _config_instance is None:
        with _config_lock:
            if _config_instance is None:
                _config_instance = AmountsConfig.from_env()
    return _config_instance


def set_config(config: AmountsConfig) -> None:
    """Replace the singleton AmountsConfig (useful for testing).

    Args:
        config: New configuration to install.
    """
    global _config_instance
    with _config_lock:
        _config_instance = config
    logger.info("AmountsConfig replaced programmatically")


def reset_config() -> None:
    """Reset the singleton (primarily for test teardown)."""
    global _config_instance
    with _config_lock:
        _config_instance = None


__all__ = [
    "AmountsConfig",
    "get_config",
    "set_config",
    "reset_config",
]
