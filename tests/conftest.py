# -*- coding: utf-8 -*-
"""Pytest configuration and shared fixtures."""

import pytest

from amounts.config import reset_config
from amounts.manager import UnitManager, reset_manager, set_manager
from amounts.standard_units import register_all


@pytest.fixture(autouse=True)
def clean_singletons(monkeypatch):
    """Isolate every test from environment overrides and shared singletons."""
    for name in (
        "AMOUNTS_EQUALITY_PRECISION",
        "AMOUNTS_DEFAULT_FORMAT",
        "AMOUNTS_DEFAULT_LOCALE",
        "AMOUNTS_REGISTER_STANDARD_UNITS",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    reset_manager()
    yield
    reset_config()
    reset_manager()


@pytest.fixture
def manager():
    """A manager populated with the standard units, installed as default."""
    mgr = UnitManager(name="test")
    register_all(mgr)
    set_manager(mgr)
    return mgr


@pytest.fixture
def empty_manager():
    """An empty manager, installed as default."""
    mgr = UnitManager(name="test")
    set_manager(mgr)
    return mgr
