#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Setup script for amounts

This file is kept for legacy compatibility and pip editable installs.
The main package configuration is in pyproject.toml.
"""

from setuptools import setup

# Keep in sync with amounts/_version.py
VERSION = "0.1.0"

# Main setup configuration is in pyproject.toml
setup(
    version=VERSION,
)
