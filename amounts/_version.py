# -*- coding: utf-8 -*-
"""Package version."""

__version__ = "0.1.0"
