# -*- coding: utf-8 -*-
"""Hash function benchmarking harness (MD5 vs SHA-256)."""

__version__ = "0.1.0"
