# -*- coding: utf-8 -*-
"""Configuration module for the hash benchmark harness."""

from .benchmark_config import BenchmarkConfig, HarnessConfig, load_yaml_config

__all__ = ['BenchmarkConfig', 'HarnessConfig', 'load_yaml_config']
