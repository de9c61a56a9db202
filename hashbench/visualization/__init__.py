# -*- coding: utf-8 -*-
"""Visualization module for benchmark figures."""

from .figure_generator import FigureGenerator

__all__ = ['FigureGenerator']
