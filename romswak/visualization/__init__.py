"""
Visualization Module
====================

This module provides a preview plot of generated ROM contents.
"""

from .rom_plotter import RomContentPlotter

__all__ = ["RomContentPlotter"]
