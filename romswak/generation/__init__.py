"""
Generation Module
=================

This module provides the build orchestration layer that ties together
word generation, encoding and output writing.
"""

from .rom_builder import RomBuilder, RomBuildResult, RomConfiguration

__all__ = ["RomBuilder", "RomBuildResult", "RomConfiguration"]
