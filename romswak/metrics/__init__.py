"""
Metrics Module
==============

Storage and value-range figures for generated ROM images.
"""

from .rom_metrics import (
    RomUsageSummary,
    compute_rom_usage,
    format_out_of_range_warning,
    print_rom_usage
)

__all__ = [
    "RomUsageSummary",
    "compute_rom_usage",
    "format_out_of_range_warning",
    "print_rom_usage"
]
