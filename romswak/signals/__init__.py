"""
Signals Module
==============

This module contains the word sequence container and the sine table
generator that produces ROM words in sine mode.
"""

from .sine_table_generator import (
    SineTableGenerator,
    compute_default_scale,
    compute_scale,
    quantize_sine_sample
)
from .word_sequence import (
    WordSequence,
    compute_word_bytes,
    get_representable_range,
    mask_to_width
)

__all__ = [
    "SineTableGenerator",
    "compute_default_scale",
    "compute_scale",
    "quantize_sine_sample",
    "WordSequence",
    "compute_word_bytes",
    "get_representable_range",
    "mask_to_width"
]
