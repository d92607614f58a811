"""
Packing Module
==============

Data-mode input handling: reading file segments and splitting the
concatenated bytes into ROM words.
"""

from .input_segment import (
    InputSegment,
    load_input_segments,
    parse_input_segment,
    read_input_segment
)
from .word_packer import WordPacker, pack_words

__all__ = [
    "InputSegment",
    "load_input_segments",
    "parse_input_segment",
    "read_input_segment",
    "WordPacker",
    "pack_words"
]
