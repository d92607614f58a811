"""
Encoders Module
===============

Output sinks for ROM words: raw big-endian binary and MIF text.
"""

from .base_encoder import AbstractWordEncoder
from .binary_encoder import BinaryEncoder, encode_word
from .mif_encoder import MifEncoder, int_to_binary_string, format_invocation_comment

__all__ = [
    "AbstractWordEncoder",
    "BinaryEncoder",
    "encode_word",
    "MifEncoder",
    "int_to_binary_string",
    "format_invocation_comment"
]
