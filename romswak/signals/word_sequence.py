"""
Word Sequence
=============

This module provides the data class that carries ROM words from the
generators (sine synthesis, data loading) to the encoders.

A word sequence is always generated in full before any output is written,
so the encoders know the ROM depth before emitting a single byte.

Word Width Rules:
    - Widths run from 1 to 32 bits.
    - Each word occupies ceil(width / 8) bytes in raw binary output:
        width <= 8  -> 1 byte
        width <= 16 -> 2 bytes
        width <= 24 -> 3 bytes
        width <= 32 -> 4 bytes
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from ..errors import ConfigurationError


MINIMUM_WORD_WIDTH_BITS: int = 1
MAXIMUM_WORD_WIDTH_BITS: int = 32

SOURCE_SINE: str = "sine"
SOURCE_DATA: str = "data"


def validate_word_width(word_width_bits: int) -> int:
    """Return the width unchanged, or raise ConfigurationError if outside [1, 32]."""
    if (
        word_width_bits < MINIMUM_WORD_WIDTH_BITS
        or word_width_bits > MAXIMUM_WORD_WIDTH_BITS
    ):
        raise ConfigurationError(
            f"Word width must be between {MINIMUM_WORD_WIDTH_BITS} and "
            f"{MAXIMUM_WORD_WIDTH_BITS} bits. Received: {word_width_bits} bits"
        )
    return word_width_bits


def compute_word_bytes(word_width_bits: int) -> int:
    """
    Number of bytes needed to store one word of the given width.

    Args:
        word_width_bits: Word width in bits (1-32).

    Returns:
        int: 1, 2, 3 or 4.

    Raises:
        ConfigurationError: If the width is outside [1, 32]. There is no
            byte bucket defined beyond 32 bits.
    """
    validate_word_width(word_width_bits)
    return (word_width_bits + 7) // 8


def mask_to_width(value: int, word_width_bits: int) -> int:
    """Keep only the low word_width_bits bits (two's-complement truncation)."""
    return value & ((1 << word_width_bits) - 1)


def get_representable_range(word_width_bits: int, signed: bool) -> Tuple[int, int]:
    """Return the (minimum, maximum) value a word of this width can hold."""
    if signed:
        return (-(1 << (word_width_bits - 1)), (1 << (word_width_bits - 1)) - 1)
    return (0, (1 << word_width_bits) - 1)


@dataclass
class WordSequence:
    """
    Ordered ROM words, one per address.

    Attributes:
        words: Raw integer words in address order. Sine words may be
            negative (signed mode) or exceed the width; they are truncated
            to the low word_width_bits bits only when encoded.
        word_width_bits: Bits per word (1-32).
        signed: Whether the raw values are meant as two's-complement.
        source: SOURCE_SINE or SOURCE_DATA. Sine sequences carry the raw
            value as a trailing comment in MIF output.
    """
    words: List[int] = field(default_factory=list)
    word_width_bits: int = 8
    signed: bool = False
    source: str = SOURCE_DATA

    def __post_init__(self) -> None:
        validate_word_width(self.word_width_bits)
        if self.source not in (SOURCE_SINE, SOURCE_DATA):
            raise ConfigurationError(f"Unknown word source: {self.source}")

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self):
        return iter(self.words)

    def get_number_of_words(self) -> int:
        """Return the ROM depth."""
        return len(self.words)

    def get_word_bytes(self) -> int:
        """Return the number of bytes per word in raw binary output."""
        return compute_word_bytes(self.word_width_bits)

    def get_masked_words(self) -> List[int]:
        """Return every word truncated to word_width_bits bits."""
        return [mask_to_width(word, self.word_width_bits) for word in self.words]

    def is_sine_table(self) -> bool:
        return self.source == SOURCE_SINE
