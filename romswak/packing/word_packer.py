"""
Word Packer
===========

Splits a byte buffer into fixed-width ROM words for data mode.

Consecutive bytes are grouped big-endian, the leftmost byte being the
most significant:

    word = (word << 8) | byte

Example (width 16, 2 bytes per word):
    [0x01, 0x02, 0x03, 0x04] -> [0x0102, 0x0304]

A buffer whose length is not a multiple of the word size is rejected;
partial trailing words are never truncated or zero-padded.
"""

from typing import List

from ..errors import LengthMismatchError
from ..signals.word_sequence import (
    SOURCE_DATA,
    WordSequence,
    compute_word_bytes,
)


def pack_words(buffer: bytes, word_bytes: int) -> List[int]:
    """
    Group a byte buffer into big-endian words.

    Args:
        buffer: Raw bytes.
        word_bytes: Bytes per word (1-4).

    Returns:
        List[int]: len(buffer) // word_bytes unsigned words.

    Raises:
        LengthMismatchError: If len(buffer) is not divisible by word_bytes.
    """
    if len(buffer) % word_bytes != 0:
        raise LengthMismatchError(len(buffer), word_bytes)

    words: List[int] = []
    for start in range(0, len(buffer), word_bytes):
        word: int = 0
        for byte in buffer[start:start + word_bytes]:
            word = (word << 8) | byte
        words.append(word)
    return words


class WordPacker:
    """
    Packs data-mode byte buffers into a WordSequence.

    Attributes:
        word_width_bits (int): Bits per ROM word (1-32).
        word_bytes (int): Bytes consumed per word.
    """

    def __init__(self, word_width_bits: int) -> None:
        self.word_width_bits: int = word_width_bits
        self.word_bytes: int = compute_word_bytes(word_width_bits)

    def pack(self, buffer: bytes) -> WordSequence:
        """Split the buffer into words. See pack_words for the rules."""
        return WordSequence(
            words=pack_words(buffer, self.word_bytes),
            word_width_bits=self.word_width_bits,
            signed=False,
            source=SOURCE_DATA
        )
