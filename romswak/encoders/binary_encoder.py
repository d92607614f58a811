"""
Binary Encoder
==============

Raw binary output: a flat stream of big-endian words.

Each word is truncated to its width and written as ceil(width / 8) bytes,
most significant byte first. There is no header, no length prefix and no
separator, so the output is exactly number_of_words * word_bytes long.

Example (width 12, word_bytes 2):
    0x0ABC -> b"\\x0a\\xbc"
    -1     -> b"\\x0f\\xff"   (masked to 12 bits first)
"""

from ..signals.word_sequence import WordSequence
from .base_encoder import AbstractWordEncoder


def encode_word(word: int, word_bytes: int) -> bytes:
    """
    Serialize one word big-endian.

    Args:
        word: Word value, already masked to its width.
        word_bytes: Bytes to emit (1-4).

    Returns:
        bytes: word_bytes bytes, MSB first.
    """
    return bytes(
        (word >> ((word_bytes - byte_index - 1) * 8)) & 0xFF
        for byte_index in range(word_bytes)
    )


class BinaryEncoder(AbstractWordEncoder):
    """Encodes a word sequence as raw big-endian bytes."""

    def encode(self, sequence: WordSequence) -> bytes:
        word_bytes: int = sequence.get_word_bytes()
        return b"".join(
            encode_word(word, word_bytes) for word in sequence.get_masked_words()
        )

    def is_text_output(self) -> bool:
        return False

    def get_format_name(self) -> str:
        return "raw binary"
