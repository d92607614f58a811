"""
ROM Usage Metrics
=================

Summary figures for a generated ROM image, useful when sizing the block
RAM that will hold it:

    - depth and width (what the MIF header declares)
    - total storage bits and raw binary payload size
    - raw value range, and how many words fall outside what the width
      can represent

Out-of-range words are not an error. A large amplitude or a DC offset can
push sine samples beyond the width, and encoding truncates them to the low
bits, which usually shows up as a wrapped wave in hardware. Reporting the
count lets the operator notice before synthesis.
"""

import numpy as np
from dataclasses import dataclass
from typing import Optional

from ..signals.word_sequence import WordSequence, get_representable_range


@dataclass
class RomUsageSummary:
    """
    Storage and value-range figures for one ROM image.

    Attributes:
        number_of_words: ROM depth.
        word_width_bits: Bits per word.
        word_bytes: Bytes per word in raw binary output.
        total_rom_bits: number_of_words * word_width_bits.
        binary_payload_bytes: number_of_words * word_bytes.
        minimum_value: Smallest raw word, None for an empty image.
        maximum_value: Largest raw word, None for an empty image.
        representable_minimum: Lowest value the width can hold.
        representable_maximum: Highest value the width can hold.
        out_of_range_word_count: Words truncated when encoded.
    """
    number_of_words: int
    word_width_bits: int
    word_bytes: int
    total_rom_bits: int
    binary_payload_bytes: int
    minimum_value: Optional[int]
    maximum_value: Optional[int]
    representable_minimum: int
    representable_maximum: int
    out_of_range_word_count: int

    def has_out_of_range_words(self) -> bool:
        return self.out_of_range_word_count > 0


def compute_rom_usage(sequence: WordSequence) -> RomUsageSummary:
    """
    Compute the usage summary of a word sequence.

    Args:
        sequence: The generated ROM words.

    Returns:
        RomUsageSummary: Storage and range figures.
    """
    representable_minimum, representable_maximum = get_representable_range(
        sequence.word_width_bits, sequence.signed
    )
    number_of_words: int = sequence.get_number_of_words()
    word_bytes: int = sequence.get_word_bytes()

    minimum_value: Optional[int] = None
    maximum_value: Optional[int] = None
    out_of_range_word_count: int = 0

    if number_of_words > 0:
        values: np.ndarray = np.asarray(sequence.words, dtype=np.int64)
        minimum_value = int(np.min(values))
        maximum_value = int(np.max(values))
        out_of_range_word_count = int(np.count_nonzero(
            (values < representable_minimum) | (values > representable_maximum)
        ))

    return RomUsageSummary(
        number_of_words=number_of_words,
        word_width_bits=sequence.word_width_bits,
        word_bytes=word_bytes,
        total_rom_bits=number_of_words * sequence.word_width_bits,
        binary_payload_bytes=number_of_words * word_bytes,
        minimum_value=minimum_value,
        maximum_value=maximum_value,
        representable_minimum=representable_minimum,
        representable_maximum=representable_maximum,
        out_of_range_word_count=out_of_range_word_count
    )


def print_rom_usage(summary: RomUsageSummary) -> None:
    """Print the usage summary as an indented block."""
    print(f"\n--- ROM Usage ---")
    print(f"  Depth:                  {summary.number_of_words} words")
    print(f"  Width:                  {summary.word_width_bits} bits")
    print(f"  Bytes per Word:         {summary.word_bytes}")
    print(f"  Total Storage:          {summary.total_rom_bits} bits")
    print(f"  Raw Binary Size:        {summary.binary_payload_bytes} bytes")
    if summary.minimum_value is not None:
        print(f"  Value Range:            [{summary.minimum_value}, {summary.maximum_value}]")
    print(
        f"  Representable Range:    "
        f"[{summary.representable_minimum}, {summary.representable_maximum}]"
    )
    print(f"  Out-of-Range Words:     {summary.out_of_range_word_count}")


def format_out_of_range_warning(summary: RomUsageSummary) -> str:
    """Return the truncation warning for words that exceed the width."""
    return (
        f"WARNING: {summary.out_of_range_word_count} word(s) exceed the "
        f"{summary.word_width_bits}-bit range and will be truncated"
    )
