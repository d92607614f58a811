"""
MIF Encoder
===========

Memory Initialization File output, as read by FPGA synthesis tools to
preload block RAM and ROM.

Document Layout:
    -- romswak <arg1> <arg2> ...

    DEPTH = <number of words>;
    WIDTH = <word width>;
    ADDRESS_RADIX = DEC;
    DATA_RADIX = BIN;

    CONTENT
    BEGIN
    0 : 10000000;       -- 128
    1 : 11111111;       -- 255
    ...
    END;

Addresses are decimal and start at 0. Data is written as exactly WIDTH
binary digits. Sine tables carry the raw sample value as a trailing
comment and have a blank line after BEGIN and before END; data images
carry neither.

DEPTH is taken from the fully generated sequence, so it always matches
the number of data lines.
"""

from typing import List, Sequence

from ..signals.word_sequence import WordSequence, mask_to_width
from .base_encoder import AbstractWordEncoder


TOOL_NAME: str = "romswak"

# Gap between the data word and the raw-value comment on sine lines
VALUE_COMMENT_SEPARATOR: str = "       -- "


def int_to_binary_string(value: int, word_width_bits: int) -> str:
    """
    Render a value as exactly word_width_bits binary digits, MSB first.

    Equivalent to taking the lowest bit, prepending it and shifting right
    arithmetically word_width_bits times: negative values come out in
    two's complement and wider values are truncated to the low bits.

    Example:
        int_to_binary_string(5, 4)  -> "0101"
        int_to_binary_string(-1, 4) -> "1111"
    """
    return format(mask_to_width(value, word_width_bits), f"0{word_width_bits}b")


def format_invocation_comment(invocation_arguments: Sequence[str]) -> str:
    """Return the header comment echoing the command line, tool name first."""
    return "-- " + TOOL_NAME + " " + "".join(f"{argument} " for argument in invocation_arguments)


class MifEncoder(AbstractWordEncoder):
    """
    Encodes a word sequence as a MIF document.

    Attributes:
        invocation_arguments: Command line tokens (without the program
            name) echoed in the header comment.
    """

    def __init__(self, invocation_arguments: Sequence[str] = ()) -> None:
        self.invocation_arguments: List[str] = list(invocation_arguments)

    def encode(self, sequence: WordSequence) -> str:
        annotate_values: bool = sequence.is_sine_table()

        lines: List[str] = self._build_header(
            sequence.get_number_of_words(), sequence.word_width_bits
        )
        if annotate_values:
            lines.append("")

        for address, word in enumerate(sequence.words):
            line: str = f"{address} : {int_to_binary_string(word, sequence.word_width_bits)};"
            if annotate_values:
                line += f"{VALUE_COMMENT_SEPARATOR}{word}"
            lines.append(line)

        if annotate_values:
            lines.append("")
        lines.append("END;")

        return "\n".join(lines) + "\n"

    def _build_header(self, number_of_words: int, word_width_bits: int) -> List[str]:
        return [
            format_invocation_comment(self.invocation_arguments),
            "",
            f"DEPTH = {number_of_words};",
            f"WIDTH = {word_width_bits};",
            "ADDRESS_RADIX = DEC;",
            "DATA_RADIX = BIN;",
            "",
            "CONTENT",
            "BEGIN",
        ]

    def is_text_output(self) -> bool:
        return True

    def get_format_name(self) -> str:
        return "MIF"
