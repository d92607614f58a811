"""
Errors
======

Exception hierarchy for the ROM content synthesizer.

Every failure is fatal for a run: library code raises, and only the
command line entry point turns a RomSwakError into an operator message.
"""


class RomSwakError(Exception):
    """Base class for all errors raised by romswak."""


class ConfigurationError(RomSwakError, ValueError):
    """
    Invalid or inconsistent run parameters.

    Raised for a missing or out-of-range word width, a zero length,
    unparsable segment offsets or lengths, and segment ranges that
    fall outside their input file.
    """


class LengthMismatchError(ConfigurationError):
    """The input data length is not a multiple of the word size in bytes."""

    def __init__(self, data_length_bytes: int, word_bytes: int) -> None:
        self.data_length_bytes: int = data_length_bytes
        self.word_bytes: int = word_bytes
        super().__init__(
            f"Data length {data_length_bytes} is not divisible by "
            f"input word size (in bytes) {word_bytes}"
        )


class InputFileError(RomSwakError, OSError):
    """An input file could not be opened or read."""


class OutputFileError(RomSwakError, OSError):
    """The output file could not be opened or written."""
