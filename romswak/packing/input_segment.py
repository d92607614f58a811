"""
Input Segments
==============

Data mode builds the ROM image from slices of one or more files:

    romswak data boot.bin,0,512 font.bin,128 -width 16 -o rom.mif -mif

Each token has the form "<filename>[,<offset>[,<length>]]":
    - offset defaults to 0
    - length defaults to the rest of the file

Segments are concatenated in argument order before word splitting. Each
file is opened, read and closed before the next one is touched.
"""

import os
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from ..errors import ConfigurationError, InputFileError


@dataclass(frozen=True)
class InputSegment:
    """
    A slice of an input file.

    Attributes:
        filename: Path of the file to read.
        offset: First byte to read. Default 0.
        length: Number of bytes to read. None reads to the end of the file.
    """
    filename: str
    offset: int = 0
    length: Optional[int] = None


def _parse_segment_integer(token: str, what: str, filename: str) -> int:
    try:
        value: int = int(token, 10)
    except ValueError:
        raise ConfigurationError(
            f"Invalid {what} {token!r} for inputfile {filename}"
        ) from None
    if value < 0:
        raise ConfigurationError(
            f"Invalid {what} {token!r} for inputfile {filename}"
        )
    return value


def parse_input_segment(token: str) -> InputSegment:
    """
    Parse a "<filename>[,<offset>[,<length>]]" token.

    Raises:
        ConfigurationError: If the filename is empty, offset or length are
            not non-negative decimal integers, or there are too many fields.
    """
    fields: List[str] = token.split(",")
    filename: str = fields[0]

    if not filename:
        raise ConfigurationError(f"Missing input filename in {token!r}")

    if len(fields) > 3:
        raise ConfigurationError(
            f"Too many fields in input segment {token!r}; "
            f"expected <file>[,<offset>[,<length>]]"
        )

    offset: int = 0
    if len(fields) > 1:
        offset = _parse_segment_integer(fields[1], "offset", filename)

    length: Optional[int] = None
    if len(fields) > 2:
        length = _parse_segment_integer(fields[2], "length", filename)

    return InputSegment(filename=filename, offset=offset, length=length)


def read_input_segment(segment: InputSegment) -> bytes:
    """
    Read the bytes covered by one segment.

    Returns:
        bytes: Exactly segment.length bytes, or everything from
            segment.offset to the end of the file.

    Raises:
        InputFileError: If the file cannot be opened or read.
        ConfigurationError: If the requested range runs past end of file.
    """
    try:
        input_file = open(segment.filename, "rb")
    except OSError as error:
        raise InputFileError(
            f"Can't open input file {segment.filename}: {error.strerror}"
        ) from error

    with input_file:
        file_size_bytes: int = os.fstat(input_file.fileno()).st_size

        if segment.offset > file_size_bytes:
            raise ConfigurationError(
                f"Offset {segment.offset} is past the end of "
                f"{segment.filename} ({file_size_bytes} bytes)"
            )

        length: Optional[int] = segment.length
        if length is None:
            length = file_size_bytes - segment.offset
        elif segment.offset + length > file_size_bytes:
            raise ConfigurationError(
                f"Segment {segment.offset}+{length} runs past the end of "
                f"{segment.filename} ({file_size_bytes} bytes)"
            )

        try:
            input_file.seek(segment.offset)
            data: bytes = input_file.read(length)
        except OSError as error:
            raise InputFileError(
                f"Can't read input file {segment.filename}: {error.strerror}"
            ) from error

    return data


def load_input_segments(
    segments: Iterable[InputSegment],
    on_segment_read: Optional[Callable[[InputSegment, bytes], None]] = None
) -> bytes:
    """
    Read every segment and concatenate them in order.

    Args:
        segments: Segments in argument order.
        on_segment_read: Called with each segment and its bytes once read.
    """
    chunks: List[bytes] = []
    for segment in segments:
        chunk: bytes = read_input_segment(segment)
        if on_segment_read is not None:
            on_segment_read(segment, chunk)
        chunks.append(chunk)
    return b"".join(chunks)
