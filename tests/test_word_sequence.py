import pytest

from romswak.errors import ConfigurationError
from romswak.signals.word_sequence import (
    WordSequence,
    compute_word_bytes,
    get_representable_range,
    mask_to_width,
)


@pytest.mark.parametrize("width, expected", [
    (1, 1), (8, 1), (9, 2), (12, 2), (16, 2), (17, 3), (24, 3), (25, 4), (32, 4),
])
def test_word_bytes_buckets(width, expected):
    assert compute_word_bytes(width) == expected


@pytest.mark.parametrize("width", [0, -1, 33, 64])
def test_word_bytes_rejects_out_of_range_width(width):
    with pytest.raises(ConfigurationError):
        compute_word_bytes(width)


def test_mask_to_width_truncates_and_wraps_negatives():
    assert mask_to_width(0x1FF, 8) == 0xFF
    assert mask_to_width(-1, 12) == 0xFFF
    assert mask_to_width(-127, 8) == 0x81


def test_representable_range():
    assert get_representable_range(8, signed=False) == (0, 255)
    assert get_representable_range(8, signed=True) == (-128, 127)
    assert get_representable_range(1, signed=False) == (0, 1)


def test_sequence_helpers():
    sequence = WordSequence(words=[-1, 2, 0x1FF], word_width_bits=8, signed=True, source="sine")
    assert len(sequence) == 3
    assert sequence.get_word_bytes() == 1
    assert sequence.get_masked_words() == [0xFF, 2, 0xFF]
    assert sequence.is_sine_table()
    assert list(sequence) == [-1, 2, 0x1FF]


def test_sequence_rejects_bad_width_and_source():
    with pytest.raises(ConfigurationError):
        WordSequence(words=[], word_width_bits=33)
    with pytest.raises(ConfigurationError):
        WordSequence(words=[], word_width_bits=8, source="noise")
