import pytest

from romswak.errors import ConfigurationError, InputFileError
from romswak.packing.input_segment import (
    InputSegment,
    load_input_segments,
    parse_input_segment,
    read_input_segment,
)


def test_parse_defaults():
    assert parse_input_segment("rom.bin") == InputSegment("rom.bin", 0, None)
    assert parse_input_segment("rom.bin,4") == InputSegment("rom.bin", 4, None)
    assert parse_input_segment("rom.bin,4,8") == InputSegment("rom.bin", 4, 8)


@pytest.mark.parametrize("token, message", [
    ("rom.bin,x", "Invalid offset"),
    ("rom.bin,-1", "Invalid offset"),
    ("rom.bin,0,y", "Invalid length"),
    ("rom.bin,,8", "Invalid offset"),
    (",0", "Missing input filename"),
    ("rom.bin,0,1,2", "Too many fields"),
])
def test_parse_errors(token, message):
    with pytest.raises(ConfigurationError, match=message):
        parse_input_segment(token)


@pytest.fixture
def counting_file(tmp_path):
    path = tmp_path / "counting.bin"
    path.write_bytes(bytes(range(16)))
    return str(path)


def test_read_slice(counting_file):
    assert read_input_segment(InputSegment(counting_file, 4, 4)) == bytes([4, 5, 6, 7])


def test_read_rest_of_file(counting_file):
    assert read_input_segment(InputSegment(counting_file, 12)) == bytes([12, 13, 14, 15])
    assert read_input_segment(InputSegment(counting_file)) == bytes(range(16))
    assert read_input_segment(InputSegment(counting_file, 16)) == b""


def test_read_past_end_is_rejected(counting_file):
    with pytest.raises(ConfigurationError):
        read_input_segment(InputSegment(counting_file, 10, 8))
    with pytest.raises(ConfigurationError):
        read_input_segment(InputSegment(counting_file, 17))


def test_missing_file(tmp_path):
    with pytest.raises(InputFileError) as excinfo:
        read_input_segment(InputSegment(str(tmp_path / "missing.bin")))
    assert isinstance(excinfo.value, OSError)
    assert "missing.bin" in str(excinfo.value)


def test_segments_concatenate_in_order(tmp_path):
    first = tmp_path / "a.bin"
    second = tmp_path / "b.bin"
    first.write_bytes(b"AB")
    second.write_bytes(b"CD")
    segments = [InputSegment(str(first)), InputSegment(str(second))]
    assert load_input_segments(segments) == b"ABCD"
    assert load_input_segments(reversed(segments)) == b"CDAB"


def test_segment_callback_sees_each_read_in_order(tmp_path):
    first = tmp_path / "a.bin"
    second = tmp_path / "b.bin"
    first.write_bytes(b"AB")
    second.write_bytes(b"CDE")
    reads = []
    buffer = load_input_segments(
        [InputSegment(str(second), 1), InputSegment(str(first))],
        on_segment_read=lambda segment, chunk: reads.append((segment.filename, chunk))
    )
    assert buffer == b"DEAB"
    assert reads == [(str(second), b"DE"), (str(first), b"AB")]
