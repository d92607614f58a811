import pytest

from romswak.errors import (
    ConfigurationError,
    InputFileError,
    LengthMismatchError,
    OutputFileError,
)
from romswak.generation.rom_builder import RomBuilder, RomConfiguration
from romswak.packing.input_segment import InputSegment


def sine_configuration(output_path, /, **overrides):
    parameters = dict(
        mode="sine",
        output_path=str(output_path),
        word_width_bits=8,
        number_of_words=4,
    )
    parameters.update(overrides)
    return RomConfiguration(**parameters)


@pytest.fixture
def two_files(tmp_path):
    first = tmp_path / "a.bin"
    second = tmp_path / "b.bin"
    first.write_bytes(b"AB")
    second.write_bytes(b"CD")
    return str(first), str(second)


# ============================================================================
# CONFIGURATION
# ============================================================================

@pytest.mark.parametrize("overrides, message", [
    (dict(word_width_bits=None), "No valid word width"),
    (dict(word_width_bits=1), "No valid word width"),
    (dict(word_width_bits=33), "No valid word width"),
    (dict(number_of_words=0), "No valid length"),
    (dict(number_of_words=None), "No valid length"),
    (dict(amplitude=-3), "Amplitude"),
    (dict(output_path=""), "No output file"),
    (dict(mode="square"), "Unknown operation mode"),
])
def test_invalid_sine_configuration(tmp_path, overrides, message):
    with pytest.raises(ConfigurationError, match=message):
        sine_configuration(tmp_path / "out.bin", **overrides)


def test_data_configuration_defaults_to_byte_words(tmp_path, two_files):
    configuration = RomConfiguration(
        mode="data",
        output_path=str(tmp_path / "out.bin"),
        input_segments=[InputSegment(two_files[0])]
    )
    assert configuration.word_width_bits == 8
    assert configuration.word_bytes == 1


def test_data_configuration_rejects_wide_words_and_missing_inputs(tmp_path, two_files):
    with pytest.raises(ConfigurationError, match="max 32-bit"):
        RomConfiguration(
            mode="data",
            output_path=str(tmp_path / "out.bin"),
            word_width_bits=40,
            input_segments=[InputSegment(two_files[0])]
        )
    with pytest.raises(ConfigurationError, match="No input files"):
        RomConfiguration(mode="data", output_path=str(tmp_path / "out.bin"))


# ============================================================================
# BUILDS
# ============================================================================

def test_sine_raw_build(tmp_path):
    output_path = tmp_path / "sine.bin"
    result = RomBuilder(sine_configuration(output_path)).run()
    assert output_path.read_bytes() == bytes([128, 255, 128, 1])
    assert result.sequence.words == [128, 255, 128, 1]
    assert result.usage.number_of_words == 4


def test_sine_mif_build(tmp_path):
    output_path = tmp_path / "sine.mif"
    configuration = sine_configuration(
        output_path, mif_output=True, signed=True, word_width_bits=12,
        invocation_arguments=["sine", "-width", "12"]
    )
    RomBuilder(configuration).run()
    document = output_path.read_text()
    assert document.startswith("-- romswak sine -width 12 \n\n")
    assert "DEPTH = 4;\nWIDTH = 12;\n" in document
    assert "3 : 100000000001;       -- -2047\n" in document


def test_signed_raw_words_are_masked(tmp_path):
    output_path = tmp_path / "sine.bin"
    RomBuilder(sine_configuration(output_path, signed=True, word_width_bits=12)).run()
    # [0, 2047, 0, -2047] as 12-bit words in 2-byte buckets
    assert output_path.read_bytes() == b"\x00\x00\x07\xff\x00\x00\x08\x01"


def test_data_build_concatenates_in_order(tmp_path, two_files):
    output_path = tmp_path / "data.mif"
    configuration = RomConfiguration(
        mode="data",
        output_path=str(output_path),
        word_width_bits=16,
        mif_output=True,
        input_segments=[InputSegment(two_files[0]), InputSegment(two_files[1])]
    )
    result = RomBuilder(configuration).run()
    assert result.sequence.words == [0x4142, 0x4344]
    document = output_path.read_text()
    assert "0 : 0100000101000010;\n1 : 0100001101000100;\nEND;\n" in document
    assert "--" not in document.split("BEGIN")[1]


def test_data_raw_build_with_slices(tmp_path, two_files):
    output_path = tmp_path / "data.bin"
    configuration = RomConfiguration(
        mode="data",
        output_path=str(output_path),
        input_segments=[InputSegment(two_files[1], 1), InputSegment(two_files[0], 0, 1)]
    )
    RomBuilder(configuration).run()
    assert output_path.read_bytes() == b"DA"


def test_length_mismatch_writes_nothing(tmp_path, two_files):
    output_path = tmp_path / "data.bin"
    configuration = RomConfiguration(
        mode="data",
        output_path=str(output_path),
        word_width_bits=16,
        input_segments=[InputSegment(two_files[0], 1)]
    )
    with pytest.raises(LengthMismatchError):
        RomBuilder(configuration).run()
    assert not output_path.exists()


def test_missing_input_writes_nothing(tmp_path):
    output_path = tmp_path / "data.bin"
    configuration = RomConfiguration(
        mode="data",
        output_path=str(output_path),
        input_segments=[InputSegment(str(tmp_path / "missing.bin"))]
    )
    with pytest.raises(InputFileError):
        RomBuilder(configuration).run()
    assert not output_path.exists()


def test_unwritable_output(tmp_path):
    configuration = sine_configuration(tmp_path / "no_such_dir" / "sine.bin")
    with pytest.raises(OutputFileError, match="Couldn't open output file"):
        RomBuilder(configuration).run()


def test_build_does_not_write(tmp_path):
    output_path = tmp_path / "sine.bin"
    result = RomBuilder(sine_configuration(output_path)).build()
    assert result.payload == bytes([128, 255, 128, 1])
    assert result.get_payload_size() == 4
    assert not output_path.exists()


def test_verbose_progress(tmp_path, two_files, capsys):
    RomBuilder(sine_configuration(tmp_path / "sine.bin"), verbose=True).run()
    output = capsys.readouterr().out
    assert "Defaulting to half of word width: 127" in output
    assert "--- Step 1: Generating Sine Table ---" in output
    assert "Wrote 4 bytes" in output

    configuration = RomConfiguration(
        mode="data",
        output_path=str(tmp_path / "data.bin"),
        input_segments=[InputSegment(two_files[0])]
    )
    RomBuilder(configuration, verbose=True).run()
    assert f"Reading {two_files[0]} 0 2" in capsys.readouterr().out


def test_explicit_amplitude_is_not_reported_as_default(tmp_path, capsys):
    RomBuilder(sine_configuration(tmp_path / "sine.bin", amplitude=0), verbose=True).run()
    assert "Defaulting" not in capsys.readouterr().out
    assert (tmp_path / "sine.bin").read_bytes() == bytes([1, 1, 1, 1])


def test_non_finite_offset_configuration(tmp_path):
    with pytest.raises(ConfigurationError, match="finite"):
        sine_configuration(tmp_path / "out.bin", offset=float("nan"))


def test_out_of_range_warning_is_printed_when_quiet(tmp_path, capsys):
    RomBuilder(sine_configuration(tmp_path / "sine.bin", amplitude=200, signed=True)).run()
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "WARNING: 2 word(s) exceed the 8-bit range" in captured.err


def test_mif_with_non_ascii_invocation(tmp_path):
    output_path = tmp_path / "sinus_für_rom.mif"
    configuration = sine_configuration(
        output_path, mif_output=True, invocation_arguments=["sine", "-o", str(output_path)]
    )
    RomBuilder(configuration).run()
    assert output_path.read_text(encoding="utf-8").startswith(f"-- romswak sine -o {output_path} \n")
