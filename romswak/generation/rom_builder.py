"""
ROM Builder
===========

This module provides the orchestration class that coordinates all
components of a ROM image build.

The RomBuilder class handles:
1. Word generation (sine synthesis or data loading)
2. Encoding (raw binary or MIF)
3. Usage summary
4. Writing the output file

The whole payload is encoded in memory before the output file is opened,
so a run that fails validation, input reading or word splitting leaves
the output path untouched.
"""

import sys
import numpy as np
from dataclasses import dataclass, field
from typing import List, Optional, Union

from ..encoders.base_encoder import AbstractWordEncoder
from ..encoders.binary_encoder import BinaryEncoder
from ..encoders.mif_encoder import MifEncoder
from ..errors import ConfigurationError, OutputFileError
from ..metrics.rom_metrics import (
    RomUsageSummary,
    compute_rom_usage,
    format_out_of_range_warning,
    print_rom_usage,
)
from ..packing.input_segment import InputSegment, load_input_segments
from ..packing.word_packer import WordPacker
from ..signals.sine_table_generator import (
    MINIMUM_SINE_WORD_WIDTH_BITS,
    SineTableGenerator,
)
from ..signals.word_sequence import (
    MAXIMUM_WORD_WIDTH_BITS,
    MINIMUM_WORD_WIDTH_BITS,
    SOURCE_DATA,
    SOURCE_SINE,
    WordSequence,
    compute_word_bytes,
)


DEFAULT_DATA_WORD_WIDTH_BITS: int = 8


@dataclass
class RomConfiguration:
    """
    Configuration parameters for one ROM build.

    This dataclass holds the resolved values the build needs; it never
    sees raw command line tokens.

    Attributes:
        mode: "sine" or "data".
        output_path: File to write.
        word_width_bits: Bits per word. Required in sine mode (2-32);
            defaults to 8 in data mode.
        mif_output: Write MIF text instead of raw binary.
        number_of_words: Sine table length (sine mode).
        amplitude: Sine amplitude in quantized units, None for the
            default scale (sine mode).
        offset: DC offset in units of the scale (sine mode).
        signed: Two's-complement sine table (sine mode).
        input_segments: File slices to concatenate (data mode).
        invocation_arguments: Command line tokens echoed in the MIF header.
    """
    mode: str
    output_path: str

    word_width_bits: Optional[int] = None
    mif_output: bool = False

    # Sine mode
    number_of_words: Optional[int] = None
    amplitude: Optional[int] = None
    offset: float = 0.0
    signed: bool = False

    # Data mode
    input_segments: List[InputSegment] = field(default_factory=list)

    invocation_arguments: List[str] = field(default_factory=list)

    # Derived parameters (calculated in __post_init__)
    word_bytes: int = 0

    def __post_init__(self) -> None:
        """Fill defaults, validate, and derive the word size in bytes."""
        if self.mode == SOURCE_DATA and self.word_width_bits is None:
            self.word_width_bits = DEFAULT_DATA_WORD_WIDTH_BITS

        self._validate()

        self.word_bytes = compute_word_bytes(self.word_width_bits)

    def _validate(self) -> None:
        """Validate configuration parameters."""
        if self.mode not in (SOURCE_SINE, SOURCE_DATA):
            raise ConfigurationError(f"Unknown operation mode: {self.mode}")

        if not self.output_path:
            raise ConfigurationError("No output file specified!")

        if self.mode == SOURCE_SINE:
            if (
                self.word_width_bits is None
                or self.word_width_bits < MINIMUM_SINE_WORD_WIDTH_BITS
                or self.word_width_bits > MAXIMUM_WORD_WIDTH_BITS
            ):
                raise ConfigurationError("Sine mode: No valid word width defined!")

            if self.number_of_words is None or self.number_of_words < 1:
                raise ConfigurationError("Sine mode: No valid length defined!")

            if self.amplitude is not None and self.amplitude < 0:
                raise ConfigurationError("Sine mode: Amplitude must not be negative!")

            if not np.isfinite(self.offset):
                raise ConfigurationError(
                    f"Sine mode: Offset must be a finite number. Received: {self.offset}"
                )
        else:
            if not self.input_segments:
                raise ConfigurationError("Data mode: No input files specified!")

            if self.word_width_bits < MINIMUM_WORD_WIDTH_BITS:
                raise ConfigurationError("Data mode: No valid word width defined!")

            if self.word_width_bits > MAXIMUM_WORD_WIDTH_BITS:
                raise ConfigurationError(
                    f"Data mode: max {MAXIMUM_WORD_WIDTH_BITS}-bit wide "
                    f"word width allowed!"
                )


@dataclass
class RomBuildResult:
    """
    Everything a build produced, before it is written.

    Attributes:
        configuration: The configuration used.
        sequence: The generated ROM words.
        payload: Encoded output, bytes (raw) or str (MIF).
        usage: Storage and value-range summary.
    """
    configuration: RomConfiguration
    sequence: WordSequence
    payload: Union[bytes, str]
    usage: RomUsageSummary

    def get_payload_size(self) -> int:
        """Length of the payload in bytes (raw) or characters (MIF)."""
        return len(self.payload)


class RomBuilder:
    """
    Orchestrates a complete ROM build.

    Usage:
        configuration = RomConfiguration(
            mode="sine",
            output_path="sine.mif",
            word_width_bits=8,
            number_of_words=256,
            mif_output=True
        )
        builder = RomBuilder(configuration)
        result = builder.run()
    """

    def __init__(self, configuration: RomConfiguration, verbose: bool = False) -> None:
        self.configuration: RomConfiguration = configuration
        self.verbose: bool = verbose

    def run(self) -> RomBuildResult:
        """Build the image and write it to the configured output path."""
        result: RomBuildResult = self.build()
        self.write(result)
        return result

    def build(self) -> RomBuildResult:
        """
        Generate, encode and summarize the ROM image without writing it.

        Raises:
            ConfigurationError: On invalid parameters or a data length that
                does not split into whole words.
            InputFileError: If an input file cannot be read.
        """
        configuration: RomConfiguration = self.configuration

        if self.verbose:
            self._print_configuration()

        # ====================================================================
        # STEP 1: GENERATE WORDS
        # ====================================================================
        if configuration.mode == SOURCE_SINE:
            if self.verbose:
                print(f"\n--- Step 1: Generating Sine Table ---")
            sequence: WordSequence = self._generate_sine_table()
        else:
            if self.verbose:
                print(f"\n--- Step 1: Loading Input Data ---")
            sequence = self._load_data_image()

        if self.verbose:
            print(f"  Generated {sequence.get_number_of_words()} words")

        # ====================================================================
        # STEP 2: ENCODE
        # ====================================================================
        encoder: AbstractWordEncoder = self._create_encoder()
        if self.verbose:
            print(f"\n--- Step 2: Encoding ({encoder.get_format_name()}) ---")
        payload: Union[bytes, str] = encoder.encode(sequence)

        # ====================================================================
        # STEP 3: SUMMARIZE
        # ====================================================================
        usage: RomUsageSummary = compute_rom_usage(sequence)
        if self.verbose:
            print_rom_usage(usage)
        if usage.has_out_of_range_words():
            print(format_out_of_range_warning(usage), file=sys.stderr)

        return RomBuildResult(
            configuration=configuration,
            sequence=sequence,
            payload=payload,
            usage=usage
        )

    def write(self, result: RomBuildResult) -> None:
        """
        Write an encoded payload to the output path.

        Raises:
            OutputFileError: If the file cannot be opened or written.
        """
        output_path: str = self.configuration.output_path

        # Encoded before open(): a failing run leaves no file behind
        payload_bytes: bytes = (
            result.payload.encode("utf-8")
            if isinstance(result.payload, str)
            else result.payload
        )

        try:
            with open(output_path, "wb") as output_file:
                output_file.write(payload_bytes)
        except OSError as error:
            raise OutputFileError(
                f"Couldn't open output file {output_path}: {error.strerror}"
            ) from error

        if self.verbose:
            print(f"\n--- Step 4: Writing Output ---")
            print(f"  Wrote {len(payload_bytes)} bytes to {output_path}")

    def _generate_sine_table(self) -> WordSequence:
        configuration: RomConfiguration = self.configuration
        generator: SineTableGenerator = SineTableGenerator(
            word_width_bits=configuration.word_width_bits,
            number_of_words=configuration.number_of_words,
            amplitude=configuration.amplitude,
            offset=configuration.offset,
            signed=configuration.signed
        )

        if self.verbose and generator.uses_default_scale():
            print(f"  Defaulting to half of word width: {generator.scale // 2}")

        return generator.generate()

    def _load_data_image(self) -> WordSequence:
        buffer: bytes = load_input_segments(
            self.configuration.input_segments,
            on_segment_read=self._report_segment if self.verbose else None
        )

        packer: WordPacker = WordPacker(self.configuration.word_width_bits)
        return packer.pack(buffer)

    def _report_segment(self, segment: InputSegment, chunk: bytes) -> None:
        print(f"  Reading {segment.filename} {segment.offset} {len(chunk)}")

    def _create_encoder(self) -> AbstractWordEncoder:
        if self.configuration.mif_output:
            return MifEncoder(self.configuration.invocation_arguments)
        return BinaryEncoder()

    def _print_configuration(self) -> None:
        configuration: RomConfiguration = self.configuration
        print("\n" + "=" * 70)
        print("ROM IMAGE BUILD")
        print("=" * 70)
        print(f"\n--- Configuration ---")
        print(f"  Mode:                   {configuration.mode}")
        print(f"  Word Width:             {configuration.word_width_bits} bits")
        print(f"  Output Format:          {'MIF' if configuration.mif_output else 'raw binary'}")
        print(f"  Output File:            {configuration.output_path}")
        if configuration.mode == SOURCE_SINE:
            print(f"  Length:                 {configuration.number_of_words} words")
            amplitude_text: str = (
                "default" if configuration.amplitude is None else str(configuration.amplitude)
            )
            print(f"  Amplitude:              {amplitude_text}")
            print(f"  Offset:                 {configuration.offset}")
            print(f"  Signed:                 {configuration.signed}")
        else:
            print(f"  Input Segments:         {len(configuration.input_segments)}")
