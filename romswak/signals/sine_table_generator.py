"""
Sine Table Generator
====================

This module generates quantized sine-wave lookup tables for ROM blocks.

One full period of the wave is spread over the ROM depth, so address i
holds the sample at phase:

    phase[i] = i * 2π / number_of_words

Quantization Formula:
    value[i]  = 0.5 * sin(phase[i]) + offset + (0 if signed else 0.5)
    sample[i] = floor(value[i] * scale) + (0 if signed else 1)

The +0.5 / +1 bias centers an unsigned wave inside the positive range;
signed tables omit it so the wave straddles zero. Flooring is always
toward negative infinity, including for negative signed samples.

Scale:
    - Default: 2^width - 2, which leaves one step of headroom against
      the largest representable magnitude.
    - With an explicit amplitude: 2 * amplitude.

FPGA Relevance:
    - A DDS core or a tone generator reads this table with a phase
      accumulator as address.
    - The word width sets the ROM data bus width.
"""

import numpy as np
from typing import Dict, Optional

from ..errors import ConfigurationError
from .word_sequence import (
    MAXIMUM_WORD_WIDTH_BITS,
    SOURCE_SINE,
    WordSequence,
)


MINIMUM_SINE_WORD_WIDTH_BITS: int = 2

# Quantized samples are held in int64 arrays
MAXIMUM_SAMPLE_MAGNITUDE: int = 2 ** 62


def compute_default_scale(word_width_bits: int) -> int:
    """Return 2^width - 2, the default quantization scale."""
    return (1 << word_width_bits) - 2


def compute_scale(word_width_bits: int, amplitude: Optional[int] = None) -> int:
    """
    Resolve the quantization scale.

    Args:
        word_width_bits: Word width in bits.
        amplitude: Half the wave's peak-to-peak span in quantized units.
            None means "not supplied" and selects the default scale.
            An explicit 0 is honoured and gives a flat table.

    Returns:
        int: The scale used by the quantizer.
    """
    if amplitude is None:
        return compute_default_scale(word_width_bits)
    return 2 * amplitude


def quantize_sine_sample(
    index: int,
    number_of_words: int,
    scale: int,
    offset: float = 0.0,
    signed: bool = False
) -> int:
    """
    Quantize the sine sample stored at one address.

    Args:
        index: Address in [0, number_of_words).
        number_of_words: Table length. Must be at least 1; callers
            validate this before quantizing.
        scale: Quantization scale (see compute_scale).
        offset: DC offset added before scaling, in units of the scale.
        signed: Two's-complement table without the unsigned bias.

    Returns:
        int: The quantized sample.
    """
    phase_radians: float = index * 2.0 * np.pi / number_of_words
    value: float = 0.5 * np.sin(phase_radians) + offset + (0.0 if signed else 0.5)
    return int(np.floor(value * scale)) + (0 if signed else 1)


class SineTableGenerator:
    """
    Generates one period of a quantized sine wave as ROM words.

    Attributes:
        word_width_bits (int): Bits per ROM word (2-32).
        number_of_words (int): ROM depth, one sample per address.
        amplitude (Optional[int]): Explicit amplitude or None for default.
        offset (float): DC offset in units of the scale.
        signed (bool): Generate a two's-complement table.
        scale (int): Resolved quantization scale.

    Usage:
        generator = SineTableGenerator(word_width_bits=8, number_of_words=256)
        sequence = generator.generate()
    """

    def __init__(
        self,
        word_width_bits: int,
        number_of_words: int,
        amplitude: Optional[int] = None,
        offset: float = 0.0,
        signed: bool = False
    ) -> None:
        """
        Initialize the sine table generator.

        Raises:
            ConfigurationError: If the width is outside [2, 32], the length
                is not positive, or the amplitude is negative.
        """
        # ===== INPUT VALIDATION =====
        if (
            word_width_bits < MINIMUM_SINE_WORD_WIDTH_BITS
            or word_width_bits > MAXIMUM_WORD_WIDTH_BITS
        ):
            raise ConfigurationError(
                f"Sine mode: No valid word width defined! "
                f"Width must be between {MINIMUM_SINE_WORD_WIDTH_BITS} and "
                f"{MAXIMUM_WORD_WIDTH_BITS} bits. Received: {word_width_bits}"
            )

        if number_of_words < 1:
            raise ConfigurationError(
                f"Sine mode: No valid length defined! "
                f"Received: {number_of_words}"
            )

        if amplitude is not None and amplitude < 0:
            raise ConfigurationError(
                f"Sine mode: Amplitude must not be negative. Received: {amplitude}"
            )

        if not np.isfinite(offset):
            raise ConfigurationError(
                f"Sine mode: Offset must be a finite number. Received: {offset}"
            )

        # ===== STORE PARAMETERS =====
        self.word_width_bits: int = word_width_bits
        self.number_of_words: int = number_of_words
        self.amplitude: Optional[int] = amplitude
        self.offset: float = offset
        self.signed: bool = signed

        # ===== DERIVED QUANTITIES =====
        self.scale: int = compute_scale(word_width_bits, amplitude)

        # |0.5 * sin + offset + bias| <= 1 + |offset|
        if (
            self.scale >= MAXIMUM_SAMPLE_MAGNITUDE
            or (1.0 + abs(offset)) * self.scale >= MAXIMUM_SAMPLE_MAGNITUDE
        ):
            raise ConfigurationError(
                f"Sine mode: Amplitude {amplitude} with offset {offset} exceeds "
                f"the representable sample range"
            )

        # Phase of every address, one full period over the table
        self.phase_axis_radians: np.ndarray = (
            np.arange(self.number_of_words) * 2.0 * np.pi / self.number_of_words
        )

    def generate(self) -> WordSequence:
        """
        Generate the complete table.

        Returns:
            WordSequence: number_of_words raw samples in address order,
                tagged as a sine table so MIF output carries the raw values.
        """
        bias: float = 0.0 if self.signed else 0.5
        ideal_signal: np.ndarray = (
            0.5 * np.sin(self.phase_axis_radians) + self.offset + bias
        )

        quantized_signal: np.ndarray = self._quantize_signal(ideal_signal)

        return WordSequence(
            words=quantized_signal.tolist(),
            word_width_bits=self.word_width_bits,
            signed=self.signed,
            source=SOURCE_SINE
        )

    def _quantize_signal(self, signal: np.ndarray) -> np.ndarray:
        """Scale, floor toward -inf and re-apply the unsigned bias."""
        floored: np.ndarray = np.floor(signal * self.scale).astype(np.int64)
        if not self.signed:
            floored = floored + 1
        return floored

    def uses_default_scale(self) -> bool:
        """True when no amplitude was supplied."""
        return self.amplitude is None

    def get_table_parameters_summary(self) -> Dict[str, float]:
        """
        Return useful table parameters for reporting.

        Returns:
            dict: Dictionary containing table parameters.
        """
        return {
            "word_width_bits": self.word_width_bits,
            "number_of_words": self.number_of_words,
            "scale": self.scale,
            "effective_amplitude": self.scale / 2,
            "offset": self.offset,
            "phase_step_radians": 2.0 * np.pi / self.number_of_words,
        }
