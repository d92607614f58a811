"""
romswak - Main Entry Point
==========================

Command line front end of the ROM content synthesizer.

Two operation modes:

    sine  Generate one period of a quantized sine wave.
    data  Concatenate slices of binary files and split them into words.

Either result is written as a raw big-endian binary image or, with -mif,
as a Memory Initialization File.

Usage:
    romswak sine -width 8 -length 256 -o sine.mif -mif
    romswak data boot.bin,0,1024 font.bin -width 16 -o rom.mif -mif

Or import and use programmatically:
    from romswak.generation import RomBuilder, RomConfiguration
"""

import argparse
import sys
from typing import List, Optional

from .errors import RomSwakError
from .generation.rom_builder import RomBuilder, RomBuildResult, RomConfiguration
from .packing.input_segment import InputSegment, parse_input_segment
from .visualization.rom_plotter import RomContentPlotter


USAGE_TEXT: str = (
    "Usage: romswak sine -width <word width> -length <length in words> "
    "[-amplitude <wave amplitude>] [-offset <dc offset>] -o <output file> "
    "[-signed] [-mif] [-plot <png file>] [-quiet]\n"
    "       romswak data <input file,[offset],[length]> "
    "[<input file,[offset],[length]>]... -width <word width> -o <output file> "
    "[-mif] [-plot <png file>] [-quiet]"
)

OPERATION_MODES = ("sine", "data")


def print_usage() -> None:
    print(USAGE_TEXT, file=sys.stderr)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-width", type=int, default=None, help="Word width in bits (1-32)")
    parser.add_argument("-o", dest="output", default=None, help="Output file")
    parser.add_argument("-mif", action="store_true", help="Write a MIF file instead of raw binary")
    parser.add_argument("-plot", default=None, help="Save a preview plot of the ROM contents to this file")
    parser.add_argument("-quiet", action="store_true", help="Do not print progress")


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="romswak",
        description="Synthesize ROM initialization content (sine tables or file data)",
        allow_abbrev=False
    )
    subparsers = parser.add_subparsers(dest="mode")

    sine_parser = subparsers.add_parser("sine", help="Generate a quantized sine table", allow_abbrev=False)
    sine_parser.add_argument("-length", type=int, default=None, help="Table length in words")
    sine_parser.add_argument("-amplitude", type=int, default=None, help="Wave amplitude in quantized units")
    sine_parser.add_argument("-offset", type=float, default=0.0, help="DC offset in units of the scale")
    sine_parser.add_argument("-signed", action="store_true", help="Generate a two's-complement table")
    _add_common_arguments(sine_parser)

    data_parser = subparsers.add_parser("data", help="Pack file segments into words", allow_abbrev=False)
    data_parser.add_argument("segments", nargs="+", help="<input file>[,<offset>[,<length>]]")
    _add_common_arguments(data_parser)

    return parser


def build_configuration(arguments: argparse.Namespace, invocation_arguments: List[str]) -> RomConfiguration:
    """
    Turn parsed arguments into a validated RomConfiguration.

    Raises:
        ConfigurationError: On any invalid or missing value.
    """
    if arguments.mode == "sine":
        return RomConfiguration(
            mode="sine",
            output_path=arguments.output,
            word_width_bits=arguments.width,
            mif_output=arguments.mif,
            number_of_words=arguments.length,
            amplitude=arguments.amplitude,
            offset=arguments.offset,
            signed=arguments.signed,
            invocation_arguments=invocation_arguments
        )

    segments: List[InputSegment] = [parse_input_segment(token) for token in arguments.segments]
    return RomConfiguration(
        mode="data",
        output_path=arguments.output,
        word_width_bits=arguments.width,
        mif_output=arguments.mif,
        input_segments=segments,
        invocation_arguments=invocation_arguments
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run romswak.

    Returns:
        int: 0 on success or when only usage was shown, 1 on a
            configuration or I/O error.
    """
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)

    if not argv or argv[0] not in OPERATION_MODES:
        if argv:
            print("Unknown operation mode", file=sys.stderr)
        print_usage()
        return 0

    arguments: argparse.Namespace = build_argument_parser().parse_args(argv)
    verbose: bool = not arguments.quiet

    if not arguments.output:
        print_usage()
        print("No output file specified!", file=sys.stderr)
        return 1

    try:
        configuration: RomConfiguration = build_configuration(arguments, argv)
        builder: RomBuilder = RomBuilder(configuration, verbose=verbose)
        result: RomBuildResult = builder.run()
        if arguments.plot:
            RomContentPlotter.plot_word_sequence(result.sequence, save_path=arguments.plot)
    except RomSwakError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
