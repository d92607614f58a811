"""
romswak - ROM Initialization Content Synthesizer
================================================

This package generates initialization content for FPGA ROM and block RAM:
either one period of a quantized sine wave, or a concatenation of raw file
segments, written as a raw big-endian binary image or as a Memory
Initialization File (MIF).

Package Structure:
- signals/: Word sequence container and sine table generation
- packing/: Input file segments and byte-to-word splitting
- encoders/: Raw binary and MIF output encoders
- metrics/: ROM storage and value-range summary
- visualization/: Preview plot of ROM contents
- generation/: Build orchestration
- main.py: Command line entry point
"""

__version__ = "1.0.0"
