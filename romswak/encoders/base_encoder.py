"""
Base Encoder
============

Common interface of the output sinks. An encoder turns a complete
WordSequence into the full payload of the output file; nothing is
streamed, so the payload can be validated before the file is opened.
"""

from abc import ABC, abstractmethod
from typing import Union

from ..signals.word_sequence import WordSequence


class AbstractWordEncoder(ABC):
    """Abstract base class for ROM output encoders."""

    @abstractmethod
    def encode(self, sequence: WordSequence) -> Union[bytes, str]:
        """Serialize a complete word sequence."""
        pass

    @abstractmethod
    def is_text_output(self) -> bool:
        """Return True if encode() produces text rather than bytes."""
        pass

    @abstractmethod
    def get_format_name(self) -> str:
        """Return a short human-readable name of the output format."""
        pass
