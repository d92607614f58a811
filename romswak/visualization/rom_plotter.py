"""
ROM Content Plotter
===================

Preview plot of a generated ROM image: raw word value against address,
with the range the word width can represent drawn as dashed limits.
Useful to eyeball a sine table for clipping or wrap-around before it
goes into a bitstream.
"""

import numpy as np
import matplotlib.pyplot as plt
from typing import Optional, Tuple

from ..errors import OutputFileError
from ..signals.word_sequence import WordSequence, get_representable_range


class RomContentPlotter:
    """
    Plotting utilities for ROM images.

    All methods are static to allow easy use without instantiation.
    """

    DEFAULT_SINGLE_PLOT_SIZE: Tuple[int, int] = (12, 6)

    @staticmethod
    def plot_word_sequence(
        sequence: WordSequence,
        title_prefix: str = "",
        save_path: Optional[str] = None,
        show: bool = False
    ) -> plt.Figure:
        """
        Plot raw word values against ROM address.

        Args:
            sequence: The ROM words to plot.
            title_prefix: Optional prefix for the title.
            save_path: If provided, save figure to this path.
            show: If True, open an interactive window.

        Returns:
            plt.Figure: The figure, already closed unless show is True.

        Raises:
            OutputFileError: If the figure cannot be saved.
        """
        addresses: np.ndarray = np.arange(sequence.get_number_of_words())
        values: np.ndarray = np.asarray(sequence.words, dtype=np.int64)
        representable_minimum, representable_maximum = get_representable_range(
            sequence.word_width_bits, sequence.signed
        )

        fig, axis = plt.subplots(figsize=RomContentPlotter.DEFAULT_SINGLE_PLOT_SIZE)
        fig.suptitle(
            f"{title_prefix}ROM Contents ({sequence.get_number_of_words()} x "
            f"{sequence.word_width_bits} bit, {sequence.source})",
            fontsize=14,
            fontweight='bold'
        )

        axis.step(addresses, values, 'b-', linewidth=0.8, where='post')
        axis.axhline(
            y=representable_minimum, color='r', linestyle='--',
            linewidth=0.8, label='Representable range'
        )
        axis.axhline(y=representable_maximum, color='r', linestyle='--', linewidth=0.8)
        axis.set_xlabel('Address', fontsize=10)
        axis.set_ylabel('Word Value', fontsize=10)
        axis.grid(True, alpha=0.3)
        axis.legend(loc='upper right', fontsize=9)

        plt.tight_layout()

        if save_path:
            try:
                plt.savefig(save_path, dpi=150, bbox_inches='tight')
            except OSError as error:
                plt.close(fig)
                raise OutputFileError(
                    f"Couldn't save figure {save_path}: {error.strerror}"
                ) from error
            print(f"Figure saved to:  {save_path}")

        if show:
            plt.show()
        else:
            plt.close(fig)

        return fig
