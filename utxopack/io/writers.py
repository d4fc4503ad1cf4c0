"""
I/O Writers

Handles writing of packing results.
"""

from typing import List
import pandas as pd
from pathlib import Path
import logging

from ..types import LayoutRow
from ..utils import render_sats

logger = logging.getLogger(__name__)

LAYOUT_COLUMNS = ['index', 'txid', 'vout', 'value', 'x', 'y', 'radius']


class LayoutWriter:
    """Writes placed circles in TSV format"""

    @staticmethod
    def to_frame(result):
        """
        One row per placed circle, in placement order

        Args:
            result: PackingResult

        Returns:
            DataFrame with LAYOUT_COLUMNS
        """
        rows: List[LayoutRow] = [
            {
                'index': index,
                'txid': circle.utxo.txid,
                'vout': circle.utxo.vout,
                'value': circle.utxo.value,
                'x': circle.x,
                'y': circle.y,
                'radius': circle.radius,
            }
            for index, circle in enumerate(result.circles)
        ]
        return pd.DataFrame(rows, columns=LAYOUT_COLUMNS)

    @staticmethod
    def write(result, output_file):
        """
        Write circles with bounding box metadata

        Args:
            result: PackingResult
            output_file: Path to output TSV file
        """
        Path(output_file).parent.mkdir(parents=True, exist_ok=True)

        with open(output_file, 'w') as f:
            f.write(f"# n_input={result.n_input}\n")
            if result.bbox is not None:
                f.write("# bbox={},{},{},{}\n".format(*result.bbox.as_tuple()))
            LayoutWriter.to_frame(result).to_csv(f, sep='\t', index=False)

        logger.info(f"Layout saved to {output_file}")


def write_layout(result, output_file):
    """Convenience function"""
    LayoutWriter.write(result, output_file)


class SummaryWriter:
    """Writes a packing summary in human-readable text format"""

    def __init__(self, network='mainnet'):
        """
        Initialize summary writer

        Args:
            network: Network name used to format values
        """
        self.network = network

    def write(self, result, output_file):
        """
        Write packing statistics

        Args:
            result: PackingResult
            output_file: Path to output summary file
        """
        Path(output_file).parent.mkdir(parents=True, exist_ok=True)

        values = [circle.utxo.value for circle in result.circles]

        with open(output_file, 'w') as f:
            f.write("UTXO Packing Summary\n")
            f.write("=" * 50 + "\n\n")

            f.write("Input:\n")
            f.write("-" * 20 + "\n")
            f.write(f"UTXOs received: {result.n_input}\n")
            f.write(f"Circles placed: {result.n_circles}\n")
            f.write(f"Dropped by circle cap: {result.n_truncated}\n")
            f.write(f"Origin fallback placements: {result.n_fallback}\n\n")

            f.write("Layout:\n")
            f.write("-" * 20 + "\n")
            if result.bbox is not None:
                bbox = result.bbox
                f.write(f"Bounding box: x [{bbox.min_x:.2f}, {bbox.max_x:.2f}], "
                        f"y [{bbox.min_y:.2f}, {bbox.max_y:.2f}]\n")
                f.write(f"Size: {bbox.width:.2f} x {bbox.height:.2f}\n\n")
            else:
                f.write("Nothing to render\n\n")

            f.write("Values:\n")
            f.write("-" * 20 + "\n")
            if values:
                f.write(f"Total placed: {render_sats(sum(values), self.network)}\n")
                f.write(f"Largest: {render_sats(max(values), self.network)}\n")
                f.write(f"Smallest placed: {render_sats(min(values), self.network)}\n")
            else:
                f.write("No UTXOs\n")

        logger.info(f"Packing summary saved to {output_file}")


def write_summary(result, output_file, network='mainnet'):
    """
    Convenience function to write summary

    Args:
        result: PackingResult
        output_file: Output summary file path
        network: Network name used to format values
    """
    SummaryWriter(network).write(result, output_file)
