"""Plot subcommand - visualization"""

from __future__ import annotations
from typing import Tuple
from pathlib import Path
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from ..config import PlotConfig
from ..visualizer import BubblePlotter
from ..io import read_utxos
from . import configure_logging

logger = logging.getLogger(__name__)

PRESETS = {
    'default': PlotConfig,
    'widget': PlotConfig.widget,
    'publication': PlotConfig.publication,
    'compact': PlotConfig.compact,
}


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add plot subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for plot subcommand
    """
    parser = subparsers.add_parser(
        'plot',
        help='Draw a UTXO bubble graph'
    )

    parser.add_argument('-i', '--input', required=True,
                        help='UTXO file (Esplora JSON, TSV or CSV)')
    parser.add_argument('--prefix', required=True,
                        help='Prefix for the output image')
    parser.add_argument('--output-dir', default='.',
                        help='Output directory (default: current directory)')

    # Optional
    parser.add_argument('--preset', choices=sorted(PRESETS), default='default',
                        help='Configuration preset (default: default)')
    parser.add_argument('--figsize', nargs=2, type=float, metavar=('WIDTH', 'HEIGHT'),
                        help='Figure size in inches (default: from preset)')
    parser.add_argument('--dpi', type=int,
                        help='Output DPI (default: from preset)')
    parser.add_argument('--network', default='mainnet',
                        choices=['mainnet', 'testnet', 'testnet4', 'signet', 'liquid', 'liquidtestnet'],
                        help='Network, selects label units (default: mainnet)')
    parser.add_argument('--title', help='Optional plot title')

    parser.add_argument('--debug', action='store_true', help='Enable debug logging')

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute plot subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    configure_logging(getattr(args, 'debug', False))

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    plot_file = output_dir / f"{args.prefix}.utxopack.png"

    logger.info(f"Input: {args.input}")
    logger.info(f"Output: {plot_file}")

    config = PRESETS[getattr(args, 'preset', 'default')]()
    config.render.network = getattr(args, 'network', 'mainnet')
    if getattr(args, 'dpi', None):
        config.dpi = args.dpi

    utxos = read_utxos(args.input)
    logger.info(f"Loaded {len(utxos)} UTXOs")

    figsize: Tuple[float, float] = tuple(args.figsize) if getattr(args, 'figsize', None) else config.figure_size  # type: ignore

    logger.info("Generating plot...")
    plotter = BubblePlotter(config)
    fig = plotter.plot(
        utxos,
        output_file=str(plot_file),
        figsize=figsize,
        title=getattr(args, 'title', None)
    )
    plt.close(fig)

    logger.info(f"Plot saved: {plot_file}")
