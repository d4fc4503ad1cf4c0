"""Pack subcommand - circle layout"""

from __future__ import annotations
from pathlib import Path
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction

from ..config import PackingConfig
from ..layout import PackingEngine
from ..io import read_utxos, write_layout, write_summary
from . import configure_logging

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add pack subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for pack subcommand
    """
    parser = subparsers.add_parser(
        'pack',
        help='Pack UTXOs into a circle layout'
    )

    parser.add_argument('-i', '--input', required=True,
                        help='UTXO file (Esplora JSON, TSV or CSV)')
    parser.add_argument('--prefix', required=True,
                        help='Prefix for output files')
    parser.add_argument('--output-dir', default='.',
                        help='Output directory (default: current directory)')
    parser.add_argument('--max-circles', type=int, default=PackingConfig.max_circles,
                        help=f'Pack only the largest N UTXOs (default: {PackingConfig.max_circles})')
    parser.add_argument('--network', default='mainnet',
                        help='Network used to format values in the summary (default: mainnet)')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute pack subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    configure_logging(getattr(args, 'debug', False))
    logger.info("=== UtxoPack: Packing ===")

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    layout_tsv = output_dir / f"{args.prefix}.utxopack_layout.tsv"
    summary_txt = output_dir / f"{args.prefix}.utxopack_summary.txt"

    logger.info(f"Input: {args.input}")
    logger.info(f"Output directory: {output_dir}")

    utxos = read_utxos(args.input)
    logger.info(f"Loaded {len(utxos)} UTXOs")

    engine = PackingEngine(PackingConfig(max_circles=args.max_circles))
    result = engine.pack(utxos)

    if result.is_empty:
        logger.warning("No UTXOs to lay out")

    write_layout(result, str(layout_tsv))
    write_summary(result, str(summary_txt), getattr(args, 'network', 'mainnet'))

    logger.info(f"Layout TSV: {layout_tsv}")
    logger.info(f"Summary: {summary_txt}")
