"""
UtxoPack CLI

Command-line interface with subcommands for packing and plotting.
"""

import argparse
import sys
from .cli import pack, plot


def main():
    parser = argparse.ArgumentParser(
        prog='utxopack',
        description='UtxoPack: Circle-packed bubble graphs of UTXO sets'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Add subcommand parsers
    pack.add_parser(subparsers)
    plot.add_parser(subparsers)

    # Parse arguments
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Execute the appropriate subcommand
    if args.command == 'pack':
        pack.run(args)
    elif args.command == 'plot':
        plot.run(args)


if __name__ == "__main__":
    main()
