"""I/O utilities for UtxoPack"""

from .readers import UtxoReader, read_utxos
from .writers import LayoutWriter, write_layout, SummaryWriter, write_summary

__all__ = [
    'UtxoReader', 'read_utxos',
    'LayoutWriter', 'write_layout',
    'SummaryWriter', 'write_summary']
