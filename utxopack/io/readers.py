"""
I/O Readers

Handles reading of UTXO input files.
"""

from __future__ import annotations
from typing import List
import pandas as pd
from pathlib import Path
import logging

from ..layout.types import Utxo
from ..types import PathLike

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ['txid', 'vout', 'value']


class UtxoReader:
    """Reads UTXO lists from Esplora JSON or delimited text files"""

    @staticmethod
    def read_frame(filepath: PathLike) -> pd.DataFrame:
        """
        Load UTXOs into a DataFrame

        JSON files are expected to hold an array of objects as returned by an
        Esplora /address/:address/utxo endpoint. Any other file is read as
        TSV (or CSV for a .csv suffix) with at least txid, vout and value
        columns. Lines starting with '#' are ignored.

        Rows with a missing, non-numeric or non-positive value are dropped.

        Args:
            filepath: Path to the UTXO file

        Returns:
            DataFrame with txid, vout and value columns in file order
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"UTXO file not found: {path}")

        if path.suffix.lower() == '.json':
            utxos = pd.read_json(path, orient='records', dtype={'txid': str}, convert_dates=False)
        else:
            sep = ',' if path.suffix.lower() == '.csv' else '\t'
            utxos = pd.read_csv(path, sep=sep, comment='#', dtype={'txid': str})

        if utxos.empty:
            logger.info(f"No UTXOs in {path}")
            return pd.DataFrame(columns=REQUIRED_COLUMNS)

        missing = [col for col in REQUIRED_COLUMNS if col not in utxos.columns]
        if missing:
            raise ValueError(f"Missing required columns in {path}: {', '.join(missing)}")

        utxos = utxos[REQUIRED_COLUMNS].copy()
        utxos['value'] = pd.to_numeric(utxos['value'], errors='coerce')
        utxos['vout'] = pd.to_numeric(utxos['vout'], errors='coerce')

        invalid = utxos['value'].isna() | (utxos['value'] <= 0) | utxos['vout'].isna()
        if invalid.any():
            logger.warning(f"Dropping {int(invalid.sum())} UTXOs with invalid value or vout")
            utxos = utxos[~invalid]

        utxos['txid'] = utxos['txid'].astype(str)
        utxos['vout'] = utxos['vout'].astype(int)
        return utxos.reset_index(drop=True)

    @staticmethod
    def read(filepath: PathLike) -> List[Utxo]:
        """
        Load UTXOs as Utxo objects

        Args:
            filepath: Path to the UTXO file

        Returns:
            List of Utxo in file order
        """
        utxos = UtxoReader.read_frame(filepath)
        return [
            Utxo(txid=row.txid, vout=int(row.vout), value=float(row.value))
            for row in utxos.itertuples(index=False)
        ]


def read_utxos(filepath: PathLike) -> List[Utxo]:
    """
    Convenience function to read a UTXO file

    Args:
        filepath: Path to the UTXO file

    Returns:
        List of Utxo in file order
    """
    return UtxoReader.read(filepath)
