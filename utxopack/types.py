"""
Type definitions for UtxoPack

Common types used throughout the package for type checking and documentation.
"""

from __future__ import annotations
from typing import TypedDict, Literal, Union
from pathlib import Path

# Type aliases
PathLike = Union[str, Path]
"""File path as string or Path object"""

Network = Literal['mainnet', 'testnet', 'testnet4', 'signet', 'liquid', 'liquidtestnet']
"""Network the UTXOs belong to (selects label units)"""


# Structured data types

class LayoutRow(TypedDict):
    """One row of the layout TSV written by LayoutWriter"""
    index: int
    txid: str
    vout: int
    value: float
    x: float
    y: float
    radius: float
