"""
Utility functions

Value formatting used for circle labels.
"""

from __future__ import annotations
from typing import Union
import re

from .types import Network

SATS_PER_BTC = 100_000_000
BTC_DISPLAY_THRESHOLD = 1_000_000

_SUFFIXES = ['', 'k', 'M', 'G', 'T', 'P', 'E']
_TRAILING_ZEROS = re.compile(r'\.0+$|(\.[0-9]*[1-9])0+$')

_NETWORK_PREFIXES = {
    'liquid': 'L',
    'liquidtestnet': 'tL',
    'testnet': 't',
    'testnet4': 't',
    'signet': 's',
}


def shorten_amount(value: Union[int, float], digits: int = 2) -> str:
    """
    Shorten a number with a metric suffix

    Args:
        value: Number to format
        digits: Decimal places kept before trailing zeros are stripped

    Returns:
        e.g. 950 -> '950', 1500 -> '1.5k', 2_340_000 -> '2.34M'
    """
    tier = 0
    while tier < len(_SUFFIXES) - 1 and abs(value) >= 1000 ** (tier + 1):
        tier += 1
    text = f"{value / 1000 ** tier:.{digits}f}"
    return _TRAILING_ZEROS.sub(r'\1', text) + _SUFFIXES[tier]


def render_sats(value: Union[int, float], network: Network = 'mainnet') -> str:
    """
    Human-readable UTXO value

    Values of at least 1,000,000 sats are shown in BTC, smaller ones in sats.
    The unit carries the network prefix (tBTC on testnet, Lsats on Liquid, ...).

    Args:
        value: Amount in satoshis
        network: Network name

    Returns:
        Label text such as '0.05 BTC' or '12.5k tsats'
    """
    prefix = _NETWORK_PREFIXES.get(network, '')
    if value >= BTC_DISPLAY_THRESHOLD:
        return f"{shorten_amount(value / SATS_PER_BTC)} {prefix}BTC"
    return f"{shorten_amount(value)} {prefix}sats"
