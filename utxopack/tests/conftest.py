"""
Shared pytest fixtures for UtxoPack tests

Supports both development mode (python -m utxopack) and installed mode (pip install -e .)
"""
import pytest
import json
from pathlib import Path
import sys

import matplotlib
matplotlib.use("Agg")


@pytest.fixture(scope="session", autouse=True)
def setup_utxopack_path():
    """
    Add repository root to Python path for development mode

    Structure:
      utxopack-repo/                <- repo root (need to add this to sys.path)
      └── utxopack/                 <- package
          ├── __init__.py
          └── tests/
              └── conftest.py       <- we are here
    """
    repo_root = Path(__file__).parent.parent.parent

    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


def make_txid(n: int) -> str:
    """Deterministic 64-char hex txid"""
    return f"{n:064x}"


@pytest.fixture
def utxo_records():
    """
    UTXO records in Esplora form, values deliberately unsorted
    """
    values = [5_000, 250_000_000, 546, 1_200_000, 100_000, 42_000, 100_000, 9_999]
    return [
        {
            'txid': make_txid(i + 1),
            'vout': i % 3,
            'value': value,
            'status': {'confirmed': True, 'block_height': 800_000 + i},
        }
        for i, value in enumerate(values)
    ]


@pytest.fixture
def utxos(utxo_records):
    """Utxo objects built from utxo_records"""
    from utxopack.layout import Utxo
    return [Utxo(txid=r['txid'], vout=r['vout'], value=r['value']) for r in utxo_records]


@pytest.fixture
def utxo_json_file(tmp_path, utxo_records):
    """UTXO list written as Esplora JSON"""
    path = tmp_path / "utxos.json"
    path.write_text(json.dumps(utxo_records))
    return path


@pytest.fixture
def utxo_tsv_file(tmp_path, utxo_records):
    """UTXO list written as TSV"""
    path = tmp_path / "utxos.tsv"
    lines = ["# exported wallet UTXOs", "txid\tvout\tvalue"]
    lines += [f"{r['txid']}\t{r['vout']}\t{r['value']}" for r in utxo_records]
    path.write_text("\n".join(lines) + "\n")
    return path


# Pytest configuration
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual functions"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests running the CLI subcommands"
    )
