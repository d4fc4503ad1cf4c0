"""
Unit tests for UTXO readers and layout writers
"""
import json
import pandas as pd
import pytest
from utxopack.io import UtxoReader, read_utxos, write_layout, write_summary
from utxopack.layout import PackingEngine, PackingResult

pytestmark = pytest.mark.unit


class TestUtxoReader:
    """Tests for UtxoReader"""

    def test_esplora_json(self, utxo_json_file, utxo_records):
        """JSON records are read in file order"""
        utxos = read_utxos(utxo_json_file)
        assert [(u.txid, u.vout, u.value) for u in utxos] == [
            (r['txid'], r['vout'], r['value']) for r in utxo_records
        ]

    def test_tsv_matches_json(self, utxo_tsv_file, utxo_json_file):
        """TSV and JSON inputs give the same UTXOs"""
        assert read_utxos(utxo_tsv_file) == read_utxos(utxo_json_file)

    def test_csv(self, tmp_path):
        """.csv files are comma separated"""
        path = tmp_path / "utxos.csv"
        path.write_text("txid,vout,value\n" + "0" * 64 + ",1,1000\n")
        utxos = read_utxos(path)
        assert len(utxos) == 1
        assert utxos[0].txid == "0" * 64
        assert utxos[0].vout == 1

    def test_drops_invalid_values(self, tmp_path):
        """Non-positive and non-numeric values are filtered out"""
        path = tmp_path / "utxos.tsv"
        path.write_text("txid\tvout\tvalue\naa\t0\t100\nbb\t1\t0\ncc\t2\t-5\ndd\t3\tabc\n")
        utxos = UtxoReader.read(path)
        assert [u.txid for u in utxos] == ['aa']

    def test_empty_json(self, tmp_path):
        """An empty array is an empty UTXO list"""
        path = tmp_path / "utxos.json"
        path.write_text("[]")
        assert read_utxos(path) == []

    def test_missing_columns(self, tmp_path):
        """Missing required columns are reported by name"""
        path = tmp_path / "utxos.json"
        path.write_text(json.dumps([{'txid': 'aa', 'amount': 5}]))
        with pytest.raises(ValueError, match="vout, value"):
            read_utxos(path)

    def test_missing_file(self, tmp_path):
        """A missing file raises FileNotFoundError"""
        with pytest.raises(FileNotFoundError):
            read_utxos(tmp_path / "nope.json")


class TestWriters:
    """Tests for layout and summary writers"""

    def test_layout_tsv(self, tmp_path, utxos):
        """One row per circle plus bbox metadata"""
        result = PackingEngine().pack(utxos)
        output = tmp_path / "out" / "layout.tsv"
        write_layout(result, str(output))

        header = output.read_text().splitlines()[:2]
        assert header[0] == f"# n_input={len(utxos)}"
        assert header[1].startswith("# bbox=")

        layout = pd.read_csv(output, sep='\t', comment='#', dtype={'txid': str})
        assert list(layout.columns) == ['index', 'txid', 'vout', 'value', 'x', 'y', 'radius']
        assert len(layout) == result.n_circles
        assert layout['value'].tolist() == [c.utxo.value for c in result.circles]
        assert layout['x'].tolist() == pytest.approx([c.x for c in result.circles])

    def test_empty_layout(self, tmp_path):
        """Empty result writes a header only"""
        output = tmp_path / "layout.tsv"
        write_layout(PackingResult(), str(output))
        layout = pd.read_csv(output, sep='\t', comment='#')
        assert layout.empty

    def test_summary(self, tmp_path, utxos):
        """Summary reports counts and values"""
        result = PackingEngine().pack(utxos)
        output = tmp_path / "summary.txt"
        write_summary(result, str(output))

        text = output.read_text()
        assert f"Circles placed: {len(utxos)}" in text
        assert "Largest: 2.5 BTC" in text
        assert "Smallest placed: 546 sats" in text
