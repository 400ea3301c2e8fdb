"""Tests for batch pricing of a sheet of puts."""

import csv
import json
import logging
import math

import pytest
from xllmath.black_scholes import bsm_put
from xllmath.book import read_rows, price_row, price_book, write_results

ROWS = [
    {"id": "1", "r": "0.05", "S": "100", "sigma": "0.2", "K": "100", "t": "1.0"},
    {"id": "2", "r": "0.0", "S": "50", "sigma": "0.3", "K": "60", "t": "0.5"},
    {"id": "3", "r": "0.01", "S": "100", "sigma": "0", "K": "100", "t": "1.0"},
    {"id": "4", "r": "0.01", "S": "abc", "sigma": "0.2", "K": "100", "t": "1.0"},
    {"id": "5", "r": "0.01", "S": "100", "sigma": "0.2", "t": "1.0"},
]


class TestPriceRow:
    def test_valid_row(self):
        res = price_row(ROWS[0])
        assert res["id"] == "1"
        assert res["valid"] is True
        assert res["price"] == bsm_put(0.05, 100.0, 0.2, 100.0, 1.0)

    def test_invalid_domain_is_nan(self):
        res = price_row(ROWS[2])
        assert math.isnan(res["price"])
        assert res["valid"] is False

    def test_malformed_number_raises(self):
        with pytest.raises(ValueError):
            price_row(ROWS[3])

    def test_missing_column_raises(self):
        with pytest.raises(KeyError):
            price_row(ROWS[4])


class TestPriceBook:
    def test_records_every_row(self):
        results = price_book(ROWS)
        assert [r["id"] for r in results] == ["1", "2", "3", "4", "5"]
        assert results[0]["price"] == pytest.approx(5.5735, abs=1e-3)
        assert math.isnan(results[2]["price"])
        assert results[3]["price"] is None and "error" in results[3]
        assert results[4]["error"] == "missing column(s): K"

    def test_strict_turns_domain_into_error(self):
        results = price_book(ROWS[:3], strict=True)
        assert results[2]["price"] is None
        assert results[2]["error"] == "sigma must be positive"

    def test_logs_failures_and_summary(self, caplog):
        with caplog.at_level(logging.INFO, logger="xllmath.book"):
            price_book(ROWS)
        warnings_ = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings_) == 2
        assert "Priced: 2  |  Invalid: 1  |  Failed: 2" in caplog.text


class TestIO:
    def test_short_row_is_recorded_not_raised(self, tmp_path):
        p = tmp_path / "book.csv"
        p.write_text("id,r,S,sigma,K,t\n1,0.05,100,0.2,100,1.0\n2,0.05,100\n")
        results = price_book(read_rows(p))
        assert len(results) == 2
        assert results[0]["valid"] is True
        assert results[1]["price"] is None
        assert results[1]["error"] == "missing column(s): sigma, K, t"

    def test_read_rows(self, tmp_path):
        p = tmp_path / "book.csv"
        p.write_text("id,r,S,sigma,K,t\n1,0.05,100,0.2,100,1.0\n")
        rows = read_rows(p)
        assert rows == [{"id": "1", "r": "0.05", "S": "100", "sigma": "0.2",
                         "K": "100", "t": "1.0"}]

    def test_write_json_replaces_nan(self, tmp_path):
        out = tmp_path / "out.json"
        write_results(price_book(ROWS[:3]), out)
        data = json.loads(out.read_text())
        assert len(data) == 3
        assert data[2]["price"] is None
        assert data[2]["valid"] is False

    def test_write_csv_union_header(self, tmp_path):
        out = tmp_path / "out.csv"
        write_results(price_book(ROWS), out)
        with open(out, newline="") as f:
            reader = csv.DictReader(f)
            assert reader.fieldnames == ["id", "price", "valid", "error"]
            rows = list(reader)
        assert len(rows) == 5
        assert rows[0]["error"] == ""
        assert float(rows[0]["price"]) == pytest.approx(5.5735, abs=1e-3)
