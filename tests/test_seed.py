"""Tests for seeding an empty store from a JSON file."""

import json
import logging
from datetime import datetime
from decimal import Decimal

import pytest
from pydantic import ValidationError

from ledgerstats.db import repo
from ledgerstats.seed import load_seed_records, seed_if_empty

SEED_DATA = [
    {"Id": 1, "Date": "2024-08-12T09:30:00", "Type": "Credit", "Amount": 1000.0},
    {"Id": 2, "Date": "2024-08-11T14:00:00", "Type": "Debit", "Amount": 500.0},
    {"id": 3, "date": "2024-08-10T08:15:00", "type": "Credit", "amount": "300.25"},
]


@pytest.fixture
def seed_file(tmp_path):
    path = tmp_path / "transaction.json"
    path.write_text(json.dumps(SEED_DATA))
    return path


class TestLoadSeedRecords:
    """JSON parsing and validation."""

    def test_parses_pascal_and_lower_case(self, seed_file):
        records = load_seed_records(seed_file)

        assert [r.id for r in records] == [1, 2, 3]
        assert records[0].kind == "Credit"
        assert records[0].date == datetime(2024, 8, 12, 9, 30)
        assert records[2].amount == Decimal("300.25")

    def test_missing_type_allowed(self, tmp_path):
        path = tmp_path / "t.json"
        path.write_text(json.dumps([{"Id": 1, "Date": "2024-01-01T00:00:00", "Amount": 1}]))

        assert load_seed_records(path)[0].kind is None

    def test_null_file_is_empty(self, tmp_path):
        path = tmp_path / "t.json"
        path.write_text("null")

        assert load_seed_records(path) == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_seed_records(tmp_path / "absent.json")

    def test_more_than_two_decimals_rejected(self, tmp_path):
        path = tmp_path / "t.json"
        path.write_text(json.dumps([{"Id": 1, "Date": "2024-01-01T00:00:00", "Amount": "0.005"}]))

        with pytest.raises(ValidationError):
            load_seed_records(path)

    def test_invalid_record(self, tmp_path):
        path = tmp_path / "t.json"
        path.write_text(json.dumps([{"Id": 1, "Date": "not a date", "Amount": 1}]))

        with pytest.raises(ValidationError):
            load_seed_records(path)


class TestSeedIfEmpty:
    """Seeding writes only into an empty store."""

    def test_seeds_empty_store(self, session, seed_file):
        assert seed_if_empty(session, seed_file) == 3
        assert repo.count_transactions(session) == 3

    def test_skips_populated_store(self, session, seed_file):
        seed_if_empty(session, seed_file)

        assert seed_if_empty(session, seed_file) == 0
        assert repo.count_transactions(session) == 3

    def test_populated_store_does_not_read_file(self, session, seed_file, tmp_path):
        seed_if_empty(session, seed_file)

        assert seed_if_empty(session, tmp_path / "absent.json") == 0

    def test_empty_file_warns(self, session, tmp_path, caplog):
        path = tmp_path / "t.json"
        path.write_text("[]")

        with caplog.at_level(logging.WARNING, logger="ledgerstats"):
            assert seed_if_empty(session, path) == 0

        assert "No data was found in the JSON file." in caplog.text
        assert repo.count_transactions(session) == 0
