"""
Tests for progress stores (infrastructure/progress_store.py)
"""

import pytest

from marketing_trainer.domain.entities import ProgressRecord
from marketing_trainer.infrastructure.progress_store import (
    PROGRESS_COLUMNS,
    CsvProgressStore,
    InMemoryProgressStore,
    ProgressStoreError,
    record_to_row,
    row_to_record,
)


def _record(score=87, attempt=1, user="Alex", scenario_id="alloc_saas_lead_gen", completed_at="2025-10-20T10:00:00"):
    return ProgressRecord(
        user_name=user,
        scenario_kind="allocation",
        scenario_id=scenario_id,
        score=score,
        user_answer={"Google Ads": 60.0, "LinkedIn Ads": 25.0, "Email Marketing": 15.0},
        attempt_number=attempt,
        completed_at=completed_at,
    )


class TestRowConversion:

    def test_user_answer_serialized(self):
        row = record_to_row(_record())
        assert isinstance(row["user_answer"], str)
        assert row_to_record(row) == _record()


class TestCsvProgressStore:

    def test_append_and_load(self, tmp_path):
        store = CsvProgressStore(tmp_path / "results" / "progress.csv")
        store.append(_record(score=87))
        store.append(_record(score=100, attempt=2))

        df = store.load()
        assert list(df.columns) == PROGRESS_COLUMNS
        assert df["score"].tolist() == [87, 100]
        assert df["attempt_number"].tolist() == [1, 2]

    def test_header_written_once(self, tmp_path):
        path = tmp_path / "progress.csv"
        store = CsvProgressStore(path)
        store.append(_record())
        store.append(_record())
        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith("user_name,")
        assert sum(1 for line in lines if line.startswith("user_name,")) == 1

    def test_same_attempt_is_a_second_row(self, tmp_path):
        store = CsvProgressStore(tmp_path / "progress.csv")
        store.append(_record(attempt=1))
        store.append(_record(attempt=1))
        assert len(store.load()) == 2

    def test_records_roundtrip(self, tmp_path):
        store = CsvProgressStore(tmp_path / "progress.csv")
        store.append(_record(scenario_id="007"))
        records = store.records()
        assert records == [_record(scenario_id="007")]

    def test_load_missing_file(self, tmp_path):
        df = CsvProgressStore(tmp_path / "none.csv").load()
        assert df.empty
        assert list(df.columns) == PROGRESS_COLUMNS

    def test_load_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")
        assert CsvProgressStore(path).load().empty

    def test_load_missing_columns_raises_store_error(self, tmp_path):
        path = tmp_path / "old.csv"
        path.write_text("user_name,score\nA,5\n", encoding="utf-8")
        with pytest.raises(ProgressStoreError, match="missing columns"):
            CsvProgressStore(path).load()

    def test_append_failure_raises_store_error(self, tmp_path):
        # A directory cannot be opened as a file
        store = CsvProgressStore(tmp_path)
        with pytest.raises(ProgressStoreError):
            store.append(_record())


class TestInMemoryProgressStore:

    def test_append_and_load(self):
        store = InMemoryProgressStore()
        assert store.load().empty
        store.append(_record())
        assert store.load()["user_name"].tolist() == ["Alex"]
        assert store.records() == [_record()]
