"""
Progress store

Append-only log of ProgressRecords. Each submission becomes one row; rows
are never updated, and a repeated attempt number is simply another row.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import asdict
from pathlib import Path

import pandas as pd

from marketing_trainer.domain.entities import ProgressRecord

logger = logging.getLogger(__name__)

PROGRESS_COLUMNS = [
    "user_name",
    "scenario_kind",
    "scenario_id",
    "score",
    "user_answer",
    "attempt_number",
    "completed_at",
]


class ProgressStoreError(Exception):
    """A progress record could not be written or read"""
    pass


def record_to_row(record: ProgressRecord) -> dict:
    """Flatten a record into a row (user_answer as a JSON string)"""
    row = asdict(record)
    row["user_answer"] = json.dumps(record.user_answer)
    return row


def row_to_record(row: dict) -> ProgressRecord:
    """Rebuild a record from a stored row"""
    answer = row["user_answer"]
    if isinstance(answer, str):
        answer = json.loads(answer)
    return ProgressRecord(
        user_name=str(row["user_name"]),
        scenario_kind=str(row["scenario_kind"]),
        scenario_id=str(row["scenario_id"]),
        score=int(row["score"]),
        user_answer={str(k): float(v) for k, v in answer.items()},
        attempt_number=int(row["attempt_number"]),
        completed_at=str(row["completed_at"]),
    )


class ProgressStore(ABC):
    """Abstract base class for progress logs"""

    @abstractmethod
    def append(self, record: ProgressRecord) -> None:
        """Append one record"""
        pass

    @abstractmethod
    def load(self) -> pd.DataFrame:
        """All rows, in PROGRESS_COLUMNS order"""
        pass

    def records(self) -> list[ProgressRecord]:
        return [row_to_record(row) for row in self.load().to_dict("records")]


class InMemoryProgressStore(ProgressStore):
    """Progress log kept in a list (used for sessions without a file)"""

    def __init__(self):
        self._rows: list[dict] = []

    def append(self, record: ProgressRecord) -> None:
        self._rows.append(record_to_row(record))

    def load(self) -> pd.DataFrame:
        return pd.DataFrame(self._rows, columns=PROGRESS_COLUMNS)


class CsvProgressStore(ProgressStore):
    """Progress log stored as a CSV file"""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def append(self, record: ProgressRecord) -> None:
        row_df = pd.DataFrame([record_to_row(record)], columns=PROGRESS_COLUMNS)
        write_header = not self.path.exists() or self.path.stat().st_size == 0
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            row_df.to_csv(self.path, mode="a", header=write_header, index=False)
        except OSError as e:
            raise ProgressStoreError(f"Failed to append progress to '{self.path}': {e}") from e
        logger.info(
            "Recorded %s attempt %d for %s on %s (score %d)",
            record.scenario_kind, record.attempt_number, record.user_name,
            record.scenario_id, record.score,
        )

    def load(self) -> pd.DataFrame:
        if not self.path.exists():
            return pd.DataFrame(columns=PROGRESS_COLUMNS)
        try:
            # Keep IDs and names as text ("007" must not become 7)
            df = pd.read_csv(
                self.path,
                dtype={"user_name": str, "scenario_kind": str, "scenario_id": str, "user_answer": str},
            )
        except pd.errors.EmptyDataError:
            return pd.DataFrame(columns=PROGRESS_COLUMNS)
        except (OSError, pd.errors.ParserError) as e:
            raise ProgressStoreError(f"Failed to read progress from '{self.path}': {e}") from e
        missing = [c for c in PROGRESS_COLUMNS if c not in df.columns]
        if missing:
            raise ProgressStoreError(f"Progress log '{self.path}' is missing columns: {missing}")
        return df[PROGRESS_COLUMNS]
