"""
Progress Summaries

Aggregates the progress log per user, mode, and scenario.
"""

from dataclasses import asdict

import pandas as pd

from marketing_trainer.domain.constants import PASSING_SCORE
from marketing_trainer.domain.entities import ProgressRecord
from marketing_trainer.infrastructure.progress_store import PROGRESS_COLUMNS

SUMMARY_COLUMNS = [
    "user_name",
    "scenario_kind",
    "scenario_id",
    "attempts",
    "best_score",
    "latest_score",
    "mean_score",
]


def is_passing(score: float, passing_score: int = PASSING_SCORE) -> bool:
    """Whether a score is shown as a success rather than a warning"""
    return score >= passing_score


def progress_dataframe(records: list[ProgressRecord]) -> pd.DataFrame:
    """Convert records to a DataFrame with the progress log columns"""
    return pd.DataFrame([asdict(r) for r in records], columns=PROGRESS_COLUMNS)


def summarize_progress(progress_df: pd.DataFrame, user_name: str | None = None) -> pd.DataFrame:
    """
    Summarize attempts per user, mode, and scenario

    Args:
        progress_df: Progress log (PROGRESS_COLUMNS)
        user_name: Restrict to one user (optional)

    Returns:
        DataFrame with SUMMARY_COLUMNS; latest_score is the score of the most
        recent submission by completed_at
    """
    if user_name is not None:
        progress_df = progress_df[progress_df["user_name"] == user_name]
    if progress_df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    ordered = progress_df.sort_values("completed_at", kind="stable")
    grouped = ordered.groupby(["user_name", "scenario_kind", "scenario_id"], sort=True)["score"]
    summary = grouped.agg(
        attempts="count",
        best_score="max",
        latest_score="last",
        mean_score="mean",
    ).reset_index()
    summary["mean_score"] = summary["mean_score"].round(1)
    return summary[SUMMARY_COLUMNS]


def score_history(progress_df: pd.DataFrame, user_name: str) -> pd.DataFrame:
    """A user's submissions in order, numbered from 1 (for charting)"""
    history = progress_df[progress_df["user_name"] == user_name]
    history = history.sort_values("completed_at", kind="stable").reset_index(drop=True)
    history.insert(0, "submission", range(1, len(history) + 1))
    return history
