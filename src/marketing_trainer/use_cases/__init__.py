"""
Use Cases Layer

Session handling, submission, and progress summaries called from the app and the runner.
"""

from marketing_trainer.use_cases.session import (
    PracticeSession,
    load_scenarios,
)
from marketing_trainer.use_cases.submission import (
    AllocationTotalError,
    IncompleteAnswerError,
    allocation_total,
    channel_spend,
    is_allocation_complete,
    record_progress,
    submit_allocation,
    submit_projection,
)
from marketing_trainer.use_cases.progress import (
    is_passing,
    progress_dataframe,
    score_history,
    summarize_progress,
)

__all__ = [
    # session
    "PracticeSession",
    "load_scenarios",
    # submission
    "AllocationTotalError",
    "IncompleteAnswerError",
    "allocation_total",
    "channel_spend",
    "is_allocation_complete",
    "record_progress",
    "submit_allocation",
    "submit_projection",
    # progress
    "is_passing",
    "progress_dataframe",
    "score_history",
    "summarize_progress",
]
