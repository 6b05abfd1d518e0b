"""
Submission

Validates raw form input, runs the evaluator, and appends a progress
record. A failed append never changes the result returned to the user.
"""

from __future__ import annotations

import logging

from marketing_trainer.answer_parser import is_blank, parse_answers
from marketing_trainer.domain.constants import (
    ALLOCATION,
    PROJECTION,
    REQUIRED_ALLOCATION_TOTAL,
)
from marketing_trainer.domain.entities import ProgressRecord
from marketing_trainer.domain.value_objects import AllocationResult, ProjectionResult
from marketing_trainer.infrastructure.progress_store import ProgressStore, ProgressStoreError
from marketing_trainer.scoring.allocation import evaluate_allocation
from marketing_trainer.scoring.projection import evaluate_projection
from marketing_trainer.trainer_config import PracticeConfig
from marketing_trainer.use_cases.session import PracticeSession

logger = logging.getLogger(__name__)


class AllocationTotalError(ValueError):
    """The allocation does not add up to 100%"""

    def __init__(self, total: float):
        self.total = total
        super().__init__(f"Total allocation must equal {REQUIRED_ALLOCATION_TOTAL}% (got {total:g}%)")


class IncompleteAnswerError(ValueError):
    """One or more fields were left blank"""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Answer every field before submitting (missing: {', '.join(missing)})")


def allocation_total(raw_answers: dict[str, str | float | None]) -> float:
    """Sum of the allocation as it would be submitted"""
    return sum(parse_answers(raw_answers).values())


def is_allocation_complete(total: float) -> bool:
    # Exact comparison; 99.999 is not accepted
    return total == REQUIRED_ALLOCATION_TOTAL


def channel_spend(percent: float, total_budget: float) -> float:
    """Currency amount a percentage of the budget represents"""
    return percent * total_budget / 100


def record_progress(store: ProgressStore | None, record: ProgressRecord) -> bool:
    """
    Append a progress record without letting a failure reach the user

    Returns:
        True if the record was written
    """
    if store is None:
        return False
    try:
        store.append(record)
    except ProgressStoreError as e:
        logger.warning("Progress not saved for %s (%s): %s", record.user_name, record.scenario_id, e)
        return False
    return True


def _require_scenario(session: PracticeSession, kind: str):
    if session.kind != kind:
        raise ValueError(f"Session is in {session.kind} mode, not {kind}")
    scenario = session.current_scenario
    if scenario is None:
        raise ValueError("No scenario available to submit against")
    return scenario


def submit_allocation(
    session: PracticeSession,
    raw_answers: dict[str, str | float | None],
    progress_store: ProgressStore | None = None,
) -> AllocationResult:
    """
    Evaluate an allocation for the session's current scenario

    Args:
        session: Allocation session
        raw_answers: {channel: raw input}
        progress_store: Where to append the ProgressRecord

    Returns:
        AllocationResult

    Raises:
        AllocationTotalError: If the allocation does not sum to exactly 100
    """
    scenario = _require_scenario(session, ALLOCATION)
    user_answer = parse_answers(raw_answers)
    total = sum(user_answer.values())
    if not is_allocation_complete(total):
        raise AllocationTotalError(total)

    result = evaluate_allocation(user_answer, scenario.answer_key)
    record_progress(progress_store, ProgressRecord(
        user_name=session.user_name,
        scenario_kind=ALLOCATION,
        scenario_id=scenario.scenario_id,
        score=result.score,
        user_answer=user_answer,
        attempt_number=session.attempt_number,
    ))
    session.last_result = result
    return result


def submit_projection(
    session: PracticeSession,
    raw_answers: dict[str, str | float | None],
    progress_store: ProgressStore | None = None,
    practice: PracticeConfig | None = None,
) -> ProjectionResult:
    """
    Evaluate computed metrics for the session's current scenario

    Args:
        session: Projection session
        raw_answers: {metric: raw input}
        progress_store: Where to append the ProgressRecord
        practice: Session rules (failure score for hint gating)

    Returns:
        ProjectionResult

    Raises:
        IncompleteAnswerError: If any metric of the scenario was left blank
    """
    if practice is None:
        practice = PracticeConfig()
    scenario = _require_scenario(session, PROJECTION)

    missing = [m for m in scenario.answer_key if is_blank(raw_answers.get(m))]
    if missing:
        raise IncompleteAnswerError(missing)

    user_answer = parse_answers(raw_answers)
    result = evaluate_projection(user_answer, scenario.answer_key)
    record_progress(progress_store, ProgressRecord(
        user_name=session.user_name,
        scenario_kind=PROJECTION,
        scenario_id=scenario.scenario_id,
        score=result.score,
        user_answer=user_answer,
        attempt_number=session.attempt_number,
    ))
    session.last_result = result
    session.register_score(result.score, practice.hint_failure_score)
    return result
