"""
Projection evaluator

Compares computed campaign metrics (CAC, LTV, ROI, ROAS, ...) against the
correct values. Each metric is banded independently by relative deviation
and the score is the unweighted mean of the band contributions.
"""

from __future__ import annotations

from marketing_trainer.domain.constants import (
    CORRECT_DEVIATION_PERCENT,
    PROJECTION_DEVIATION_BANDS,
    PROJECTION_FALLBACK_MESSAGE,
    PROJECTION_FLOOR_CONTRIBUTION,
    PROJECTION_SCORE_MESSAGES,
    ZERO_KEY_DEVIATION_PERCENT,
)
from marketing_trainer.domain.value_objects import MetricResult, ProjectionResult
from marketing_trainer.scoring.policy import (
    band_message,
    banded_contribution,
    relative_deviation_percent,
    round_half_up,
)


def metric_deviation(user_value: float, correct_value: float) -> float:
    """Relative deviation (%) of a metric answer"""
    return relative_deviation_percent(user_value, correct_value, ZERO_KEY_DEVIATION_PERCENT)


def metric_contribution(deviation_percent: float) -> int:
    """Score contribution of a single metric"""
    return banded_contribution(
        deviation_percent, PROJECTION_DEVIATION_BANDS, PROJECTION_FLOOR_CONTRIBUTION
    )


def projection_message(score: float) -> str:
    """Narrative message for a projection score"""
    return band_message(score, PROJECTION_SCORE_MESSAGES, PROJECTION_FALLBACK_MESSAGE)


def evaluate_projection(user_answer: dict[str, float], answer_key: dict[str, float]) -> ProjectionResult:
    """
    Evaluate computed metric values

    Args:
        user_answer: {metric: submitted value}; missing metrics count as 0
        answer_key: {metric: correct value}

    Returns:
        ProjectionResult

    Raises:
        ValueError: If answer_key is empty
    """
    if not answer_key:
        raise ValueError("answer_key must contain at least one metric")

    per_metric: dict[str, MetricResult] = {}
    total = 0
    for metric, correct_value in answer_key.items():
        user_value = user_answer.get(metric, 0)
        deviation = metric_deviation(user_value, correct_value)
        per_metric[metric] = MetricResult(
            correct_value=correct_value,
            user_value=user_value,
            is_correct=deviation <= CORRECT_DEVIATION_PERCENT,
            deviation_percent=deviation,
        )
        total += metric_contribution(deviation)

    final_score = round_half_up(total / len(answer_key))
    return ProjectionResult(
        score=final_score,
        per_metric=per_metric,
        message=projection_message(final_score),
    )
