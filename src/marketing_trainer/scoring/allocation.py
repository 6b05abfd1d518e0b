"""
Allocation evaluator

Compares a submitted channel split against the optimal allocation and
produces a deviation-based score with per-channel feedback.
"""

from __future__ import annotations

from marketing_trainer.domain.constants import (
    ADJUST_DEVIATION,
    ALLOCATION_FALLBACK_MESSAGE,
    ALLOCATION_PENALTY_PER_POINT,
    ALLOCATION_SCORE_MESSAGES,
    CLOSE_CHANNEL_MESSAGE,
    CLOSE_DEVIATION,
    PERFECT_CHANNEL_MESSAGE,
)
from marketing_trainer.domain.value_objects import AllocationResult
from marketing_trainer.scoring.policy import band_message, round_half_up


def channel_feedback(user_value: float, correct_value: float) -> str:
    """
    Feedback for a single channel

    Args:
        user_value: Submitted percentage
        correct_value: Optimal percentage

    Returns:
        Feedback message chosen by the absolute deviation
    """
    deviation = abs(user_value - correct_value)
    if deviation == 0:
        return PERFECT_CHANNEL_MESSAGE
    if deviation <= CLOSE_DEVIATION:
        return CLOSE_CHANNEL_MESSAGE

    over = user_value > correct_value
    amount = round_half_up(deviation)
    if deviation <= ADJUST_DEVIATION:
        return f"Consider {'decreasing' if over else 'increasing'} by about {amount}%."
    return (
        f"{'Over' if over else 'Under'}-allocated by {amount}%. "
        f"This channel {'may be too expensive' if over else 'offers better efficiency'}."
    )


def allocation_message(score: float) -> str:
    """Top-level message for an allocation score"""
    return band_message(score, ALLOCATION_SCORE_MESSAGES, ALLOCATION_FALLBACK_MESSAGE)


def evaluate_allocation(user_answer: dict[str, float], answer_key: dict[str, float]) -> AllocationResult:
    """
    Evaluate a budget allocation

    The answer key is authoritative: channels missing from user_answer count
    as 0 and extra channels are ignored. The caller is responsible for
    checking that user_answer sums to 100 before calling.

    Args:
        user_answer: {channel: submitted percentage}
        answer_key: {channel: optimal percentage}

    Returns:
        AllocationResult

    Raises:
        ValueError: If answer_key is empty
    """
    if not answer_key:
        raise ValueError("answer_key must contain at least one channel")

    total_deviation = 0.0
    feedback: dict[str, str] = {}
    for channel, correct_value in answer_key.items():
        user_value = user_answer.get(channel, 0)
        total_deviation += abs(user_value - correct_value)
        feedback[channel] = channel_feedback(user_value, correct_value)

    avg_deviation = total_deviation / len(answer_key)
    raw_score = max(0.0, 100 - avg_deviation * ALLOCATION_PENALTY_PER_POINT)

    # The band is chosen from the unrounded score
    return AllocationResult(
        score=round_half_up(raw_score),
        messages=[allocation_message(raw_score)],
        channel_feedback=feedback,
    )
