"""
Shared scoring policy

Rounding, band lookup, and deviation helpers used by both evaluators.
"""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves rounding up

    Python's round() uses banker's rounding (round(86.5) == 86); scores and
    feedback amounts are rounded half-up instead (86.5 -> 87).

    Args:
        value: Value to round

    Returns:
        Rounded integer
    """
    return int(math.floor(value + 0.5))


def band_message(score: float, bands: list[tuple[float, str]], fallback: str) -> str:
    """
    Select a message from (minimum score, message) bands, highest band first

    Args:
        score: Score to classify
        bands: (minimum score, message) pairs in descending order
        fallback: Message used when no band matches

    Returns:
        The message of the first band whose minimum the score reaches
    """
    for minimum, message in bands:
        if score >= minimum:
            return message
    return fallback


def relative_deviation_percent(user_value: float, correct_value: float, zero_key_deviation: float = 100) -> float:
    """
    Relative deviation of an answer from the correct value, in percent

    A correct value of 0 cannot be divided by: an answer of 0 is exact (0),
    anything else deviates by zero_key_deviation.
    """
    if correct_value == 0:
        return 0.0 if user_value == 0 else float(zero_key_deviation)
    return abs(user_value - correct_value) / abs(correct_value) * 100


def banded_contribution(deviation: float, bands: list[tuple[float, int]], floor: int) -> int:
    """
    Map a deviation to a score contribution by step bands

    Args:
        deviation: Non-negative deviation
        bands: (maximum deviation, contribution) pairs in ascending order;
            a deviation equal to a band's maximum belongs to that band
        floor: Contribution when the deviation exceeds every band

    Returns:
        Score contribution
    """
    for maximum, contribution in bands:
        if deviation <= maximum:
            return contribution
    return floor
