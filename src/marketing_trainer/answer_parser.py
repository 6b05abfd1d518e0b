"""
Answer Parser

Converts raw form input into numeric answers before evaluation.

Unparseable input becomes 0, exactly like an explicit 0. This keeps scores
compatible with earlier progress logs, but it can hide a typo as a
deliberate zero, so every coerced field is logged and can be listed with
find_invalid_fields() for display.
"""

from __future__ import annotations

import logging
import math
import re

logger = logging.getLogger(__name__)

# Leading decimal number or "Infinity"; trailing text is ignored ("12.5%" -> 12.5).
# Out-of-range exponents overflow to infinity ("1e400" -> inf).
_NUMBER_PREFIX = re.compile(r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")


def _numeric_prefix(text: str) -> float | None:
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        return None
    return float(match.group(1))


def parse_number(raw: str | float | int | None) -> float:
    """
    Convert a raw input value to a number

    Args:
        raw: Text from a form field, a number, or None

    Returns:
        The parsed value (possibly infinite), or 0.0 when the input is blank,
        NaN, or has no numeric prefix
    """
    if raw is None:
        return 0.0
    if isinstance(raw, (int, float)):
        return 0.0 if math.isnan(raw) else float(raw)
    value = _numeric_prefix(str(raw))
    return 0.0 if value is None else value


def is_blank(raw: str | float | int | None) -> bool:
    """True when a field has not been filled in"""
    return raw is None or (isinstance(raw, str) and not raw.strip())


def find_invalid_fields(raw_answers: dict[str, str | float | None]) -> list[str]:
    """
    List fields that were filled in but are not numbers

    Blank fields are not reported; they are unanswered, not invalid.
    """
    invalid = []
    for key, raw in raw_answers.items():
        if is_blank(raw) or isinstance(raw, (int, float)):
            continue
        if _numeric_prefix(str(raw)) is None:
            invalid.append(key)
    return invalid


def parse_answers(raw_answers: dict[str, str | float | None]) -> dict[str, float]:
    """
    Convert every field of a submission to a number

    Args:
        raw_answers: {field name: raw input}

    Returns:
        {field name: number}, with unparseable fields coerced to 0.0
    """
    for key in find_invalid_fields(raw_answers):
        logger.warning("Field '%s' is not a number (%r); treating it as 0.", key, raw_answers[key])
    return {key: parse_number(raw) for key, raw in raw_answers.items()}
