"""
Scoring sub-package

Provides the allocation and projection evaluators and their shared policy helpers.
"""

from marketing_trainer.domain.value_objects import (
    AllocationResult,
    MetricResult,
    ProjectionResult,
)
from marketing_trainer.scoring.allocation import (
    allocation_message,
    channel_feedback,
    evaluate_allocation,
)
from marketing_trainer.scoring.projection import (
    evaluate_projection,
    metric_contribution,
    metric_deviation,
    projection_message,
)
from marketing_trainer.scoring.policy import (
    band_message,
    banded_contribution,
    relative_deviation_percent,
    round_half_up,
)

__all__ = [
    # value objects (re-exported from domain)
    "AllocationResult",
    "MetricResult",
    "ProjectionResult",
    # allocation
    "allocation_message",
    "channel_feedback",
    "evaluate_allocation",
    # projection
    "evaluate_projection",
    "metric_contribution",
    "metric_deviation",
    "projection_message",
    # policy
    "band_message",
    "banded_contribution",
    "relative_deviation_percent",
    "round_half_up",
]
