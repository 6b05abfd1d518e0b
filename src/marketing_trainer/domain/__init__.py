"""
Domain Layer

Defines constants, entities, and value objects that form the core of the business logic.
Has no dependencies on external libraries.
"""

from marketing_trainer.domain.constants import (
    ALLOCATION,
    LEVELS,
    PROJECTION,
    SCENARIO_KINDS,
)
from marketing_trainer.domain.entities import (
    AllocationScenario,
    ProgressRecord,
    ProjectionScenario,
)
from marketing_trainer.domain.value_objects import (
    AllocationResult,
    MetricResult,
    ProjectionResult,
)

__all__ = [
    # constants
    "ALLOCATION",
    "LEVELS",
    "PROJECTION",
    "SCENARIO_KINDS",
    # entities
    "AllocationScenario",
    "ProgressRecord",
    "ProjectionScenario",
    # value objects
    "AllocationResult",
    "MetricResult",
    "ProjectionResult",
]
