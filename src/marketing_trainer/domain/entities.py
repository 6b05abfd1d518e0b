"""
Domain Entities

Defines scenario records and the progress record appended per submission.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from marketing_trainer.domain.constants import LEVELS, REQUIRED_ALLOCATION_TOTAL, SCENARIO_KINDS


@dataclass
class AllocationScenario:
    """Budget allocation practice scenario"""
    scenario_id: str
    level: str
    title: str
    description: str
    total_budget: float
    goal: str
    channels: list[str]
    answer_key: dict[str, float]
    created_at: str = ""

    def __post_init__(self):
        if self.level not in LEVELS:
            raise ValueError(f"Invalid level: {self.level}. Valid values: {LEVELS}")
        if not self.answer_key:
            raise ValueError(f"answer_key must not be empty: {self.scenario_id}")
        if sorted(self.channels) != sorted(self.answer_key):
            raise ValueError(
                f"channels {self.channels} do not match answer_key channels "
                f"{list(self.answer_key)}: {self.scenario_id}"
            )
        out_of_range = [c for c, v in self.answer_key.items() if not 0 <= v <= REQUIRED_ALLOCATION_TOTAL]
        if out_of_range:
            raise ValueError(f"answer_key percentages must be within 0-100 {out_of_range}: {self.scenario_id}")
        if self.total_budget < 0:
            raise ValueError("total_budget must be non-negative")


@dataclass
class ProjectionScenario:
    """Projection builder scenario"""
    scenario_id: str
    title: str
    description: str
    metrics: dict[str, float]      # Display only, never evaluated
    answer_key: dict[str, float]
    hints: dict[str, str] = field(default_factory=dict)
    created_at: str = ""

    def __post_init__(self):
        if not self.answer_key:
            raise ValueError(f"answer_key must not be empty: {self.scenario_id}")

    def hint_for(self, metric: str) -> str | None:
        return self.hints.get(metric) or None


@dataclass(frozen=True)
class ProgressRecord:
    """One row of the progress log, created once per submission"""
    user_name: str
    scenario_kind: str
    scenario_id: str
    score: int
    user_answer: dict[str, float]
    attempt_number: int = 1
    completed_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def __post_init__(self):
        if self.scenario_kind not in SCENARIO_KINDS:
            raise ValueError(f"Invalid scenario_kind: {self.scenario_kind}. Valid values: {SCENARIO_KINDS}")
        if self.attempt_number < 1:
            raise ValueError("attempt_number must be a positive integer")
