"""
Domain Value Objects

Defines the immutable results produced by the evaluators.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AllocationResult:
    """Allocation evaluation result (score + feedback)"""
    score: int
    messages: list[str] = field(default_factory=list)
    channel_feedback: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class MetricResult:
    """Per-metric projection detail"""
    correct_value: float
    user_value: float
    is_correct: bool
    deviation_percent: float


@dataclass(frozen=True)
class ProjectionResult:
    """Projection evaluation result"""
    score: int
    per_metric: dict[str, MetricResult] = field(default_factory=dict)
    message: str = ""

    @property
    def correct_count(self) -> int:
        return sum(1 for r in self.per_metric.values() if r.is_correct)
