"""
Practice Session

Explicit per-user session state: the scenario list being worked through,
the attempt counter, and the failed-attempt count that unlocks hints.
The evaluators never see this state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from marketing_trainer.domain.constants import (
    ALLOCATION,
    HINT_FAILURE_SCORE,
    HINT_UNLOCK_FAILURES,
    PROJECTION,
    SCENARIO_KINDS,
)
from marketing_trainer.domain.entities import AllocationScenario, ProjectionScenario
from marketing_trainer.domain.value_objects import AllocationResult, ProjectionResult
from marketing_trainer.infrastructure.scenario_store import ScenarioStore, ScenarioStoreError

logger = logging.getLogger(__name__)


def load_scenarios(
    store: ScenarioStore,
    kind: str,
    level: str | None = None,
) -> list[AllocationScenario] | list[ProjectionScenario]:
    """
    Fetch scenarios for a mode

    A failed fetch is logged and reported as "no scenarios available".

    Args:
        store: Scenario source
        kind: "allocation" or "projection"
        level: Difficulty filter (allocation only)

    Returns:
        Scenarios oldest first, or an empty list
    """
    if kind not in SCENARIO_KINDS:
        raise ValueError(f"Invalid scenario kind: {kind}. Valid values: {SCENARIO_KINDS}")
    try:
        if kind == ALLOCATION:
            return store.fetch_allocation_scenarios(level)
        return store.fetch_projection_scenarios()
    except ScenarioStoreError as e:
        logger.warning("Could not load %s scenarios: %s", kind, e)
        return []


@dataclass
class PracticeSession:
    """State of one user working through one mode"""
    user_name: str
    kind: str
    scenarios: list = field(default_factory=list)
    level: str | None = None
    index: int = 0
    attempt_number: int = 1
    failed_attempts: int = 0
    last_result: AllocationResult | ProjectionResult | None = None
    revealed_hints: set[str] = field(default_factory=set)

    def __post_init__(self):
        if not self.user_name.strip():
            raise ValueError("user_name must not be blank")
        self.user_name = self.user_name.strip()
        if self.kind not in SCENARIO_KINDS:
            raise ValueError(f"Invalid scenario kind: {self.kind}. Valid values: {SCENARIO_KINDS}")

    @classmethod
    def start(
        cls,
        user_name: str,
        kind: str,
        store: ScenarioStore,
        level: str | None = None,
    ) -> "PracticeSession":
        """Create a session positioned on the first available scenario"""
        scenarios = load_scenarios(store, kind, level)
        return cls(user_name=user_name, kind=kind, scenarios=scenarios, level=level)

    @property
    def current_scenario(self) -> AllocationScenario | ProjectionScenario | None:
        if not self.scenarios:
            return None
        return self.scenarios[self.index]

    @property
    def is_empty(self) -> bool:
        return not self.scenarios

    @property
    def has_next(self) -> bool:
        return self.index < len(self.scenarios) - 1

    @property
    def is_submitted(self) -> bool:
        return self.last_result is not None

    def select(self, index: int) -> None:
        """Move to a scenario and start its attempts over"""
        if not 0 <= index < len(self.scenarios):
            raise IndexError(f"Scenario index {index} out of range (0-{len(self.scenarios) - 1})")
        self.index = index
        self.attempt_number = 1
        self.failed_attempts = 0
        self.last_result = None
        self.revealed_hints = set()

    def next_scenario(self) -> bool:
        """Advance to the next scenario; returns False at the end of the list"""
        if not self.has_next:
            return False
        self.select(self.index + 1)
        return True

    def try_again(self) -> None:
        """Clear the result and start a new attempt on the same scenario"""
        self.last_result = None
        self.attempt_number += 1

    def register_score(self, score: int, failure_score: int = HINT_FAILURE_SCORE) -> None:
        """Count a submission scoring below failure_score as failed"""
        if score < failure_score:
            self.failed_attempts += 1

    def can_show_hints(self, unlock_after: int = HINT_UNLOCK_FAILURES) -> bool:
        return self.kind == PROJECTION and self.failed_attempts >= unlock_after

    def toggle_hint(self, metric: str, unlock_after: int = HINT_UNLOCK_FAILURES) -> bool:
        """
        Show or hide the hint for a metric

        Returns:
            True if the hint is now visible
        """
        scenario = self.current_scenario
        if not self.can_show_hints(unlock_after) or scenario is None or not scenario.hint_for(metric):
            return False
        if metric in self.revealed_hints:
            self.revealed_hints.discard(metric)
            return False
        self.revealed_hints.add(metric)
        return True
