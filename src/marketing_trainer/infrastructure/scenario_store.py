"""
Scenario store

Read-only access to practice scenarios. JsonScenarioStore serves a scenario
pack file seeded out-of-band.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod

from marketing_trainer.domain.entities import AllocationScenario, ProjectionScenario
from marketing_trainer.scenario_loader import ScenarioPack, load_scenario_pack


class ScenarioStoreError(Exception):
    """Scenarios could not be fetched"""
    pass


def _by_created_at(scenarios: list) -> list:
    # sorted() is stable, so pack order breaks ties
    return sorted(scenarios, key=lambda s: s.created_at)


class ScenarioStore(ABC):
    """Abstract base class for scenario sources"""

    @abstractmethod
    def fetch_allocation_scenarios(self, level: str | None = None) -> list[AllocationScenario]:
        """Allocation scenarios (optionally of one level), oldest first"""
        pass

    @abstractmethod
    def fetch_projection_scenarios(self) -> list[ProjectionScenario]:
        """Projection scenarios, oldest first"""
        pass


class InMemoryScenarioStore(ScenarioStore):
    """Scenario store backed by an already-loaded ScenarioPack"""

    def __init__(self, pack: ScenarioPack):
        self.pack = pack

    def fetch_allocation_scenarios(self, level: str | None = None) -> list[AllocationScenario]:
        scenarios = self.pack.allocation_scenarios
        if level is not None:
            scenarios = [s for s in scenarios if s.level == level]
        return _by_created_at(scenarios)

    def fetch_projection_scenarios(self) -> list[ProjectionScenario]:
        return _by_created_at(self.pack.projection_scenarios)


class JsonScenarioStore(InMemoryScenarioStore):
    """Scenario store reading a scenario pack JSON file on first use"""

    def __init__(self, pack_path: str):
        self.pack_path = pack_path
        self._pack: ScenarioPack | None = None

    @property
    def pack(self) -> ScenarioPack:
        if self._pack is None:
            try:
                self._pack = load_scenario_pack(self.pack_path)
            except (OSError, json.JSONDecodeError, KeyError, ValueError) as e:
                raise ScenarioStoreError(f"Failed to load scenario pack '{self.pack_path}': {e}") from e
        return self._pack
