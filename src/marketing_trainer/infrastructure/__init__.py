"""
Infrastructure Layer

Scenario sources and the progress log.
"""

from marketing_trainer.infrastructure.scenario_store import (
    InMemoryScenarioStore,
    JsonScenarioStore,
    ScenarioStore,
    ScenarioStoreError,
)
from marketing_trainer.infrastructure.progress_store import (
    CsvProgressStore,
    InMemoryProgressStore,
    ProgressStore,
    ProgressStoreError,
)

__all__ = [
    "InMemoryScenarioStore",
    "JsonScenarioStore",
    "ScenarioStore",
    "ScenarioStoreError",
    "CsvProgressStore",
    "InMemoryProgressStore",
    "ProgressStore",
    "ProgressStoreError",
]
