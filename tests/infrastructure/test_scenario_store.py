"""
Tests for scenario stores (infrastructure/scenario_store.py)
"""

from pathlib import Path

import pytest

from marketing_trainer.domain.entities import AllocationScenario, ProjectionScenario
from marketing_trainer.infrastructure.scenario_store import (
    InMemoryScenarioStore,
    JsonScenarioStore,
    ScenarioStoreError,
)
from marketing_trainer.scenario_loader import ScenarioPack

DEFAULT_PACK = Path(__file__).resolve().parents[2] / "scenarios" / "scenario_pack_default.json"


def _allocation(scenario_id, level, created_at):
    return AllocationScenario(
        scenario_id=scenario_id, level=level, title=scenario_id, description="d",
        total_budget=1000, goal="g", channels=["A", "B"], answer_key={"A": 60, "B": 40},
        created_at=created_at,
    )


def _projection(scenario_id, created_at):
    return ProjectionScenario(
        scenario_id=scenario_id, title=scenario_id, description="d",
        metrics={}, answer_key={"CAC": 50}, created_at=created_at,
    )


def _pack():
    return ScenarioPack(
        pack_id="p", pack_name="p", description="d", version="1.0",
        allocation_scenarios=[
            _allocation("late_basic", "Basic", "2025-02-01"),
            _allocation("advanced", "Advanced", "2025-01-15"),
            _allocation("early_basic", "Basic", "2025-01-01"),
            _allocation("same_time_basic", "Basic", "2025-02-01"),
        ],
        projection_scenarios=[
            _projection("second", "2025-03-02"),
            _projection("first", "2025-03-01"),
        ],
    )


class TestInMemoryScenarioStore:

    def test_ordered_by_created_at(self):
        store = InMemoryScenarioStore(_pack())
        ids = [s.scenario_id for s in store.fetch_allocation_scenarios()]
        assert ids == ["early_basic", "advanced", "late_basic", "same_time_basic"]

    def test_level_filter(self):
        store = InMemoryScenarioStore(_pack())
        ids = [s.scenario_id for s in store.fetch_allocation_scenarios("Basic")]
        assert ids == ["early_basic", "late_basic", "same_time_basic"]

    def test_unknown_level_is_empty(self):
        store = InMemoryScenarioStore(_pack())
        assert store.fetch_allocation_scenarios("Intermediate") == []

    def test_projection_order(self):
        store = InMemoryScenarioStore(_pack())
        assert [s.scenario_id for s in store.fetch_projection_scenarios()] == ["first", "second"]


class TestJsonScenarioStore:

    def test_default_pack(self):
        store = JsonScenarioStore(str(DEFAULT_PACK))
        basic = store.fetch_allocation_scenarios("Basic")
        assert [s.title for s in basic] == ["SaaS Lead Generation Campaign", "E-commerce Product Launch"]
        assert len(store.fetch_projection_scenarios()) == 3

    def test_missing_file(self, tmp_path):
        store = JsonScenarioStore(str(tmp_path / "missing.json"))
        with pytest.raises(ScenarioStoreError, match="missing.json"):
            store.fetch_projection_scenarios()

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "scenario_pack_bad.json"
        path.write_text("{", encoding="utf-8")
        store = JsonScenarioStore(str(path))
        with pytest.raises(ScenarioStoreError):
            store.fetch_allocation_scenarios()

    def test_loaded_once(self, tmp_path):
        path = tmp_path / "scenario_pack_copy.json"
        path.write_text(DEFAULT_PACK.read_text(encoding="utf-8"), encoding="utf-8")
        store = JsonScenarioStore(str(path))
        store.fetch_projection_scenarios()
        path.unlink()
        assert len(store.fetch_projection_scenarios()) == 3
