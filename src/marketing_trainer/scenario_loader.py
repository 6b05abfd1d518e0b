"""
Scenario Loader

Loads practice scenarios from scenario pack JSON files and validates them
into typed records.
"""

import json
from dataclasses import dataclass
from pathlib import Path

from marketing_trainer.domain.entities import AllocationScenario, ProjectionScenario


@dataclass
class ScenarioPack:
    """Scenario pack definition"""
    pack_id: str
    pack_name: str
    description: str
    version: str
    allocation_scenarios: list[AllocationScenario]
    projection_scenarios: list[ProjectionScenario]


def _require(data: dict, fields: list[str], context: str) -> None:
    for field in fields:
        if field not in data:
            raise KeyError(f"Required field '{field}' is missing: {context}")


def _numeric_mapping(data: dict, name: str, context: str) -> dict[str, float]:
    """Validate a {name: number} mapping"""
    mapping = data[name]
    if not isinstance(mapping, dict):
        raise ValueError(f"'{name}' must be an object: {context}")
    result = {}
    for key, value in mapping.items():
        # bool is an int subclass but never a valid amount
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"'{name}.{key}' must be a number, got {value!r}: {context}")
        result[str(key)] = float(value)
    return result


def _parse_allocation_scenario(data: dict) -> AllocationScenario:
    """
    Create an AllocationScenario from dictionary data

    Args:
        data: Scenario data dictionary

    Returns:
        AllocationScenario
    """
    context = data.get("scenario_id", "<allocation scenario>")
    _require(
        data,
        ["scenario_id", "level", "title", "description", "total_budget", "goal", "channels", "answer_key"],
        context,
    )
    return AllocationScenario(
        scenario_id=str(data["scenario_id"]),
        level=data["level"],
        title=data["title"],
        description=data["description"],
        total_budget=float(data["total_budget"]),
        goal=data["goal"],
        channels=list(data["channels"]),
        answer_key=_numeric_mapping(data, "answer_key", context),
        created_at=data.get("created_at", ""),
    )


def _parse_projection_scenario(data: dict) -> ProjectionScenario:
    """
    Create a ProjectionScenario from dictionary data

    Args:
        data: Scenario data dictionary

    Returns:
        ProjectionScenario
    """
    context = data.get("scenario_id", "<projection scenario>")
    _require(data, ["scenario_id", "title", "description", "metrics", "answer_key"], context)
    return ProjectionScenario(
        scenario_id=str(data["scenario_id"]),
        title=data["title"],
        description=data["description"],
        metrics=_numeric_mapping(data, "metrics", context),
        answer_key=_numeric_mapping(data, "answer_key", context),
        hints={str(k): str(v) for k, v in (data.get("hints") or {}).items()},
        created_at=data.get("created_at", ""),
    )


def parse_scenario_pack(data: dict, source: str = "<dict>") -> ScenarioPack:
    """
    Create a ScenarioPack from decoded JSON

    Args:
        data: Decoded scenario pack
        source: Name used in error messages

    Returns:
        ScenarioPack

    Raises:
        KeyError: If a required field is missing
        ValueError: If a scenario is invalid or a scenario_id is duplicated
    """
    _require(data, ["pack_id", "pack_name", "description", "version"], source)

    allocation = [_parse_allocation_scenario(s) for s in data.get("allocation_scenarios", [])]
    projection = [_parse_projection_scenario(s) for s in data.get("projection_scenarios", [])]

    seen: set[str] = set()
    for scenario in [*allocation, *projection]:
        if scenario.scenario_id in seen:
            raise ValueError(f"Duplicate scenario_id '{scenario.scenario_id}': {source}")
        seen.add(scenario.scenario_id)

    return ScenarioPack(
        pack_id=data["pack_id"],
        pack_name=data["pack_name"],
        description=data["description"],
        version=data["version"],
        allocation_scenarios=allocation,
        projection_scenarios=projection,
    )


def load_scenario_pack(file_path: str) -> ScenarioPack:
    """
    Load a scenario pack JSON

    Args:
        file_path: Path to the scenario pack JSON file

    Returns:
        ScenarioPack

    Raises:
        FileNotFoundError: If the file does not exist
        KeyError: If a required field is missing
        ValueError: If a scenario is invalid
    """
    with open(file_path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return parse_scenario_pack(data, source=str(file_path))


def get_available_scenario_packs(scenarios_dir: str = "scenarios") -> list[dict]:
    """
    Get a list of available scenario packs

    Args:
        scenarios_dir: Directory containing scenario pack JSON files

    Returns:
        list[dict]: [{"pack_id", "pack_name", "description", "file_path",
            "allocation_count", "projection_count"}, ...]
    """
    scenarios_path = Path(scenarios_dir)
    if not scenarios_path.exists():
        return []

    packs = []
    for json_file in sorted(scenarios_path.glob("scenario_pack_*.json")):
        try:
            with open(json_file, "r", encoding="utf-8") as f:
                data = json.load(f)
            if "pack_id" in data:
                packs.append({
                    "pack_id": data["pack_id"],
                    "pack_name": data.get("pack_name", data["pack_id"]),
                    "description": data.get("description", ""),
                    "file_path": str(json_file),
                    "allocation_count": len(data.get("allocation_scenarios", [])),
                    "projection_count": len(data.get("projection_scenarios", [])),
                })
        except (json.JSONDecodeError, KeyError):
            continue

    return packs
