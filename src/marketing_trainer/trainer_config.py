"""
Trainer Configuration

Manages loading from environment variables and default values.
"""

import os
from dataclasses import dataclass, field, asdict

from marketing_trainer.domain.constants import (
    HINT_FAILURE_SCORE,
    HINT_UNLOCK_FAILURES,
    PASSING_SCORE,
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_int(key: str, default: int) -> int:
    """Convert an environment variable to int"""
    val = os.environ.get(key)
    if val is None:
        return default
    try:
        return int(val)
    except ValueError:
        raise ValueError(f"The value '{val}' of environment variable '{key}' cannot be converted to an integer.")


def _env_str(key: str, default: str) -> str:
    """Get an environment variable as a string"""
    return os.environ.get(key, default)


@dataclass
class StorageConfig:
    """Scenario source and progress log locations"""
    scenario_pack: str = "scenarios/scenario_pack_default.json"
    progress_path: str = "results/user_progress.csv"


@dataclass
class PracticeConfig:
    """Session rules"""
    hint_unlock_failures: int = HINT_UNLOCK_FAILURES  # Failed submissions before hints unlock
    hint_failure_score: int = HINT_FAILURE_SCORE      # Scores below this count as failed
    passing_score: int = PASSING_SCORE                # Feedback shown as success from this score

    def __post_init__(self):
        if self.hint_unlock_failures < 0:
            raise ValueError("hint_unlock_failures must be non-negative")
        for name in ("hint_failure_score", "passing_score"):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ValueError(f"{name} must be between 0 and 100")


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"

    def __post_init__(self):
        self.level = self.level.upper()
        if self.level not in _LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.level}. Valid values: {list(_LOG_LEVELS)}")


@dataclass
class TrainerConfig:
    """Overall trainer configuration"""
    storage: StorageConfig = field(default_factory=StorageConfig)
    practice: PracticeConfig = field(default_factory=PracticeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> dict:
        """Convert to dictionary format"""
        return {"trainer_config": asdict(self)}

    @classmethod
    def from_dict(cls, data: dict) -> "TrainerConfig":
        """Create from dictionary (handles presence/absence of trainer_config key)"""
        config_data = data.get("trainer_config", data)
        return cls(
            storage=StorageConfig(**config_data.get("storage", {})),
            practice=PracticeConfig(**config_data.get("practice", {})),
            logging=LoggingConfig(**config_data.get("logging", {})),
        )


def load_config() -> TrainerConfig:
    """
    Load configuration from environment variables

    Uses default values when environment variables are not set.

    Returns:
        TrainerConfig
    """
    storage = StorageConfig(
        scenario_pack=_env_str("TRAINER_SCENARIO_PACK", "scenarios/scenario_pack_default.json"),
        progress_path=_env_str("TRAINER_PROGRESS_PATH", "results/user_progress.csv"),
    )
    practice = PracticeConfig(
        hint_unlock_failures=_env_int("TRAINER_HINT_UNLOCK_FAILURES", HINT_UNLOCK_FAILURES),
        hint_failure_score=_env_int("TRAINER_HINT_FAILURE_SCORE", HINT_FAILURE_SCORE),
        passing_score=_env_int("TRAINER_PASSING_SCORE", PASSING_SCORE),
    )
    logging_config = LoggingConfig(level=_env_str("TRAINER_LOG_LEVEL", "INFO"))
    return TrainerConfig(storage=storage, practice=practice, logging=logging_config)
