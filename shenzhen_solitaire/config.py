"""Configuration management."""

from enum import Enum
from pathlib import Path

import yaml
from pydantic import BaseModel


class EmptyPilePolicy(str, Enum):
    """Which numbered cards an empty discard pile accepts."""

    RANK_ONE = "rank_one"  # Only a 1 may start a pile
    ANY_RANK = "any_rank"  # Any numbered card may start a pile


class RulesConfig(BaseModel):
    """Rules configuration."""

    empty_pile_policy: EmptyPilePolicy = EmptyPilePolicy.RANK_ONE


class DealConfig(BaseModel):
    """Deal configuration."""

    seed: int | None = None  # None draws a fresh shuffle every game


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"


class MoveLogConfig(BaseModel):
    """Move log (JSONL) configuration."""

    enabled: bool = False
    output_path: str = "moves.jsonl"


class Config(BaseModel):
    """Root configuration."""

    rules: RulesConfig = RulesConfig()
    deal: DealConfig = DealConfig()
    logging: LoggingConfig = LoggingConfig()
    move_log: MoveLogConfig = MoveLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
