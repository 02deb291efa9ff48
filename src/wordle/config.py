"""
Game configuration.

Settings come from an optional YAML (or JSON) config file and from command
line options; options given on the command line win over the file.

Example config.yaml:
  random: true
  difficult: true
  day: 5
  seed: 42
  final_set: words/final.txt
  acceptable_set: words/acceptable.txt
  state: state.json
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

DEFAULT_DAY = 1
DEFAULT_SEED = 19260817


class GameConfig(BaseModel):
    """Configuration for a playing session."""
    model_config = ConfigDict(extra="forbid")

    word: Optional[str] = None
    random: bool = False
    difficult: bool = False
    stats: bool = False
    day: Optional[int] = Field(default=None, ge=1)
    seed: Optional[int] = None
    final_set: Optional[Path] = None
    acceptable_set: Optional[Path] = None
    state: Optional[Path] = None
    verbose: bool = False

    @property
    def start_day(self) -> int:
        """Zero-based index of the first answer in random mode."""
        return (self.day if self.day is not None else DEFAULT_DAY) - 1

    @property
    def random_seed(self) -> int:
        return self.seed if self.seed is not None else DEFAULT_SEED

    def merge(self, overrides: Dict[str, Any]) -> "GameConfig":
        """Return a copy with every override that is not None applied."""
        update = {key: value for key, value in overrides.items() if value is not None}
        return GameConfig.model_validate({**self.model_dump(), **update})

    def validate_against(self, answer_list: Sequence[str]) -> List[str]:
        """
        Check option combinations and values that depend on the answer list.

        Returns:
            Error messages, empty when the configuration is usable
        """
        errors: List[str] = []

        if self.word is not None and self.random:
            errors.append("Conflicting arguments: --word and --random")
        if self.seed is not None and not self.random:
            errors.append("--seed requires --random")
        if self.day is not None and not self.random:
            errors.append("--day requires --random")
        if self.day is not None and self.day > len(answer_list):
            errors.append("Day should be less than or equal to the number of answers!")
        if self.word is not None and self.word.upper() not in answer_list:
            errors.append("Provided answer is not in the answer words list!")

        return errors


def load_config(config_path: Union[str, Path]) -> GameConfig:
    """Load game configuration from a YAML or JSON file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    logger.debug("Loaded config from %s: %s", path, data)
    return GameConfig(**data)
