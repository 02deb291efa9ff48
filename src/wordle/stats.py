"""
Game statistics and the persisted state file.

The state file is a JSON document listing every finished game:

    {
      "total_rounds": 2,
      "games": [
        {"answer": "CRANE", "guesses": ["SLATE", "CRANE"]},
        {"answer": "SPEED", "guesses": ["ERASE", ...]}
      ]
    }

Statistics are always rebuilt from the saved games, so the file holds no
derived data.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union
from pydantic import BaseModel, Field, ValidationError

from .engine.models import GuessRecord

logger = logging.getLogger(__name__)


class StateError(ValueError):
    """The state file exists but cannot be read as a saved state."""


class SavedGame(BaseModel):
    """A finished game as stored in the state file."""
    answer: str
    guesses: List[str] = Field(default_factory=list)

    @property
    def won(self) -> bool:
        return bool(self.guesses) and self.guesses[-1] == self.answer


class State(BaseModel):
    """Contents of the state file."""
    total_rounds: int = Field(default=0, ge=0)
    games: List[SavedGame] = Field(default_factory=list)


class Stats(BaseModel):
    """
    Statistics over all games played (and, with a state file, all games saved).

    Attributes:
        wins: Number of games won
        fails: Number of games lost
        tries: Total guesses spent on games that were won
        word_usage: How many times each word was guessed
        state: Saved state, only when persistence is enabled
        path: Location of the state file, only when persistence is enabled
    """

    wins: int = 0
    fails: int = 0
    tries: int = 0
    word_usage: Dict[str, int] = Field(default_factory=dict)
    state: Optional[State] = None
    path: Optional[Path] = None

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "Stats":
        """
        Create statistics, restoring them from a state file when one is given.

        A missing file starts a fresh state that will be created on the first
        finished game.

        Raises:
            StateError: If the file is not valid JSON or not a valid state
        """
        if path is None:
            return cls()

        path = Path(path)
        if not path.exists():
            logger.info("State file %s not found, starting fresh", path)
            return cls(state=State(), path=path)

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            state = State.model_validate(data)
        except OSError as e:
            raise StateError(f"Failed to load stats: '{path}' unreadable ({e.strerror})") from e
        except (json.JSONDecodeError, ValidationError, UnicodeDecodeError) as e:
            raise StateError(f"Failed to load stats: '{path}' broken") from e

        stats = cls(state=state, path=path)
        for game in state.games:
            stats._count(game.guesses, game.won)
        logger.debug("Restored %d games from %s", len(state.games), path)
        return stats

    @property
    def persistent(self) -> bool:
        return self.state is not None and self.path is not None

    @property
    def games_played(self) -> int:
        return self.wins + self.fails

    @property
    def average_tries(self) -> float:
        """Average number of guesses over the games that were won."""
        if self.wins == 0:
            return 0.0
        return self.tries / self.wins

    def favorite_words(self, limit: int = 5) -> List[Tuple[str, int]]:
        """Most used words, by usage count and then alphabetically."""
        ranked = sorted(self.word_usage.items(), key=lambda item: (-item[1], item[0]))
        return ranked[:limit]

    def win(self, guesses: Sequence[GuessRecord]) -> None:
        """Record a won game; the last guess is the answer."""
        words = [record.word for record in guesses]
        self._record(words[-1], words, won=True)

    def fail(self, guesses: Sequence[GuessRecord], answer: str) -> None:
        """Record a lost game."""
        words = [record.word for record in guesses]
        self._record(answer, words, won=False)

    def _count(self, words: Sequence[str], won: bool) -> None:
        if won:
            self.wins += 1
            self.tries += len(words)
        else:
            self.fails += 1
        for word in words:
            word = word.upper()
            self.word_usage[word] = self.word_usage.get(word, 0) + 1

    def _record(self, answer: str, words: List[str], won: bool) -> None:
        self._count(words, won)
        if self.persistent:
            self.state.games.append(SavedGame(answer=answer, guesses=words))
            self.state.total_rounds += 1
            self.save()

    def save(self) -> None:
        """
        Write the state file.

        Raises:
            StateError: If the file cannot be written
        """
        if not self.persistent:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(self.state.model_dump_json(indent=2))
        except OSError as e:
            raise StateError(f"Failed to save stats: '{self.path}' ({e.strerror})") from e
        logger.debug("Saved %d games to %s", len(self.state.games), self.path)
