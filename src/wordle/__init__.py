"""A Wordle game: guess-evaluation engine, word lists, statistics and a terminal front end."""

from .engine import (
    Game,
    GameStatus,
    GuessRecord,
    LetterStatus,
    GameError,
    UnexpectedWordLength,
    UnknownWord,
    BadAnswer,
    HintUnused,
    describe_error,
    find_hint,
)
from .config import GameConfig, load_config
from .stats import Stats, StateError
from .words import WordLists, WordListError, load_word_lists

__all__ = [
    "Game",
    "GameStatus",
    "GuessRecord",
    "LetterStatus",
    "GameError",
    "UnexpectedWordLength",
    "UnknownWord",
    "BadAnswer",
    "HintUnused",
    "describe_error",
    "find_hint",
    "GameConfig",
    "load_config",
    "Stats",
    "StateError",
    "WordLists",
    "WordListError",
    "load_word_lists",
]
