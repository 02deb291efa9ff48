"""Guess-evaluation and game-state engine."""

from .models import (
    WORD_LENGTH,
    MAX_ROUNDS,
    ALPHABET,
    LetterStatus,
    Feedback,
    GuessRecord,
    GameStatus,
)
from .errors import (
    GameError,
    UnexpectedWordLength,
    UnknownWord,
    BadAnswer,
    HintUnused,
    describe_error,
)
from .game import Game
from .hint import find_hint

__all__ = [
    "WORD_LENGTH",
    "MAX_ROUNDS",
    "ALPHABET",
    "LetterStatus",
    "Feedback",
    "GuessRecord",
    "GameStatus",
    "GameError",
    "UnexpectedWordLength",
    "UnknownWord",
    "BadAnswer",
    "HintUnused",
    "describe_error",
    "Game",
    "find_hint",
]
