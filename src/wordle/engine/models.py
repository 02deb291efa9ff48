"""
Pydantic models for the game engine.

This module contains the value types (letter statuses, guess records, game
status) shared by the engine, the statistics layer and the front end. The
Game class itself lives in game.py.
"""

import string
from enum import IntEnum
from typing import List, Optional, Literal
from pydantic import BaseModel, Field


WORD_LENGTH = 5
MAX_ROUNDS = 6
ALPHABET = string.ascii_uppercase


class LetterStatus(IntEnum):
    """Feedback for one letter. Ordered so that max() keeps the best status."""
    UNKNOWN = 0
    RED = 1
    YELLOW = 2
    GREEN = 3

    def to_char(self) -> str:
        """Single character used by the plain-text output."""
        return "XRYG"[self.value]


# Type aliases
Feedback = List[LetterStatus]
StatusKind = Literal["going", "won", "failed"]


class GuessRecord(BaseModel):
    """One accepted guess and the feedback it received."""
    word: str = Field(..., min_length=WORD_LENGTH, max_length=WORD_LENGTH)
    feedback: Feedback = Field(..., min_length=WORD_LENGTH, max_length=WORD_LENGTH)

    @property
    def is_correct(self) -> bool:
        return all(status == LetterStatus.GREEN for status in self.feedback)


class GameStatus(BaseModel):
    """
    Outcome of a guess.

    Attributes:
        kind: "going", "won" or "failed"
        round: Round the game was won in (only for "won")
        answer: The answer, revealed when the game is lost (only for "failed")
    """
    kind: StatusKind = "going"
    round: Optional[int] = None
    answer: Optional[str] = None

    @classmethod
    def going(cls) -> "GameStatus":
        return cls(kind="going")

    @classmethod
    def won(cls, round: int) -> "GameStatus":
        return cls(kind="won", round=round)

    @classmethod
    def failed(cls, answer: str) -> "GameStatus":
        return cls(kind="failed", answer=answer)

    @property
    def is_over(self) -> bool:
        return self.kind != "going"
