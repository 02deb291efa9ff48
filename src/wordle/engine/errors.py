"""Error taxonomy for the game engine.

Every error is a recoverable condition raised by the engine and handled by
the caller. The exception class carries the identity (and a stable ``code``);
the wording shown to a player comes from :func:`describe_error`.
"""

from typing import Dict

from .models import WORD_LENGTH


class GameError(ValueError):
    """Base class for all engine errors."""
    code = "GAME_ERROR"


class UnexpectedWordLength(GameError):
    """The guess does not have exactly WORD_LENGTH letters."""
    code = "UNEXPECTED_WORD_LENGTH"


class UnknownWord(GameError):
    """The guess is not in the acceptable word list."""
    code = "UNKNOWN_WORD"


class BadAnswer(GameError):
    """The proposed answer is not in the final answer list."""
    code = "BAD_ANSWER"


class HintUnused(GameError):
    """The guess ignores information revealed by earlier guesses (hard mode)."""
    code = "HINT_UNUSED"


_MESSAGES: Dict[str, str] = {
    UnexpectedWordLength.code: f"The length of a word should be {WORD_LENGTH}.",
    UnknownWord.code: "Unknown word, please try again.",
    BadAnswer.code: "That seems not suitable for a Wordle game. Maybe pick another?",
    HintUnused.code: "You must use the hint in difficult mode.",
}


def describe_error(error: GameError) -> str:
    """Human readable message for an engine error."""
    return _MESSAGES.get(error.code, str(error) or error.code)
