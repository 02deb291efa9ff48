"""Hint search: suggest a word consistent with everything revealed so far."""

import random
from typing import Optional, Sequence

from .errors import GameError
from .game import Game


def find_hint(
    game: Game,
    word_list: Sequence[str],
    rng: Optional[random.Random] = None,
) -> Optional[str]:
    """
    Pick a random acceptable word that passes the strict hard mode check.

    Args:
        game: The game in progress (not modified)
        word_list: Sorted acceptable words
        rng: Optional random generator for reproducibility

    Returns:
        A suggested word, or None if no acceptable word qualifies
    """
    rng = rng or random.Random()
    candidates = list(word_list)
    rng.shuffle(candidates)

    for word in candidates:
        try:
            game.validate_guess(True, True, word, word_list)
        except GameError:
            continue
        return word
    return None
