import bisect
import logging
from collections import Counter
from typing import Collection, Dict, List, Sequence
from pydantic import BaseModel, Field

from .errors import BadAnswer, HintUnused, UnexpectedWordLength, UnknownWord
from .models import (
    ALPHABET,
    MAX_ROUNDS,
    WORD_LENGTH,
    Feedback,
    GameStatus,
    GuessRecord,
    LetterStatus,
)

logger = logging.getLogger(__name__)


def _initial_alphabet() -> Dict[str, LetterStatus]:
    return {letter: LetterStatus.UNKNOWN for letter in ALPHABET}


def _contains(word_list: Collection[str], word: str) -> bool:
    """
    Membership test. Lists and tuples must be sorted, they are searched by
    bisection; an unsorted one can miss words it contains.
    """
    if isinstance(word_list, (list, tuple)):
        index = bisect.bisect_left(word_list, word)
        return index < len(word_list) and word_list[index] == word
    return word in word_list


class Game(BaseModel):
    """
    Manages the state of a single Wordle game.

    Grades guesses against the answer, enforces the difficult (hard) mode
    rules and keeps the cumulative keyboard state.

    Attributes:
        answer: The word to guess
        guesses: Accepted guesses with their feedback, oldest first
        alphabet: Best status seen so far for every letter
        difficult: Whether hard mode is enabled (may be toggled mid-game)
    """

    answer: str
    guesses: List[GuessRecord] = Field(default_factory=list)
    alphabet: Dict[str, LetterStatus] = Field(default_factory=_initial_alphabet)
    difficult: bool = False

    @classmethod
    def create(
        cls,
        answer: str,
        difficult: bool = False,
        answer_list: Collection[str] = (),
    ) -> "Game":
        """
        Factory method to start a new game.

        Args:
            answer: The answer word (already uppercased by the caller)
            difficult: Whether to start in hard mode
            answer_list: Words eligible to be answers

        Returns:
            A new Game with no guesses

        Raises:
            BadAnswer: If the answer is not in answer_list
        """
        if answer not in answer_list:
            raise BadAnswer(answer)
        return cls(answer=answer, difficult=difficult)

    @classmethod
    def restore(
        cls,
        answer: str,
        guesses: Sequence[str],
        answer_list: Collection[str],
        word_list: Collection[str],
        difficult: bool = False,
    ) -> "Game":
        """
        Rebuild a game by replaying a saved guess history.

        The alphabet is recomputed from the history, so only the answer and
        the guessed words need to be persisted.
        """
        game = cls.create(answer, difficult, answer_list)
        for word in guesses:
            game.guess(word, word_list)
        return game

    def get_round(self) -> int:
        """Number of guesses accepted so far."""
        return len(self.guesses)

    def get_guesses(self) -> List[GuessRecord]:
        return self.guesses

    def get_alphabet(self) -> Dict[str, LetterStatus]:
        return self.alphabet

    def set_difficult(self, difficult: bool) -> None:
        """Toggle hard mode without touching the history."""
        self.difficult = difficult

    @property
    def is_over(self) -> bool:
        if self.guesses and self.guesses[-1].is_correct:
            return True
        return self.get_round() >= MAX_ROUNDS

    def validate_guess(
        self,
        difficult: bool,
        strict: bool,
        word: str,
        word_list: Collection[str],
    ) -> None:
        """
        Check whether a word would make a valid guess. Never modifies the game.

        In difficult mode the word is checked against every earlier guess,
        since hard mode may have been switched on and off during the game.

        Args:
            difficult: Apply the hard mode rules
            strict: Also forbid letters known to be absent (beyond the count
                already revealed) and yellow letters in their known-wrong
                position. Used by the hint search.
            word: The candidate guess
            word_list: Acceptable guesses. A list or tuple must be sorted,
                it is searched by bisection; other containers use ``in``.

        Raises:
            UnknownWord: If the word is not in word_list
            HintUnused: If the word ignores revealed information
        """
        if not _contains(word_list, word):
            raise UnknownWord(word)

        if not difficult:
            return

        word_counter = Counter(word)
        for record in self.guesses:
            # Letters of this guess known to be in the answer
            revealed: Counter = Counter()
            for last_letter, status, letter in zip(record.word, record.feedback, word):
                if status == LetterStatus.GREEN:
                    if letter != last_letter:
                        raise HintUnused(word)
                    revealed[last_letter] += 1
                elif status == LetterStatus.YELLOW:
                    revealed[last_letter] += 1

            for letter, count in revealed.items():
                if word_counter[letter] < count:
                    raise HintUnused(word)

            if not strict:
                continue

            for last_letter, status, letter in zip(record.word, record.feedback, word):
                if status == LetterStatus.RED:
                    if word_counter[last_letter] != revealed[last_letter]:
                        raise HintUnused(word)
                elif status == LetterStatus.YELLOW:
                    if letter == last_letter:
                        raise HintUnused(word)

    def _grade(self, word: str) -> Feedback:
        """Feedback of a word of the right length against the answer."""
        remaining = Counter(self.answer)
        result: Feedback = [LetterStatus.UNKNOWN] * WORD_LENGTH

        # Exact matches first, so they cannot be claimed again as yellow
        for i, (letter, expected) in enumerate(zip(word, self.answer)):
            if letter == expected:
                result[i] = LetterStatus.GREEN
                remaining[letter] -= 1

        claimed: Counter = Counter()
        for i, letter in enumerate(word):
            if result[i] == LetterStatus.GREEN:
                continue
            claimed[letter] += 1
            if claimed[letter] <= remaining[letter]:
                result[i] = LetterStatus.YELLOW
            else:
                result[i] = LetterStatus.RED
        return result

    def _update_alphabet(self, word: str, feedback: Feedback) -> None:
        for letter, status in zip(word, feedback):
            self.alphabet[letter] = max(self.alphabet[letter], status)

    def guess(self, word: str, word_list: Collection[str]) -> GameStatus:
        """
        Make a guess.

        The game is only modified when the guess is accepted.

        Args:
            word: The guess, already uppercased by the caller
            word_list: Acceptable guesses, sorted if given as a list or tuple

        Returns:
            GameStatus after this guess

        Raises:
            UnexpectedWordLength: If the word is not WORD_LENGTH letters long
            UnknownWord: If the word is not in word_list
            HintUnused: If hard mode is on and the word ignores a hint
        """
        if len(word) != WORD_LENGTH:
            raise UnexpectedWordLength(word)

        self.validate_guess(self.difficult, False, word, word_list)

        feedback = self._grade(word)
        self._update_alphabet(word, feedback)
        record = GuessRecord(word=word, feedback=feedback)
        self.guesses.append(record)

        current_round = self.get_round()
        if record.is_correct:
            status = GameStatus.won(current_round)
        elif current_round >= MAX_ROUNDS:
            status = GameStatus.failed(self.answer)
        else:
            status = GameStatus.going()

        logger.debug(
            "Round %d: %s -> %s (%s)",
            current_round,
            word,
            "".join(s.to_char() for s in feedback),
            status.kind,
        )
        return status

    def get_state(self) -> Dict:
        """
        Get the current game state as a dictionary.

        Useful for serialization and logging.
        """
        return {
            "answer": self.answer,
            "guesses": [record.word for record in self.guesses],
            "round": self.get_round(),
            "difficult": self.difficult,
            "is_over": self.is_over,
        }
