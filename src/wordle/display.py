"""Terminal rendering for the command-line front end.

Two output flavours exist: coloured, human oriented output when stdout is a
terminal, and a terse plain-text protocol otherwise (one character per letter
status, see LetterStatus.to_char).
"""

from typing import Dict, Iterable, List, Sequence

from colorama import Fore, Style

from .engine.models import ALPHABET, MAX_ROUNDS, WORD_LENGTH, GuessRecord, LetterStatus
from .stats import Stats

KEYBOARD_ROWS = ("QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM")

STATUS_COLORS: Dict[LetterStatus, str] = {
    LetterStatus.UNKNOWN: Fore.LIGHTBLACK_EX,
    LetterStatus.RED: Fore.RED,
    LetterStatus.YELLOW: Fore.YELLOW,
    LetterStatus.GREEN: Fore.GREEN,
}


def styled(text: str, color: str = "", bold: bool = True) -> str:
    """Wrap text in colorama colour codes."""
    return f"{Style.BRIGHT if bold else ''}{color}{text}{Style.RESET_ALL}"


def colored_letter(letter: str, status: LetterStatus) -> str:
    return f"{STATUS_COLORS[status]}{letter}{Style.RESET_ALL}"


def status_chars(statuses: Iterable[LetterStatus]) -> str:
    return "".join(status.to_char() for status in statuses)


def render_plain_guess(record: GuessRecord, alphabet: Dict[str, LetterStatus]) -> str:
    """Plain output after a guess: feedback, a space, then the 26 letter statuses."""
    return f"{status_chars(record.feedback)} {status_chars(alphabet[c] for c in ALPHABET)}"


def render_guess_history(guesses: Sequence[GuessRecord]) -> str:
    """All rounds of the board, unused rounds shown as placeholders."""
    lines: List[str] = []
    for i in range(MAX_ROUNDS):
        if i < len(guesses):
            record = guesses[i]
            lines.append("".join(
                colored_letter(letter, status)
                for letter, status in zip(record.word, record.feedback)
            ))
        else:
            lines.append(f"{Style.DIM}{'_' * WORD_LENGTH}{Style.RESET_ALL}")
    return "\n".join(lines)


def render_keyboard(alphabet: Dict[str, LetterStatus]) -> str:
    return "\n".join(
        "".join(colored_letter(letter, alphabet[letter]) for letter in row)
        for row in KEYBOARD_ROWS
    )


def render_stats(stats: Stats, is_tty: bool) -> str:
    """Statistics block printed after each game."""
    favorites = stats.favorite_words()

    if not is_tty:
        lines = [f"{stats.wins} {stats.fails} {stats.average_tries:.2f}"]
        lines.append(" ".join(f"{word} {count}" for word, count in favorites))
        return "\n".join(lines)

    lines = [
        styled("Statistics:", Fore.YELLOW),
        f"{styled('Wins:', Fore.GREEN)} {stats.wins} {styled('Fails:', Fore.RED)} {stats.fails}",
        f"{styled('Average tries of games won:')} {stats.average_tries:.2f}",
        styled("Most frequently used words:", Fore.BLUE),
    ]
    for word, count in favorites:
        lines.append(f"    {styled(word, Fore.MAGENTA)}: used {count} times")
    return "\n".join(lines)
