"""
Main entry point for playing Wordle in the terminal.

Usage:
    python -m wordle.main
    python -m wordle.main --random --day 3 --seed 42 --stats
    python -m wordle.main --config config.yaml --difficult

When stdout is not a terminal the game speaks a plain-text protocol: one
line of letter statuses per accepted guess, INVALID for a rejected guess,
and CORRECT <round> / FAILED <ANSWER> when a game ends.
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

import colorama
import yaml
from colorama import Fore

from .config import GameConfig, load_config
from .display import (
    render_guess_history,
    render_keyboard,
    render_plain_guess,
    render_stats,
    styled,
)
from .engine import Game, GameError, describe_error, find_hint
from .stats import StateError, Stats
from .words import WordListError, WordLists, load_word_lists

logger = logging.getLogger(__name__)


class EndOfInput(Exception):
    """Standard input is exhausted."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordle",
        description="A Wordle game, refined",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  random: true
  day: 5
  seed: 42
  difficult: true
  stats: true
  state: state.json
        """
    )
    # Flags default to None so that only options given explicitly override the config file
    parser.add_argument(
        "--word", "-w",
        help="Specify the answer"
    )
    parser.add_argument(
        "--random", "-r",
        action="store_true", default=None,
        help="Randomly choose the answer"
    )
    parser.add_argument(
        "--difficult", "-D",
        action="store_true", default=None,
        help="Enter difficult mode, where you must guess according to the former result"
    )
    parser.add_argument(
        "--stats", "-t",
        action="store_true", default=None,
        help="Show statistics after each game"
    )
    parser.add_argument(
        "--day", "-d",
        type=int,
        help="Specify current day (random mode)"
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        help="Specify random seed (random mode)"
    )
    parser.add_argument(
        "--final-set", "-f",
        metavar="FILE",
        help="Specify the final answer list"
    )
    parser.add_argument(
        "--acceptable-set", "-a",
        metavar="FILE",
        help="Specify the acceptable word list"
    )
    parser.add_argument(
        "--state", "-S",
        metavar="FILE",
        help="Enable state saving and specify save file"
    )
    parser.add_argument(
        "--config", "-c",
        metavar="FILE",
        help="Specify default parameters from a YAML or JSON file"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true", default=None,
        help="Log debug information to stderr"
    )
    return parser


def load_settings(args: argparse.Namespace) -> GameConfig:
    """Combine the config file (if any) with the command line options."""
    config = load_config(args.config) if args.config else GameConfig()
    overrides = vars(args).copy()
    overrides.pop("config")
    return config.merge(overrides)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def read_line() -> str:
    """Read a line from stdin, trimmed."""
    line = sys.stdin.readline()
    if not line:
        raise EndOfInput()
    return line.strip()


def prompt(text: str) -> None:
    print(text, end="", flush=True)


class Session:
    """
    An interactive playing session: one game after another until the player
    quits or input runs out.
    """

    def __init__(
        self,
        config: GameConfig,
        word_lists: WordLists,
        answers: List[str],
        stats: Stats,
        is_tty: bool,
    ):
        self.config = config
        self.word_lists = word_lists
        self.answers = answers
        self.stats = stats
        self.is_tty = is_tty
        self.day = config.start_day
        self.rng = random.Random()

    def print_error(self, error: GameError) -> None:
        if self.is_tty:
            print(styled(describe_error(error), Fore.RED))
        else:
            print("INVALID")

    def choose_answer(self) -> Game:
        """Start the next game, asking for an answer if none is configured."""
        difficult = self.config.difficult
        final = self.word_lists.final

        if self.config.word is not None:
            game = Game.create(self.config.word.upper(), difficult, final)
        elif self.config.random:
            game = Game.create(self.answers[self.day], difficult, final)
        else:
            if self.is_tty:
                prompt(styled("Please choose an answer for the game: ", Fore.BLUE))
            while True:
                try:
                    game = Game.create(read_line().upper(), difficult, final)
                    break
                except GameError as e:
                    self.print_error(e)

        # Another day of playing wordle
        self.day = (self.day + 1) % len(self.answers)
        logger.debug("New game started (difficult=%s)", difficult)
        return game

    def play(self, game: Game) -> None:
        """Read guesses until the game is won or lost."""
        acceptable = self.word_lists.acceptable

        while True:
            if self.is_tty:
                prompt(styled(f"Guess {game.get_round() + 1}: ", Fore.BLUE, bold=False))

            word = read_line().upper()

            if word == "HINT":
                hint = find_hint(game, acceptable, self.rng)
                if hint is None:
                    print(styled("No hint available.", Fore.RED) if self.is_tty else "NONE")
                else:
                    print(styled(hint, Fore.BLUE) if self.is_tty else hint)
                continue

            try:
                status = game.guess(word, acceptable)
            except GameError as e:
                logger.debug("Rejected guess %r: %s", word, e.code)
                self.print_error(e)
                continue

            guesses = game.get_guesses()
            if self.is_tty:
                print(render_guess_history(guesses))
                print("--------------")
                print(render_keyboard(game.get_alphabet()))
            else:
                print(render_plain_guess(guesses[-1], game.get_alphabet()))

            if status.kind == "won":
                self.stats.win(guesses)
                if self.is_tty:
                    print(styled(f"You won in {status.round} guesses!", Fore.MAGENTA))
                else:
                    print(f"CORRECT {status.round}")
                return
            if status.kind == "failed":
                self.stats.fail(guesses, status.answer)
                if self.is_tty:
                    print(styled(f"You lose! The answer is: {status.answer}", Fore.RED))
                else:
                    print(f"FAILED {status.answer}")
                return

    def wants_another(self) -> bool:
        if self.is_tty and self.config.word is None:
            while True:
                prompt(f"Would you like to start a new game? {styled('[Y/N]', Fore.BLUE)} ")
                answer = read_line()
                if answer in ("Y", "y"):
                    print()
                    return True
                if answer in ("N", "n"):
                    return False
        if not self.is_tty:
            return read_line() == "Y"
        return False

    def greet(self) -> None:
        colors = (Fore.RED, Fore.LIGHTRED_EX, Fore.YELLOW, Fore.GREEN, Fore.BLUE, Fore.MAGENTA)
        title = "".join(styled(letter, color) for letter, color in zip("Wordle", colors))
        print(f"Welcome to {title}!")
        print("Note that you can type 'HINT' to get hints in the game!\n")
        prompt(styled("Could I have your name, please? ", Fore.BLUE))
        name = read_line()
        print(f"Welcome, {name}!\n")

    def run(self) -> int:
        try:
            if self.is_tty:
                self.greet()
            while True:
                game = self.choose_answer()
                self.play(game)
                if self.config.stats:
                    print(render_stats(self.stats, self.is_tty))
                if not self.wants_another():
                    break
        except EndOfInput:
            pass
        except StateError as e:
            return fail(str(e))

        if self.is_tty:
            print(styled("Goodbye!", Fore.GREEN))
        return 0


def fail(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    is_tty = sys.stdout.isatty()

    colorama.just_fix_windows_console()

    try:
        config = load_settings(args)
    except (OSError, ValueError, yaml.YAMLError) as e:
        return fail(f"Invalid configuration: {e}")

    configure_logging(config.verbose)

    # Word lists come first, the other options are validated against them
    try:
        word_lists = load_word_lists(config.final_set, config.acceptable_set)
    except WordListError as e:
        return fail(str(e))

    answers = list(word_lists.final)
    if config.random:
        random.Random(config.random_seed).shuffle(answers)

    errors = config.validate_against(word_lists.final)
    if errors:
        return fail(errors[0])

    try:
        stats = Stats.load(config.state)
    except StateError as e:
        return fail(f"{e}\nYou should consider deleting it.")

    session = Session(config, word_lists, answers, stats, is_tty)
    return session.run()


if __name__ == "__main__":
    sys.exit(main())
