"""
Standalone CLI for printing statistics from a saved state file.

Usage:
    python -m wordle.report state.json
    python -m wordle.report state.json --plain
"""

import argparse
import sys
from pathlib import Path

from colorama import Fore

from .display import render_stats, styled
from .stats import StateError, Stats


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="wordle-report",
        description="Print Wordle statistics from a saved state file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m wordle.report state.json
  python -m wordle.report state.json --plain
        """
    )
    parser.add_argument(
        "state",
        help="Path to the state JSON file"
    )
    parser.add_argument(
        "--plain", "-p",
        action="store_true",
        help="Plain output without colours"
    )

    args = parser.parse_args(argv)

    # Validate input file
    state_path = Path(args.state)
    if not state_path.exists():
        print(f"Error: State file not found: {args.state}", file=sys.stderr)
        return 1

    if not state_path.suffix == ".json":
        print("Warning: Input file doesn't have .json extension", file=sys.stderr)

    try:
        stats = Stats.load(state_path)
    except StateError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not args.plain:
        print(styled(f"Games played: {stats.games_played}", Fore.BLUE))
    print(render_stats(stats, is_tty=not args.plain))

    return 0


if __name__ == "__main__":
    sys.exit(main())
