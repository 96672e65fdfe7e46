"""
Main entry point for playing Boggle in the console.

Usage:
    python -m boggle.main
    python -m boggle.main configs/example.yaml --seed 7 --output results/game.json --verbose
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

import yaml

from .environment import GameSession, GameConfig, BoardGenerationError


def load_config(config_path: Optional[str]) -> GameConfig:
    """Load the game configuration from a YAML file, or the defaults when no path is given."""
    if config_path is None:
        return GameConfig()

    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def read_word_from_stdin() -> str:
    """Prompt for a word. End of input ends the turn."""
    try:
        return input("Find a word: ")
    except EOFError:
        return ""


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Play a game of Boggle in the console",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  language: en
  board_size: 4
  turns: 3
  turn_seconds: 60
  players:
    - Alice
    - Bob
  seed: 42
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults are used when omitted)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed, overrides the config file"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the game result JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Also print the game settings and where results are saved"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        if args.seed is not None:
            config = config.model_copy(update={"seed": args.seed})
        session = GameSession.create(config=config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    try:
        result = session.run(read_word_from_stdin, verbose=args.verbose, interactive=True)
    except BoardGenerationError as e:
        print(f"Error generating board: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        result = session.get_result()

    if args.output:
        session.save_result(args.output)
        if args.verbose:
            print(f"Results saved to: {args.output}")

    # Print summary
    print()
    print("=== Game Summary ===")
    print(f"Rounds played: {result.rounds_played}")
    print(f"Duration: {result.duration_seconds:.2f}s")
    for name, score in result.scores.items():
        print(f"{name}: {score} points")
    if result.winner:
        print(f"Winner: {result.winner}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
