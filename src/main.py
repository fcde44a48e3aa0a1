"""
Main entry point for playing Mots Mawon in a terminal.

Usage:
    python -m src.main config.yaml
    python -m src.main --dictionary dictionary.json --seed 42 --verbose
    python -m src.main config.yaml --no-play --output results/puzzle.json
"""

import argparse
import logging
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import List, Optional, TextIO

import yaml

from .game import GameConfig, MotsMawon, Session
from .utils.grid_visualizer import format_time, render_board, render_status, render_words
from .wordsearch.models import Cell


def load_config(config_path: str) -> GameConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def parse_gesture(line: str) -> Optional[List[Cell]]:
    """
    Parse a gesture typed as space-separated "row,col" pairs.

    Returns None if the line is not a gesture.
    """
    cells: List[Cell] = []
    for token in line.split():
        parts = token.split(",")
        if len(parts) != 2:
            return None
        try:
            cells.append(Cell(int(parts[0]), int(parts[1])))
        except ValueError:
            return None
    return cells or None


def print_session(session: Session, out: TextIO = sys.stdout) -> None:
    print(render_board(session), file=out)
    print(file=out)
    print(render_words(session), file=out)
    print(render_status(session), file=out)


def play(game: MotsMawon, stdin: TextIO = sys.stdin, out: TextIO = sys.stdout) -> None:
    """
    Run the interactive loop.

    Each input line is either a gesture ("0,0 0,1 0,2"), "new" or "quit".
    Wall-clock seconds between inputs are fed to the session clock.
    """
    print_session(game.session, out)
    last = time.monotonic()

    for line in stdin:
        # Carry the fraction of a second over to the next input
        ticks = int(time.monotonic() - last)
        game.session.tick(ticks)
        last += ticks

        command = line.strip().lower()
        if command in ("quit", "exit", "q"):
            break
        if command == "new":
            game.new_game()
            print("\n=== New game ===", file=out)
            print_session(game.session, out)
            continue

        cells = parse_gesture(command)
        if cells is None:
            print("Enter cells as 'row,col row,col ...', 'new' or 'quit'", file=out)
            continue

        session = game.session
        session.begin(*cells[0])
        for cell in cells[1:]:
            session.extend(*cell)
        result = session.end()

        if result is None:
            if session.is_complete or session.is_stopped:
                print("Game is over. Type 'new' or 'quit'.", file=out)
            else:
                size = session.puzzle.grid_size
                print(f"Start the gesture on a cell inside the {size}x{size} grid", file=out)
            continue

        if result.matched:
            print(f"Found {result.word}! +{result.points}", file=out)
        else:
            print(f"'{result.candidate}' is not in the list", file=out)
        print_session(session, out)

        if result.complete:
            print(f"\n*** Bravo! Time: {format_time(session.elapsed_seconds)}  Score: {session.score} ***", file=out)


def main():
    parser = argparse.ArgumentParser(
        description="Play a Mots Mawon word search",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  grid_size: 12
  max_words: 10
  placement_attempts: 100
  seed: 42
  dictionary: data/dictionary.json
  word_field: mot
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults are used if omitted)"
    )
    parser.add_argument(
        "--dictionary", "-d",
        help="Path to a JSON or YAML dictionary (overrides the config)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible grids (overrides the config)"
    )
    parser.add_argument(
        "--grid-size",
        type=int,
        help="Grid side length (overrides the config)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the session result JSON (default: results/<timestamp>.json)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress and generator logs"
    )
    parser.add_argument(
        "--no-play",
        action="store_true",
        help="Only generate and print the grid"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else GameConfig()
        overrides = {
            "dictionary": args.dictionary,
            "seed": args.seed,
            "grid_size": args.grid_size,
        }
        data = config.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        config = GameConfig(**data)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    if args.output:
        output_path = Path(args.output)
    else:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = Path("results") / f"mots_mawon_{timestamp}.json"

    try:
        game = MotsMawon.create(config=config)
    except Exception as e:
        print(f"Error starting game: {e}", file=sys.stderr)
        sys.exit(1)

    if args.verbose:
        print(f"Dictionary: {config.dictionary or '(none)'} ({len(game.entries)} entries)")
        print(f"Output: {output_path}")
        print()

    if not game.session.is_playable:
        print("No words could be placed. Check the dictionary.", file=sys.stderr)

    if args.no_play:
        print_session(game.session)
    else:
        try:
            play(game)
        except KeyboardInterrupt:
            print("\nGame interrupted by user")

    game.save_result(output_path)

    if args.verbose:
        print()
        print(f"Result saved to: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
