"""Command line entry point for playing a story file."""

from __future__ import annotations

import argparse
import sys

from .tree import GameDecisionTree


def main(argv=None) -> int:
    """Load a story file and play it on the terminal."""
    parser = argparse.ArgumentParser(prog="storypath", description="Play a branching story.")
    parser.add_argument("story", nargs="?", default="story.txt", help="story file to load")
    parser.add_argument("-d", "--delimiter", default="|", help="field delimiter (one character)")
    args = parser.parse_args(argv)
    if len(args.delimiter) != 1:
        parser.error("delimiter must be a single character")

    game = GameDecisionTree()
    try:
        game.load_story_from_file(args.story, args.delimiter)
    except OSError:
        print("Couldn't open the file ")
        return 1
    except (ValueError, LookupError) as exc:
        print(f"Malformed story file: {exc}", file=sys.stderr)
        return 1

    try:
        game.play_game()
    except EOFError:
        return 0
    except LookupError as exc:
        print(f"Incomplete story: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())