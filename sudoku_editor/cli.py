"""Command-line interface for the Sudoku grid editor."""

import argparse
import json
import logging
import sys

from .config import EditorConfig, LOAD_ERROR_POLICIES
from .core.board import SudokuBoard
from .game import EditorSession
from .io import load_grid, prompt_text, render_board, save_grid


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudoku-editor",
        description="Interactive Sudoku grid editor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create a grid file from a puzzle string
  sudoku-editor create "530070000600195000..." -o puzzle.sud

  # Fill the grid interactively
  sudoku-editor play puzzle.sud

  # Print a grid file
  sudoku-editor show puzzle.sud
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log debugging information to stderr"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Fill a grid interactively")
    play_parser.add_argument(
        "file", nargs="?", default=None,
        help="Grid file to load (asked for when omitted)"
    )
    play_parser.add_argument(
        "--on-load-error", choices=LOAD_ERROR_POLICIES, default="abort",
        help="What to do when the grid file cannot be read (default: abort)"
    )
    play_parser.add_argument(
        "--stats", action="store_true",
        help="Print session statistics as JSON when the grid is full"
    )

    # Show command
    show_parser = subparsers.add_parser("show", help="Print a grid file")
    show_parser.add_argument("file", help="Grid file to print")

    # Create command
    create_parser = subparsers.add_parser("create", help="Write a grid file from a puzzle string")
    create_parser.add_argument(
        "puzzle",
        help="One character per cell, row by row (0 or . for empty cells)"
    )
    create_parser.add_argument(
        "--output", "-o", required=True,
        help="Grid file to write"
    )

    for sub in (play_parser, show_parser, create_parser):
        sub.add_argument(
            "--box-size", "-b", type=int, default=3,
            help="Block side length; the grid is box-size squared wide (default: 3)"
        )
    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "play":
        cmd_play(args)
    elif args.command == "show":
        cmd_show(args)
    elif args.command == "create":
        cmd_create(args)


def _config(args) -> EditorConfig:
    try:
        return EditorConfig(
            box_size=args.box_size,
            on_load_error=getattr(args, "on_load_error", "abort"),
        )
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)


def cmd_play(args):
    """Handle the play command."""
    config = _config(args)
    try:
        path = args.file or prompt_text("File name? ", input)
        result = load_grid(path, config.size, config.cell_dtype)
        if not result.ok:
            print(f"\n{result.error}")
            if config.on_load_error == "abort":
                sys.exit(1)
            print("Continuing with the cells that could be read.")

        session = EditorSession(result.board, config, input_fn=input)
        stats = session.run()
    except (EOFError, KeyboardInterrupt):
        print("\nSession aborted.")
        sys.exit(1)

    if args.stats:
        print(json.dumps(stats.to_dict(), indent=2))


def cmd_show(args):
    """Handle the show command."""
    config = _config(args)
    result = load_grid(args.file, config.size, config.cell_dtype)
    if not result.ok:
        print(result.error)
        sys.exit(1)

    board = result.board
    print(render_board(board, config.empty_glyph))
    print(f"\n{board.count_filled()} filled, {board.count_empty()} empty")
    if not board.is_consistent():
        print("Warning: the grid already breaks the row/column/block rule.")


def cmd_create(args):
    """Handle the create command."""
    config = _config(args)
    try:
        board = SudokuBoard.from_string(args.puzzle, config.size)
    except ValueError as e:
        print(f"Error parsing puzzle: {e}")
        sys.exit(1)

    save_grid(board, args.output, config.cell_dtype)
    print(render_board(board, config.empty_glyph))
    print(f"\nGrid saved to {args.output}")


if __name__ == "__main__":
    main()
