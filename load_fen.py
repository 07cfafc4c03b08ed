#!/usr/bin/env python3
"""
Load FEN positions onto a board and print the result.

Usage:
    python load_fen.py "8/8/8/3p4/4P3/8/8/8 w - - 0 1"
    python load_fen.py "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR" --move e2e4
    python load_fen.py "r1bk3r/p2pBpNp/n4n2/1p1NP2P/6P1/3P4/P1P1K3/q5b1" --plot board.png

With no FEN arguments, runs a demo: the start position, a two-pawn position
and three malformed boards, all loaded onto the same board. A failed load
leaves the previous position on the board.
"""

import sys
import argparse
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from board.coordinates import parse_move
from board.errors import BoardError, FenError
from board.grid import Board
from board.pieces import piece_name
from utils.visualization import plot_board, render_board_text


DEMO_FENS = [
    "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
    "8/8/8/3p4/4P3/8/8/8 w - - 0 1",
    "6k/8/8/8/8/8/8/8 w - - 0 1",
    "8/8/8/8/8/8/8/8/8 w - - 0 1",
    "8/8/8/8/8/8/8/7X w - - 0 1",
]


def load_and_show(board: Board, fen: str, boxed: bool = False) -> bool:
    """Load one FEN onto the board and print the board afterwards."""
    print(f"\nFEN: {fen}")
    try:
        board.load_fen(fen)
    except FenError as e:
        print(f"ERROR [{e.kind}]: {e}")
        print("Board unchanged:")
        print(render_board_text(board.grid, boxed=boxed))
        return False

    print("Loaded:")
    print(render_board_text(board.grid, boxed=boxed))
    return True


def show_move(board: Board, move_str: str) -> bool:
    """Translate a move string and show what sits on its squares."""
    try:
        move = parse_move(move_str)
    except BoardError as e:
        print(f"ERROR [{e.kind}]: {e}")
        return False

    piece = board.at(move.from_square)
    print(f"{move}: from {tuple(move.from_square)} to {tuple(move.to_square)} "
          f"({piece_name(piece)} on {move_str[:2]})")
    return True


def main():
    parser = argparse.ArgumentParser(description="Load FEN board fields and print the board")
    parser.add_argument("fens", nargs="*",
                       help="FEN strings (full FEN or piece placement only)")
    parser.add_argument("--move", type=str, action="append", default=[],
                       help="Coordinate move to translate, e.g. e2e4 (repeatable)")
    parser.add_argument("--boxed", action="store_true",
                       help="Draw the board with borders")
    parser.add_argument("--plot", type=str, default=None,
                       help="Save an image of the final board to this path")
    parser.add_argument("--counts", action="store_true",
                       help="Print piece counts of the final board")

    args = parser.parse_args()

    fens = args.fens or DEMO_FENS
    board = Board()

    print(f"{'='*60}")
    print("FEN BOARD LOADER")
    print(f"{'='*60}")

    n_failed = 0
    for fen in fens:
        if not load_and_show(board, fen, boxed=args.boxed):
            n_failed += 1

    if args.move:
        print(f"\n{'='*60}")
        print("MOVES")
        print(f"{'='*60}")
        for move_str in args.move:
            if not show_move(board, move_str):
                n_failed += 1

    if args.counts:
        print("\nPiece counts:")
        for char, count in sorted(board.piece_counts().items()):
            print(f"  {char}: {count}")

    if args.plot:
        plot_board(board.grid, fen=board.to_fen(), output_path=args.plot)

    print(f"\n{'='*60}")
    print(f"Final position: {board.to_fen()}")
    total = len(fens) + len(args.move)
    print(f"{total - n_failed} of {total} inputs accepted")
    print(f"{'='*60}")


if __name__ == "__main__":
    main()
