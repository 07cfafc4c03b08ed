"""
FEN board-field decoding and encoding.

Only the piece placement field is handled here:
"rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
 ^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^
Side to move, castling, en passant and clocks are ignored.
"""

from itertools import groupby

import numpy as np

from .coordinates import BOARD_SIZE
from .errors import (
    IncompleteBoardError,
    RowLengthMismatchError,
    RowOverflowError,
    TooManyRowsError,
    UnknownPieceCharError,
)
from .pieces import EMPTY, decode_char, encode_char


STANDARD_START_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

GRID_DTYPE = np.int8


def empty_grid() -> np.ndarray:
    return np.full((BOARD_SIZE, BOARD_SIZE), EMPTY, dtype=GRID_DTYPE)


def extract_board_field(fen: str) -> str:
    """Returns the text before the first space of a (possibly full) FEN string."""
    return fen.split(' ', 1)[0]


def decode_board(board_field: str) -> np.ndarray:
    """
    Decodes a FEN piece placement field into a new 8x8 grid.

    Single left-to-right scan. Ranks are separated by '/' and listed from rank 8
    (row 0) down to rank 1 (row 7); digits 1-8 are runs of empty squares, piece
    letters occupy one square each.

    Args:
        board_field: Piece placement field only (see extract_board_field)

    Returns:
        New (8, 8) int8 array of piece ids. Never a view of any existing grid.

    Raises:
        RowLengthMismatchError: A '/' closed a row that does not have 8 squares
        TooManyRowsError: More than 8 rows
        RowOverflowError: A digit run or piece pushes a row past 8 squares
        UnknownPieceCharError: Character that is neither a digit 1-8, '/' nor a piece
        IncompleteBoardError: Input ended before 8 full rows were read
    """
    grid = empty_grid()
    row = 0
    col = 0

    for ch in board_field:
        if ch == '/':
            if col != BOARD_SIZE:
                raise RowLengthMismatchError(
                    f"Rank {BOARD_SIZE - row} has {col} squares (must be {BOARD_SIZE})",
                    row=row, col=col
                )
            if row + 1 >= BOARD_SIZE:
                raise TooManyRowsError(
                    f"Too many ranks (more than {BOARD_SIZE})", row=row, col=col
                )
            row += 1
            col = 0

        elif '1' <= ch <= '8':
            col += int(ch)
            if col > BOARD_SIZE:
                raise RowOverflowError(
                    f"Too many squares in rank {BOARD_SIZE - row} (col={col})",
                    row=row, col=col
                )

        else:
            piece = decode_char(ch)
            if piece == EMPTY:
                raise UnknownPieceCharError(
                    f"Unknown piece character {ch!r} in rank {BOARD_SIZE - row}",
                    char=ch, row=row, col=col
                )
            if col >= BOARD_SIZE:
                raise RowOverflowError(
                    f"Too many squares in rank {BOARD_SIZE - row} when placing {ch!r}",
                    row=row, col=col
                )
            grid[row, col] = piece
            col += 1

    if row != BOARD_SIZE - 1 or col != BOARD_SIZE:
        raise IncompleteBoardError(
            f"Board ended at rank {BOARD_SIZE - row} with {col} squares, "
            f"expected {BOARD_SIZE} full ranks",
            row=row, col=col
        )

    return grid


def encode_board(grid: np.ndarray) -> str:
    """
    Converts an 8x8 grid of piece ids back to a FEN piece placement field.

    Example:
        >>> encode_board(empty_grid())
        '8/8/8/8/8/8/8/8'
    """
    ranks = []
    for row in grid:
        fen_rank = ""
        # Runs of equal ids; only runs of EMPTY collapse to a digit
        for piece_id, run in groupby(int(piece) for piece in row):
            if piece_id == EMPTY:
                fen_rank += str(len(list(run)))
            else:
                fen_rank += "".join(encode_char(piece) for piece in run)
        ranks.append(fen_rank)
    return '/'.join(ranks)
