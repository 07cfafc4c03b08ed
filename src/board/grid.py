"""
Board: owner of the 8x8 grid of piece ids.
"""

from typing import Dict

import numpy as np

from .coordinates import Square, is_on_board, square_from_notation, to_notation
from .errors import OutOfRangeError
from .fen import decode_board, empty_grid, encode_board, extract_board_field
from .pieces import BISHOP, EMPTY, KING, KNIGHT, PAWN, QUEEN, ROOK, encode_char


BACK_RANK = [ROOK, KNIGHT, BISHOP, QUEEN, KING, BISHOP, KNIGHT, ROOK]


class Board:
    """
    Static chessboard state.

    The grid is only ever changed by reset(), reset_to_standard_start() and a
    successful load_fen(). A failed load_fen() leaves it untouched.
    """

    def __init__(self):
        self._grid = empty_grid()
        self.reset_to_standard_start()

    @property
    def grid(self) -> np.ndarray:
        """Copy of the (8, 8) grid, row 0 = rank 8."""
        return self._grid.copy()

    def reset(self) -> None:
        self._grid.fill(EMPTY)

    def reset_to_standard_start(self) -> None:
        self.reset()
        # Black on ranks 8/7, White on ranks 2/1
        self._grid[0, :] = [-piece for piece in BACK_RANK]
        self._grid[1, :] = -PAWN
        self._grid[6, :] = PAWN
        self._grid[7, :] = BACK_RANK

    def at(self, square) -> int:
        """
        Piece id at a (row, col) square.

        Raises:
            OutOfRangeError: If row or col is outside 0..7
        """
        row, col = square
        if not is_on_board(row, col):
            raise OutOfRangeError(f"Square ({row}, {col}) is off the board")
        return int(self._grid[row, col])

    def at_notation(self, name: str) -> int:
        """Piece id at an algebraic square such as 'e4'."""
        return self.at(square_from_notation(name))

    def load_fen(self, fen: str) -> None:
        """
        Replaces the grid with the position from a FEN string.

        Accepts a full FEN or just the piece placement field; only the first
        field is read. The grid is replaced in one step after the whole field
        has been validated.

        Raises:
            FenError: (subclass) describing the first problem found
        """
        staging = decode_board(extract_board_field(fen))
        self._grid = staging

    def to_fen(self) -> str:
        """Piece placement field for the current grid."""
        return encode_board(self._grid)

    def piece_counts(self) -> Dict[str, int]:
        """Number of each piece on the board keyed by FEN character."""
        ids, counts = np.unique(self._grid[self._grid != EMPTY], return_counts=True)
        return {encode_char(piece): int(count) for piece, count in zip(ids, counts)}

    def occupied_squares(self) -> Dict[str, int]:
        """Square name -> piece id for every non-empty square, rank 8 first."""
        rows, cols = np.nonzero(self._grid)
        return {
            to_notation(Square(int(r), int(c))): int(self._grid[r, c])
            for r, c in zip(rows, cols)
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._grid, other._grid))

    def __repr__(self) -> str:
        return f"Board({self.to_fen()!r})"
