"""
Coordinate mapping between algebraic square names and grid indices.

Grid convention (same as the FEN board field):
- row 0 is rank 8 (top), row 7 is rank 1 (bottom)
- col 0 is file 'a', col 7 is file 'h'
"""

from dataclasses import dataclass
from typing import NamedTuple

from .errors import MalformedMoveStringError, OutOfRangeError
from .pieces import EMPTY


FILES = 'abcdefgh'
RANKS = '12345678'
BOARD_SIZE = 8

# Returned by to_notation() for indices that are off the board
INVALID_NOTATION = '??'


class Square(NamedTuple):
    row: int
    col: int


def is_on_board(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def to_square(file_char: str, rank_char: str) -> Square:
    """
    Converts a (file, rank) character pair to grid indices.

    Example:
        >>> to_square('a', '8')
        Square(row=0, col=0)
        >>> to_square('e', '4')
        Square(row=4, col=4)

    Raises:
        OutOfRangeError: If file is not in a-h or rank is not in 1-8
    """
    if len(file_char) != 1 or file_char not in FILES:
        raise OutOfRangeError(f"Invalid file {file_char!r}, expected one of a-h")
    if len(rank_char) != 1 or rank_char not in RANKS:
        raise OutOfRangeError(f"Invalid rank {rank_char!r}, expected one of 1-8")

    col = ord(file_char) - ord('a')
    row = BOARD_SIZE - (ord(rank_char) - ord('0'))
    return Square(row, col)


def square_from_notation(name: str) -> Square:
    """'e4' -> Square(row=4, col=4)."""
    if len(name) != 2:
        raise OutOfRangeError(f"Square name must be 2 characters, got {name!r}")
    return to_square(name[0], name[1])


def to_notation(square) -> str:
    """
    Converts grid indices back to a square name like 'e4'.

    Never raises for out-of-range indices: returns INVALID_NOTATION instead so
    debug output can print unchecked values.
    """
    row, col = square
    if not is_on_board(row, col):
        return INVALID_NOTATION
    return f"{FILES[col]}{BOARD_SIZE - row}"


@dataclass(frozen=True)
class MoveIntent:
    """A from/to pair of squares. Carries no legality guarantee."""
    from_square: Square
    to_square: Square
    promotion: int = EMPTY

    def __str__(self) -> str:
        return to_notation(self.from_square) + to_notation(self.to_square)


def parse_move(move_str: str) -> MoveIntent:
    """
    Parses a coordinate move string such as "e2e4".

    Only translates coordinates, the position is not consulted.

    Raises:
        MalformedMoveStringError: If the string is not exactly 4 characters
            or either square is off the board
    """
    if len(move_str) != 4:
        raise MalformedMoveStringError(
            f"Move string must be exactly 4 characters, got {len(move_str)}: {move_str!r}"
        )

    try:
        from_square = to_square(move_str[0], move_str[1])
        target = to_square(move_str[2], move_str[3])
    except OutOfRangeError as e:
        raise MalformedMoveStringError(f"Invalid move string {move_str!r}: {e}") from e

    return MoveIntent(from_square, target)
