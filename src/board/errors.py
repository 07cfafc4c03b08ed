"""
Exceptions raised by the board package.

Every class carries a ``kind`` string so callers (CLI, CSV reports) can show
which validation failed without matching on class names.
"""

from typing import Optional


class BoardError(ValueError):
    """Base class for all board validation failures."""
    kind = "BoardError"


class OutOfRangeError(BoardError):
    """File/rank character or row/col index outside the 8x8 board."""
    kind = "OutOfRange"


class MalformedMoveStringError(BoardError):
    """Move string is not exactly four valid coordinate characters."""
    kind = "MalformedMoveString"


class FenError(BoardError):
    """
    Base class for board-field decode failures.

    Args:
        message: Human readable description
        row: Row index (0 = rank 8) the scan was on when it failed
        col: Column count accumulated on that row
    """
    kind = "FenError"

    def __init__(self, message: str, row: Optional[int] = None, col: Optional[int] = None):
        super().__init__(message)
        self.row = row
        self.col = col


class RowLengthMismatchError(FenError):
    kind = "RowLengthMismatch"


class TooManyRowsError(FenError):
    kind = "TooManyRows"


class RowOverflowError(FenError):
    kind = "RowOverflow"


class UnknownPieceCharError(FenError):
    kind = "UnknownPieceChar"

    def __init__(self, message: str, char: str, row: Optional[int] = None, col: Optional[int] = None):
        super().__init__(message, row=row, col=col)
        self.char = char


class IncompleteBoardError(FenError):
    kind = "IncompleteBoard"
