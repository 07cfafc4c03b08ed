"""
Piece codec: single FEN characters <-> signed piece identifiers.

Sign encodes the side (positive = White, negative = Black), magnitude encodes
the kind, 0 is an empty square.
"""

from typing import Dict


EMPTY = 0
PAWN, KNIGHT, BISHOP, ROOK, QUEEN, KING = range(1, 7)

EMPTY_CHAR = '.'

# Uppercase = White (positive), lowercase = Black (negative)
CHAR_TO_PIECE: Dict[str, int] = {
    'P': PAWN, 'N': KNIGHT, 'B': BISHOP, 'R': ROOK, 'Q': QUEEN, 'K': KING,
    'p': -PAWN, 'n': -KNIGHT, 'b': -BISHOP, 'r': -ROOK, 'q': -QUEEN, 'k': -KING,
}

PIECE_TO_CHAR: Dict[int, str] = {piece: char for char, piece in CHAR_TO_PIECE.items()}
PIECE_TO_CHAR[EMPTY] = EMPTY_CHAR

KIND_NAMES = {
    PAWN: 'Pawn', KNIGHT: 'Knight', BISHOP: 'Bishop',
    ROOK: 'Rook', QUEEN: 'Queen', KING: 'King',
}


def decode_char(ch: str) -> int:
    """
    Maps a FEN piece character to its piece identifier.

    Total: anything that is not one of "PNBRQKpnbrqk" maps to EMPTY. Callers
    that need to reject unknown characters must check for EMPTY themselves.
    """
    return CHAR_TO_PIECE.get(ch, EMPTY)


def encode_char(piece_id: int) -> str:
    """Display character for a piece identifier ('.' for empty, '?' for invalid)."""
    return PIECE_TO_CHAR.get(int(piece_id), '?')


def is_valid_piece(piece_id: int) -> bool:
    return -KING <= piece_id <= KING


def piece_name(piece_id: int) -> str:
    """E.g. 3 -> 'White Bishop', -6 -> 'Black King', 0 -> 'Empty'."""
    if piece_id == EMPTY:
        return 'Empty'
    if not is_valid_piece(piece_id):
        raise ValueError(f"Invalid piece id: {piece_id} (must be in -6..6)")
    side = 'White' if piece_id > 0 else 'Black'
    return f"{side} {KIND_NAMES[abs(piece_id)]}"
