"""
Tests for the piece character codec.
"""

import pytest

from board.pieces import (
    EMPTY,
    KING,
    PAWN,
    QUEEN,
    decode_char,
    encode_char,
    is_valid_piece,
    piece_name,
)


def test_decode_white_pieces():
    assert [decode_char(ch) for ch in "PNBRQK"] == [1, 2, 3, 4, 5, 6]


def test_decode_black_pieces():
    assert [decode_char(ch) for ch in "pnbrqk"] == [-1, -2, -3, -4, -5, -6]


@pytest.mark.parametrize("ch", ["X", "x", "1", "/", " ", "", ".", "♔"])
def test_decode_unknown_is_empty(ch):
    assert decode_char(ch) == EMPTY


@pytest.mark.parametrize("ch", list("PNBRQKpnbrqk"))
def test_encode_inverts_decode(ch):
    assert encode_char(decode_char(ch)) == ch
    assert decode_char(encode_char(decode_char(ch))) == decode_char(ch)


def test_encode_empty_and_invalid():
    assert encode_char(EMPTY) == '.'
    assert encode_char(7) == '?'
    assert encode_char(-7) == '?'


def test_is_valid_piece():
    assert all(is_valid_piece(p) for p in range(-6, 7))
    assert not is_valid_piece(7)
    assert not is_valid_piece(-7)


def test_piece_name():
    assert piece_name(PAWN) == 'White Pawn'
    assert piece_name(-KING) == 'Black King'
    assert piece_name(QUEEN) == 'White Queen'
    assert piece_name(EMPTY) == 'Empty'
    with pytest.raises(ValueError):
        piece_name(9)
