"""
Tests for the FEN board-field decoder and encoder.
"""

import numpy as np
import pytest

from board.fen import (
    STANDARD_START_FEN,
    decode_board,
    empty_grid,
    encode_board,
    extract_board_field,
)
from board.errors import IncompleteBoardError, UnknownPieceCharError
from board.grid import Board
from board.pieces import BISHOP, EMPTY, KING, KNIGHT, PAWN


def test_standard_start_matches_reset():
    board = Board()
    board.reset()
    board.reset_to_standard_start()

    grid = decode_board(STANDARD_START_FEN)
    assert np.array_equal(grid, board.grid)


def test_two_pawns():
    grid = decode_board("8/8/8/3p4/4P3/8/8/8")

    assert grid[3, 3] == -PAWN
    assert grid[4, 4] == PAWN

    expected = empty_grid()
    expected[3, 3] = -PAWN
    expected[4, 4] = PAWN
    assert np.array_equal(grid, expected)


def test_complex_position():
    grid = decode_board("r1bqkb1r/pppp1ppp/2n2n2/4p3/2B1P3/5N2/PPPP1PPP/RNBQK2R")

    assert grid[2, 2] == -KNIGHT   # c6
    assert grid[2, 5] == -KNIGHT   # f6
    assert grid[4, 2] == BISHOP    # c4
    assert grid[5, 5] == KNIGHT    # f3
    assert grid[7, 4] == KING      # e1
    assert grid[7, 5] == EMPTY     # f1
    assert grid[7, 6] == EMPTY     # g1


def test_empty_board():
    grid = decode_board("8/8/8/8/8/8/8/8")
    assert grid.shape == (8, 8)
    assert not grid.any()


def test_decode_returns_new_array():
    first = decode_board(STANDARD_START_FEN)
    second = decode_board(STANDARD_START_FEN)
    first[0, 0] = EMPTY
    assert second[0, 0] != EMPTY


def test_grid_dtype():
    grid = decode_board(STANDARD_START_FEN)
    assert grid.dtype == np.int8


@pytest.mark.parametrize("fen", [
    "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR",
    "r1bqkb1r/pppp1ppp/2n2n2/4p3/2B1P3/5N2/PPPP1PPP/RNBQK2R",
    "8/8/8/8/8/8/8/8",
    "8/3k4/8/3K4/8/8/8/8",
    "r1bk3r/p2pBpNp/n4n2/1p1NP2P/6P1/3P4/P1P1K3/q5b1",
])
def test_encode_inverts_decode(fen):
    assert encode_board(decode_board(fen)) == fen


def test_encode_merges_empty_runs():
    grid = empty_grid()
    grid[0, 7] = -KING
    assert encode_board(grid) == "7k/8/8/8/8/8/8/8"


@pytest.mark.parametrize("fen, expected", [
    ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
     "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"),
    ("8/8/8/3p4/4P3/8/8/8", "8/8/8/3p4/4P3/8/8/8"),
    (" 8/8/8/8/8/8/8/8 w - - 0 1", ""),
    ("8/8/8/8/8/8/8/8\tw", "8/8/8/8/8/8/8/8\tw"),
    ("", ""),
])
def test_extract_board_field(fen, expected):
    assert extract_board_field(fen) == expected


@pytest.mark.parametrize("fen, error", [
    (" 8/8/8/8/8/8/8/8 w - - 0 1", IncompleteBoardError),
    ("8/8/8/8/8/8/8/8\tw", UnknownPieceCharError),
    ("8/8/8/8/8/8/8/8\n", UnknownPieceCharError),
])
def test_only_space_ends_board_field(fen, error):
    board = Board()
    with pytest.raises(error):
        board.load_fen(fen)
    assert board.to_fen() == STANDARD_START_FEN


def test_encode_repeated_pieces():
    grid = decode_board("pppp4/8/8/8/8/8/8/2PP2KK")
    assert encode_board(grid) == "pppp4/8/8/8/8/8/8/2PP2KK"
