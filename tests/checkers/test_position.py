"""Unit tests for src/checkers/position.py"""

import pytest

from src.checkers.board import EMPTY_LAYOUT, STARTING_LAYOUT, Board
from src.checkers.pieces import Color, Piece
from src.checkers.position import (
    STARTING_POSITION,
    PositionState,
    is_valid_position_fen,
)
from src.checkers.square import Square
from src.core.exceptions import InvalidLayoutError


def test_starting_position() -> None:
    state = PositionState.starting_position()
    assert state.layout == STARTING_LAYOUT
    assert state.color_to_move == Color.WHITE
    assert state.white_to_move
    assert state.white_captures == 0
    assert state.black_captures == 0
    assert state.chain_square is None
    assert state.to_fen() == STARTING_POSITION


@pytest.mark.parametrize(
    "fen",
    [
        STARTING_POSITION,
        f"{EMPTY_LAYOUT} b 3 7 -",
        "8/8/8/4w3/8/8/8/8 w 1 0 e5",
        "7B/8/8/8/8/8/8/W7 b 11 11 -",
    ],
)
def test_position_roundtrip(fen: str) -> None:
    assert PositionState.from_fen(fen).to_fen() == fen


def test_parse_chain_square_and_counters() -> None:
    state = PositionState.from_fen("8/8/8/4w3/8/8/8/8 b 1 2 e5")
    assert state.color_to_move == Color.BLACK
    assert not state.white_to_move
    assert state.white_captures == 1
    assert state.black_captures == 2
    assert state.chain_square == Square.from_algebraic("e5")


@pytest.mark.parametrize(
    "fen",
    [
        STARTING_LAYOUT,  # layout only
        f"{STARTING_LAYOUT} w 0 0",  # missing chain square
        f"{STARTING_LAYOUT} w 0 0 - extra",  # too many parts
        f"{STARTING_LAYOUT} x 0 0 -",  # unknown color
        f"{STARTING_LAYOUT} w -1 0 -",  # negative counter
        f"{STARTING_LAYOUT} w 0 a -",  # not a number
        f"{STARTING_LAYOUT} w ² 0 -",  # superscript two is not a number
        f"{STARTING_LAYOUT} w 0 ٣ -",  # neither is an Arabic-Indic three
        f"{STARTING_LAYOUT} w 0 0 z9",  # not a square
        "9/8/8/8/8/8/8/8 w 0 0 -",  # broken layout
    ],
)
def test_invalid_positions(fen: str) -> None:
    assert not is_valid_position_fen(fen)
    with pytest.raises(InvalidLayoutError):
        _ = PositionState.from_fen(fen)


def test_board_conversion_keeps_captures() -> None:
    board = Board.from_layout(EMPTY_LAYOUT)
    board.place_piece(Piece(Color.WHITE, Square.from_algebraic("c3")))
    board.increment_capture(Color.WHITE)
    board.increment_capture(Color.BLACK)
    board.increment_capture(Color.BLACK)

    state = PositionState.from_board(board, white_to_move=False)
    assert state.to_fen() == "8/8/8/8/8/2w5/8/8 b 1 2 -"
    assert state.to_board() == board
