"""
Representation of a complete game position as a single string. Used to persist the live game and the undo history.
"""

from dataclasses import dataclass
from string import digits
from typing import Optional, Self

from src.checkers.board import STARTING_LAYOUT, Board, is_valid_layout
from src.checkers.pieces import Color
from src.checkers.square import Square, is_valid_square_token
from src.core.exceptions import InvalidLayoutError

STARTING_POSITION = f"{STARTING_LAYOUT} w 0 0 -"


def _is_counter(token: str) -> bool:
    """Non-empty run of ASCII digits (str.isdigit() would let '²' through to int())."""
    return token != "" and all(character in digits for character in token)


def is_valid_position_fen(fen: str) -> bool:
    """
    Check if the string follows the position notation.

    <layout> <w|b> <white captures> <black captures> <chain square or '-'>
    """
    parts = fen.split(" ")
    if len(parts) != 5:
        return False

    layout, active_color, white_captures, black_captures, chain_square = parts
    if not is_valid_layout(layout):
        return False

    if active_color not in {"w", "b"}:
        return False

    if not (_is_counter(white_captures) and _is_counter(black_captures)):
        return False

    return chain_square == "-" or is_valid_square_token(chain_square)


@dataclass
class PositionState:
    """
    Data that can be constructed from a position string.
    ----

    <layout><active color><white captures><black captures><chain square>

    * The layout is described in the Board class
    * The active color is either "w" or "b"
    * The capture counters hold how many opposing pieces each side has taken so far
    * The chain square is the square of the piece that is in the middle of a capture chain (and must continue). "-" if none.

    ex) The standard starting position:
    1b1b1b1b/b1b1b1b1/1b1b1b1b/8/8/w1w1w1w1/1w1w1w1w/w1w1w1w1 w 0 0 -
    """

    layout: str
    color_to_move: Color
    white_captures: int
    black_captures: int
    chain_square: Optional[Square] = None

    @classmethod
    def from_fen(cls, fen: str) -> Self:
        if not is_valid_position_fen(fen):
            raise InvalidLayoutError(f"Cannot interpret supplied string as a position: {fen!r}")

        layout, active_color, white_captures, black_captures, chain = fen.split(" ")
        color_to_move = Color.WHITE if active_color == "w" else Color.BLACK
        chain_square = Square.from_algebraic(chain) if chain != "-" else None
        return cls(
            layout,
            color_to_move,
            int(white_captures),
            int(black_captures),
            chain_square,
        )

    def to_fen(self) -> str:
        active_color = "w" if self.color_to_move == Color.WHITE else "b"
        chain = self.chain_square.to_algebraic() if self.chain_square else "-"
        return f"{self.layout} {active_color} {self.white_captures} {self.black_captures} {chain}"

    @classmethod
    def from_board(
        cls, board: Board, white_to_move: bool, chain_square: Optional[Square] = None
    ) -> Self:
        return cls(
            layout=board.to_layout(),
            color_to_move=Color.WHITE if white_to_move else Color.BLACK,
            white_captures=board.captures[Color.WHITE],
            black_captures=board.captures[Color.BLACK],
            chain_square=chain_square,
        )

    def to_board(self) -> Board:
        board = Board.from_layout(self.layout)
        board.captures[Color.WHITE] = self.white_captures
        board.captures[Color.BLACK] = self.black_captures
        return board

    @property
    def white_to_move(self) -> bool:
        return self.color_to_move == Color.WHITE

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_fen(STARTING_POSITION)
