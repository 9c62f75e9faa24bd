"""
Defines the checkers pieces and the directions they are allowed to travel in.

Key idea: the rank of a piece (man or king) is a plain enum, and a lookup table decides the allowed directions.
Crowning a man therefore only flips the enum value. The piece stays the same object on the board.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Optional, Self

from src.checkers.square import Square


class Color(Enum):
    NONE = auto()
    WHITE = auto()
    BLACK = auto()

    def opponent(self) -> "Color":
        if self == Color.WHITE:
            return Color.BLACK
        if self == Color.BLACK:
            return Color.WHITE
        return Color.NONE


class Rank(Enum):
    MAN = auto()
    KING = auto()


class Direction(IntEnum):
    """
    The four diagonals, named along the board axes: 'forward' means towards rank 8 (White's forward).
    Black's forward moves are therefore the two BACKWARD_* directions.
    """

    FORWARD_LEFT = 0
    FORWARD_RIGHT = 1
    BACKWARD_LEFT = 2
    BACKWARD_RIGHT = 3


Vector = tuple[int, int]

DIRECTION_DELTAS: dict[Direction, Vector] = {
    Direction.FORWARD_LEFT: (-1, 1),
    Direction.FORWARD_RIGHT: (1, 1),
    Direction.BACKWARD_LEFT: (-1, -1),
    Direction.BACKWARD_RIGHT: (1, -1),
}

ALL_DIRECTIONS: frozenset[Direction] = frozenset(Direction)

# Men only travel towards the opponent's side, kings go anywhere
MOVEMENT_RULES: dict[tuple[Rank, Color], frozenset[Direction]] = {
    (Rank.MAN, Color.WHITE): frozenset(
        {Direction.FORWARD_LEFT, Direction.FORWARD_RIGHT}
    ),
    (Rank.MAN, Color.BLACK): frozenset(
        {Direction.BACKWARD_LEFT, Direction.BACKWARD_RIGHT}
    ),
    (Rank.KING, Color.WHITE): ALL_DIRECTIONS,
    (Rank.KING, Color.BLACK): ALL_DIRECTIONS,
}

# Rank a man must reach to be crowned
PROMOTION_RANK: dict[Color, int] = {Color.WHITE: 8, Color.BLACK: 1}

LAYOUT_TO_PIECE: dict[str, tuple[Color, Rank]] = {
    "w": (Color.WHITE, Rank.MAN),
    "W": (Color.WHITE, Rank.KING),
    "b": (Color.BLACK, Rank.MAN),
    "B": (Color.BLACK, Rank.KING),
}

PIECE_TO_LAYOUT: dict[tuple[Color, Rank], str] = {
    value: key for key, value in LAYOUT_TO_PIECE.items()
}


@dataclass
class Piece:
    color: Color
    square: Square
    rank: Rank = Rank.MAN

    @classmethod
    def from_layout(cls, character: str, square: Square) -> Self:
        # lower case: men, upper case: kings
        color, rank = LAYOUT_TO_PIECE[character]
        return cls(color, square, rank)

    def to_layout(self) -> str:
        return PIECE_TO_LAYOUT[(self.color, self.rank)]

    @property
    def is_king(self) -> bool:
        return self.rank == Rank.KING

    def allowed_directions(self) -> frozenset[Direction]:
        return MOVEMENT_RULES[(self.rank, self.color)]

    def allows_dir(self, direction: Direction) -> bool:
        return direction in self.allowed_directions()

    def one_step(self, direction: Direction) -> Optional[Square]:
        """The neighbouring square along `direction`, or None when it is off the board or the piece may not go that way."""
        if not self.allows_dir(direction):
            return None
        target = self.square.shifted(*DIRECTION_DELTAS[direction])
        return target if target.is_within_bounds() else None

    def skip_over(self, middle: Square) -> Square:
        """
        Landing square when jumping over the adjacent `middle` square.
        NOTE: no bounds or occupancy checks here, the caller takes care of that.
        """
        d_file = 2 if middle.file > self.square.file else -2
        d_rank = 2 if middle.rank > self.square.rank else -2
        return self.square.shifted(d_file, d_rank)

    def crown(self) -> None:
        self.rank = Rank.KING
