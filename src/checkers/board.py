"""The Game board holds the pieces and answers all questions about a single piece / single step.

Turn handling and capture chains are the Game's business, not the Board's.
"""

from copy import deepcopy
from dataclasses import dataclass, field
from string import digits
from typing import Optional, Self

from src.checkers.pieces import (
    DIRECTION_DELTAS,
    LAYOUT_TO_PIECE,
    PROMOTION_RANK,
    Color,
    Direction,
    Piece,
)
from src.checkers.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import GameStateError, InvalidLayoutError

STARTING_LAYOUT = "1b1b1b1b/b1b1b1b1/1b1b1b1b/8/8/w1w1w1w1/1w1w1w1w/w1w1w1w1"
EMPTY_LAYOUT = "/".join(["8"] * BOARD_DIMENSIONS[1])
EMPTY_RUN_DIGITS = digits[1 : BOARD_DIMENSIONS[0] + 1]

# White fills the first three ranks, Black the last three
STARTING_RANKS: dict[Color, range] = {
    Color.WHITE: range(1, 4),
    Color.BLACK: range(BOARD_DIMENSIONS[1] - 2, BOARD_DIMENSIONS[1] + 1),
}


def is_valid_layout(layout: str) -> bool:
    """Check the shape of a layout string: 8 ranks of 8 squares, only known piece characters or digits."""
    num_files, num_ranks = BOARD_DIMENSIONS
    rank_layouts = layout.split("/")
    if len(rank_layouts) != num_ranks:
        return False

    for rank_layout in rank_layouts:
        file_count = 0
        for character in rank_layout:
            # runs of empty squares are 1-8, written with ASCII digits only
            if character in EMPTY_RUN_DIGITS:
                file_count += int(character)
            elif character in LAYOUT_TO_PIECE:
                file_count += 1
            else:
                return False

        if file_count != num_files:
            return False
    return True


def _new_captures() -> dict[Color, int]:
    return {Color.WHITE: 0, Color.BLACK: 0}


@dataclass
class Board:
    pieces: list[Piece] = field(default_factory=list)
    captures: dict[Color, int] = field(default_factory=_new_captures)

    @classmethod
    def starting_position(cls) -> Self:
        """12 men per side on the dark squares of their three home ranks."""
        board = cls()
        for rank in range(BOARD_DIMENSIONS[1], 0, -1):
            for file in range(1, BOARD_DIMENSIONS[0] + 1):
                square = Square(file, rank)
                if not square.is_dark():
                    continue
                for color, home_ranks in STARTING_RANKS.items():
                    if rank in home_ranks:
                        board.pieces.append(Piece(color, square))
        return board

    @classmethod
    def from_layout(cls, layout: str) -> Self:
        """Construct a board from a layout string.

        Works like the board part of a chess FEN:
        1b1b1b1b/b1b1b1b1/1b1b1b1b/8/8/w1w1w1w1/1w1w1w1w/w1w1w1w1
        * ranks are separated by slashes, starting from the 8th rank
        * each rank reads from the a-file to the h-file
        * 'w' / 'b' are white / black men, 'W' / 'B' are kings
        * a digit is that many empty squares in a row
        """
        if not is_valid_layout(layout):
            raise InvalidLayoutError(f"Cannot interpret {layout!r} as a board layout.")

        board = cls()
        for rank_idx, rank_layout in enumerate(layout.split("/")):
            rank = BOARD_DIMENSIONS[1] - rank_idx
            file = 1
            for character in rank_layout:
                if character in EMPTY_RUN_DIGITS:
                    file += int(character)
                else:
                    board.pieces.append(Piece.from_layout(character, Square(file, rank)))
                    file += 1
        return board

    def to_layout(self) -> str:
        return "/".join(
            self._rank_to_layout(rank) for rank in range(BOARD_DIMENSIONS[1], 0, -1)
        )

    def _rank_to_layout(self, rank: int) -> str:
        characters: list[str] = []
        empty_count = 0
        for file in range(1, BOARD_DIMENSIONS[0] + 1):
            piece = self.piece_at(Square(file, rank))
            if piece is None:
                empty_count += 1
                continue
            if empty_count > 0:
                characters.append(str(empty_count))
                empty_count = 0
            characters.append(piece.to_layout())

        if empty_count > 0:
            characters.append(str(empty_count))
        return "".join(characters)

    def copy(self) -> Self:
        """Independent copy: fresh Piece instances and counters. Used for the undo snapshots."""
        return deepcopy(self)

    # --- QUERIES ---
    def piece_at(self, square: Square) -> Optional[Piece]:
        """Linear scan. There are never more than 24 pieces on the board."""
        return next((piece for piece in self.pieces if piece.square == square), None)

    def is_empty(self, square: Square) -> bool:
        return self.piece_at(square) is None

    def pieces_of(self, color: Color) -> list[Piece]:
        return [piece for piece in self.pieces if piece.color == color]

    def count_pieces(self) -> dict[Color, int]:
        return {color: len(self.pieces_of(color)) for color in (Color.WHITE, Color.BLACK)}

    # --- MUTATIONS (unchecked: the Game validates before calling these) ---
    def place_piece(self, piece: Piece) -> None:
        """Setup helper. Keeps the one-piece-per-square invariant."""
        if not piece.square.is_within_bounds():
            raise GameStateError(f"Square {piece.square} is not on the board.")
        if not self.is_empty(piece.square):
            raise GameStateError(f"Square {piece.square} is already occupied.")
        self.pieces.append(piece)

    def remove_piece(self, piece: Piece) -> None:
        self.pieces.remove(piece)

    def move_piece_to(self, piece: Piece, square: Square) -> None:
        piece.square = square

    def increment_capture(self, color: Color) -> None:
        self.captures[color] += 1

    def apply_promotion_if_eligible(self, piece: Piece) -> bool:
        """Crown a man standing on the opponent's back rank. Returns True if the piece got crowned just now."""
        if piece.is_king or piece.square.rank != PROMOTION_RANK[piece.color]:
            return False
        piece.crown()
        return True

    # --- LOCAL LEGALITY ---
    def can_piece_capture(self, piece: Piece) -> bool:
        """
        Does this piece have a capture right now?
        ---

        For every direction the piece may travel in:
        1. the adjacent square must hold an opponent's piece
        2. the square right behind it must be on the board and empty
        """
        for direction in Direction:
            if not piece.allows_dir(direction):
                continue
            if self._capture_landing(piece, direction) is not None:
                return True
        return False

    def _capture_landing(self, piece: Piece, direction: Direction) -> Optional[Square]:
        d_file, d_rank = DIRECTION_DELTAS[direction]
        middle = piece.square.shifted(d_file, d_rank)
        if not middle.is_within_bounds():
            return None

        victim = self.piece_at(middle)
        if victim is None or victim.color != piece.color.opponent():
            return None

        landing = piece.skip_over(middle)
        if landing.is_within_bounds() and self.is_empty(landing):
            return landing
        return None

    def any_capture_available(self, color: Color) -> bool:
        return any(self.can_piece_capture(piece) for piece in self.pieces_of(color))

    def any_legal_move(self, color: Color, forced_piece: Optional[Piece] = None) -> bool:
        """
        In the middle of a capture chain only the chaining piece may act, and only by capturing.
        Otherwise any capture or any step onto an empty diagonal square will do.
        """
        if forced_piece is not None:
            return self.can_piece_capture(forced_piece)

        if self.any_capture_available(color):
            return True

        for piece in self.pieces_of(color):
            for direction in Direction:
                step = piece.one_step(direction)
                if step is not None and self.is_empty(step):
                    return True
        return False

    def winner(self) -> Color:
        """Win by attrition only. Being stuck without moves is decided by the Game."""
        counts = self.count_pieces()
        if counts[Color.BLACK] == 0:
            return Color.WHITE
        if counts[Color.WHITE] == 0:
            return Color.BLACK
        return Color.NONE
