"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase, digits

# Checkers is always played on 8x8 here
BOARD_DIMENSIONS = (8, 8)


def is_valid_square_token(token: str) -> bool:
    """A square token is a file letter (a-h, any case) followed by a rank digit (1-8)"""
    num_files, num_ranks = BOARD_DIMENSIONS
    if len(token) != 2:
        return False

    file_char, rank_char = token[0].lower(), token[1]
    if file_char not in ascii_lowercase[:num_files]:
        return False
    # ASCII only: str.isdigit() also accepts characters like "²" that int() rejects
    return rank_char in digits[1 : num_ranks + 1]


@dataclass(frozen=True)
class Square:
    file: int
    rank: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (1,1) - (8,8). The file letter is case-insensitive."""
        file = ord(sq[0].lower()) - ord("a") + 1
        rank = int(sq[1])
        return cls(file, rank)

    def to_algebraic(self) -> str:
        return f"{chr(self.file + ord('a') - 1)}{self.rank}"

    def is_within_bounds(self) -> bool:
        return (1 <= self.file <= BOARD_DIMENSIONS[0]) and (
            1 <= self.rank <= BOARD_DIMENSIONS[1]
        )

    def is_dark(self) -> bool:
        """Pieces start on the dark squares: the ones where file + rank is even"""
        return (self.file + self.rank) % 2 == 0

    def shifted(self, d_file: int, d_rank: int) -> Square:
        return Square(self.file + d_file, self.rank + d_rank)

    def __str__(self) -> str:
        return self.to_algebraic()
