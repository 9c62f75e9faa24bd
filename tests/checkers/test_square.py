"""Unit tests for /src/checkers/square.py"""

from string import ascii_lowercase

import pytest

from src.checkers.square import BOARD_DIMENSIONS, Square, is_valid_square_token


@pytest.mark.parametrize(
    "file, rank, notation",
    [
        (file, rank, f"{ascii_lowercase[file - 1]}{rank}")
        for file in range(1, 9)
        for rank in range(1, 9)
    ],
)
def test_creating_from_algebraic(file: int, rank: int, notation: str) -> None:
    """Simply checks if the notation for 'a1' indeed maps to file 1, rank 1, etc."""
    square = Square.from_algebraic(notation)
    assert square.file == file
    assert square.rank == rank


@pytest.mark.parametrize(
    "file, rank, notation",
    [
        (file, rank, f"{ascii_lowercase[file - 1]}{rank}")
        for file in range(1, 9)
        for rank in range(1, 9)
    ],
)
def test_to_algebraic_notation(file: int, rank: int, notation: str) -> None:
    """Test the reverse, so the square on the 1st file and 1st rank should be denoted as a1"""
    square = Square(file, rank)
    assert square.to_algebraic() == notation
    assert str(square) == notation


def test_file_letter_is_case_insensitive() -> None:
    assert Square.from_algebraic("C3") == Square.from_algebraic("c3") == Square(3, 3)


def test_square_within_bounds() -> None:
    """happy case: squares within the dimensions of the board"""
    for file in range(1, BOARD_DIMENSIONS[0] + 1):
        for rank in range(1, BOARD_DIMENSIONS[1] + 1):
            square = Square(file, rank)
            assert square.is_within_bounds()


def test_square_out_of_bounds() -> None:
    square = Square(BOARD_DIMENSIONS[0] + 1, BOARD_DIMENSIONS[1] + 1)
    assert not square.is_within_bounds()

    square = Square(0, 4)
    assert not square.is_within_bounds()


@pytest.mark.parametrize(
    "notation, is_dark",
    [("a1", True), ("b1", False), ("c3", True), ("h8", True), ("h1", False), ("a8", False)],
)
def test_dark_squares(notation: str, is_dark: bool) -> None:
    """The pieces live on the squares where file + rank is even"""
    assert Square.from_algebraic(notation).is_dark() == is_dark


def test_shifted_square() -> None:
    assert Square(3, 3).shifted(1, 1) == Square(4, 4)
    assert Square(3, 3).shifted(-1, -1) == Square(2, 2)


@pytest.mark.parametrize("token", ["a1", "h8", "C3", "e5"])
def test_valid_square_tokens(token: str) -> None:
    assert is_valid_square_token(token)


@pytest.mark.parametrize(
    "token", ["", "a", "a0", "a9", "i1", "11", "aa", "c33", "3c", "c²", "c٣"]
)
def test_invalid_square_tokens(token: str) -> None:
    assert not is_valid_square_token(token)
