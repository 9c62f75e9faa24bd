"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    CAPTURE_CHAIN = "capture chain"
    WHITE_WINS = "white wins"
    BLACK_WINS = "black wins"
    NO_LEGAL_MOVES = "no legal moves"
    ENDED_BY_USER = "ended by user"


# --- NOTE: the domain layer has its own Color enum (src/checkers/pieces.py) that also contains NONE.
# --- This one only holds the values that make sense to send across the boundary.


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"
