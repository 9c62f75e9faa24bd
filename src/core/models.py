"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Both the API layer (higher) and domain/db layers (lower) use the model defined here to send to/receive from the Service.
"""

from dataclasses import dataclass

# Type alias to make GameModel easier to read
PositionFEN = str


@dataclass
class GameModel:
    """Transport-safe representation of a checkers game used between API, Service, DB, and Game layers.

    * current_position: position string of the live game (see src/checkers/position.py)
    * history: the undo stack as position strings, oldest first
    """

    current_position: PositionFEN
    history: list[PositionFEN]
    status: str
    user_ended: bool = False
