"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.checkers.position import is_valid_position_fen
from src.checkers.square import is_valid_square_token
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Status

PositionFEN = str


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    starting_position: Optional[PositionFEN] = None

    @field_validator("starting_position")
    @classmethod
    def validate_starting_position(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        value = value.strip()
        if not is_valid_position_fen(value):
            raise InvalidRequestError(
                "Starting position must read '<layout> <w|b> <white captures> <black captures> <chain square|->'."
            )
        return value


class MoveRequest(BaseModel):
    """The command a player types: '<square> <l|r> [b]'"""

    game_id: UUID
    square: str
    direction: str
    backward: bool = False

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        value = value.strip().lower()
        if not is_valid_square_token(value):
            raise InvalidRequestError(
                f"Cannot interpret square: {value!r} as a valid square name."
            )
        return value

    @field_validator("direction")
    @classmethod
    def validate_direction(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in {"l", "r"}:
            raise InvalidRequestError(f"Direction must be 'l' or 'r', got {value!r}.")
        return value


class GetGameRequest(BaseModel):
    game_id: UUID


class GameActionRequest(BaseModel):
    """undo / end / restart only need to know which game."""

    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    position: PositionFEN
    color_to_move: Color
    status: Status
    result: str
    has_undo: bool
    captures: dict[Color, int]
