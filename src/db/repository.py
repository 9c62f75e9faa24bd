"""Where the service layer keeps its games. SQLGameRepository is the real one; the service tests use a dict."""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    """
    Storage of checkers sessions, keyed by a game id the repository hands out.
    ----

    Every method that looks a game up returns None for an unknown id: raising is left to the service.
    """

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]: ...

    def get_game(self, game_id: UUID) -> GameModel | None: ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Overwrite position, undo history, status and the user-ended flag in one go."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Returns the last stored state of the removed game."""
        ...
