"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

from contextlib import contextmanager
from typing import Generator, Optional
from uuid import UUID

from loguru import logger

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameActionRequest,
    GameResponse,
    GetGameRequest,
    MoveRequest,
)
from src.checkers.game import Game
from src.checkers.pieces import Color as DomainColor
from src.core.config import Settings, get_settings
from src.core.exceptions import RepositoryError
from src.core.log import configure_logging
from src.core.models import GameModel
from src.core.shared_types import Color, Status
from src.db.database import create_db_engine, get_db
from src.db.repository import GameRepository
from src.db.sql_repository import SQLGameRepository


class CheckersService:
    """Orchestration of layers for a checkers game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Start a new game, in the standard layout unless a starting position was requested."""

        new_game = Game.new_game(starting_position=request.starting_position)
        stored_game, game_id = self.repo.create_game(new_game.to_model())
        logger.info(f"Created game {game_id}")
        return self._create_game_response(game_id, Game.from_model(stored_game))

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by a frontend to check whose turn it is for instance.
        """
        game = Game.from_model(self._fetch_game(request.game_id))
        return self._create_game_response(request.game_id, game)

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Make a move attempt. IllegalMoveError propagates and nothing gets stored."""

        game = Game.from_model(self._fetch_game(request.game_id))
        game.move_from_command(request.square, request.direction, request.backward)
        return self._store(request.game_id, game)

    def undo_move(self, request: GameActionRequest) -> GameResponse:
        game = Game.from_model(self._fetch_game(request.game_id))
        game.undo()
        return self._store(request.game_id, game)

    def end_game(self, request: GameActionRequest) -> GameResponse:
        game = Game.from_model(self._fetch_game(request.game_id))
        game.end_game()
        return self._store(request.game_id, game)

    def restart_game(self, request: GameActionRequest) -> GameResponse:
        game = Game.from_model(self._fetch_game(request.game_id))
        game.restart_game()
        return self._store(request.game_id, game)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        if self.repo.delete_game(request.game_id) is None:
            raise RepositoryError(f"Game with game_id={request.game_id} not found.")

    # -- Internal helpers --
    def _store(self, game_id: UUID, game: Game) -> GameResponse:
        """Capture updated state in a GameModel, persist it, and build the response."""
        updated = self.repo.update_game(game_id, game.to_model())
        if updated is None:
            raise RepositoryError(f"Game with {game_id=} could not be updated.")
        return self._create_game_response(game_id, game)

    def _create_game_response(self, game_id: UUID, game: Game) -> GameResponse:
        model = game.to_model()
        return GameResponse(
            game_id=game_id,
            position=model.current_position,
            color_to_move=Color.WHITE if game.is_white_to_move() else Color.BLACK,
            status=Status(model.status),
            result=game.result_text(),
            has_undo=game.has_undo(),
            captures={
                Color.WHITE: game.board.captures[DomainColor.WHITE],
                Color.BLACK: game.board.captures[DomainColor.BLACK],
            },
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model


@contextmanager
def open_service(
    settings: Optional[Settings] = None,
) -> Generator[CheckersService, None, None]:
    """
    Start-up wiring for a process serving games.
    ----

    Configures logging, creates the database engine (and tables) and hands out a service bound to one session.
    Session and engine are released when the block exits.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    engine = create_db_engine(settings)
    logger.info(f"Checkers service started on {engine.url.render_as_string(hide_password=True)}")
    db_sessions = get_db(engine)
    try:
        yield CheckersService(SQLGameRepository(next(db_sessions)))
    finally:
        db_sessions.close()
        engine.dispose()
