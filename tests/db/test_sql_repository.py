"""Unit tests for src/db/sql_repository.py"""

from uuid import uuid4

import pytest
from sqlalchemy.orm import Session

from src.checkers.position import STARTING_POSITION
from src.core.shared_types import Status
from src.db.schema import DBGame
from src.db.sql_repository import GameModel, SQLGameRepository


@pytest.fixture
def model() -> GameModel:
    """Mock game data: one move played"""
    return GameModel(
        current_position="1b1b1b1b/b1b1b1b1/1b1b1b1b/8/1w6/8/1w1w1w1w/w1w1w1w1 b 0 0 -",
        history=[STARTING_POSITION],
        status=Status.IN_PROGRESS,
        user_ended=False,
    )


def test_create_game(db_session_repo: Session, model: GameModel) -> None:
    """Conversion from a GameModel to DBGame for a new entry to the database."""
    repo = SQLGameRepository(db_session_repo)
    record_in_db, _ = repo.create_game(model)
    assert isinstance(record_in_db, GameModel)
    assert record_in_db == model


def test_timestamps_are_set(db_session_repo: Session, model: GameModel) -> None:
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(model)
    row = db_session_repo.get(DBGame, game_id)
    assert row is not None
    assert row.created_at is not None
    assert row.updated_at is not None


def test_get_game_by_id(db_session_repo: Session, model: GameModel) -> None:
    repo = SQLGameRepository(db_session_repo)
    expected_game, game_id = repo.create_game(model)
    game_found = repo.get_game(game_id)
    assert isinstance(game_found, GameModel)
    assert game_found == expected_game


def test_get_unknown_game(db_session_repo: Session, model: GameModel) -> None:
    """Should return None if ID does not match anything in database."""
    repo = SQLGameRepository(db_session_repo)
    assert repo.get_game(uuid4()) is None

    # Now do it with creating a game, but retrieving from the wrong ID
    _ = repo.create_game(model)
    assert repo.get_game(uuid4()) is None


def test_update_game(db_session_repo: Session, model: GameModel) -> None:
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(model)

    updated_model = GameModel(
        current_position=STARTING_POSITION,
        history=[],
        status=Status.ENDED_BY_USER,
        user_ended=True,
    )
    updated = repo.update_game(game_id, updated_model)
    assert updated == updated_model
    assert repo.get_game(game_id) == updated_model


def test_update_history_grows(db_session_repo: Session, model: GameModel) -> None:
    """The JSON column must pick up a longer history list"""
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(model)

    model.history.append(model.current_position)
    _ = repo.update_game(game_id, model)

    stored = repo.get_game(game_id)
    assert stored is not None
    assert len(stored.history) == 2


def test_update_unknown_game(db_session_repo: Session, model: GameModel) -> None:
    repo = SQLGameRepository(db_session_repo)
    assert repo.update_game(uuid4(), model) is None


def test_delete_game(db_session_repo: Session, model: GameModel) -> None:
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(model)

    deleted = repo.delete_game(game_id)

    assert deleted == model
    assert repo.get_game(game_id) is None
    assert repo.delete_game(game_id) is None
