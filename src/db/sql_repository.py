"""GameRepository on top of a SQLAlchemy session."""

from uuid import UUID, uuid4

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import GameModel
from src.db.schema import DBGame


class SQLGameRepository:
    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        game_id = uuid4()
        row = DBGame(id=game_id)
        self._write(row, game)
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        logger.debug(f"Inserted game {game_id} ({row.status})")
        return self._to_model(row), game_id

    def get_game(self, game_id: UUID) -> GameModel | None:
        row = self._fetch_row(game_id)
        return self._to_model(row) if row else None

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        row = self._fetch_row(game_id)
        if row is None:
            logger.debug(f"Update skipped: no game {game_id}")
            return None

        self._write(row, game)
        self.db.commit()
        self.db.refresh(row)
        logger.debug(f"Updated game {game_id}: {len(row.undo_stack)} undo step(s), {row.status}")
        return self._to_model(row)

    def delete_game(self, game_id: UUID) -> GameModel | None:
        row = self._fetch_row(game_id)
        if row is None:
            return None

        last_state = self._to_model(row)
        self.db.delete(row)
        self.db.commit()
        logger.debug(f"Deleted game {game_id}")
        return last_state

    # -- row <-> model --
    def _fetch_row(self, game_id: UUID) -> DBGame | None:
        return self.db.scalar(select(DBGame).where(DBGame.id == game_id))

    @staticmethod
    def _write(row: DBGame, game: GameModel) -> None:
        row.current_position = game.current_position
        # always a fresh list: the JSON column does not track in-place mutation
        row.undo_stack = list(game.history)
        row.status = str(game.status)
        row.ended_by_user = game.user_ended

    @staticmethod
    def _to_model(row: DBGame) -> GameModel:
        return GameModel(
            current_position=row.current_position,
            history=list(row.undo_stack),
            status=row.status,
            user_ended=row.ended_by_user,
        )
