"""Tables for checkers game sessions.

One row per game: the live position string, the undo stack (oldest first) and the reason the game stopped, if it did.
"""

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import JSON, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# "<64 chars layout> <w|b> <nn> <nn> <sq>" stays well below this
POSITION_LENGTH = 96


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    __tablename__ = "checkers_games"

    id: Mapped[UUID] = mapped_column(primary_key=True)
    current_position: Mapped[str] = mapped_column(String(POSITION_LENGTH))
    undo_stack: Mapped[list[str]] = mapped_column(JSON, default=list)
    status: Mapped[str] = mapped_column(String(32))
    ended_by_user: Mapped[bool] = mapped_column(default=False)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)
