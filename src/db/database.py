"""Generate database engine / sessions"""

from typing import Generator, Optional

from sqlalchemy import Engine, StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings, get_settings
from src.db.schema import Base


def create_db_engine(settings: Optional[Settings] = None) -> Engine:
    """Engine for the configured URL, with all tables created.

    An in-memory SQLite database only lives as long as its connection, so that one gets a single shared connection.
    """
    settings = settings or get_settings()
    if settings.database_url in {"sqlite://", "sqlite:///:memory:"}:
        engine = create_engine(
            settings.database_url,
            echo=settings.database_echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(settings.database_url, echo=settings.database_echo)

    Base.metadata.create_all(bind=engine)
    return engine


def get_db(engine: Engine) -> Generator[Session, None, None]:
    db = sessionmaker(autoflush=False, bind=engine)()
    try:
        yield db
    finally:
        db.close()
