"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Generator

import pytest
from sqlalchemy import Engine
from sqlalchemy.orm import Session

from src.core.config import Settings
from src.db.database import create_db_engine, get_db

TEST_SETTINGS = Settings(database_url="sqlite:///:memory:", database_echo=False)


@pytest.fixture
def db_engine() -> Generator[Engine, None, None]:
    """Fresh in-memory SQLite database per test, so unit tests of the repository stay independent of each other."""
    engine = create_db_engine(TEST_SETTINGS)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def db_session_repo(db_engine: Engine) -> Generator[Session, None, None]:
    """Connection to the test database."""
    yield from get_db(db_engine)
