"""Pytest configuration and shared fixtures."""

from typing import Generator

import pytest
from sqlalchemy import create_engine, func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from bootstrap_users.data.database import Base
from bootstrap_users.data.models import UserModel


class CountingSession(Session):
    """Session that records how many times it was closed."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.close_calls = 0

    def close(self) -> None:
        self.close_calls += 1
        super().close()


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """In-memory SQLite engine with the users table already present.

    The table is created here because the bootstrap run itself never
    touches the schema.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False)


@pytest.fixture
def db(session_factory: sessionmaker) -> Generator[Session, None, None]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def opened_sessions(engine: Engine):
    """Factory producing CountingSession instances, plus the list of them."""
    factory = sessionmaker(bind=engine, autoflush=False, class_=CountingSession)
    sessions: list[CountingSession] = []

    def make() -> CountingSession:
        session = factory()
        sessions.append(session)
        return session

    return make, sessions


def count_users(engine: Engine) -> int:
    with Session(engine) as session:
        return session.scalar(select(func.count()).select_from(UserModel))
