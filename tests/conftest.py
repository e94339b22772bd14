"""Shared fixtures: a fresh file-backed SQLite store per test."""

import pytest
from sqlmodel import Session

from stockwise.auth import MemberSession
from stockwise.database import create_db_and_tables, make_engine
from stockwise.models import Member
from stockwise.store import RecordStore, StoreUnavailable


class FlakyStore(RecordStore):
    """Record store whose list_all fails for the named collections."""

    def __init__(self, engine, failing):
        super().__init__(engine)
        self.failing = set(failing)

    async def list_all(self, name):
        if name in self.failing:
            raise StoreUnavailable(f"Backend unavailable for '{name}'")
        return await super().list_all(name)


@pytest.fixture
def engine(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'stockwise-test.db'}")
    create_db_and_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine) -> RecordStore:
    return RecordStore(engine)


@pytest.fixture
def flaky_store(engine):
    def _make(*failing: str) -> FlakyStore:
        return FlakyStore(engine, failing)

    return _make


@pytest.fixture
def member(engine) -> Member:
    """Active member persisted in the users collection."""
    row = Member(
        id="member-1",
        email="manager@example.com",
        role="Manager",
        first_name="Dana",
        last_name="Reyes",
        is_active=True,
    )
    with Session(engine, expire_on_commit=False) as session:
        session.add(row)
        session.commit()
        session.refresh(row)
    return row


@pytest.fixture
def member_session(member) -> MemberSession:
    return MemberSession(member)


@pytest.fixture
def anonymous() -> MemberSession:
    return MemberSession()
