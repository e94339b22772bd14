# stockwise/database.py

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine

from .config import settings


def make_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Build an engine for the given URL.

    SQLite connections are used from worker threads by the record store,
    so the same-thread check is disabled for them.
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, echo=echo, connect_args=connect_args)


engine = make_engine(settings.database_url, echo=settings.sql_echo)


def create_db_and_tables(target: Engine | None = None) -> None:
    # Import models so every table is registered on the metadata
    from . import models  # noqa: F401

    SQLModel.metadata.create_all(target or engine)


