# stockwise/store/repository.py
"""
Generic repository over a single SQLModel table.

One implementation serves every entity: it is parameterized by the table
model (what is stored and returned) and by the non-table base schema (what a
create/update payload is validated against).
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Tuple, Type, TypeVar, Union

import pydantic
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError, StatementError
from sqlmodel import Session, SQLModel, select

from ..models import as_utc

from .errors import (
    ConflictError,
    NotFoundError,
    ReadOnlyCollectionError,
    StoreUnavailable,
    ValidationError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=SQLModel)
R = TypeVar("R")

Record = Union[Mapping[str, Any], SQLModel]

# Owned by the store; never taken from a payload
MANAGED_FIELDS = ("id", "created_date", "updated_date")


@dataclass
class ListResult(Generic[T]):
    items: List[T] = field(default_factory=list)


class Repository(Generic[T]):
    """
    Uniform list/get/create/update/delete over one collection.

    Blocking session work runs in a worker thread, so several list_all()
    calls awaited together overlap. Every call opens its own session;
    nothing is cached between calls. Deletion is opt-in per collection.
    """

    def __init__(
        self,
        name: str,
        model: Type[T],
        schema: Type[SQLModel],
        engine: Engine,
        read_only: bool = False,
        deletable: bool = False,
    ):
        self.name = name
        self.model = model
        self.schema = schema
        self.engine = engine
        self.read_only = read_only
        self.deletable = deletable

    # ---------- plumbing ----------

    async def _run(self, work: Callable[[Session], R]) -> R:
        return await asyncio.to_thread(self._run_sync, work)

    def _run_sync(self, work: Callable[[Session], R]) -> R:
        try:
            with Session(self.engine, expire_on_commit=False) as session:
                return work(session)
        except (OperationalError, InterfaceError) as e:
            logger.warning("Record store unavailable for %s: %s", self.name, e)
            raise StoreUnavailable(f"Backend unavailable for '{self.name}'") from e
        except (StatementError, ValueError) as e:
            # OperationalError and InterfaceError are StatementErrors too; caught above
            raise ValidationError(f"Invalid record for '{self.name}': {e}") from e

    def _check_writable(self, action: str) -> None:
        if self.read_only:
            raise ReadOnlyCollectionError(f"Cannot {action} records in '{self.name}'")

    def _prepare(self, record: Record) -> Tuple[str, Dict[str, Any]]:
        """
        Split a payload into its identifier and the validated field values.

        The result holds every schema field, so fields missing from the
        payload come back as their defaults. Naive datetimes are taken
        to be UTC.
        """
        data = record.model_dump() if isinstance(record, SQLModel) else dict(record)

        record_id = data.get("id")
        if not isinstance(record_id, str) or not record_id:
            raise ValidationError(f"Record for '{self.name}' has no identifier")

        payload = {k: v for k, v in data.items() if k not in MANAGED_FIELDS}
        try:
            validated = self.schema.model_validate(payload)
        except pydantic.ValidationError as e:
            raise ValidationError(f"Invalid record for '{self.name}': {e}") from e

        fields = {
            k: as_utc(v) if isinstance(v, datetime) else v
            for k, v in validated.model_dump().items()
        }
        return record_id, fields

    # ---------- reads ----------

    async def list_all(self) -> ListResult[T]:
        """Every record of the collection, in no particular order."""

        def work(session: Session) -> ListResult[T]:
            return ListResult(items=list(session.exec(select(self.model)).all()))

        return await self._run(work)

    async def get(self, record_id: str) -> Optional[T]:
        return await self._run(lambda session: session.get(self.model, record_id))

    # ---------- writes ----------

    async def create(self, record: Record) -> T:
        """Insert a record carrying a caller-assigned identifier."""
        self._check_writable("create")
        record_id, fields = self._prepare(record)

        def work(session: Session) -> T:
            if session.get(self.model, record_id) is not None:
                raise ConflictError(f"'{record_id}' already exists in '{self.name}'")

            now = datetime.now(timezone.utc)
            row = self.model(id=record_id, created_date=now, updated_date=now, **fields)
            session.add(row)
            try:
                session.commit()
            except IntegrityError as e:
                session.rollback()
                raise ConflictError(f"'{record_id}' already exists in '{self.name}'") from e
            session.refresh(row)
            return row

        row = await self._run(work)
        logger.info("Created %s/%s", self.name, record_id)
        return row

    async def update(self, record: Record) -> T:
        """
        Replace the stored record with the supplied fields.

        No merge with the previous values and no version check: the last
        writer wins.
        """
        self._check_writable("update")
        record_id, fields = self._prepare(record)

        def work(session: Session) -> T:
            row = session.get(self.model, record_id)
            if row is None:
                raise NotFoundError(f"'{record_id}' not found in '{self.name}'")

            for key, value in fields.items():
                setattr(row, key, value)
            row.updated_date = datetime.now(timezone.utc)

            session.add(row)
            session.commit()
            session.refresh(row)
            return row

        row = await self._run(work)
        logger.info("Updated %s/%s", self.name, record_id)
        return row

    async def delete(self, record_id: str) -> None:
        self._check_writable("delete")
        if not self.deletable:
            raise ReadOnlyCollectionError(f"Records in '{self.name}' cannot be deleted")

        def work(session: Session) -> None:
            row = session.get(self.model, record_id)
            if row is None:
                raise NotFoundError(f"'{record_id}' not found in '{self.name}'")
            session.delete(row)
            session.commit()

        await self._run(work)
        logger.info("Deleted %s/%s", self.name, record_id)
