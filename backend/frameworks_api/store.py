from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Callable, Protocol, Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from .db import get_db
from .models import FrameworkEditorFramework
from .seed_data import FrameworkSeed


class FrameworkStore(Protocol):
    def count(self) -> int: ...

    def create_many(self, records: Sequence[FrameworkSeed]) -> int: ...


class SqlAlchemyFrameworkStore:
    """Framework store backed by the shared SQLAlchemy session factory.

    Each call runs in its own session scope, so ``create_many`` is committed
    (or rolled back) as one unit before it returns.
    """

    def __init__(self, session_scope: Callable[[], AbstractContextManager[Session]] = get_db) -> None:
        self._session_scope = session_scope

    def count(self) -> int:
        with self._session_scope() as session:
            return int(session.scalar(select(func.count()).select_from(FrameworkEditorFramework)) or 0)

    def create_many(self, records: Sequence[FrameworkSeed]) -> int:
        if not records:
            return 0

        rows = [FrameworkEditorFramework(**record.as_row()) for record in records]
        with self._session_scope() as session:
            session.add_all(rows)
            session.flush()
        return len(rows)

    def list_frameworks(self, include_hidden: bool = False) -> list[FrameworkEditorFramework]:
        statement = select(FrameworkEditorFramework).order_by(FrameworkEditorFramework.name)
        if not include_hidden:
            statement = statement.where(FrameworkEditorFramework.visible.is_(True))

        with self._session_scope() as session:
            return list(session.scalars(statement).all())


def get_framework_store() -> SqlAlchemyFrameworkStore:
    return SqlAlchemyFrameworkStore()
