from __future__ import annotations

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.inspection import inspect as sa_inspect
from sqlalchemy.orm import InstrumentedAttribute
from sqlalchemy.orm.interfaces import ORMOption

T = TypeVar("T")  # SQLAlchemy model class (Declarative)


class BaseRepository(Generic[T]):
    """
    Shared async repository for one declarative model.
    - Only flushes. Commit/rollback belongs to the caller (service layer).
    """

    def __init__(self, model: type[T]) -> None:
        self.model = model

    # ------------------------ Read ------------------------

    async def get(
        self,
        session: AsyncSession,
        pk: Any,
        *,
        options: Sequence[ORMOption] = (),
        for_update: bool = False,
    ) -> T | None:
        """Primary key lookup; None when the row does not exist."""
        return await session.get(
            self.model,
            pk,
            options=list(options),
            with_for_update=True if for_update else None,
        )

    async def list(
        self,
        session: AsyncSession,
        *,
        options: Sequence[ORMOption] = (),
        order_by: Sequence[InstrumentedAttribute] | None = None,
    ) -> list[T]:
        """Every row, in primary key order unless order_by is given."""
        stmt = select(self.model)
        if options:
            stmt = stmt.options(*options)
        stmt = stmt.order_by(*(order_by or sa_inspect(self.model).primary_key))
        res = await session.execute(stmt)
        return list(res.scalars().all())

    # ------------------------ Write ------------------------

    async def create(self, session: AsyncSession, obj: T) -> T:
        """Insert a new (transient) instance; its primary key is set after flush."""
        if not sa_inspect(obj).transient:
            raise ValueError("create(): expected a transient (new) SQLAlchemy model instance")
        session.add(obj)
        await session.flush()
        return obj

    async def delete(self, session: AsyncSession, obj: T) -> T:
        """Delete a loaded instance. Its attributes stay readable afterwards."""
        await session.delete(obj)
        await session.flush()
        return obj
