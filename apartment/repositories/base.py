from typing import Any, Generic, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from apartment.models.base import Base

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    def __init__(self, session: AsyncSession, model: type[T]):
        self.session = session
        self.model = model

    def _select(self):
        """SELECT over rows that have not been soft-deleted."""
        return select(self.model).where(self.model.is_deleted.is_(False))

    async def get(self, id: int) -> T | None:
        stmt = self._select().where(self.model.id == id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all(self) -> list[T]:
        stmt = self._select().order_by(self.model.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, **kwargs: Any) -> T:
        obj = self.model(**kwargs)
        self.session.add(obj)
        await self.session.flush()
        await self.session.refresh(obj)
        return obj

    async def update(self, id: int, keep_none: bool = False, **kwargs: Any) -> T | None:
        """Update columns by keyword. None values are skipped unless keep_none is set."""
        if not keep_none:
            kwargs = {k: v for k, v in kwargs.items() if v is not None}
        if not kwargs:
            return await self.get(id)
        stmt = update(self.model).where(self.model.id == id).values(**kwargs)
        await self.session.execute(stmt)
        await self.session.flush()
        obj = await self.get(id)
        if obj is not None:
            await self.session.refresh(obj)
        return obj

    async def delete(self, id: int) -> bool:
        stmt = delete(self.model).where(self.model.id == id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
