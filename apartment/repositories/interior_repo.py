from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from apartment.models.interior import Interior, InteriorPattern, InteriorType
from apartment.repositories.base import BaseRepository


class InteriorTypeRepository(BaseRepository[InteriorType]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, InteriorType)

    async def get_by_code(self, code: str) -> InteriorType | None:
        stmt = self._select().where(InteriorType.code == code)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_codes(self, codes: list[str]) -> dict[str, InteriorType]:
        stmt = self._select().where(InteriorType.code.in_(codes))
        result = await self.session.execute(stmt)
        return {t.code: t for t in result.scalars().all()}

    async def get_all_with_patterns(self) -> list[InteriorType]:
        stmt = self._select().options(selectinload(InteriorType.patterns)).order_by(InteriorType.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_assignments(self, type_id: int) -> int:
        stmt = (
            select(func.count(Interior.id))
            .join(InteriorPattern, Interior.pattern_id == InteriorPattern.id)
            .where(InteriorPattern.type_id == type_id, Interior.is_deleted.is_(False))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def delete_with_patterns(self, type_id: int) -> bool:
        await self.session.execute(delete(InteriorPattern).where(InteriorPattern.type_id == type_id))
        return await self.delete(type_id)


class InteriorPatternRepository(BaseRepository[InteriorPattern]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, InteriorPattern)

    async def get_all_ordered(self) -> list[InteriorPattern]:
        stmt = self._select().order_by(InteriorPattern.type_id, InteriorPattern.pattern_number)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_number(self, type_id: int, pattern_number: int) -> InteriorPattern | None:
        stmt = self._select().where(
            InteriorPattern.type_id == type_id,
            InteriorPattern.pattern_number == pattern_number,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def next_pattern_number(self, type_id: int) -> int:
        # soft-deleted rows still hold their number in the unique constraint
        stmt = select(func.coalesce(func.max(InteriorPattern.pattern_number), 0)).where(
            InteriorPattern.type_id == type_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one() + 1

    async def count_assignments(self, pattern_id: int) -> int:
        stmt = select(func.count(Interior.id)).where(
            Interior.pattern_id == pattern_id, Interior.is_deleted.is_(False)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()


class InteriorRepository(BaseRepository[Interior]):
    """Interior assignments: which pattern a room shows for each type."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Interior)

    async def get_for_room_and_type(self, room_id: int, type_id: int) -> Interior | None:
        stmt = (
            self._select()
            .join(InteriorPattern, Interior.pattern_id == InteriorPattern.id)
            .where(Interior.room_id == room_id, InteriorPattern.type_id == type_id)
            .order_by(Interior.id)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_room_details(self, room_id: int) -> list[dict]:
        stmt = (
            select(
                InteriorType.code,
                InteriorType.name,
                InteriorPattern.pattern_number,
                InteriorPattern.name,
            )
            .select_from(Interior)
            .outerjoin(InteriorPattern, Interior.pattern_id == InteriorPattern.id)
            .outerjoin(InteriorType, InteriorPattern.type_id == InteriorType.id)
            .where(Interior.room_id == room_id, Interior.is_deleted.is_(False))
            .order_by(Interior.id)
        )
        result = await self.session.execute(stmt)
        return [
            {"type": row[0], "type_name": row[1], "pattern": row[2], "pattern_name": row[3]}
            for row in result.all()
        ]
