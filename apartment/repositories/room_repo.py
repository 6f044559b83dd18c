from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from apartment.models.room import Room
from apartment.repositories.base import BaseRepository


class RoomRepository(BaseRepository[Room]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, Room)

    async def get_by_alias(self, room_alias_id: str) -> Room | None:
        stmt = self._select().where(Room.room_alias_id == room_alias_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_login(self, login_id: str) -> Room | None:
        stmt = self._select().where(Room.login_id == login_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all_ordered(self) -> list[Room]:
        stmt = self._select().order_by(Room.room_number)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def mark_occupied(self, room_id: int) -> bool:
        """Flip an unoccupied room to occupied. False if it was already taken."""
        stmt = (
            update(Room)
            .where(Room.id == room_id, Room.is_occupied.is_(False))
            .values(is_occupied=True)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def get_existing_numbers(self, room_numbers: list[str]) -> set[str]:
        stmt = select(Room.room_number).where(Room.room_number.in_(room_numbers))
        result = await self.session.execute(stmt)
        return set(result.scalars().all())
