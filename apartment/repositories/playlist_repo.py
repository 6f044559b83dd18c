from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from apartment.models.playlist import Playlist
from apartment.repositories.base import BaseRepository


class PlaylistRepository(BaseRepository[Playlist]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, Playlist)

    async def get_by_room(self, room_id: int) -> list[Playlist]:
        stmt = self._select().where(Playlist.room_id == room_id).order_by(Playlist.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_urls(self, room_id: int) -> list[str]:
        return [p.url for p in await self.get_by_room(room_id)]

    async def delete_by_room(self, room_id: int) -> int:
        stmt = delete(Playlist).where(Playlist.room_id == room_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def add_all(self, room_id: int, urls: list[str]) -> list[Playlist]:
        # one flush per row keeps ids in list order
        rows = []
        for url in urls:
            row = Playlist(room_id=room_id, url=url)
            self.session.add(row)
            await self.session.flush()
            rows.append(row)
        return rows
