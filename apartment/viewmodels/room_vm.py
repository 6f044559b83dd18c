import logging
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from apartment.config import settings
from apartment.database import transaction
from apartment.errors import ConflictError, NotFoundError
from apartment.models.room import Room
from apartment.repositories.interior_repo import (
    InteriorPatternRepository,
    InteriorRepository,
    InteriorTypeRepository,
)
from apartment.repositories.playlist_repo import PlaylistRepository
from apartment.repositories.room_repo import RoomRepository
from apartment.schemas.room import InteriorEntry

logger = logging.getLogger(__name__)

ROOM_NOT_FOUND = "Room not found"


@dataclass
class EntryOutcome:
    """What a best-effort batch operation did with one request entry."""

    index: int
    applied: bool
    action: str | None = None  # "insert" / "update" / "add"
    reason: str | None = None  # set when skipped

    @classmethod
    def skipped(cls, index: int, reason: str) -> "EntryOutcome":
        return cls(index=index, applied=False, reason=reason)


@dataclass
class RoomListViewModel:
    rooms: list[Room] = field(default_factory=list)

    @classmethod
    async def load(cls, session: AsyncSession) -> "RoomListViewModel":
        repo = RoomRepository(session)
        return cls(rooms=await repo.get_all_ordered())


@dataclass
class RoomDetailViewModel:
    room: Room | None = None
    interiors: list[dict] = field(default_factory=list)
    playlists: list[str] = field(default_factory=list)

    @classmethod
    async def _build(cls, session: AsyncSession, room: Room | None) -> "RoomDetailViewModel":
        if not room:
            raise NotFoundError(ROOM_NOT_FOUND)
        interiors = await InteriorRepository(session).get_room_details(room.id)
        playlists = await PlaylistRepository(session).get_urls(room.id)
        return cls(room=room, interiors=interiors, playlists=playlists)

    @classmethod
    async def load_by_alias(cls, session: AsyncSession, room_alias_id: str) -> "RoomDetailViewModel":
        room = await RoomRepository(session).get_by_alias(room_alias_id)
        return await cls._build(session, room)

    @classmethod
    async def load_by_login(cls, session: AsyncSession, login_id: str) -> "RoomDetailViewModel":
        room = await RoomRepository(session).get_by_login(login_id)
        return await cls._build(session, room)

    def to_dict(self) -> dict:
        return {
            "room_number": self.room.room_number,
            "room_name": self.room.room_name,
            "is_occupied": self.room.is_occupied,
            "interiors": self.interiors,
            "playlists": self.playlists,
        }


class RoomActions:
    """Room mutations. Each multi-step change commits as a single transaction."""

    @staticmethod
    async def _room_by_login(session: AsyncSession, login_id: str) -> Room:
        room = await RoomRepository(session).get_by_login(login_id)
        if not room:
            raise NotFoundError(ROOM_NOT_FOUND)
        return room

    @staticmethod
    async def _apply_assignment(session: AsyncSession, room_id: int, type_id: int, pattern_id: int) -> str:
        """Point the room's interior for a type at a pattern, keeping one row per type."""
        repo = InteriorRepository(session)
        existing = await repo.get_for_room_and_type(room_id, type_id)
        if existing:
            await repo.update(existing.id, pattern_id=pattern_id)
            return "update"
        await repo.create(room_id=room_id, pattern_id=pattern_id)
        return "insert"

    @classmethod
    async def _seed_default_interiors(cls, session: AsyncSession, room_id: int) -> list[EntryOutcome]:
        slots = settings.default_interior_slots
        types = await InteriorTypeRepository(session).get_by_codes(slots)
        pattern_repo = InteriorPatternRepository(session)

        outcomes = []
        for index, code in enumerate(slots):
            itype = types.get(code)
            if itype is None:
                logger.warning("Default interior type %r is not in the catalog, skipping", code)
                outcomes.append(EntryOutcome.skipped(index, "unknown type"))
                continue
            pattern = await pattern_repo.get_by_number(itype.id, settings.default_pattern_number)
            if pattern is None:
                logger.warning(
                    "Interior type %r has no default pattern #%d, skipping",
                    code,
                    settings.default_pattern_number,
                )
                outcomes.append(EntryOutcome.skipped(index, "no default pattern"))
                continue
            action = await cls._apply_assignment(session, room_id, itype.id, pattern.id)
            outcomes.append(EntryOutcome(index=index, applied=True, action=action))
        return outcomes

    @classmethod
    async def claim_room(cls, session: AsyncSession, room_alias_id: str) -> tuple[Room, list[EntryOutcome]]:
        repo = RoomRepository(session)
        room = await repo.get_by_alias(room_alias_id)
        if not room:
            raise NotFoundError(ROOM_NOT_FOUND)
        if room.is_occupied:
            raise ConflictError("This room is already occupied", status_code=400)

        async with transaction(session):
            # conditional flip: a concurrent claim that got here first leaves rowcount 0
            if not await repo.mark_occupied(room.id):
                raise ConflictError("This room is already occupied", status_code=400)
            outcomes = await cls._seed_default_interiors(session, room.id)

        logger.info(
            "Room %s claimed, %d default interiors seeded",
            room.room_number,
            sum(1 for o in outcomes if o.applied),
        )
        return room, outcomes

    @classmethod
    async def rename_room(cls, session: AsyncSession, login_id: str, room_name: str) -> Room:
        room = await cls._room_by_login(session, login_id)
        async with transaction(session):
            room = await RoomRepository(session).update(room.id, room_name=room_name)
        return room

    @classmethod
    async def set_interiors(cls, session: AsyncSession, login_id: str, entries: list[Any]) -> list[EntryOutcome]:
        """Apply each {type, pattern} entry; entries that do not resolve are skipped."""
        room = await cls._room_by_login(session, login_id)
        type_repo = InteriorTypeRepository(session)
        pattern_repo = InteriorPatternRepository(session)

        outcomes = []
        async with transaction(session):
            for index, raw in enumerate(entries):
                try:
                    entry = InteriorEntry.model_validate(raw)
                except PydanticValidationError:
                    outcomes.append(EntryOutcome.skipped(index, "malformed entry"))
                    continue

                itype = await type_repo.get_by_code(entry.type)
                if itype is None:
                    outcomes.append(EntryOutcome.skipped(index, "unknown type"))
                    continue
                pattern = await pattern_repo.get(entry.pattern)
                if pattern is None:
                    outcomes.append(EntryOutcome.skipped(index, "unknown pattern"))
                    continue
                if pattern.type_id != itype.id:
                    outcomes.append(EntryOutcome.skipped(index, "pattern does not belong to type"))
                    continue

                action = await cls._apply_assignment(session, room.id, itype.id, pattern.id)
                outcomes.append(EntryOutcome(index=index, applied=True, action=action))

        for outcome in outcomes:
            if not outcome.applied:
                logger.debug("Room %s: interior entry %d skipped (%s)", room.room_number, outcome.index, outcome.reason)
        return outcomes

    @classmethod
    async def set_playlists(cls, session: AsyncSession, login_id: str, urls: list[Any]) -> list[EntryOutcome]:
        """Replace the room's whole playlist. Non-string and empty entries are dropped."""
        room = await cls._room_by_login(session, login_id)
        repo = PlaylistRepository(session)

        outcomes = []
        keep = []
        for index, url in enumerate(urls):
            if not isinstance(url, str) or not url:
                outcomes.append(EntryOutcome.skipped(index, "not a non-empty string"))
                continue
            keep.append(url)
            outcomes.append(EntryOutcome(index=index, applied=True, action="add"))

        async with transaction(session):
            await repo.delete_by_room(room.id)
            await repo.add_all(room.id, keep)

        logger.debug("Room %s playlist replaced with %d entries", room.room_number, len(keep))
        return outcomes

    @classmethod
    async def playlist_url(cls, session: AsyncSession, room_alias_id: str, index: int) -> str:
        room = await RoomRepository(session).get_by_alias(room_alias_id)
        if not room:
            raise NotFoundError(ROOM_NOT_FOUND)
        urls = await PlaylistRepository(session).get_urls(room.id)
        if index < 0 or index >= len(urls) or not urls[index]:
            raise NotFoundError("Playlist entry not found")
        return urls[index]
