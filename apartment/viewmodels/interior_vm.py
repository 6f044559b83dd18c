import logging
from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncSession

from apartment.database import transaction
from apartment.errors import ConflictError, NotFoundError
from apartment.models.interior import InteriorPattern, InteriorType
from apartment.repositories.interior_repo import InteriorPatternRepository, InteriorTypeRepository
from apartment.schemas.interior import (
    InteriorPatternCreate,
    InteriorPatternUpdate,
    InteriorTypeCreate,
    InteriorTypeUpdate,
)

logger = logging.getLogger(__name__)


@dataclass
class InteriorCatalogViewModel:
    types: list[InteriorType] = field(default_factory=list)
    patterns: list[InteriorPattern] = field(default_factory=list)
    combinations: list[dict] = field(default_factory=list)

    @classmethod
    async def load_types(cls, session: AsyncSession) -> "InteriorCatalogViewModel":
        return cls(types=await InteriorTypeRepository(session).get_all())

    @classmethod
    async def load_patterns(cls, session: AsyncSession) -> "InteriorCatalogViewModel":
        return cls(patterns=await InteriorPatternRepository(session).get_all_ordered())

    @classmethod
    async def load_combinations(cls, session: AsyncSession) -> "InteriorCatalogViewModel":
        types = await InteriorTypeRepository(session).get_all_with_patterns()
        combinations = [
            {
                "type": t,
                "patterns": sorted(
                    (p for p in t.patterns if not p.is_deleted),
                    key=lambda p: p.pattern_number,
                ),
            }
            for t in types
        ]
        return cls(types=types, combinations=combinations)


class InteriorAdmin:
    """Catalog maintenance behind the admin endpoints."""

    @staticmethod
    async def _get_type(session: AsyncSession, type_id: int) -> InteriorType:
        itype = await InteriorTypeRepository(session).get(type_id)
        if not itype:
            raise NotFoundError("Interior type not found")
        return itype

    @staticmethod
    async def _get_pattern(session: AsyncSession, pattern_id: int) -> InteriorPattern:
        pattern = await InteriorPatternRepository(session).get(pattern_id)
        if not pattern:
            raise NotFoundError("Interior pattern not found")
        return pattern

    @classmethod
    async def create_type(cls, session: AsyncSession, data: InteriorTypeCreate) -> InteriorType:
        repo = InteriorTypeRepository(session)
        if await repo.get_by_code(data.code):
            raise ConflictError(f"Interior type code {data.code!r} already exists")
        async with transaction(session):
            itype = await repo.create(code=data.code, name=data.name)
        logger.info("Created interior type %s (%s)", itype.code, itype.id)
        return itype

    @classmethod
    async def update_type(cls, session: AsyncSession, type_id: int, data: InteriorTypeUpdate) -> InteriorType:
        repo = InteriorTypeRepository(session)
        itype = await cls._get_type(session, type_id)
        updates = data.model_dump(exclude_unset=True)

        new_code = updates.get("code")
        if new_code and new_code != itype.code:
            other = await repo.get_by_code(new_code)
            if other and other.id != itype.id:
                raise ConflictError(f"Interior type code {new_code!r} already exists")

        async with transaction(session):
            itype = await repo.update(type_id, **updates)
        return itype

    @classmethod
    async def delete_type(cls, session: AsyncSession, type_id: int) -> None:
        repo = InteriorTypeRepository(session)
        itype = await cls._get_type(session, type_id)
        in_use = await repo.count_assignments(type_id)
        if in_use:
            raise ConflictError(
                f"Interior type is used by {in_use} room interior(s) and cannot be deleted",
                count=in_use,
            )
        async with transaction(session):
            await repo.delete_with_patterns(type_id)
        logger.info("Deleted interior type %s", itype.code)

    @classmethod
    async def create_pattern(cls, session: AsyncSession, data: InteriorPatternCreate) -> InteriorPattern:
        repo = InteriorPatternRepository(session)
        await cls._get_type(session, data.type_id)
        # max+1 and the insert share a transaction; the unique (type_id, pattern_number)
        # constraint rejects a concurrent writer that read the same max
        async with transaction(session):
            number = await repo.next_pattern_number(data.type_id)
            pattern = await repo.create(
                type_id=data.type_id,
                pattern_number=number,
                name=data.name,
                description=data.description,
            )
        logger.info("Created interior pattern #%d for type %d", pattern.pattern_number, pattern.type_id)
        return pattern

    @classmethod
    async def update_pattern(cls, session: AsyncSession, pattern_id: int, data: InteriorPatternUpdate) -> InteriorPattern:
        await cls._get_pattern(session, pattern_id)
        async with transaction(session):
            values = data.model_dump(exclude_unset=True)
            # description is nullable and may be cleared; name may not
            if values.get("name", "") is None:
                del values["name"]
            pattern = await InteriorPatternRepository(session).update(pattern_id, keep_none=True, **values)
        return pattern

    @classmethod
    async def delete_pattern(cls, session: AsyncSession, pattern_id: int) -> None:
        repo = InteriorPatternRepository(session)
        await cls._get_pattern(session, pattern_id)
        in_use = await repo.count_assignments(pattern_id)
        if in_use:
            raise ConflictError(
                f"Interior pattern is used by {in_use} room interior(s) and cannot be deleted",
                count=in_use,
            )
        async with transaction(session):
            await repo.delete(pattern_id)
        logger.info("Deleted interior pattern %d", pattern_id)
