"""Initial data for a fresh deployment.

Rooms are never created through the API. This module produces them, either as
a SQL file to load with the database's own tooling or by inserting directly
through the ORM. The default interior catalog (one type per default slot, each
with a pattern #1) can be seeded the same way so that claims have something to
point new rooms at.
"""

import logging
import secrets

from sqlalchemy.ext.asyncio import AsyncSession

from apartment.config import settings
from apartment.database import transaction
from apartment.models.interior import InteriorPattern, InteriorType
from apartment.models.room import Room
from apartment.repositories.interior_repo import InteriorPatternRepository, InteriorTypeRepository
from apartment.repositories.room_repo import RoomRepository

logger = logging.getLogger(__name__)

DEFAULT_PATTERN_NAME = "Default"


def generate_token(nbytes: int | None = None) -> str:
    """Random hex token, two characters per byte."""
    return secrets.token_hex(nbytes or settings.token_bytes)


def format_room_number(number: int) -> str:
    if not 0 <= number <= 9999:
        raise ValueError(f"room number out of range: {number}")
    return f"{number:04d}"


def build_room_rows(count: int, start: int = 1, include_admin: bool = False) -> list[dict]:
    numbers = list(range(start, start + count))
    if include_admin and 0 not in numbers:
        numbers.insert(0, 0)

    rows = []
    seen: set[str] = set()
    for number in numbers:
        alias, login = generate_token(), generate_token()
        while alias in seen or login in seen or alias == login:
            alias, login = generate_token(), generate_token()
        seen.update((alias, login))
        rows.append(
            {
                "room_number": format_room_number(number),
                "room_alias_id": alias,
                "login_id": login,
                "is_occupied": False,
            }
        )
    return rows


def _quote(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def generate_seed_sql(rows: list[dict]) -> str:
    lines = ["-- room seed data", ""]
    for row in rows:
        lines.append(
            "INSERT INTO rooms (room_number, room_alias_id, login_id, is_occupied) VALUES "
            f"({_quote(row['room_number'])}, {_quote(row['room_alias_id'])}, "
            f"{_quote(row['login_id'])}, {int(row['is_occupied'])});"
        )
    return "\n".join(lines) + "\n"


def generate_catalog_sql(slots: list[str] | None = None) -> str:
    slots = slots if slots is not None else settings.default_interior_slots
    lines = ["-- default interior catalog", ""]
    for code in slots:
        lines.append(f"INSERT INTO interior_types (code, name) VALUES ({_quote(code)}, {_quote(code.title())});")
        lines.append(
            "INSERT INTO interior_patterns (type_id, pattern_number, name) "
            f"SELECT id, {settings.default_pattern_number}, {_quote(DEFAULT_PATTERN_NAME)} "
            f"FROM interior_types WHERE code = {_quote(code)};"
        )
    return "\n".join(lines) + "\n"


async def seed_database(
    session: AsyncSession,
    rows: list[dict],
    slots: list[str] | None = None,
) -> dict[str, int]:
    """Insert rooms and any missing catalog defaults. Existing room numbers are left alone."""
    counts = {"rooms": 0, "types": 0, "patterns": 0}
    existing = await RoomRepository(session).get_existing_numbers([r["room_number"] for r in rows])

    type_repo = InteriorTypeRepository(session)
    pattern_repo = InteriorPatternRepository(session)

    async with transaction(session):
        for row in rows:
            if row["room_number"] in existing:
                logger.info("Room %s already exists, skipping", row["room_number"])
                continue
            session.add(Room(**row))
            counts["rooms"] += 1

        for code in slots or []:
            itype = await type_repo.get_by_code(code)
            if itype is None:
                itype = InteriorType(code=code, name=code.title())
                session.add(itype)
                await session.flush()
                counts["types"] += 1
            if await pattern_repo.get_by_number(itype.id, settings.default_pattern_number) is None:
                session.add(
                    InteriorPattern(
                        type_id=itype.id,
                        pattern_number=settings.default_pattern_number,
                        name=DEFAULT_PATTERN_NAME,
                    )
                )
                await session.flush()
                counts["patterns"] += 1

    logger.info(
        "Seeded %d rooms, %d interior types, %d patterns",
        counts["rooms"],
        counts["types"],
        counts["patterns"],
    )
    return counts
