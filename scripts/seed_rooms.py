"""Generate room seed data.

Usage:
    python scripts/seed_rooms.py --count 100 --admin --catalog --output seed.sql
    python scripts/seed_rooms.py --count 100 --admin --catalog --apply

Without --apply the SQL is written to --output (or stdout). With --apply the
rows are inserted into the database configured by APARTMENT_DATABASE_URL.
"""

import argparse
import asyncio
import sys
from pathlib import Path

from apartment.config import settings
from apartment.database import async_session, engine
from apartment.log_config import configure_logging
from apartment.models import Base
from apartment.services.seed import build_room_rows, generate_catalog_sql, generate_seed_sql, seed_database


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Generate room seed data")
    parser.add_argument("--count", type=int, default=settings.seed_room_count, help="number of rooms")
    parser.add_argument("--start", type=int, default=1, help="first room number")
    parser.add_argument("--admin", action="store_true", help="include the admin room 0000")
    parser.add_argument("--catalog", action="store_true", help="include the default interior catalog")
    parser.add_argument("--output", type=Path, help="write SQL to this file instead of stdout")
    parser.add_argument("--apply", action="store_true", help="insert into the configured database")
    return parser.parse_args(argv)


async def apply(rows: list[dict], slots: list[str]) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with async_session() as session:
        await seed_database(session, rows, slots)
    await engine.dispose()


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(settings.log_level)
    rows = build_room_rows(args.count, start=args.start, include_admin=args.admin)
    slots = settings.default_interior_slots if args.catalog else []

    if args.apply:
        asyncio.run(apply(rows, slots))
        return 0

    sql = generate_seed_sql(rows)
    if slots:
        sql += "\n" + generate_catalog_sql(slots)
    if args.output:
        args.output.write_text(sql)
        print(f"Wrote {len(rows)} rooms to {args.output}")
    else:
        sys.stdout.write(sql)
    return 0


if __name__ == "__main__":
    sys.exit(main())
