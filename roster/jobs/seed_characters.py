"""Load the initial character roster into an empty table.

Seeding is not idempotent: running it against a table that already holds
these names fails on the unique ``name`` constraint.
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from roster.core.config import get_settings
from roster.repositories import CharacterRepository

SEED_CHARACTERS: tuple[dict[str, str], ...] = (
    {"name": "Shuichi Saihara", "talent": "Detective", "gender": "Male", "height": "171 cm", "weight": "58 kg", "birthday": "September 7", "image": "/images/shuichi.jpg"},
    {"name": "Kaede Akamatsu", "talent": "Pianist", "gender": "Female", "height": "167 cm", "weight": "53 kg", "birthday": "March 26", "image": "/images/kaede.jpg"},
    {"name": "Kaito Momota", "talent": "Astronaut", "gender": "Male", "height": "184 cm", "weight": "74 kg", "birthday": "April 12", "image": "/images/kaito.jpg"},
    {"name": "Maki Harukawa", "talent": "Child Caregiver", "gender": "Female", "height": "162 cm", "weight": "44 kg", "birthday": "February 2", "image": "/images/maki.jpg"},
    {"name": "Kokichi Oma", "talent": "Supreme Leader", "gender": "Male", "height": "156 cm", "weight": "44 kg", "birthday": "June 21", "image": "/images/kokichi.jpg"},
    {"name": "Himiko Yumeno", "talent": "Magician", "gender": "Female", "height": "150 cm", "weight": "39 kg", "birthday": "December 3", "image": "/images/himiko.jpg"},
    {"name": "K1-B0", "talent": "Robot", "gender": "None", "height": "160 cm", "weight": "89 kg", "birthday": "October 29", "image": "/images/keebo.jpg"},
    {"name": "Angie Yonaga", "talent": "Artist", "gender": "Female", "height": "157 cm", "weight": "41 kg", "birthday": "April 18", "image": "/images/angie.jpg"},
    {"name": "Gonta Gokuhara", "talent": "Entomologist", "gender": "Male", "height": "198 cm", "weight": "94 kg", "birthday": "January 23", "image": "/images/gonta.jpg"},
    {"name": "Kirumi Tojo", "talent": "Maid", "gender": "Female", "height": "176 cm", "weight": "52 kg", "birthday": "May 10", "image": "/images/kirumi.jpg"},
    {"name": "Korekiyo Shinguji", "talent": "Anthropologist", "gender": "Male", "height": "188 cm", "weight": "65 kg", "birthday": "July 31", "image": "/images/korekiyo.jpg"},
    {"name": "Miu Iruma", "talent": "Inventor", "gender": "Female", "height": "173 cm", "weight": "56 kg", "birthday": "November 16", "image": "/images/miu.jpg"},
    {"name": "Rantaro Amami", "talent": "???", "gender": "Male", "height": "179 cm", "weight": "62 kg", "birthday": "October 3", "image": "/images/rantaro.jpg"},
    {"name": "Ryoma Hoshi", "talent": "Tennis Pro", "gender": "Male", "height": "105 cm", "weight": "40 kg", "birthday": "July 1", "image": "/images/ryoma.jpg"},
    {"name": "Tenko Chabashira", "talent": "Aikido Master", "gender": "Female", "height": "165 cm", "weight": "52 kg", "birthday": "January 9", "image": "/images/tenko.jpg"},
    {"name": "Tsumugi Shirogane", "talent": "Cosplayer", "gender": "Female", "height": "174 cm", "weight": "51 kg", "birthday": "August 15", "image": "/images/tsumugi.jpg"},
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Seed the characters table with the initial roster",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--database-url",
        help="Override ROSTER_DATABASE_URL",
    )
    return parser.parse_args()


def resolve_database_url(cli_value: str | None) -> str:
    if cli_value:
        return cli_value
    return os.getenv("ROSTER_DATABASE_URL") or get_settings().database_url


async def seed(session: AsyncSession) -> int:
    """Insert every seed character in order and commit once."""
    repo = CharacterRepository(session)
    for fields in SEED_CHARACTERS:
        await repo.create(fields)
    await session.commit()
    return len(SEED_CHARACTERS)


async def run(database_url: str) -> int:
    engine = create_async_engine(database_url, echo=False)
    session_factory = async_sessionmaker(bind=engine, expire_on_commit=False)
    try:
        async with session_factory() as session:
            count = await seed(session)
        print(f"✅ Seeded {count} characters")
        return 0
    except Exception as exc:
        print(f"❌ Seeding failed: {exc}")
        return 1
    finally:
        await engine.dispose()


def main() -> None:
    args = parse_args()
    sys.exit(asyncio.run(run(resolve_database_url(args.database_url))))


if __name__ == "__main__":
    main()
