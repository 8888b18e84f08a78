"""Initialize database tables for the Roster service."""

from __future__ import annotations

import asyncio
import sys

from sqlalchemy.ext.asyncio import create_async_engine

from roster.core.config import get_settings
from roster.database.base import Base
from roster.models.character import Character  # noqa: F401


async def init_db(database_url: str | None = None) -> int:
    """Create the characters table, dropping it first when reset is enabled."""
    settings = get_settings()
    url = database_url or settings.database_url
    drop_tables = settings.schema_reset_enabled
    # Remove user/password from logs for security
    db_host = url.split("@")[1] if "@" in url else "database"
    print(f"🔗 Connecting to database: {db_host}")

    if drop_tables:
        print("⚠️  ROSTER_SCHEMA_RESET_ENABLED is true → dropping existing tables.")
    else:
        print("🛡️  Schema reset guard is active → skipping DROP.")

    engine = create_async_engine(url, echo=False)

    try:
        async with engine.begin() as conn:
            if drop_tables:
                await conn.run_sync(Base.metadata.drop_all)
            print("📦 Creating database tables...")
            await conn.run_sync(Base.metadata.create_all)

        print("✅ Database tables created successfully!\n")
        return 0
    except Exception as exc:
        print(f"❌ Error creating database tables: {exc}")
        import traceback

        traceback.print_exc()
        return 1
    finally:
        await engine.dispose()


def main() -> None:
    """Entry point for database initialization."""
    exit_code = asyncio.run(init_db())
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
