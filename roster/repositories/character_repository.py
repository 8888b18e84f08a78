from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from roster.models import Character


class CharacterRepository:
    """Data access helper for roster characters."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> list[Character]:
        result = await self.session.execute(select(Character).order_by(Character.id.asc()))
        return list(result.scalars().all())

    async def get(self, character_id: int) -> Character | None:
        return await self.session.get(Character, character_id)

    async def get_by_name(self, name: str, exclude_id: int | None = None) -> Character | None:
        stmt = select(Character).where(Character.name == name)
        if exclude_id is not None:
            stmt = stmt.where(Character.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        return result.scalar_one_or_none()

    async def create(self, fields: Mapping[str, Any]) -> Character:
        character = Character(**fields)
        self.session.add(character)
        await self.session.flush()
        await self.session.refresh(character)
        return character

    async def update(self, character: Character, fields: Mapping[str, Any]) -> Character:
        """Apply `fields` to an already loaded character and flush.

        Takes the ORM object rather than an id: callers look the record up
        first and raise not-found themselves.
        """
        for field, value in fields.items():
            setattr(character, field, value)
        await self.session.flush()
        await self.session.refresh(character)
        return character

    async def delete(self, character: Character) -> None:
        """Delete a loaded character. Existence is checked by the caller."""
        await self.session.delete(character)
        await self.session.flush()
