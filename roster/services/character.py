from __future__ import annotations

import logging
import re
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from roster.core.constants import (
    CHARACTER_FIELDS,
    DEFAULT_IMAGE,
    MAX_CHARACTER_ID,
    MIN_CHARACTER_ID,
    REQUIRED_CREATE_FIELDS,
)
from roster.database.session import get_db_session
from roster.exceptions import (
    CharacterConflictError,
    CharacterNotFoundError,
    InvalidCharacterIdError,
    MissingFieldsError,
    RosterServiceError,
    UnexpectedCharacterError,
)
from roster.models import Character
from roster.repositories import CharacterRepository
from roster.schemas import CharacterPayload, CharacterRead, DeletedCharacter

logger = logging.getLogger(__name__)

_LEADING_INTEGER = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|([0-9]+))")


def parse_character_id(raw_id: str) -> int:
    """Parse the leading integer of a path id, ignoring any trailing text.

    Leading whitespace and a sign are allowed, and a `0x` prefix reads hex
    digits, so `"1abc"`, `"1.0"` and `"+1"` all give 1. Only an id with no
    leading integer is rejected.
    """
    match = _LEADING_INTEGER.match(raw_id)
    if match is None:
        raise InvalidCharacterIdError()
    sign, hex_digits, digits = match.groups()
    if digits is not None:
        value = int(digits)
    elif hex_digits:
        value = int(hex_digits, 16)
    else:
        raise InvalidCharacterIdError()
    return -value if sign == "-" else value


class CharacterService:
    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        self.session = session
        self.repo = CharacterRepository(session)

    @classmethod
    def create_for_test(
        cls,
        session: AsyncSession,
        repo: CharacterRepository | None = None,
    ) -> "CharacterService":
        service = cls.__new__(cls)
        service.session = session
        service.repo = repo or CharacterRepository(session)
        return service

    async def list_characters(self) -> list[CharacterRead]:
        async with self._failures_as("fetch characters"):
            characters = await self.repo.list_all()
            return [CharacterRead.model_validate(character) for character in characters]

    async def get_character(self, raw_id: str) -> CharacterRead:
        async with self._failures_as("fetch character"):
            character = await self._get_existing(parse_character_id(raw_id))
            return CharacterRead.model_validate(character)

    async def create_character(self, payload: CharacterPayload) -> CharacterRead:
        async with self._failures_as("create character"):
            missing = [field for field in REQUIRED_CREATE_FIELDS if not getattr(payload, field)]
            if missing:
                raise MissingFieldsError(missing)

            if await self.repo.get_by_name(payload.name) is not None:
                raise CharacterConflictError(
                    "Character already exists",
                    f'A character named "{payload.name}" already exists',
                )

            fields = {field: getattr(payload, field) for field in REQUIRED_CREATE_FIELDS}
            fields["image"] = payload.image or DEFAULT_IMAGE

            character = await self.repo.create(fields)
            await self.session.commit()
            logger.info(
                "Character created",
                extra={"character_id": character.id, "character_name": character.name},
            )
            return CharacterRead.model_validate(character)

    async def update_character(self, raw_id: str, payload: CharacterPayload) -> CharacterRead:
        """Merge non-empty request fields over the stored record.

        Falsy values keep the stored value, so a field cannot be cleared.
        """
        async with self._failures_as("update character"):
            character_id = parse_character_id(raw_id)
            character = await self._get_existing(character_id)

            if payload.name and payload.name != character.name:
                duplicate = await self.repo.get_by_name(payload.name, exclude_id=character_id)
                if duplicate is not None:
                    raise CharacterConflictError(
                        "Character name already exists",
                        f'Another character named "{payload.name}" already exists',
                    )

            merged = {
                field: getattr(payload, field) or getattr(character, field)
                for field in CHARACTER_FIELDS
            }
            logger.info(
                "Character update requested",
                extra={
                    "character_id": character_id,
                    "fields": [field for field in CHARACTER_FIELDS if getattr(payload, field)],
                },
            )
            updated = await self.repo.update(character, merged)
            await self.session.commit()
            return CharacterRead.model_validate(updated)

    async def delete_character(self, raw_id: str) -> DeletedCharacter:
        async with self._failures_as("delete character"):
            character_id = parse_character_id(raw_id)
            character = await self._get_existing(character_id)
            await self.repo.delete(character)
            await self.session.commit()
            logger.info("Character deleted", extra={"character_id": character_id})
            return DeletedCharacter(id=character_id)

    async def _get_existing(self, character_id: int) -> Character:
        if not MIN_CHARACTER_ID <= character_id <= MAX_CHARACTER_ID:
            raise CharacterNotFoundError(character_id)
        character = await self.repo.get(character_id)
        if character is None:
            raise CharacterNotFoundError(character_id)
        return character

    @asynccontextmanager
    async def _failures_as(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except RosterServiceError:
            raise
        except Exception as exc:
            logger.exception("Character operation failed", extra={"operation": operation})
            await self.session.rollback()
            raise UnexpectedCharacterError(operation, str(exc)) from exc
