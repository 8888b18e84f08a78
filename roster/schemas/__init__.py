"""Pydantic schemas for the Roster service."""

from .character import ApiResponse, CharacterPayload, CharacterRead, DeletedCharacter

__all__ = ["ApiResponse", "CharacterPayload", "CharacterRead", "DeletedCharacter"]
