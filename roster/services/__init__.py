"""Service layer for the Roster service."""

from .character import CharacterService, parse_character_id

__all__ = ["CharacterService", "parse_character_id"]
