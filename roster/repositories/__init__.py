"""
Repository layer for the Roster service.
"""

from .character_repository import CharacterRepository

__all__ = ["CharacterRepository"]
