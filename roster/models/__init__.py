"""
ORM models for the Roster service.
"""

from .character import Character

__all__ = ["Character"]
