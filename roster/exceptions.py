"""Custom exceptions for Roster service.

Every error carries the HTTP status and the ``error``/``details`` pair that
ends up in the response envelope.
"""

from fastapi import status


class RosterServiceError(Exception):
    """Base exception for Roster service."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, error: str, details: str | None = None) -> None:
        self.error = error
        self.details = details
        super().__init__(error)


class CharacterValidationError(RosterServiceError):
    """Raised when the request is malformed or misses required fields."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidCharacterIdError(CharacterValidationError):
    """Raised when a path id does not parse as an integer."""

    def __init__(self) -> None:
        super().__init__("Invalid character ID", "Character ID must be a valid number")


class MissingFieldsError(CharacterValidationError):
    """Raised when a create request misses required fields."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__("Missing required fields", f"Required fields: {', '.join(missing)}")


class CharacterNotFoundError(RosterServiceError):
    """Raised when no character has the requested id."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, character_id: int) -> None:
        self.character_id = character_id
        super().__init__("Character not found", f"No character found with ID: {character_id}")


class CharacterConflictError(RosterServiceError):
    """Raised when a character name is already taken."""

    status_code = status.HTTP_409_CONFLICT


class UnexpectedCharacterError(RosterServiceError):
    """Raised when storage or runtime fails while handling a request."""

    def __init__(self, operation: str, details: str) -> None:
        self.operation = operation
        super().__init__(f"Failed to {operation}", details)
