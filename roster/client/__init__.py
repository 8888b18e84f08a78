"""Client-side access to the character API."""

from .api_client import ApiRequestError, CharacterApiClient
from .state import CharacterStateController, OperationResult

__all__ = [
    "ApiRequestError",
    "CharacterApiClient",
    "CharacterStateController",
    "OperationResult",
]
