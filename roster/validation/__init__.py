"""Character field validation."""

from .validators import (
    CharacterValidation,
    FieldValidation,
    format_error_message,
    sanitize_character_data,
    validate_character,
    validate_field,
)

__all__ = [
    "CharacterValidation",
    "FieldValidation",
    "format_error_message",
    "sanitize_character_data",
    "validate_character",
    "validate_field",
]
