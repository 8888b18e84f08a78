"""Field validation, sanitizing and error formatting for character records.

Shared by the client state controller (before sending) and by anything else
that needs to check a record without touching storage. Name uniqueness needs
storage access and is checked by the service layer instead.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Mapping

from roster.core.constants import DEFAULT_IMAGE
from roster.validation.rules import CHARACTER_RULES, is_required

MULTIPLE_ERRORS_HEADER = "Multiple errors found:"

_WHITESPACE_RUN = re.compile(r"\s+")
_MARKUP_CHARS = re.compile(r"[<>]")


@dataclass(frozen=True)
class FieldValidation:
    is_valid: bool
    error: str = ""


@dataclass(frozen=True)
class CharacterValidation:
    is_valid: bool
    errors: dict[str, str] = field(default_factory=dict)


def validate_field(field_name: str, value: Any) -> FieldValidation:
    """Check one field against its rules; the first failing rule wins."""
    rules = CHARACTER_RULES.get(field_name)
    if rules is None:
        return FieldValidation(is_valid=True)

    candidate = value.strip() if isinstance(value, str) else value

    if not candidate and not is_required(rules):
        return FieldValidation(is_valid=True)

    for rule in rules:
        if not rule.check(candidate):
            return FieldValidation(is_valid=False, error=rule.message)

    return FieldValidation(is_valid=True)


def validate_character(record: Mapping[str, Any]) -> CharacterValidation:
    """Validate every declared field and collect errors in declaration order."""
    errors: dict[str, str] = {}
    for field_name in CHARACTER_RULES:
        result = validate_field(field_name, record.get(field_name))
        if not result.is_valid:
            errors[field_name] = result.error
    return CharacterValidation(is_valid=not errors, errors=errors)


def sanitize_character_data(record: Mapping[str, Any]) -> dict[str, Any]:
    sanitized: dict[str, Any] = {}
    for key, value in record.items():
        if isinstance(value, str):
            value = _MARKUP_CHARS.sub("", _WHITESPACE_RUN.sub(" ", value.strip()))
        sanitized[key] = value

    if not sanitized.get("image"):
        sanitized["image"] = DEFAULT_IMAGE

    return sanitized


def format_error_message(errors: Mapping[str, str] | None) -> str:
    if not errors:
        return ""

    messages = list(errors.values())
    if len(messages) == 1:
        return messages[0]

    return "\n".join([MULTIPLE_ERRORS_HEADER, *(f"• {message}" for message in messages)])
