"""Declarative per-field rule tables for character records.

Each field maps to an ordered tuple of rules. Evaluation walks the tuple and
the first failing rule supplies the error message, so the tuple order is the
check order: required, min length, max length, pattern, enum.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from roster.core.constants import GENDER_OPTIONS, MONTH_NAMES

IMAGE_EXTENSIONS = ("png", "jpg", "jpeg", "gif", "webp")


@dataclass(frozen=True)
class Required:
    message: str

    def check(self, value: Any) -> bool:
        return bool(value)


@dataclass(frozen=True)
class MinLength:
    limit: int
    message: str

    def check(self, value: Any) -> bool:
        return len(str(value)) >= self.limit


@dataclass(frozen=True)
class MaxLength:
    limit: int
    message: str

    def check(self, value: Any) -> bool:
        return len(str(value)) <= self.limit


@dataclass(frozen=True)
class Pattern:
    regex: re.Pattern[str]
    message: str

    def check(self, value: Any) -> bool:
        return self.regex.fullmatch(str(value)) is not None


@dataclass(frozen=True)
class OneOf:
    choices: tuple[str, ...]
    message: str

    def check(self, value: Any) -> bool:
        return value in self.choices


Rule = Required | MinLength | MaxLength | Pattern | OneOf

_image_ext = "|".join(IMAGE_EXTENSIONS)

CHARACTER_RULES: dict[str, tuple[Rule, ...]] = {
    "name": (
        Required("Name is required"),
        MinLength(2, "Name must be at least 2 characters long"),
        MaxLength(50, "Name cannot exceed 50 characters"),
        Pattern(
            re.compile(r"[a-zA-Z\s\-.']+"),
            "Name can only contain letters, spaces, hyphens, periods, and apostrophes",
        ),
    ),
    "talent": (
        Required("Talent is required"),
        MinLength(2, "Talent must be at least 2 characters long"),
        MaxLength(100, "Talent cannot exceed 100 characters"),
    ),
    "gender": (
        Required("Gender is required"),
        OneOf(GENDER_OPTIONS, "Gender must be Male, Female, or None"),
    ),
    "height": (
        Required("Height is required"),
        Pattern(
            re.compile(r"[0-9]+(\.[0-9]+)?\s*(cm|centimeters?)", re.IGNORECASE),
            'Height must be in format "XXX cm" (e.g., "171 cm")',
        ),
    ),
    "weight": (
        Required("Weight is required"),
        Pattern(
            re.compile(r"[0-9]+(\.[0-9]+)?\s*(kg|kilograms?)", re.IGNORECASE),
            'Weight must be in format "XX kg" (e.g., "58 kg")',
        ),
    ),
    "birthday": (
        Required("Birthday is required"),
        Pattern(
            re.compile(rf"({'|'.join(MONTH_NAMES)})\s+[0-9]{{1,2}}"),
            'Birthday must be in format "Month Day" (e.g., "September 7")',
        ),
    ),
    "image": (
        Pattern(
            re.compile(rf"(https?://.*\.({_image_ext})|/.*\.({_image_ext}))", re.IGNORECASE),
            "Image must be a valid URL or path to an image file",
        ),
    ),
}


def is_required(rules: tuple[Rule, ...]) -> bool:
    return any(isinstance(rule, Required) for rule in rules)
