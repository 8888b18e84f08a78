from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class CharacterRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    talent: str
    gender: str
    height: str
    weight: str
    birthday: str
    image: str


class CharacterPayload(BaseModel):
    """Create/update request body.

    Every field is optional here: presence rules differ per operation and are
    enforced by the service so that missing fields map to the 400 envelope.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    talent: str | None = None
    gender: str | None = None
    height: str | None = None
    weight: str | None = None
    birthday: str | None = None
    image: str | None = None


class DeletedCharacter(BaseModel):
    id: int


class ApiResponse(BaseModel, Generic[T]):
    """Response envelope shared by every character endpoint."""

    success: bool
    data: T | None = None
    error: str | None = None
    details: Any | None = Field(default=None, description="Extra failure context")
    message: str | None = None

    def to_content(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
