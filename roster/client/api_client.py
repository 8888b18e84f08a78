"""HTTP client for the character API.

Thin wrapper over ``httpx.AsyncClient`` that speaks the response envelope:
a body with ``success: false`` is raised as :class:`ApiRequestError`.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from roster.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class ApiRequestError(Exception):
    """The API answered with a failure envelope (or an unreadable body)."""

    def __init__(self, message: str, status_code: int, details: Any = None) -> None:
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class CharacterApiClient:
    """Async client for the ``/characters`` routes.

    Usage:
        client = CharacterApiClient("http://localhost:8000/api")
        result = await client.list_characters()
        await client.aclose()
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
            headers={"Content-Type": "application/json"},
        )

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "CharacterApiClient":
        settings = settings or get_settings()
        return cls(settings.api_base_url, timeout=settings.client_timeout_seconds)

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    async def list_characters(self) -> dict[str, Any]:
        return await self._request("GET", "/characters")

    async def get_character(self, character_id: int | str) -> dict[str, Any]:
        return await self._request("GET", f"/characters/{character_id}")

    async def create_character(self, data: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/characters", json=data)

    async def update_character(self, character_id: int | str, data: dict[str, Any]) -> dict[str, Any]:
        return await self._request("PUT", f"/characters/{character_id}", json=data)

    async def delete_character(self, character_id: int | str) -> dict[str, Any]:
        return await self._request("DELETE", f"/characters/{character_id}")

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, json: Any = None) -> dict[str, Any]:
        response = await self._client.request(method, path, json=json)

        try:
            result = response.json()
        except ValueError as exc:
            raise ApiRequestError(f"HTTP Error: {response.status_code}", response.status_code) from exc

        if not isinstance(result, dict) or not result.get("success"):
            body = result if isinstance(result, dict) else {}
            logger.debug(
                "Character API request failed",
                extra={"method": method, "path": path, "status_code": response.status_code},
            )
            raise ApiRequestError(
                body.get("error") or f"HTTP Error: {response.status_code}",
                response.status_code,
                body.get("details"),
            )

        return result
