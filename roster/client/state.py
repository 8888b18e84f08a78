"""Client-side state controller for the character table and form.

Holds the character list plus loading, error and success state for each
operation. Every successful mutation re-fetches the whole list, and every
operation resolves to an :class:`OperationResult` instead of raising.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

import httpx

from roster.client.api_client import CharacterApiClient
from roster.core.config import Settings, get_settings
from roster.core.constants import MESSAGE_CLEAR_DELAY_SECONDS
from roster.validation import format_error_message, sanitize_character_data, validate_character

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network error: Please check your internet connection"
OPERATIONS = ("fetch", "create", "update", "delete")

ConfirmCallback = Callable[[str], "bool | Awaitable[bool]"]


@dataclass
class OperationResult:
    success: bool
    data: Any = None
    error: str | None = None
    errors: dict[str, str] | None = None
    cancelled: bool = False


class CharacterStateController:
    def __init__(
        self,
        api: CharacterApiClient,
        confirm: ConfirmCallback,
        clear_delay: float = MESSAGE_CLEAR_DELAY_SECONDS,
    ) -> None:
        self.api = api
        self._confirm = confirm
        self._clear_delay = clear_delay
        self._clear_timer: asyncio.TimerHandle | None = None
        self._error = ""
        self._success = ""
        self.characters: list[dict[str, Any]] = []
        self.loading = False
        self.operation_loading = dict.fromkeys(OPERATIONS, False)

    @classmethod
    def from_settings(
        cls,
        confirm: ConfirmCallback,
        settings: Settings | None = None,
    ) -> "CharacterStateController":
        """Build a controller talking to the configured API base URL."""
        settings = settings or get_settings()
        return cls(
            CharacterApiClient.from_settings(settings),
            confirm=confirm,
            clear_delay=settings.message_clear_delay_seconds,
        )

    # ─── messages ─────────────────────────────────────────────────────────

    @property
    def error(self) -> str:
        return self._error

    @error.setter
    def error(self, value: str) -> None:
        if value != self._error:
            self._error = value
            self._on_message_changed(value)

    @property
    def success(self) -> str:
        return self._success

    @success.setter
    def success(self, value: str) -> None:
        if value != self._success:
            self._success = value
            self._on_message_changed(value)

    def clear_all_messages(self) -> None:
        self._error = ""
        self._success = ""
        self._cancel_clear_timer()

    def _on_message_changed(self, value: str) -> None:
        # A new message restarts the countdown; clearing never schedules one.
        if value:
            self._cancel_clear_timer()
            loop = asyncio.get_running_loop()
            self._clear_timer = loop.call_later(self._clear_delay, self.clear_all_messages)
        elif not (self._error or self._success):
            self._cancel_clear_timer()

    def _cancel_clear_timer(self) -> None:
        if self._clear_timer is not None:
            self._clear_timer.cancel()
            self._clear_timer = None

    # ─── lifecycle ────────────────────────────────────────────────────────

    async def mount(self) -> None:
        await self.fetch_characters()

    def reset_state(self) -> None:
        self.characters = []
        self.loading = False
        self.clear_all_messages()
        self.operation_loading = dict.fromkeys(OPERATIONS, False)

    async def close(self) -> None:
        self._cancel_clear_timer()
        await self.api.aclose()

    # ─── operations ───────────────────────────────────────────────────────

    async def fetch_characters(self) -> OperationResult:
        self._set_operation_loading("fetch", True)
        self.error = ""
        try:
            result = await self.api.list_characters()
            self.characters = result.get("data") or []
            return OperationResult(success=True, data=self.characters)
        except Exception as exc:
            message = self._handle_api_error(exc, "fetch characters")
            self.characters = []
            return OperationResult(success=False, error=message)
        finally:
            self._set_operation_loading("fetch", False)

    async def get_character_by_id(self, character_id: int | str) -> OperationResult:
        self.loading = True
        self.error = ""
        try:
            result = await self.api.get_character(character_id)
            return OperationResult(success=True, data=result.get("data"))
        except Exception as exc:
            message = self._handle_api_error(exc, "fetch character")
            return OperationResult(success=False, error=message)
        finally:
            self.loading = False

    async def create_character(self, data: dict[str, Any]) -> OperationResult:
        return await self._submit(
            "create",
            data,
            lambda payload: self.api.create_character(payload),
            default_message="Character created successfully",
        )

    async def update_character(self, character_id: int | str, data: dict[str, Any]) -> OperationResult:
        return await self._submit(
            "update",
            data,
            lambda payload: self.api.update_character(character_id, payload),
            default_message="Character updated successfully",
        )

    async def delete_character(self, character_id: int | str, character_name: str) -> OperationResult:
        confirmed = self._confirm(
            f'Are you sure you want to delete "{character_name}"?\n\nThis action cannot be undone.'
        )
        if inspect.isawaitable(confirmed):
            confirmed = await confirmed
        if not confirmed:
            return OperationResult(success=False, cancelled=True)

        self._set_operation_loading("delete", True)
        self.error = ""
        try:
            result = await self.api.delete_character(character_id)
            self.success = result.get("message") or "Character deleted successfully"
            await self.fetch_characters()
            return OperationResult(success=True)
        except Exception as exc:
            message = self._handle_api_error(exc, "delete character")
            return OperationResult(success=False, error=message)
        finally:
            self._set_operation_loading("delete", False)

    async def _submit(
        self,
        operation: str,
        data: dict[str, Any],
        send: Callable[[dict[str, Any]], Awaitable[dict[str, Any]]],
        default_message: str,
    ) -> OperationResult:
        """Validate, sanitize, send, then re-fetch the list on success."""
        self._set_operation_loading(operation, True)
        self.error = ""
        try:
            validation = validate_character(data)
            if not validation.is_valid:
                self.error = format_error_message(validation.errors)
                return OperationResult(success=False, errors=validation.errors)

            result = await send(sanitize_character_data(data))
            self.success = result.get("message") or default_message
            await self.fetch_characters()
            return OperationResult(success=True, data=result.get("data"))
        except Exception as exc:
            message = self._handle_api_error(exc, f"{operation} character")
            return OperationResult(success=False, error=message)
        finally:
            self._set_operation_loading(operation, False)

    def _set_operation_loading(self, operation: str, is_loading: bool) -> None:
        self.operation_loading[operation] = is_loading
        self.loading = is_loading

    def _handle_api_error(self, exc: Exception, operation: str) -> str:
        logger.warning(f"Error in {operation}: {exc}", extra={"operation": operation})
        if isinstance(exc, httpx.TransportError):
            message = NETWORK_ERROR_MESSAGE
        elif str(exc):
            message = str(exc)
        else:
            message = f"Failed to {operation}. Please try again."
        self.error = message
        return message
