"""Client state controller against the in-process API and SQLite store."""

from __future__ import annotations

import pytest

from roster.client import CharacterStateController
from roster.core.constants import DEFAULT_IMAGE


@pytest.fixture
def controller(api_client):
    return CharacterStateController(api_client, confirm=lambda prompt: True)


class TestControllerRoundTrip:
    @pytest.mark.asyncio
    async def test_create_update_delete_flow(self, controller, character_payload):
        await controller.mount()
        assert controller.characters == []

        created = await controller.create_character(character_payload(image=""))
        assert created.success is True
        assert [c["name"] for c in controller.characters] == ["Shuichi Saihara"]
        assert controller.characters[0]["image"] == DEFAULT_IMAGE

        character_id = created.data["id"]
        updated = await controller.update_character(
            character_id, character_payload(talent="Ultimate Detective")
        )
        assert updated.success is True
        assert controller.characters[0]["talent"] == "Ultimate Detective"
        assert controller.success == "Character updated successfully"

        deleted = await controller.delete_character(character_id, "Shuichi Saihara")
        assert deleted.success is True
        assert controller.characters == []

        missing = await controller.get_character_by_id(character_id)
        assert missing.success is False
        assert controller.error == "Character not found"
        await controller.close()

    @pytest.mark.asyncio
    async def test_duplicate_create_surfaces_conflict(self, controller, character_payload):
        await controller.create_character(character_payload())

        result = await controller.create_character(character_payload(talent="Copycat"))

        assert result.success is False
        assert controller.error == "Character already exists"
        assert len(controller.characters) == 1
        await controller.close()
