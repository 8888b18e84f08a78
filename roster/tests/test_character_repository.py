"""CharacterRepository tests against an aiosqlite database."""

import pytest
from sqlalchemy.exc import IntegrityError

from roster.jobs.seed_characters import SEED_CHARACTERS, seed
from roster.models import Character
from roster.repositories import CharacterRepository


@pytest.fixture
def repo(db_session):
    return CharacterRepository(db_session)


class TestCharacterRepository:
    @pytest.mark.asyncio
    async def test_create_assigns_increasing_ids(self, repo, character_payload):
        first = await repo.create(character_payload(name="Kaede Akamatsu"))
        second = await repo.create(character_payload(name="Kaito Momota"))

        assert first.id is not None
        assert second.id > first.id

    @pytest.mark.asyncio
    async def test_list_all_orders_by_id(self, repo, db_session, character_payload):
        first = await repo.create(character_payload(name="Kaede Akamatsu"))
        second = await repo.create(character_payload(name="Kaito Momota"))
        await repo.update(first, {"talent": "Ultimate Pianist"})
        await db_session.commit()

        characters = await repo.list_all()

        assert [c.id for c in characters] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_get_by_name_is_exact_and_case_sensitive(self, repo, character_payload):
        created = await repo.create(character_payload(name="Miu Iruma"))

        assert (await repo.get_by_name("Miu Iruma")).id == created.id
        assert await repo.get_by_name("miu iruma") is None
        assert await repo.get_by_name("Miu") is None

    @pytest.mark.asyncio
    async def test_get_by_name_excludes_id(self, repo, character_payload):
        created = await repo.create(character_payload(name="Miu Iruma"))

        assert await repo.get_by_name("Miu Iruma", exclude_id=created.id) is None

    @pytest.mark.asyncio
    async def test_update_and_delete(self, repo, db_session, character_payload):
        created = await repo.create(character_payload(name="Ryoma Hoshi"))
        await repo.update(created, {"talent": "Tennis Pro"})
        await db_session.commit()

        assert (await repo.get(created.id)).talent == "Tennis Pro"

        await repo.delete(created)
        await db_session.commit()

        assert await repo.get(created.id) is None

    @pytest.mark.asyncio
    async def test_name_is_unique_in_storage(self, repo, character_payload):
        await repo.create(character_payload(name="Kirumi Tojo"))

        with pytest.raises(IntegrityError):
            await repo.create(character_payload(name="Kirumi Tojo"))


class TestSeedCharacters:
    @pytest.mark.asyncio
    async def test_seeds_sixteen_characters_in_order(self, db_session):
        count = await seed(db_session)

        characters = await CharacterRepository(db_session).list_all()
        assert count == 16
        assert [c.name for c in characters] == [entry["name"] for entry in SEED_CHARACTERS]

    @pytest.mark.asyncio
    async def test_reseeding_conflicts_on_name(self, db_session, session_factory):
        await seed(db_session)

        async with session_factory() as second_session:
            with pytest.raises(IntegrityError):
                await seed(second_session)


class TestCharacterTable:
    @pytest.mark.parametrize(
        "column", ["name", "talent", "gender", "height", "weight", "birthday", "image"]
    )
    def test_text_columns_have_no_length_limit(self, column):
        assert getattr(Character.__table__.c[column].type, "length", None) is None

    def test_name_is_unique(self):
        assert Character.__table__.c["name"].unique is True
