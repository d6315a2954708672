"""
Tests for InMemoryGroupStore.
"""

import asyncio
from uuid import uuid4

import pytest

from group_directory.repositories import InMemoryGroupStore
from group_directory.schemas import Category, Country


def assert_newest_first(groups) -> None:
    stamps = [group.created_at for group in groups]
    assert stamps == sorted(stamps, reverse=True)


class TestCreateAndLookup:
    @pytest.mark.asyncio
    async def test_create_assigns_server_fields(self, store: InMemoryGroupStore, make_group):
        payload = make_group()

        group = await store.create(payload)

        assert group.id is not None
        assert group.created_at is not None
        assert group.view_count == 0
        assert group.title == payload.title
        assert group.description == payload.description
        assert group.whatsapp_link == payload.whatsapp_link
        assert group.category == "technology"
        assert group.country == "US"
        assert group.image_url is None

    @pytest.mark.asyncio
    async def test_get_by_id_returns_created_group(self, store, make_group):
        created = await store.create(make_group(image_url="https://img.example/x.png"))

        found = await store.get_by_id(created.id)

        assert found is not None
        assert found.id == created.id
        assert found.image_url == "https://img.example/x.png"
        assert found.view_count == 0

    @pytest.mark.asyncio
    async def test_empty_image_url_is_stored_as_none(self, store, make_group):
        group = await store.create(make_group(image_url=""))
        assert group.image_url is None

    @pytest.mark.asyncio
    async def test_ids_are_unique(self, store, make_group):
        first = await store.create(make_group())
        second = await store.create(make_group())
        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_get_by_unknown_id_returns_none(self, store):
        assert await store.get_by_id(uuid4()) is None


class TestListing:
    @pytest.mark.asyncio
    async def test_list_all_is_newest_first(self, store, make_group):
        created = [await store.create(make_group(title=f"Group {i}")) for i in range(5)]

        groups = await store.list_all()

        assert len(groups) == 5
        assert_newest_first(groups)
        assert groups[0].id == created[-1].id

    @pytest.mark.asyncio
    async def test_empty_store_lists_nothing(self, store):
        assert await store.list_all() == []

    @pytest.mark.asyncio
    async def test_list_by_category(self, store, make_group):
        await store.create(make_group(category=Category.MUSIC))
        await store.create(make_group(category=Category.GAMING))
        await store.create(make_group(category=Category.MUSIC))

        music = await store.list_by_category("music")

        assert len(music) == 2
        assert all(group.category == "music" for group in music)
        assert_newest_first(music)

    @pytest.mark.asyncio
    async def test_categories_partition_all_groups(self, store, make_group):
        for index, category in enumerate([Category.FOOD, Category.NEWS, Category.FOOD, Category.TRAVEL]):
            await store.create(make_group(title=f"Group {index}", category=category))

        seen = []
        for category in Category:
            seen.extend(group.id for group in await store.list_by_category(category.value))

        all_ids = [group.id for group in await store.list_all()]
        assert sorted(seen) == sorted(all_ids)
        assert len(seen) == len(set(seen))

    @pytest.mark.asyncio
    async def test_unknown_category_matches_nothing(self, store, make_group):
        await store.create(make_group())
        assert await store.list_by_category("astrology") == []

    @pytest.mark.asyncio
    async def test_list_by_country(self, store, make_group):
        await store.create(make_group(country=Country.IN))
        await store.create(make_group(country=Country.DE))

        groups = await store.list_by_country("IN")

        assert [group.country for group in groups] == ["IN"]
        assert await store.list_by_country("ZZ") == []


class TestSearch:
    @pytest.mark.asyncio
    async def test_matches_title_or_description_case_insensitively(self, store, make_group):
        by_title = await store.create(make_group(title="Rust Hackers", description="Systems talk"))
        by_description = await store.create(
            make_group(title="Weekend Club", description="We write RUST on Sundays")
        )
        await store.create(make_group(title="Bakers", description="Bread and cakes"))

        results = await store.search("rust")

        assert {group.id for group in results} == {by_title.id, by_description.id}
        assert_newest_first(results)

    @pytest.mark.asyncio
    async def test_empty_query_matches_everything(self, store, make_group):
        for index in range(3):
            await store.create(make_group(title=f"Group {index}"))

        assert len(await store.search("")) == 3

    @pytest.mark.asyncio
    async def test_no_match(self, store, make_group):
        await store.create(make_group())
        assert await store.search("zzz-not-here") == []


class TestIncrementView:
    @pytest.mark.asyncio
    async def test_increments_by_exactly_n(self, store, make_group):
        group = await store.create(make_group())

        for _ in range(7):
            assert await store.increment_view(group.id) is True

        found = await store.get_by_id(group.id)
        assert found.view_count == 7

    @pytest.mark.asyncio
    async def test_concurrent_increments_are_not_lost(self, store, make_group):
        group = await store.create(make_group())

        await asyncio.gather(*(store.increment_view(group.id) for _ in range(100)))

        found = await store.get_by_id(group.id)
        assert found.view_count == 100

    @pytest.mark.asyncio
    async def test_unknown_id_is_a_silent_no_op(self, store, make_group):
        group = await store.create(make_group())

        assert await store.increment_view(uuid4()) is False

        assert (await store.get_by_id(group.id)).view_count == 0
        assert len(await store.list_all()) == 1

    @pytest.mark.asyncio
    async def test_increment_only_touches_target(self, store, make_group):
        first = await store.create(make_group(title="First"))
        second = await store.create(make_group(title="Second"))

        await store.increment_view(first.id)

        assert (await store.get_by_id(first.id)).view_count == 1
        assert (await store.get_by_id(second.id)).view_count == 0


class TestMalformedIds:
    @pytest.mark.asyncio
    async def test_non_uuid_id_is_not_found(self, store, make_group):
        await store.create(make_group())

        assert await store.get_by_id("abc") is None
        assert await store.increment_view("abc") is False

    @pytest.mark.asyncio
    async def test_string_form_of_real_id_is_accepted(self, store, make_group):
        group = await store.create(make_group())

        assert await store.increment_view(str(group.id)) is True
        assert (await store.get_by_id(str(group.id))).view_count == 1


class TestReturnedRecordsAreCopies:
    @pytest.mark.asyncio
    async def test_mutating_a_result_does_not_change_the_store(self, store, make_group):
        created = await store.create(make_group(title="Original"))

        created.title = "Changed"
        fetched = await store.get_by_id(created.id)
        fetched.view_count = 50
        listed = (await store.list_all())[0]
        listed.description = "Changed too"

        stored = await store.get_by_id(created.id)
        assert stored.title == "Original"
        assert stored.view_count == 0
        assert stored.description == "Talk about packaging, typing and async code."
