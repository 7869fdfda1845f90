"""
Tests for writing parse results into a store
"""
import asyncio

from app.services import ingestion_service
from database.schemas import CategoryCreate, ParseResult


class TestIngest:

    def test_existing_categories_are_skipped(self, store, make_mod):
        existing = store.create_category(CategoryCreate(name="Magic", image_url="original"))
        result = ParseResult(
            mods=[make_mod("Botania", category="Magic")],
            categories=[
                CategoryCreate(name="Magic", image_url="replacement"),
                CategoryCreate(name="Tools", image_url="tools"),
            ],
        )

        report = ingestion_service.ingest(store, result)

        assert [c.name for c in report.saved_categories] == ["Tools"]
        assert report.parsed_categories == 2
        assert store.get_category_by_name("Magic") == existing

    def test_mods_always_created(self, store, make_mod):
        store.create_mod(make_mod("Create"))
        result = ParseResult(mods=[make_mod("Create"), make_mod("Create")])

        report = ingestion_service.ingest(store, result)

        assert len(report.saved_mods) == 2
        assert store.count_mods() == 3

    def test_failing_item_does_not_stop_the_rest(self, memory_store, make_mod, monkeypatch):
        original = memory_store.create_mod

        def flaky_create(data):
            if data.name == "Broken":
                raise RuntimeError("disk full")
            return original(data)

        monkeypatch.setattr(memory_store, "create_mod", flaky_create)
        result = ParseResult(mods=[make_mod("First"), make_mod("Broken"), make_mod("Last")])

        report = ingestion_service.ingest(memory_store, result)

        assert report.parsed_mods == 3
        assert [m.name for m in report.saved_mods] == ["First", "Last"]

    def test_clear_first(self, store, make_mod):
        old = store.create_mod(make_mod("Old"))
        store.create_category(CategoryCreate(name="Old Category", image_url="x"))
        result = ParseResult(
            mods=[make_mod("New")],
            categories=[CategoryCreate(name="Utility", image_url="u")],
        )

        report = ingestion_service.ingest(store, result, clear_first=True)

        assert store.get_mod(old.id) is None
        assert store.count_mods() == 1
        assert [c.name for c in store.get_categories()] == ["Utility"]
        assert report.saved_mods[0].id > old.id


class TestAutoIngest:

    def test_reloads_catalog(self, memory_store, make_mod, monkeypatch):
        memory_store.create_mod(make_mod("Seeded"))

        async def fake_parse_all(limit):
            return ParseResult(
                mods=[make_mod("Fresh A"), make_mod("Fresh B")],
                categories=[CategoryCreate(name="Utility", image_url="u")],
            )

        monkeypatch.setattr(ingestion_service, "parse_all_sources", fake_parse_all)

        report = asyncio.run(ingestion_service.auto_ingest(memory_store, limit=2))

        assert len(report.saved_mods) == 2
        assert sorted(m.name for m in memory_store.list_mods().data) == ["Fresh A", "Fresh B"]

    def test_errors_are_swallowed(self, memory_store, make_mod, monkeypatch):
        memory_store.create_mod(make_mod("Seeded"))

        async def broken(limit):
            raise RuntimeError("network down")

        monkeypatch.setattr(ingestion_service, "parse_all_sources", broken)

        report = asyncio.run(ingestion_service.auto_ingest(memory_store))

        assert report.saved_mods == []
        assert memory_store.count_mods() == 1
