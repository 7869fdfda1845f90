"""
Tests for both catalog store implementations
"""
import threading

import pytest

from app.exceptions import DuplicateRecordError
from database.schemas import CategoryCreate, MinecraftVersionCreate, ModFilter, UserCreate


def _seed_counts(store, make_mod, counts):
    return [store.create_mod(make_mod(f"Mod {i}", download_count=c)) for i, c in enumerate(counts)]


class TestCreateMod:
    """Defaults and id assignment on create"""

    def test_defaults_applied(self, store, make_mod):
        mod = store.create_mod(make_mod("Plain"))

        assert mod.id >= 1
        assert mod.download_count == 0
        assert mod.source == "unknown"
        assert mod.is_new is False
        assert mod.created_at is not None

    def test_explicit_values_kept(self, store, make_mod):
        mod = store.create_mod(make_mod("Fancy", download_count=42, source="Modrinth", is_new=True))

        assert mod.download_count == 42
        assert mod.source == "Modrinth"
        assert mod.is_new is True

    def test_ids_increase(self, store, make_mod):
        first = store.create_mod(make_mod("One"))
        second = store.create_mod(make_mod("Two"))
        assert second.id > first.id

    def test_get_missing_returns_none(self, store):
        assert store.get_mod(12345) is None

    def test_returned_record_is_detached(self, store, make_mod):
        mod = store.create_mod(make_mod("Detached"))
        mod.download_count = 999
        assert store.get_mod(mod.id).download_count == 0


class TestListMods:
    """Filtering, sorting and pagination"""

    def test_downloads_sort_first_page(self, store, make_mod):
        _seed_counts(store, make_mod, [10, 5, 20, 1])

        result = store.list_mods(ModFilter(sort_by="downloads", page=1, page_size=2))

        assert [m.download_count for m in result.data] == [20, 10]
        assert result.total == 4
        assert result.page_count == 2
        assert result.page == 1
        assert result.page_size == 2

    def test_page_past_end_is_empty(self, store, make_mod):
        _seed_counts(store, make_mod, [1, 2, 3])

        result = store.list_mods(ModFilter(page=5, page_size=2))

        assert result.data == []
        assert result.total == 3
        assert result.page_count == 2

    def test_huge_page_is_empty(self, store, make_mod):
        _seed_counts(store, make_mod, [1, 2])

        result = store.list_mods(ModFilter(page=10**19, page_size=10))

        assert result.data == []
        assert result.total == 2

    def test_huge_page_size_returns_everything(self, store, make_mod):
        _seed_counts(store, make_mod, [1, 2, 3])

        result = store.list_mods(ModFilter(page=1, page_size=10**19))

        assert [m.download_count for m in result.data] == [3, 2, 1]
        assert result.page_count == 1

    def test_empty_catalog(self, store):
        result = store.list_mods(ModFilter())
        assert result.total == 0
        assert result.page_count == 0
        assert result.data == []

    def test_popular_is_default_sort(self, store, make_mod):
        _seed_counts(store, make_mod, [3, 30, 7])
        result = store.list_mods(ModFilter(sort_by="nonsense"))
        assert [m.download_count for m in result.data] == [30, 7, 3]

    def test_equal_counts_keep_insertion_order(self, store, make_mod):
        mods = _seed_counts(store, make_mod, [5, 5, 5])
        result = store.list_mods(ModFilter(sort_by="popular"))
        assert [m.id for m in result.data] == [m.id for m in mods]

    def test_name_sort(self, store, make_mod):
        for name in ["Create", "Botania", "Applied Energistics 2"]:
            store.create_mod(make_mod(name))
        result = store.list_mods(ModFilter(sort_by="name"))
        assert [m.name for m in result.data] == ["Applied Energistics 2", "Botania", "Create"]

    def test_recent_sort_newest_first(self, store, make_mod):
        mods = _seed_counts(store, make_mod, [1, 1, 1])
        result = store.list_mods(ModFilter(sort_by="recent"))
        assert [m.id for m in result.data] == [m.id for m in reversed(mods)]

    def test_search_matches_name_and_description(self, store, make_mod):
        store.create_mod(make_mod("Iron Chests", description="Bigger chests"))
        store.create_mod(make_mod("Waystones", description="Teleport between IRON pillars"))
        store.create_mod(make_mod("Botania", description="Flowers"))

        result = store.list_mods(ModFilter(search="iron"))

        assert sorted(m.name for m in result.data) == ["Iron Chests", "Waystones"]
        assert result.total == 2

    @pytest.mark.parametrize("needle", ["über", "ÜBER", "tööls"])
    def test_search_folds_non_ascii_case(self, store, make_mod, needle):
        store.create_mod(make_mod("Über Tööls", description="Werkzeuge"))
        store.create_mod(make_mod("Uber Tools", description="plain ascii"))

        result = store.list_mods(ModFilter(search=needle))

        assert [m.name for m in result.data] == ["Über Tööls"]

    def test_search_treats_wildcards_literally(self, store, make_mod):
        store.create_mod(make_mod("100% Vanilla"))
        store.create_mod(make_mod("Vanilla Plus"))

        result = store.list_mods(ModFilter(search="100%"))

        assert [m.name for m in result.data] == ["100% Vanilla"]

    def test_filters_compose(self, store, make_mod):
        store.create_mod(make_mod("A", version="1.20.1", category="Magic", source="Modrinth"))
        store.create_mod(make_mod("B", version="1.20.1", category="Magic", source="CurseForge"))
        store.create_mod(make_mod("C", version="1.19.2", category="Magic", source="Modrinth"))
        store.create_mod(make_mod("D", version="1.20.1", category="Technology", source="Modrinth"))

        result = store.list_mods(ModFilter(version="1.20.1", category="Magic", source="Modrinth"))

        assert [m.name for m in result.data] == ["A"]

    @pytest.mark.parametrize("sentinels", [
        {"version": "all", "category": "all", "source": "all"},
        {"version": "All Versions", "category": "All Categories", "source": "All Sources"},
        {"version": "", "category": None, "source": ""},
    ])
    def test_sentinels_mean_no_filter(self, store, make_mod, sentinels):
        store.create_mod(make_mod("A", version="1.20.1", category="Magic", source="Modrinth"))
        store.create_mod(make_mod("B", version="1.12.2", category="Storage", source="CurseForge"))

        result = store.list_mods(ModFilter(**sentinels))

        assert result.total == 2

    def test_popular_and_latest_helpers(self, store, make_mod):
        mods = _seed_counts(store, make_mod, [10, 50, 30, 20, 40])

        popular = store.get_popular_mods(limit=2)
        latest = store.get_latest_mods(limit=2)

        assert [m.download_count for m in popular] == [50, 40]
        assert [m.id for m in latest] == [mods[-1].id, mods[-2].id]


class TestIncrementDownloadCount:
    """Download counter semantics"""

    def test_sequential_increments(self, store, make_mod):
        mod = store.create_mod(make_mod("Counter", download_count=7))

        for _ in range(5):
            updated = store.increment_download_count(mod.id)

        assert updated.download_count == 12
        assert store.get_mod(mod.id).download_count == 12

    def test_missing_mod(self, store, make_mod):
        store.create_mod(make_mod("Existing"))
        assert store.increment_download_count(999) is None

    def test_other_fields_untouched(self, store, make_mod):
        mod = store.create_mod(make_mod("Stable", source="Modrinth"))
        updated = store.increment_download_count(mod.id)
        assert updated.model_dump(exclude={"download_count"}) == mod.model_dump(exclude={"download_count"})

    def test_concurrent_increments_are_not_lost(self, memory_store, make_mod):
        mod = memory_store.create_mod(make_mod("Busy"))
        threads_count, per_thread = 8, 50

        def worker():
            for _ in range(per_thread):
                memory_store.increment_download_count(mod.id)

        threads = [threading.Thread(target=worker) for _ in range(threads_count)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert memory_store.get_mod(mod.id).download_count == threads_count * per_thread


class TestClear:
    """Clearing never hands the same id out twice"""

    def test_clear_mods_keeps_counter(self, store, make_mod):
        old = [store.create_mod(make_mod(f"Old {i}")) for i in range(3)]

        store.clear_mods()
        new = store.create_mod(make_mod("New"))

        assert store.count_mods() == 1
        assert store.get_mod(old[0].id) is None
        assert new.id > max(m.id for m in old)

    def test_clear_categories_keeps_counter(self, store):
        old = store.create_category(CategoryCreate(name="Magic", image_url="x"))

        store.clear_categories()
        new = store.create_category(CategoryCreate(name="Magic", image_url="y"))

        assert store.get_categories() == [new]
        assert new.id > old.id


class TestCategoriesAndVersions:

    def test_category_lookup(self, store):
        created = store.create_category(CategoryCreate(name="Storage", image_url="https://i.imgur.com/BPzjvJp.jpg"))

        assert store.get_category(created.id) == created
        assert store.get_category_by_name("Storage") == created
        assert store.get_category_by_name("storage") is None
        assert store.get_category(999) is None

    def test_duplicate_category_rejected(self, store):
        store.create_category(CategoryCreate(name="Magic", image_url="x"))
        with pytest.raises(DuplicateRecordError):
            store.create_category(CategoryCreate(name="Magic", image_url="y"))

    def test_versions(self, store):
        store.create_minecraft_version(MinecraftVersionCreate(version="1.20.1"))
        store.create_minecraft_version(MinecraftVersionCreate(version="1.19.2"))

        assert [v.version for v in store.get_minecraft_versions()] == ["1.20.1", "1.19.2"]


class TestUsers:

    def test_create_and_lookup(self, store):
        user = store.create_user(UserCreate(username="steve", hashed_password="hash"))

        assert store.get_user(user.id) == user
        assert store.get_user_by_username("steve") == user
        assert store.get_user_by_username("alex") is None

    def test_duplicate_username_rejected(self, store):
        store.create_user(UserCreate(username="steve", hashed_password="hash"))
        with pytest.raises(DuplicateRecordError):
            store.create_user(UserCreate(username="steve", hashed_password="other"))
