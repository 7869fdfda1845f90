"""
Tests for the shared provider mapping rules
"""
import datetime

from app.services import mod_mapper
from database.schemas import CategoryCreate, ModCreate


class TestInferCategory:

    def test_skips_loader_tags(self):
        assert mod_mapper.infer_category(["fabric", "forge", "optimization"]) == "Optimization"

    def test_capitalises_first_letter_only(self):
        assert mod_mapper.infer_category(["worldGen"]) == "WorldGen"

    def test_falls_back_to_utility(self):
        assert mod_mapper.infer_category(["forge", "quilt"]) == "Utility"
        assert mod_mapper.infer_category([]) == "Utility"
        assert mod_mapper.infer_category(None) == "Utility"


class TestIsRecent:

    def test_inside_window(self):
        now = datetime.datetime(2026, 3, 1, tzinfo=datetime.timezone.utc)
        assert mod_mapper.is_recent(now - datetime.timedelta(days=29), now=now)

    def test_outside_window(self):
        now = datetime.datetime(2026, 3, 1, tzinfo=datetime.timezone.utc)
        assert not mod_mapper.is_recent(now - datetime.timedelta(days=31), now=now)

    def test_naive_timestamps_are_utc(self):
        now = datetime.datetime(2026, 3, 1, tzinfo=datetime.timezone.utc)
        assert mod_mapper.is_recent(datetime.datetime(2026, 2, 20), now=now)

    def test_missing_date(self):
        assert mod_mapper.is_recent(None) is False


class TestLatestGameVersion:

    def test_picks_newest_release(self):
        assert mod_mapper.latest_game_version(["1.19.2", "1.21", "1.20.1", "23w13a"]) == "1.21"

    def test_numeric_not_lexical(self):
        assert mod_mapper.latest_game_version(["1.9", "1.12.2"]) == "1.12.2"

    def test_default_when_nothing_usable(self):
        assert mod_mapper.latest_game_version(["Forge", "24w14a"]) == mod_mapper.DEFAULT_GAME_VERSION
        assert mod_mapper.latest_game_version(None) == mod_mapper.DEFAULT_GAME_VERSION


class TestUrls:

    def test_slugify(self):
        assert mod_mapper.slugify("Nature's  Compass") == "natures-compass"

    def test_placeholder_image_escapes_text(self):
        url = mod_mapper.placeholder_image("Biomes O' Plenty")
        assert url.startswith("https://placehold.co/400x200/")
        assert "Biomes%20O%27%20Plenty" in url

    def test_category_image_size(self):
        assert "/200x150/" in mod_mapper.category_image("Magic")


class TestCategories:

    def _mod(self, category):
        return ModCreate(
            name="X", description="x", version="1.20.1", category=category,
            image_url="i", download_url="d", source_url="s",
        )

    def test_collect_unique_in_first_seen_order(self):
        mods = [self._mod("Magic"), self._mod("Storage"), self._mod("Magic")]
        categories = mod_mapper.collect_categories(mods)

        assert [c.name for c in categories] == ["Magic", "Storage"]
        assert all(c.image_url for c in categories)

    def test_dedupe_keeps_first(self):
        categories = [
            CategoryCreate(name="Magic", image_url="first"),
            CategoryCreate(name="Magic", image_url="second"),
            CategoryCreate(name="Tools", image_url="third"),
        ]
        unique = mod_mapper.dedupe_categories(categories)

        assert [(c.name, c.image_url) for c in unique] == [("Magic", "first"), ("Tools", "third")]
