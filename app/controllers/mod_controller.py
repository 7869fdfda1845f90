from typing import List, Optional

from app.storage.base import CatalogStore
from database.schemas import (
    Category,
    MinecraftVersion,
    Mod,
    ModDownload,
    ModFilter,
    PaginatedMods,
)

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
DEFAULT_HIGHLIGHT_LIMIT = 4
# Largest value a 32-bit SQL INTEGER holds
MAX_INT = 2**31 - 1


def coerce_int(value, default: int) -> int:
    """Lenient positive int parsing for query strings; anything odd falls back to the default."""
    if value is None or value == "":
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    if number < 1:
        return default
    return min(number, MAX_INT)


class ModController:
    """Translates catalog requests into store calls. No business rules of its own."""

    def search(
        self,
        store: CatalogStore,
        search: Optional[str] = None,
        version: Optional[str] = None,
        category: Optional[str] = None,
        source: Optional[str] = None,
        sort_by: Optional[str] = None,
        page=None,
        page_size=None,
    ) -> PaginatedMods:
        filters = ModFilter(
            search=search or None,
            version=version or None,
            category=category or None,
            source=source or None,
            sort_by=sort_by or None,
            page=coerce_int(page, DEFAULT_PAGE),
            page_size=coerce_int(page_size, DEFAULT_PAGE_SIZE),
        )
        return store.list_mods(filters)

    def popular(self, store: CatalogStore, limit=None) -> List[Mod]:
        return store.get_popular_mods(coerce_int(limit, DEFAULT_HIGHLIGHT_LIMIT))

    def latest(self, store: CatalogStore, limit=None) -> List[Mod]:
        return store.get_latest_mods(coerce_int(limit, DEFAULT_HIGHLIGHT_LIMIT))

    def get(self, store: CatalogStore, mod_id: int) -> Optional[Mod]:
        return store.get_mod(mod_id)

    def download(self, store: CatalogStore, mod_id: int) -> Optional[ModDownload]:
        mod = store.increment_download_count(mod_id)
        if mod is None:
            return None
        return ModDownload(**mod.model_dump(), redirect_url=mod.source_url)

    def versions(self, store: CatalogStore) -> List[MinecraftVersion]:
        return store.get_minecraft_versions()

    def categories(self, store: CatalogStore) -> List[Category]:
        return store.get_categories()
