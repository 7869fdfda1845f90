import abc
import datetime
import math
from typing import List, Optional

from database.schemas import (
    Category,
    CategoryCreate,
    MinecraftVersion,
    MinecraftVersionCreate,
    Mod,
    ModCreate,
    ModFilter,
    PaginatedMods,
    User,
    UserCreate,
)

SORT_OPTIONS = ("popular", "recent", "name", "downloads")
DEFAULT_SORT = "popular"

# Values the filter dropdowns send to mean "no filter"
ALL_SENTINELS = {
    "version": {"all", "all versions"},
    "category": {"all", "all categories"},
    "source": {"all", "all sources"},
}


def utcnow() -> datetime.datetime:
    """Naive UTC timestamp, the form SQLite hands back."""
    return datetime.datetime.now(datetime.timezone.utc).replace(tzinfo=None)


def active_filter(dimension: str, value: Optional[str]) -> Optional[str]:
    """Return the value to filter on, or None when it means 'everything'."""
    if not value:
        return None
    if value.strip().lower() in ALL_SENTINELS[dimension]:
        return None
    return value


def normalize_sort(sort_by: Optional[str]) -> str:
    if sort_by in SORT_OPTIONS:
        return sort_by
    return DEFAULT_SORT


def paginate(data: List[Mod], total: int, page: int, page_size: int) -> PaginatedMods:
    return PaginatedMods(
        data=data,
        total=total,
        page=page,
        page_size=page_size,
        page_count=math.ceil(total / page_size),
    )


class CatalogStore(abc.ABC):
    """Storage for mods, categories, Minecraft versions and users.

    Lookups return None for missing rows instead of raising. Records handed
    out are detached copies; mutating them never touches the store.
    """

    # --- Users ---

    @abc.abstractmethod
    def get_user(self, user_id: int) -> Optional[User]: ...

    @abc.abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]: ...

    @abc.abstractmethod
    def create_user(self, data: UserCreate) -> User: ...

    # --- Mods ---

    @abc.abstractmethod
    def get_mod(self, mod_id: int) -> Optional[Mod]: ...

    @abc.abstractmethod
    def list_mods(self, filters: Optional[ModFilter] = None) -> PaginatedMods:
        """Search, filter, sort, then slice one page.

        ``total`` is the filtered count before slicing and pages past the end
        come back with empty ``data``.
        """

    def get_popular_mods(self, limit: int = 4) -> List[Mod]:
        return self.list_mods(ModFilter(sort_by="popular", page=1, page_size=limit)).data

    def get_latest_mods(self, limit: int = 4) -> List[Mod]:
        return self.list_mods(ModFilter(sort_by="recent", page=1, page_size=limit)).data

    @abc.abstractmethod
    def create_mod(self, data: ModCreate) -> Mod: ...

    @abc.abstractmethod
    def increment_download_count(self, mod_id: int) -> Optional[Mod]:
        """Add exactly one download, atomically per mod. None if the mod is unknown."""

    @abc.abstractmethod
    def count_mods(self) -> int: ...

    @abc.abstractmethod
    def clear_mods(self) -> None:
        """Delete every mod. Ids are not handed out again afterwards."""

    # --- Categories ---

    @abc.abstractmethod
    def get_categories(self) -> List[Category]: ...

    @abc.abstractmethod
    def get_category(self, category_id: int) -> Optional[Category]: ...

    @abc.abstractmethod
    def get_category_by_name(self, name: str) -> Optional[Category]: ...

    @abc.abstractmethod
    def create_category(self, data: CategoryCreate) -> Category: ...

    @abc.abstractmethod
    def clear_categories(self) -> None: ...

    # --- Minecraft versions ---

    @abc.abstractmethod
    def get_minecraft_versions(self) -> List[MinecraftVersion]: ...

    @abc.abstractmethod
    def create_minecraft_version(self, data: MinecraftVersionCreate) -> MinecraftVersion: ...
