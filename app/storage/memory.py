import itertools
import threading
from collections import defaultdict
from typing import Dict, List, Optional

from app.exceptions import DuplicateRecordError
from app.storage.base import (
    CatalogStore,
    active_filter,
    normalize_sort,
    paginate,
    utcnow,
)
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


class MemoryCatalogStore(CatalogStore):
    """Process-lifetime store backed by dicts keyed by id."""

    def __init__(self):
        self._users: Dict[int, User] = {}
        self._mods: Dict[int, Mod] = {}
        self._categories: Dict[int, Category] = {}
        self._versions: Dict[int, MinecraftVersion] = {}

        # Counters survive clear_*() so ids are never reused
        self._user_ids = itertools.count(1)
        self._mod_ids = itertools.count(1)
        self._category_ids = itertools.count(1)
        self._version_ids = itertools.count(1)

        self._write_lock = threading.Lock()
        self._mod_locks: Dict[int, threading.Lock] = defaultdict(threading.Lock)

    # --- Users ---

    def get_user(self, user_id: int) -> Optional[User]:
        user = self._users.get(user_id)
        return user.model_copy() if user else None

    def get_user_by_username(self, username: str) -> Optional[User]:
        for user in list(self._users.values()):
            if user.username == username:
                return user.model_copy()
        return None

    def create_user(self, data: UserCreate) -> User:
        with self._write_lock:
            if any(u.username == data.username for u in self._users.values()):
                raise DuplicateRecordError(f"username '{data.username}'")
            user = User(id=next(self._user_ids), **data.model_dump())
            self._users[user.id] = user
        return user.model_copy()

    # --- Mods ---

    def get_mod(self, mod_id: int) -> Optional[Mod]:
        mod = self._mods.get(mod_id)
        return mod.model_copy() if mod else None

    def list_mods(self, filters: Optional[ModFilter] = None) -> PaginatedMods:
        filters = filters or ModFilter()
        mods = list(self._mods.values())

        if filters.search:
            needle = filters.search.lower()
            mods = [
                m for m in mods
                if needle in m.name.lower() or needle in m.description.lower()
            ]

        version = active_filter("version", filters.version)
        if version:
            mods = [m for m in mods if m.version == version]

        category = active_filter("category", filters.category)
        if category:
            mods = [m for m in mods if m.category == category]

        source = active_filter("source", filters.source)
        if source:
            mods = [m for m in mods if m.source == source]

        sort_by = normalize_sort(filters.sort_by)
        if sort_by == "recent":
            mods.sort(key=lambda m: (m.created_at, m.id), reverse=True)
        elif sort_by == "name":
            mods.sort(key=lambda m: (m.name, m.id))
        else:
            mods.sort(key=lambda m: (-m.download_count, m.id))

        total = len(mods)
        start = (filters.page - 1) * filters.page_size
        page = [m.model_copy() for m in mods[start:start + filters.page_size]]
        return paginate(page, total, filters.page, filters.page_size)

    def create_mod(self, data: ModCreate) -> Mod:
        with self._write_lock:
            mod = Mod(
                id=next(self._mod_ids),
                name=data.name,
                description=data.description,
                version=data.version,
                category=data.category,
                download_count=data.download_count or 0,
                image_url=data.image_url,
                download_url=data.download_url,
                source_url=data.source_url,
                source=data.source or "unknown",
                is_new=bool(data.is_new),
                created_at=utcnow(),
            )
            self._mods[mod.id] = mod
        return mod.model_copy()

    def increment_download_count(self, mod_id: int) -> Optional[Mod]:
        if mod_id not in self._mods:
            return None
        with self._mod_locks[mod_id]:
            mod = self._mods.get(mod_id)
            if mod is None:
                return None
            updated = mod.model_copy(update={"download_count": mod.download_count + 1})
            self._mods[mod_id] = updated
        return updated.model_copy()

    def count_mods(self) -> int:
        return len(self._mods)

    def clear_mods(self) -> None:
        with self._write_lock:
            self._mods.clear()
            self._mod_locks.clear()

    # --- Categories ---

    def get_categories(self) -> List[Category]:
        return [c.model_copy() for c in self._categories.values()]

    def get_category(self, category_id: int) -> Optional[Category]:
        category = self._categories.get(category_id)
        return category.model_copy() if category else None

    def get_category_by_name(self, name: str) -> Optional[Category]:
        for category in list(self._categories.values()):
            if category.name == name:
                return category.model_copy()
        return None

    def create_category(self, data: CategoryCreate) -> Category:
        with self._write_lock:
            if any(c.name == data.name for c in self._categories.values()):
                raise DuplicateRecordError(f"category '{data.name}'")
            category = Category(id=next(self._category_ids), **data.model_dump())
            self._categories[category.id] = category
        return category.model_copy()

    def clear_categories(self) -> None:
        with self._write_lock:
            self._categories.clear()

    # --- Minecraft versions ---

    def get_minecraft_versions(self) -> List[MinecraftVersion]:
        return [v.model_copy() for v in self._versions.values()]

    def create_minecraft_version(self, data: MinecraftVersionCreate) -> MinecraftVersion:
        with self._write_lock:
            if any(v.version == data.version for v in self._versions.values()):
                raise DuplicateRecordError(f"version '{data.version}'")
            version = MinecraftVersion(id=next(self._version_ids), **data.model_dump())
            self._versions[version.id] = version
        return version.model_copy()
