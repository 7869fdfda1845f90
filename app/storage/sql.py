import logging
from typing import List, Optional

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from app.exceptions import DuplicateRecordError
from app.storage.base import (
    CatalogStore,
    active_filter,
    normalize_sort,
    paginate,
    utcnow,
)
from database import models
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

logger = logging.getLogger(__name__)


class SqlCatalogStore(CatalogStore):
    """Relational store on SQLAlchemy. One short-lived session per operation."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def _session(self) -> Session:
        return self.session_factory()

    def _insert(self, row, schema):
        with self._session() as db:
            db.add(row)
            try:
                db.commit()
            except IntegrityError as e:
                db.rollback()
                raise DuplicateRecordError(str(e.orig)) from e
            db.refresh(row)
            return schema.model_validate(row)

    # --- Users ---

    def get_user(self, user_id: int) -> Optional[User]:
        with self._session() as db:
            row = db.get(models.User, user_id)
            return User.model_validate(row) if row else None

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self._session() as db:
            row = db.scalars(
                select(models.User).where(models.User.username == username).limit(1)
            ).first()
            return User.model_validate(row) if row else None

    def create_user(self, data: UserCreate) -> User:
        row = models.User(username=data.username, hashed_password=data.hashed_password)
        return self._insert(row, User)

    # --- Mods ---

    def get_mod(self, mod_id: int) -> Optional[Mod]:
        with self._session() as db:
            row = db.get(models.Mod, mod_id)
            return Mod.model_validate(row) if row else None

    def _filtered(self, query, filters: ModFilter):
        if filters.search:
            # autoescape: a literal % or _ in the search box matches itself
            needle = filters.search.lower()
            query = query.where(or_(
                func.lower(models.Mod.name).contains(needle, autoescape=True),
                func.lower(models.Mod.description).contains(needle, autoescape=True),
            ))

        version = active_filter("version", filters.version)
        if version:
            query = query.where(models.Mod.version == version)

        category = active_filter("category", filters.category)
        if category:
            query = query.where(models.Mod.category == category)

        source = active_filter("source", filters.source)
        if source:
            query = query.where(models.Mod.source == source)

        return query

    def list_mods(self, filters: Optional[ModFilter] = None) -> PaginatedMods:
        filters = filters or ModFilter()

        sort_by = normalize_sort(filters.sort_by)
        if sort_by == "recent":
            order = (models.Mod.created_at.desc(), models.Mod.id.desc())
        elif sort_by == "name":
            order = (models.Mod.name.asc(), models.Mod.id.asc())
        else:
            order = (models.Mod.download_count.desc(), models.Mod.id.asc())

        with self._session() as db:
            total = db.scalar(self._filtered(select(func.count(models.Mod.id)), filters)) or 0
            offset = (filters.page - 1) * filters.page_size
            data = []
            # Past the end; also keeps offset and limit inside SQLite's INTEGER range
            if offset < total:
                rows = db.scalars(
                    self._filtered(select(models.Mod), filters)
                    .order_by(*order)
                    .offset(offset)
                    .limit(min(filters.page_size, total - offset))
                ).all()
                data = [Mod.model_validate(r) for r in rows]

        return paginate(data, total, filters.page, filters.page_size)

    def create_mod(self, data: ModCreate) -> Mod:
        row = models.Mod(
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
        return self._insert(row, Mod)

    def increment_download_count(self, mod_id: int) -> Optional[Mod]:
        with self._session() as db:
            result = db.execute(
                update(models.Mod)
                .where(models.Mod.id == mod_id)
                .values(download_count=models.Mod.download_count + 1)
            )
            db.commit()
            if result.rowcount == 0:
                return None
            row = db.get(models.Mod, mod_id, populate_existing=True)
            return Mod.model_validate(row) if row else None

    def count_mods(self) -> int:
        with self._session() as db:
            return db.scalar(select(func.count(models.Mod.id))) or 0

    def clear_mods(self) -> None:
        # The id sequence is left alone, so ids are not reused
        with self._session() as db:
            db.execute(delete(models.Mod))
            db.commit()

    # --- Categories ---

    def get_categories(self) -> List[Category]:
        with self._session() as db:
            rows = db.scalars(select(models.Category).order_by(models.Category.id)).all()
            return [Category.model_validate(r) for r in rows]

    def get_category(self, category_id: int) -> Optional[Category]:
        with self._session() as db:
            row = db.get(models.Category, category_id)
            return Category.model_validate(row) if row else None

    def get_category_by_name(self, name: str) -> Optional[Category]:
        with self._session() as db:
            row = db.scalars(
                select(models.Category).where(models.Category.name == name).limit(1)
            ).first()
            return Category.model_validate(row) if row else None

    def create_category(self, data: CategoryCreate) -> Category:
        row = models.Category(name=data.name, image_url=data.image_url)
        return self._insert(row, Category)

    def clear_categories(self) -> None:
        with self._session() as db:
            db.execute(delete(models.Category))
            db.commit()

    # --- Minecraft versions ---

    def get_minecraft_versions(self) -> List[MinecraftVersion]:
        with self._session() as db:
            rows = db.scalars(select(models.MinecraftVersion).order_by(models.MinecraftVersion.id)).all()
            return [MinecraftVersion.model_validate(r) for r in rows]

    def create_minecraft_version(self, data: MinecraftVersionCreate) -> MinecraftVersion:
        row = models.MinecraftVersion(version=data.version)
        return self._insert(row, MinecraftVersion)
