import logging
import os

from app.storage.base import CatalogStore
from app.storage.memory import MemoryCatalogStore

logger = logging.getLogger(__name__)


def create_store(backend: str = None) -> CatalogStore:
    """
    Build the catalog store selected by STORAGE_BACKEND (memory | db).
    The database engine is only touched when the relational store is chosen.
    """
    backend = (backend or os.getenv("STORAGE_BACKEND", "memory")).lower()

    if backend == "memory":
        logger.info("Using in-memory catalog store")
        return MemoryCatalogStore()

    if backend in ("db", "sql", "database"):
        from app.storage.sql import SqlCatalogStore
        from database.connection import SessionLocal, engine
        from database.models import Base

        # Tables normally come from Alembic; create_all is a no-op when they exist
        Base.metadata.create_all(bind=engine)
        logger.info(f"Using relational catalog store at {engine.url.render_as_string(hide_password=True)}")
        return SqlCatalogStore(SessionLocal)

    raise ValueError(f"Unknown STORAGE_BACKEND: {backend}")


__all__ = ["CatalogStore", "MemoryCatalogStore", "create_store"]
