"""
Pytest fixtures and configuration for ModVoyage tests
"""
import os
import sys

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Project root on the path so `app`, `database`, `routes` import as packages
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Never hit the real providers from module-level app construction
os.environ.setdefault("AUTO_PARSE", "false")

from app.storage.memory import MemoryCatalogStore
from app.storage.sql import SqlCatalogStore
from database.models import Base
from database.sqlite_functions import install_unicode_functions
from database.schemas import ModCreate


@pytest.fixture
def memory_store():
    """Fresh in-memory catalog per test"""
    return MemoryCatalogStore()


@pytest.fixture
def sql_store():
    """Relational catalog on a private in-memory SQLite database"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    install_unicode_functions(engine)
    Base.metadata.create_all(bind=engine)
    session_factory = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
    yield SqlCatalogStore(session_factory)
    engine.dispose()


@pytest.fixture(params=["memory", "sql"])
def store(request):
    """Runs the test once per store implementation"""
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture
def make_mod():
    """Factory for ModCreate records with sensible defaults"""
    def _make(name="Test Mod", **overrides):
        slug = name.lower().replace(" ", "-")
        data = {
            "name": name,
            "description": f"{name} description",
            "version": "1.20.1",
            "category": "Utility",
            "image_url": f"https://example.com/{slug}.png",
            "download_url": f"/download/{slug}",
            "source_url": f"https://www.curseforge.com/minecraft/mc-mods/{slug}",
        }
        data.update(overrides)
        return ModCreate(**data)
    return _make


@pytest.fixture
def client(memory_store):
    """API client over an empty memory store; no seeding, no auto-parse"""
    from main import create_app

    app = create_app(store=memory_store, auto_parse=False, seed=False)
    return TestClient(app)
