"""
Tests for application startup
"""
from fastapi.testclient import TestClient

from database.seeders.category_seeder import CATEGORIES
from database.seeders.mod_seeder import SAMPLE_MODS
from database.seeders.version_seeder import VERSIONS
from main import create_app


def test_startup_seeds_empty_store(memory_store):
    app = create_app(store=memory_store, auto_parse=False)

    with TestClient(app) as client:
        versions = client.get("/api/versions").json()
        categories = client.get("/api/categories").json()
        popular = client.get("/api/mods/popular").json()

    assert [v["version"] for v in versions] == VERSIONS
    assert len(categories) == len(CATEGORIES)
    assert memory_store.count_mods() == len(SAMPLE_MODS)
    assert popular[0]["name"] == "Just Enough Items"


def test_seeding_skips_populated_store(memory_store, make_mod):
    memory_store.create_mod(make_mod("Already Here"))
    app = create_app(store=memory_store, auto_parse=False)

    with TestClient(app):
        pass

    assert memory_store.count_mods() == 1


def test_sql_store_end_to_end(sql_store):
    app = create_app(store=sql_store, auto_parse=False)

    with TestClient(app) as client:
        mod_id = client.get("/api/mods/popular", params={"limit": 1}).json()[0]["id"]
        response = client.post(f"/api/mods/{mod_id}/download")

    assert response.status_code == 200
    assert response.json()["downloadCount"] == 42300001
