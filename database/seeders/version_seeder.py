"""
Version Seeder
Seeds the Minecraft versions offered by the catalog filters
"""
from app.storage.base import CatalogStore
from database.schemas import MinecraftVersionCreate

VERSIONS = ["1.20.1", "1.19.2", "1.18.2", "1.17.1", "1.16.5", "1.15.2", "1.14.4", "1.12.2"]


def seed_versions(store: CatalogStore):
    """Seed Minecraft versions if there are none yet"""
    if store.get_minecraft_versions():
        print("Versions already exist, skipping seed.")
        return

    print("Seeding Versions...")
    for version in VERSIONS:
        store.create_minecraft_version(MinecraftVersionCreate(version=version))
    print(f"Created {len(VERSIONS)} versions")
