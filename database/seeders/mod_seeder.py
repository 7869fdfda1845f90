"""
Mod Seeder
Seeds a handful of sample mods so the home page has something to show
before the first ingestion run
"""
from app.services.mod_mapper import placeholder_image
from app.storage.base import CatalogStore
from database.schemas import ModCreate


def _sample(name, description, version, category, downloads, slug, source="CurseForge", is_new=False):
    return ModCreate(
        name=name,
        description=description,
        version=version,
        category=category,
        download_count=downloads,
        image_url=placeholder_image(name),
        download_url=f"/download/{slug}",
        source_url=f"https://www.curseforge.com/minecraft/mc-mods/{slug}",
        source=source,
        is_new=is_new,
    )


SAMPLE_MODS = [
    # Popular
    _sample("Applied Energistics 2", "A mod about matter, energy and using them to conquer the world.",
            "1.20.1", "Technology", 25600000, "applied-energistics-2"),
    _sample("Just Enough Items", "View items and recipes for all installed mods in an easy-to-use interface.",
            "1.20.1", "Utility", 42300000, "jei"),
    _sample("Create", "A steampunk technology mod focused on rotational power and aesthetics.",
            "1.19.2", "Technology", 18700000, "create"),
    _sample("Botania", "A tech mod themed around natural magic and flowers.",
            "1.20.1", "Magic", 15900000, "botania"),
    # Latest
    _sample("More Structures+", "Adds 50+ new structures to make exploration more exciting.",
            "1.20.1", "World Generation", 156000, "more-structures-plus", is_new=True),
    _sample("Enchanted Combat", "Revamps the combat system with magic spells and new weapons.",
            "1.20.1", "Adventure", 89000, "enchanted-combat", is_new=True),
    _sample("Biome Tweaker", "Customize Minecraft biomes with new flora, fauna, and terrain generation.",
            "1.20.1", "World Generation", 63000, "biome-tweaker", source="Modrinth", is_new=True),
    _sample("Simple Storage", "A lightweight storage solution for organizing your items.",
            "1.19.2", "Storage", 42000, "simple-storage", source="Modrinth", is_new=True),
]


def seed_mods(store: CatalogStore):
    """Seed sample mods if the catalog is empty"""
    if store.count_mods():
        print("Mods already exist, skipping seed.")
        return

    print("Seeding Mods...")
    for mod in SAMPLE_MODS:
        store.create_mod(mod)
    print(f"Created {len(SAMPLE_MODS)} mods")
