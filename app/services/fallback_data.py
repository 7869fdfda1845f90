"""
Synthetic catalog used when a provider cannot be reached or has no API key.

The output only depends on ``source`` and ``seed``, so tests can assert on it
without network access.
"""
import random
from typing import List

from app.services.mod_mapper import DEFAULT_GAME_VERSION, placeholder_image, slugify
from database.schemas import ModCreate

DEFAULT_SEED = 432

SOURCE_URLS = {
    "CurseForge": "https://www.curseforge.com/minecraft/mc-mods/{slug}",
    "Modrinth": "https://modrinth.com/mod/{slug}",
}

# (name, description, category, download count)
POPULAR_MODS = [
    ("Quark", "A modular mod focused on improving the vanilla gameplay experience", "Utility", 32500000),
    ("JourneyMap", "Real-time mapping in-game or your browser as you explore", "Utility", 28700000),
    ("Biomes O' Plenty", "Adds over 90 new biomes to Minecraft", "World Generation", 25100000),
    ("Waystones", "Teleportation items that allow players to return to previously visited areas", "Transportation", 18300000),
    ("Storage Drawers", "Multi-block storage solution that allows for compact item storage", "Storage", 17600000),
    ("Sophisticated Backpacks", "Advanced backpacks with upgrade system and automation features", "Storage", 12400000),
    ("Nature's Compass", "Helps you locate specific biomes using a compass", "Utility", 11500000),
    ("Chisel", "Adds a huge variety of decorative blocks", "Building", 16800000),
    ("Better Villages", "Redesigned villages with improved structure generation", "World Generation", 9700000),
    ("Dungeon Crawl", "Generates massive, multi-level dungeons", "Adventure", 8200000),
]

CATEGORY_OPTIONS = [
    "Utility", "Technology", "Magic", "Adventure", "Storage",
    "Building", "World Generation", "Transportation", "Decoration",
    "Redstone", "Food", "Farming", "Mobs", "Armor", "Tools",
    "Combat", "Exploration", "Quests", "Multiplayer", "API/Library",
]

PREFIXES = ["Enhanced", "Advanced", "Ultimate", "Super", "Mega", "Extreme", "Better", "Improved", "Superior", "Master"]
SUFFIXES = ["Plus", "Pro", "Extended", "Deluxe", "Premium", "Expanded", "XL", "Max", "Elite", "Prime"]

BASE_NAMES = [
    "Backpack", "Crafting Table", "Chest", "Furnace", "Ore", "Biome",
    "Animals", "Monsters", "Tools", "Armor", "Food", "Magic", "Tech",
    "Flight", "Automation", "Transport", "Dimension", "Villages",
    "Structures", "Enchantment", "Combat", "Building", "Decoration",
]

VARIANT_PASSES = 30
GENERATED_MODS = 100


def _record(source: str, name: str, description: str, category: str,
            downloads: int, is_new: bool, image_url: str) -> ModCreate:
    slug = slugify(name)
    return ModCreate(
        name=name,
        description=description,
        version=DEFAULT_GAME_VERSION,
        category=category,
        download_count=downloads,
        image_url=image_url,
        download_url=f"/download/{slug}",
        source_url=SOURCE_URLS.get(source, SOURCE_URLS["CurseForge"]).format(slug=slug),
        source=source,
        is_new=is_new,
    )


def build_fallback_mods(source: str = "CurseForge", seed: int = DEFAULT_SEED) -> List[ModCreate]:
    rng = random.Random(seed)
    mods = []

    for name, description, category, downloads in POPULAR_MODS:
        mods.append(_record(source, name, description, category, downloads, False, placeholder_image(name, "400x300")))

    # Variations of the well-known mods
    for _ in range(VARIANT_PASSES):
        for name, description, _category, downloads in POPULAR_MODS:
            prefix = rng.choice(PREFIXES)
            suffix = rng.choice(SUFFIXES)
            mods.append(_record(
                source,
                name=f"{prefix} {name} {suffix}",
                description=f"{prefix} version of {description} with additional features and improvements.",
                category=rng.choice(CATEGORY_OPTIONS),
                downloads=int(downloads * (0.3 + rng.random() * 0.5)),
                is_new=rng.random() > 0.7,
                image_url=placeholder_image(name, "400x300"),
            ))

    # Entirely made-up mods
    for _ in range(GENERATED_MODS):
        base = rng.choice(BASE_NAMES)
        prefix = rng.choice(PREFIXES)
        suffix = f" {rng.choice(SUFFIXES)}" if rng.random() > 0.5 else ""
        category = rng.choice(CATEGORY_OPTIONS)
        mods.append(_record(
            source,
            name=f"{prefix} {base}{suffix}",
            description=f"A unique {category.lower()} mod that enhances {base.lower()} mechanics in Minecraft.",
            category=category,
            downloads=100000 + int(rng.random() * 5000000),
            is_new=rng.random() > 0.7,
            image_url=placeholder_image(f"{prefix} {base}", "400x300"),
        ))

    return mods
