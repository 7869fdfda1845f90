import asyncio
import logging
import os
from dataclasses import dataclass, field
from typing import List

from app.services.parser_service import parse_all_sources
from app.storage.base import CatalogStore
from database.schemas import Category, Mod, ParseResult

logger = logging.getLogger(__name__)


@dataclass
class IngestionReport:
    parsed_mods: int = 0
    parsed_categories: int = 0
    saved_mods: List[Mod] = field(default_factory=list)
    saved_categories: List[Category] = field(default_factory=list)


def ingest(store: CatalogStore, result: ParseResult, clear_first: bool = False) -> IngestionReport:
    """
    Write a parse result into the store, one record at a time.

    Categories already present (by name) are skipped, never updated. Mods are
    always created. A record that fails to save is logged and skipped.
    """
    if clear_first:
        logger.info("Clearing existing mods and categories")
        store.clear_mods()
        store.clear_categories()

    report = IngestionReport(parsed_mods=len(result.mods), parsed_categories=len(result.categories))

    for category in result.categories:
        try:
            if store.get_category_by_name(category.name):
                continue
            report.saved_categories.append(store.create_category(category))
        except Exception as e:
            logger.error(f"Failed to save category: {category.name} ({e})")

    for mod in result.mods:
        try:
            report.saved_mods.append(store.create_mod(mod))
        except Exception as e:
            logger.error(f"Failed to save mod: {mod.name} ({e})")

    logger.info(
        f"Saved {len(report.saved_mods)}/{report.parsed_mods} mods and "
        f"{len(report.saved_categories)}/{report.parsed_categories} categories"
    )
    return report


async def auto_ingest(store: CatalogStore, limit: int = 20) -> IngestionReport:
    """Startup bootstrap: drop the previous catalog and reload it from every provider."""
    report = IngestionReport()
    try:
        logger.info("Starting automatic parsing initialization")

        if not os.getenv("CURSEFORGE_API_KEY"):
            logger.warning("CURSEFORGE_API_KEY not found in environment variables. CurseForge will serve fallback data.")
        if not os.getenv("MODRINTH_API_KEY"):
            logger.warning("MODRINTH_API_KEY not found in environment variables. Modrinth requests are unauthenticated.")

        result = await parse_all_sources(limit)
        loop = asyncio.get_running_loop()
        report = await loop.run_in_executor(None, lambda: ingest(store, result, clear_first=True))
        logger.info("Auto-parsing completed successfully")
    except Exception:
        logger.exception("Error during auto-parsing")
    return report
