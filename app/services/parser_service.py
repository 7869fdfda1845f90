"""
Provider adapters and the aggregator that pools them.

Every adapter returns a ParseResult and never raises: CurseForge and the
paged Modrinth listing fall back to synthetic data, the single-page Modrinth
variant comes back empty.
"""
import asyncio
import logging
import math
from typing import Awaitable, Callable, List, Optional, Sequence

from app.exceptions import ProviderError
from app.services import mod_mapper
from app.services.fallback_data import build_fallback_mods
from database.schemas import ModCreate, ParseResult
from source.endpoints.curseforge.curseforge import CurseForgeClient, CurseForgeMod
from source.endpoints.modrinth.modrinth import ModrinthClient, ModrinthHit

logger = logging.getLogger(__name__)

MODRINTH_PAGE_SIZE = 20
MODRINTH_MAX_PAGES = 100
PAGE_DELAY_SECONDS = 0.3
MODRINTH_LISTING_FACETS = [["project_type:mod", "categories:forge", "categories:fabric"]]
MODRINTH_PAGE_FACETS = [["project_type:mod"]]

Adapter = Callable[[int], Awaitable[ParseResult]]


def _with_categories(mods: List[ModCreate]) -> ParseResult:
    return ParseResult(mods=mods, categories=mod_mapper.collect_categories(mods))


def _fallback(source: str) -> ParseResult:
    mods = build_fallback_mods(source)
    logger.warning(f"Using {len(mods)} fallback mods for {source}")
    return _with_categories(mods)


# --- CurseForge ---

def map_curseforge_mod(raw: dict) -> ModCreate:
    mod = CurseForgeMod.model_validate(raw)
    slug = mod.slug or str(mod.id)
    return ModCreate(
        name=mod.name,
        description=mod.summary or "A Minecraft mod",
        version=mod_mapper.latest_game_version(i.gameVersion for i in mod.latestFilesIndexes),
        category=mod_mapper.infer_category(c.name for c in mod.categories),
        download_count=int(mod.downloadCount or 0),
        image_url=(mod.logo.url if mod.logo and mod.logo.url else mod_mapper.placeholder_image(mod.name)),
        download_url=f"/download/{slug}",
        source_url=f"https://www.curseforge.com/minecraft/mc-mods/{slug}",
        source="CurseForge",
        is_new=mod_mapper.is_recent(mod.dateCreated),
    )


async def parse_curseforge(
    limit: int = 100,
    client: Optional[CurseForgeClient] = None,
    page_delay: float = PAGE_DELAY_SECONDS,
) -> ParseResult:
    """Walk the popularity listing in pages of at most CurseForgeClient.MAX_PAGE_SIZE."""
    client = client or CurseForgeClient()
    limit = min(max(1, limit), CurseForgeClient.MAX_RESULTS)
    mods: List[ModCreate] = []

    try:
        if not client.configured:
            raise ProviderError("CurseForge", "CURSEFORGE_API_KEY not found in environment variables")

        logger.info("Starting CurseForge parsing using official API")
        index = 0
        while index < limit:
            page_size = min(CurseForgeClient.MAX_PAGE_SIZE, limit - index)
            try:
                raw_mods = await client.search_mods(page_size=page_size, index=index)
            except ProviderError as e:
                if not mods:
                    raise
                logger.warning(f"Stopping CurseForge paging at index {index}: {e}")
                break

            for raw in raw_mods:
                try:
                    mods.append(map_curseforge_mod(raw))
                except Exception as e:
                    logger.warning(f"Skipping CurseForge entry: {e}")

            index += page_size
            if len(raw_mods) < page_size:
                break
            if index < limit:
                await asyncio.sleep(page_delay)

        mods = mods[:limit]
        logger.info(f"Parsed {len(mods)} mods from CurseForge official API")
        return _with_categories(mods)
    except ProviderError as e:
        logger.warning(f"CurseForge unavailable ({e})")
    except Exception:
        logger.exception("Unexpected error while parsing CurseForge")
    return _fallback("CurseForge")


# --- Modrinth ---

def map_modrinth_hit(raw: dict) -> ModCreate:
    hit = ModrinthHit.model_validate(raw)
    title = hit.title or "Unknown Mod"
    slug = hit.slug or "unknown-mod"
    return ModCreate(
        name=title,
        description=hit.description or "A mod from Modrinth",
        version=mod_mapper.latest_game_version(hit.versions),
        category=mod_mapper.infer_category(hit.categories),
        download_count=hit.downloads or 0,
        image_url=hit.icon_url or mod_mapper.placeholder_image(title),
        download_url=f"/download/{slug}",
        source_url=f"https://modrinth.com/mod/{slug}",
        source="Modrinth",
        is_new=mod_mapper.is_recent(hit.date_created),
    )


def _map_hits(hits: List[dict]) -> List[ModCreate]:
    mods = []
    for raw in hits:
        try:
            mods.append(map_modrinth_hit(raw))
        except Exception as e:
            logger.warning(f"Skipping Modrinth entry: {e}")
    return mods


async def parse_modrinth(
    limit: int = 500,
    client: Optional[ModrinthClient] = None,
    page_delay: float = PAGE_DELAY_SECONDS,
) -> ParseResult:
    """Walk the most-downloaded listing page by page, one request at a time."""
    client = client or ModrinthClient()
    limit = max(1, limit)
    page_size = min(MODRINTH_PAGE_SIZE, limit)
    max_pages = min(MODRINTH_MAX_PAGES, math.ceil(limit / page_size))
    mods: List[ModCreate] = []

    try:
        logger.info("Starting Modrinth API parsing")
        for page in range(max_pages):
            offset = page * page_size
            logger.info(f"Fetching Modrinth API page {page + 1} (offset: {offset})")
            try:
                response = await client.search(
                    limit=page_size,
                    offset=offset,
                    index="downloads",
                    facets=MODRINTH_LISTING_FACETS,
                )
            except ProviderError as e:
                if not mods:
                    raise
                logger.warning(f"Stopping Modrinth paging at page {page + 1}: {e}")
                break

            mods.extend(_map_hits(response.hits))

            if len(response.hits) < page_size:
                logger.info(f"No more pages to fetch from Modrinth API (received {len(response.hits)} < {page_size})")
                break

            if page + 1 < max_pages:
                await asyncio.sleep(page_delay)

        mods = mods[:limit]
        logger.info(f"Parsed {len(mods)} mods from Modrinth API")
        return _with_categories(mods)
    except ProviderError as e:
        logger.warning(f"Modrinth unavailable ({e})")
    except Exception:
        logger.exception("Unexpected error while parsing Modrinth")
    return _fallback("Modrinth")


async def parse_modrinth_page(
    page: int = 1,
    limit: int = 20,
    client: Optional[ModrinthClient] = None,
) -> ParseResult:
    """Fetch exactly one page, ordered like the Modrinth website. Empty on failure."""
    client = client or ModrinthClient()
    try:
        logger.info(f"Starting Modrinth API parsing for page {page}")
        response = await client.search(
            limit=limit,
            offset=(page - 1) * limit,
            index="relevance",
            facets=MODRINTH_PAGE_FACETS,
        )
        mods = _map_hits(response.hits)
        logger.info(f"Parsed {len(mods)} mods from Modrinth API page {page}")
        return _with_categories(mods)
    except ProviderError as e:
        logger.warning(f"Error parsing Modrinth API page {page}: {e}")
    except Exception:
        logger.exception(f"Unexpected error while parsing Modrinth page {page}")
    return ParseResult()


# --- All sources ---

DEFAULT_ADAPTERS: Sequence[Adapter] = (parse_curseforge, parse_modrinth)


async def parse_all_sources(limit: int = 100, adapters: Optional[Sequence[Adapter]] = None) -> ParseResult:
    """
    Run every adapter concurrently and pool what comes back.
    A failing adapter contributes nothing and does not affect the others.
    """
    adapters = adapters if adapters is not None else DEFAULT_ADAPTERS
    logger.info("Starting parsing from all sources")

    results = await asyncio.gather(*(adapter(limit) for adapter in adapters), return_exceptions=True)

    mods: List[ModCreate] = []
    categories = []
    for adapter, result in zip(adapters, results):
        if isinstance(result, BaseException):
            logger.error(f"Adapter {getattr(adapter, '__name__', adapter)} failed: {result}")
            continue
        mods.extend(result.mods)
        categories.extend(result.categories)

    categories = mod_mapper.dedupe_categories(categories)
    logger.info(f"Total parsed: {len(mods)} mods, {len(categories)} categories")
    return ParseResult(mods=mods, categories=categories)
