import asyncio
import logging

from app.controllers.mod_controller import coerce_int
from app.services import parser_service
from app.services.ingestion_service import IngestionReport, ingest
from app.storage.base import CatalogStore
from database.schemas import (
    CategoryParseSummary,
    CurseForgeParseResponse,
    PageParseResponse,
    ParseResponse,
    ParseResult,
)

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
DEFAULT_PAGE_LIMIT = 20


class ParseController:
    """Runs a provider adapter and writes what it found into the catalog."""

    async def _ingest(self, store: CatalogStore, result: ParseResult) -> IngestionReport:
        # Store calls are blocking; keep them off the event loop
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, ingest, store, result)

    def _summary(self, report: IngestionReport) -> ParseResponse:
        return ParseResponse(
            parsed=report.parsed_mods,
            saved=len(report.saved_mods),
            mods=report.saved_mods,
            categories=CategoryParseSummary(
                parsed=report.parsed_categories,
                saved=len(report.saved_categories),
                items=report.saved_categories,
            ),
        )

    async def curseforge(self, store: CatalogStore, limit=None) -> CurseForgeParseResponse:
        result = await parser_service.parse_curseforge(coerce_int(limit, DEFAULT_LIMIT))
        # This endpoint has only ever stored mods
        report = await self._ingest(store, ParseResult(mods=result.mods))
        return CurseForgeParseResponse(
            parsed=report.parsed_mods,
            saved=len(report.saved_mods),
            mods=report.saved_mods,
        )

    async def modrinth(self, store: CatalogStore, limit=None) -> ParseResponse:
        result = await parser_service.parse_modrinth(coerce_int(limit, DEFAULT_LIMIT))
        return self._summary(await self._ingest(store, result))

    async def modrinth_page(self, store: CatalogStore, page=None, limit=None) -> PageParseResponse:
        page = coerce_int(page, 1)
        limit = coerce_int(limit, DEFAULT_PAGE_LIMIT)
        logger.info(f"Parsing Modrinth page {page} with limit {limit}")
        result = await parser_service.parse_modrinth_page(page, limit)
        summary = self._summary(await self._ingest(store, result))
        return PageParseResponse(page=page, **summary.model_dump())

    async def all_sources(self, store: CatalogStore, limit=None) -> ParseResponse:
        result = await parser_service.parse_all_sources(coerce_int(limit, DEFAULT_LIMIT))
        return self._summary(await self._ingest(store, result))
