import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from app.controllers.parse_controller import ParseController
from app.storage.base import CatalogStore
from database.schemas import CurseForgeParseResponse, PageParseResponse, ParseResponse
from routes.dependencies import get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/parse", tags=["Parsers"])
parse_controller = ParseController()

@router.get("/curseforge", response_model=CurseForgeParseResponse)
async def parse_curseforge(limit: Optional[str] = None, store: CatalogStore = Depends(get_store)):
    try:
        return await parse_controller.curseforge(store, limit)
    except Exception:
        logger.exception("Failed to parse CurseForge")
        raise HTTPException(status_code=500, detail="Failed to parse CurseForge")

@router.get("/modrinth", response_model=ParseResponse)
async def parse_modrinth(limit: Optional[str] = None, store: CatalogStore = Depends(get_store)):
    try:
        return await parse_controller.modrinth(store, limit)
    except Exception:
        logger.exception("Failed to parse Modrinth")
        raise HTTPException(status_code=500, detail="Failed to parse Modrinth")

@router.get("/modrinth/page/{page}", response_model=PageParseResponse)
async def parse_modrinth_page(page: str, limit: Optional[str] = None, store: CatalogStore = Depends(get_store)):
    try:
        return await parse_controller.modrinth_page(store, page, limit)
    except Exception:
        logger.exception(f"Failed to parse Modrinth page {page}")
        raise HTTPException(status_code=500, detail=f"Failed to parse Modrinth page {page}")

@router.get("/all", response_model=ParseResponse)
async def parse_all(limit: Optional[str] = None, store: CatalogStore = Depends(get_store)):
    try:
        return await parse_controller.all_sources(store, limit)
    except Exception:
        logger.exception("Failed to parse from all sources")
        raise HTTPException(status_code=500, detail="Failed to parse from all sources")
