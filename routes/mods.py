import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.controllers.mod_controller import ModController
from app.storage.base import CatalogStore
from database.schemas import Mod, ModDownload, PaginatedMods
from routes.dependencies import get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/mods", tags=["Mods"])
mod_controller = ModController()

@router.get("/popular", response_model=List[Mod])
def popular_mods(limit: Optional[str] = None, store: CatalogStore = Depends(get_store)):
    try:
        return mod_controller.popular(store, limit)
    except Exception:
        logger.exception("Failed to retrieve popular mods")
        raise HTTPException(status_code=500, detail="Failed to retrieve popular mods")

@router.get("/latest", response_model=List[Mod])
def latest_mods(limit: Optional[str] = None, store: CatalogStore = Depends(get_store)):
    try:
        return mod_controller.latest(store, limit)
    except Exception:
        logger.exception("Failed to retrieve latest mods")
        raise HTTPException(status_code=500, detail="Failed to retrieve latest mods")

@router.get("", response_model=PaginatedMods)
def search_mods(
    search: Optional[str] = None,
    version: Optional[str] = None,
    category: Optional[str] = None,
    source: Optional[str] = None,
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    page: Optional[str] = None,
    page_size: Optional[str] = Query(None, alias="pageSize"),
    store: CatalogStore = Depends(get_store),
):
    try:
        return mod_controller.search(
            store,
            search=search,
            version=version,
            category=category,
            source=source,
            sort_by=sort_by,
            page=page,
            page_size=page_size,
        )
    except Exception:
        logger.exception("Failed to search mods")
        raise HTTPException(status_code=500, detail="Failed to search mods")

@router.get("/{mod_id}", response_model=Mod)
def get_mod(mod_id: int, store: CatalogStore = Depends(get_store)):
    try:
        mod = mod_controller.get(store, mod_id)
    except Exception:
        logger.exception(f"Failed to retrieve mod {mod_id}")
        raise HTTPException(status_code=500, detail="Failed to retrieve mod")
    if mod is None:
        raise HTTPException(status_code=404, detail="Mod not found")
    return mod

@router.post("/{mod_id}/download", response_model=ModDownload)
def download_mod(mod_id: int, store: CatalogStore = Depends(get_store)):
    """Count a download and hand back the provider page to redirect to."""
    try:
        mod = mod_controller.download(store, mod_id)
    except Exception:
        logger.exception(f"Failed to increment download count for mod {mod_id}")
        raise HTTPException(status_code=500, detail="Failed to increment download count")
    if mod is None:
        raise HTTPException(status_code=404, detail="Mod not found")
    return mod
