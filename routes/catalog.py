import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app.controllers.mod_controller import ModController
from app.storage.base import CatalogStore
from database.schemas import Category, MinecraftVersion
from routes.dependencies import get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Catalog"])
mod_controller = ModController()

@router.get("/versions", response_model=List[MinecraftVersion])
def list_versions(store: CatalogStore = Depends(get_store)):
    try:
        return mod_controller.versions(store)
    except Exception:
        logger.exception("Failed to retrieve Minecraft versions")
        raise HTTPException(status_code=500, detail="Failed to retrieve Minecraft versions")

@router.get("/categories", response_model=List[Category])
def list_categories(store: CatalogStore = Depends(get_store)):
    try:
        return mod_controller.categories(store)
    except Exception:
        logger.exception("Failed to retrieve categories")
        raise HTTPException(status_code=500, detail="Failed to retrieve categories")
