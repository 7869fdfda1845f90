import os
from typing import List, Optional
from datetime import datetime

import httpx
from pydantic import BaseModel, ValidationError

from app.exceptions import ProviderError

# ==========================================
# 1. RESPONSE MODELS (CURSEFORGE v1)
# ==========================================

class CurseForgeLogo(BaseModel):
    url: Optional[str] = None

class CurseForgeCategory(BaseModel):
    name: str

class CurseForgeFileIndex(BaseModel):
    gameVersion: Optional[str] = None

class CurseForgeMod(BaseModel):
    id: int
    name: str
    slug: Optional[str] = None
    summary: Optional[str] = None
    downloadCount: float = 0
    logo: Optional[CurseForgeLogo] = None
    categories: List[CurseForgeCategory] = []
    dateCreated: Optional[datetime] = None
    latestFilesIndexes: List[CurseForgeFileIndex] = []

class CurseForgeSearchResponse(BaseModel):
    # Hits stay raw so one bad entry does not sink the page
    data: List[dict]

# ==========================================
# 2. API CLIENT
# ==========================================

class CurseForgeClient:
    MINECRAFT_GAME_ID = 432
    MODS_CLASS_ID = 6
    SORT_POPULARITY = 2

    # Hard limits of /mods/search: pageSize <= 50 and index + pageSize <= 10000
    MAX_PAGE_SIZE = 50
    MAX_RESULTS = 10000

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = "https://api.curseforge.com/v1",
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key if api_key is not None else os.getenv("CURSEFORGE_API_KEY")
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout if timeout is not None else float(os.getenv("PROVIDER_TIMEOUT", "10"))
        self.transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def search_mods(self, page_size: int, index: int = 0) -> List[dict]:
        """GET /mods/search, most popular Minecraft mods first."""
        if not self.configured:
            raise ProviderError("CurseForge", "CURSEFORGE_API_KEY is not set")

        params = {
            "gameId": self.MINECRAFT_GAME_ID,
            "classId": self.MODS_CLASS_ID,
            "pageSize": min(page_size, self.MAX_PAGE_SIZE),
            "index": index,
            "sortField": self.SORT_POPULARITY,
            "sortOrder": "desc",
        }
        headers = {
            "Accept": "application/json",
            "x-api-key": self.api_key,
            "User-Agent": "ModVoyage/1.0",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.get(f"{self.base_url}/mods/search", params=params, headers=headers)
                resp.raise_for_status()
                payload = CurseForgeSearchResponse.model_validate(resp.json())
        except httpx.HTTPError as e:
            raise ProviderError("CurseForge", f"request failed: {e}") from e
        except (ValueError, ValidationError) as e:
            raise ProviderError("CurseForge", f"invalid response format: {e}") from e

        return payload.data
