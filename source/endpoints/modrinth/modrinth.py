import os
import json
from typing import List, Optional
from datetime import datetime

import httpx
from pydantic import BaseModel, ValidationError

from app.exceptions import ProviderError

# ==========================================
# 1. RESPONSE MODELS (MODRINTH v2)
# ==========================================

class ModrinthHit(BaseModel):
    slug: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    categories: List[str] = []
    downloads: int = 0
    icon_url: Optional[str] = None
    date_created: Optional[datetime] = None
    versions: List[str] = []

class ModrinthSearchResponse(BaseModel):
    hits: List[dict]
    offset: int = 0
    limit: int = 0
    total_hits: int = 0

# ==========================================
# 2. API CLIENT
# ==========================================

class ModrinthClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = "https://api.modrinth.com/v2",
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key if api_key is not None else os.getenv("MODRINTH_API_KEY")
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout if timeout is not None else float(os.getenv("PROVIDER_TIMEOUT", "10"))
        self.transport = transport
        # Modrinth requires a descriptive UA
        self.headers = {'User-Agent': 'ModVoyage/1.0'}
        if self.api_key:
            self.headers['Authorization'] = self.api_key

    async def search(
        self,
        limit: int,
        offset: int = 0,
        index: str = "relevance",
        facets: Optional[List[List[str]]] = None,
        query: str = "",
    ) -> ModrinthSearchResponse:
        """GET /search"""
        params = {
            "query": query,
            "limit": limit,
            "offset": offset,
            "index": index,
            "facets": json.dumps(facets or [["project_type:mod"]]),
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.get(f"{self.base_url}/search", params=params, headers=self.headers)
                resp.raise_for_status()
                return ModrinthSearchResponse.model_validate(resp.json())
        except httpx.HTTPError as e:
            raise ProviderError("Modrinth", f"request failed: {e}") from e
        except (ValueError, ValidationError) as e:
            raise ProviderError("Modrinth", f"invalid response format: {e}") from e
