from fastapi import Request

from app.storage.base import CatalogStore

def get_store(request: Request) -> CatalogStore:
    """The catalog store chosen at startup (see main.create_app)."""
    return request.app.state.store
