import asyncio
import logging
import os
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from app.services.ingestion_service import auto_ingest
from app.storage import create_store
from app.storage.base import CatalogStore
from database.seeder import run_all_seeders

# Router Imports
from routes import auth, catalog, mods, parse

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("main")


def _env_flag(name: str, default: str = "true") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _validation_errors(exc: RequestValidationError) -> dict:
    """Group pydantic errors by field name: {"username": ["String should have at least 3 characters"]}"""
    errors = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(loc) or "body"
        errors.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return errors


def create_app(store: Optional[CatalogStore] = None, auto_parse: Optional[bool] = None, seed: bool = True) -> FastAPI:
    """
    Build the API. Without a store one is created on startup from STORAGE_BACKEND.
    auto_parse defaults to the AUTO_PARSE env flag.
    """
    if auto_parse is None:
        auto_parse = _env_flag("AUTO_PARSE")

    app = FastAPI(title="ModVoyage")
    app.state.store = store
    app.state.ingest_task = None

    origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API Routers
    app.include_router(catalog.router)
    app.include_router(mods.router)
    app.include_router(parse.router)
    app.include_router(auth.router)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content=jsonable_encoder({"message": "Invalid request data", "errors": _validation_errors(exc)}),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.detail}, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"message": "Internal server error"})

    @app.on_event("startup")
    async def startup_event():
        if app.state.store is None:
            app.state.store = create_store()

        if seed:
            try:
                run_all_seeders(app.state.store)
            except Exception:
                logger.exception("Error seeding catalog")

        if auto_parse:
            limit = int(os.getenv("AUTO_PARSE_LIMIT", "20"))
            # Serve requests while the providers are queried
            app.state.ingest_task = asyncio.create_task(auto_ingest(app.state.store, limit))

    @app.on_event("shutdown")
    async def shutdown_event():
        task = app.state.ingest_task
        if task is not None and not task.done():
            task.cancel()

    return app


app = create_app()

if __name__ == "__main__":
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))

    uvicorn.run(
        app,
        host=host,
        port=port,
        reload=False,
        log_level="info"
    )
