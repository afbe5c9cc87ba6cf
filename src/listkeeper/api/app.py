"""FastAPI application factory for the todo backend."""

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from listkeeper.api import entries, lists
from listkeeper.config import Settings, get_settings
from listkeeper.database import Database
from listkeeper.exceptions import ListkeeperError

logger = logging.getLogger(__name__)


def create_app(database: Database, settings: Optional[Settings] = None) -> FastAPI:
    """Build the app around an already opened database.

    The database is kept on ``app.state`` and reaches the handlers through
    :func:`listkeeper.api.dependencies.get_database`.
    """
    settings = settings or get_settings()
    prefix = settings.api_prefix

    app = FastAPI(
        title="listkeeper",
        description="Todo lists and entries stored in JSON files",
        version="0.1.0",
    )
    app.state.database = database
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def trim_trailing_slash(request: Request, call_next):
        path = request.scope["path"]
        if len(path) > 1 and path.endswith("/"):
            request.scope["path"] = path.rstrip("/") or "/"
        return await call_next(request)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    @app.exception_handler(ListkeeperError)
    async def store_error(request: Request, exc: ListkeeperError):
        logger.error("Store error on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    @app.get(prefix or "/", response_class=PlainTextResponse)
    def get_api_index():
        return "welcome to my api"

    app.include_router(lists.router, prefix=f"{prefix}/lists")
    app.include_router(entries.router, prefix=f"{prefix}/entries")
    return app
