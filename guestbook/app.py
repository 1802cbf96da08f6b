"""Application factory for the guestbook API."""
from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates

from guestbook.core.config import get_settings
from guestbook.core.logging_config import setup_logging
from guestbook.db.create_tables import create_all
from guestbook.db.session import dispose_engine, get_session
from guestbook.repositories.signature_store import SignatureStore, StorageError
from guestbook.routers import pages as pages_router
from guestbook.routers import signatures as signatures_router

logger = logging.getLogger(__name__)

BASE = os.path.dirname(__file__)
TEMPLATES = os.path.join(BASE, "templates")

STORAGE_ERROR_BODY = "storage error"


async def _storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(STORAGE_ERROR_BODY, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    create_all()
    logger.info("Signature storage ready")
    try:
        yield
    finally:
        dispose_engine()
        logger.info("Database connections released")


def create_app() -> FastAPI:
    """Build the FastAPI app; fails fast when DATABASE_URL is missing."""
    settings = get_settings()
    settings.require_database_url()
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title="Guestbook API", lifespan=_lifespan)
    app.state.signature_store = SignatureStore(get_session)
    app.state.templates = Jinja2Templates(directory=TEMPLATES)
    app.add_exception_handler(StorageError, _storage_error_handler)

    app.include_router(pages_router.router)
    app.include_router(signatures_router.router)
    return app
