"""
Wedding RSVP System - FastAPI Backend
Main application entry point
"""

import os
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
import uvicorn

from wedding_rsvp import __version__
from wedding_rsvp.core.config import Settings, settings as default_settings
from wedding_rsvp.api import routes_public, routes_rsvp
from wedding_rsvp.services.email_service import EmailService
from wedding_rsvp.services.rsvp_store import RSVPStore
from wedding_rsvp.utils.responses import request_validation_handler

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[RSVPStore] = None,
    email_service: Optional[EmailService] = None,
) -> FastAPI:
    """Build the application around an RSVP store and an email service"""
    settings = settings or default_settings
    store = store or RSVPStore(settings.DATABASE_URL)
    email_service = email_service or EmailService.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan management"""
        store.initialize()
        logger.info(f"Connected to database at {store.database_url}")
        email_service.verify_configuration()

        base_url = f"http://localhost:{settings.PORT}"
        logger.info(f"Wedding RSVP server running on {base_url}")
        logger.info(f"Registry page: {base_url}/registry.html")
        logger.info(f"RSVP page: {base_url}/rsvp.html")
        logger.info(f"Admin page: {base_url}/admin.html")
        yield
        store.close()
        logger.info("Application shutdown")

    app = FastAPI(
        title="Wedding RSVP System",
        description="RSVP collection backend with email confirmations",
        version=__version__,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.store = store
    app.state.email_service = email_service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOW_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(routes_public.router, tags=["public"])
    app.include_router(routes_rsvp.router, prefix="/api", tags=["rsvp"])

    # HTML pages (rsvp.html, registry.html, admin.html); mounted last so the API wins
    if os.path.isdir(settings.STATIC_DIR):
        app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")
    else:
        logger.warning(f"Static directory {settings.STATIC_DIR} not found; HTML pages are not served")

    return app


logging.basicConfig(level=default_settings.LOG_LEVEL)

app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
    )
