"""
Main entrypoint for the landing site.

This module assembles the FastAPI application, sets up logging,
mounts the stylesheet and includes the page and API routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn legal_services_site.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from .api.pages import router as pages_router
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging

STATIC_DIR = Path(__file__).resolve().parent / "static"


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI instance serving the landing page at ``/``,
        its stylesheet under ``/static`` and the content API under
        ``/api/v1``.
    """
    # Logging first so router imports and startup can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    app.include_router(pages_router)
    app.include_router(v1_router, prefix="/api/v1")

    logging.getLogger(__name__).info("%s %s ready", settings.project_name, settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
