"""Serve the landing site with uvicorn.

Host and port are read from the ``SITE_HOST`` and ``SITE_PORT``
environment variables (defaults ``0.0.0.0`` and ``8000``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from legal_services_site.app.core.config import Settings, settings
from legal_services_site.app.core.logging_config import resolve_log_level
from legal_services_site.app.main import app


def build_config(site_settings: Settings) -> Config:
    """uvicorn configuration for ``site_settings``."""
    return Config(
        app=app,
        host=site_settings.site_host,
        port=site_settings.site_port,
        reload=False,
        log_level=resolve_log_level(site_settings.log_level).lower(),
    )


async def main() -> None:
    """Run the site until interrupted."""
    server = Server(build_config(settings))
    logging.getLogger(__name__).info("Serving on %s:%s", settings.site_host, settings.site_port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
