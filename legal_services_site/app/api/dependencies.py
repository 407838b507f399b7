"""
Shared FastAPI dependencies.

Routes receive settings and the page renderer through ``Depends`` so
tests can swap them with ``app.dependency_overrides``.
"""

from functools import lru_cache

from legal_services_site.app.core.config import Settings, settings
from legal_services_site.app.services.render_service import PageRenderer


def get_settings() -> Settings:
    return settings


@lru_cache(maxsize=1)
def get_renderer() -> PageRenderer:
    """One renderer (and one Jinja2 environment) per process."""
    return PageRenderer(settings)
