"""
Content endpoints for API v1.

These routes expose the copy of the landing page as JSON: the whole
page at once, or a single list section (``services``, ``reasons``,
``steps`` or ``faqs``).  Everything is public and read-only.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from legal_services_site.app.api.dependencies import get_settings
from legal_services_site.app.core.config import Settings
from legal_services_site.app.schemas.content import LandingContent
from legal_services_site.app.services.content_service import ContentService

router = APIRouter()


@router.get("/", response_model=LandingContent)
async def get_content(settings: Settings = Depends(get_settings)) -> LandingContent:
    """Return the full landing page content."""
    return ContentService.get_landing_content(settings)


@router.get("/{section}", response_model=List[Dict[str, Any]])
async def get_section(section: str) -> List[Dict[str, Any]]:
    """Return the records of one section, in display order.

    Returns HTTP 404 if the section does not exist.
    """
    try:
        items = ContentService.get_section(section)
    except KeyError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Section not found")
    return [item.model_dump() for item in items]
