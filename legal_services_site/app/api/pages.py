"""
HTML page routes.

Only one page exists: the landing page at ``/``.  Every other
navigation target is an in-page anchor.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from legal_services_site.app.api.dependencies import get_renderer
from legal_services_site.app.services.render_service import PageRenderer

router = APIRouter()


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def landing_page(renderer: PageRenderer = Depends(get_renderer)) -> HTMLResponse:
    """Render the landing page."""
    return HTMLResponse(content=renderer.render())
