"""
Structured data endpoint for API v1.

Returns the JSON-LD document embedded in the landing page, byte for
byte, with the ``application/ld+json`` media type.  Useful for checking
the payload with search engine validators without parsing the HTML.
"""

from fastapi import APIRouter, Depends, Response

from legal_services_site.app.api.dependencies import get_settings
from legal_services_site.app.core.config import Settings
from legal_services_site.app.services.content_service import ContentService
from legal_services_site.app.services.structured_data_service import (
    JSON_LD_MEDIA_TYPE,
    build_structured_data,
    serialize_json_ld,
)

router = APIRouter()


@router.get("/", response_class=Response)
async def get_structured_data(settings: Settings = Depends(get_settings)) -> Response:
    document = build_structured_data(settings, ContentService.list_faqs())
    return Response(content=serialize_json_ld(document), media_type=JSON_LD_MEDIA_TYPE)
