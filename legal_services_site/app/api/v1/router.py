"""
Top‑level router for version 1 of the content API.

This router aggregates the read-only content routers under a unified
prefix.  When new sections are exposed, update this file to include
their routers.
"""

from fastapi import APIRouter

from .endpoints import content, structured_data

router = APIRouter()

router.include_router(content.router, prefix="/content", tags=["content"])
router.include_router(structured_data.router, prefix="/structured-data", tags=["structured-data"])
