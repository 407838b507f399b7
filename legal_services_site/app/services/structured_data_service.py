"""
Structured data (JSON-LD) for search engines.

The page embeds one ``<script type="application/ld+json">`` element
describing the organisation as a schema.org ``LegalService`` with a
nested ``FAQPage``.  The FAQ listing is derived from the same records
as the visible FAQ, and ``check_faq_parity`` verifies that both stay
identical.

The serializer is deterministic (fixed key order, fixed separators) and
escapes every character that could terminate the surrounding
``<script>`` element, so the payload can be embedded verbatim.
"""

from __future__ import annotations

import json
from typing import Iterable, List, Tuple

from markupsafe import Markup

from legal_services_site.app.core.config import Settings
from legal_services_site.app.schemas.content import FaqItem
from legal_services_site.app.schemas.structured_data import (
    Answer,
    Country,
    FAQPage,
    LegalService,
    Question,
)
from legal_services_site.app.services.content_service import SLOGAN

AREA_SERVED = "United States"
AVAILABLE_LANGUAGES = ("es", "en")
SAME_AS = (
    "https://www.facebook.com/",
    "https://www.instagram.com/",
    "https://www.linkedin.com/",
)

JSON_LD_MEDIA_TYPE = "application/ld+json"

# Characters that must never appear raw inside a <script> element.
_SCRIPT_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}
_SCRIPT_ESCAPE_TABLE = str.maketrans(_SCRIPT_ESCAPES)


def build_faq_page(faqs: Iterable[FaqItem]) -> FAQPage:
    return FAQPage(
        main_entity=[
            Question(name=faq.question, accepted_answer=Answer(text=faq.answer))
            for faq in faqs
        ]
    )


def build_structured_data(settings: Settings, faqs: Iterable[FaqItem]) -> LegalService:
    """Build the ``LegalService`` document for the site."""
    return LegalService(
        name=settings.project_name,
        url=settings.site_url,
        slogan=SLOGAN,
        area_served=Country(name=AREA_SERVED),
        available_language=list(AVAILABLE_LANGUAGES),
        same_as=list(SAME_AS),
        main_entity=build_faq_page(faqs),
    )


def serialize_json_ld(document: LegalService) -> str:
    """Serialize ``document`` to a compact JSON string safe to embed in HTML.

    Non-ASCII text is kept as UTF-8.  ``<``, ``>``, ``&`` and the
    U+2028/U+2029 line separators are written as ``\\uXXXX`` escapes,
    which JSON parsers decode back to the original characters.
    """
    payload = json.dumps(
        document.model_dump(by_alias=True),
        ensure_ascii=False,
        separators=(",", ":"),
    )
    return payload.translate(_SCRIPT_ESCAPE_TABLE)


def json_ld_script(document: LegalService) -> Markup:
    """Return the ``<script>`` element embedding ``document``."""
    return Markup(f'<script type="{JSON_LD_MEDIA_TYPE}">{serialize_json_ld(document)}</script>')


def check_faq_parity(document: LegalService, faqs: Iterable[FaqItem]) -> Tuple[bool, List[str]]:
    """Compare the JSON-LD FAQ listing against the visible FAQ records.

    Returns ``(ok, errors)`` where ``errors`` describes every count,
    question or answer mismatch.
    """
    visible = list(faqs)
    listed = document.main_entity.main_entity
    errors: List[str] = []

    if len(listed) != len(visible):
        errors.append(
            f"FAQ count differs: structured data has {len(listed)}, page has {len(visible)}"
        )

    for index, (question, faq) in enumerate(zip(listed, visible), start=1):
        if question.name != faq.question:
            errors.append(f"Question {index} differs from the visible FAQ")
        if question.accepted_answer.text != faq.answer:
            errors.append(f"Answer {index} differs from the visible FAQ")

    return not errors, errors
