# JSON-LD document: shape, deterministic serialization, script-safe escaping and FAQ parity.

from __future__ import annotations

import json

from legal_services_site.app.schemas.content import FaqItem
from legal_services_site.app.services.content_service import ContentService
from legal_services_site.app.services.structured_data_service import (
    build_structured_data,
    check_faq_parity,
    json_ld_script,
    serialize_json_ld,
)


def _document(settings, faqs=None):
    return build_structured_data(settings, faqs if faqs is not None else ContentService.list_faqs())


def test_document_round_trips(settings) -> None:
    data = json.loads(serialize_json_ld(_document(settings)))

    assert data["@context"] == "https://schema.org"
    assert data["@type"] == "LegalService"
    assert data["name"] == "Venezuelan Legal Services"
    assert data["url"] == "https://www.venezuelanlegalservices.com/"
    assert data["slogan"] == "Tu proceso legal, más claro que nunca"
    assert data["areaServed"] == {"@type": "Country", "name": "United States"}
    assert data["availableLanguage"] == ["es", "en"]
    assert len(data["sameAs"]) == 3
    assert data["mainEntity"]["@type"] == "FAQPage"

    questions = data["mainEntity"]["mainEntity"]
    assert len(questions) == 3
    assert questions[0]["@type"] == "Question"
    assert questions[0]["acceptedAnswer"]["@type"] == "Answer"


def test_listing_matches_faq_records(settings) -> None:
    questions = json.loads(serialize_json_ld(_document(settings)))["mainEntity"]["mainEntity"]
    pairs = [(q["name"], q["acceptedAnswer"]["text"]) for q in questions]

    assert pairs == [(faq.question, faq.answer) for faq in ContentService.list_faqs()]


def test_serialization_is_deterministic(settings) -> None:
    first = serialize_json_ld(_document(settings))
    second = serialize_json_ld(_document(settings))

    assert first == second
    assert first.startswith('{"@context":"https://schema.org","@type":"LegalService","name":')
    assert "¿Qué documento" in first


def test_serialization_cannot_break_out_of_script(settings) -> None:
    hostile = FaqItem(
        question="</script><script>alert(1)</script>",
        answer="Tom & Jerry <!-- \u2028 \u2029",
    )
    payload = serialize_json_ld(_document(settings, [hostile]))

    for raw in ("<", ">", "&", "\u2028", "\u2029"):
        assert raw not in payload
    question = json.loads(payload)["mainEntity"]["mainEntity"][0]
    assert question["name"] == hostile.question
    assert question["acceptedAnswer"]["text"] == hostile.answer


def test_script_element(settings) -> None:
    document = _document(settings)
    script = str(json_ld_script(document))

    assert script == f'<script type="application/ld+json">{serialize_json_ld(document)}</script>'


def test_parity_holds_for_shared_records(settings) -> None:
    faqs = ContentService.list_faqs()
    ok, errors = check_faq_parity(_document(settings, faqs), faqs)

    assert ok is True
    assert errors == []


def test_parity_reports_mismatches(settings) -> None:
    faqs = ContentService.list_faqs()
    edited = [faqs[0], FaqItem(question=faqs[1].question, answer="Otra respuesta.")]

    ok, errors = check_faq_parity(_document(settings, faqs), edited)

    assert ok is False
    assert errors == [
        "FAQ count differs: structured data has 3, page has 2",
        "Answer 2 differs from the visible FAQ",
    ]
