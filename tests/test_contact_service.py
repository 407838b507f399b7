# Deep-links for the contact call-to-action.

from __future__ import annotations

from legal_services_site.app.core.config import load_settings
from legal_services_site.app.services.contact_service import contact_links, mailto_link, whatsapp_link


def test_whatsapp_placeholder_is_kept() -> None:
    assert whatsapp_link("https://wa.me/") == "https://wa.me/"


def test_whatsapp_phone_and_text() -> None:
    link = whatsapp_link("https://wa.me", phone="+1 (305) 555-0100", text="Hola, quiero una consulta")
    assert link == "https://wa.me/13055550100?text=Hola%2C%20quiero%20una%20consulta"


def test_mailto_link() -> None:
    assert mailto_link("contacto@venezuelanlegalservices.com") == "mailto:contacto@venezuelanlegalservices.com"
    assert mailto_link("a@b.com", subject="Consulta de asilo") == "mailto:a@b.com?subject=Consulta%20de%20asilo"


def test_contact_links_follow_settings(clean_env) -> None:
    clean_env.setenv("WHATSAPP_PHONE", "+58 412 000 0000")
    clean_env.setenv("CONTACT_EMAIL", "hola@example.org")

    links = contact_links(load_settings())

    assert links.whatsapp_url == "https://wa.me/584120000000"
    assert links.email == "hola@example.org"
    assert links.mailto_url == "mailto:hola@example.org"
