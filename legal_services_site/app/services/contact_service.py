"""
Deep-link builders for the contact call-to-action.

The page exposes exactly two integration points: a WhatsApp
click-to-chat link and a ``mailto:`` link.  Both are built here so the
contact block and the footer always point at the same targets.
"""

from typing import Optional
from urllib.parse import quote

from legal_services_site.app.core.config import Settings
from legal_services_site.app.schemas.content import ContactLinks


def whatsapp_link(base_url: str, phone: Optional[str] = None, text: Optional[str] = None) -> str:
    """Return a WhatsApp click-to-chat URL.

    ``phone`` is reduced to its digits (wa.me rejects ``+``, spaces and
    dashes).  ``text`` becomes the URL-encoded prefilled message.
    """
    url = base_url if base_url.endswith("/") else base_url + "/"
    if phone:
        url += "".join(ch for ch in phone if ch.isdigit())
    if text:
        url += "?text=" + quote(text, safe="")
    return url


def mailto_link(address: str, subject: Optional[str] = None) -> str:
    """Return a ``mailto:`` URI for ``address`` with an optional subject."""
    uri = f"mailto:{address}"
    if subject:
        uri += "?subject=" + quote(subject, safe="")
    return uri


def contact_links(settings: Settings) -> ContactLinks:
    return ContactLinks(
        whatsapp_url=whatsapp_link(settings.whatsapp_url, settings.whatsapp_phone),
        email=settings.contact_email,
        mailto_url=mailto_link(settings.contact_email),
    )
