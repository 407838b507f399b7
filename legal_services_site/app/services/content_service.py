"""
Static content of the landing page.

All copy is Spanish and hard-coded: there is no CMS and no translation
layer.  The tuples below are the only source of truth for the page;
the FAQ tuple in particular feeds both the visible disclosure list and
the JSON-LD listing, so editing a question here updates both.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from legal_services_site.app.core.config import Settings
from legal_services_site.app.schemas.content import (
    FaqItem,
    FooterColumn,
    LandingContent,
    NavLink,
    PageMetadata,
    ReasonItem,
    ServiceItem,
    StepItem,
)
from legal_services_site.app.services.contact_service import contact_links

logger = logging.getLogger(__name__)

SLOGAN = "Tu proceso legal, más claro que nunca"

DESCRIPTION = (
    "Te guiamos paso a paso en asilo, TPS, permisos de trabajo y más. "
    "Documentos organizados, soporte humano, y un panel seguro para ti."
)

SERVICES: tuple[ServiceItem, ...] = (
    ServiceItem(
        title="Solicitud de Asilo Político",
        description="Organizamos evidencias y formularios para presentar tu caso con claridad.",
    ),
    ServiceItem(
        title="Permiso de Trabajo (EAD)",
        description="Validamos tu elegibilidad y preparamos tu solicitud para evitar retrasos.",
    ),
    ServiceItem(
        title="Visas Estudiantiles",
        description="Asesoría sobre requisitos, formularios y tiempos de respuesta.",
    ),
    ServiceItem(
        title="Visas Humanitarias",
        description="Orientación en opciones humanitarias según tu situación.",
    ),
)

REASONS: tuple[ReasonItem, ...] = (
    ReasonItem(
        title="Fácil desde el celular",
        body="Carga documentos, revisa avances y firma de forma segura desde tu móvil.",
    ),
    ReasonItem(
        title="Soporte por WhatsApp",
        body="Acompañamiento cercano e ilimitado. Respuestas claras cuando las necesites.",
    ),
    ReasonItem(
        title="Seguridad real",
        body="Datos cifrados y accesos autenticados para proteger tu información.",
    ),
    ReasonItem(
        title="Acceso 24/7",
        body="Consulta tus documentos y estado en cualquier momento.",
    ),
)

STEPS: tuple[StepItem, ...] = (
    StepItem(number=1, body="Agenda una consulta y cuéntanos tu caso. Te explicaremos opciones y requisitos."),
    StepItem(number=2, body="Preparamos tu documentación y te damos acceso a tu carpeta segura 24/7."),
    StepItem(number=3, body="Revisión final y envío del trámite. Seguimiento por WhatsApp."),
    StepItem(number=4, body="Acompañamiento continuo: notificaciones de plazos y próximos pasos."),
)

FAQS: tuple[FaqItem, ...] = (
    FaqItem(
        question="¿Qué documento necesito para aplicar al asilo?",
        answer=(
            "Los requisitos pueden variar. Generalmente, necesitarás tu identificación, pruebas o relatos "
            "creíbles de persecución, dirección actual y cualquier documento que respalde tu caso. "
            "Te guiamos paso a paso para organizar todo."
        ),
    ),
    FaqItem(
        question="¿Puedo trabajar mientras espero mi caso?",
        answer=(
            "Puedes solicitar el permiso de trabajo (EAD) si cumples con los tiempos y requisitos "
            "establecidos. Te ayudamos a preparar y enviar tu solicitud correctamente."
        ),
    ),
    FaqItem(
        question="¿Es seguro cargar mis documentos?",
        answer=(
            "Sí. Usamos almacenamiento cifrado y accesos autenticados. "
            "Solo tú y el equipo autorizado pueden ver tus archivos."
        ),
    ),
)

ABOUT = (
    "Somos un equipo bilingüe dedicado a que entiendas cada paso de tu proceso migratorio. "
    "Nuestro enfoque es práctico: explicar, organizar y acompañar. Te damos un panel seguro "
    "para tus archivos y te mantenemos al tanto por WhatsApp."
)

DISCLAIMER = "*No ofrecemos asesoría legal; brindamos orientación y apoyo documental.*"


class ContentService:
    """Read-only access to the landing page copy."""

    @classmethod
    def list_services(cls) -> List[ServiceItem]:
        return list(SERVICES)

    @classmethod
    def list_reasons(cls) -> List[ReasonItem]:
        return list(REASONS)

    @classmethod
    def list_steps(cls) -> List[StepItem]:
        return list(STEPS)

    @classmethod
    def list_faqs(cls) -> List[FaqItem]:
        return list(FAQS)

    @classmethod
    def sections(cls) -> Dict[str, Sequence]:
        """Map of the list sections exposed by name."""
        return {
            "services": SERVICES,
            "reasons": REASONS,
            "steps": STEPS,
            "faqs": FAQS,
        }

    @classmethod
    def get_section(cls, name: str) -> list:
        """Return the records of section ``name``.

        Raises ``KeyError`` if the section does not exist.
        """
        sections = cls.sections()
        if name not in sections:
            logger.debug("Unknown content section requested: %s", name)
            raise KeyError(name)
        return list(sections[name])

    @classmethod
    def footer_columns(cls, settings: Settings) -> List[FooterColumn]:
        """Footer navigation: every link points back into the page or at a contact deep-link."""
        links = contact_links(settings)
        return [
            FooterColumn(
                title="Servicios",
                links=[NavLink(label=s.title, href="#servicios") for s in SERVICES],
            ),
            FooterColumn(
                title="Recursos",
                links=[
                    NavLink(label="Preguntas frecuentes", href="#faq"),
                    NavLink(label="Cómo funciona", href="#pasos"),
                ],
            ),
            FooterColumn(
                title="Contacto",
                links=[
                    NavLink(label="Email", href=links.mailto_url),
                    NavLink(label="WhatsApp", href=links.whatsapp_url, external=True),
                ],
            ),
        ]

    @classmethod
    def get_metadata(cls, settings: Settings) -> PageMetadata:
        return PageMetadata(
            title=f"{settings.project_name} | {SLOGAN}",
            description=DESCRIPTION,
            canonical_url=settings.site_url,
            site_name=settings.project_name,
        )

    @classmethod
    def get_landing_content(cls, settings: Settings) -> LandingContent:
        """Assemble the full page content for ``settings``."""
        return LandingContent(
            metadata=cls.get_metadata(settings),
            hero_title="¿Listo para empezar tu camino legal?",
            hero_body=DESCRIPTION,
            reasons=cls.list_reasons(),
            services=cls.list_services(),
            steps_title=SLOGAN,
            steps=cls.list_steps(),
            faqs=cls.list_faqs(),
            about=ABOUT,
            contact=contact_links(settings),
            footer_tagline="El camino para ordenar tu futuro.",
            footer_columns=cls.footer_columns(settings),
            disclaimer=DISCLAIMER,
        )
