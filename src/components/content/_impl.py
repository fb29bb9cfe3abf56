"""
Content catalog - lookups over the configured services and FAQs, and the
conversion of content records into structured-data subjects.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from src.components.structured_data import (
    BreadcrumbItem,
    BreadcrumbTrail,
    FaqEntry,
    FaqList,
    Offer,
    PersonSubject,
    ServiceSubject,
)
from src.domain.entities import (
    BusinessProfile,
    FaqItem,
    GalleryItem,
    GallerySection,
    Service,
    TeamMember,
)

TREATMENTS_PREFIX = "/treatments"
DEFAULT_SERVICE_TYPE = "ChiropracticCare"

# Grouped thousands ("1,200,000.50") first, then a plain amount ("850", "99,50")
_PRICE_AMOUNT = re.compile(r"\d{1,3}(?:,\d{3})+(?:\.\d+)?(?!\d)|\d+(?:[.,]\d+)?")


# --- Lookups ---


def get_service_by_slug(services: Iterable[Service], slug: str) -> Service | None:
    return next((s for s in services if s.slug == slug), None)


def get_service_by_id(services: Iterable[Service], service_id: str) -> Service | None:
    return next((s for s in services if s.id == service_id), None)


def get_featured_services(services: Iterable[Service]) -> list[Service]:
    return [s for s in services if s.featured]


def get_faq_by_id(faqs: Iterable[FaqItem], faq_id: str) -> FaqItem | None:
    return next((f for f in faqs if f.id == faq_id), None)


def get_gallery_items(gallery: GallerySection) -> list[GalleryItem]:
    return list(gallery.items)


def treatment_path(service: Service) -> str:
    return f"{TREATMENTS_PREFIX}/{service.slug}"


def price_amount(price: str) -> str:
    """
    Extract the numeric amount from a display price.

    "R850" -> "850", "R1,200" -> "1200", "R1,200.50" -> "1200.50", "" -> "".
    """
    match = _PRICE_AMOUNT.search(price.replace(" ", ""))
    if not match:
        return ""
    amount = match.group(0)
    if re.fullmatch(r"\d{1,3}(?:,\d{3})+(?:\.\d+)?", amount):
        return amount.replace(",", "")
    return amount.replace(",", ".")


# --- Structured-data subjects ---


def service_subject(
    service: Service,
    business: BusinessProfile,
    service_type: str = DEFAULT_SERVICE_TYPE,
    area_served: str | None = None,
) -> ServiceSubject:
    """ServiceSubject for a treatment detail page."""
    amount = price_amount(service.price)
    if area_served is None:
        area_served = f"{business.address.city}, {business.address.state}"

    return ServiceSubject(
        name=service.name,
        description=service.description,
        url=f"{business.url}{treatment_path(service)}",
        service_type=service_type,
        area_served=area_served,
        image=f"{business.url}{service.image}" if service.image else None,
        offers=Offer(price=amount) if amount else None,
    )


def faq_list(faqs: Iterable[FaqItem]) -> FaqList:
    return FaqList(entries=tuple(FaqEntry(question=f.question, answer=f.answer) for f in faqs))


def person_subject(member: TeamMember, business: BusinessProfile) -> PersonSubject:
    image = member.image
    if image and not image.startswith(("http://", "https://")):
        image = f"{business.url}{image}"
    return PersonSubject(
        name=member.name,
        title=member.title,
        bio=member.bio or None,
        image=image or None,
        email=member.email or None,
        phone=member.phone or None,
    )


def breadcrumb_trail(crumbs: Sequence[tuple[str, str]]) -> BreadcrumbTrail:
    """Trail from (name, url) pairs, root first."""
    return BreadcrumbTrail(items=tuple(BreadcrumbItem(name=n, url=u) for n, u in crumbs))
