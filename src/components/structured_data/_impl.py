"""
StructuredDataBuilder - schema.org JSON-LD assembly.

Builds one JSON-LD object per schema type from a subject record and the
business profile.

Key behaviors:
- Empty or absent optional fields are omitted, never emitted as null/""
- The business is referenced by "@id" (<url>/#organization), not inlined
- Opening hours come from the display hours via the shared " - " split
- Offers default to ZAR; ratings always declare a 5..1 scale
- Builders never raise and emit only JSON-native types
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

from src.domain.entities import BusinessProfile
from src.domain.hours import split_hours_range

from .models import (
    AggregateRatingSubject,
    BlogPostSubject,
    BreadcrumbTrail,
    FaqList,
    JsonLd,
    PersonSubject,
    ReviewSubject,
    SchemaSubject,
    ServiceSubject,
)

SCHEMA_CONTEXT = "https://schema.org"
DEFAULT_CURRENCY = "ZAR"
BEST_RATING = 5
WORST_RATING = 1


# --- Helpers ---


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == [] or value == {}


def _put(schema: JsonLd, key: str, value: Any) -> None:
    """Set key only when value carries something."""
    if not _is_empty(value):
        schema[key] = value


def _base(schema_type: str | list[str]) -> JsonLd:
    return {"@context": SCHEMA_CONTEXT, "@type": schema_type}


def _absolute(business: BusinessProfile, path: str) -> str:
    if path.startswith(("http://", "https://")):
        return path
    return f"{business.url}{path}"


def _organization_ref(business: BusinessProfile, schema_type: str = "Organization") -> JsonLd:
    ref: JsonLd = {"@type": schema_type, "@id": business.organization_id}
    _put(ref, "name", business.name)
    return ref


def _rating_bounds(schema: JsonLd) -> JsonLd:
    schema["bestRating"] = BEST_RATING
    schema["worstRating"] = WORST_RATING
    return schema


def capitalize_day(day: str) -> str:
    return day[:1].upper() + day[1:]


def build_opening_hours(hours: dict[str, str]) -> list[JsonLd]:
    """
    Convert display hours into OpeningHoursSpecification entries.

    Closed and unparseable days are dropped.
    """
    specs: list[JsonLd] = []
    for day, text in hours.items():
        window = split_hours_range(text)
        if window is None:
            continue
        opens, closes = window
        specs.append(
            {
                "@type": "OpeningHoursSpecification",
                "dayOfWeek": capitalize_day(day),
                "opens": opens,
                "closes": closes,
            }
        )
    return specs


# --- Builders ---


def build_local_business(business: BusinessProfile) -> JsonLd:
    """
    LocalBusiness schema for the site-wide organization.

    Types come from business.schema_types.
    """
    schema = _base(list(business.schema_types))
    schema["@id"] = business.organization_id
    _put(schema, "name", business.name)
    _put(schema, "url", business.url)
    _put(schema, "description", business.description)
    _put(schema, "telephone", business.phone)
    _put(schema, "email", business.email)

    address: JsonLd = {}
    _put(address, "streetAddress", business.address.street)
    _put(address, "addressLocality", business.address.city)
    _put(address, "addressRegion", business.address.state)
    _put(address, "postalCode", business.address.zip)
    _put(address, "addressCountry", business.address.country)
    if address:
        schema["address"] = {"@type": "PostalAddress", **address}

    if business.geo is not None:
        schema["geo"] = {
            "@type": "GeoCoordinates",
            "latitude": business.geo.latitude,
            "longitude": business.geo.longitude,
        }

    _put(schema, "openingHoursSpecification", build_opening_hours(business.hours))
    _put(schema, "sameAs", [url for url in business.social.values() if url])
    _put(schema, "priceRange", business.price_range)
    if business.logo:
        schema["image"] = _absolute(business, business.logo)

    return schema


def build_service(service: ServiceSubject, business: BusinessProfile) -> JsonLd:
    """Service schema for a treatment page."""
    schema = _base("Service")
    _put(schema, "name", service.name)
    _put(schema, "description", service.description)

    provider: JsonLd = {"@type": "Organization", "@id": business.organization_id}
    _put(provider, "name", service.provider or business.name)
    schema["provider"] = provider

    _put(schema, "url", service.url)
    _put(schema, "serviceType", service.service_type)
    _put(schema, "areaServed", service.area_served)
    _put(schema, "image", service.image)

    if service.offers is not None and not _is_empty(service.offers.price):
        schema["offers"] = {
            "@type": "Offer",
            "price": service.offers.price,
            "priceCurrency": service.offers.price_currency or DEFAULT_CURRENCY,
        }

    return schema


def build_person(person: PersonSubject, business: BusinessProfile) -> JsonLd:
    """Person schema for a team member."""
    schema = _base("Person")
    _put(schema, "name", person.name)
    _put(schema, "jobTitle", person.title)
    schema["worksFor"] = _organization_ref(business)
    _put(schema, "description", person.bio)
    _put(schema, "image", person.image)
    _put(schema, "email", person.email)
    _put(schema, "telephone", person.phone)
    return schema


def build_review(review: ReviewSubject, business: BusinessProfile) -> JsonLd:
    """Review schema for a testimonial."""
    schema = _base("Review")
    if review.author:
        schema["author"] = {"@type": "Person", "name": review.author}
    schema["reviewRating"] = _rating_bounds({"@type": "Rating", "ratingValue": review.rating})
    _put(schema, "reviewBody", review.review_body)
    schema["itemReviewed"] = _organization_ref(business, "LocalBusiness")
    _put(schema, "datePublished", review.date_published)
    return schema


def build_blog_posting(post: BlogPostSubject, business: BusinessProfile) -> JsonLd:
    """BlogPosting schema for an article page."""
    post_url = f"{business.url}/blog/{post.slug}"

    schema = _base("BlogPosting")
    schema["@id"] = post_url
    _put(schema, "headline", post.title)
    _put(schema, "datePublished", post.date)
    if post.author:
        schema["author"] = {"@type": "Person", "name": post.author}

    publisher = _organization_ref(business)
    if business.logo:
        publisher["logo"] = {
            "@type": "ImageObject",
            "url": _absolute(business, business.logo),
        }
    schema["publisher"] = publisher
    schema["mainEntityOfPage"] = {"@type": "WebPage", "@id": post_url}

    _put(schema, "description", post.description)
    _put(schema, "image", post.image)
    _put(schema, "dateModified", post.date_modified)
    return schema


def build_faq_page(faqs: FaqList, business: BusinessProfile | None = None) -> JsonLd:
    """FAQPage schema. The business is not referenced."""
    schema = _base("FAQPage")
    _put(
        schema,
        "mainEntity",
        [
            {
                "@type": "Question",
                "name": entry.question,
                "acceptedAnswer": {"@type": "Answer", "text": entry.answer},
            }
            for entry in faqs.entries
        ],
    )
    return schema


def build_breadcrumb_list(trail: BreadcrumbTrail, business: BusinessProfile) -> JsonLd:
    """
    BreadcrumbList schema.

    Relative item URLs ("/treatments") are resolved against the business URL.
    """
    schema = _base("BreadcrumbList")
    _put(
        schema,
        "itemListElement",
        [
            {
                "@type": "ListItem",
                "position": index,
                "name": crumb.name,
                "item": _absolute(business, crumb.url),
            }
            for index, crumb in enumerate(trail.items, start=1)
        ],
    )
    return schema


def build_aggregate_rating(
    rating: AggregateRatingSubject, business: BusinessProfile
) -> JsonLd:
    """Business schema carrying an overall rating from many reviews."""
    schema = _base("LocalBusiness")
    schema["@id"] = business.organization_id
    _put(schema, "name", business.name)
    schema["aggregateRating"] = _rating_bounds(
        {
            "@type": "AggregateRating",
            "ratingValue": rating.rating_value,
            "reviewCount": rating.review_count,
        }
    )
    return schema


# --- Dispatch ---

SchemaBuilder = Callable[[Any, BusinessProfile], JsonLd]

SCHEMA_BUILDERS: dict[type, SchemaBuilder] = {
    ServiceSubject: build_service,
    FaqList: build_faq_page,
    ReviewSubject: build_review,
    PersonSubject: build_person,
    BlogPostSubject: build_blog_posting,
    BreadcrumbTrail: build_breadcrumb_list,
    AggregateRatingSubject: build_aggregate_rating,
}


def build_schema(subject: SchemaSubject, business: BusinessProfile) -> JsonLd:
    """
    Build the schema matching the subject's record type.

    Raises:
        ValueError: If the subject is not one of the supported record types.
    """
    builder = SCHEMA_BUILDERS.get(type(subject))
    if builder is None:
        raise ValueError(f"Unsupported schema subject: {type(subject).__name__}")
    return builder(subject, business)


# --- Serialization ---


def to_json_ld(schema: JsonLd) -> str:
    """Serialize a schema object to compact JSON."""
    return json.dumps(schema, ensure_ascii=False, separators=(",", ":"))


def render_json_ld_script(schema: JsonLd) -> str:
    """
    Render a schema as an application/ld+json script element.

    <, > and & are emitted as JSON unicode escapes so the payload cannot
    terminate the script element early.
    """
    payload = (
        to_json_ld(schema)
        .replace("&", "\\u0026")
        .replace("<", "\\u003c")
        .replace(">", "\\u003e")
    )
    return f'<script type="application/ld+json">{payload}</script>'
