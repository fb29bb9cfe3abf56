"""
Structured-data component input models.

One record shape per supported schema.org type. Each carries only the fields
its schema needs; the business is passed alongside and referenced by @id.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

JsonLd = dict[str, Any]


@dataclass(frozen=True)
class Offer:
    """Price offer for a service."""

    price: str
    price_currency: str | None = None


@dataclass(frozen=True)
class ServiceSubject:
    """Input for a Service schema."""

    name: str
    description: str
    url: str | None = None
    provider: str | None = None  # overrides the business name
    service_type: str | None = None
    area_served: str | None = None
    image: str | None = None
    offers: Offer | None = None


@dataclass(frozen=True)
class FaqEntry:
    question: str
    answer: str


@dataclass(frozen=True)
class FaqList:
    """Input for a FAQPage schema."""

    entries: tuple[FaqEntry, ...] = ()


@dataclass(frozen=True)
class ReviewSubject:
    """
    Input for a Review schema.

    rating must already be on a 1-5 scale.
    """

    author: str
    rating: float
    review_body: str
    date_published: str | None = None


@dataclass(frozen=True)
class PersonSubject:
    """Input for a Person schema (team members)."""

    name: str
    title: str
    bio: str | None = None
    image: str | None = None
    email: str | None = None
    phone: str | None = None


@dataclass(frozen=True)
class BlogPostSubject:
    """Input for a BlogPosting schema."""

    slug: str
    title: str
    date: str
    author: str
    description: str | None = None
    date_modified: str | None = None
    image: str | None = None


@dataclass(frozen=True)
class BreadcrumbItem:
    name: str
    url: str


@dataclass(frozen=True)
class BreadcrumbTrail:
    """Input for a BreadcrumbList schema, root first."""

    items: tuple[BreadcrumbItem, ...] = ()


@dataclass(frozen=True)
class AggregateRatingSubject:
    """
    Input for an AggregateRating attached to the business.

    rating_value must already be on a 1-5 scale.
    """

    rating_value: float
    review_count: int


SchemaSubject = (
    ServiceSubject
    | FaqList
    | ReviewSubject
    | PersonSubject
    | BlogPostSubject
    | BreadcrumbTrail
    | AggregateRatingSubject
)
