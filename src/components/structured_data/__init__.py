"""
Structured-data component - schema.org JSON-LD builders.
"""

from ._impl import (
    DEFAULT_CURRENCY,
    SCHEMA_BUILDERS,
    SCHEMA_CONTEXT,
    build_aggregate_rating,
    build_blog_posting,
    build_breadcrumb_list,
    build_faq_page,
    build_local_business,
    build_opening_hours,
    build_person,
    build_review,
    build_schema,
    build_service,
    render_json_ld_script,
    to_json_ld,
)
from .component import BuildSchemaInput, run, run_scripts
from .models import (
    AggregateRatingSubject,
    BlogPostSubject,
    BreadcrumbItem,
    BreadcrumbTrail,
    FaqEntry,
    FaqList,
    JsonLd,
    Offer,
    PersonSubject,
    ReviewSubject,
    SchemaSubject,
    ServiceSubject,
)

__all__ = [
    # Entry points
    "run",
    "run_scripts",
    "BuildSchemaInput",
    # Subject models
    "SchemaSubject",
    "ServiceSubject",
    "Offer",
    "FaqList",
    "FaqEntry",
    "ReviewSubject",
    "PersonSubject",
    "BlogPostSubject",
    "BreadcrumbTrail",
    "BreadcrumbItem",
    "AggregateRatingSubject",
    "JsonLd",
    # Builders
    "build_local_business",
    "build_opening_hours",
    "build_service",
    "build_person",
    "build_review",
    "build_blog_posting",
    "build_faq_page",
    "build_breadcrumb_list",
    "build_aggregate_rating",
    "build_schema",
    "SCHEMA_BUILDERS",
    "SCHEMA_CONTEXT",
    "DEFAULT_CURRENCY",
    # Serialization
    "to_json_ld",
    "render_json_ld_script",
]
