"""
Content component - service/FAQ catalog and structured-data subjects.
"""

from ._impl import (
    DEFAULT_SERVICE_TYPE,
    TREATMENTS_PREFIX,
    breadcrumb_trail,
    faq_list,
    get_faq_by_id,
    get_featured_services,
    get_gallery_items,
    get_service_by_id,
    get_service_by_slug,
    person_subject,
    price_amount,
    service_subject,
    treatment_path,
)

__all__ = [
    # Lookups
    "get_service_by_slug",
    "get_service_by_id",
    "get_featured_services",
    "get_faq_by_id",
    "get_gallery_items",
    "treatment_path",
    "price_amount",
    # Structured-data subjects
    "service_subject",
    "faq_list",
    "person_subject",
    "breadcrumb_trail",
    "DEFAULT_SERVICE_TYPE",
    "TREATMENTS_PREFIX",
]
