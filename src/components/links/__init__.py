"""
Links component - contact, map and navigation URLs.
"""

from ._impl import (
    SOCIAL_PLATFORMS,
    email_link,
    encode_uri_component,
    maps_directions_url,
    maps_embed_url,
    maps_search_url,
    phone_link,
    phone_links,
    quick_links,
    social_links,
)
from .component import run
from .models import ContactLinks, LinkItem

__all__ = [
    # Entry points
    "run",
    # Output models
    "ContactLinks",
    "LinkItem",
    # Builders
    "maps_search_url",
    "maps_embed_url",
    "maps_directions_url",
    "phone_link",
    "phone_links",
    "email_link",
    "social_links",
    "quick_links",
    "encode_uri_component",
    "SOCIAL_PLATFORMS",
]
