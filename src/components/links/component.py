"""
Links component - contact, map and navigation URLs.

Invariants:
- I1: Map queries are encoded like encodeURIComponent
- I2: tel: links contain only digits and '+'
- I3: Social entries without a URL are not emitted
"""

from __future__ import annotations

from collections.abc import Iterable

from src.domain.entities import BusinessProfile, NavItem

from ._impl import (
    email_link,
    maps_directions_url,
    maps_embed_url,
    maps_search_url,
    phone_links,
    quick_links,
    social_links,
)
from .models import ContactLinks

# --- Component Entry Points ---


def run(business: BusinessProfile, navigation: Iterable[NavItem] = ()) -> ContactLinks:
    """
    Build every link the location section and footer render.

    Args:
        business: Business profile.
        navigation: Main navigation items, reused for the footer.

    Returns:
        ContactLinks bundle.
    """
    return ContactLinks(
        maps_search_url=maps_search_url(business),
        maps_embed_url=maps_embed_url(business),
        maps_directions_url=maps_directions_url(business),
        phone_links=tuple(phone_links(business)),
        email_link=email_link(business) if business.email else "",
        booking_url=business.booking_url,
        social=tuple(social_links(business)),
        quick_links=tuple(quick_links(business, navigation)),
    )
