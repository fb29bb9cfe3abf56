"""
Contact and navigation link builders.

Pure string interpolation over the business profile. Query values are encoded
the way browsers' encodeURIComponent does, so generated URLs match what the
client-side map widgets expect.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from urllib.parse import quote

from src.domain.entities import BusinessProfile, NavItem

from .models import LinkItem

MAPS_SEARCH_BASE = "https://maps.google.com/"
MAPS_EMBED_BASE = "https://www.google.com/maps/embed/v1/place"
MAPS_DIRECTIONS_BASE = "https://www.google.com/maps/dir/"
MAPS_EMBED_ZOOM = 15

# encodeURIComponent leaves A-Z a-z 0-9 - _ . ! ~ * ' ( ) unescaped
_URI_COMPONENT_SAFE = "-_.!~*'()"

_NON_DIAL_CHARS = re.compile(r"[^0-9+]")

# Footer social entries in display order: (label, social key)
SOCIAL_PLATFORMS: tuple[tuple[str, str], ...] = (
    ("Facebook", "facebook"),
    ("Instagram", "instagram"),
)


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def _place_query(business: BusinessProfile) -> str:
    a = business.address
    return ",".join([business.maps.location_name, a.street, a.city, a.state, a.zip])


# --- Maps ---


def maps_search_url(business: BusinessProfile) -> str:
    a = business.address
    query = encode_uri_component(f"{a.street}, {a.city}, {a.state} {a.zip}")
    return f"{MAPS_SEARCH_BASE}?q={query}"


def maps_embed_url(business: BusinessProfile) -> str:
    """Embed URL for the location iframe; needs a maps API key."""
    key = business.maps.api_key
    query = encode_uri_component(_place_query(business))
    return f"{MAPS_EMBED_BASE}?key={key}&q={query}&zoom={MAPS_EMBED_ZOOM}"


def maps_directions_url(business: BusinessProfile) -> str:
    destination = encode_uri_component(_place_query(business))
    return f"{MAPS_DIRECTIONS_BASE}?api=1&destination={destination}"


# --- Contact ---


def phone_link(business: BusinessProfile, phone_number: str | None = None) -> str:
    """tel: link keeping only digits and '+'; defaults to the primary phone."""
    number = business.phone if phone_number is None else phone_number
    return f"tel:{_NON_DIAL_CHARS.sub('', number)}"


def email_link(business: BusinessProfile) -> str:
    return f"mailto:{business.email}"


def phone_links(business: BusinessProfile) -> list[LinkItem]:
    links = [LinkItem(label=business.phone, href=phone_link(business))]
    if business.phone_secondary:
        links.append(
            LinkItem(
                label=business.phone_secondary,
                href=phone_link(business, business.phone_secondary),
            )
        )
    return [link for link in links if link.label]


# --- Navigation ---


def social_links(business: BusinessProfile) -> list[LinkItem]:
    """Footer social entries; platforms without a URL are dropped."""
    links = [
        LinkItem(label=label, href=business.social.get(key, ""), external=True)
        for label, key in SOCIAL_PLATFORMS
    ]
    if business.email:
        links.append(LinkItem(label="Email", href=email_link(business)))
    return [link for link in links if link.href]


def quick_links(
    business: BusinessProfile,
    navigation: Iterable[NavItem],
    booking_label: str = "Book Now",
) -> list[LinkItem]:
    """Footer quick links: the main navigation plus the booking link if configured."""
    links = [LinkItem(label=n.label, href=n.href, external=n.external) for n in navigation]
    if business.booking_url:
        links.append(LinkItem(label=booking_label, href=business.booking_url, external=True))
    return links
