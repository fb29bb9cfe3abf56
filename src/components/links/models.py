"""
Links component output models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkItem:
    """A rendered link: label, target and whether it opens a new tab."""

    label: str
    href: str
    external: bool = False


@dataclass(frozen=True)
class ContactLinks:
    """Every outbound link the location and footer sections need."""

    maps_search_url: str
    maps_embed_url: str
    maps_directions_url: str
    phone_links: tuple[LinkItem, ...] = ()
    email_link: str = ""
    booking_url: str = ""
    social: tuple[LinkItem, ...] = ()
    quick_links: tuple[LinkItem, ...] = ()
