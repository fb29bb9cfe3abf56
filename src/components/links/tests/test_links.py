"""
Unit tests for the links component.

Tests:
- Map search, embed and directions URLs
- tel: and mailto: links
- Footer social and quick links
- run() bundle
"""

from __future__ import annotations

import pytest

from src.components.links import (
    ContactLinks,
    LinkItem,
    email_link,
    encode_uri_component,
    maps_directions_url,
    maps_embed_url,
    maps_search_url,
    phone_link,
    phone_links,
    quick_links,
    run,
    social_links,
)
from src.domain.entities import BusinessProfile, MapsConfig, NavItem, PostalAddress

WEEK_CLOSED = {
    day: "Closed"
    for day in ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
}


@pytest.fixture
def business() -> BusinessProfile:
    return BusinessProfile(
        name="Sticks and Stones Wellness Hub",
        url="https://example.com",
        phone="(555) 123-4567",
        phone_secondary="+27 11 555 0000",
        email="contact@example.com",
        address=PostalAddress(
            street="123 Main Street",
            city="Johannesburg",
            state="Gauteng",
            zip="2000",
            country="ZA",
        ),
        hours=WEEK_CLOSED,
        social={
            "facebook": "https://facebook.com/yourpage",
            "instagram": "",
        },
        booking_url="https://example.pencilmein.online/Booking",
        maps=MapsConfig(api_key="KEY", location_name="Sticks & Stones"),
    )


class TestEncoding:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("a b", "a%20b"),
            ("a,b", "a%2Cb"),
            ("a&b", "a%26b"),
            ("it's (ok)!", "it's%20(ok)!"),
            ("x/y", "x%2Fy"),
        ],
    )
    def test_matches_uri_component_rules(self, raw: str, expected: str) -> None:
        assert encode_uri_component(raw) == expected


class TestMaps:
    def test_search_url(self, business: BusinessProfile) -> None:
        assert maps_search_url(business) == (
            "https://maps.google.com/?q=123%20Main%20Street%2C%20Johannesburg%2C%20Gauteng%202000"
        )

    def test_embed_url(self, business: BusinessProfile) -> None:
        url = maps_embed_url(business)

        assert url.startswith("https://www.google.com/maps/embed/v1/place?key=KEY&q=")
        assert url.endswith("&zoom=15")
        assert "Sticks%20%26%20Stones%2C123%20Main%20Street%2CJohannesburg" in url

    def test_directions_url(self, business: BusinessProfile) -> None:
        url = maps_directions_url(business)

        assert url.startswith("https://www.google.com/maps/dir/?api=1&destination=")
        assert url.endswith("Gauteng%2C2000")


class TestContact:
    def test_phone_link_strips_formatting(self, business: BusinessProfile) -> None:
        assert phone_link(business) == "tel:5551234567"
        assert phone_link(business, "+27 11 555 0000") == "tel:+27115550000"

    def test_email_link(self, business: BusinessProfile) -> None:
        assert email_link(business) == "mailto:contact@example.com"

    def test_phone_links_include_secondary(self, business: BusinessProfile) -> None:
        assert phone_links(business) == [
            LinkItem(label="(555) 123-4567", href="tel:5551234567"),
            LinkItem(label="+27 11 555 0000", href="tel:+27115550000"),
        ]

    def test_phone_links_empty_without_numbers(self, business: BusinessProfile) -> None:
        bare = business.model_copy(update={"phone": "", "phone_secondary": ""})
        assert phone_links(bare) == []


class TestFooterLinks:
    def test_social_links_drop_missing_urls(self, business: BusinessProfile) -> None:
        assert social_links(business) == [
            LinkItem(label="Facebook", href="https://facebook.com/yourpage", external=True),
            LinkItem(label="Email", href="mailto:contact@example.com"),
        ]

    def test_quick_links_append_booking(self, business: BusinessProfile) -> None:
        nav = [NavItem(label="Home", href="/"), NavItem(label="About", href="/about")]

        links = quick_links(business, nav)

        assert [link.label for link in links] == ["Home", "About", "Book Now"]
        assert links[-1].external is True
        assert links[-1].href == "https://example.pencilmein.online/Booking"

    def test_quick_links_without_booking(self, business: BusinessProfile) -> None:
        no_booking = business.model_copy(update={"booking_url": ""})
        assert quick_links(no_booking, [NavItem(label="Home", href="/")]) == [
            LinkItem(label="Home", href="/")
        ]


class TestRun:
    def test_bundle(self, business: BusinessProfile) -> None:
        links = run(business, [NavItem(label="Home", href="/")])

        assert isinstance(links, ContactLinks)
        assert links.email_link == "mailto:contact@example.com"
        assert links.booking_url == business.booking_url
        assert len(links.phone_links) == 2
        assert [link.label for link in links.quick_links] == ["Home", "Book Now"]

    def test_no_email(self, business: BusinessProfile) -> None:
        links = run(business.model_copy(update={"email": ""}))
        assert links.email_link == ""
        assert [link.label for link in links.social] == ["Facebook"]
