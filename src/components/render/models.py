"""
Render component models - page metadata for the document head.
"""

from __future__ import annotations

from dataclasses import dataclass, field

OG_IMAGE_WIDTH = 1200
OG_IMAGE_HEIGHT = 630


@dataclass(frozen=True)
class MetaTag:
    """HTML meta tag representation."""

    name: str | None = None
    property: str | None = None  # For OG tags
    content: str = ""


@dataclass(frozen=True)
class ImageInfo:
    """Resolved share image."""

    url: str
    alt: str = ""
    width: int = OG_IMAGE_WIDTH
    height: int = OG_IMAGE_HEIGHT


@dataclass(frozen=True)
class PageMetadata:
    """
    Complete page metadata for SSR rendering.

    Contains all data needed to render <head> content apart from JSON-LD.
    """

    title: str
    description: str
    canonical_url: str
    robots: str = "index, follow"

    # OpenGraph tags
    og_title: str = ""
    og_description: str = ""
    og_type: str = "website"
    og_url: str = ""
    og_site_name: str = ""
    og_image: ImageInfo | None = None
    og_published_time: str = ""
    og_authors: tuple[str, ...] = ()

    # Twitter Card tags
    twitter_card: str = "summary_large_image"
    twitter_title: str = ""
    twitter_description: str = ""

    extra_meta: tuple[MetaTag, ...] = field(default_factory=tuple)

    def to_meta_tags(self) -> list[MetaTag]:
        """Convert to list of MetaTag objects for rendering."""
        tags = [
            MetaTag(name="description", content=self.description),
            MetaTag(name="robots", content=self.robots),
            MetaTag(property="og:title", content=self.og_title or self.title),
            MetaTag(property="og:description", content=self.og_description or self.description),
            MetaTag(property="og:type", content=self.og_type),
            MetaTag(property="og:url", content=self.og_url or self.canonical_url),
        ]

        if self.og_site_name:
            tags.append(MetaTag(property="og:site_name", content=self.og_site_name))

        if self.og_published_time:
            tags.append(
                MetaTag(property="article:published_time", content=self.og_published_time)
            )
        for author in self.og_authors:
            tags.append(MetaTag(property="article:author", content=author))

        if self.og_image:
            tags.extend(
                [
                    MetaTag(property="og:image", content=self.og_image.url),
                    MetaTag(property="og:image:width", content=str(self.og_image.width)),
                    MetaTag(property="og:image:height", content=str(self.og_image.height)),
                ]
            )
            if self.og_image.alt:
                tags.append(MetaTag(property="og:image:alt", content=self.og_image.alt))

        # Twitter Card
        tags.extend(
            [
                MetaTag(name="twitter:card", content=self.twitter_card),
                MetaTag(
                    name="twitter:title", content=self.twitter_title or self.og_title or self.title
                ),
                MetaTag(
                    name="twitter:description",
                    content=self.twitter_description or self.og_description or self.description,
                ),
            ]
        )

        if self.og_image:
            tags.append(MetaTag(name="twitter:image", content=self.og_image.url))

        tags.extend(self.extra_meta)
        return tags
