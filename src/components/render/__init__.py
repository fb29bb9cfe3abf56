"""
Render component - page metadata and SSR head markup.
"""

from ._impl import (
    RenderService,
    absolute_url,
    build_canonical_url,
    create_render_service,
    resolve_og_image,
    truncate_description,
)
from .component import escape_html, render_meta_tags_html, render_page
from .models import OG_IMAGE_HEIGHT, OG_IMAGE_WIDTH, ImageInfo, MetaTag, PageMetadata

__all__ = [
    # Entry points
    "render_page",
    "render_meta_tags_html",
    "escape_html",
    # Output models
    "MetaTag",
    "ImageInfo",
    "PageMetadata",
    "OG_IMAGE_WIDTH",
    "OG_IMAGE_HEIGHT",
    # Service
    "RenderService",
    "create_render_service",
    # Helpers
    "build_canonical_url",
    "absolute_url",
    "resolve_og_image",
    "truncate_description",
]
