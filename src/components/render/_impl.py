"""
RenderService - page metadata builder.

Builds deterministic <head> metadata (title, description, canonical URL,
OpenGraph and Twitter Card tags) from the business profile and page inputs.

Key behaviors:
- Titles read "<page> | <business name>"; the homepage uses the tagline
- Canonical URLs are the business URL plus the page path
- Share image falls back from the page image to the business logo
- Pure function: same inputs always produce same outputs
"""

from __future__ import annotations

from src.components.content import treatment_path
from src.components.structured_data import BlogPostSubject
from src.domain.entities import BusinessProfile, Service

from .models import ImageInfo, PageMetadata

# --- Canonical URL Building ---


def build_canonical_url(base_url: str, path: str) -> str:
    """
    Build canonical URL from base URL and path.

    The site root is the bare base URL, without a trailing slash.
    """
    base = base_url.rstrip("/")
    if not path or path == "/":
        return base
    if not path.startswith("/"):
        path = "/" + path

    return f"{base}{path}"


def absolute_url(base_url: str, path_or_url: str) -> str:
    """Absolute URLs pass through; site paths are joined onto the base."""
    if path_or_url.startswith(("http://", "https://")):
        return path_or_url
    return build_canonical_url(base_url, path_or_url)


# --- Description Truncation ---


def truncate_description(text: str, max_length: int = 160) -> str:
    """
    Truncate description to fit meta description limits.

    Breaks at word boundary if possible.
    """
    text = " ".join(text.split())
    if len(text) <= max_length:
        return text

    # Find last space before limit
    truncated = text[:max_length]
    last_space = truncated.rfind(" ")

    if last_space > max_length * 0.6:  # At least 60% of the text
        truncated = truncated[:last_space]

    return truncated.rstrip() + "..."


# --- Image Resolution ---


def resolve_og_image(
    base_url: str,
    page_image: str | None,
    default_image: str | None,
    alt: str = "",
) -> ImageInfo | None:
    """
    Resolve the share image.

    Resolution order:
    1. Page-specific image
    2. Default image (the business logo)

    Returns None if neither is set.
    """
    image = page_image or default_image
    if not image:
        return None
    return ImageInfo(url=absolute_url(base_url, image), alt=alt)


# --- Main Render Service ---


class RenderService:
    """
    Page metadata builder service.

    Pure functions: same inputs always produce same outputs.
    """

    def __init__(self, business: BusinessProfile) -> None:
        """
        Initialize render service.

        Args:
            business: Business profile supplying site name, URL and logo
        """
        self._business = business
        self._base_url = business.url.rstrip("/")

    def build_page_metadata(
        self,
        title: str,
        description: str,
        path: str = "",
        image: str | None = None,
    ) -> PageMetadata:
        """
        Build metadata for a regular page.

        Args:
            title: Page title (business name is appended)
            description: Meta description
            path: Site path for the canonical URL (e.g. "/about")
            image: Share image, absolute or site path; defaults to the logo

        Returns:
            PageMetadata with all required fields
        """
        canonical = build_canonical_url(self._base_url, path)
        description = truncate_description(description)
        og_image = resolve_og_image(self._base_url, image, self._business.logo, alt=title)

        return PageMetadata(
            title=f"{title} | {self._business.name}",
            description=description,
            canonical_url=canonical,
            og_title=title,
            og_description=description,
            og_type="website",
            og_url=canonical,
            og_site_name=self._business.name,
            og_image=og_image,
            twitter_card="summary_large_image",
            twitter_title=title,
            twitter_description=description,
        )

    def build_home_metadata(self) -> PageMetadata:
        """Homepage metadata: "<name> | <tagline>", canonical is the site root."""
        business = self._business
        description = truncate_description(business.description)
        og_image = resolve_og_image(self._base_url, None, business.logo, alt=business.name)
        title = f"{business.name} | {business.tagline}" if business.tagline else business.name

        return PageMetadata(
            title=title,
            description=description,
            canonical_url=self._base_url,
            og_title=business.name,
            og_description=description,
            og_type="website",
            og_url=self._base_url,
            og_site_name=business.name,
            og_image=og_image,
            twitter_card="summary_large_image",
            twitter_title=business.name,
            twitter_description=description,
        )

    def build_blog_metadata(self) -> PageMetadata:
        """Blog listing page metadata."""
        return self.build_page_metadata(
            "Blog",
            f"Latest news, tips, and insights from {self._business.name}",
            "/blog",
        )

    def build_blog_post_metadata(self, post: BlogPostSubject) -> PageMetadata:
        """
        Article metadata for a blog post.

        Only the post's own image is used; the logo is not a fallback here.
        """
        canonical = build_canonical_url(self._base_url, f"/blog/{post.slug}")
        description = truncate_description(post.description or "")
        og_image = resolve_og_image(self._base_url, post.image, None, alt=post.title)

        return PageMetadata(
            title=f"{post.title} | {self._business.name}",
            description=description,
            canonical_url=canonical,
            og_title=post.title,
            og_description=description,
            og_type="article",
            og_url=canonical,
            og_site_name=self._business.name,
            og_image=og_image,
            og_published_time=post.date,
            og_authors=(post.author,) if post.author else (),
            twitter_card="summary_large_image",
            twitter_title=post.title,
            twitter_description=description,
        )

    def build_service_metadata(self, service: Service) -> PageMetadata:
        """Treatment detail page metadata."""
        return self.build_page_metadata(
            service.name,
            service.description,
            treatment_path(service),
            service.image or None,
        )


# --- Factory ---


def create_render_service(business: BusinessProfile) -> RenderService:
    """Create a render service for the given business."""
    return RenderService(business)
