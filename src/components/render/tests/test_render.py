"""
Unit tests for page metadata and head rendering.

Tests:
- Canonical URL building and description truncation
- Share image resolution and Twitter card selection
- Page, home, blog and treatment metadata
- Meta tag and document rendering with escaping
"""

from __future__ import annotations

import pytest

from src.components.render import (
    OG_IMAGE_HEIGHT,
    OG_IMAGE_WIDTH,
    ImageInfo,
    PageMetadata,
    RenderService,
    build_canonical_url,
    create_render_service,
    render_meta_tags_html,
    render_page,
    resolve_og_image,
    truncate_description,
)
from src.components.structured_data import BlogPostSubject
from src.domain.entities import BusinessProfile, PostalAddress, Service

WEEK_CLOSED = {
    day: "Closed"
    for day in ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
}


@pytest.fixture
def business() -> BusinessProfile:
    return BusinessProfile(
        name="Sticks and Stones Wellness Hub",
        tagline="Quality chiropractic care in Johannesburg",
        url="https://example.com/",
        description="Pain-free living through non-invasive healthcare.",
        logo="/logo.png",
        address=PostalAddress(
            street="1 Main", city="Johannesburg", state="GP", zip="2000", country="ZA"
        ),
        hours=WEEK_CLOSED,
    )


@pytest.fixture
def renderer(business: BusinessProfile) -> RenderService:
    return create_render_service(business)


# --- Helpers ---


class TestCanonicalUrl:
    @pytest.mark.parametrize(
        "base,path,expected",
        [
            ("https://example.com", "", "https://example.com"),
            ("https://example.com/", "/", "https://example.com"),
            ("https://example.com", "/about", "https://example.com/about"),
            ("https://example.com/", "treatments/x", "https://example.com/treatments/x"),
        ],
    )
    def test_build(self, base: str, path: str, expected: str) -> None:
        assert build_canonical_url(base, path) == expected


class TestTruncateDescription:
    def test_short_text_unchanged(self) -> None:
        assert truncate_description("Short text.") == "Short text."

    def test_whitespace_normalized(self) -> None:
        assert truncate_description("Two\n   lines") == "Two lines"

    def test_long_text_breaks_at_word(self) -> None:
        text = "word " * 60
        result = truncate_description(text)

        assert len(result) <= 163
        assert result.endswith("word...")


class TestResolveOgImage:
    def test_page_image_wins(self) -> None:
        image = resolve_og_image("https://example.com", "/a.jpeg", "/logo.png", alt="A")
        assert image == ImageInfo(url="https://example.com/a.jpeg", alt="A")
        assert (image.width, image.height) == (OG_IMAGE_WIDTH, OG_IMAGE_HEIGHT)

    def test_falls_back_to_default(self) -> None:
        image = resolve_og_image("https://example.com", None, "/logo.png")
        assert image is not None
        assert image.url == "https://example.com/logo.png"

    def test_absolute_image_kept(self) -> None:
        image = resolve_og_image("https://example.com", "https://cdn.example/x.png", None)
        assert image is not None
        assert image.url == "https://cdn.example/x.png"

    def test_none_when_nothing_set(self) -> None:
        assert resolve_og_image("https://example.com", None, "") is None


# --- RenderService ---


class TestRenderService:
    def test_page_metadata(self, renderer: RenderService) -> None:
        meta = renderer.build_page_metadata("About", "Who we are", "/about")

        assert meta.title == "About | Sticks and Stones Wellness Hub"
        assert meta.canonical_url == "https://example.com/about"
        assert meta.og_url == meta.canonical_url
        assert meta.og_site_name == "Sticks and Stones Wellness Hub"
        assert meta.og_image is not None
        assert meta.og_image.url == "https://example.com/logo.png"
        assert meta.twitter_card == "summary_large_image"

    def test_large_image_card_without_image(self, business: BusinessProfile) -> None:
        no_logo = create_render_service(business.model_copy(update={"logo": ""}))
        meta = no_logo.build_page_metadata("About", "Who we are", "/about")

        assert meta.og_image is None
        assert meta.twitter_card == "summary_large_image"

    def test_home_metadata(self, renderer: RenderService) -> None:
        meta = renderer.build_home_metadata()

        assert meta.title == (
            "Sticks and Stones Wellness Hub | Quality chiropractic care in Johannesburg"
        )
        assert meta.canonical_url == "https://example.com"

    def test_blog_metadata(self, renderer: RenderService) -> None:
        meta = renderer.build_blog_metadata()

        assert meta.title == "Blog | Sticks and Stones Wellness Hub"
        assert meta.canonical_url == "https://example.com/blog"
        assert "Sticks and Stones Wellness Hub" in meta.description

    def test_blog_post_metadata(self, renderer: RenderService) -> None:
        post = BlogPostSubject(
            slug="posture-tips",
            title="Posture tips",
            date="2026-01-10",
            author="Dr. Jordaan",
            description="Sit better.",
        )
        meta = renderer.build_blog_post_metadata(post)

        assert meta.og_type == "article"
        assert meta.canonical_url == "https://example.com/blog/posture-tips"
        assert meta.og_published_time == "2026-01-10"
        assert meta.og_authors == ("Dr. Jordaan",)
        # No post image: the logo is not used for articles
        assert meta.og_image is None
        assert meta.twitter_card == "summary_large_image"

    def test_service_metadata(self, renderer: RenderService) -> None:
        treatment = Service(
            id="initial",
            slug="initial-consultation",
            name="Initial Consultation",
            description="Comprehensive first visit.",
            image="/arm.jpeg",
        )
        meta = renderer.build_service_metadata(treatment)

        assert meta.title == "Initial Consultation | Sticks and Stones Wellness Hub"
        assert meta.canonical_url == "https://example.com/treatments/initial-consultation"
        assert meta.og_image is not None
        assert meta.og_image.url == "https://example.com/arm.jpeg"


# --- HTML Rendering ---


class TestRenderMetaTags:
    def test_tags_present(self, renderer: RenderService) -> None:
        markup = render_meta_tags_html(renderer.build_page_metadata("About", "Who", "/about"))

        assert "<title>About | Sticks and Stones Wellness Hub</title>" in markup
        assert '<link rel="canonical" href="https://example.com/about" />' in markup
        assert '<meta property="og:image:width" content="1200" />' in markup
        assert '<meta name="twitter:image" content="https://example.com/logo.png" />' in markup

    def test_article_tags(self, renderer: RenderService) -> None:
        post = BlogPostSubject(slug="p", title="P", date="2026-01-10", author="A")
        markup = render_meta_tags_html(renderer.build_blog_post_metadata(post))

        assert '<meta property="article:published_time" content="2026-01-10" />' in markup
        assert '<meta property="article:author" content="A" />' in markup

    def test_values_escaped(self) -> None:
        meta = PageMetadata(
            title='Tom & "Jerry" <b>',
            description="a < b",
            canonical_url="https://example.com",
        )
        markup = render_meta_tags_html(meta)

        assert "<title>Tom &amp; &quot;Jerry&quot; &lt;b&gt;</title>" in markup
        assert 'content="a &lt; b"' in markup
        assert "<b>" not in markup


class TestRenderPage:
    def test_document(self, renderer: RenderService) -> None:
        script = '<script type="application/ld+json">{}</script>'
        page = render_page(renderer.build_home_metadata(), "<main>Hi</main>", [script])

        assert page.startswith("<!DOCTYPE html>")
        assert script in page
        assert "<main>Hi</main>" in page
        assert page.index(script) < page.index("</head>")
