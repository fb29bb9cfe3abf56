"""
Render component - page metadata builder.

Builds deterministic page metadata from the business profile for public SSR
pages, and renders it to head markup.

Invariants:
- I1: All rendered attribute values are HTML-escaped
- I2: Canonical URLs are absolute
- I3: Same inputs always produce the same markup
"""

from __future__ import annotations

import html
from collections.abc import Iterable

from .models import PageMetadata

# --- HTML Rendering ---


def escape_html(text: str) -> str:
    """Escape HTML special characters, quotes included."""
    return html.escape(text, quote=True)


def render_meta_tags_html(metadata: PageMetadata) -> str:
    """Render PageMetadata to <title>, <meta> and canonical <link> markup."""
    html_parts: list[str] = []

    # Title (not a meta tag, but in head)
    html_parts.append(f"<title>{escape_html(metadata.title)}</title>")

    for tag in metadata.to_meta_tags():
        if tag.property:
            html_parts.append(
                f'<meta property="{escape_html(tag.property)}" '
                f'content="{escape_html(tag.content)}" />'
            )
        elif tag.name:
            html_parts.append(
                f'<meta name="{escape_html(tag.name)}" content="{escape_html(tag.content)}" />'
            )

    html_parts.append(f'<link rel="canonical" href="{escape_html(metadata.canonical_url)}" />')

    return "\n    ".join(html_parts)


def render_page(
    metadata: PageMetadata,
    body_content: str = "",
    json_ld_scripts: Iterable[str] = (),
) -> str:
    """
    Render a complete SSR HTML document.

    json_ld_scripts are pre-rendered application/ld+json script elements.
    """
    head = "\n    ".join([render_meta_tags_html(metadata), *json_ld_scripts])

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    {head}
</head>
<body>
    {body_content}
</body>
</html>"""
