"""
Public SSR Routes - server-side rendered pages with metadata.

Serves crawler-facing HTML: full <head> metadata plus the JSON-LD payloads
for each page, with a bare body. Wires the site config, RenderService and
the structured-data builder together.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse

from src.api.deps import get_clock, get_render_service, get_site_config
from src.components.content import (
    TREATMENTS_PREFIX,
    breadcrumb_trail,
    faq_list,
    get_gallery_items,
    get_service_by_slug,
    person_subject,
    service_subject,
    treatment_path,
)
from src.components.open_status import ClockPort, run_now
from src.components.render import RenderService, escape_html, render_page
from src.components.structured_data import run_scripts
from src.rules.models import SiteConfig

router = APIRouter()

HOME_CRUMB = ("Home", "/")
TREATMENTS_CRUMB = ("Treatments", TREATMENTS_PREFIX)


# --- Body Fragments ---


def _hours_html(config: SiteConfig) -> str:
    rows = "".join(
        f"<li>{escape_html(day.capitalize())}: {escape_html(text)}</li>"
        for day, text in config.business.hours.items()
    )
    return f"<ul class=\"hours\">{rows}</ul>"


def _status_html(config: SiteConfig, clock: ClockPort) -> str:
    business = config.business
    current = run_now(business.hours, config.day_rules(), clock=clock, timezone=business.timezone)
    state = "open" if current.is_open else "closed"
    return f'<p class="status status-{state}">{escape_html(current.message)}</p>'


def _service_list_html(config: SiteConfig) -> str:
    items = "".join(
        f'<li><a href="{escape_html(treatment_path(s))}">{escape_html(s.name)}</a></li>'
        for s in config.services
    )
    return f"<ul>{items}</ul>"


def _gallery_html(config: SiteConfig) -> str:
    items = get_gallery_items(config.gallery)
    if not items:
        return ""
    figures = "".join(
        f'<img src="{escape_html(i.image)}" alt="{escape_html(i.alt)}" />' for i in items
    )
    return (
        f'<section class="gallery"><h2>{escape_html(config.gallery.title)}</h2>'
        f"<p>{escape_html(config.gallery.subtitle)}</p>{figures}</section>"
    )


# --- SSR Endpoints ---


@router.get("/", response_class=HTMLResponse, summary="Homepage SSR")
def ssr_homepage(
    config: SiteConfig = Depends(get_site_config),
    render_service: RenderService = Depends(get_render_service),
    clock: ClockPort = Depends(get_clock),
) -> HTMLResponse:
    """Homepage with LocalBusiness and FAQPage structured data."""
    business = config.business
    metadata = render_service.build_home_metadata()

    body = f"""
    <main>
        <h1>{escape_html(business.name)}</h1>
        <p>{escape_html(business.tagline)}</p>
        {_service_list_html(config)}
        {_gallery_html(config)}
        {_hours_html(config)}
        {_status_html(config, clock)}
    </main>
    """

    # None renders the LocalBusiness schema
    subjects = [None, faq_list(config.faqs)] if config.faqs else [None]
    return HTMLResponse(content=render_page(metadata, body, run_scripts(business, *subjects)))


@router.get("/about", response_class=HTMLResponse, summary="About page SSR")
def ssr_about(
    config: SiteConfig = Depends(get_site_config),
    render_service: RenderService = Depends(get_render_service),
) -> HTMLResponse:
    """About page with one Person schema per team member."""
    business = config.business
    about = config.about
    title = about.title or "About"
    description = about.paragraphs[0] if about.paragraphs else business.description
    metadata = render_service.build_page_metadata(title, description, "/about", about.image or None)

    paragraphs = "".join(f"<p>{escape_html(p)}</p>" for p in about.paragraphs)
    body = f"""
    <main>
        <h1>{escape_html(title)}</h1>
        {paragraphs}
    </main>
    """

    subjects = [person_subject(member, business) for member in config.team]
    trail = breadcrumb_trail([HOME_CRUMB, ("About", "/about")])
    scripts = run_scripts(business, *subjects, trail)
    return HTMLResponse(content=render_page(metadata, body, scripts))


@router.get("/treatments", response_class=HTMLResponse, summary="Treatments listing SSR")
def ssr_treatments(
    config: SiteConfig = Depends(get_site_config),
    render_service: RenderService = Depends(get_render_service),
) -> HTMLResponse:
    business = config.business
    metadata = render_service.build_page_metadata(
        "Treatments",
        f"Chiropractic treatments offered at {business.name}",
        TREATMENTS_PREFIX,
    )

    body = f"""
    <main>
        <h1>Treatments</h1>
        {_service_list_html(config)}
    </main>
    """

    trail = breadcrumb_trail([HOME_CRUMB, TREATMENTS_CRUMB])
    return HTMLResponse(content=render_page(metadata, body, run_scripts(business, trail)))


@router.get("/treatments/{slug}", response_class=HTMLResponse, summary="Treatment detail SSR")
def ssr_treatment_detail(
    slug: str,
    config: SiteConfig = Depends(get_site_config),
    render_service: RenderService = Depends(get_render_service),
) -> HTMLResponse:
    """Treatment page with Service and BreadcrumbList structured data."""
    service = get_service_by_slug(config.services, slug)
    if service is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Treatment not found")

    business = config.business
    metadata = render_service.build_service_metadata(service)

    benefits = "".join(f"<li>{escape_html(b)}</li>" for b in service.benefits)
    body = f"""
    <main>
        <h1>{escape_html(service.name)}</h1>
        <p>{escape_html(service.description)}</p>
        <p>{escape_html(service.duration)} &middot; {escape_html(service.price)}</p>
        <ul>{benefits}</ul>
        <a href="{escape_html(business.booking_url)}">Book Your Appointment</a>
    </main>
    """

    trail = breadcrumb_trail(
        [HOME_CRUMB, TREATMENTS_CRUMB, (service.name, treatment_path(service))]
    )
    scripts = run_scripts(business, service_subject(service, business), trail)
    return HTMLResponse(content=render_page(metadata, body, scripts))
