"""Public JSON endpoints backing the location section."""

from fastapi import APIRouter, Depends

from src.api.deps import get_clock, get_site_config
from src.api.schemas import BusinessResponse, HoursEntry, LinkResponse, StatusResponse
from src.components import links
from src.components.open_status import REFRESH_INTERVAL_SECONDS, ClockPort, run_now
from src.rules.models import SiteConfig

router = APIRouter()


def address_lines(config: SiteConfig) -> list[str]:
    a = config.business.address
    lines = [a.street]
    if a.area:
        lines.append(a.area)
    lines.append(f"{a.city}, {a.state} {a.zip}")
    return lines


@router.get("/status", response_model=StatusResponse)
def get_status(
    config: SiteConfig = Depends(get_site_config),
    clock: ClockPort = Depends(get_clock),
) -> StatusResponse:
    """
    Current open/closed status.

    Clients poll this every refresh_seconds to keep the indicator current.
    """
    business = config.business
    status = run_now(
        business.hours,
        config.day_rules(),
        clock=clock,
        timezone=business.timezone,
    )
    return StatusResponse(
        is_open=status.is_open,
        message=status.message,
        refresh_seconds=REFRESH_INTERVAL_SECONDS,
    )


@router.get("/business", response_model=BusinessResponse)
def get_business(config: SiteConfig = Depends(get_site_config)) -> BusinessResponse:
    """Contact details, hours and outbound links."""
    business = config.business
    contact = links.run(business, config.navigation)

    def _links(items: tuple[links.LinkItem, ...]) -> list[LinkResponse]:
        return [LinkResponse(label=i.label, href=i.href, external=i.external) for i in items]

    return BusinessResponse(
        name=business.name,
        tagline=business.tagline,
        phones=_links(contact.phone_links),
        email=business.email,
        email_link=contact.email_link,
        address_lines=address_lines(config),
        hours=[HoursEntry(day=day, hours=text) for day, text in business.hours.items()],
        maps_embed_url=contact.maps_embed_url,
        maps_directions_url=contact.maps_directions_url,
        maps_search_url=contact.maps_search_url,
        booking_url=contact.booking_url,
        social=_links(contact.social),
        quick_links=_links(contact.quick_links),
    )
