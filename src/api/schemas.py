from pydantic import BaseModel


class StatusResponse(BaseModel):
    """Open/closed status plus how often the client should poll again."""

    is_open: bool
    message: str
    refresh_seconds: int


class LinkResponse(BaseModel):
    label: str
    href: str
    external: bool = False


class HoursEntry(BaseModel):
    day: str
    hours: str


class BusinessResponse(BaseModel):
    """Public contact details for the location section and footer."""

    name: str
    tagline: str
    phones: list[LinkResponse]
    email: str
    email_link: str
    address_lines: list[str]
    hours: list[HoursEntry]
    maps_embed_url: str
    maps_directions_url: str
    maps_search_url: str
    booking_url: str
    social: list[LinkResponse]
    quick_links: list[LinkResponse]
