from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator

# --- Enums / Literals ---
WEEKDAYS: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)
CLOSED = "Closed"


class FrozenModel(BaseModel):
    """Immutable value record built once from static configuration."""

    model_config = ConfigDict(frozen=True)

# --- Business Profile ---

class PostalAddress(FrozenModel):
    street: str
    area: str = ""  # building name or suite
    city: str
    state: str
    zip: str
    country: str

class GeoCoordinates(FrozenModel):
    latitude: float
    longitude: float

class MapsConfig(FrozenModel):
    api_key: str = ""
    location_name: str = ""

class BusinessProfile(FrozenModel):
    name: str
    tagline: str = ""
    url: str
    description: str = ""
    logo: str = ""

    phone: str = ""
    phone_secondary: str = ""
    email: str = ""

    address: PostalAddress
    geo: GeoCoordinates | None = None

    # weekday -> "Closed" or "9:00am - 6:00pm"
    hours: dict[str, str]
    timezone: str = "Africa/Johannesburg"

    social: dict[str, str] = Field(default_factory=dict)
    price_range: str = ""
    schema_types: list[str] = Field(default_factory=lambda: ["LocalBusiness"])
    booking_url: str = ""
    maps: MapsConfig = Field(default_factory=MapsConfig)

    @field_validator("url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("hours")
    @classmethod
    def require_all_weekdays(cls, v: dict[str, str]) -> dict[str, str]:
        normalized = {day.strip().lower(): text.strip() for day, text in v.items()}
        missing = [day for day in WEEKDAYS if day not in normalized]
        unknown = [day for day in normalized if day not in WEEKDAYS]
        if missing or unknown:
            raise ValueError(
                f"hours must define exactly the seven weekdays "
                f"(missing: {missing or 'none'}, unknown: {unknown or 'none'})"
            )
        # Canonical Monday-first order
        return {day: normalized[day] for day in WEEKDAYS}

    @field_validator("timezone")
    @classmethod
    def require_known_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown IANA timezone: {v!r}") from e
        return v

    @field_validator("schema_types")
    @classmethod
    def require_schema_type(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("schema_types must list at least one schema.org type")
        return v

    @property
    def organization_id(self) -> str:
        """Stable JSON-LD identifier other schema objects point back to."""
        return f"{self.url}/#organization"

# --- Content ---

class Service(FrozenModel):
    id: str
    slug: str
    name: str
    description: str
    duration: str = ""
    price: str = ""
    image: str = ""
    image_alt: str = ""
    benefits: list[str] = Field(default_factory=list)
    featured: bool = False
    short_description: str = ""
    full_description: str = ""
    ideal_for: list[str] = Field(default_factory=list)

class FaqItem(FrozenModel):
    id: str
    question: str
    answer: str

class TeamMember(FrozenModel):
    name: str
    title: str
    bio: str = ""
    image: str = ""
    image_alt: str = ""
    email: str = ""
    phone: str = ""

class NavItem(FrozenModel):
    label: str
    href: str
    external: bool = False

class GalleryItem(FrozenModel):
    id: str
    image: str
    alt: str = ""

class GallerySection(FrozenModel):
    title: str = ""
    subtitle: str = ""
    items: list[GalleryItem] = Field(default_factory=list)
