import logging

from pydantic import BaseModel, Field, PrivateAttr, field_validator, model_validator

from src.components.open_status import DayRule, derive_day_rules
from src.domain.entities import (
    CLOSED,
    WEEKDAYS,
    BusinessProfile,
    FaqItem,
    GallerySection,
    NavItem,
    Service,
    TeamMember,
)

logger = logging.getLogger(__name__)


class AboutSection(BaseModel):
    title: str = ""
    paragraphs: list[str] = Field(default_factory=list)
    image: str = ""
    image_alt: str = ""

class SiteConfig(BaseModel):
    business: BusinessProfile
    services: list[Service] = Field(default_factory=list)
    faqs: list[FaqItem] = Field(default_factory=list)
    team: list[TeamMember] = Field(default_factory=list)
    navigation: list[NavItem] = Field(default_factory=list)
    about: AboutSection = Field(default_factory=AboutSection)
    gallery: GallerySection = Field(default_factory=GallerySection)

    # Per-weekday [open, close] decimal-hour overrides; null closes the day.
    # Weekdays not listed keep the window parsed from business.hours.
    status_rules: dict[str, tuple[float, float] | None] = Field(default_factory=dict)

    _day_rules: dict[str, DayRule] = PrivateAttr(default_factory=dict)

    @field_validator("status_rules")
    @classmethod
    def check_status_rules(
        cls, v: dict[str, tuple[float, float] | None]
    ) -> dict[str, tuple[float, float] | None]:
        for day, window in v.items():
            if day not in WEEKDAYS:
                raise ValueError(f"status_rules: unknown weekday {day!r}")
            if window is None:
                continue
            open_hour, close_hour = window
            if not (0 <= open_hour < close_hour <= 24):
                raise ValueError(
                    f"status_rules.{day}: need 0 <= open < close <= 24, got {list(window)}"
                )
        return v

    @model_validator(mode="after")
    def check_unique_slugs(self) -> "SiteConfig":
        slugs = [service.slug for service in self.services]
        duplicates = sorted({slug for slug in slugs if slugs.count(slug) > 1})
        if duplicates:
            raise ValueError(f"Duplicate service slugs: {', '.join(duplicates)}")
        return self

    @model_validator(mode="after")
    def derive_rules(self) -> "SiteConfig":
        for day, window in self.status_rules.items():
            if window is not None and self.business.hours[day] == CLOSED:
                logger.warning(
                    f"status_rules.{day} has no effect: {day} is marked Closed in business.hours"
                )
        overrides = {
            day: None if window is None else DayRule(open_hour=window[0], close_hour=window[1])
            for day, window in self.status_rules.items()
        }
        self._day_rules = derive_day_rules(self.business.hours, overrides)
        return self

    def day_rules(self) -> dict[str, DayRule]:
        """Open-status rule table, derived from the display hours at load time."""
        return dict(self._day_rules)
