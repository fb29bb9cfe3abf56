import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from src.adapters.clock import create_clock
from src.components.open_status import ClockPort
from src.components.render import RenderService, create_render_service
from src.rules.loader import load_site_config
from src.rules.models import SiteConfig


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.config_path = Path(
            os.environ.get("SITE_CONFIG_PATH", str(self.base_dir / "site.yaml"))
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Site Config ---
@lru_cache
def get_site_config() -> SiteConfig:
    return load_site_config(get_settings().config_path)


# --- Adapters ---
def get_clock(config: SiteConfig = Depends(get_site_config)) -> ClockPort:
    return create_clock(config.business.timezone)


# --- Services ---
def get_render_service(config: SiteConfig = Depends(get_site_config)) -> RenderService:
    return create_render_service(config.business)
