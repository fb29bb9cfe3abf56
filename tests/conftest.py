from pathlib import Path

import pytest

from src.domain.entities import BusinessProfile
from src.rules.loader import load_site_config
from src.rules.models import SiteConfig

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def site_config_path() -> Path:
    """The real site.yaml shipped at the project root."""
    path = PROJECT_ROOT / "site.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Site config not found at {path}")
    return path


@pytest.fixture
def site_config(site_config_path: Path) -> SiteConfig:
    return load_site_config(site_config_path)


@pytest.fixture
def business(site_config: SiteConfig) -> BusinessProfile:
    return site_config.business
