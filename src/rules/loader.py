import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import SiteConfig

logger = logging.getLogger(__name__)


def parse_site_config(content: str) -> SiteConfig:
    """
    Parse and validate site configuration YAML text.
    Raises ValueError if the YAML or the schema is invalid.
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in site config: {e}") from e

    if not isinstance(data, dict):
        raise ValueError("Site config must be a YAML mapping at the top level")

    try:
        return SiteConfig.model_validate(data)
    except ValidationError as e:
        # Re-raise with a clear message for the caller/logs
        raise ValueError(f"Site config validation failed:\n{e}") from e


def load_site_config(path: Path) -> SiteConfig:
    """
    Load and validate the site configuration file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Site config not found at: {path}")

    with open(path, encoding="utf-8") as f:
        content = f.read()

    config = parse_site_config(content)
    logger.info(
        f"Site config loaded from {path}: {config.business.name}, "
        f"{len(config.services)} services, {len(config.day_rules())} open weekdays"
    )
    return config
