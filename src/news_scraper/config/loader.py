"""YAML configuration loading utilities."""

from pathlib import Path

import yaml

from news_scraper.config.models import ScraperConfig


def load_config(path: Path | str) -> ScraperConfig:
    """Load configuration from YAML file.

    An empty file yields the defaults.

    Args:
        path: Path to YAML config file.

    Returns:
        Validated ScraperConfig.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        pydantic.ValidationError: If config is invalid.
    """
    path = Path(path)
    with path.open() as f:
        raw = yaml.safe_load(f)

    return ScraperConfig.model_validate(raw or {})


def get_default_config_path() -> Path:
    """Get path to default config file."""
    return Path(__file__).parent.parent.parent.parent / "configs" / "default.yaml"
