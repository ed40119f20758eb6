"""Configuration module for the news scraper client."""

from news_scraper.config.factory import create_from_config, create_service
from news_scraper.config.loader import get_default_config_path, load_config
from news_scraper.config.models import (
    LoggingConfig,
    ScraperConfig,
    ServiceConfig,
    ViewConfig,
)

__all__ = [
    "LoggingConfig",
    "ScraperConfig",
    "ServiceConfig",
    "ViewConfig",
    "create_from_config",
    "create_service",
    "get_default_config_path",
    "load_config",
]
