"""Factory functions to create components from configuration."""

from pathlib import Path
from typing import Literal

from news_scraper.client.http import HttpScrapeService
from news_scraper.config.models import ScraperConfig, ServiceConfig
from news_scraper.data import ViewCriteria
from news_scraper.run_logger import RunLogger
from news_scraper.session import ScrapeSession


def create_service(config: ServiceConfig) -> HttpScrapeService:
    """Create the HTTP scraping service from config."""
    return HttpScrapeService(config.base_url, timeout=config.timeout_seconds)


def create_from_config(
    config: ScraperConfig,
    *,
    mode_override: Literal["development", "production"] | None = None,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[ScrapeSession, RunLogger | None]:
    """Create a complete client session from root config.

    Args:
        config: Root configuration.
        mode_override: Override the config's service.mode setting.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (session, run_logger).
        run_logger is None if logging is disabled.
    """
    service_config = config.service
    if mode_override is not None:
        service_config = service_config.model_copy(update={"mode": mode_override})

    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    run_logger: RunLogger | None = None
    if log_enabled:
        run_logger = RunLogger(log_dir=log_dir, enabled=True)

    session = ScrapeSession(
        create_service(service_config),
        criteria=ViewCriteria(sort_key=config.view.sort_key),
        run_logger=run_logger,
        error_auto_hide_seconds=config.view.error_auto_hide_seconds,
    )
    return (session, run_logger)
