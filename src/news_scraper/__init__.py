"""News Scraper: client for a remote news scraping service."""

from news_scraper.client import HttpScrapeService, ScrapeService
from news_scraper.config import ScraperConfig, create_from_config, load_config
from news_scraper.data import Article, ConnectivityStatus, SiteSuggestion, SortKey, ViewCriteria
from news_scraper.errors import (
    EmptyResult,
    InvalidInput,
    NoResponse,
    ScrapeError,
    ScrapeServiceError,
    SendFailure,
    ServerOffline,
    StructuredError,
    error_message,
)
from news_scraper.prober import ConnectivityProber
from news_scraper.run_logger import RunLogger
from news_scraper.session import ScrapeSession, Snapshot
from news_scraper.sites import SUGGESTED_SITES, find_site
from news_scraper.state import SessionState, reduce
from news_scraper.url import display_source, extract_domain
from news_scraper.view import derive_view, parse_date

__all__ = [
    # Models
    "Article",
    "ConnectivityStatus",
    "SiteSuggestion",
    "SortKey",
    "ViewCriteria",
    # Errors
    "EmptyResult",
    "InvalidInput",
    "NoResponse",
    "ScrapeError",
    "ScrapeServiceError",
    "SendFailure",
    "ServerOffline",
    "StructuredError",
    "error_message",
    # Protocols
    "ScrapeService",
    # Services
    "HttpScrapeService",
    "ConnectivityProber",
    # Session
    "ScrapeSession",
    "SessionState",
    "Snapshot",
    "reduce",
    # Functions
    "derive_view",
    "display_source",
    "extract_domain",
    "find_site",
    "parse_date",
    "SUGGESTED_SITES",
    # Logging
    "RunLogger",
    # Config
    "ScraperConfig",
    "create_from_config",
    "load_config",
]
