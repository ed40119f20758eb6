"""Data models for the news scraper client."""

from news_scraper.data.models import (
    Article,
    ConnectivityStatus,
    SiteSuggestion,
    SortKey,
    ViewCriteria,
)

__all__ = [
    "Article",
    "ConnectivityStatus",
    "SiteSuggestion",
    "SortKey",
    "ViewCriteria",
]
