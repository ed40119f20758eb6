"""URL handling utilities."""

import logging
from urllib.parse import urlparse

from news_scraper.data import Article

logger = logging.getLogger(__name__)


def extract_domain(url: str) -> str:
    """Extract domain name from URL.

    Args:
        url: The URL to extract the domain from.

    Returns:
        The domain name (without 'www.' prefix), or "Unknown" if extraction fails.
    """
    try:
        domain = urlparse(url).netloc
    except ValueError:
        return "Unknown"
    if not domain:
        logger.warning(f"Could not get domain from url {url}")
        return "Unknown"
    if domain.startswith("www."):
        domain = domain[4:]
    return domain


def display_source(article: Article) -> str:
    """Source label for an article, falling back to its link's domain."""
    return article.source or extract_domain(article.url)
