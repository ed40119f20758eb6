from news_scraper.client.base import ScrapeService
from news_scraper.client.http import HttpScrapeService, classify_exception, parse_articles

__all__ = [
    "HttpScrapeService",
    "ScrapeService",
    "classify_exception",
    "parse_articles",
]
