"""Protocol for the remote scraping service."""

from typing import Protocol

from news_scraper.data import Article


class ScrapeService(Protocol):
    """Interface for the service that turns a website URL into articles."""

    @property
    def base_url(self) -> str:
        """Base URL the service endpoints are resolved against."""
        ...

    async def ping(self) -> bool:
        """Check whether the service is reachable.

        Returns:
            True if the liveness endpoint answered with a 2xx status.
        """
        ...

    async def scrape(self, url: str) -> list[Article]:
        """Ask the service to extract news articles from a website.

        Args:
            url: Website URL, passed to the service as-is.

        Returns:
            Articles found by the service, in the order it returned them.
            An empty list means the service succeeded but found nothing.

        Raises:
            ScrapeServiceError: If the call failed; carries the classified error.
        """
        ...
