"""HTTP implementation of the scraping service contract using httpx."""

import asyncio
import logging
from typing import Any

import httpx

from news_scraper.data import Article
from news_scraper.errors import (
    NoResponse,
    ScrapeError,
    ScrapeServiceError,
    SendFailure,
    StructuredError,
)

logger = logging.getLogger(__name__)


class HttpScrapeService:
    """Talk to the scraping service over HTTP.

    Endpoints, relative to ``base_url``:

    - ``GET /test``: liveness probe, any 2xx means alive.
    - ``POST /scrape`` with ``{"url": ...}``: returns ``{"news": [...]}`` or,
      with a non-2xx status, ``{"error": "..."}``.

    Redirects are followed. ``timeout`` bounds the whole exchange, not just
    each connect or read.

    Args:
        base_url: Base URL of the service (e.g. ``http://localhost:5000/api``).
        timeout: Timeout in seconds applied to every request (default 30).
        transport: Optional httpx transport, used instead of the network.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not base_url:
            raise ValueError("Scraping service base URL required.")
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._timeout, follow_redirects=True, transport=self._transport
        )

    async def ping(self) -> bool:
        """Return True if ``GET /test`` answers with a 2xx status."""
        url = f"{self._base_url}/test"
        logger.info("Checking server status at %s", url)
        try:
            async with asyncio.timeout(self._timeout):
                async with self._client() as client:
                    response = await client.get(url)
                    response.raise_for_status()
        except TimeoutError:
            logger.warning("Server check timed out after %ss", self._timeout)
            return False
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Server check failed: %s", e)
            return False
        logger.info("Server response: %s", response.text)
        return True

    async def scrape(self, url: str) -> list[Article]:
        """Submit ``url`` to ``POST /scrape`` and parse the returned articles.

        Raises:
            ScrapeServiceError: With a ``StructuredError``, ``NoResponse`` or
                ``SendFailure`` describing what went wrong.
        """
        endpoint = f"{self._base_url}/scrape"
        logger.info("Sending request to: %s", endpoint)
        try:
            async with asyncio.timeout(self._timeout):
                async with self._client() as client:
                    response = await client.post(endpoint, json={"url": url})
                    response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL, TimeoutError) as e:
            error = classify_exception(e)
            logger.warning("Error scraping news from %s: %r", url, e)
            raise ScrapeServiceError(error) from e

        payload = _json_body(response)
        articles = parse_articles(payload)
        logger.info("Received %d articles from %s", len(articles), endpoint)
        return articles


def classify_exception(exc: Exception) -> ScrapeError:
    """Map an httpx exception onto an error variant.

    Precedence: a response with an error status, then a request that got no
    response, then a request that could not be sent at all.
    """
    if isinstance(exc, httpx.HTTPStatusError):
        body = _json_body(exc.response)
        message = body.get("error") if isinstance(body, dict) else None
        logger.error("Error response: %s", body if body else exc.response.text)
        return StructuredError(
            message=message if isinstance(message, str) and message else None,
            status_code=exc.response.status_code,
        )
    if isinstance(exc, TimeoutError):
        return NoResponse()
    if isinstance(exc, (httpx.UnsupportedProtocol, httpx.LocalProtocolError, httpx.InvalidURL)):
        return SendFailure(description=str(exc) or type(exc).__name__)
    if isinstance(exc, httpx.RequestError):
        return NoResponse()
    return SendFailure(description=str(exc) or type(exc).__name__)


def parse_articles(payload: Any) -> list[Article]:
    """Extract articles from a ``{"news": [...]}`` payload.

    A missing or non-list ``news`` field yields an empty list. Entries that
    are not usable articles are skipped.
    """
    if not isinstance(payload, dict):
        return []
    news = payload.get("news")
    if not isinstance(news, list):
        return []

    articles: list[Article] = []
    for item in news:
        if not isinstance(item, dict):
            logger.warning("Skipping non-object article entry: %r", item)
            continue
        try:
            articles.append(Article.from_payload(item))
        except ValueError as e:
            logger.warning("Skipping malformed article entry. Error: %s", e)
    return articles


def _json_body(response: httpx.Response) -> Any:
    """Decode a JSON body, returning an empty dict if it is not JSON."""
    try:
        return response.json()
    except ValueError:
        return {}
