"""One-shot connectivity check against the scraping service."""

import logging

from news_scraper.client.base import ScrapeService
from news_scraper.data import ConnectivityStatus

logger = logging.getLogger(__name__)


class ConnectivityProber:
    """Check once whether the scraping service is reachable.

    The first call to :meth:`probe` hits the service's liveness endpoint.
    Later calls return the same terminal status without touching the network;
    there is no retry.

    Args:
        service: Scraping service to check.
    """

    def __init__(self, service: ScrapeService) -> None:
        self._service = service
        self._status = ConnectivityStatus.CHECKING

    @property
    def status(self) -> ConnectivityStatus:
        return self._status

    async def probe(self) -> ConnectivityStatus:
        """Return ``ONLINE`` if the service answered, ``OFFLINE`` otherwise."""
        if self._status != ConnectivityStatus.CHECKING:
            return self._status

        try:
            alive = await self._service.ping()
        except Exception:
            logger.warning("Server check raised, treating server as offline", exc_info=True)
            alive = False

        self._status = ConnectivityStatus.ONLINE if alive else ConnectivityStatus.OFFLINE
        logger.info("Server status: %s", self._status)
        return self._status
