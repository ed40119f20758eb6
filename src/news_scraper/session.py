"""Client session: connectivity probe, scrape lifecycle and the derived view."""

import asyncio
import itertools
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from news_scraper.client.base import ScrapeService
from news_scraper.data import Article, ConnectivityStatus, SiteSuggestion, SortKey, ViewCriteria
from news_scraper.errors import (
    SERVER_OFFLINE_MESSAGE,
    InvalidInput,
    ScrapeError,
    ScrapeServiceError,
    SendFailure,
    error_message,
)
from news_scraper.prober import ConnectivityProber
from news_scraper.run_logger import RunLogger
from news_scraper.sites import SUGGESTED_SITES, find_site
from news_scraper.state import (
    ErrorDismissed,
    ErrorExpired,
    Event,
    FilterChanged,
    ProbeCompleted,
    ScrapeAbandoned,
    ScrapeFailed,
    ScrapeStarted,
    ScrapeSucceeded,
    SessionState,
    SortChanged,
    UrlChanged,
    ValidationFailed,
    reduce,
)
from news_scraper.view import derive_view

logger = logging.getLogger(__name__)

NO_URL_DISPLAY = "No URL entered"


@dataclass(frozen=True)
class Snapshot:
    """Everything a UI needs to render the session."""

    connectivity_status: ConnectivityStatus
    loading: bool
    error_message: str | None
    visible_articles: tuple[Article, ...]
    total_articles: int
    url: str
    criteria: ViewCriteria

    @property
    def connectivity_notice(self) -> str | None:
        """Persistent banner text while the server is known to be offline."""
        if self.connectivity_status == ConnectivityStatus.OFFLINE:
            return SERVER_OFFLINE_MESSAGE
        return None

    @property
    def can_scrape(self) -> bool:
        return not self.loading and bool(self.url)

    @property
    def controls_enabled(self) -> bool:
        """Filter and sort controls only apply once there are results."""
        return self.total_articles > 0

    @property
    def url_display(self) -> str:
        return self.url or NO_URL_DISPLAY


Listener = Callable[[Snapshot], None]


class ScrapeSession:
    """Single-user session against a scraping service.

    Holds one ``SessionState`` and moves it forward through ``reduce``. Each
    scrape submission gets a monotonic request id; a completion whose id is
    not the latest one issued is dropped, so the last submitted request
    always wins.

    Args:
        service: Scraping service to talk to.
        criteria: Initial filter and sort settings.
        run_logger: Optional RunLogger recording each submission.
        error_auto_hide_seconds: Dismiss an error after this many seconds
            unless a newer one replaced it. None disables it.
        sites: Suggested sites offered by :meth:`select_site`.
    """

    def __init__(
        self,
        service: ScrapeService,
        *,
        criteria: ViewCriteria | None = None,
        run_logger: RunLogger | None = None,
        error_auto_hide_seconds: float | None = None,
        sites: tuple[SiteSuggestion, ...] = SUGGESTED_SITES,
    ) -> None:
        self._service = service
        self._prober = ConnectivityProber(service)
        self._state = SessionState(criteria=criteria or ViewCriteria())
        self._run_logger = run_logger
        self._error_auto_hide = error_auto_hide_seconds
        self._sites = sites
        self._request_ids = itertools.count(1)
        self._listeners: list[Listener] = []
        self._hide_timer: asyncio.TimerHandle | None = None
        self._view_cache: tuple[tuple[Article, ...], ViewCriteria, tuple[Article, ...]] | None
        self._view_cache = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def sites(self) -> tuple[SiteSuggestion, ...]:
        return self._sites

    # -- Presentation boundary --

    def snapshot(self) -> Snapshot:
        """Build the current presentation snapshot."""
        state = self._state
        return Snapshot(
            connectivity_status=state.connectivity,
            loading=state.loading,
            error_message=error_message(state.error) if state.error is not None else None,
            visible_articles=self.visible_articles(),
            total_articles=len(state.articles),
            url=state.url,
            criteria=state.criteria,
        )

    def visible_articles(self) -> tuple[Article, ...]:
        """Filtered and sorted view, recomputed only when its inputs change."""
        articles, criteria = self._state.articles, self._state.criteria
        cached = self._view_cache
        if cached is not None and cached[0] is articles and cached[1] == criteria:
            return cached[2]
        view = tuple(derive_view(articles, criteria))
        self._view_cache = (articles, criteria, view)
        return view

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with a fresh snapshot after every state change.

        Returns:
            A function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -- Input actions --

    async def start(self) -> ConnectivityStatus:
        """Run the one-time connectivity probe and record its outcome."""
        if self._run_logger:
            self._run_logger.start_run(self._service.base_url)

        status = await self._prober.probe()
        self._dispatch(ProbeCompleted(status=status))
        if self._run_logger:
            self._run_logger.log_connectivity(self._state.connectivity)
        return self._state.connectivity

    def set_url(self, url: str) -> None:
        self._dispatch(UrlChanged(url=url))

    def select_site(self, key: str | int) -> SiteSuggestion:
        """Put a suggested site's URL in the URL field.

        Raises:
            KeyError: If no suggested site matches ``key``.
        """
        site = find_site(key, self._sites)
        self.set_url(site.url)
        return site

    async def trigger_scrape(self) -> None:
        """Submit the URL currently held in the session."""
        await self.submit(self._state.url)

    async def submit(self, url: str) -> None:
        """Scrape ``url`` and store the outcome.

        Empty or whitespace-only input only sets a validation error. Otherwise
        the previous results and error are cleared, the service is called,
        and the result set or a classified error replaces them, unless a
        newer submission started in the meantime.
        """
        if not url or not url.strip():
            self._dispatch(ValidationFailed(error=InvalidInput()))
            return

        request_id = next(self._request_ids)
        t0 = time.monotonic()
        event: ScrapeSucceeded | ScrapeFailed | ScrapeAbandoned = ScrapeAbandoned(request_id)
        try:
            self._dispatch(ScrapeStarted(request_id=request_id))
            articles = await self._service.scrape(url)
            event = ScrapeSucceeded(request_id=request_id, articles=tuple(articles))
        except ScrapeServiceError as e:
            event = ScrapeFailed(request_id=request_id, error=e.error)
        except Exception as e:
            logger.exception("Unexpected error scraping %s", url)
            event = ScrapeFailed(request_id=request_id, error=SendFailure(description=str(e)))
        finally:
            superseded = request_id != self._state.latest_request_id
            if superseded:
                logger.info("Discarding outcome of superseded request %d", request_id)
            self._dispatch(event)
            self._log_request(event, url, superseded, time.monotonic() - t0)

    def set_filter_keyword(self, keyword: str) -> None:
        self._dispatch(FilterChanged(keyword=keyword))

    def set_sort_key(self, sort_key: SortKey | str) -> None:
        self._dispatch(SortChanged(sort_key=SortKey(sort_key)))

    def dismiss_error(self) -> None:
        self._dispatch(ErrorDismissed())

    def close(self) -> None:
        """Stop pending timers and flush the run log."""
        if self._hide_timer is not None:
            self._hide_timer.cancel()
            self._hide_timer = None
        if self._run_logger:
            self._run_logger.finish_run(len(self._state.articles))

    # -- Internals --

    def _dispatch(self, event: Event) -> None:
        previous = self._state
        self._state = reduce(previous, event)
        if self._state is previous:
            return

        if self._state.error is not None and self._state.error_id != previous.error_id:
            logger.info("Error: %s", error_message(self._state.error))
            self._schedule_auto_hide(self._state.error_id)

        snapshot = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Session listener %r failed", listener)

    def _schedule_auto_hide(self, error_id: int) -> None:
        if self._error_auto_hide is None:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return
        if self._hide_timer is not None:
            self._hide_timer.cancel()
        self._hide_timer = loop.call_later(
            self._error_auto_hide, self._dispatch, ErrorExpired(error_id=error_id)
        )

    def _log_request(
        self,
        event: ScrapeSucceeded | ScrapeFailed | ScrapeAbandoned,
        url: str,
        superseded: bool,
        duration: float,
    ) -> None:
        if not self._run_logger:
            return
        error: ScrapeError | None = event.error if isinstance(event, ScrapeFailed) else None
        count = len(event.articles) if isinstance(event, ScrapeSucceeded) else 0
        self._run_logger.log_request(
            event.request_id,
            url,
            article_count=count,
            error=error,
            superseded=superseded,
            duration_seconds=duration,
        )
