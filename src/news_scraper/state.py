"""Session state and the reducer that drives every transition.

All mutable session data lives in one frozen ``SessionState``. Components
never edit it in place: they describe what happened with an event and
``reduce`` returns the next state.
"""

from dataclasses import dataclass, field, replace

from news_scraper.data import Article, ConnectivityStatus, SortKey, ViewCriteria
from news_scraper.errors import EmptyResult, InvalidInput, ScrapeError, ServerOffline


@dataclass(frozen=True)
class SessionState:
    """Snapshot of everything a client session knows.

    ``error_id`` increases each time a new error is surfaced, so a timer
    started for one error never dismisses a later one.
    """

    connectivity: ConnectivityStatus = ConnectivityStatus.CHECKING
    url: str = ""
    loading: bool = False
    articles: tuple[Article, ...] = ()
    error: ScrapeError | None = None
    error_id: int = 0
    criteria: ViewCriteria = field(default_factory=ViewCriteria)
    latest_request_id: int = 0


# ============================================================
# Events
# ============================================================


@dataclass(frozen=True)
class ProbeCompleted:
    status: ConnectivityStatus


@dataclass(frozen=True)
class UrlChanged:
    url: str


@dataclass(frozen=True)
class ValidationFailed:
    error: InvalidInput


@dataclass(frozen=True)
class ScrapeStarted:
    request_id: int


@dataclass(frozen=True)
class ScrapeSucceeded:
    request_id: int
    articles: tuple[Article, ...]


@dataclass(frozen=True)
class ScrapeFailed:
    request_id: int
    error: ScrapeError


@dataclass(frozen=True)
class ScrapeAbandoned:
    """The request ended without an outcome (e.g. its task was cancelled)."""

    request_id: int


@dataclass(frozen=True)
class FilterChanged:
    keyword: str


@dataclass(frozen=True)
class SortChanged:
    sort_key: SortKey


@dataclass(frozen=True)
class ErrorDismissed:
    pass


@dataclass(frozen=True)
class ErrorExpired:
    error_id: int


Event = (
    ProbeCompleted
    | UrlChanged
    | ValidationFailed
    | ScrapeStarted
    | ScrapeSucceeded
    | ScrapeFailed
    | ScrapeAbandoned
    | FilterChanged
    | SortChanged
    | ErrorDismissed
    | ErrorExpired
)


def reduce(state: SessionState, event: Event) -> SessionState:
    """Return the state that follows ``state`` once ``event`` has happened.

    Returns ``state`` itself when the event changes nothing, e.g. a completion
    for a request that has since been superseded.
    """
    if isinstance(event, ProbeCompleted):
        if state.connectivity != ConnectivityStatus.CHECKING:
            return state
        if event.status == ConnectivityStatus.OFFLINE:
            return _with_error(replace(state, connectivity=event.status), ServerOffline())
        return replace(state, connectivity=event.status)

    if isinstance(event, UrlChanged):
        return replace(state, url=event.url)

    if isinstance(event, ValidationFailed):
        return _with_error(state, event.error)

    if isinstance(event, ScrapeStarted):
        return replace(
            state,
            loading=True,
            error=None,
            articles=(),
            latest_request_id=event.request_id,
        )

    if isinstance(event, (ScrapeSucceeded, ScrapeFailed, ScrapeAbandoned)):
        if event.request_id != state.latest_request_id:
            return state
        done = replace(state, loading=False)
        if isinstance(event, ScrapeSucceeded):
            if not event.articles:
                return _with_error(replace(done, articles=()), EmptyResult())
            return replace(done, articles=event.articles)
        if isinstance(event, ScrapeFailed):
            return _with_error(done, event.error)
        return done

    if isinstance(event, FilterChanged):
        return replace(state, criteria=replace(state.criteria, filter_keyword=event.keyword))

    if isinstance(event, SortChanged):
        return replace(state, criteria=replace(state.criteria, sort_key=event.sort_key))

    if isinstance(event, ErrorDismissed):
        if state.error is None:
            return state
        return replace(state, error=None)

    if isinstance(event, ErrorExpired):
        if state.error is None or event.error_id != state.error_id:
            return state
        return replace(state, error=None)

    msg = f"Unknown event type: {type(event)}"
    raise ValueError(msg)


def _with_error(state: SessionState, error: ScrapeError) -> SessionState:
    return replace(state, error=error, error_id=state.error_id + 1)
