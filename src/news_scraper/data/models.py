"""Core data models for the news scraper client."""

from dataclasses import dataclass
from enum import StrEnum


class ConnectivityStatus(StrEnum):
    """Reachability of the remote scraping service.

    Starts at ``CHECKING`` and moves exactly once to ``ONLINE`` or ``OFFLINE``.
    """

    CHECKING = "checking"
    ONLINE = "online"
    OFFLINE = "offline"


class SortKey(StrEnum):
    """Ordering applied to the visible articles."""

    DATE = "date"
    TITLE = "title"


@dataclass(frozen=True)
class Article:
    """A news article extracted by the remote scraping service."""

    title: str
    url: str
    author: str = "Unknown"
    date: str = ""
    source: str = ""
    image_url: str | None = None

    @classmethod
    def from_payload(cls, item: dict[str, object]) -> "Article":
        """Build an article from one entry of the service's ``news`` list.

        Raises:
            ValueError: If the entry has no title or no url.
        """
        title = item.get("title")
        url = item.get("url")
        if not isinstance(title, str) or not title.strip():
            raise ValueError(f"Article entry without a title: {item!r}")
        if not isinstance(url, str) or not url:
            raise ValueError(f"Article entry without a url: {item!r}")

        image_url = item.get("imageUrl")
        return cls(
            title=title,
            url=url,
            author=_text(item.get("author"), "Unknown"),
            date=_text(item.get("date"), ""),
            source=_text(item.get("source"), ""),
            image_url=image_url if isinstance(image_url, str) and image_url else None,
        )


@dataclass(frozen=True)
class ViewCriteria:
    """Filter and sort settings for the article view."""

    filter_keyword: str = ""
    sort_key: SortKey = SortKey.DATE


@dataclass(frozen=True)
class SiteSuggestion:
    """A news site offered as a quick pick for the URL field."""

    name: str
    url: str
    description: str


def _text(value: object, default: str) -> str:
    if value is None:
        return default
    return str(value)
