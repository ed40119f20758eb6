"""Filtered and sorted projection of the current result set."""

import logging
import unicodedata
from collections.abc import Sequence
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime

from news_scraper.data import Article, SortKey, ViewCriteria

logger = logging.getLogger(__name__)

# Formats commonly found on news sites, tried after ISO 8601 and RFC 2822.
_DATE_PATTERNS = (
    "%B %d, %Y",
    "%b %d, %Y",
    "%b. %d, %Y",
    "%B %d, %Y %I:%M %p",
    "%b %d, %Y %I:%M %p",
    "%B %d, %Y, %I:%M %p",
    "%d %B %Y",
    "%d %b %Y",
    "%Y/%m/%d",
    "%m/%d/%Y",
)


def derive_view(articles: Sequence[Article], criteria: ViewCriteria) -> list[Article]:
    """Compute the articles to show for the given filter and sort criteria.

    Pure function: the input sequence is never modified and equal inputs
    always produce the same ordering.

    Args:
        articles: Current result set, in the order the service returned it.
        criteria: Filter keyword and sort key.

    Returns:
        A new list with the matching articles in display order.
    """
    matching = [a for a in articles if matches_keyword(a, criteria.filter_keyword)]
    if criteria.sort_key == SortKey.DATE:
        return sort_by_date(matching)
    if criteria.sort_key == SortKey.TITLE:
        return sorted(matching, key=lambda a: title_sort_key(a.title))
    msg = f"Unknown sort key: {criteria.sort_key}"
    raise ValueError(msg)


def matches_keyword(article: Article, keyword: str) -> bool:
    """Case-insensitive substring match against title or author."""
    if keyword == "":
        return True
    needle = keyword.casefold()
    return needle in article.title.casefold() or needle in article.author.casefold()


def sort_by_date(articles: Sequence[Article]) -> list[Article]:
    """Most recent first.

    Articles whose date cannot be parsed are treated as the earliest and go
    last, keeping their relative order.
    """
    dated: list[tuple[float, Article]] = []
    undated: list[Article] = []
    for article in articles:
        timestamp = parse_date(article.date)
        if timestamp is None:
            undated.append(article)
        else:
            dated.append((timestamp, article))

    # stable even with reverse=True, so ties keep input order
    dated.sort(key=lambda pair: pair[0], reverse=True)
    return [article for _, article in dated] + undated


def title_sort_key(title: str) -> tuple[str, str, str]:
    """Collation key approximating a locale-aware comparison.

    Compares case- and accent-insensitively first, then accent-sensitively,
    then puts lowercase before uppercase.
    """
    folded = unicodedata.normalize("NFKD", title.casefold())
    base = "".join(c for c in folded if not unicodedata.combining(c))
    return (base, folded, title.swapcase())


def parse_date(value: str) -> float | None:
    """Parse a publication date of unknown format into a POSIX timestamp.

    Tries ISO 8601, then RFC 2822, then a few common human-readable formats.
    Naive values are taken as UTC.

    Returns:
        The timestamp, or None if the value could not be parsed.
    """
    text = value.strip() if value else ""
    if not text:
        return None

    dt = _parse_datetime(text)
    if dt is None:
        logger.debug("Could not parse date '%s'", text)
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.timestamp()


def _parse_datetime(text: str) -> datetime | None:
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        pass

    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        pass

    for pattern in _DATE_PATTERNS:
        try:
            return datetime.strptime(text, pattern)
        except ValueError:
            continue
    return None
