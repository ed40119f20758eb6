"""Tests for suggested sites and URL helpers."""

import pytest

from news_scraper.data import Article
from news_scraper.sites import SUGGESTED_SITES, find_site
from news_scraper.url import display_source, extract_domain


def test_suggested_sites() -> None:
    assert [s.name for s in SUGGESTED_SITES] == [
        "ABS-CBN News",
        "GMA News",
        "Rappler",
        "Inquirer",
        "Manila Bulletin",
        "CNN Philippines",
    ]
    assert all(s.url.startswith("https://") for s in SUGGESTED_SITES)


def test_find_site_by_name() -> None:
    assert find_site("  gma news ").url == "https://www.gmanetwork.com/news/"


def test_find_site_by_position() -> None:
    assert find_site(1).name == "ABS-CBN News"
    assert find_site("6").name == "CNN Philippines"


@pytest.mark.parametrize("key", [0, 7, "99", "Daily Planet"])
def test_find_site_missing(key: str | int) -> None:
    with pytest.raises(KeyError):
        find_site(key)


def test_extract_domain_strips_www() -> None:
    assert extract_domain("https://www.rappler.com/nation/story") == "rappler.com"


def test_extract_domain_keeps_subdomain() -> None:
    assert extract_domain("https://news.abs-cbn.com/") == "news.abs-cbn.com"


def test_extract_domain_unknown() -> None:
    assert extract_domain("not a url") == "Unknown"


def test_display_source_prefers_source() -> None:
    article = Article(title="T", url="https://www.rappler.com/x", source="Rappler")
    assert display_source(article) == "Rappler"


def test_display_source_falls_back_to_domain() -> None:
    article = Article(title="T", url="https://www.rappler.com/x")
    assert display_source(article) == "rappler.com"
