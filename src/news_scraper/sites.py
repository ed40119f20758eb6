"""Built-in news sites offered as quick picks for the URL field."""

from news_scraper.data import SiteSuggestion

SUGGESTED_SITES: tuple[SiteSuggestion, ...] = (
    SiteSuggestion(
        name="ABS-CBN News",
        url="https://news.abs-cbn.com/",
        description="Philippine news and current events",
    ),
    SiteSuggestion(
        name="GMA News",
        url="https://www.gmanetwork.com/news/",
        description="Latest Philippine news",
    ),
    SiteSuggestion(
        name="Rappler",
        url="https://www.rappler.com/",
        description="Philippine news and analysis",
    ),
    SiteSuggestion(
        name="Inquirer",
        url="https://newsinfo.inquirer.net/",
        description="Philippine daily news",
    ),
    SiteSuggestion(
        name="Manila Bulletin",
        url="https://mb.com.ph/",
        description="Philippine news and information",
    ),
    SiteSuggestion(
        name="CNN Philippines",
        url="https://www.cnnphilippines.com/",
        description="Latest news and updates",
    ),
)


def find_site(
    key: str | int,
    sites: tuple[SiteSuggestion, ...] = SUGGESTED_SITES,
) -> SiteSuggestion:
    """Look up a suggested site by 1-based position or case-insensitive name.

    Raises:
        KeyError: If no site matches.
    """
    if isinstance(key, int) or key.isdigit():
        index = int(key) - 1
        if 0 <= index < len(sites):
            return sites[index]
        raise KeyError(f"No suggested site at position {key}")

    wanted = key.strip().casefold()
    for site in sites:
        if site.name.casefold() == wanted:
            return site
    raise KeyError(f"No suggested site named {key!r}")
