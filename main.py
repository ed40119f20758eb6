#!/usr/bin/env python
"""CLI for the news scraper client."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, field_validator

from news_scraper.config import create_from_config, get_default_config_path, load_config
from news_scraper.data import ConnectivityStatus, SortKey
from news_scraper.session import ScrapeSession
from news_scraper.sites import SUGGESTED_SITES
from news_scraper.url import display_source

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    url: str | None = None
    site: str | None = None
    filter: str = ""
    sort: SortKey | None = None
    config: Path
    mode: Literal["development", "production"] | None = None
    log: bool = False
    log_dir: str = "logs"

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


def print_sites() -> None:
    """Print the suggested news sites."""
    print("\nSuggested news sites:\n")
    for i, site in enumerate(SUGGESTED_SITES, 1):
        print(f"{i}. {site.name} - {site.url}")
        print(f"   {site.description}")


def render(session: ScrapeSession) -> None:
    """Print the session's current view."""
    snapshot = session.snapshot()

    if snapshot.connectivity_notice:
        logger.warning(snapshot.connectivity_notice)
    if snapshot.error_message and snapshot.error_message != snapshot.connectivity_notice:
        logger.error(snapshot.error_message)
    if not snapshot.visible_articles:
        return

    print(
        f"\nShowing {len(snapshot.visible_articles)} of {snapshot.total_articles} articles "
        f"from {snapshot.url_display} (sorted by {snapshot.criteria.sort_key}):\n"
    )
    for i, article in enumerate(snapshot.visible_articles, 1):
        print(f"{i}. {article.title}")
        print(f"   By {article.author} | {article.date or 'No date'} | {display_source(article)}")
        print(f"   Read more: {article.url}")


async def run(args: CLIArgs) -> int:
    """Probe the service, scrape the requested site and print the results.

    Args:
        args: Validated CLI arguments.

    Returns:
        Process exit code.
    """
    config = load_config(args.config)
    session, run_logger = create_from_config(
        config,
        mode_override=args.mode,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir if args.log_dir != "logs" else None,
    )

    logger.info(f"Config: {args.config}")
    status = await session.start()

    if args.site:
        site = session.select_site(args.site)
        logger.info(f"Using suggested site: {site.name}")
    else:
        session.set_url(args.url or "")

    if args.sort is not None:
        session.set_sort_key(args.sort)
    session.set_filter_keyword(args.filter)

    if status == ConnectivityStatus.ONLINE:
        await session.trigger_scrape()
    render(session)
    session.close()

    if run_logger and run_logger.last_log_path:
        logger.info(f"\nSession log written to: {run_logger.last_log_path}")

    snapshot = session.snapshot()
    if snapshot.connectivity_status != ConnectivityStatus.ONLINE or not snapshot.total_articles:
        return 1
    return 0


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Scrape news articles from a website.")
    parser.add_argument(
        "url",
        nargs="?",
        help="Website URL to scrape",
    )
    parser.add_argument(
        "--site",
        help="Scrape a suggested site, by name or position (see --list-sites)",
    )
    parser.add_argument(
        "--list-sites",
        action="store_true",
        default=False,
        help="List the suggested news sites and exit",
    )
    parser.add_argument(
        "--filter",
        "-f",
        default="",
        help="Only show articles whose title or author contains this keyword",
    )
    parser.add_argument(
        "--sort",
        "-s",
        choices=[k.value for k in SortKey],
        default=None,
        help="Sort by date (newest first) or title (default: from config)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--mode",
        choices=["development", "production"],
        default=None,
        help="Deployment mode selecting the service base URL (default: from config)",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Write a JSON log of the session's requests",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for log files (default: logs/)",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    if ns.list_sites:
        print_sites()
        return

    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            url=ns.url,
            site=ns.site,
            filter=ns.filter,
            sort=ns.sort,
            config=config_path,
            mode=ns.mode,
            log=ns.log,
            log_dir=ns.log_dir,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        sys.exit(asyncio.run(run(args)))
    except KeyError as e:
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
