"""Pydantic configuration models for the news scraper client."""

from typing import Literal

from pydantic import BaseModel, Field

from news_scraper.data import SortKey

# ============================================================
# Service Config
# ============================================================


class ServiceConfig(BaseModel):
    """Where the scraping service lives and how long to wait for it.

    In ``development`` mode the service is the local API server; in
    ``production`` it is the serverless function path on the deployed site.
    """

    mode: Literal["development", "production"] = "development"
    development_base_url: str = "http://localhost:5000/api"
    site_url: str = "http://localhost:8888"
    functions_path: str = "/.netlify/functions"
    timeout_seconds: float = Field(default=30.0, gt=0)

    model_config = {"frozen": True}

    @property
    def base_url(self) -> str:
        """Effective base URL for the current mode."""
        if self.mode == "production":
            return self.site_url.rstrip("/") + "/" + self.functions_path.strip("/")
        return self.development_base_url.rstrip("/")


# ============================================================
# View Config
# ============================================================


class ViewConfig(BaseModel):
    """Initial view settings and error display behaviour."""

    sort_key: SortKey = SortKey.DATE
    error_auto_hide_seconds: float | None = Field(default=6.0, gt=0)

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for per-session request logging."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class ScraperConfig(BaseModel):
    """Root configuration for the news scraper client."""

    service: ServiceConfig = Field(default_factory=ServiceConfig)
    view: ViewConfig = Field(default_factory=ViewConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
