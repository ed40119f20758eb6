"""Session logger recording scrape requests to a JSON file."""

import dataclasses
import uuid
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from news_scraper.errors import ScrapeError, error_message


class RequestRecord(BaseModel):
    """Record of a single scrape submission."""

    request_id: int
    url: str
    outcome: str
    article_count: int = 0
    error: dict[str, Any] | None = None
    error_message: str | None = None
    superseded: bool = False
    timestamp: str = ""
    duration_seconds: float = 0.0


class SessionRecord(BaseModel):
    """Record of a complete client session."""

    session_id: str
    service_url: str
    started_at: str
    completed_at: str | None = None
    connectivity: str | None = None
    requests: list[RequestRecord] = []
    final_article_count: int = 0


def _serialize(obj: Any) -> Any:
    """Serialize an object to JSON-compatible format.

    Handles dataclasses, Pydantic models, enums, lists, tuples, dicts, and
    primitives. Error variants get a ``type`` key naming the variant.
    """
    if obj is None:
        return None
    if isinstance(obj, Enum):
        return obj.value
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        data = {k: _serialize(v) for k, v in dataclasses.asdict(obj).items()}
        if isinstance(obj, ScrapeError):
            data = {"type": type(obj).__name__, **data}
        return data
    if isinstance(obj, BaseModel):
        return obj.model_dump()
    if isinstance(obj, list | tuple):
        return [_serialize(item) for item in obj]
    if isinstance(obj, dict):
        return {k: _serialize(v) for k, v in obj.items()}
    if isinstance(obj, Path):
        return str(obj)
    return obj


class RunLogger:
    """Accumulates request records for a session and writes them as JSON.

    When ``enabled=False``, all methods are no-ops.

    Args:
        log_dir: Directory to write JSON log files.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._record: SessionRecord | None = None
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        """Whether logging is active."""
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the last written log file, or None."""
        return self._last_log_path

    def start_run(self, service_url: str) -> None:
        """Initialize a new session record.

        Args:
            service_url: Base URL of the scraping service in use.
        """
        if not self._enabled:
            return

        self._record = SessionRecord(
            session_id=str(uuid.uuid4()),
            service_url=service_url,
            started_at=datetime.now(tz=UTC).isoformat(),
        )

    def log_connectivity(self, status: str) -> None:
        """Store the outcome of the connectivity probe."""
        if not self._enabled or self._record is None:
            return
        self._record.connectivity = _serialize(status)

    def log_request(
        self,
        request_id: int,
        url: str,
        *,
        article_count: int,
        error: ScrapeError | None,
        superseded: bool,
        duration_seconds: float,
    ) -> None:
        """Append a request record to the current session.

        Args:
            request_id: Monotonic id of the submission.
            url: Submitted website URL.
            article_count: Number of articles the service returned.
            error: Classified error, or None on success.
            superseded: True if a newer submission had started by completion.
            duration_seconds: Wall-clock time for the request.
        """
        if not self._enabled or self._record is None:
            return

        if error is not None:
            outcome = "error"
        elif article_count == 0:
            outcome = "empty"
        else:
            outcome = "success"

        self._record.requests.append(
            RequestRecord(
                request_id=request_id,
                url=url,
                outcome=outcome,
                article_count=article_count,
                error=_serialize(error),
                error_message=error_message(error) if error is not None else None,
                superseded=superseded,
                timestamp=datetime.now(tz=UTC).isoformat(),
                duration_seconds=round(duration_seconds, 4),
            )
        )

    def finish_run(self, article_count: int) -> Path | None:
        """Write the session record to a JSON file.

        Args:
            article_count: Size of the result set when the session ended.

        Returns:
            Path to the written JSON file, or None if logging is disabled.
        """
        if not self._enabled or self._record is None:
            return None

        self._record.completed_at = datetime.now(tz=UTC).isoformat()
        self._record.final_article_count = article_count

        self._log_dir.mkdir(parents=True, exist_ok=True)

        # session_2026-02-12T14-30-00.json (colons -> dashes)
        ts = self._record.started_at.replace(":", "-")
        ts = ts.split(".")[0].split("+")[0]
        filename = f"session_{ts}.json"
        filepath = self._log_dir / filename

        filepath.write_text(self._record.model_dump_json(indent=2))
        self._last_log_path = filepath
        self._record = None
        return filepath
