"""Tests for RunLogger and serialization helpers."""

import json
from pathlib import Path

from news_scraper.data import Article, ConnectivityStatus
from news_scraper.errors import SendFailure, StructuredError
from news_scraper.run_logger import RunLogger, _serialize

# -- _serialize tests --


def test_serialize_none() -> None:
    assert _serialize(None) is None


def test_serialize_primitive() -> None:
    assert _serialize(42) == 42
    assert _serialize("hello") == "hello"
    assert _serialize(True) is True


def test_serialize_enum() -> None:
    assert _serialize(ConnectivityStatus.OFFLINE) == "offline"


def test_serialize_tuple_of_articles() -> None:
    article = Article(title="Headline", url="https://example.com/a", date="2024-01-10")
    result = _serialize((article,))
    assert result == [
        {
            "title": "Headline",
            "url": "https://example.com/a",
            "author": "Unknown",
            "date": "2024-01-10",
            "source": "",
            "image_url": None,
        }
    ]


def test_serialize_error_variant_is_tagged() -> None:
    assert _serialize(StructuredError(message="nope", status_code=500)) == {
        "type": "StructuredError",
        "message": "nope",
        "status_code": 500,
    }


def test_serialize_path() -> None:
    assert _serialize(Path("/tmp/logs")) == "/tmp/logs"


# -- RunLogger tests --


def test_disabled_logger_is_noop(tmp_path: Path) -> None:
    run_logger = RunLogger(log_dir=tmp_path, enabled=False)
    run_logger.start_run("http://localhost:5000/api")
    run_logger.log_request(
        1,
        "https://example.com",
        article_count=3,
        error=None,
        superseded=False,
        duration_seconds=0.1,
    )
    assert run_logger.finish_run(3) is None
    assert list(tmp_path.iterdir()) == []


def test_finish_without_start_returns_none(tmp_path: Path) -> None:
    assert RunLogger(log_dir=tmp_path).finish_run(0) is None


def test_full_session_written(tmp_path: Path) -> None:
    log_dir = tmp_path / "nested" / "logs"
    run_logger = RunLogger(log_dir=log_dir)
    run_logger.start_run("http://localhost:5000/api")
    run_logger.log_connectivity(ConnectivityStatus.ONLINE)
    run_logger.log_request(
        1,
        "https://example.com",
        article_count=0,
        error=None,
        superseded=True,
        duration_seconds=0.123456,
    )
    run_logger.log_request(
        2,
        "ftp://example.com",
        article_count=0,
        error=SendFailure(description="unsupported protocol"),
        superseded=False,
        duration_seconds=0.01,
    )

    path = run_logger.finish_run(0)

    assert path is not None
    assert path == run_logger.last_log_path
    assert path.parent == log_dir
    assert path.name.startswith("session_")
    assert path.suffix == ".json"

    data = json.loads(path.read_text())
    assert data["connectivity"] == "online"
    assert data["completed_at"] is not None
    first, second = data["requests"]
    assert first["outcome"] == "empty"
    assert first["superseded"] is True
    assert first["duration_seconds"] == 0.1235
    assert second["outcome"] == "error"
    assert second["error"] == {"type": "SendFailure", "description": "unsupported protocol"}
    assert second["error_message"] == "Error: unsupported protocol"
