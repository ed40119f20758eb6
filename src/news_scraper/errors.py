"""Error variants surfaced through the session's error channel.

Every failure the client can meet is represented by one of the frozen
dataclasses below. ``error_message`` is the only place that turns a variant
into user-facing text.
"""

from dataclasses import dataclass

EMPTY_URL_MESSAGE = "Please enter a website URL"
SERVER_OFFLINE_MESSAGE = "Server is offline. Please make sure the server is running on port 5000."
EMPTY_RESULT_MESSAGE = (
    "No news articles found. The website might use a different structure or dynamic loading."
)
SCRAPE_FAILED_MESSAGE = "Failed to scrape news. Please try a different URL."
NO_RESPONSE_MESSAGE = "No response from server. Please make sure the server is running."


@dataclass(frozen=True)
class InvalidInput:
    """User input rejected before any network call."""

    message: str = EMPTY_URL_MESSAGE


@dataclass(frozen=True)
class ServerOffline:
    """The connectivity probe failed."""


@dataclass(frozen=True)
class EmptyResult:
    """The service answered but found no articles."""


@dataclass(frozen=True)
class StructuredError:
    """The service answered with an error status.

    ``message`` is the ``error`` field of the response body, if it had one.
    """

    message: str | None = None
    status_code: int | None = None


@dataclass(frozen=True)
class NoResponse:
    """The request was sent but no response arrived (network error or timeout)."""


@dataclass(frozen=True)
class SendFailure:
    """The request could not be built or sent."""

    description: str


ScrapeError = (
    InvalidInput | ServerOffline | EmptyResult | StructuredError | NoResponse | SendFailure
)


class ScrapeServiceError(Exception):
    """Raised by a scrape service when a call fails; carries the classified error."""

    def __init__(self, error: ScrapeError) -> None:
        super().__init__(error_message(error))
        self.error = error


def error_message(error: ScrapeError) -> str:
    """Render an error variant as the text shown to the user."""
    if isinstance(error, InvalidInput):
        return error.message
    if isinstance(error, ServerOffline):
        return SERVER_OFFLINE_MESSAGE
    if isinstance(error, EmptyResult):
        return EMPTY_RESULT_MESSAGE
    if isinstance(error, StructuredError):
        return error.message or SCRAPE_FAILED_MESSAGE
    if isinstance(error, NoResponse):
        return NO_RESPONSE_MESSAGE
    if isinstance(error, SendFailure):
        return f"Error: {error.description}"
    msg = f"Unknown error type: {type(error)}"
    raise ValueError(msg)
