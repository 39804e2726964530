"""Error types and failure policies for documentation retrieval."""

from enum import Enum


class FetchError(Exception):
    """Base error for anything that goes wrong talking to the documentation site."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class RetrievalError(FetchError):
    """The site could not be reached or answered with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message, status_code=status_code, details=details)
        self.body = body


class ParseError(FetchError):
    """A response body could not be parsed as the expected format."""


class FailurePolicy(str, Enum):
    """What an extraction step does with a ``FetchError``.

    SWALLOW degrades to an empty result and logs a warning; SURFACE re-raises.
    """

    SWALLOW = "swallow"
    SURFACE = "surface"


__all__ = ["FetchError", "RetrievalError", "ParseError", "FailurePolicy"]
