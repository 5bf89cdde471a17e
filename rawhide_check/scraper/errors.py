"""Exceptions raised by the scraper pipeline.

A missing page (HTTP 404) and an empty or partial version table are *not*
errors; they surface as ``None`` / ``[]`` and are reported as "missing".
"""

from __future__ import annotations


class ScrapeError(Exception):
    """Base class for every scraper failure."""


class FetchError(ScrapeError):
    """A single page could not be fetched."""


class TransportError(FetchError):
    """The request never produced a response (DNS, connect, timeout, ...)."""


class HttpError(FetchError):
    """The server answered with an error status other than 404."""

    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"HTTP {status_code} for {url}")
        self.status_code = status_code
        self.url = url


class NotABaseError(ScrapeError):
    """The configured base URL cannot take extra path segments."""

    def __init__(self, url: str) -> None:
        super().__init__(f"not a base URL: {url!r}")
        self.url = url


class SelectorError(ScrapeError):
    """A CSS selector failed to compile."""
