"""Scraper package — package page fetch & version table extraction."""

from rawhide_check.scraper.errors import (
    FetchError,
    HttpError,
    NotABaseError,
    ScrapeError,
    SelectorError,
    TransportError,
)
from rawhide_check.scraper.extractor import extract_versions
from rawhide_check.scraper.fetcher import PageFetcher
from rawhide_check.scraper.models import FetchTarget, VersionRecord

__all__ = [
    "PageFetcher",
    "extract_versions",
    "FetchTarget",
    "VersionRecord",
    "ScrapeError",
    "FetchError",
    "HttpError",
    "TransportError",
    "NotABaseError",
    "SelectorError",
]
