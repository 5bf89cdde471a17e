"""HTTP fetcher for per-package pages on the package tracker."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Optional
from urllib.parse import quote

import httpx

from rawhide_check.config import settings
from rawhide_check.scraper.errors import HttpError, NotABaseError, TransportError

logger = logging.getLogger(__name__)

_BASE_SCHEMES = ("http", "https")


def _parse_base(base_url: str) -> httpx.URL:
    """Parse *base_url*, rejecting anything that cannot take path segments."""
    try:
        url = httpx.URL(base_url)
    except httpx.InvalidURL as exc:
        raise NotABaseError(base_url) from exc
    _require_base(url)
    return url


def _require_base(url: httpx.URL) -> None:
    if url.scheme not in _BASE_SCHEMES or not url.host:
        raise NotABaseError(str(url))


def join_segments(base: httpx.URL, *segments: str) -> httpx.URL:
    """Append *segments* to the path of *base*, one path segment each.

    Every segment is percent-encoded so that ``/``, ``?`` or ``#`` inside a
    package name can never change the shape of the URL.

    Raises:
        NotABaseError: If *base* is not an absolute ``http(s)`` URL.
    """
    _require_base(base)
    path = base.path.rstrip("/")
    for segment in segments:
        path += "/" + quote(segment, safe="")
    return base.copy_with(path=path)


class PageFetcher:
    """Fetch package pages below a fixed base URL.

    The fetcher shares one :class:`httpx.AsyncClient` across all calls.  A
    client passed in by the caller is left open; one created here is closed by
    :meth:`aclose` (or by leaving the ``async with`` block).
    """

    def __init__(
        self,
        base_url: str | None = None,
        client: Optional[httpx.AsyncClient] = None,
        *,
        timeout: float | None = None,
        user_agent: str | None = None,
    ) -> None:
        self.base_url = _parse_base(base_url if base_url is not None else settings.base_url)
        self._owns_client = client is None
        if client is None:
            client = httpx.AsyncClient(
                headers={"User-Agent": user_agent or settings.user_agent},
                timeout=timeout if timeout is not None else settings.request_timeout,
                follow_redirects=True,
            )
        self._client = client

    async def __aenter__(self) -> PageFetcher:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def fetch(self, primary: str, secondary: str) -> str | None:
        """GET ``{base}/{primary}/{secondary}`` and return the page body.

        Returns:
            The response text, or ``None`` when the server answers 404.

        Raises:
            NotABaseError: If the base URL cannot take path segments.
            HttpError: For any other 4xx/5xx (or unresolved 3xx) status.
            TransportError: If no usable response was received (connection
                failures, timeouts, redirect loops, undecodable bodies).
        """
        url = join_segments(self.base_url, primary, secondary)
        logger.debug("GET %s", url)

        try:
            response = await self._client.get(url)
        except httpx.RequestError as exc:
            raise TransportError(f"request to {url} failed: {exc}") from exc

        logger.debug("HTTP %s for %s", response.status_code, url)
        if response.status_code == httpx.codes.NOT_FOUND:
            return None

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise HttpError(response.status_code, str(url)) from exc

        return response.text
