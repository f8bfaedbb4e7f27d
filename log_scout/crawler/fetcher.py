# log_scout/crawler/fetcher.py
"""
Fetcher module: plain HTTP GETs for listing pages and candidate files.

No retries and no rate limiting; the timeout is whatever the session was
created with.
"""
from __future__ import annotations

import asyncio
import logging
from urllib.parse import urlparse

from aiohttp import ClientError, ClientSession, InvalidURL
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from log_scout.crawler.errors import NetworkError, ParseError, RequestConstructionError


class Fetcher:
    """Retrieves listing documents and raw file text over one aiohttp session."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session
        self.logger = logging.getLogger("LogScout")

    async def fetch_document(self, url: str) -> BeautifulSoup:
        """
        GET *url* and parse the body as HTML.

        Raises a FetchError subclass on any failure.
        """
        markup = await self._get(url)
        try:
            return BeautifulSoup(markup, "html.parser")
        except ParserRejectedMarkup as exc:
            raise ParseError(url, exc) from exc

    async def fetch_text(self, url: str) -> str:
        """GET *url* and return the full body as text."""
        return await self._get(url)

    async def _get(self, url: str) -> str:
        try:
            parsed = urlparse(url)
        except ValueError as exc:
            raise RequestConstructionError(url, exc) from exc
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise RequestConstructionError(url, "expected an absolute http(s) URL")

        try:
            async with self.session.get(url) as resp:
                if resp.status != 200:
                    self.logger.debug("GET %s -> HTTP %s", url, resp.status)
                return await resp.text(errors="replace")
        except (InvalidURL, ValueError) as exc:
            raise RequestConstructionError(url, exc) from exc
        except (ClientError, asyncio.TimeoutError, OSError) as exc:
            raise NetworkError(url, exc) from exc
