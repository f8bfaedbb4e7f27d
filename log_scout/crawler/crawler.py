# === FILE: log_scout/crawler/crawler.py ===
from __future__ import annotations

import logging
import time
from typing import AsyncIterator, List, Optional, Protocol, Set
from urllib.parse import urljoin, urlparse

from aiohttp import ClientSession, ClientTimeout
from bs4 import BeautifulSoup

from log_scout.crawler.errors import FetchError
from log_scout.crawler.fetcher import Fetcher
from log_scout.crawler.link_extractor import files_in, normalize_url, subdirs_in
from log_scout.crawler.models import MatchResult, SearchRequest

__all__ = ("ListingCrawler", "ListingFetcher")


class ListingFetcher(Protocol):
    """What the crawler needs from a fetcher; lets tests plug in fakes."""

    async def fetch_document(self, url: str) -> BeautifulSoup: ...

    async def fetch_text(self, url: str) -> str: ...


class ListingCrawler:
    """Depth-first crawler over directory-listing pages that greps candidate files."""

    def __init__(self, config, fetcher: Optional[ListingFetcher] = None) -> None:
        self.config = config
        self.fetcher = fetcher
        self.session: Optional[ClientSession] = None
        self.visited: Set[str] = set()
        self.errors: List[FetchError] = []
        self.directories_visited = 0
        self.files_inspected = 0
        self.logger = logging.getLogger("LogScout")

    async def __aenter__(self) -> ListingCrawler:
        if self.fetcher is None:
            kwargs = {}
            if getattr(self.config, "timeout", None):
                kwargs["timeout"] = ClientTimeout(total=self.config.timeout)
            self.session = ClientSession(**kwargs)
            self.fetcher = Fetcher(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self, request: Optional[SearchRequest] = None) -> AsyncIterator[MatchResult]:
        """
        Yield every file under ``request.root_location`` whose name ends with
        ``request.target_file_name`` and whose text contains ``request.text_pattern``.

        Fetch failures are logged and collected in :attr:`errors`; they never
        stop the crawl.
        """
        if self.fetcher is None:
            raise RuntimeError("Session not initialized")
        request = request or self.config.request
        self.visited.clear()
        self.errors = []
        self.directories_visited = 0
        self.files_inspected = 0

        self.logger.info(
            "Start search: %s for %r in %s", request.root_location, request.text_pattern, request.target_file_name
        )
        start = time.monotonic()
        found = 0
        async for match in self._walk(request.root_location, request):
            found += 1
            yield match
        self.logger.info(
            "Finished: %d matches, %d directories, %d files, %d errors in %.2f s",
            found,
            self.directories_visited,
            self.files_inspected,
            len(self.errors),
            time.monotonic() - start,
        )

    async def _walk(self, location: str, request: SearchRequest) -> AsyncIterator[MatchResult]:
        url = self._resolve(location)
        if not self._first_visit(url):
            return
        try:
            document = await self.fetcher.fetch_document(url)
        except FetchError as exc:
            self._report("error getting listing", exc)
            return
        self.directories_visited += 1

        candidates = files_in(document, request.target_file_name)
        sub_dirs = subdirs_in(document, location)
        del document

        for link in candidates:
            match = await self._inspect(link, url, request)
            if match is not None:
                yield match

        for sub_dir in sub_dirs:
            async for match in self._walk(sub_dir, request):
                yield match

    async def _inspect(self, link: str, listing_url: str, request: SearchRequest) -> Optional[MatchResult]:
        url = self._resolve(link, listing_url)
        if not self._first_visit(url):
            return None
        try:
            text = await self.fetcher.fetch_text(url)
        except FetchError as exc:
            self._report("error getting file text", exc)
            return None
        self.files_inspected += 1
        if request.text_pattern not in text:
            return None
        self.logger.debug("Match: %s", url)
        return MatchResult(location=link, url=url)

    def _resolve(self, link: str, listing_url: Optional[str] = None) -> str:
        """
        Absolute links are used as-is and root-relative ones are appended to
        ``base_url`` (keeping any path prefix it has); anything else is relative
        to the listing page it came from.
        """
        try:
            absolute = bool(urlparse(link).netloc)
        except ValueError:
            # malformed; the fetcher reports it as a request error
            return link
        if absolute:
            return urljoin(listing_url or str(self.config.base_url), link)
        if listing_url is None or link.startswith("/"):
            return str(self.config.base_url).rstrip("/") + "/" + link.lstrip("/")
        return urljoin(listing_url, link)

    def _first_visit(self, url: str) -> bool:
        try:
            key = normalize_url(url)
        except ValueError:
            key = url
        if key in self.visited:
            self.logger.debug("Already visited %s", url)
            return False
        self.visited.add(key)
        return True

    def _report(self, what: str, exc: FetchError) -> None:
        self.errors.append(exc)
        self.logger.error("%s: %s", what, exc)
