# File: tests/conftest.py
from __future__ import annotations

from collections import Counter
from collections.abc import AsyncIterator
from typing import Dict, Iterable

import pytest
from aiohttp import web
from bs4 import BeautifulSoup

from log_scout.config import SearchConfig
from log_scout.crawler.errors import NetworkError

FAKE_BASE = "http://listing.test/"


def listing(*hrefs: str) -> str:
    """Render a minimal gcsweb-like listing page with one link per href."""
    rows = "".join(f'<li><a href="{h}"><img src="/icons/file.png"> {h}</a></li>' for h in hrefs)
    return f"<html><head><title>listing</title></head><body><ul>{rows}</ul></body></html>"


class FakeFetcher:
    """In-memory fetcher keyed by absolute URL; unknown URLs fail like a dead host."""

    def __init__(self, listings: Dict[str, str], files: Dict[str, str]) -> None:
        self.listings = listings
        self.files = files
        self.calls: list[str] = []

    async def fetch_document(self, url: str) -> BeautifulSoup:
        self.calls.append(url)
        if url not in self.listings:
            raise NetworkError(url, "connection refused")
        return BeautifulSoup(self.listings[url], "html.parser")

    async def fetch_text(self, url: str) -> str:
        self.calls.append(url)
        if url not in self.files:
            raise NetworkError(url, "connection reset")
        return self.files[url]

    def call_counts(self) -> Counter:
        return Counter(self.calls)


@pytest.fixture()
def search_config() -> SearchConfig:
    """Config pointing at the fake listing host."""
    return SearchConfig(
        base_url=FAKE_BASE,
        root_path="/logs/",
        file_name="serial-1.log",
        pattern="watchdog: BUG: soft lockup - CPU#",
    )


@pytest.fixture()
def make_fetcher():
    """Build a FakeFetcher from root-relative paths."""

    def _make(listings: Dict[str, Iterable[str]], files: Dict[str, str] | None = None) -> FakeFetcher:
        return FakeFetcher(
            {FAKE_BASE.rstrip("/") + path: listing(*hrefs) for path, hrefs in listings.items()},
            {FAKE_BASE.rstrip("/") + path: text for path, text in (files or {}).items()},
        )

    return _make


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()
