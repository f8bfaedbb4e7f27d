"""log_scout.crawler: listing crawler, fetcher and link extraction."""

from log_scout.crawler.crawler import ListingCrawler
from log_scout.crawler.errors import FetchError, NetworkError, ParseError, RequestConstructionError
from log_scout.crawler.fetcher import Fetcher
from log_scout.crawler.models import MatchResult, SearchRequest

__all__ = [
    "ListingCrawler",
    "Fetcher",
    "FetchError",
    "NetworkError",
    "ParseError",
    "RequestConstructionError",
    "MatchResult",
    "SearchRequest",
]
