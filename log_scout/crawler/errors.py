# log_scout/crawler/errors.py
"""
Fetch error hierarchy for the LogScout crawler.

The crawler only needs to know that a fetch failed; subclasses exist so that
logs and reports can say why.
"""
from __future__ import annotations


class FetchError(Exception):
    """A location could not be fetched or interpreted."""

    kind: str = "fetch"

    def __init__(self, location: str, cause: object) -> None:
        super().__init__(f"{self.kind} error for {location}: {cause}")
        self.location = location
        self.cause = cause


class RequestConstructionError(FetchError):
    """Malformed URL, raised before any network I/O."""

    kind = "request"


class NetworkError(FetchError):
    """Transport failure while performing the GET."""

    kind = "network"


class ParseError(FetchError):
    """Response body is not a usable markup document."""

    kind = "parse"


__all__ = ["FetchError", "RequestConstructionError", "NetworkError", "ParseError"]
