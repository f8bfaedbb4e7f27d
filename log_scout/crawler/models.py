# log_scout/crawler/models.py
"""
Data models for the LogScout crawler.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """Where to start, which file name to look for and what text to find in it."""

    root_location: str
    target_file_name: str
    text_pattern: str


@dataclass(frozen=True, slots=True)
class MatchResult:
    """A candidate file whose text contains the pattern.

    ``location`` is the hyperlink target as written in the listing,
    ``url`` is the absolute URL that was actually fetched.
    """

    location: str
    url: str
