# log_scout/crawler/link_extractor.py
"""
Link extraction and URL normalization utilities for LogScout.

Listing pages are walked in document order; callers decide which hyperlink
targets they want through a small ``(key, value) -> bool`` filter.
"""
from __future__ import annotations

import posixpath
import re
import string
from itertools import chain
from typing import Callable, List
from urllib.parse import parse_qsl, urlencode, urlparse, urlunparse

from bs4.element import Tag

HREF = "href"

_ESCAPE_RE = re.compile(r"%([0-9A-Fa-f]{2})")
_UNRESERVED = frozenset(string.ascii_letters + string.digits + "-._~")

AttributeFilter = Callable[[str, str], bool]


def extract_links(document: Tag, keep: AttributeFilter) -> List[str]:
    """
    Return attribute values accepted by *keep*, in document pre-order.

    At most one attribute per element contributes: the first one accepted.
    """
    links: List[str] = []
    for node in chain((document,), document.descendants):
        if not isinstance(node, Tag):
            continue
        for key, value in node.attrs.items():
            # multi-valued attributes (class, rel) come back as lists
            if isinstance(value, list):
                value = " ".join(value)
            if keep(key, value):
                links.append(value)
                break
    return links


def file_filter(file_name: str) -> AttributeFilter:
    """Accept hyperlinks whose target ends with *file_name*."""

    def keep(key: str, value: str) -> bool:
        return key == HREF and value.endswith(file_name)

    return keep


def subdir_filter(location: str) -> AttributeFilter:
    """Accept hyperlinks that descend from *location* and carry no query string."""

    def keep(key: str, value: str) -> bool:
        return key == HREF and location in value and "?" not in value

    return keep


def files_in(document: Tag, file_name: str) -> List[str]:
    """Candidate file links of a listing page."""
    return extract_links(document, file_filter(file_name))


def subdirs_in(document: Tag, location: str) -> List[str]:
    """Sub-directory links of the listing page at *location*.

    e.g. searching a page for ``/a/`` could return ``["/a/b/", "/a/c/"]``.
    """
    return extract_links(document, subdir_filter(location))


def normalize_url(url: str) -> str:
    """
    Canonical form used as a visit key: lower-case scheme and host,
    collapsed ``.``/``..`` segments, trailing slash kept, sorted query,
    no fragment.

    Only escapes of unreserved characters are decoded: ``%2F`` in an object
    name stays distinct from a real ``/``.
    """
    parsed = urlparse(url)
    scheme = parsed.scheme.lower()
    netloc = parsed.netloc.lower()
    path = _decode_unreserved(parsed.path or "/")
    norm = posixpath.normpath(path)
    if parsed.path.endswith("/") and not norm.endswith("/"):
        norm += "/"
    if not norm.startswith("/"):
        norm = "/" + norm
    qs = parse_qsl(parsed.query, keep_blank_values=True)
    qs.sort()
    query = urlencode(qs, doseq=True)
    return urlunparse((scheme, netloc, norm, "", query, ""))


def _decode_unreserved(path: str) -> str:
    def repl(m: re.Match[str]) -> str:
        char = chr(int(m.group(1), 16))
        return char if char in _UNRESERVED else "%" + m.group(1).upper()

    return _ESCAPE_RE.sub(repl, path)


__all__ = [
    "HREF",
    "AttributeFilter",
    "extract_links",
    "file_filter",
    "subdir_filter",
    "files_in",
    "subdirs_in",
    "normalize_url",
]
