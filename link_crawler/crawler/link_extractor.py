# link_crawler/crawler/link_extractor.py
"""
Link extraction, resolution and scope filtering for LinkCrawler.
"""
from __future__ import annotations

import re
from typing import FrozenSet, Set
from urllib.parse import urldefrag, urljoin, urlsplit

from bs4 import BeautifulSoup, SoupStrainer
from bs4.element import Tag

from link_crawler.exceptions import LinkResolutionError
from link_crawler.logger import logger

# Absolute http(s) references, root-relative "/..." references and bare
# relative paths. Anything carrying another scheme (mailto:, javascript:, ...)
# or starting with "#" or "?" is left out. Leading whitespace is tolerated
# and stripped on resolution.
HREF_PATTERN = re.compile(
    r"^\s*(?:https?://|/|(?![a-z][a-z0-9+.\-]*:)[^#?\s])",
    re.IGNORECASE,
)

LINK_STRAINER = SoupStrainer("a", href=HREF_PATTERN)

EXCLUDED_EXTENSIONS: FrozenSet[str] = frozenset((
    # images
    ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".svg", ".webp", ".ico", ".tif", ".tiff",
    # documents
    ".pdf", ".doc", ".docx", ".xls", ".xlsx", ".ppt", ".pptx", ".odt", ".ods", ".odp", ".rtf",
    # audio / video
    ".mp3", ".mp4", ".wav", ".ogg", ".m4a", ".flac", ".avi", ".mov", ".mkv", ".webm", ".wmv",
    # archives
    ".zip", ".tar", ".gz", ".tgz", ".bz2", ".xz", ".rar", ".7z",
    # executables and packages
    ".exe", ".msi", ".dmg", ".apk", ".iso",
))

EXCLUDED_SUBSTRINGS: tuple[str, ...] = ("download", "upload", "git")


def resolve_link(page_url: str, href: str) -> str:
    """
    Resolve *href* against *page_url* and drop the fragment.

    Raises LinkResolutionError when the result is not a usable http(s) URL.
    """
    try:
        absolute, _ = urldefrag(urljoin(page_url, href.strip()))
        parts = urlsplit(absolute)
        parts.port  # raises ValueError on a malformed port
    except ValueError as exc:
        raise LinkResolutionError(href, page_url, str(exc)) from exc
    if parts.scheme not in ("http", "https") or not parts.hostname:
        raise LinkResolutionError(href, page_url, "not an absolute http(s) URL")
    return absolute


def is_excluded(url: str) -> bool:
    """True for media/document/archive paths and for download, upload or git URLs."""
    lowered = url.lower()
    path = urlsplit(lowered).path
    if path.endswith(tuple(EXCLUDED_EXTENSIONS)):
        return True
    return any(token in lowered for token in EXCLUDED_SUBSTRINGS)


def in_scope(url: str, domain: str) -> bool:
    """Substring test: the URL belongs to the crawl when it contains *domain* anywhere."""
    return domain in url


def extract_links(domain: str, page_url: str, content: str) -> Set[str]:
    """
    Extract in-scope links from *content* of the page at *page_url*.

    Relative references are resolved against *page_url* before the exclusion
    and scope filters run. A reference that cannot be resolved is dropped on
    its own; the rest of the page is still processed.
    """
    soup = BeautifulSoup(content, "html.parser", parse_only=LINK_STRAINER)
    links: Set[str] = set()
    for tag in soup.find_all("a"):
        if not isinstance(tag, Tag):
            continue
        href = tag.get("href")
        if not isinstance(href, str):
            continue
        try:
            link = resolve_link(page_url, href)
        except LinkResolutionError as exc:
            logger.debug("Skipping link on %s: %s", page_url, exc)
            continue
        if is_excluded(link):
            continue
        if in_scope(link, domain):
            links.add(link)
    return links


__all__ = [
    "extract_links",
    "resolve_link",
    "is_excluded",
    "in_scope",
    "EXCLUDED_EXTENSIONS",
    "EXCLUDED_SUBSTRINGS",
]
