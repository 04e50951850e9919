# link_crawler/exceptions.py
"""
Exception hierarchy for LinkCrawler.

Every error is contained at the smallest enclosing unit of work:
a single link, a single page or a single branch of the crawl.
"""
from __future__ import annotations

from typing import Optional


class CrawlerError(Exception):
    """Base class for all LinkCrawler errors."""


class FetchError(CrawlerError):
    """A page could not be retrieved (retries exhausted or non-retryable cause)."""

    def __init__(self, url: str, message: str, attempts: int = 1) -> None:
        super().__init__(f"{message}: {url}")
        self.url = url
        self.attempts = attempts


class LinkResolutionError(CrawlerError):
    """A single href could not be resolved to an absolute URL."""

    def __init__(self, href: str, base: str, reason: Optional[str] = None) -> None:
        detail = f" ({reason})" if reason else ""
        super().__init__(f"Cannot resolve {href!r} against {base}{detail}")
        self.href = href
        self.base = base


class BranchTimeoutError(CrawlerError):
    """A child crawl task did not finish within the join deadline."""

    def __init__(self, url: str, timeout: float) -> None:
        super().__init__(f"Branch {url} did not finish within {timeout:.1f} s")
        self.url = url
        self.timeout = timeout


class PoolClosedError(CrawlerError):
    """Work was submitted to a pool that is shutting down."""


__all__ = [
    "CrawlerError",
    "FetchError",
    "LinkResolutionError",
    "BranchTimeoutError",
    "PoolClosedError",
]
