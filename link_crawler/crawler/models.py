# link_crawler/crawler/models.py
"""
Data models for the LinkCrawler engine.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Optional


@dataclass(slots=True, frozen=True)
class BranchResult:
    """Outcome of one branch: the links it contributed, or the error that emptied it."""

    url: str
    links: FrozenSet[str] = frozenset()
    error: Optional[BaseException] = None


@dataclass(slots=True)
class CrawlStats:
    """Counters collected during a single collect_links run."""

    pages_fetched: int = 0
    fetch_failures: int = 0
    branch_timeouts: int = 0
    branch_failures: int = 0
    links_discovered: int = 0
    cancelled_on_shutdown: int = 0
    elapsed: float = field(default=0.0)

    def as_dict(self) -> dict:
        return {
            "pages_fetched": self.pages_fetched,
            "fetch_failures": self.fetch_failures,
            "branch_timeouts": self.branch_timeouts,
            "branch_failures": self.branch_failures,
            "links_discovered": self.links_discovered,
            "cancelled_on_shutdown": self.cancelled_on_shutdown,
            "elapsed": round(self.elapsed, 3),
        }
