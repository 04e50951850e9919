# link_crawler/crawler/visited.py
"""
Concurrency-safe set of canonical URL strings shared by every crawl task.
"""
from __future__ import annotations

import threading
from typing import FrozenSet, Iterator, Set


class VisitedSet:
    """Set with an atomic "insert if absent" operation.

    A URL is admitted at most once for the lifetime of the set: membership
    test and insertion happen under a single lock acquisition, so two
    callers can never both observe a URL as absent.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: Set[str] = set()

    def add_if_absent(self, url: str) -> bool:
        """Insert *url*; return True only for the caller that actually inserted it."""
        with self._lock:
            if url in self._items:
                return False
            self._items.add(url)
            return True

    def snapshot(self) -> FrozenSet[str]:
        with self._lock:
            return frozenset(self._items)

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"VisitedSet(size={len(self)})"
