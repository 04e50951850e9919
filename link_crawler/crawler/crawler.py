# === FILE: link_crawler/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import time
from typing import Dict, List, Optional, Set
from urllib.parse import urlsplit

from link_crawler.config import CrawlerConfig
from link_crawler.crawler.fetcher import PageFetcher
from link_crawler.crawler.link_extractor import extract_links
from link_crawler.crawler.models import BranchResult, CrawlStats
from link_crawler.crawler.pool import WorkerPool
from link_crawler.crawler.visited import VisitedSet
from link_crawler.exceptions import BranchTimeoutError, FetchError, PoolClosedError
from link_crawler.logger import logger

__all__ = ("LinkCrawler", "seed_domain")


def seed_domain(seed_url: str) -> str:
    """Return the host of *seed_url*, the token used for the scope test."""
    parts = urlsplit(seed_url)
    if parts.scheme not in ("http", "https") or not parts.hostname:
        raise ValueError(f"Seed URL must be an absolute http(s) URL: {seed_url!r}")
    return parts.hostname


class LinkCrawler:
    """Recursive concurrent crawler collecting every in-scope link reachable from a seed.

    An instance runs one crawl at a time: ``stats`` and the fetch limit belong
    to the current run. Use separate instances for parallel crawls.
    """

    def __init__(self, fetcher: PageFetcher, config: Optional[CrawlerConfig] = None) -> None:
        self.fetcher = fetcher
        self.config = config or CrawlerConfig()
        self.stats = CrawlStats()
        self.logger = logger
        self._fetch_slots: Optional[asyncio.Semaphore] = None
        self._seed_url: Optional[str] = None
        self._seed_linked = False
        self._running = False

    async def collect_links(self, seed_url: str) -> Set[str]:
        """
        Crawl from *seed_url* and return every distinct in-scope link admitted.

        The seed is claimed up front so it is never fetched twice. It is part
        of the result only when some crawled page links to it.
        """
        domain = seed_domain(seed_url)
        if self._running:
            raise RuntimeError("LinkCrawler is already running a crawl")
        self._running = True
        self._seed_url = seed_url
        self._seed_linked = False
        visited = VisitedSet()
        pool = WorkerPool()
        self.stats = CrawlStats()
        self._fetch_slots = asyncio.Semaphore(self.config.max_concurrency)

        self.logger.info("Collecting links for %s (scope %r)", seed_url, domain)
        start = time.monotonic()
        visited.add_if_absent(seed_url)
        try:
            await self.crawl_one(domain, seed_url, visited, pool)
        finally:
            self.stats.cancelled_on_shutdown = await pool.shutdown(self.config.shutdown_grace)
            self.stats.elapsed = time.monotonic() - start
            self._running = False

        links = set(visited.snapshot())
        if not self._seed_linked:
            links.discard(seed_url)
        self.stats.links_discovered = len(links)
        self.logger.info(
            "Finished: %d links, %d pages fetched, %d fetch failures, %d branch timeouts in %.2f s",
            len(links),
            self.stats.pages_fetched,
            self.stats.fetch_failures,
            self.stats.branch_timeouts,
            self.stats.elapsed,
        )
        return links

    async def crawl_one(self, domain: str, url: str, visited: VisitedSet, pool: WorkerPool) -> Set[str]:
        """
        Process one page: fetch, extract, admit new links, fan out and join.

        Returns the links newly admitted by this page plus whatever its
        children returned. Never raises for a fetch or branch failure.
        """
        try:
            content = await self._fetch(url)
        except FetchError as exc:
            self.stats.fetch_failures += 1
            self.logger.debug("Failed to crawl %s: %s (cause: %r)", url, exc, exc.__cause__)
            return set()
        self.stats.pages_fetched += 1

        local: Set[str] = set()
        children: Dict[str, asyncio.Task[Set[str]]] = {}
        for link in extract_links(domain, url, content):
            if link == self._seed_url:
                self._seed_linked = True
            if not visited.add_if_absent(link):
                continue
            local.add(link)
            try:
                children[link] = pool.submit(self.crawl_one(domain, link, visited, pool))
            except PoolClosedError:
                self.logger.debug("Pool closed, not descending into %s", link)

        for result in await self._join(children):
            local.update(result.links)
        return local

    async def _fetch(self, url: str) -> str:
        if self._fetch_slots is None:
            return await self.fetcher.fetch(url)
        async with self._fetch_slots:
            return await self.fetcher.fetch(url)

    async def _join(self, children: Dict[str, asyncio.Task[Set[str]]]) -> List[BranchResult]:
        """Wait for every child in turn, each bounded by the join timeout."""
        timeout = self.config.join_timeout
        results: List[BranchResult] = []
        for link, task in children.items():
            try:
                # shield: an abandoned child keeps running until pool shutdown
                links = await asyncio.wait_for(asyncio.shield(task), timeout=timeout)
            except asyncio.TimeoutError:
                self.stats.branch_timeouts += 1
                err = BranchTimeoutError(link, timeout)
                self.logger.debug("Failed to get result for %s: %s", link, err)
                results.append(BranchResult(link, error=err))
            except asyncio.CancelledError:
                current = asyncio.current_task()
                if not task.cancelled() or (current is not None and current.cancelling()):
                    raise
                self.stats.branch_failures += 1
                results.append(BranchResult(link, error=asyncio.CancelledError()))
            except Exception as exc:
                self.stats.branch_failures += 1
                self.logger.debug("Failed to get result for %s: %r", link, exc)
                results.append(BranchResult(link, error=exc))
            else:
                results.append(BranchResult(link, frozenset(links)))
        return results
