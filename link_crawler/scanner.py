# === FILE: link_crawler/scanner.py ===
"""
Wrapper that wires the HTTP fetcher and the crawler together for one run.
"""
from __future__ import annotations

from typing import Optional, Set, Tuple

from link_crawler.config import CrawlerConfig
from link_crawler.crawler.crawler import LinkCrawler
from link_crawler.crawler.fetcher import HttpPageFetcher
from link_crawler.crawler.models import CrawlStats


async def start_scan(seed_url: str, cfg: Optional[CrawlerConfig] = None) -> Tuple[Set[str], CrawlStats]:
    """
    Run a full crawl from *seed_url* over HTTP.

    Returns
    -------
    Tuple[Set[str], CrawlStats]
        Discovered links and the counters collected while crawling.
    """
    cfg = cfg or CrawlerConfig()
    async with HttpPageFetcher(config=cfg) as fetcher:
        crawler = LinkCrawler(fetcher, cfg)
        links = await crawler.collect_links(seed_url)
    return links, crawler.stats


async def collect_links(seed_url: str, cfg: Optional[CrawlerConfig] = None) -> Set[str]:
    """Crawl from *seed_url* and return only the discovered links."""
    links, _ = await start_scan(seed_url, cfg)
    return links


__all__ = ["start_scan", "collect_links"]
