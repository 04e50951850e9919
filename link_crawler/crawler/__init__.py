"""Crawl engine: fetching, link extraction, deduplication and concurrent traversal."""
from link_crawler.crawler.crawler import LinkCrawler, seed_domain
from link_crawler.crawler.fetcher import HttpPageFetcher, PageFetcher, backoff_schedule
from link_crawler.crawler.link_extractor import extract_links, in_scope, is_excluded, resolve_link
from link_crawler.crawler.models import BranchResult, CrawlStats
from link_crawler.crawler.pool import WorkerPool
from link_crawler.crawler.visited import VisitedSet

__all__ = [
    "LinkCrawler",
    "seed_domain",
    "HttpPageFetcher",
    "PageFetcher",
    "backoff_schedule",
    "extract_links",
    "in_scope",
    "is_excluded",
    "resolve_link",
    "BranchResult",
    "CrawlStats",
    "WorkerPool",
    "VisitedSet",
]
