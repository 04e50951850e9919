"""
LinkCrawler package initializer.
Defines package version and exposes the crawl entry point.
"""
__version__ = "0.1.0"

from link_crawler.scanner import collect_links  # noqa: E402
