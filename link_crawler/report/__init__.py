# File: link_crawler/report/__init__.py
"""link_crawler.report: JSON and HTML reports of a finished crawl, used by the CLI and tests."""

from __future__ import annotations

from link_crawler.report.html_report import render_html
from link_crawler.report.json_report import render_json
from link_crawler.report.model import CrawlReport, build_report

__all__ = ["CrawlReport", "build_report", "render_json", "render_html"]
