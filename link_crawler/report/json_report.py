# link_crawler/report/json_report.py

"""
JSON report generation for LinkCrawler.

Serializes a CrawlReport to a file.
"""
import json
from pathlib import Path

from link_crawler.report.model import CrawlReport


def render_json(report: CrawlReport, output_path: Path | str) -> Path:
    """
    Save *report* as JSON at *output_path*.

    :param report: CrawlReport with the crawl results
    :param output_path: path of the JSON file
    :return: Path of the saved file

    Example:
    ```python
    from link_crawler.report.json_report import render_json
    report_path = render_json(report, 'reports/links.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(report.as_dict(), f, ensure_ascii=False, indent=2)

    return output
