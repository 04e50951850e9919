# link_crawler/report/model.py
"""Report container shared by the JSON and HTML renderers."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from link_crawler.crawler.models import CrawlStats


@dataclass(slots=True)
class CrawlReport:
    seed: str
    links: List[str] = field(default_factory=list)
    stats: Dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        return {"seed": self.seed, "count": len(self.links), "links": self.links, "stats": self.stats}


def build_report(seed: str, links: Iterable[str], stats: Optional[CrawlStats] = None) -> CrawlReport:
    """Assemble a report with the links sorted lexicographically."""
    return CrawlReport(
        seed=seed,
        links=sorted(links),
        stats=stats.as_dict() if stats is not None else {},
    )
