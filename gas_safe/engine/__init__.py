"""Engine Layer - Scrape contracts shared by both strategies

This module provides:
- SearchQuery: validated search fields and the effective search term
- EngineerRecord: one register entry
- ScrapeResult: standardized outcome of a scrape call
- ScrapeStrategy: live/degraded strategy interface and its selection
"""

from .query import SearchQuery
from .record import EngineerRecord
from .result import ScrapeResult, ScrapeStatus
from .strategy import ScrapeMode, ScrapeStrategy, build_strategy

__all__ = [
    "SearchQuery",
    "EngineerRecord",
    "ScrapeResult",
    "ScrapeStatus",
    "ScrapeMode",
    "ScrapeStrategy",
    "build_strategy",
]
