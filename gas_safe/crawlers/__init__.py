"""Gas Safe Register crawler modules (live Playwright + degraded fallback).

공개 API는 이 파일에서만 export합니다.
"""

from .extractor import extract_engineers
from .degraded_executor import DegradedScrapeExecutor
from .live_executor import LiveScrapeExecutor

__all__ = [
        "extract_engineers",
        "DegradedScrapeExecutor",
        "LiveScrapeExecutor",
]
