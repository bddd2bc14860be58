"""Scrape Result - Standardized Result Format

Provides a standardized format for scrape outcomes across both strategies.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from gas_safe.engine.record import EngineerRecord


class ScrapeStatus(str, Enum):
    """스크래핑 종료 상태"""

    RESULTS = "results"  # 결과 추출 완료
    NO_RESULTS = "no_results"  # 검색 결과 없음 (성공, 빈 목록)
    NAVIGATION_TIMEOUT = "navigation_timeout"
    NAVIGATION_ERROR = "navigation_error"
    SELECTOR_TIMEOUT = "selector_timeout"
    EXTRACTION_ERROR = "extraction_error"
    SYNTHETIC = "synthetic"  # degraded mode


@dataclass
class ScrapeResult:
    """스크래핑 결과 표준 포맷

    Attributes:
        status: 종료 상태 (직렬화되지 않음)
        data: 추출된 엔지니어 목록
        error: 실패 사유
        message: 사람이 읽는 부가 메시지
        note: 합성 데이터임을 알리는 안내 (degraded mode 전용)
    """

    status: ScrapeStatus
    data: List[EngineerRecord] = field(default_factory=list)
    error: Optional[str] = None
    message: Optional[str] = None
    note: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status in (
            ScrapeStatus.RESULTS,
            ScrapeStatus.NO_RESULTS,
            ScrapeStatus.SYNTHETIC,
        )

    @property
    def count(self) -> int:
        return len(self.data)

    def to_payload(self) -> Dict[str, Any]:
        """HTTP 응답 본문"""
        payload: Dict[str, Any] = {
            "success": self.success,
            "data": [record.to_dict() for record in self.data],
            "count": self.count,
        }
        for key in ("error", "message", "note"):
            value = getattr(self, key)
            if value is not None:
                payload[key] = value
        return payload

    @classmethod
    def from_records(cls, records: List[EngineerRecord]) -> "ScrapeResult":
        return cls(status=ScrapeStatus.RESULTS, data=list(records))

    @classmethod
    def no_results(cls) -> "ScrapeResult":
        return cls(status=ScrapeStatus.NO_RESULTS, message="No results found")

    @classmethod
    def synthetic(cls, record: EngineerRecord, note: str) -> "ScrapeResult":
        return cls(status=ScrapeStatus.SYNTHETIC, data=[record], note=note)

    @classmethod
    def navigation_timeout(cls, error: str) -> "ScrapeResult":
        return cls(
            status=ScrapeStatus.NAVIGATION_TIMEOUT,
            error=error,
            message="The Gas Safe Register did not respond in time.",
        )

    @classmethod
    def navigation_error(cls, error: str) -> "ScrapeResult":
        return cls(
            status=ScrapeStatus.NAVIGATION_ERROR,
            error=error,
            message="The Gas Safe Register could not be reached.",
        )

    @classmethod
    def selector_timeout(cls, error: str) -> "ScrapeResult":
        return cls(
            status=ScrapeStatus.SELECTOR_TIMEOUT,
            error=error,
            message="Search results did not load in time.",
        )

    @classmethod
    def extraction_error(cls, error: str) -> "ScrapeResult":
        return cls(
            status=ScrapeStatus.EXTRACTION_ERROR,
            error=error,
            message="The search results page could not be read.",
        )
