"""Degraded Executor

브라우저를 띄울 수 없는 저사양/제한 환경(Railway 등)에서 live 전략 대신 주입하는 실행자입니다.

의도:
- API 레이어는 동일한 인터페이스(ScrapeStrategy)를 기대하므로, 구현체만 바꿔
  같은 응답 형태의 합성 레코드 1건을 돌려줍니다.
- 네비게이션/타임아웃이 없고, 상위에서 이미 끝난 검증 외의 실패 경로가 없습니다.
"""

from __future__ import annotations

from gas_safe.core.logging import logger
from gas_safe.engine.query import SearchQuery
from gas_safe.engine.record import EngineerRecord
from gas_safe.engine.result import ScrapeResult
from gas_safe.engine.strategy import ScrapeMode


PLACEHOLDER_RECORD = {
    "gas_safe_number": "123456",
    "business_name": "Test Plumbing Services",
    "engineer_name": "John Smith",
    "address": "123 Test Street, London, UK",
    "phone": "020 1234 5678",
    "categories": "CCN1, CPA1, CENWAT, HTR1, WAT1",
    "expiry_date": "31/12/2024",
}

SYNTHETIC_NOTE = "Using mock data: live browser scraping is unavailable in this deployment"


class DegradedScrapeExecutor:
    mode = ScrapeMode.DEGRADED

    def __init__(self, note: str = SYNTHETIC_NOTE):
        self.note = note

    async def execute(self, query: SearchQuery) -> ScrapeResult:
        logger.info(
            f"[Degraded] Returning synthetic record: term_present={query.effective_term is not None}"
        )
        fields = dict(PLACEHOLDER_RECORD)
        for key in ("gas_safe_number", "engineer_name", "business_name"):
            value = getattr(query, key)
            if value:
                fields[key] = value
        return ScrapeResult.synthetic(EngineerRecord.from_dict(fields), note=self.note)
