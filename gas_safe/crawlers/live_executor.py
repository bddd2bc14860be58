"""Live Executor - Playwright 기반 실제 스크래핑"""

from typing import Optional

from gas_safe.core.config import settings as default_settings
from gas_safe.core.exceptions import (
    ExtractionException,
    InvalidQueryException,
    NavigationException,
    NavigationTimeoutException,
    SelectorTimeoutException,
)
from gas_safe.core.logging import logger, sanitize_for_log
from gas_safe.engine.query import SearchQuery
from gas_safe.engine.result import ScrapeResult
from gas_safe.engine.strategy import ScrapeMode

from .extractor import extract_engineers
from .playwright.browser import BrowserSessionManager
from .playwright.search import SearchOutcome, SearchTimeouts, submit_search


class LiveScrapeExecutor:
    """브라우저 세션을 띄워 Gas Safe Register를 직접 검색하는 실행자

    흐름:
    - 세션 획득 (풀 상한 적용)
    - 검색 폼 제출 → 결과/결과 없음 대기
    - HTML에서 레코드 추출
    - 세션 반환 (모든 경로에서)

    타임아웃/접속 실패/추출 실패는 success:false 결과로 변환하고, 브라우저 실행 실패와
    풀 고갈은 그대로 올려 HTTP 레이어가 5xx로 응답하게 합니다.

    Usage:
        executor = LiveScrapeExecutor(BrowserSessionManager(pool_size=2))
        result = await executor.execute(SearchQuery.from_fields(gas_safe_number="123456"))
    """

    mode = ScrapeMode.LIVE

    def __init__(self, session_manager: BrowserSessionManager, settings=None):
        self.settings = settings or default_settings
        self.session_manager = session_manager
        self.target_url = self.settings.target_url
        self.timeouts = SearchTimeouts.from_settings(self.settings)

    async def execute(self, query: SearchQuery) -> ScrapeResult:
        """라이브 스크래핑 실행

        Args:
            query: 검색 요청

        Returns:
            ScrapeResult: 결과/결과 없음/타임아웃/추출 실패

        Raises:
            InvalidQueryException: 유효 검색어 없음
            BrowserLaunchException: 브라우저 실행 실패
            BrowserPoolExhaustedException: 동시 세션 상한 초과
        """
        term: Optional[str] = query.effective_term
        if not term:
            raise InvalidQueryException()

        logger.info(f"[Live] Scraping Gas Safe Register for: '{sanitize_for_log(term, 50)}'")

        async with self.session_manager.session() as session:
            try:
                outcome = await submit_search(session.page, self.target_url, term, self.timeouts)
                if outcome == SearchOutcome.NO_RESULTS:
                    logger.info("[Live] No results")
                    return ScrapeResult.no_results()

                try:
                    html = await session.page.content()
                except Exception as e:
                    raise ExtractionException(f"could not read page content: {type(e).__name__}") from e

                records = extract_engineers(html)
                logger.info(f"[Live] Extracted {len(records)} record(s)")
                return ScrapeResult.from_records(records)

            except NavigationTimeoutException as e:
                logger.warning(f"[Live] {e}")
                return ScrapeResult.navigation_timeout(e.message)
            except NavigationException as e:
                logger.warning(f"[Live] {e}")
                return ScrapeResult.navigation_error(e.message)
            except SelectorTimeoutException as e:
                logger.warning(f"[Live] {e}")
                return ScrapeResult.selector_timeout(e.message)
            except ExtractionException as e:
                logger.error(f"[Live] {e}")
                return ScrapeResult.extraction_error(e.message)
