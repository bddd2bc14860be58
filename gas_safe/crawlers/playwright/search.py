"""검색 폼 제출 및 종료 조건 대기 (Playwright)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page, TimeoutError as PlaywrightTimeoutError

from gas_safe.core.exceptions import (
    ExtractionException,
    NavigationException,
    NavigationTimeoutException,
    SelectorTimeoutException,
)
from gas_safe.core.logging import get_logger, sanitize_for_log
from gas_safe.crawlers.extractor import NO_RESULTS_SELECTOR, TERMINAL_SELECTOR


logger = get_logger("search")

SEARCH_INPUT_SELECTOR = "#txtSearch"
SEARCH_BUTTON_SELECTOR = "#btnSearch"


class SearchOutcome(str, Enum):
    """검색 제출 후 도달한 종료 조건"""

    RESULTS = "results"
    NO_RESULTS = "no_results"


@dataclass(frozen=True)
class SearchTimeouts:
    """단계별 타임아웃 (ms). 어느 단계도 재시도하지 않습니다."""

    navigation_ms: int = 30000
    search_input_ms: int = 10000
    selector_ms: int = 15000

    @classmethod
    def from_settings(cls, settings) -> "SearchTimeouts":
        return cls(
            navigation_ms=settings.navigation_timeout_ms,
            search_input_ms=settings.search_input_timeout_ms,
            selector_ms=settings.selector_timeout_ms,
        )


async def submit_search(
    page: Page,
    target_url: str,
    search_term: str,
    timeouts: SearchTimeouts = SearchTimeouts(),
) -> SearchOutcome:
    """검색 페이지로 이동해 검색어를 제출하고 결과/결과 없음 중 먼저 나타나는 쪽을 반환.

    Args:
        page: 설정 완료된 Page
        target_url: 검색 폼 페이지 URL
        search_term: 유효 검색어
        timeouts: 단계별 타임아웃

    Returns:
        SearchOutcome

    Raises:
        NavigationTimeoutException: 페이지 로딩이 navigation_ms 초과
        NavigationException: 페이지 로딩 실패 (DNS, 연결 거부 등)
        SelectorTimeoutException: 검색 입력창 또는 종료 조건이 제한 시간 내에 나타나지 않음
        ExtractionException: 폼 조작 또는 결과 대기 중 페이지 오류
    """
    logger.debug(f"[Search] Navigating to {target_url} (term='{sanitize_for_log(search_term, 50)}')")

    try:
        await page.goto(target_url, wait_until="networkidle", timeout=timeouts.navigation_ms)
    except PlaywrightTimeoutError as e:
        raise NavigationTimeoutException(target_url, timeouts.navigation_ms) from e
    except PlaywrightError as e:
        raise NavigationException(target_url, str(e)) from e

    try:
        await page.wait_for_selector(SEARCH_INPUT_SELECTOR, timeout=timeouts.search_input_ms)
    except PlaywrightTimeoutError as e:
        raise SelectorTimeoutException(SEARCH_INPUT_SELECTOR, timeouts.search_input_ms) from e
    except PlaywrightError as e:
        raise ExtractionException(f"search form not readable: {e}") from e

    try:
        await page.fill(SEARCH_INPUT_SELECTOR, search_term)
        await page.click(SEARCH_BUTTON_SELECTOR)
    except PlaywrightTimeoutError as e:
        raise SelectorTimeoutException(SEARCH_BUTTON_SELECTOR, timeouts.search_input_ms) from e
    except PlaywrightError as e:
        raise ExtractionException(f"search form interaction failed: {e}") from e

    # 결과 / 결과 없음 경쟁
    try:
        await page.wait_for_selector(TERMINAL_SELECTOR, timeout=timeouts.selector_ms)
    except PlaywrightTimeoutError as e:
        raise SelectorTimeoutException(TERMINAL_SELECTOR, timeouts.selector_ms) from e
    except PlaywrightError as e:
        raise ExtractionException(f"results page not readable: {e}") from e

    try:
        no_results = await page.query_selector(NO_RESULTS_SELECTOR)
    except PlaywrightError as e:
        raise ExtractionException(f"results page not readable: {e}") from e

    if no_results is not None:
        logger.debug("[Search] Terminal condition: no results")
        return SearchOutcome.NO_RESULTS

    logger.debug("[Search] Terminal condition: results present")
    return SearchOutcome.RESULTS
