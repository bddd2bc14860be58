"""Scrape Strategy - Live/Degraded selection

Defines the strategy interface shared by the browser-backed and the synthetic
implementations, and picks one from configuration at startup.
"""

from enum import Enum
from typing import Protocol

from gas_safe.engine.query import SearchQuery
from gas_safe.engine.result import ScrapeResult


class ScrapeMode(str, Enum):
    """실행 전략"""

    LIVE = "live"
    DEGRADED = "degraded"


class ScrapeStrategy(Protocol):
    """스크래핑 전략 인터페이스

    LiveScrapeExecutor / DegradedScrapeExecutor가 구현해야 할 프로토콜입니다.
    """

    mode: ScrapeMode

    async def execute(self, query: SearchQuery) -> ScrapeResult:
        """검색 실행

        Args:
            query: 검증이 끝난 검색 요청 (effective_term 보장)

        Returns:
            ScrapeResult: 성공/결과 없음/타임아웃 등 스크래핑 결과

        Raises:
            BrowserLaunchException: 브라우저 실행 실패
            BrowserPoolExhaustedException: 동시 세션 상한 초과
        """
        ...


def build_strategy(settings) -> ScrapeStrategy:
    """설정에 따라 전략 구현체 생성

    Args:
        settings: 애플리케이션 설정

    Returns:
        ScrapeStrategy: live 또는 degraded 구현체

    Raises:
        ValueError: 지원하지 않는 모드
    """
    from gas_safe.crawlers import DegradedScrapeExecutor, LiveScrapeExecutor
    from gas_safe.crawlers.playwright import BrowserSessionManager

    mode = ScrapeMode(settings.scrape_mode)
    if mode == ScrapeMode.DEGRADED:
        return DegradedScrapeExecutor()
    if mode == ScrapeMode.LIVE:
        return LiveScrapeExecutor(
            session_manager=BrowserSessionManager.from_settings(settings),
            settings=settings,
        )
    raise ValueError(f"Unsupported scrape_mode: {settings.scrape_mode}")
