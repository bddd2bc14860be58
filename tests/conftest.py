"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 Fake(page / session manager / strategy) 주입
- 전역 싱글톤 초기화

금지:
- 실제 브라우저 실행
- 실제 Gas Safe Register 호출
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "INFO")

from gas_safe.crawlers.playwright.browser import BrowserSession, BrowserSessionManager  # noqa: E402
from gas_safe.engine import ScrapeMode, ScrapeResult, SearchQuery  # noqa: E402


class FakeElement:
    pass


class FakePage:
    """Playwright Page 대역

    - html: content()가 돌려줄 HTML
    - present: query_selector/wait_for_selector가 찾을 수 있는 셀렉터 목록
    - timeout_on: 해당 셀렉터(또는 "goto") 대기 시 PlaywrightTimeoutError
    - errors: 해당 셀렉터(또는 "goto")에서 그대로 던질 예외
    """

    def __init__(
        self,
        html: str = "",
        present: Optional[set[str]] = None,
        timeout_on: Optional[set[str]] = None,
        errors: Optional[dict[str, Exception]] = None,
    ):
        self.html = html
        self.present = present or set()
        self.timeout_on = timeout_on or set()
        self.errors = errors or {}
        self.visited: list[str] = []
        self.filled: dict[str, str] = {}
        self.clicked: list[str] = []
        self.close_calls = 0

    async def goto(self, url: str, wait_until: str = "load", timeout: int = 0):
        if "goto" in self.errors:
            raise self.errors["goto"]
        if "goto" in self.timeout_on:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")
        self.visited.append(url)

    async def wait_for_selector(self, selector: str, timeout: int = 0):
        if selector in self.errors:
            raise self.errors[selector]
        if selector in self.timeout_on:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")
        return FakeElement()

    async def fill(self, selector: str, value: str):
        self.filled[selector] = value

    async def click(self, selector: str):
        self.clicked.append(selector)

    async def query_selector(self, selector: str):
        return FakeElement() if selector in self.present else None

    async def content(self) -> str:
        return self.html

    async def close(self):
        self.close_calls += 1


class CountingSessionManager(BrowserSessionManager):
    """브라우저 대신 FakePage 세션을 만들고 acquire/release 횟수를 기록"""

    def __init__(self, page_factory, **kwargs):
        super().__init__(**kwargs)
        self.page_factory = page_factory
        self.pages: list[FakePage] = []
        self.launches = 0
        self.releases = 0
        self.launch_error: Optional[Exception] = None

    async def _launch(self) -> BrowserSession:
        if self.launch_error is not None:
            raise self.launch_error
        self.launches += 1
        page = self.page_factory()
        self.pages.append(page)
        return BrowserSession(page=page)

    def _release_slot(self) -> None:
        self.releases += 1
        super()._release_slot()


class FakeStrategy:
    """ScrapeStrategy 대역 - 호출 횟수와 마지막 쿼리를 기록"""

    mode = ScrapeMode.LIVE

    def __init__(self, result: Optional[ScrapeResult] = None, error: Optional[Exception] = None):
        self.result = result or ScrapeResult.no_results()
        self.error = error
        self.calls = 0
        self.last_query: Optional[SearchQuery] = None

    async def execute(self, query: SearchQuery) -> ScrapeResult:
        self.calls += 1
        self.last_query = query
        if self.error:
            raise self.error
        return self.result


@pytest.fixture
def fake_strategy() -> FakeStrategy:
    return FakeStrategy()


@pytest.fixture(autouse=True)
def reset_route_singletons():
    """라우트 모듈의 전략/인증 싱글톤 초기화"""
    from gas_safe.api.routes import scrape_routes

    scrape_routes._strategy = None
    scrape_routes._auth_policy = None
    yield
    scrape_routes._strategy = None
    scrape_routes._auth_policy = None
