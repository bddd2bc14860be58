"""Playwright 브라우저 세션 관리.

요청마다 격리된 브라우저 프로세스를 하나 띄우고, 어떤 경로로 끝나든
정확히 한 번 정리합니다. 동시에 열 수 있는 세션 수는 세마포어로 제한합니다.
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, Optional

from playwright.async_api import Browser, Page, Playwright, async_playwright

from gas_safe.core.exceptions import BrowserLaunchException, BrowserPoolExhaustedException
from gas_safe.core.logging import get_logger

from .pages import VIEWPORT, configure_page

logger = get_logger("browser")


def build_launch_args() -> list[str]:
    # 컨테이너(공유 메모리/샌드박스 제약) 환경 기준
    return [
        "--no-sandbox",
        "--disable-setuid-sandbox",
        "--disable-dev-shm-usage",
        "--disable-accelerated-2d-canvas",
        "--disable-gpu",
        "--no-first-run",
        "--no-zygote",
        "--single-process",
    ]


class BrowserSession:
    """브라우저 프로세스 1개 + 작업용 page.

    close()는 여러 번 호출돼도 정리는 한 번만 수행하고, 슬롯 반환 콜백도 한 번만 부릅니다.
    """

    def __init__(
        self,
        page: Page,
        browser: Optional[Browser] = None,
        playwright: Optional[Playwright] = None,
        on_release: Optional[Callable[[], None]] = None,
    ) -> None:
        self.page = page
        self._browser = browser
        self._playwright = playwright
        self._on_release = on_release
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True

        try:
            try:
                await self.page.close()
            except Exception as e:
                logger.warning(f"[Browser] Failed to close page: {type(e).__name__}: {e}")

            if self._browser is not None:
                try:
                    await self._browser.close()
                except Exception as e:
                    logger.warning(f"[Browser] Failed to close browser: {type(e).__name__}: {e}")

            if self._playwright is not None:
                try:
                    await self._playwright.stop()
                except Exception as e:
                    logger.warning(f"[Browser] Failed to stop playwright: {type(e).__name__}: {e}")
        finally:
            if self._on_release is not None:
                self._on_release()
            logger.debug("[Browser] Session released")


class BrowserSessionManager:
    """요청당 브라우저 세션 생성/정리 + 동시 세션 상한.

    Usage:
        manager = BrowserSessionManager(pool_size=2)
        async with manager.session() as session:
            await session.page.goto(url)
    """

    def __init__(
        self,
        pool_size: int = 2,
        acquire_timeout_s: float = 10.0,
        executable_path: Optional[str] = None,
        launch_timeout_ms: int = 30000,
        user_agent: Optional[str] = None,
        default_timeout_ms: int = 30000,
    ) -> None:
        if pool_size <= 0:
            raise ValueError("pool_size must be positive")
        self.pool_size = pool_size
        self.acquire_timeout_s = acquire_timeout_s
        self.executable_path = executable_path
        self.launch_timeout_ms = launch_timeout_ms
        self.user_agent = user_agent
        self.default_timeout_ms = default_timeout_ms

        self._semaphore = asyncio.Semaphore(pool_size)
        self._in_use = 0

    @classmethod
    def from_settings(cls, settings) -> "BrowserSessionManager":
        return cls(
            pool_size=settings.browser_pool_size,
            acquire_timeout_s=settings.browser_acquire_timeout_s,
            executable_path=settings.browser_executable_path,
            launch_timeout_ms=settings.browser_launch_timeout_ms,
            user_agent=settings.crawler_user_agent,
            default_timeout_ms=settings.navigation_timeout_ms,
        )

    @property
    def in_use(self) -> int:
        return self._in_use

    def _release_slot(self) -> None:
        self._in_use -= 1
        self._semaphore.release()

    async def acquire(self) -> BrowserSession:
        """빈 슬롯을 기다린 뒤 새 브라우저 세션을 띄웁니다.

        Returns:
            BrowserSession: 호출자가 반드시 close()해야 하는 세션

        Raises:
            BrowserPoolExhaustedException: acquire_timeout_s 안에 슬롯을 얻지 못함
            BrowserLaunchException: 브라우저 실행 실패 (슬롯은 즉시 반환)
        """
        try:
            await asyncio.wait_for(self._semaphore.acquire(), timeout=self.acquire_timeout_s)
        except asyncio.TimeoutError:
            logger.warning(
                f"[Browser] Pool exhausted: {self.pool_size} sessions busy for {self.acquire_timeout_s:.1f}s"
            )
            raise BrowserPoolExhaustedException(self.pool_size, self.acquire_timeout_s)

        self._in_use += 1
        try:
            session = await self._launch()
        except BaseException:
            self._release_slot()
            raise

        session._on_release = self._release_slot
        logger.debug(f"[Browser] Session acquired ({self._in_use}/{self.pool_size} in use)")
        return session

    async def _launch(self) -> BrowserSession:
        pw: Optional[Playwright] = None
        browser: Optional[Browser] = None
        try:
            logger.info("[Playwright] Launching browser...")
            pw = await async_playwright().start()
            browser = await pw.chromium.launch(
                headless=True,
                executable_path=self.executable_path,
                args=build_launch_args(),
                timeout=self.launch_timeout_ms,
            )
            context = await browser.new_context(
                user_agent=self.user_agent,
                viewport=VIEWPORT,
                locale="en-GB",
            )
            page = await context.new_page()
            await configure_page(page, self.default_timeout_ms)
        except Exception as e:
            logger.error(f"[Playwright] Failed to launch browser: {type(e).__name__}: {e}")
            if browser is not None:
                try:
                    await browser.close()
                except Exception:
                    pass
            if pw is not None:
                try:
                    await pw.stop()
                except Exception:
                    pass
            raise BrowserLaunchException(
                f"Browser launch failed: {type(e).__name__}: {e}",
                details={"executable_path": self.executable_path},
            ) from e

        return BrowserSession(page=page, browser=browser, playwright=pw)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[BrowserSession]:
        """acquire/close 쌍을 보장하는 컨텍스트 매니저"""
        session = await self.acquire()
        try:
            yield session
        finally:
            await session.close()
