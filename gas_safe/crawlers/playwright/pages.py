"""Page 공통 설정: 기본 타임아웃, 불필요한 리소스 차단, 영국 로케일 헤더."""

from __future__ import annotations

from urllib.parse import urlsplit

from playwright.async_api import Page, Request, Route


VIEWPORT = {"width": 1280, "height": 720}

EXTRA_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-GB,en;q=0.9",
}

BLOCKED_RESOURCE_TYPES = frozenset({"image", "media", "font"})
BLOCKED_EXTENSIONS = (".png", ".jpg", ".jpeg", ".gif", ".webp", ".svg", ".ico", ".woff", ".woff2", ".ttf")


def should_block(resource_type: str, url: str) -> bool:
    """검색 폼/결과 DOM에 필요 없는 요청이면 True (스타일시트와 스크립트는 통과)"""
    if resource_type in BLOCKED_RESOURCE_TYPES:
        return True
    path = urlsplit(url or "").path.lower()
    return path.endswith(BLOCKED_EXTENSIONS)


async def _route_handler(route: Route, request: Request) -> None:
    try:
        if should_block(request.resource_type, request.url):
            await route.abort()
        else:
            await route.continue_()
    except Exception:
        # 페이지가 이미 닫힌 뒤 도착한 요청
        return


async def configure_page(page: Page, default_timeout_ms: int) -> Page:
    page.set_default_timeout(default_timeout_ms)
    await page.route("**/*", _route_handler)
    await page.set_extra_http_headers(EXTRA_HEADERS)
    return page
