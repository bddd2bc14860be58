"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional


class GasSafeException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모

    status_code는 HTTP 레이어가 예외를 응답으로 변환할 때 사용합니다.
    """
    status_code: int = 500

    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 요청 검증 / 인증
class ValidationException(GasSafeException):
    """유효성 검증 예외"""
    status_code = 400

    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__(reason, "VALIDATION_ERROR", details or {"field": field})


class InvalidQueryException(ValidationException):
    """검색 필드가 하나도 없는 요청"""
    def __init__(self, reason: str = "Please provide engineer_name, gas_safe_number, or business_name",
                 details: Optional[dict[str, Any]] = None):
        super().__init__("query", reason, details)


class AuthException(GasSafeException):
    """API 키 누락/불일치"""
    status_code = 401

    def __init__(self, message: str = "Invalid API key", details: Optional[dict[str, Any]] = None):
        super().__init__(message, "AUTH_ERROR", details)


# 스크래핑 파이프라인 예외 (HTTP 200 + success:false 로 변환됨)
class ScrapeException(GasSafeException):
    """스크래핑 단계 예외의 기본 클래스"""
    def __init__(self, message: str, error_code: str = "SCRAPE_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "SCRAPE_ERROR", details)


class NavigationTimeoutException(ScrapeException):
    """검색 페이지 로딩 타임아웃"""
    def __init__(self, url: str, timeout_ms: int, details: Optional[dict[str, Any]] = None):
        message = f"Navigation to {url} timed out after {timeout_ms}ms"
        super().__init__(message, "NAVIGATION_TIMEOUT",
                         details or {"url": url, "timeout_ms": timeout_ms})


class NavigationException(ScrapeException):
    """검색 페이지에 도달하지 못함 (DNS 실패, 연결 거부 등)"""
    def __init__(self, url: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Navigation to {url} failed: {reason}"
        super().__init__(message, "NAVIGATION_ERROR",
                         details or {"url": url, "reason": reason})


class SelectorTimeoutException(ScrapeException):
    """검색 결과/결과 없음 어느 쪽도 나타나지 않음"""
    def __init__(self, selector: str, timeout_ms: int, details: Optional[dict[str, Any]] = None):
        message = f"Timed out after {timeout_ms}ms waiting for '{selector}'"
        super().__init__(message, "SELECTOR_TIMEOUT",
                         details or {"selector": selector, "timeout_ms": timeout_ms})


class ExtractionException(ScrapeException):
    """DOM 구조가 예상과 다름"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Failed to read search results: {reason}"
        super().__init__(message, "EXTRACTION_ERROR", details or {"reason": reason})


# 브라우저 인프라 예외 (HTTP 5xx)
class BrowserLaunchException(GasSafeException):
    """브라우저 프로세스 실행 실패"""
    status_code = 500

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, "BROWSER_LAUNCH_ERROR", details)


class BrowserPoolExhaustedException(GasSafeException):
    """동시 세션 상한 초과 (backpressure)"""
    status_code = 503

    def __init__(self, pool_size: int, waited_s: float, details: Optional[dict[str, Any]] = None):
        message = f"All {pool_size} browser sessions are busy (waited {waited_s:.1f}s)"
        super().__init__(message, "BROWSER_POOL_EXHAUSTED",
                         details or {"pool_size": pool_size, "waited_s": waited_s})
