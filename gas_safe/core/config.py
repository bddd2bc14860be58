"""설정 관리 - 환경 변수 로드 및 검증"""
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings


SCRAPE_MODES = ("live", "degraded")


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 서버
    port: int = 3000

    # 보안
    # 설정되어 있으면 /api/* 요청은 x-api-key 헤더 또는 api_key 쿼리 파라미터가 필요합니다.
    api_key: Optional[str] = None
    # 콤마 구분 목록. 비어 있으면 "*"
    allowed_origins: Optional[str] = None

    # 스크래핑 전략: live(브라우저) | degraded(합성 데이터)
    scrape_mode: str = "live"

    # 브라우저
    browser_executable_path: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("browser_executable_path", "puppeteer_executable_path"),
    )
    browser_launch_timeout_ms: int = 30000

    # 동시 브라우저 세션 상한 (서버 터짐 방지)
    browser_pool_size: int = 2
    # 빈 슬롯을 기다리는 최대 시간. 초과 시 503
    browser_acquire_timeout_s: float = 10.0

    # 검색 대상
    target_url: str = "https://www.gassaferegister.co.uk/find-an-engineer/"
    crawler_user_agent: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"

    # 타임아웃 (ms)
    navigation_timeout_ms: int = 30000
    search_input_timeout_ms: int = 10000
    selector_timeout_ms: int = 15000

    # API
    service_name: str = "gas-safe-puppeteer"
    api_title: str = "Gas Safe Register Scraper"
    api_version: str = "1.0.0"
    api_description: str = "Looks up Gas Safe registered engineers via browser automation."

    # 로깅
    log_level: str = "INFO"

    @field_validator("scrape_mode")
    @classmethod
    def validate_scrape_mode(cls, v: str) -> str:
        v = (v or "").strip().lower()
        if v not in SCRAPE_MODES:
            raise ValueError(f"scrape_mode must be one of {SCRAPE_MODES}")
        return v

    @field_validator(
        "navigation_timeout_ms",
        "search_input_timeout_ms",
        "selector_timeout_ms",
        "browser_launch_timeout_ms",
    )
    @classmethod
    def validate_timeouts(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("timeouts must be positive")
        return v

    @field_validator("browser_pool_size")
    @classmethod
    def validate_pool_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("browser_pool_size must be positive")
        return v

    @field_validator("browser_acquire_timeout_s")
    @classmethod
    def validate_acquire_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("browser_acquire_timeout_s must be positive")
        return v

    @field_validator("api_key", "allowed_origins", "browser_executable_path")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip()

    @property
    def allowed_origin_list(self) -> list[str]:
        if not self.allowed_origins:
            return ["*"]
        origins = [o.strip() for o in self.allowed_origins.split(",") if o.strip()]
        return origins or ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = False
        populate_by_name = True


settings = Settings()
