"""
API 키 인증 정책 및 요청 검증/로깅 함수
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from fastapi import Request

from gas_safe.core.config import Settings
from gas_safe.core.exceptions import AuthException
from gas_safe.core.logging import logger, sanitize_for_log


API_KEY_HEADER = "x-api-key"
API_KEY_QUERY_PARAM = "api_key"


@dataclass(frozen=True)
class NoAuth:
    """키가 설정되지 않은 배포: 인증 검사 없음"""

    def check(self, provided_key: Optional[str]) -> None:
        return None


@dataclass(frozen=True)
class RequireKey:
    """설정된 키와 정확히 일치해야 통과"""

    key: str

    def check(self, provided_key: Optional[str]) -> None:
        if provided_key != self.key:
            raise AuthException()


AuthPolicy = Union[NoAuth, RequireKey]


def build_auth_policy(settings: Settings) -> AuthPolicy:
    """설정에서 인증 정책 생성 (프로세스 시작 시 1회)"""
    if settings.api_key:
        return RequireKey(settings.api_key)
    return NoAuth()


def extract_api_key(request: Request) -> Optional[str]:
    """헤더 우선, 없으면 쿼리 파라미터"""
    return request.headers.get(API_KEY_HEADER) or request.query_params.get(API_KEY_QUERY_PARAM)


class SecurityValidator:
    """입력 보안 검증"""

    MAX_TERM_LENGTH = 200

    @staticmethod
    def validate_search_term(term: str) -> bool:
        """검색어 검증

        Raises:
            ValueError: 유효하지 않은 입력
        """
        if not term:
            raise ValueError("Search term is required")

        if len(term) > SecurityValidator.MAX_TERM_LENGTH:
            raise ValueError(
                f"Search term must be at most {SecurityValidator.MAX_TERM_LENGTH} characters"
            )

        if "\0" in term:
            raise ValueError("Search term contains invalid characters")

        return True


async def log_request(request: Request) -> None:
    """요청 로깅 (민감 정보 제외)"""
    method = request.method
    path = request.url.path

    query_params = {}
    for key, value in request.query_params.items():
        if key == API_KEY_QUERY_PARAM:
            query_params[key] = "***"
        else:
            query_params[key] = sanitize_for_log(str(value), max_length=50)

    if query_params:
        logger.debug(f"{method} {path}?{query_params}")
    else:
        logger.debug(f"{method} {path}")
