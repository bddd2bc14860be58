"""Scrape Routes - HTTP → ScrapeStrategy 위임

HTTP Layer는 입력 검증, 인증, 전략 호출, 결과 직렬화만 담당합니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request

from gas_safe.core.config import settings
from gas_safe.core.exceptions import InvalidQueryException
from gas_safe.core.logging import logger
from gas_safe.core.security import (
    AuthPolicy,
    SecurityValidator,
    build_auth_policy,
    extract_api_key,
)
from gas_safe.engine import ScrapeStrategy, build_strategy
from gas_safe.schemas.engineer_schema import ErrorResponse, ScrapeRequest, ScrapeResponse

# 싱글톤 (프로세스 시작 후 1회 생성)
_strategy: Optional[ScrapeStrategy] = None
_auth_policy: Optional[AuthPolicy] = None


def get_strategy() -> ScrapeStrategy:
    """ScrapeStrategy 싱글톤 (SCRAPE_MODE로 결정, 요청마다 바뀌지 않음)"""
    global _strategy
    if _strategy is None:
        _strategy = build_strategy(settings)
        logger.info(f"[API] Scrape strategy: {_strategy.mode.value}")
    return _strategy


def get_auth_policy() -> AuthPolicy:
    """AuthPolicy 싱글톤"""
    global _auth_policy
    if _auth_policy is None:
        _auth_policy = build_auth_policy(settings)
    return _auth_policy


async def require_api_key(
    request: Request,
    policy: AuthPolicy = Depends(get_auth_policy),
) -> None:
    """/api/* 공통 인증 (NoAuth면 아무것도 하지 않음)"""
    policy.check(extract_api_key(request))


router = APIRouter(
    prefix="/api",
    tags=["scrape"],
    dependencies=[Depends(require_api_key)],
)


@router.post(
    "/gas-safe-scrape",
    response_model=ScrapeResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def gas_safe_scrape(
    payload: ScrapeRequest,
    strategy: ScrapeStrategy = Depends(get_strategy),
):
    """Gas Safe Register 엔지니어 검색

    Flow:
        1. 검색 필드 검증 (하나도 없으면 400, 전략 호출 없음)
        2. 설정된 전략(live/degraded)에 위임
        3. ScrapeResult → HTTP 200 (success 값과 무관)
    """
    query = payload.to_query()
    term = query.effective_term
    if term is None:
        logger.warning("[API] Rejected request without search fields")
        raise InvalidQueryException()

    try:
        SecurityValidator.validate_search_term(term)
    except ValueError as e:
        raise InvalidQueryException(str(e))

    result = await strategy.execute(query)

    logger.info(
        f"[API] Scrape finished: status={result.status.value}, count={result.count}"
    )
    return ScrapeResponse.model_validate(result.to_payload())
