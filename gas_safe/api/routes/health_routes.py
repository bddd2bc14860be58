"""헬스 체크 엔드포인트"""
from fastapi import APIRouter

from gas_safe import __version__
from gas_safe.core.config import settings
from gas_safe.schemas.engineer_schema import HealthResponse, ServiceInfoResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    헬스 체크 엔드포인트

    브라우저 서브시스템을 건드리지 않는 고정 응답입니다.
    """
    return HealthResponse(status="ok", service=settings.service_name)


@router.get("/", response_model=ServiceInfoResponse)
async def root():
    """루트 엔드포인트"""
    return ServiceInfoResponse(
        service=settings.service_name,
        version=__version__,
        mode=settings.scrape_mode,
        docs="/docs",
    )
