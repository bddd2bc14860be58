"""Pydantic 스키마 정의 (Validation Enhanced)"""
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from gas_safe.engine.query import SearchQuery


class ScrapeRequest(BaseModel):
    """엔지니어 검색 요청 (세 필드 모두 선택, 하나 이상 필요)

    "필드 하나 이상" 규칙은 라우트에서 검사해 400으로 응답합니다.
    """
    model_config = ConfigDict(extra="ignore")

    gas_safe_number: Optional[str] = Field(None, max_length=200, description="Gas Safe 등록 번호")
    engineer_name: Optional[str] = Field(None, max_length=200, description="엔지니어 이름")
    business_name: Optional[str] = Field(None, max_length=200, description="상호")

    @field_validator("gas_safe_number", "engineer_name", "business_name", mode="before")
    @classmethod
    def coerce_to_text(cls, v: Any) -> Any:
        """숫자로 보낸 등록 번호 허용"""
        if isinstance(v, bool):
            return v
        if isinstance(v, (int, float)):
            return str(v)
        return v

    def to_query(self) -> SearchQuery:
        return SearchQuery.from_fields(
            gas_safe_number=self.gas_safe_number,
            engineer_name=self.engineer_name,
            business_name=self.business_name,
        )


class EngineerData(BaseModel):
    """엔지니어 한 건 (응답은 camelCase)"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    gas_safe_number: str = Field(..., min_length=1, description="Gas Safe 등록 번호")
    business_name: Optional[str] = Field(None, description="상호")
    engineer_name: Optional[str] = Field(None, description="엔지니어 이름")
    address: Optional[str] = Field(None, description="주소")
    phone: Optional[str] = Field(None, description="전화번호")
    categories: Optional[str] = Field(None, description="작업 분류 코드 (콤마 구분, DOM 순서)")
    expiry_date: Optional[str] = Field(None, description="만료일 표시 문자열")


class ScrapeResponse(BaseModel):
    """검색 응답

    스크래핑 실패(타임아웃 등)도 HTTP 200 + success=false 로 전달됩니다.
    """
    success: bool = Field(..., description="스크래핑 성공 여부")
    data: List[EngineerData] = Field(default_factory=list, description="엔지니어 목록")
    count: int = Field(..., ge=0, description="data 길이")
    error: Optional[str] = Field(None, description="실패 사유")
    message: Optional[str] = Field(None, description="부가 메시지")
    note: Optional[str] = Field(None, description="합성 데이터 안내 (degraded mode)")


class ErrorResponse(BaseModel):
    """4xx/5xx 응답"""
    success: bool = False
    error: str
    message: Optional[str] = None


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str
    service: str


class ServiceInfoResponse(BaseModel):
    """루트 엔드포인트 응답"""
    service: str
    version: str
    mode: str
    docs: str
