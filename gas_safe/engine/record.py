"""Engineer Record - Standard Record Format

검색 결과 한 건(등록 엔지니어)의 표준 형식을 정의합니다.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class EngineerRecord:
    """Gas Safe 등록 엔지니어 한 건

    Attributes:
        gas_safe_number: 등록 번호 (필수, 비어 있으면 추출 단계에서 제외)
        business_name: 상호
        engineer_name: 엔지니어 이름
        address: 주소
        phone: 전화번호
        categories: 작업 분류 코드 (DOM 순서 유지)
        expiry_date: 만료일 표시 문자열 (파싱하지 않음)
    """

    gas_safe_number: str
    business_name: Optional[str] = None
    engineer_name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    categories: List[str] = field(default_factory=list)
    expiry_date: Optional[str] = None

    @property
    def categories_text(self) -> Optional[str]:
        if not self.categories:
            return None
        return ", ".join(self.categories)

    def to_dict(self) -> Dict[str, Any]:
        """응답용 dict (camelCase, 값 없는 필드는 생략)"""
        data = {
            "gasSafeNumber": self.gas_safe_number,
            "businessName": self.business_name,
            "engineerName": self.engineer_name,
            "address": self.address,
            "phone": self.phone,
            "categories": self.categories_text,
            "expiryDate": self.expiry_date,
        }
        return {k: v for k, v in data.items() if v is not None}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineerRecord":
        """dict(camelCase 또는 snake_case)에서 EngineerRecord 생성

        categories는 리스트 또는 콤마 구분 문자열을 모두 허용합니다.
        """
        def pick(camel: str, snake: str) -> Optional[str]:
            value = data.get(camel, data.get(snake))
            return value if value else None

        raw_categories = data.get("categories") or []
        if isinstance(raw_categories, str):
            categories = [c.strip() for c in raw_categories.split(",") if c.strip()]
        else:
            categories = [str(c).strip() for c in raw_categories if str(c).strip()]

        return cls(
            gas_safe_number=pick("gasSafeNumber", "gas_safe_number") or "",
            business_name=pick("businessName", "business_name"),
            engineer_name=pick("engineerName", "engineer_name"),
            address=pick("address", "address"),
            phone=pick("phone", "phone"),
            categories=categories,
            expiry_date=pick("expiryDate", "expiry_date"),
        )
