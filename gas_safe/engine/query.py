"""Search Query - 검색 필드와 유효 검색어 결정"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class SearchQuery:
    """검색 요청

    세 필드 중 하나 이상이 있어야 유효합니다. 공백만 있는 값은 없는 것으로 취급합니다.
    """

    gas_safe_number: Optional[str] = None
    engineer_name: Optional[str] = None
    business_name: Optional[str] = None

    @classmethod
    def from_fields(
        cls,
        gas_safe_number: Optional[str] = None,
        engineer_name: Optional[str] = None,
        business_name: Optional[str] = None,
    ) -> "SearchQuery":
        return cls(
            gas_safe_number=_clean(gas_safe_number),
            engineer_name=_clean(engineer_name),
            business_name=_clean(business_name),
        )

    @property
    def effective_term(self) -> Optional[str]:
        """우선순위 gas_safe_number > engineer_name > business_name"""
        for value in (self.gas_safe_number, self.engineer_name, self.business_name):
            if value:
                return value
        return None

    @property
    def is_empty(self) -> bool:
        return self.effective_term is None
