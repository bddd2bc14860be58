"""테스트 자산(데이터) 레이어

규칙:
- 로직 없음 (단순 dict/str)
- 브라우저/네트워크 의존 없음
"""

from .api_payloads import API_PAYLOADS
from .register_pages import REGISTER_PAGES

__all__ = [
    "API_PAYLOADS",
    "REGISTER_PAGES",
]
