"""API Payload 테스트 자산

현재 백엔드 스키마 기준 (모두 옵션, 하나 이상 필요):
- gas_safe_number
- engineer_name
- business_name
"""

API_PAYLOADS = {
    "by_number": {"gas_safe_number": "123456"},
    "by_engineer": {"engineer_name": "John Smith"},
    "by_business": {"business_name": "Acme Ltd"},
    "number_and_name": {"gas_safe_number": "G1", "engineer_name": "Alice"},
    "empty": {},
    "all_blank": {"gas_safe_number": "", "engineer_name": "   ", "business_name": None},
}
