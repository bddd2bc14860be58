"""로깅 설정

- 로거 이름: "gas_safe" (모듈별로는 get_logger("search") 처럼 하위 로거 사용)
- ENVIRONMENT=production 이면 DEBUG를 INFO로 올리고 간단한 포맷 사용
- 검색어/쿼리 값은 sanitize_for_log를 거쳐서만 기록
"""
import logging
import os
import re
import sys

from gas_safe.core.config import settings


LOGGER_NAME = "gas_safe"
IS_PRODUCTION = os.getenv("ENVIRONMENT", "development") == "production"

_PRODUCTION_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
_DEVELOPMENT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_SENSITIVE = re.compile(r"password|token|x-api-key|api_key|apikey|secret", re.IGNORECASE)
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        level = logging.INFO
    if IS_PRODUCTION and level < logging.INFO:
        level = logging.INFO
    return level


def setup_logging(level_name: str = settings.log_level) -> logging.Logger:
    """서비스 로거 초기화 (핸들러는 한 번만 붙임)"""
    level = _resolve_level(level_name)

    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level)

    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                fmt=_PRODUCTION_FORMAT if IS_PRODUCTION else _DEVELOPMENT_FORMAT,
                datefmt=_DATE_FORMAT,
            )
        )
        root.addHandler(handler)

    for handler in root.handlers:
        handler.setLevel(level)

    return root


def get_logger(component: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAME}.{component}")


logger = setup_logging()


def sanitize_for_log(value: str, max_length: int = 100) -> str:
    """로그에 남길 수 있는 형태로 변환

    비밀값으로 보이는 문자열은 통째로 "***", 개행 등 제어문자는 공백으로 바꾸고
    max_length를 넘으면 자릅니다.
    """
    if not value:
        return "[empty]"

    if _SENSITIVE.search(value):
        return "***"

    result = _CONTROL_CHARS.sub(" ", value)
    if len(result) > max_length:
        result = result[:max_length] + "..."
    return result
