"""Gas Safe Register 검색 결과 - HTML 파싱 유틸.

이 모듈은 브라우저 조작(navigation)과 분리된 순수 파싱 로직을 담습니다.
로드가 끝난 페이지의 HTML만 받으므로 정적 fixture로 테스트할 수 있습니다.
"""

from __future__ import annotations

import re
from typing import List, Optional

from selectolax.parser import HTMLParser, Node

from gas_safe.core.exceptions import ExtractionException
from gas_safe.core.logging import logger
from gas_safe.engine.record import EngineerRecord


RESULTS_SELECTOR = ".search-results"
NO_RESULTS_SELECTOR = ".no-results"
TERMINAL_SELECTOR = f"{RESULTS_SELECTOR}, {NO_RESULTS_SELECTOR}"

ITEM_SELECTOR = ".result-item"
CATEGORY_SELECTOR = ".work-categories li"

_GAS_ID_PREFIX = re.compile(r"^\s*Gas\s+Safe\s+ID\s*:\s*", re.IGNORECASE)
_EXPIRY_PREFIX = re.compile(r"^\s*Expires\s*:\s*", re.IGNORECASE)


def _parse(html: str) -> HTMLParser:
    if not isinstance(html, str):
        raise ExtractionException(f"expected HTML text, got {type(html).__name__}")
    try:
        return HTMLParser(html)
    except Exception as e:
        raise ExtractionException(f"{type(e).__name__}: {e}") from e


def _node_text(item: Node, selector: str) -> Optional[str]:
    node = item.css_first(selector)
    if node is None:
        return None
    text = (node.text() or "").strip()
    return text or None


def _strip_prefix(value: Optional[str], prefix: re.Pattern) -> Optional[str]:
    if value is None:
        return None
    cleaned = prefix.sub("", value).strip()
    return cleaned or None


def has_results(html: str) -> bool:
    return _parse(html).css_first(RESULTS_SELECTOR) is not None


def has_no_results(html: str) -> bool:
    return _parse(html).css_first(NO_RESULTS_SELECTOR) is not None


def parse_result_item(item: Node) -> Optional[EngineerRecord]:
    """결과 항목 하나를 EngineerRecord로 변환.

    등록 번호가 비어 있는 항목은 None (노이즈로 간주해 조용히 제외).
    """
    gas_safe_number = _strip_prefix(_node_text(item, ".gas-id"), _GAS_ID_PREFIX)
    if not gas_safe_number:
        return None

    categories: List[str] = []
    for li in item.css(CATEGORY_SELECTOR):
        code = (li.text() or "").strip()
        if code:
            categories.append(code)

    return EngineerRecord(
        gas_safe_number=gas_safe_number,
        business_name=_node_text(item, ".business-name"),
        engineer_name=_node_text(item, ".engineer-name"),
        address=_node_text(item, ".address"),
        phone=_node_text(item, ".phone"),
        categories=categories,
        expiry_date=_strip_prefix(_node_text(item, ".expiry-date"), _EXPIRY_PREFIX),
    )


def extract_engineers(html: str) -> List[EngineerRecord]:
    """결과 페이지 HTML에서 엔지니어 목록 추출.

    Args:
        html: 검색 결과가 로드된 페이지 HTML

    Returns:
        DOM 순서의 EngineerRecord 목록 (등록 번호 없는 항목 제외)

    Raises:
        ExtractionException: HTML을 읽을 수 없는 경우
    """
    parser = _parse(html)

    records: List[EngineerRecord] = []
    skipped = 0
    for item in parser.css(ITEM_SELECTOR):
        record = parse_result_item(item)
        if record is None:
            skipped += 1
            continue
        records.append(record)

    if skipped:
        logger.debug(f"[Extractor] Skipped {skipped} result item(s) without a Gas Safe ID")

    return records
