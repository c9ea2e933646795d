"""웹페이지 HTML에서 가격 추출.

네트워크(fetch)와 분리된 순수 파싱 로직입니다.
1) script/style 제거 → 본문 텍스트 추출 (selectolax) → 공백 정리한 텍스트에서 가격 탐색
2) 실패하면 원본 마크업에서 class/id/Schema.org 속성 패턴으로 재시도
"""

from __future__ import annotations

import re
from typing import Optional

from selectolax.parser import HTMLParser

from .prices import extract_price_from_text


_WHITESPACE_RE = re.compile(r"\s+")

_CURRENCY_MARKERS = r"(?:\$|€|£|USD|EUR|GBP)"

# 요소 내용에 통화 기호/코드가 있는 가격 영역
_ELEMENT_PRICE_PATTERNS = tuple(
    re.compile(
        rf'{attr}="[^"]*{keyword}[^"]*"[^>]*>([^<]*{_CURRENCY_MARKERS}[^<]*)<',
        re.IGNORECASE,
    )
    for attr, keyword in (
        ("class", "price"),
        ("id", "price"),
        ("class", "cost"),
        ("class", "amount"),
    )
)

# Schema.org 구조화 데이터
_SCHEMA_PRICE_PATTERNS = tuple(
    re.compile(
        rf'{attr}="price"[^>]*content="([^"]*(?:\$|€|£|\d+[\.,]\d{{2}})[^"]*)"',
        re.IGNORECASE,
    )
    for attr in ("property", "itemprop")
)


def html_to_text(html: str) -> str:
    """script/style를 제외한 본문 텍스트 (공백 1칸으로 정리, 엔티티 디코딩)"""
    if not html:
        return ""

    tree = HTMLParser(html)
    tree.strip_tags(["script", "style"])
    text = tree.text(separator=" ")
    return _WHITESPACE_RE.sub(" ", text).strip()


def extract_price_from_markup(html: str) -> Optional[str]:
    """가격 관련 class/id/Schema.org 속성에서 가격 추출 (원본 마크업 기준)"""
    if not html:
        return None

    for pattern in _ELEMENT_PRICE_PATTERNS + _SCHEMA_PRICE_PATTERNS:
        for match in pattern.finditer(html):
            price = extract_price_from_text(match.group(1))
            if price:
                return price

    return None


def extract_price_from_html(html: str) -> Optional[str]:
    """HTML 문서에서 가격 문자열 추출 (없으면 None)"""
    if not html:
        return None

    price = extract_price_from_text(html_to_text(html))
    if price:
        return price

    return extract_price_from_markup(html)
