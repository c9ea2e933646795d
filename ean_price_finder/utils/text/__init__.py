"""Text utilities.

- prices: 통화 패턴 테이블과 텍스트 가격 추출
- html: 웹페이지 마크업 가격 추출
"""

from .html import extract_price_from_html, extract_price_from_markup, html_to_text
from .prices import (
    CURRENCY_PATTERNS,
    CurrencyPattern,
    MAX_PRICE,
    MIN_PRICE,
    extract_price_from_text,
    is_plausible_price,
    normalize_price_number,
    parse_price_value,
)

__all__ = [
    "CURRENCY_PATTERNS",
    "CurrencyPattern",
    "MAX_PRICE",
    "MIN_PRICE",
    "extract_price_from_text",
    "extract_price_from_html",
    "extract_price_from_markup",
    "html_to_text",
    "is_plausible_price",
    "normalize_price_number",
    "parse_price_value",
]
