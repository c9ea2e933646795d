"""Utilities package

- barcode: EAN/UPC 코드 검증
- text: 가격 추출 (텍스트/HTML)
- url: 링크 검사/표시용 도메인
"""

from .barcode import ProductCode, ean13_check_digit, is_valid_product_code
from .text import extract_price_from_html, extract_price_from_text, parse_price_value
from .url import get_display_domain, is_http_url

__all__ = [
    # barcode
    "ProductCode",
    "ean13_check_digit",
    "is_valid_product_code",
    # text
    "extract_price_from_html",
    "extract_price_from_text",
    "parse_price_value",
    # url
    "get_display_domain",
    "is_http_url",
]
