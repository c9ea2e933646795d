"""Result Filter - 가격 정보가 있을 법한 검색 결과만 남김"""

from typing import Iterable, List, Optional

from ean_price_finder.core.config import settings

from .result import SearchHit


PRICE_KEYWORDS = (
    "price", "buy", "shop", "store", "purchase", "cost", "sale",
    # 대형 리테일러
    "amazon", "ebay", "walmart", "target", "bestbuy", "shopping",
)

# 추출 패턴보다 넓은 범위 (필터는 후보만 고르므로 느슨하게)
CURRENCY_MARKERS = (
    # 통화 기호
    "$", "€", "£", "¥", "₹", "₩", "₪", "₽", "₺", "₱", "₫", "฿", "₦", "₡", "₨", "₴", "₸", "₼",
    # ISO 코드
    "USD", "EUR", "GBP", "JPY", "CAD", "AUD", "CHF", "CNY", "INR", "KRW", "SGD", "HKD", "NZD",
    "SEK", "NOK", "DKK", "PLN", "CZK", "HUF", "RON", "MXN", "BRL", "RUB", "TRY", "ZAR", "THB",
    "MYR", "PHP", "IDR", "VND", "AED", "SAR", "ILS", "EGP", "NGN", "GHS", "KES", "UGX", "TZS",
    # 현지 표기
    "RMB", "Rs", "kr", "zł", "Kč", "Ft", "lei", "RM", "Rp", "C$", "A$", "S$", "HK$", "NZ$", "R$",
)

_CURRENCY_MARKERS_LOWER = tuple(marker.lower() for marker in CURRENCY_MARKERS)


def is_price_candidate(hit: SearchHit, product_code: str) -> bool:
    """제목+스니펫에 코드/구매 키워드/통화 표기 중 하나라도 있으면 True"""
    text = f"{hit.title} {hit.snippet}".lower()

    if product_code and product_code in text:
        return True
    if any(keyword in text for keyword in PRICE_KEYWORDS):
        return True
    return any(marker in text for marker in _CURRENCY_MARKERS_LOWER)


def filter_price_results(
    hits: Iterable[SearchHit],
    product_code: str,
    limit: Optional[int] = None,
) -> List[SearchHit]:
    """가격 후보만 남기고 원래 순서대로 최대 limit건 반환"""
    limit = settings.result_limit if limit is None else limit
    code = str(product_code)

    # SearchHit 자체가 title/snippet/link/displayLink만 보관
    filtered = [hit for hit in hits if is_price_candidate(hit, code)]
    return filtered[:limit]
