"""Price extraction helpers.

통화 패턴 테이블은 이 모듈 하나만 존재합니다. 스니펫 추출, 웹페이지 추출,
정렬용 숫자 변환이 모두 같은 테이블과 같은 정규화 규칙을 사용합니다.

테이블 순서가 곧 우선순위입니다: 앞선 패턴이 텍스트 어디에서든 매치되면
뒤 패턴보다 먼저 채택되고, 한 패턴 안에서는 왼쪽에서 오른쪽 순서입니다.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional


MIN_PRICE = 0.01
MAX_PRICE = 999999.0

_NON_NUMERIC_RE = re.compile(r"[^\d.,]")
_LEADING_NUMBER_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")


@dataclass(frozen=True)
class CurrencyPattern:
    """통화 표기 하나에 대한 매칭 규칙.

    Attributes:
        currency: ISO 코드 (일반 폴백은 "GENERIC")
        form: "prefix" | "suffix" | "code" | "integer"
        regex: 매칭 정규식
    """

    currency: str
    form: str
    regex: re.Pattern

    def candidates(self, text: str) -> Iterator[str]:
        """텍스트 내 겹치지 않는 매치를 왼쪽부터 반환"""
        for match in self.regex.finditer(text):
            yield match.group(0).strip()


def _p(currency: str, form: str, pattern: str, ignore_case: bool = False) -> CurrencyPattern:
    flags = re.IGNORECASE if ignore_case else 0
    return CurrencyPattern(currency, form, re.compile(pattern, flags))


CURRENCY_PATTERNS: tuple[CurrencyPattern, ...] = (
    # USD
    _p("USD", "prefix", r"\$\s*\d+[\.,]\d{2}"),             # $10.99, $ 10,99
    _p("USD", "suffix", r"\d+[\.,]\d{2}\s*\$"),             # 10.99$
    _p("USD", "code", r"\d+[\.,]\d{2}\s*USD", True),        # 10.99 USD

    # EUR
    _p("EUR", "prefix", r"€\s*\d+[\.,]\d{2}"),
    _p("EUR", "suffix", r"\d+[\.,]\d{2}\s*€"),
    _p("EUR", "code", r"\d+[\.,]\d{2}\s*EUR", True),

    # GBP
    _p("GBP", "prefix", r"£\s*\d+[\.,]\d{2}"),
    _p("GBP", "suffix", r"\d+[\.,]\d{2}\s*£"),
    _p("GBP", "code", r"\d+[\.,]\d{2}\s*GBP", True),

    # JPY (소수점 없음)
    _p("JPY", "prefix", r"¥\s*\d+"),
    _p("JPY", "suffix", r"\d+\s*¥"),
    _p("JPY", "code", r"\d+\s*JPY", True),
    _p("JPY", "code", r"\d+\s*YEN", True),

    # CAD
    _p("CAD", "prefix", r"C\$\s*\d+[\.,]\d{2}"),
    _p("CAD", "code", r"\d+[\.,]\d{2}\s*CAD", True),

    # AUD
    _p("AUD", "prefix", r"A\$\s*\d+[\.,]\d{2}"),
    _p("AUD", "code", r"\d+[\.,]\d{2}\s*AUD", True),

    # CHF
    _p("CHF", "prefix", r"CHF\s*\d+[\.,]\d{2}"),
    _p("CHF", "code", r"\d+[\.,]\d{2}\s*CHF", True),

    # SEK
    _p("SEK", "code", r"\d+[\.,]\d{2}\s*SEK", True),
    _p("SEK", "suffix", r"\d+[\.,]\d{2}\s*kr", True),

    # NOK / DKK
    _p("NOK", "code", r"\d+[\.,]\d{2}\s*NOK", True),
    _p("DKK", "code", r"\d+[\.,]\d{2}\s*DKK", True),

    # CNY / RMB
    _p("CNY", "prefix", r"¥\s*\d+[\.,]\d{2}"),
    _p("CNY", "code", r"\d+[\.,]\d{2}\s*CNY", True),
    _p("CNY", "code", r"\d+[\.,]\d{2}\s*RMB", True),

    # INR
    _p("INR", "prefix", r"₹\s*\d+[\.,]\d{2}"),
    _p("INR", "suffix", r"\d+[\.,]\d{2}\s*₹"),
    _p("INR", "code", r"\d+[\.,]\d{2}\s*INR", True),
    _p("INR", "prefix", r"Rs\.?\s*\d+[\.,]\d{2}"),           # Rs.10.99, Rs 10.99

    # KRW (소수점 없음)
    _p("KRW", "prefix", r"₩\s*\d+"),
    _p("KRW", "suffix", r"\d+\s*₩"),
    _p("KRW", "code", r"\d+\s*KRW", True),

    # SGD
    _p("SGD", "prefix", r"S\$\s*\d+[\.,]\d{2}"),
    _p("SGD", "code", r"\d+[\.,]\d{2}\s*SGD", True),

    # HKD
    _p("HKD", "prefix", r"HK\$\s*\d+[\.,]\d{2}"),
    _p("HKD", "code", r"\d+[\.,]\d{2}\s*HKD", True),

    # NZD
    _p("NZD", "prefix", r"NZ\$\s*\d+[\.,]\d{2}"),
    _p("NZD", "code", r"\d+[\.,]\d{2}\s*NZD", True),

    # MXN
    _p("MXN", "prefix", r"\$\s*\d+[\.,]\d{2}\s*MXN", True),
    _p("MXN", "code", r"\d+[\.,]\d{2}\s*MXN", True),

    # BRL
    _p("BRL", "prefix", r"R\$\s*\d+[\.,]\d{2}"),
    _p("BRL", "code", r"\d+[\.,]\d{2}\s*BRL", True),

    # RUB
    _p("RUB", "prefix", r"₽\s*\d+[\.,]\d{2}"),
    _p("RUB", "suffix", r"\d+[\.,]\d{2}\s*₽"),
    _p("RUB", "code", r"\d+[\.,]\d{2}\s*RUB", True),

    # PLN
    _p("PLN", "code", r"\d+[\.,]\d{2}\s*PLN", True),
    _p("PLN", "suffix", r"\d+[\.,]\d{2}\s*zł"),

    # TRY
    _p("TRY", "prefix", r"₺\s*\d+[\.,]\d{2}"),
    _p("TRY", "suffix", r"\d+[\.,]\d{2}\s*₺"),
    _p("TRY", "code", r"\d+[\.,]\d{2}\s*TRY", True),

    # ZAR
    _p("ZAR", "prefix", r"R\s*\d+[\.,]\d{2}"),
    _p("ZAR", "code", r"\d+[\.,]\d{2}\s*ZAR", True),

    # THB
    _p("THB", "prefix", r"฿\s*\d+[\.,]\d{2}"),
    _p("THB", "suffix", r"\d+[\.,]\d{2}\s*฿"),
    _p("THB", "code", r"\d+[\.,]\d{2}\s*THB", True),

    # MYR
    _p("MYR", "prefix", r"RM\s*\d+[\.,]\d{2}"),
    _p("MYR", "code", r"\d+[\.,]\d{2}\s*MYR", True),

    # PHP
    _p("PHP", "prefix", r"₱\s*\d+[\.,]\d{2}"),
    _p("PHP", "suffix", r"\d+[\.,]\d{2}\s*₱"),
    _p("PHP", "code", r"\d+[\.,]\d{2}\s*PHP", True),

    # IDR (천 단위 구분 표기 허용)
    _p("IDR", "prefix", r"Rp\s*\d+[\.,]?\d*"),
    _p("IDR", "code", r"\d+[\.,]?\d*\s*IDR", True),

    # VND
    _p("VND", "prefix", r"₫\s*\d+[\.,]?\d*"),
    _p("VND", "suffix", r"\d+[\.,]?\d*\s*₫"),
    _p("VND", "code", r"\d+[\.,]?\d*\s*VND", True),

    # AED / SAR
    _p("AED", "prefix", r"AED\s*\d+[\.,]\d{2}"),
    _p("AED", "code", r"\d+[\.,]\d{2}\s*AED", True),
    _p("SAR", "prefix", r"SAR\s*\d+[\.,]\d{2}"),
    _p("SAR", "code", r"\d+[\.,]\d{2}\s*SAR", True),

    # ILS
    _p("ILS", "prefix", r"₪\s*\d+[\.,]\d{2}"),
    _p("ILS", "suffix", r"\d+[\.,]\d{2}\s*₪"),
    _p("ILS", "code", r"\d+[\.,]\d{2}\s*ILS", True),

    # CZK
    _p("CZK", "code", r"\d+[\.,]\d{2}\s*CZK", True),
    _p("CZK", "suffix", r"\d+[\.,]\d{2}\s*Kč"),

    # HUF (소수점 없음)
    _p("HUF", "code", r"\d+\s*HUF", True),
    _p("HUF", "suffix", r"\d+\s*Ft"),

    # RON
    _p("RON", "code", r"\d+[\.,]\d{2}\s*RON", True),
    _p("RON", "suffix", r"\d+[\.,]\d{2}\s*lei", True),

    # 정수 가격 폴백 ($10, €10, £10, 10 USD ...)
    _p("USD", "integer", r"\$\s*\d+\b"),
    _p("EUR", "integer", r"€\s*\d+\b"),
    _p("GBP", "integer", r"£\s*\d+\b"),
    _p("USD", "integer", r"\d+\s*USD\b", True),
    _p("EUR", "integer", r"\d+\s*EUR\b", True),
    _p("GBP", "integer", r"\d+\s*GBP\b", True),
)


def normalize_price_number(price_text: str) -> Optional[float]:
    """가격 텍스트에서 숫자만 추출 (범위 검사 없음).

    - 숫자/구분자(. ,) 이외 문자는 제거
    - 첫 번째 콤마는 소수점으로 취급 ("10,99" -> 10.99)
    - 앞쪽에서 읽을 수 있는 숫자까지만 사용 ("1.234.56" -> 1.234)

    NOTE: "1.234"가 1234인지 1.234인지 구분하지 않습니다. 통화마다 표기가
    달라 한쪽으로 정하지 않고 위 규칙을 그대로 유지합니다.
    """
    if not price_text:
        return None

    numeric = _NON_NUMERIC_RE.sub("", price_text)
    # "Rs.10.99" 처럼 기호 뒤의 점은 소수점이 아님
    numeric = numeric.lstrip(".,").replace(",", ".", 1)

    match = _LEADING_NUMBER_RE.match(numeric)
    if not match:
        return None

    try:
        return float(match.group(0))
    except ValueError:
        return None


def is_plausible_price(value: Optional[float]) -> bool:
    return value is not None and MIN_PRICE <= value <= MAX_PRICE


def parse_price_value(price_text: str) -> Optional[float]:
    """표시용 가격 문자열 -> 숫자 (허용 범위 [0.01, 999999] 밖이면 None)"""
    value = normalize_price_number(price_text)
    return value if is_plausible_price(value) else None


def extract_price_from_text(text: str) -> Optional[str]:
    """텍스트에서 처음으로 그럴듯한 가격 문자열을 찾아 반환.

    테이블 순서대로 패턴을 적용하고, 숫자 값이 허용 범위에 드는 첫 매치를
    원문 그대로 (통화 기호 포함) 돌려줍니다.

    Examples:
        >>> extract_price_from_text("Buy now for $19.99")
        '$19.99'
        >>> extract_price_from_text("Price: €25.50, buy at ShopX")
        '€25.50'
        >>> extract_price_from_text("no price here") is None
        True
    """
    if not text:
        return None

    for pattern in CURRENCY_PATTERNS:
        for candidate in pattern.candidates(text):
            if parse_price_value(candidate) is not None:
                return candidate

    return None
