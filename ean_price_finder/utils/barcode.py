"""EAN/UPC 상품 코드 검증"""
from __future__ import annotations

import re
from dataclasses import dataclass

from ean_price_finder.core.exceptions import InvalidProductCodeException


VALID_CODE_LENGTHS = (8, 12, 13)

_NON_DIGIT_RE = re.compile(r"\D")


def ean13_check_digit(digits: str) -> int:
    """EAN-13 앞 12자리로 체크 디지트 계산

    Examples:
        >>> ean13_check_digit("400638133393")
        1
    """
    total = sum(int(d) * (1 if i % 2 == 0 else 3) for i, d in enumerate(digits[:12]))
    return (10 - (total % 10)) % 10


def is_valid_product_code(raw: str) -> bool:
    """8/12/13자리 코드인지 확인 (13자리는 체크섬까지 검증)

    Examples:
        >>> is_valid_product_code("4006381333931")
        True
        >>> is_valid_product_code("4006381333930")
        False
        >>> is_valid_product_code("12345678")
        True
    """
    try:
        ProductCode.parse(raw)
    except InvalidProductCodeException:
        return False
    return True


@dataclass(frozen=True)
class ProductCode:
    """검증된 EAN/UPC 코드 (숫자만)"""

    value: str

    @classmethod
    def parse(cls, raw: str) -> "ProductCode":
        """사용자 입력을 검증해 ProductCode 생성

        공백/하이픈 등 숫자가 아닌 문자는 제거한 뒤 검증합니다.

        Raises:
            InvalidProductCodeException: 길이 또는 체크섬 오류
        """
        if raw is None or not str(raw).strip():
            raise InvalidProductCodeException("", "product code is empty")

        raw = str(raw).strip()
        digits = _NON_DIGIT_RE.sub("", raw)

        if len(digits) not in VALID_CODE_LENGTHS:
            raise InvalidProductCodeException(raw, "expected 8, 12 or 13 digits")

        if len(digits) == 13 and ean13_check_digit(digits) != int(digits[12]):
            raise InvalidProductCodeException(raw, "EAN-13 checksum mismatch")

        return cls(digits)

    def __str__(self) -> str:
        return self.value
