"""텍스트 가격 추출 유닛 테스트"""
import pytest

from ean_price_finder.utils.text import (
    CURRENCY_PATTERNS,
    extract_price_from_text,
    normalize_price_number,
    parse_price_value,
)


class TestExtractPriceFromText:
    """통화 패턴 테이블 기반 추출"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Buy now for $19.99", "$19.99"),
            ("Price: €25.50, buy at ShopX", "€25.50"),
            ("Only 12,99 € today", "12,99 €"),
            ("Now £ 7.49 with free delivery", "£ 7.49"),
            ("Sale 1999 JPY", "1999 JPY"),
            ("Available for 49.90 CHF", "49.90 CHF"),
            ("Pris 129,00 kr", "129,00 kr"),
            ("MRP ₹499.00 inclusive of taxes", "₹499.00"),
            ("Cena 89,99 zł", "89,99 zł"),
            ("Preço 59,90 BRL", "59,90 BRL"),
            ("Harga Rp 150000", "Rp 150000"),
            ("Ár: 4990 Ft", "4990 Ft"),
            ("Costs 15 EUR only", "15 EUR"),
        ],
    )
    def test_currency_formats(self, text, expected):
        """통화별 표기"""
        assert extract_price_from_text(text) == expected

    def test_whole_number_fallback(self):
        """소수점 없는 가격은 정수 폴백 패턴으로"""
        assert extract_price_from_text("Deal: $25 shipped") == "$25"

    def test_empty_and_missing(self):
        """빈 입력"""
        assert extract_price_from_text("") is None
        assert extract_price_from_text(None) is None
        assert extract_price_from_text("Unrelated blog post about gardening") is None

    def test_table_order_wins_over_text_position(self):
        """텍스트에서 먼저 나와도 테이블 순서가 앞선 통화가 우선"""
        assert extract_price_from_text("€10.00 or $12.00") == "$12.00"

    def test_first_occurrence_within_pattern(self):
        """같은 패턴 안에서는 왼쪽 매치가 우선"""
        assert extract_price_from_text("was $30.00 now $20.00") == "$30.00"

    def test_skips_out_of_range_match_and_keeps_scanning(self):
        """범위 밖 매치는 건너뛰고 다음 매치를 확인"""
        assert extract_price_from_text("$0.00 shipping, item $15.00") == "$15.00"

    def test_idempotent(self):
        """같은 입력이면 항상 같은 결과"""
        text = "Bundle 3x 9,95 € or 1 for 3,95 €"
        first = extract_price_from_text(text)
        assert first == "9,95 €"
        assert all(extract_price_from_text(text) == first for _ in range(5))


class TestPriceRange:
    """허용 범위 [0.01, 999999] 경계"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("$0.00", None),
            ("$0.01", "$0.01"),
            ("$999999", "$999999"),
            ("$999999.00", "$999999.00"),
            ("$1000000", None),
            ("$1000000.00", None),
        ],
    )
    def test_boundaries(self, text, expected):
        assert extract_price_from_text(text) == expected

    def test_returned_value_always_in_range(self):
        """반환된 문자열의 숫자 값은 항상 범위 안"""
        samples = [
            "$0.00 $0.01",
            "1000000 USD or 999999 USD",
            "€ 0,00 / € 0,01",
            "¥0 ¥5",
        ]
        for text in samples:
            price = extract_price_from_text(text)
            assert price is not None
            value = normalize_price_number(price)
            assert 0.01 <= value <= 999999


class TestNormalizePriceNumber:
    """숫자 정규화"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("$10.99", 10.99),
            ("10,99 €", 10.99),
            ("Rs.10.99", 10.99),
            ("¥1000", 1000.0),
            ("1.234,56 €", 1.234),
            ("1,234.56", 1.234),
            ("Rp 10.000", 10.0),
        ],
    )
    def test_normalization(self, text, expected):
        assert normalize_price_number(text) == pytest.approx(expected)

    def test_unparsable(self):
        assert normalize_price_number("Price not found") is None
        assert normalize_price_number("") is None
        assert normalize_price_number("...") is None

    def test_parse_price_value_range_checked(self):
        assert parse_price_value("$5.00") == pytest.approx(5.0)
        assert parse_price_value("$0.00") is None
        assert parse_price_value("1000000 USD") is None


def test_pattern_table_covers_required_currencies():
    """필수 통화가 모두 테이블에 존재"""
    required = {
        "USD", "EUR", "GBP", "JPY", "CAD", "AUD", "CHF", "SEK", "NOK", "DKK", "CNY",
        "INR", "KRW", "SGD", "HKD", "NZD", "MXN", "BRL", "RUB", "PLN", "TRY", "ZAR",
        "THB", "MYR", "PHP", "IDR", "VND", "AED", "SAR", "ILS", "CZK", "HUF", "RON",
    }
    covered = {pattern.currency for pattern in CURRENCY_PATTERNS}
    assert required <= covered
    # 정수 폴백은 테이블 맨 끝
    assert all(p.form == "integer" for p in CURRENCY_PATTERNS[-6:])
