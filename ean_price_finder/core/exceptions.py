"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional


# 기본 예외 클래스
class PriceFinderException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 유효성 검증 관련 예외 (네트워크 호출 전에 발생)
class ValidationException(PriceFinderException):
    """유효성 검증 예외"""
    def __init__(self, field: str, reason: str, error_code: str = "VALIDATION_ERROR", details: Optional[dict[str, Any]] = None):
        message = f"Validation failed for '{field}': {reason}"
        super().__init__(message, error_code,
                        details or {"field": field, "reason": reason})


class InvalidProductCodeException(ValidationException):
    """유효하지 않은 EAN/UPC 코드"""
    def __init__(self, code: str, reason: str, details: Optional[dict[str, Any]] = None):
        self.code = code
        super().__init__("product_code", f"{reason} (value: {code})", "INVALID_PRODUCT_CODE", details)


class MissingCredentialsException(ValidationException):
    """검색 API 자격 증명 누락"""
    def __init__(self, field: str, details: Optional[dict[str, Any]] = None):
        super().__init__(field, "must not be empty", "MISSING_CREDENTIALS", details)


# 검색 API 관련 예외
class SearchProviderException(PriceFinderException):
    """검색 API 호출 실패

    API가 돌려준 error.message가 있으면 그대로, 없으면 HTTP 상태 기반 메시지를 사용합니다.
    """
    def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[dict[str, Any]] = None):
        self.status_code = status_code
        super().__init__(message, "SEARCH_PROVIDER_ERROR",
                        details or {"status_code": status_code})


# 웹페이지 fetch 관련 예외
class WebpageFetchException(PriceFinderException):
    """웹페이지 fetch 실패 (파이프라인에서 NoPrice로 강등됨)"""
    def __init__(self, url: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Webpage fetch failed: {reason}"
        super().__init__(message, "WEBPAGE_FETCH_ERROR",
                        details or {"url": url, "reason": reason})
