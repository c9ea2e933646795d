"""설정 관리 - 환경 변수 로드 및 검증"""
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 검색 API (Google Custom Search)
    # 요청 본문에 자격 증명이 없을 때만 사용합니다.
    google_api_key: str = ""
    search_engine_id: str = ""
    search_api_url: str = "https://www.googleapis.com/customsearch/v1"
    search_results_per_query: int = 10
    search_request_timeout_ms: int = 10000

    # 4개의 쿼리 변형 중 실제로 호출할 개수
    search_query_variant_limit: int = 2

    # 웹페이지 가격 추출
    # - webpage_fetch_timeout_ms: 단일 페이지 요청 타임아웃 (요청마다 독립)
    # - webpage_fetch_batch_size: 동시에 진행되는 요청 수 (배치 간에는 순차)
    webpage_fetch_timeout_ms: int = 5000
    webpage_fetch_batch_size: int = 3
    webpage_user_agent: str = "Mozilla/5.0 (compatible; EAN-Price-Finder/1.0)"
    webpage_accept: str = "text/html,application/xhtml+xml"

    # 필터링 후 남길 최대 결과 수
    result_limit: int = 10

    # API
    api_title: str = "EAN Price Finder"
    api_version: str = "1.0.0"
    api_description: str = "EAN/UPC 바코드로 온라인 판매 가격을 찾아 가격순으로 정렬합니다."

    # 로깅
    log_level: str = "INFO"

    @field_validator(
        "search_request_timeout_ms",
        "webpage_fetch_timeout_ms",
    )
    @classmethod
    def validate_timeouts(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("timeouts must be positive")
        return v

    @field_validator(
        "search_results_per_query",
        "webpage_fetch_batch_size",
        "result_limit",
    )
    @classmethod
    def validate_positive_sizes(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("batch sizes and limits must be positive")
        return v

    @field_validator("search_query_variant_limit")
    @classmethod
    def validate_variant_limit(cls, v: int) -> int:
        if not 1 <= v <= 4:
            raise ValueError("search_query_variant_limit must be between 1 and 4")
        return v

    @property
    def webpage_fetch_timeout_s(self) -> float:
        return self.webpage_fetch_timeout_ms / 1000.0

    @property
    def search_request_timeout_s(self) -> float:
        return self.search_request_timeout_ms / 1000.0

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
