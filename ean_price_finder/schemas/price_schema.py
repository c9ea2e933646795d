"""Pydantic 스키마 정의 (Security & Validation Enhanced)"""
from typing import Optional, List
from pydantic import BaseModel, Field, field_validator
from datetime import datetime

from ean_price_finder.engine.result import RankedResult
from ean_price_finder.utils.url import get_display_domain


class PriceSearchRequest(BaseModel):
    """가격 검색 요청 (팝업에서 보내는 형식)"""
    product_code: str = Field(..., min_length=1, max_length=32, description="EAN/UPC 코드 (8, 12, 13자리)")
    api_key: Optional[str] = Field(None, max_length=200, description="검색 API 키 (없으면 서버 설정 사용)")
    search_engine_id: Optional[str] = Field(None, max_length=200, description="검색 엔진 ID (없으면 서버 설정 사용)")

    @field_validator('product_code')
    @classmethod
    def validate_product_code(cls, v: str) -> str:
        """앞뒤 공백 제거 (체크섬 검증은 Engine에서 수행)"""
        if not v or not v.strip():
            raise ValueError('상품 코드는 공백만으로 구성될 수 없습니다')
        return v.strip()


class ProviderTestRequest(BaseModel):
    """검색 API 연결 테스트 요청"""
    api_key: Optional[str] = Field(None, max_length=200)
    search_engine_id: Optional[str] = Field(None, max_length=200)


class RankedResultItem(BaseModel):
    """가격순 정렬된 결과 한 건"""
    title: str = Field(..., description="검색 결과 제목")
    snippet: str = Field("", description="검색 스니펫")
    link: str = Field(..., description="상품 링크")
    display_link: str = Field("", description="검색 API의 displayLink")
    extracted_price: str = Field(..., description="표시 가격 또는 'Price not found'")
    price_source: str = Field(..., description="가격 출처: snippet | webpage | none")
    domain: str = Field(..., description="표시용 도메인")

    @classmethod
    def from_result(cls, result: RankedResult) -> "RankedResultItem":
        hit = result.hit
        return cls(
            title=hit.title or "Unknown Product",
            snippet=hit.snippet,
            link=hit.link or "#",
            display_link=hit.display_link,
            extracted_price=result.display_price,
            price_source=result.price_source.value,
            domain=get_display_domain(hit.link),
        )


class PriceSearchData(BaseModel):
    """가격 검색 결과"""
    product_code: str = Field(..., description="검증된 상품 코드")
    results: List[RankedResultItem] = Field(default_factory=list, description="가격순 결과")
    result_count: int = Field(..., ge=0, description="결과 수")
    elapsed_ms: float = Field(..., ge=0, description="검색 소요 시간 (밀리초)")


class PriceSearchResponse(BaseModel):
    """가격 검색 응답"""
    status: str = Field(..., description="success or error")
    data: Optional[PriceSearchData] = Field(None, description="검색 결과")
    message: str = Field(..., description="응답 메시지")
    error_code: str | None = Field(None, description="에러 코드 (error 시)")


class ProviderTestResponse(BaseModel):
    """연결 테스트 응답"""
    status: str
    message: str
    error_code: str | None = None


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str
    timestamp: datetime
    version: str
    search_configured: bool
