"""헬스 체크 엔드포인트"""
from fastapi import APIRouter
from datetime import datetime

from ean_price_finder.core.config import settings
from ean_price_finder.schemas.price_schema import HealthResponse
from ean_price_finder import __version__

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    헬스 체크 엔드포인트

    - 서버 상태
    - 서버 측 검색 API 자격 증명 설정 여부 (요청마다 전달하는 경우 false여도 정상)
    """
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(),
        version=__version__,
        search_configured=bool(settings.google_api_key and settings.search_engine_id),
    )


@router.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "service": settings.api_title,
        "version": __version__,
        "docs": "/docs"
    }
