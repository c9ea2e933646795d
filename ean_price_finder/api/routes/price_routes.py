"""Price Routes (Engine Layer)

HTTP Layer가 Engine Layer로 요청을 위임하는 단순한 Translator 역할만 수행합니다.
팝업이 보여줄 수 있도록 결과/에러를 항상 같은 envelope으로 돌려줍니다.
"""

import time
from typing import Optional

from fastapi import APIRouter, Depends

from ean_price_finder.core.exceptions import (
    PriceFinderException,
    SearchProviderException,
    ValidationException,
)
from ean_price_finder.core.logging import logger
from ean_price_finder.crawlers import (
    GoogleCustomSearchProvider,
    SearchCredentials,
    WebpagePriceFetcher,
)
from ean_price_finder.engine import PriceEnhancementPipeline, SearchOrchestrator
from ean_price_finder.schemas.price_schema import (
    PriceSearchData,
    PriceSearchRequest,
    PriceSearchResponse,
    ProviderTestRequest,
    ProviderTestResponse,
    RankedResultItem,
)
from ean_price_finder.utils.barcode import ProductCode

router = APIRouter(prefix="/api/v1", tags=["price"])

# 싱글톤 서비스
_search_provider: Optional[GoogleCustomSearchProvider] = None
_orchestrator: Optional[SearchOrchestrator] = None


def get_search_provider() -> GoogleCustomSearchProvider:
    """GoogleCustomSearchProvider 싱글톤"""
    global _search_provider
    if _search_provider is None:
        _search_provider = GoogleCustomSearchProvider()
    return _search_provider


def get_orchestrator(
    provider: GoogleCustomSearchProvider = Depends(get_search_provider),
) -> SearchOrchestrator:
    """SearchOrchestrator 싱글톤

    Engine Layer의 진입점을 제공합니다.
    """
    global _orchestrator
    if _orchestrator is None:
        pipeline = PriceEnhancementPipeline(fetcher=WebpagePriceFetcher())
        _orchestrator = SearchOrchestrator(provider=provider, pipeline=pipeline)
    return _orchestrator


@router.post("/price/search", response_model=PriceSearchResponse)
async def search_price(
    request: PriceSearchRequest,
    orchestrator: SearchOrchestrator = Depends(get_orchestrator),
):
    """EAN/UPC 가격 검색 API

    Flow:
        1. 코드/자격 증명 검증 (네트워크 호출 전)
        2. Engine에 위임 (검색 → 필터 → 스니펫/웹페이지 가격 → 정렬)
        3. 결과를 HTTP Response로 변환
    """
    started = time.perf_counter()

    try:
        code = ProductCode.parse(request.product_code)
        credentials = SearchCredentials.resolve(request.api_key, request.search_engine_id)
        credentials.validate()
    except ValidationException as e:
        logger.warning(f"[API] Input validation failed: {e}")
        return PriceSearchResponse(
            status="error",
            data=None,
            message=e.message,
            error_code=e.error_code,
        )

    logger.info(f"[API] Search request: code={code}")

    try:
        results = await orchestrator.search(code, credentials)
    except SearchProviderException as e:
        logger.error(f"[API] Search provider failed: code={code}, error={e}")
        return PriceSearchResponse(
            status="error",
            data=None,
            message=e.message,
            error_code=e.error_code,
        )
    except PriceFinderException as e:
        logger.error(f"[API] Search failed: code={code}, error={e}")
        return PriceSearchResponse(
            status="error",
            data=None,
            message=e.message,
            error_code=e.error_code,
        )
    except Exception as e:
        logger.error(f"[API] Search failed: code={code}", exc_info=True)
        return PriceSearchResponse(
            status="error",
            data=None,
            message=f"검색 중 오류가 발생했습니다: {str(e)}",
            error_code="INTERNAL_ERROR",
        )

    elapsed_ms = (time.perf_counter() - started) * 1000
    items = [RankedResultItem.from_result(result) for result in results]

    if not items:
        message = "No price information found for this EAN code."
    else:
        priced = sum(1 for item in items if item.price_source != "none")
        message = f"Found {len(items)} results ({priced} with prices)."

    return PriceSearchResponse(
        status="success",
        data=PriceSearchData(
            product_code=code.value,
            results=items,
            result_count=len(items),
            elapsed_ms=elapsed_ms,
        ),
        message=message,
        error_code=None,
    )


@router.post("/provider/test", response_model=ProviderTestResponse)
async def test_provider_connection(
    request: ProviderTestRequest,
    provider: GoogleCustomSearchProvider = Depends(get_search_provider),
):
    """검색 API 자격 증명 연결 테스트 (설정 화면용)"""
    credentials = SearchCredentials.resolve(request.api_key, request.search_engine_id)

    try:
        await provider.test_connection(credentials)
    except PriceFinderException as e:
        logger.warning(f"[API] Connection test failed: {e.error_code}")
        return ProviderTestResponse(
            status="error",
            message=f"Connection test failed: {e.message}",
            error_code=e.error_code,
        )

    return ProviderTestResponse(status="success", message="API connection test successful!")
