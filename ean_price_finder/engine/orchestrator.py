"""Search Orchestrator - Main Engine Entry Point

Coordinates the entire search pipeline:
1. Product code / credential validation (네트워크 호출 전)
2. Query variants → SearchProvider (순차, 변형별 실패는 건너뜀)
3. ResultFilter
4. PriceEnhancementPipeline (스니펫 → 웹페이지 → 정렬)
"""

from typing import Any, List, Mapping, Optional, Union

from ean_price_finder.core.config import settings
from ean_price_finder.core.exceptions import SearchProviderException, ValidationException
from ean_price_finder.core.logging import logger
from ean_price_finder.crawlers.search_provider import SearchCredentials, SearchProvider
from ean_price_finder.utils.barcode import ProductCode

from .filter import filter_price_results
from .pipeline import PriceEnhancementPipeline
from .result import RankedResult, SearchHit


QUERY_TEMPLATES = (
    "{code} price",
    "{code} buy online",
    "{code} shop",
    '"{code}" price comparison',
)


def build_query_variants(code: str) -> List[str]:
    """검색 쿼리 변형 (고정 순서)

    Examples:
        >>> build_query_variants("12345678")[0]
        '12345678 price'
    """
    return [template.format(code=code) for template in QUERY_TEMPLATES]


class SearchOrchestrator:
    """검색 엔진 오케스트레이터

    SearchProvider → ResultFilter → PriceEnhancementPipeline 파이프라인을 관리합니다.

    에러 정책:
    - 잘못된 코드/자격 증명: 네트워크 호출 전에 ValidationException
    - 쿼리 변형 하나의 실패: 로그 후 건너뜀
    - 호출한 모든 변형이 실패: SearchProviderException 하나로 전파
    """

    def __init__(
        self,
        provider: SearchProvider,
        pipeline: PriceEnhancementPipeline,
        variant_limit: Optional[int] = None,
    ):
        """
        Args:
            provider: 검색 API (search 메서드 구현)
            pipeline: 가격 보강 파이프라인
            variant_limit: 호출할 쿼리 변형 수 (기본값: 설정값 2)
        """
        if not provider:
            raise ValueError("provider must not be None")
        if not pipeline:
            raise ValueError("pipeline must not be None")

        self.provider = provider
        self.pipeline = pipeline
        self.variant_limit = variant_limit or settings.search_query_variant_limit

    async def search(
        self,
        product_code: Union[ProductCode, str],
        credentials: SearchCredentials,
    ) -> List[RankedResult]:
        """통합 검색 실행

        Args:
            product_code: EAN/UPC 코드 (문자열이면 검증 후 사용)
            credentials: 검색 API 자격 증명

        Returns:
            List[RankedResult]: 정렬된 결과 (없으면 빈 리스트)

        Raises:
            ValidationException: 코드 또는 자격 증명이 유효하지 않음
            SearchProviderException: 검색 API 전체 실패
        """
        code = product_code if isinstance(product_code, ProductCode) else ProductCode.parse(product_code)
        credentials.validate()

        logger.info(f"[ORCHESTRATOR] Search started: code={code}")

        items = await self._collect_items(code, credentials)
        hits = [SearchHit.from_item(item) for item in items if isinstance(item, Mapping)]

        filtered = filter_price_results(hits, code.value)
        logger.info(f"[ORCHESTRATOR] hits={len(hits)}, filtered={len(filtered)}")

        results = await self.pipeline.enhance(filtered, code.value)
        priced = sum(1 for r in results if r.has_price)
        logger.info(f"[ORCHESTRATOR] Search completed: code={code}, results={len(results)}, priced={priced}")
        return results

    async def _collect_items(self, code: ProductCode, credentials: SearchCredentials) -> List[Any]:
        """쿼리 변형을 순서대로 호출하고 items를 이어붙임"""
        queries = build_query_variants(code.value)[: self.variant_limit]
        items: List[Any] = []
        failures: List[Exception] = []

        for index, query in enumerate(queries, start=1):
            try:
                payload = await self.provider.search(query, credentials)
            except ValidationException:
                raise
            except Exception as e:
                logger.warning(f"[ORCHESTRATOR] Search query {index} failed: {type(e).__name__}: {e}")
                failures.append(e)
                continue

            items.extend((payload or {}).get("items") or [])

        if queries and len(failures) == len(queries):
            first = failures[0]
            logger.error(f"[ORCHESTRATOR] All search queries failed: {first}")
            if isinstance(first, SearchProviderException):
                raise first
            raise SearchProviderException(str(first)) from first

        return items
