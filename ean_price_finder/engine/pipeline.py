"""Price Enhancement Pipeline

1. 스니펫에서 가격 추출
2. 나머지는 링크된 웹페이지를 배치(기본 3개) 단위로 동시 fetch, 배치 간에는 순차
3. 스니펫 결과 → 웹페이지 결과 순으로 합친 뒤 가격순 정렬

fetch 실패(타임아웃, 네트워크 오류, 비 HTML, 비 2xx)는 해당 항목만 NoPrice로 강등되고
배치/파이프라인은 계속 진행됩니다.
"""

from __future__ import annotations

import asyncio
from typing import Iterable, List, Optional, Protocol

from ean_price_finder.core.config import settings
from ean_price_finder.core.logging import logger
from ean_price_finder.utils.text import extract_price_from_text, parse_price_value

from .result import PriceEvidence, RankedResult, SearchHit


class PriceFetcher(Protocol):
    """웹페이지 가격 Fetcher 인터페이스"""

    async def fetch_price(self, url: str) -> Optional[str]:
        ...


def _sort_key(result: RankedResult) -> tuple:
    if not result.has_price:
        return (1, 1, 0.0)

    value = parse_price_value(result.evidence.display_price or "")
    if value is None:
        # 가격은 있지만 숫자로 읽을 수 없음: 가격 있는 그룹의 맨 뒤
        return (0, 1, 0.0)
    return (0, 0, value)


def rank_results(results: Iterable[RankedResult]) -> List[RankedResult]:
    """가격 있음 → 가격 오름차순 → 입력 순서 (stable)"""
    return sorted(results, key=_sort_key)


class PriceEnhancementPipeline:
    """검색 결과에 가격 근거를 붙이고 정렬"""

    def __init__(
        self,
        fetcher: PriceFetcher,
        batch_size: Optional[int] = None,
        fetch_timeout_s: Optional[float] = None,
    ) -> None:
        if fetcher is None:
            raise ValueError("fetcher must not be None")

        self.fetcher = fetcher
        self.batch_size = batch_size if batch_size is not None else settings.webpage_fetch_batch_size
        self.fetch_timeout_s = fetch_timeout_s if fetch_timeout_s is not None else settings.webpage_fetch_timeout_s

        if self.batch_size <= 0:
            raise ValueError(f"Invalid batch_size: {self.batch_size}")
        if self.fetch_timeout_s <= 0:
            raise ValueError(f"Invalid fetch_timeout_s: {self.fetch_timeout_s}")

    async def enhance(self, hits: Iterable[SearchHit], product_code: str) -> List[RankedResult]:
        """가격 근거를 붙인 정렬된 결과 반환"""
        snippet_priced: List[RankedResult] = []
        needs_fetch: List[SearchHit] = []

        for hit in hits:
            snippet_price = extract_price_from_text(hit.snippet)
            if snippet_price:
                snippet_priced.append(RankedResult(hit, PriceEvidence.from_snippet(snippet_price)))
            else:
                needs_fetch.append(hit)

        logger.info(
            f"[PIPELINE] code={product_code}, snippet_prices={len(snippet_priced)}, "
            f"webpage_fetches={len(needs_fetch)}"
        )

        webpage_results: List[RankedResult] = []
        for start in range(0, len(needs_fetch), self.batch_size):
            batch = needs_fetch[start:start + self.batch_size]
            batch_results = await asyncio.gather(*(self._fetch_one(hit) for hit in batch))
            webpage_results.extend(batch_results)

        return rank_results(snippet_priced + webpage_results)

    async def _fetch_one(self, hit: SearchHit) -> RankedResult:
        """단일 페이지 처리. 어떤 실패도 NoPrice로 강등 (취소는 전파)"""
        try:
            price = await asyncio.wait_for(
                self.fetcher.fetch_price(hit.link),
                timeout=self.fetch_timeout_s,
            )
        except asyncio.TimeoutError:
            logger.info(f"[PIPELINE] Fetch timeout ({self.fetch_timeout_s:.1f}s): {hit.link[:120]}")
            return RankedResult(hit, PriceEvidence.no_price())
        except Exception as e:
            logger.info(f"[PIPELINE] Fetch failed: {hit.link[:120]} ({type(e).__name__}: {e})")
            return RankedResult(hit, PriceEvidence.no_price())

        if price:
            return RankedResult(hit, PriceEvidence.from_webpage(price))
        return RankedResult(hit, PriceEvidence.no_price())
