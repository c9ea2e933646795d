"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 Dummy/Fake 주입 (검색 API, 웹페이지 Fetcher)

금지:
- 실제 네트워크 호출
"""

from __future__ import annotations

import asyncio
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import pytest


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ean_price_finder.crawlers.search_provider import SearchCredentials  # noqa: E402
from ean_price_finder.engine.result import SearchHit  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    """테스트 환경 변수 설정 (세션 전역)"""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "INFO"


@dataclass
class DummyProvider:
    """오케스트레이터 Unit 테스트용 더미 검색 API

    - 쿼리별 응답(dict) 또는 예외를 지정
    - 호출된 쿼리를 순서대로 기록
    """

    responses: dict[str, Any] = field(default_factory=dict)
    default: Any = field(default_factory=lambda: {"items": []})
    queries: list[str] = field(default_factory=list)

    async def search(self, query: str, credentials: SearchCredentials) -> dict[str, Any]:
        self.queries.append(query)
        response = self.responses.get(query, self.default)
        if isinstance(response, Exception):
            raise response
        return response


@dataclass
class DummyFetcher:
    """파이프라인 Unit 테스트용 더미 웹페이지 Fetcher

    - URL별 가격(str/None), 예외, 지연(초)을 지정
    - 동시에 진행 중인 fetch 수의 최대값을 기록
    """

    prices: dict[str, Any] = field(default_factory=dict)
    delays: dict[str, float] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)
    in_flight: int = 0
    max_in_flight: int = 0
    batches: list[list[str]] = field(default_factory=list)

    async def fetch_price(self, url: str) -> Optional[str]:
        self.calls.append(url)
        if self.in_flight == 0:
            self.batches.append([])
        self.batches[-1].append(url)

        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(url, 0.01))
            price = self.prices.get(url)
            if isinstance(price, Exception):
                raise price
            return price
        finally:
            self.in_flight -= 1


@pytest.fixture
def dummy_provider() -> DummyProvider:
    return DummyProvider()


@pytest.fixture
def dummy_fetcher() -> DummyFetcher:
    return DummyFetcher()


@pytest.fixture
def credentials() -> SearchCredentials:
    return SearchCredentials(api_key="test-key", search_engine_id="abc123:def456")


def _make_hit(
    title: str = "Product",
    snippet: str = "",
    link: str = "https://shop.example.com/p/1",
    display_link: str = "shop.example.com",
) -> SearchHit:
    return SearchHit(title=title, snippet=snippet, link=link, display_link=display_link)


def _make_item(
    title: str = "Product",
    snippet: str = "",
    link: str = "https://shop.example.com/p/1",
    display_link: str = "shop.example.com",
    **extra: Any,
) -> dict[str, Any]:
    """검색 API 응답 item (camelCase displayLink 포함)"""
    item = {"title": title, "snippet": snippet, "link": link, "displayLink": display_link}
    item.update(extra)
    return item


@pytest.fixture
def make_hit():
    """SearchHit 팩토리"""
    return _make_hit


@pytest.fixture
def make_item():
    """검색 API item 팩토리"""
    return _make_item


# ============================================================================
# 웹페이지 HTML 샘플
# ============================================================================

@pytest.fixture
def product_page_html() -> str:
    """본문 텍스트에 가격이 있는 상품 페이지"""
    return """
    <html>
      <head>
        <style>.price { color: red; } /* $1.00 */</style>
        <script>var tracking = "$0.50"; window.price = "€2.00";</script>
      </head>
      <body>
        <h1>Acme Widget 4006381333931</h1>
        <div class="product-price"><span>€ 24,90</span></div>
      </body>
    </html>
    """


@pytest.fixture
def schema_only_html() -> str:
    """본문 텍스트에는 가격이 없고 Schema.org 메타데이터만 있는 페이지"""
    return """
    <html><head>
      <meta property="price" content="19.99 EUR">
    </head><body><p>Acme Widget</p></body></html>
    """
