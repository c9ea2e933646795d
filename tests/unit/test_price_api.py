"""Price API 라우트 단위 테스트."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from ean_price_finder.api import get_orchestrator, get_search_provider
from ean_price_finder.app import app
from ean_price_finder.core import config
from ean_price_finder.core.exceptions import SearchProviderException
from ean_price_finder.engine import PriceEnhancementPipeline, SearchOrchestrator

CODE = "5901234123457"
CREDS = {"api_key": "test-key", "search_engine_id": "abc123:def456"}


@pytest.fixture
def client(dummy_provider, dummy_fetcher, monkeypatch):
    """더미 검색 API/Fetcher를 주입한 TestClient"""
    monkeypatch.setattr(config.settings, "google_api_key", "")
    monkeypatch.setattr(config.settings, "search_engine_id", "")

    orchestrator = SearchOrchestrator(
        provider=dummy_provider,
        pipeline=PriceEnhancementPipeline(fetcher=dummy_fetcher),
    )
    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    app.dependency_overrides[get_search_provider] = lambda: dummy_provider
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_routes_registered():
    """엔드포인트 등록 확인."""
    routes = set(app.openapi()["paths"])
    routes.update(getattr(route, "path", None) for route in app.routes)
    assert "/api/v1/price/search" in routes
    assert "/api/v1/provider/test" in routes
    assert "/health" in routes


def test_search_success(client, dummy_provider, dummy_fetcher, make_item):
    link = "https://www.shopy.example.com/p/2"
    dummy_fetcher.prices[link] = "€ 24,90"
    dummy_provider.responses[f"{CODE} price"] = {
        "items": [
            make_item(title="Widget at ShopX", snippet="Price: €25.50, buy at ShopX",
                      link="https://shopx.example.com/p/1"),
            make_item(title="Widget at ShopY", snippet="In stock", link=link),
            make_item(title="Widget manual", snippet="Download the PDF", link="https://docs.example.com/"),
        ]
    }

    response = client.post("/api/v1/price/search", json={"product_code": CODE, **CREDS})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "success"
    assert body["error_code"] is None
    assert body["message"] == "Found 2 results (2 with prices)."

    data = body["data"]
    assert data["product_code"] == CODE
    assert data["result_count"] == 2
    assert [r["extracted_price"] for r in data["results"]] == ["€ 24,90", "€25.50"]
    assert [r["price_source"] for r in data["results"]] == ["webpage", "snippet"]
    assert data["results"][0]["domain"] == "shopy.example.com"


def test_search_no_results(client):
    response = client.post("/api/v1/price/search", json={"product_code": CODE, **CREDS})

    body = response.json()
    assert body["status"] == "success"
    assert body["data"]["results"] == []
    assert body["message"] == "No price information found for this EAN code."


def test_search_price_not_found_label(client, dummy_provider, make_item):
    dummy_provider.responses[f"{CODE} price"] = {
        "items": [make_item(title="", snippet="Buy online", link="")]
    }

    body = client.post("/api/v1/price/search", json={"product_code": CODE, **CREDS}).json()

    result = body["data"]["results"][0]
    assert result["extracted_price"] == "Price not found"
    assert result["price_source"] == "none"
    assert result["title"] == "Unknown Product"
    assert result["link"] == "#"
    assert result["domain"] == "External Site"
    assert body["message"] == "Found 1 results (0 with prices)."


def test_invalid_code_returns_error_envelope(client, dummy_provider):
    response = client.post("/api/v1/price/search", json={"product_code": "4006381333930", **CREDS})

    body = response.json()
    assert response.status_code == 200
    assert body["status"] == "error"
    assert body["error_code"] == "INVALID_PRODUCT_CODE"
    assert dummy_provider.queries == []


def test_missing_credentials(client, dummy_provider):
    response = client.post("/api/v1/price/search", json={"product_code": CODE})

    body = response.json()
    assert body["status"] == "error"
    assert body["error_code"] == "MISSING_CREDENTIALS"
    assert dummy_provider.queries == []


def test_blank_product_code_rejected(client):
    response = client.post("/api/v1/price/search", json={"product_code": "   ", **CREDS})
    assert response.status_code == 422


def test_provider_failure(client, dummy_provider):
    dummy_provider.default = SearchProviderException("API key not valid", status_code=400)

    body = client.post("/api/v1/price/search", json={"product_code": CODE, **CREDS}).json()

    assert body["status"] == "error"
    assert body["error_code"] == "SEARCH_PROVIDER_ERROR"
    assert body["message"] == "API key not valid"


def test_provider_connection_test(client, monkeypatch, dummy_provider):
    async def ok(credentials):
        return True

    monkeypatch.setattr(dummy_provider, "test_connection", ok, raising=False)

    body = client.post("/api/v1/provider/test", json=CREDS).json()
    assert body == {"status": "success", "message": "API connection test successful!", "error_code": None}


def test_provider_connection_test_failure(client, monkeypatch, dummy_provider):
    async def fail(credentials):
        raise SearchProviderException("Search API error: 403", status_code=403)

    monkeypatch.setattr(dummy_provider, "test_connection", fail, raising=False)

    body = client.post("/api/v1/provider/test", json=CREDS).json()
    assert body["status"] == "error"
    assert body["message"] == "Connection test failed: Search API error: 403"


def test_health(client):
    body = client.get("/health").json()
    assert body["status"] == "ok"
    assert body["search_configured"] is False
    assert "version" in body
