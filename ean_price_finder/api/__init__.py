"""API 엔드포인트 패키지 - export only."""

from .routes import health_router, price_router, get_orchestrator, get_search_provider

__all__ = ["health_router", "price_router", "get_orchestrator", "get_search_provider"]
