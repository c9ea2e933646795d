"""API routes package."""

from .health_routes import router as health_router
from .price_routes import router as price_router, get_orchestrator, get_search_provider

__all__ = ["health_router", "price_router", "get_orchestrator", "get_search_provider"]
