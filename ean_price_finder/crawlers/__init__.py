"""Network boundary modules (search API + webpage fetch).

공개 API는 이 파일에서만 export합니다.
"""

from .http_client import HttpPage, SharedHttpClient, get_shared_http_client, shutdown_shared_http_client
from .search_provider import GoogleCustomSearchProvider, SearchCredentials, SearchProvider
from .webpage import WebpagePriceFetcher

__all__ = [
    "HttpPage",
    "SharedHttpClient",
    "get_shared_http_client",
    "shutdown_shared_http_client",
    "GoogleCustomSearchProvider",
    "SearchCredentials",
    "SearchProvider",
    "WebpagePriceFetcher",
]
