"""검색 API 클라이언트 (Google Custom Search JSON API)"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol

from ean_price_finder.core.config import settings
from ean_price_finder.core.exceptions import MissingCredentialsException, SearchProviderException
from ean_price_finder.core.logging import logger, sanitize_for_log

from .http_client import SharedHttpClient, get_shared_http_client


@dataclass(frozen=True)
class SearchCredentials:
    """검색 API 자격 증명 (형식은 검증하지 않고 비어있는지만 확인)"""

    api_key: str
    search_engine_id: str

    def validate(self) -> None:
        if not self.api_key or not self.api_key.strip():
            raise MissingCredentialsException("api_key")
        if not self.search_engine_id or not self.search_engine_id.strip():
            raise MissingCredentialsException("search_engine_id")

    @classmethod
    def resolve(
        cls,
        api_key: Optional[str] = None,
        search_engine_id: Optional[str] = None,
    ) -> "SearchCredentials":
        """요청 값이 없으면 설정값 사용"""
        return cls(
            api_key=(api_key or settings.google_api_key or "").strip(),
            search_engine_id=(search_engine_id or settings.search_engine_id or "").strip(),
        )


class SearchProvider(Protocol):
    """검색 API 인터페이스

    반환값은 {"items": [...]} 형태의 dict이며 items가 없을 수 있습니다.
    """

    async def search(self, query: str, credentials: SearchCredentials) -> Dict[str, Any]:
        ...


def _error_message(status: int, payload: Any) -> str:
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return f"Search API error: {status}"


class GoogleCustomSearchProvider:
    """Google Custom Search API 래퍼"""

    def __init__(
        self,
        client: Optional[SharedHttpClient] = None,
        api_url: Optional[str] = None,
        num_results: Optional[int] = None,
        timeout_s: Optional[float] = None,
    ) -> None:
        self.client = client or get_shared_http_client()
        self.api_url = api_url or settings.search_api_url
        self.num_results = num_results or settings.search_results_per_query
        self.timeout_s = timeout_s or settings.search_request_timeout_s

    async def search(
        self,
        query: str,
        credentials: SearchCredentials,
        num: Optional[int] = None,
    ) -> Dict[str, Any]:
        """검색 실행

        Raises:
            MissingCredentialsException: 자격 증명이 비어있음
            SearchProviderException: 비 2xx 응답 또는 네트워크 오류
        """
        credentials.validate()

        params = {
            "key": credentials.api_key,
            "cx": credentials.search_engine_id,
            "q": query,
            "num": str(num or self.num_results),
        }

        logger.info(f"[SEARCH_API] query='{sanitize_for_log(query)}'")

        try:
            status, payload = await self.client.get_json(
                self.api_url, params=params, timeout_s=self.timeout_s
            )
        except Exception as e:
            logger.error(f"[SEARCH_API] Request failed: {type(e).__name__}: {e}")
            raise SearchProviderException(
                f"Search API request failed: {type(e).__name__}"
            ) from e

        if not 200 <= status < 300:
            message = _error_message(status, payload)
            logger.error(f"[SEARCH_API] Error response: status={status}, message={message}")
            raise SearchProviderException(message, status_code=status)

        if not isinstance(payload, dict):
            raise SearchProviderException("Invalid response format", status_code=status)

        logger.debug(f"[SEARCH_API] items={len(payload.get('items') or [])}")
        return payload

    async def test_connection(self, credentials: SearchCredentials) -> bool:
        """설정 화면의 연결 테스트: 'test' 1건 검색 후 searchInformation 확인

        Raises:
            SearchProviderException: 요청 실패 또는 응답 형식 오류
        """
        payload = await self.search("test", credentials, num=1)
        if "searchInformation" not in payload:
            raise SearchProviderException("Invalid response format")
        return True
