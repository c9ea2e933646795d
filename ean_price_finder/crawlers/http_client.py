"""공유 HTTP 클라이언트 (curl_cffi)

- 요청마다 AsyncSession을 만들면 TLS/커넥션 오버헤드가 커지므로
  프로세스 단위로 세션을 재사용합니다.
- 앱 종료 시 close()로 정리합니다.
"""

from __future__ import annotations

import asyncio
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from curl_cffi.requests import AsyncSession

from ean_price_finder.core.config import settings
from ean_price_finder.core.logging import logger, sanitize_for_log


_CHARSET_RE = re.compile(r"charset=([\w\-]+)", re.IGNORECASE)


@dataclass
class HttpPage:
    """GET 응답 요약 (본문은 HTML일 때만 채워짐)"""

    status: int
    content_type: str
    text: Optional[str] = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def is_html(self) -> bool:
        return "text/html" in self.content_type.lower()


def _decode(body: bytes, content_type: str) -> str:
    match = _CHARSET_RE.search(content_type or "")
    encoding = match.group(1) if match else "utf-8"
    try:
        return body.decode(encoding, errors="replace")
    except LookupError:
        return body.decode("utf-8", errors="replace")


class SharedHttpClient:
    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._session: Optional[AsyncSession] = None

    async def _ensure_session(self) -> AsyncSession:
        async with self._lock:
            if self._session is not None:
                return self._session
            self._session = AsyncSession(
                headers=self.default_headers(),
                allow_redirects=True,
                trust_env=False,
            )
            return self._session

    def default_headers(self) -> Dict[str, str]:
        return {
            "User-Agent": settings.webpage_user_agent,
            "Accept": settings.webpage_accept,
        }

    async def get_page(
        self,
        url: str,
        *,
        timeout_s: float,
        headers: Optional[Dict[str, str]] = None,
    ) -> HttpPage:
        """GET 후 상태/Content-Type 확인, HTML일 때만 본문을 읽음.

        네트워크 오류는 호출자에게 그대로 전달됩니다.
        """
        sess = await self._ensure_session()
        async with sess.stream(
            "GET",
            url,
            headers=headers,
            timeout=timeout_s,
            allow_redirects=True,
        ) as resp:
            status = getattr(resp, "status_code", 0) or 0
            content_type = resp.headers.get("content-type") or ""
            page = HttpPage(status=status, content_type=content_type)
            if not page.ok or not page.is_html:
                return page

            chunks = []
            async for chunk in resp.aiter_content():
                chunks.append(chunk)
            page.text = _decode(b"".join(chunks), content_type)
            return page

    async def get_json(
        self,
        url: str,
        *,
        params: Dict[str, Any],
        timeout_s: float,
    ) -> tuple[int, Any]:
        """GET JSON. (status, 디코딩된 본문 또는 None) 반환"""
        sess = await self._ensure_session()
        resp = await sess.get(
            url,
            params=params,
            headers={"Accept": "application/json"},
            timeout=timeout_s,
        )
        status = getattr(resp, "status_code", 0) or 0
        try:
            payload = resp.json()
        except ValueError:
            logger.info(f"[HTTP_CLIENT] Non-JSON response (status={status}) from {sanitize_for_log(url)}")
            payload = None
        return status, payload

    async def close(self) -> None:
        async with self._lock:
            if self._session is None:
                return
            try:
                await self._session.close()
            except Exception as e:
                logger.info(f"[HTTP_CLIENT] close failed: {type(e).__name__}: {repr(e)}")
            self._session = None


_shared_http_client = SharedHttpClient()


def get_shared_http_client() -> SharedHttpClient:
    return _shared_http_client


async def shutdown_shared_http_client() -> None:
    await _shared_http_client.close()
