"""웹페이지 가격 Fetcher (curl_cffi + HTML 파싱)

- 네트워크(fetch)는 SharedHttpClient, 파싱은 utils.text.html 에 맡깁니다.
- 실패 사유는 WebpageFetchException으로 올리고, NoPrice 강등은 파이프라인이 담당합니다.
"""

from __future__ import annotations

from typing import Optional

from ean_price_finder.core.config import settings
from ean_price_finder.core.exceptions import WebpageFetchException
from ean_price_finder.core.logging import logger
from ean_price_finder.utils.text import extract_price_from_html
from ean_price_finder.utils.url import is_http_url

from .http_client import SharedHttpClient, get_shared_http_client


class WebpagePriceFetcher:
    """링크된 상품 페이지를 받아 가격 문자열을 추출"""

    def __init__(
        self,
        client: Optional[SharedHttpClient] = None,
        timeout_s: Optional[float] = None,
    ) -> None:
        self.client = client or get_shared_http_client()
        self.timeout_s = timeout_s if timeout_s is not None else settings.webpage_fetch_timeout_s

    async def fetch_price(self, url: str) -> Optional[str]:
        """페이지에서 가격 추출. 가격이 없으면 None.

        Raises:
            WebpageFetchException: 비 2xx 응답 또는 HTML이 아닌 응답
            Exception: 네트워크 오류 (curl_cffi)
        """
        if not is_http_url(url):
            logger.debug(f"[WEBPAGE] Skipping non-HTTP link: {url[:80] if url else url!r}")
            return None

        url_display = url if len(url) <= 120 else url[:120] + "..."
        logger.info(f"[WEBPAGE] Fetching {url_display} (timeout={self.timeout_s:.1f}s)")

        page = await self.client.get_page(url, timeout_s=self.timeout_s)

        if not page.ok:
            raise WebpageFetchException(url, f"status {page.status}")
        if not page.is_html:
            raise WebpageFetchException(url, f"non-HTML content-type '{page.content_type}'")

        price = extract_price_from_html(page.text or "")
        logger.info(f"[WEBPAGE] Parsed (len={len(page.text or '')}, price={price!r})")
        return price
