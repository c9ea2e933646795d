"""URL 파싱 유틸리티"""
from typing import Optional
from urllib.parse import urlparse


def is_http_url(url: Optional[str]) -> bool:
    """http(s) URL인지 확인 (그 외 스킴은 fetch 대상이 아님)

    Examples:
        >>> is_http_url("https://shop.example.com/p/1")
        True
        >>> is_http_url("ftp://example.com/file")
        False
        >>> is_http_url(None)
        False
    """
    if not url:
        return False

    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return False

    return parsed.scheme.lower() in ("http", "https") and bool(parsed.netloc)


def get_display_domain(url: Optional[str]) -> str:
    """링크 표시용 도메인 ("www." 제거)

    Examples:
        >>> get_display_domain("https://www.amazon.de/dp/B000")
        'amazon.de'
        >>> get_display_domain("not a url")
        'External Site'
    """
    if not url:
        return "External Site"

    try:
        host = urlparse(url.strip()).hostname
    except ValueError:
        return "External Site"

    if not host:
        return "External Site"

    return host.replace("www.", "", 1)
