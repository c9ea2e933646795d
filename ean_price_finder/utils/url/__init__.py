"""URL utilities."""

from .url_utils import get_display_domain, is_http_url

__all__ = ["get_display_domain", "is_http_url"]
