"""Resolution of asset references found in page markup."""

from typing import Optional
from urllib.parse import urlparse

from preview_inspector.exceptions import URLParseError
from preview_inspector.models import BaseUrl


def parse_base_url(url: str) -> BaseUrl:
    """Split a page URL into the scheme and host used to resolve its assets.

    Args:
        url: Absolute page URL

    Returns:
        BaseUrl for the page

    Raises:
        URLParseError: If the URL has no scheme or host
    """
    try:
        parsed = urlparse((url or "").strip())
    except ValueError as e:
        raise URLParseError(f"Malformed URL {url!r}: {e}", url=url) from e

    if not parsed.scheme or not parsed.netloc or not parsed.hostname:
        raise URLParseError(f"Cannot determine scheme and host of URL: {url!r}", url=url)

    # netloc may carry credentials; the host part keeps the port
    host = parsed.netloc.rsplit("@", 1)[-1]
    return BaseUrl(scheme=parsed.scheme.lower(), host=host)


def resolve_asset_url(candidate: Optional[str], base: BaseUrl) -> Optional[str]:
    """Turn a raw tag value into an absolute, fetchable URL.

    Inline ``data:`` URIs resolve to None so that they are treated exactly
    like a missing asset.

    Args:
        candidate: Raw href/content attribute value
        base: Scheme and host of the page the value came from

    Returns:
        Absolute URL, or None if the value is empty or not fetchable
    """
    if not candidate or not candidate.strip():
        return None

    candidate = candidate.strip()
    lowered = candidate.lower()

    if lowered.startswith(("http://", "https://")):
        return candidate
    if candidate.startswith("//"):
        return f"https:{candidate}"
    if lowered.startswith("data:"):
        return None
    if candidate.startswith("/"):
        return f"{base.origin}{candidate}"
    return f"{base.origin}/{candidate}"
