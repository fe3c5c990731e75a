"""Reachability checks for preview images."""

import asyncio
import logging
from typing import List, Optional, Sequence

import httpx

from preview_inspector.config import InspectorConfig
from preview_inspector.constants import (
    FIRST_BYTE_RANGE,
    FORBIDDEN_STATUS_CODE,
    IMAGE_ACCEPT,
    IMAGE_FETCH_HEADERS,
)

logger = logging.getLogger(__name__)


class ReachabilityVerifier:
    """Confirms that candidate preview images can actually be fetched.

    Image hosts often reject lightweight probes, so each URL gets two tiers:
    a HEAD request, then a ranged GET for the first byte. A 403 counts as
    reachable on both tiers because CDNs commonly refuse probes while serving
    the same asset to browsers and social crawlers.
    """

    def __init__(
        self,
        config: Optional[InspectorConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or InspectorConfig()
        self._transport = transport

    def _headers(self, referer_url: str) -> dict:
        headers = {
            "User-Agent": self.config.user_agent,
            "Accept": IMAGE_ACCEPT,
            "Accept-Language": self.config.accept_language,
            # Header values must be ASCII: percent-encoded path, punycode host
            "Referer": str(httpx.URL(referer_url)),
        }
        headers.update(IMAGE_FETCH_HEADERS)
        return headers

    async def verify(self, url: Optional[str], referer_url: str) -> bool:
        """Check whether an image URL is plausibly fetchable.

        Never raises: any failure collapses to False.

        Args:
            url: Absolute image URL, or None when the page has no candidate
            referer_url: URL of the page that references the image

        Returns:
            True if either probe tier considered the image reachable
        """
        if not url:
            return False

        try:
            async with httpx.AsyncClient(
                headers=self._headers(referer_url),
                timeout=self.config.probe_timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                if await self._probe_head(client, url):
                    return True
                return await self._probe_range(client, url)
        except Exception as e:
            logger.debug(f"Reachability check failed for {url}: {e}")
            return False

    async def verify_many(self, urls: Sequence[Optional[str]], referer_url: str) -> List[bool]:
        """Run independent checks concurrently, preserving input order."""
        return list(await asyncio.gather(*(self.verify(url, referer_url) for url in urls)))

    async def _probe_head(self, client: httpx.AsyncClient, url: str) -> bool:
        try:
            response = await client.head(url)
        except httpx.HTTPError as e:
            logger.debug(f"HEAD probe failed for {url}: {e}")
            return False

        logger.debug(f"HEAD {url} -> {response.status_code}")
        return response.status_code in (200, FORBIDDEN_STATUS_CODE)

    async def _probe_range(self, client: httpx.AsyncClient, url: str) -> bool:
        # Stream so a server that ignores Range does not send the whole body
        async with client.stream("GET", url, headers={"Range": FIRST_BYTE_RANGE}) as response:
            status = response.status_code

        logger.debug(f"Ranged GET {url} -> {status}")
        return status < 400 or status == FORBIDDEN_STATUS_CODE
