"""Retrieval of page HTML with a lightweight fetch and a browser fallback."""

import logging
from enum import Enum
from typing import Callable, Optional

import httpx

from preview_inspector.browser_config import BrowserConfig
from preview_inspector.browser_renderer import BrowserRenderer
from preview_inspector.config import InspectorConfig
from preview_inspector.constants import BLOCKING_STATUS_CODES, DOCUMENT_ACCEPT
from preview_inspector.exceptions import RetrievalError
from preview_inspector.models import BaseUrl, RetrievedDocument
from preview_inspector.url_resolver import parse_base_url

logger = logging.getLogger(__name__)


class EscalationDecision(str, Enum):
    """What to do after the lightweight fetch failed."""

    ESCALATE = "escalate"
    SURFACE = "surface"


class EscalationPolicy:
    """Decides whether a failed lightweight fetch is worth rendering.

    Blocking statuses, timeouts and failures with no status at all are
    ambiguous and get escalated. Any other HTTP status is a real answer
    from the application and is surfaced as-is.
    """

    def __init__(self, blocking_status_codes=BLOCKING_STATUS_CODES):
        self.blocking_status_codes = frozenset(blocking_status_codes)

    def classify(self, error: RetrievalError) -> EscalationDecision:
        if error.timed_out:
            return EscalationDecision.ESCALATE
        if error.status_code is None:
            return EscalationDecision.ESCALATE
        if error.status_code in self.blocking_status_codes:
            return EscalationDecision.ESCALATE
        return EscalationDecision.SURFACE


class ContentRetriever:
    """Fetches raw HTML for a URL.

    Tries a short-timeout HTTP GET with browser-like headers first. When the
    escalation policy allows it, falls back to a headless browser that runs
    the page's scripts.
    """

    def __init__(
        self,
        config: Optional[InspectorConfig] = None,
        browser_config: Optional[BrowserConfig] = None,
        policy: Optional[EscalationPolicy] = None,
        renderer_factory: Optional[Callable[[], BrowserRenderer]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the retriever.

        Args:
            config: Inspector settings (timeouts, headers, fallback switch)
            browser_config: Settings for the rendering fallback
            policy: Escalation policy for failed lightweight fetches
            renderer_factory: Callable returning a fresh renderer per fallback
            transport: Optional httpx transport for the lightweight fetch
        """
        self.config = config or InspectorConfig()
        self.browser_config = browser_config or BrowserConfig()
        self.policy = policy or EscalationPolicy()
        self.renderer_factory = renderer_factory or (lambda: BrowserRenderer(self.browser_config))
        self._transport = transport

    @property
    def headers(self) -> dict:
        return {
            "User-Agent": self.config.user_agent,
            "Accept": DOCUMENT_ACCEPT,
            "Accept-Language": self.config.accept_language,
        }

    async def retrieve(self, url: str, base_url: Optional[BaseUrl] = None) -> RetrievedDocument:
        """Retrieve the HTML of a page.

        Args:
            url: Page URL
            base_url: Pre-parsed base of the URL (parsed from url if omitted)

        Returns:
            RetrievedDocument with the HTML and the strategy that produced it

        Raises:
            RetrievalError: If the page could not be retrieved
        """
        base_url = base_url or parse_base_url(url)

        try:
            html = await self.fetch_primary(url)
            return RetrievedDocument(url=url, html=html, base_url=base_url)
        except RetrievalError as primary_error:
            if not self.config.fallback_enabled:
                raise
            if self.policy.classify(primary_error) is EscalationDecision.SURFACE:
                logger.info(f"Not escalating {url}: {primary_error}")
                raise

            logger.warning(f"Lightweight fetch failed for {url} ({primary_error}), rendering in browser")

            try:
                html = await self.fetch_fallback(url)
            except Exception as fallback_error:
                logger.error(f"Browser fallback failed for {url}: {fallback_error}")
                raise primary_error from fallback_error

        return RetrievedDocument(
            url=url,
            html=html,
            base_url=base_url,
            used_fallback_strategy=True,
        )

    async def fetch_primary(self, url: str) -> str:
        """Fetch a page with a plain HTTP GET.

        Raises:
            RetrievalError: Carrying the status code or timeout flag of the failure
        """
        try:
            async with httpx.AsyncClient(
                headers=self.headers,
                timeout=self.config.primary_timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
                return response.text

        except httpx.TimeoutException as e:
            raise RetrievalError(
                f"Request timeout after {self.config.primary_timeout}s", url=url, timed_out=True
            ) from e

        except httpx.HTTPStatusError as e:
            raise RetrievalError(
                f"HTTP {e.response.status_code} from {url}",
                url=url,
                status_code=e.response.status_code,
            ) from e

        except (httpx.HTTPError, httpx.InvalidURL) as e:
            error_msg = str(e) if str(e) else type(e).__name__
            raise RetrievalError(f"Connection error: {error_msg}", url=url) from e

    async def fetch_fallback(self, url: str) -> str:
        """Render a page in a fresh browser that is always closed afterwards."""
        async with self.renderer_factory() as renderer:
            return await renderer.render(url)
