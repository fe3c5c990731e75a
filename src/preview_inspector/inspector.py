"""Orchestration of a single social preview inspection."""

import asyncio
import logging
from typing import Dict, Iterable, Optional, Union

import httpx

from preview_inspector.browser_config import BrowserConfig
from preview_inspector.config import InspectorConfig, ScoringThresholds
from preview_inspector.exceptions import InspectionError
from preview_inspector.extractor import MetadataExtractor
from preview_inspector.models import InspectionResult
from preview_inspector.retriever import ContentRetriever
from preview_inspector.scorer import PreviewScorer
from preview_inspector.url_resolver import parse_base_url
from preview_inspector.verifier import ReachabilityVerifier

logger = logging.getLogger(__name__)


class PreviewInspector:
    """Inspects a URL's social preview and scores it.

    Sequence: parse URL, retrieve HTML, extract metadata, check both preview
    images concurrently, score, assemble the result. Inspections share no
    mutable state, so one instance can serve concurrent calls.

    Example:
        inspector = PreviewInspector()
        result = await inspector.inspect("https://example.com")
    """

    def __init__(
        self,
        config: Optional[InspectorConfig] = None,
        browser_config: Optional[BrowserConfig] = None,
        thresholds: Optional[ScoringThresholds] = None,
        retriever: Optional[ContentRetriever] = None,
        extractor: Optional[MetadataExtractor] = None,
        verifier: Optional[ReachabilityVerifier] = None,
        scorer: Optional[PreviewScorer] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the inspector.

        Args:
            config: Inspector settings
            browser_config: Settings for the rendering fallback
            thresholds: Scoring limits and penalties
            retriever: Custom content retriever
            extractor: Custom metadata extractor
            verifier: Custom reachability verifier
            scorer: Custom scorer
            transport: Optional httpx transport shared by the default
                retriever and verifier
        """
        self.config = config or InspectorConfig()
        self.retriever = retriever or ContentRetriever(
            config=self.config,
            browser_config=browser_config,
            transport=transport,
        )
        self.extractor = extractor or MetadataExtractor()
        self.verifier = verifier or ReachabilityVerifier(config=self.config, transport=transport)
        self.scorer = scorer or PreviewScorer(thresholds)

    async def inspect(self, url: str) -> InspectionResult:
        """Inspect a single URL.

        Args:
            url: Absolute page URL

        Returns:
            InspectionResult with metadata, score and issues

        Raises:
            URLParseError: If the URL has no scheme or host
            RetrievalError: If the page HTML could not be retrieved
        """
        url = (url or "").strip()
        base_url = parse_base_url(url)

        document = await self.retriever.retrieve(url, base_url)
        metadata = self.extractor.extract(document)

        og_reachable, twitter_reachable = await asyncio.gather(
            self.verifier.verify(metadata.og_image, url),
            self.verifier.verify(metadata.twitter_image, url),
        )

        report = self.scorer.score(metadata, og_reachable, twitter_reachable)

        logger.info(
            f"Inspected {url}: score={report.score}, issues={len(report.issues)}, "
            f"fallback={metadata.used_fallback}"
        )

        return InspectionResult(
            metadata=metadata,
            score=report.score,
            issues=report.issues,
            og_image_reachable=og_reachable,
            twitter_image_reachable=twitter_reachable,
        )

    async def inspect_many(
        self, urls: Iterable[str]
    ) -> Dict[str, Union[InspectionResult, InspectionError]]:
        """Inspect several URLs independently.

        Failures are returned in place of results so one bad URL does not
        abort the others.

        Args:
            urls: Page URLs

        Returns:
            Dictionary mapping each URL to its result or error
        """
        semaphore = asyncio.Semaphore(self.config.max_concurrent_inspections)
        urls = list(dict.fromkeys(urls))

        async def _inspect_one(url: str) -> Union[InspectionResult, InspectionError]:
            async with semaphore:
                try:
                    return await self.inspect(url)
                except InspectionError as e:
                    logger.error(f"Inspection failed for {url}: {e}")
                    return e

        outcomes = await asyncio.gather(*(_inspect_one(url) for url in urls))
        return dict(zip(urls, outcomes))


def inspect_url(
    url: str,
    config: Optional[InspectorConfig] = None,
    browser_config: Optional[BrowserConfig] = None,
) -> InspectionResult:
    """Inspect a URL from synchronous code.

    Args:
        url: Absolute page URL
        config: Optional inspector settings
        browser_config: Optional rendering fallback settings

    Returns:
        InspectionResult for the URL
    """
    inspector = PreviewInspector(config=config, browser_config=browser_config)
    return asyncio.run(inspector.inspect(url))
