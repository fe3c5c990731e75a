"""
Headless browser rendering using Playwright.

This module provides a BrowserRenderer class that loads a page with full
JavaScript execution and returns the rendered document. It is the fallback
retrieval strategy for sites that block plain HTTP clients or only render
their head tags client-side.
"""
import asyncio
import logging
import time
from typing import Optional

from .browser_config import BrowserConfig

logger = logging.getLogger(__name__)


class RenderError(Exception):
    """Raised when the browser could not produce a rendered document."""


class BrowserRenderer:
    """
    Playwright-based renderer for JavaScript-rendered pages.

    This class is designed to be used as an async context manager, managing
    its own browser lifecycle:

        async with BrowserRenderer(config) as renderer:
            html = await renderer.render("https://example.com")

    The browser is closed when the context exits, whatever the outcome, so a
    renderer should be created fresh for every inspection.
    """

    # Script run before any page script to mask automation indicators
    STEALTH_SCRIPT = """
        Object.defineProperty(navigator, 'webdriver', {
            get: () => undefined
        });

        window.chrome = {
            runtime: {}
        };

        Object.defineProperty(navigator, 'languages', {
            get: () => ['en-US', 'en']
        });

        Object.defineProperty(navigator, 'plugins', {
            get: () => [
                { name: 'Chrome PDF Plugin', filename: 'internal-pdf-viewer' },
                { name: 'Chrome PDF Viewer', filename: 'internal-pdf-viewer' }
            ]
        });
    """

    def __init__(self, config: Optional[BrowserConfig] = None):
        """
        Initialize the browser renderer.

        Args:
            config: BrowserConfig instance with renderer settings
        """
        self._config = config or BrowserConfig()
        self._playwright = None
        self._browser = None

        logger.debug(f"BrowserRenderer initialized with config: {self._config}")

    @property
    def is_running(self) -> bool:
        return self._browser is not None

    async def __aenter__(self) -> "BrowserRenderer":
        """Enter async context manager, launching browser."""
        try:
            from playwright.async_api import async_playwright
        except ImportError:
            raise ImportError(
                "Playwright is required for the rendering fallback. "
                "Install with: pip install playwright && playwright install chromium"
            )

        logger.info(f"Launching {self._config.browser_type} browser (headless={self._config.headless})")

        self._playwright = await async_playwright().start()
        try:
            browser_launcher = getattr(self._playwright, self._config.browser_type)

            launch_options = {"headless": self._config.headless}
            if self._config.launch_args:
                launch_options["args"] = self._config.launch_args

            self._browser = await browser_launcher.launch(**launch_options)
        except BaseException:
            await self.close()
            raise

        logger.info("Browser launched successfully")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context manager, closing browser."""
        await self.close()

    async def close(self) -> None:
        """Close the browser and stop Playwright. Safe to call more than once."""
        browser, self._browser = self._browser, None
        playwright, self._playwright = self._playwright, None

        try:
            if browser:
                logger.info("Closing browser")
                await browser.close()
        finally:
            if playwright:
                await playwright.stop()

    async def render(self, url: str) -> str:
        """
        Load a URL and return the rendered HTML.

        Each call uses an isolated browser context that is closed before
        returning.

        Args:
            url: URL to render

        Returns:
            Rendered document HTML

        Raises:
            RuntimeError: If browser is not running (not in context manager)
            RenderError: If navigation fails or produces no document
        """
        if not self._browser:
            raise RuntimeError(
                "Browser is not running. Use BrowserRenderer as an async context manager: "
                "async with BrowserRenderer(config) as renderer:"
            )

        start_time = time.time()
        context = await self._create_context()

        try:
            page = await context.new_page()

            if self._config.stealth_mode:
                await page.add_init_script(self.STEALTH_SCRIPT)

            logger.info(f"Rendering: {url}")

            try:
                response = await page.goto(
                    url,
                    wait_until=self._config.wait_until,
                    timeout=self._config.timeout
                )
            except Exception as e:
                raise RenderError(f"Navigation to {url} failed: {e}") from e

            # Give client-side frameworks time to hydrate the head
            if self._config.settle_delay:
                await asyncio.sleep(self._config.settle_delay)

            html = await page.content()
            if not html:
                raise RenderError(f"Browser returned an empty document for {url}")

            status_code = response.status if response else 0
            logger.info(
                f"Render complete: {url} (status={status_code}, time={time.time() - start_time:.2f}s)"
            )
            return html

        finally:
            # Always close context to ensure isolation
            await context.close()

    async def _create_context(self):
        """Create a new, isolated browser context."""
        return await self._browser.new_context(
            viewport=self._config.viewport,
            user_agent=self._config.get_user_agent(),
            locale="en-US",
            java_script_enabled=True,
        )
