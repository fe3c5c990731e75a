"""
Browser configuration for the Playwright rendering fallback.

This module provides a validated Pydantic configuration model for the
headless browser used when the lightweight fetch is blocked, plus a
pre-configured instance for fast retrieval.
"""
import os
import random
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field


# User agent pool for rotation
USER_AGENTS = [
    # Chrome on Windows
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/119.0.0.0 Safari/537.36",
    # Chrome on Mac
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    # Safari on Mac
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.2 Safari/605.1.15",
]


def get_random_user_agent() -> str:
    """Get a random user agent from the pool."""
    return random.choice(USER_AGENTS)


class BrowserConfig(BaseModel):
    """
    Configuration for the Playwright-based BrowserRenderer.

    All fields are validated by Pydantic to ensure type safety and valid values.
    """

    headless: bool = Field(
        default=True,
        description="Run browser in headless mode (no visible UI)"
    )

    stealth_mode: bool = Field(
        default=True,
        description="Mask common automation indicators before page scripts run"
    )

    browser_type: Literal["chromium", "firefox", "webkit"] = Field(
        default="chromium",
        description="Browser engine to use for rendering"
    )

    timeout: int = Field(
        default=30000,
        description="Navigation timeout in milliseconds",
        ge=1000,
        le=300000
    )

    wait_until: Literal["load", "domcontentloaded", "networkidle", "commit"] = Field(
        default="domcontentloaded",
        description="When to consider navigation complete"
    )

    settle_delay: float = Field(
        default=2.0,
        description="Seconds to wait after navigation for late hydration",
        ge=0.0,
        le=30.0
    )

    viewport: Dict[str, int] = Field(
        default_factory=lambda: {"width": 1366, "height": 768},
        description="Viewport size for the rendering context"
    )

    launch_args: List[str] = Field(
        default_factory=lambda: ["--no-sandbox", "--disable-setuid-sandbox"],
        description="Additional browser launch arguments"
    )

    user_agent: Optional[str] = Field(
        default=None,
        description="Custom user agent. If None and rotate_user_agent=True, a random one is used."
    )

    rotate_user_agent: bool = Field(
        default=True,
        description="Pick a random user agent for each new context"
    )

    class Config:
        """Pydantic model configuration."""
        frozen = False
        validate_assignment = True

    def get_user_agent(self) -> str:
        """Get the user agent to use for this config."""
        if self.user_agent:
            return self.user_agent
        if self.rotate_user_agent:
            return get_random_user_agent()
        return USER_AGENTS[0]  # Default to first agent

    @classmethod
    def from_env(cls) -> "BrowserConfig":
        """Load renderer settings from environment variables."""
        values = {}
        if os.getenv("RENDER_HEADLESS") is not None:
            values["headless"] = os.getenv("RENDER_HEADLESS", "").strip().lower() in ("1", "true", "yes", "on")
        if os.getenv("RENDER_TIMEOUT_MS"):
            values["timeout"] = int(os.getenv("RENDER_TIMEOUT_MS"))
        if os.getenv("RENDER_SETTLE_DELAY"):
            values["settle_delay"] = float(os.getenv("RENDER_SETTLE_DELAY"))
        return cls(**values)


# --- Pre-configured Instances ---

FAST_CONFIG = BrowserConfig(
    headless=True,
    stealth_mode=True,
    wait_until="domcontentloaded",
    timeout=15000,
    settle_delay=0.5,
)
"""
Fast configuration optimized for latency.

Shorter navigation timeout and settle delay. Best for sites that
render their head tags server-side but block plain HTTP clients.
"""
