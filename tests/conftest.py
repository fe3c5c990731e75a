"""Shared fixtures for preview inspector tests."""

import httpx
import pytest

from preview_inspector.models import BaseUrl, RetrievedDocument


class FakeRenderer:
    """Stands in for BrowserRenderer, counting how often it is opened and closed."""

    def __init__(self, html="<html><head><title>Rendered</title></head></html>", error=None):
        self.html = html
        self.error = error
        self.entered = 0
        self.closed = 0
        self.rendered = []

    async def __aenter__(self):
        self.entered += 1
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.closed += 1

    async def render(self, url):
        self.rendered.append(url)
        if self.error is not None:
            raise self.error
        return self.html


@pytest.fixture
def make_renderer():
    """Factory for fake renderers: make_renderer(html=..., error=...)."""
    return FakeRenderer


@pytest.fixture
def base_url():
    """Base of https://example.com pages."""
    return BaseUrl(scheme="https", host="example.com")


@pytest.fixture
def make_document(base_url):
    """Build a RetrievedDocument for an HTML snippet."""
    def _make(html, url="https://example.com/page", used_fallback=False):
        return RetrievedDocument(
            url=url,
            html=html,
            base_url=base_url,
            used_fallback_strategy=used_fallback,
        )
    return _make


@pytest.fixture
def status_transport():
    """Build a MockTransport answering every request with the same status."""
    def _make(status_code, text="", calls=None):
        def handler(request: httpx.Request) -> httpx.Response:
            if calls is not None:
                calls.append(request)
            return httpx.Response(status_code, text=text)
        return httpx.MockTransport(handler)
    return _make
