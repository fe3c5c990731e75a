"""Extraction of social preview metadata from page HTML."""

import logging
from typing import Iterable, Optional
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from preview_inspector.constants import DEFAULT_FAVICON_PATH
from preview_inspector.models import BaseUrl, Metadata, RetrievedDocument
from preview_inspector.url_resolver import resolve_asset_url

logger = logging.getLogger(__name__)


def _clean(value: Optional[str]) -> Optional[str]:
    """Trim a value, treating empty-after-trim as absent."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def _first(values: Iterable[Optional[str]]) -> Optional[str]:
    """Return the first non-empty value of a cascade."""
    for value in values:
        value = _clean(value)
        if value:
            return value
    return None


class MetadataExtractor:
    """Parses retrieved HTML into a Metadata record.

    Sites mix standard and platform-specific tags, so every field is read
    through a first-non-empty-wins cascade of known aliases.
    """

    def __init__(self, parser: str = "html.parser"):
        self.parser = parser

    def extract(self, document: RetrievedDocument) -> Metadata:
        """Extract metadata from a retrieved document.

        Args:
            document: HTML and base URL of the page

        Returns:
            Metadata with trimmed text fields and resolved asset URLs
        """
        soup = BeautifulSoup(document.html, self.parser)
        base = document.base_url

        og_image_raw = self._meta(soup, "og:image")
        image_src_raw = self._link_href(soup, "image_src")
        item_prop_raw = self._meta_attr(soup, "itemprop", "image")
        twitter_image_raw = self._meta(soup, "twitter:image", name_first=True)

        og_title = self._meta(soup, "og:title")
        og_description = self._meta(soup, "og:description")

        head_title = soup.head.find("title") if soup.head else None
        first_title = soup.find("title")

        title = _first([
            head_title.get_text() if head_title else None,
            first_title.get_text() if first_title else None,
            self._meta_attr(soup, "name", "title"),
            og_title,
        ])
        description = _first([
            self._meta_attr(soup, "name", "description"),
            og_description,
        ])

        metadata = Metadata(
            url=document.url,
            hostname=urlparse(document.url).hostname,
            title=title,
            description=description,
            og_title=og_title,
            og_description=og_description,
            og_image=self._resolve(
                _first([og_image_raw, image_src_raw, item_prop_raw]), base
            ),
            twitter_card=self._meta(soup, "twitter:card", name_first=True),
            twitter_title=self._meta(soup, "twitter:title", name_first=True),
            twitter_description=self._meta(soup, "twitter:description", name_first=True),
            twitter_image=self._resolve(
                _first([twitter_image_raw, og_image_raw, image_src_raw]), base
            ),
            favicon=self._resolve(
                _first([
                    self._link_href(soup, "icon"),
                    self._link_href(soup, "shortcut icon"),
                    DEFAULT_FAVICON_PATH,
                ]),
                base,
            ),
            used_fallback=document.used_fallback_strategy,
        )

        logger.debug(
            f"Extracted metadata for {document.url}: "
            f"title={metadata.title!r}, og_image={metadata.og_image!r}"
        )
        return metadata

    @staticmethod
    def _resolve(candidate: Optional[str], base: BaseUrl) -> Optional[str]:
        return resolve_asset_url(candidate, base)

    def _meta(self, soup: BeautifulSoup, key: str, name_first: bool = False) -> Optional[str]:
        """Read a meta tag declared with either the property or the name attribute."""
        attrs = ("name", "property") if name_first else ("property", "name")
        return _first(self._meta_attr(soup, attr, key) for attr in attrs)

    @staticmethod
    def _meta_attr(soup: BeautifulSoup, attr: str, value: str) -> Optional[str]:
        tag = soup.find("meta", attrs={attr: value})
        if tag is None:
            return None
        return _clean(tag.get("content"))

    @staticmethod
    def _link_href(soup: BeautifulSoup, rel: str) -> Optional[str]:
        """Find a <link> whose full rel value equals ``rel``."""
        for link in soup.find_all("link", href=True):
            rel_value = link.get("rel") or []
            if isinstance(rel_value, str):
                rel_value = rel_value.split()
            if " ".join(rel_value).lower() == rel:
                return _clean(link.get("href"))
        return None
