"""Exceptions raised by the preview inspector."""

from typing import Optional


class InspectionError(Exception):
    """Base class for failures that abort an inspection."""

    user_message = "Failed to inspect URL"

    def __init__(self, message: str, url: Optional[str] = None):
        self.message = message
        self.url = url
        super().__init__(message)


class URLParseError(InspectionError):
    """Raised when the input URL has no scheme or host."""

    user_message = "Invalid URL"


class RetrievalError(InspectionError):
    """Raised when page HTML could not be retrieved.

    Carries enough of the primary failure for the escalation policy to decide
    whether the rendering fallback is worth trying.
    """

    user_message = "Failed to scrape URL"

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        timed_out: bool = False,
    ):
        self.status_code = status_code
        self.timed_out = timed_out
        super().__init__(message, url=url)
