# src/preview_inspector/constants.py
"""Centralized constants for the preview inspector.

Header profiles, status code classes and issue messages shared across
modules. For user-configurable values, see config.py and browser_config.py.
"""

# =============================================================================
# Retrieval Constants
# =============================================================================

# Statuses that usually mean "bot blocked" rather than a real application error
BLOCKING_STATUS_CODES = frozenset({401, 403, 429, 503})

# Default timeout (seconds) for the lightweight HTTP fetch
DEFAULT_PRIMARY_TIMEOUT_SECONDS = 5.0

# Default browser user agent for the lightweight fetch and probes
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

DEFAULT_ACCEPT_LANGUAGE = "en-US,en;q=0.9"

# Accept header sent with page requests
DOCUMENT_ACCEPT = (
    "text/html,application/xhtml+xml,application/xml;q=0.9,"
    "image/avif,image/webp,image/apng,*/*;q=0.8"
)


# =============================================================================
# Reachability Constants
# =============================================================================

# Default timeout (seconds) for each image probe
DEFAULT_PROBE_TIMEOUT_SECONDS = 5.0

# Accept header sent with image probes
IMAGE_ACCEPT = "image/avif,image/webp,image/apng,image/svg+xml,image/*,*/*;q=0.8"

# Header signalling an <img> fetch rather than a navigation
IMAGE_FETCH_HEADERS = {
    "Sec-Fetch-Dest": "image",
    "Sec-Fetch-Mode": "no-cors",
    "Sec-Fetch-Site": "cross-site",
}

# Range header for the partial-content probe (first byte only)
FIRST_BYTE_RANGE = "bytes=0-0"

# CDNs often answer 403 to probes while serving the same asset to real clients
FORBIDDEN_STATUS_CODE = 403


# =============================================================================
# Scoring Constants
# =============================================================================

BASE_SCORE = 100

MISSING_OG_IMAGE_MESSAGE = "Missing social share image (og:image)"
BROKEN_OG_IMAGE_MESSAGE = "Social share image is broken or inaccessible (404/restricted)"
MISSING_DESCRIPTION_MESSAGE = "Missing meta description"
TITLE_TOO_LONG_MESSAGE = "Title is too long (> {limit} chars)"
DESCRIPTION_TOO_LONG_MESSAGE = "Description is too long (> {limit} chars)"

# Favicon path assumed when the page declares none
DEFAULT_FAVICON_PATH = "/favicon.ico"
