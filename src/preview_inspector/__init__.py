"""Social preview inspection and scoring."""

__version__ = "0.1.0"

from preview_inspector.inspector import PreviewInspector, inspect_url
from preview_inspector.retriever import (
    ContentRetriever,
    EscalationDecision,
    EscalationPolicy,
)
from preview_inspector.browser_renderer import BrowserRenderer, RenderError
from preview_inspector.extractor import MetadataExtractor
from preview_inspector.verifier import ReachabilityVerifier
from preview_inspector.scorer import PreviewScorer
from preview_inspector.url_resolver import parse_base_url, resolve_asset_url
from preview_inspector.models import (
    BaseUrl,
    RetrievedDocument,
    Metadata,
    Issue,
    IssuePriority,
    ScoreReport,
    InspectionResult,
)
from preview_inspector.exceptions import (
    InspectionError,
    URLParseError,
    RetrievalError,
)
from preview_inspector.browser_config import BrowserConfig
from preview_inspector.config import InspectorConfig, ScoringThresholds, settings

__all__ = [
    # Core
    "PreviewInspector",
    "inspect_url",
    "ContentRetriever",
    "EscalationDecision",
    "EscalationPolicy",
    "BrowserRenderer",
    "RenderError",
    "MetadataExtractor",
    "ReachabilityVerifier",
    "PreviewScorer",
    "parse_base_url",
    "resolve_asset_url",
    # Models
    "BaseUrl",
    "RetrievedDocument",
    "Metadata",
    "Issue",
    "IssuePriority",
    "ScoreReport",
    "InspectionResult",
    # Errors
    "InspectionError",
    "URLParseError",
    "RetrievalError",
    # Configuration
    "BrowserConfig",
    "InspectorConfig",
    "ScoringThresholds",
    "settings",
]
