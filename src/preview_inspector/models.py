"""Data models for social preview inspection."""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True)
class BaseUrl:
    """Scheme and host of the inspected page, used to resolve asset references."""

    scheme: str
    host: str  # includes the port when the URL has one

    @property
    def origin(self) -> str:
        return f"{self.scheme}://{self.host}"


@dataclass
class RetrievedDocument:
    """Raw HTML for one page and how it was obtained."""

    url: str
    html: str
    base_url: BaseUrl
    used_fallback_strategy: bool = False


@dataclass(frozen=True)
class Metadata:
    """Social preview metadata extracted from a page.

    Asset fields (og_image, twitter_image, favicon) hold absolute URLs or None.
    """

    url: str
    hostname: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    og_title: Optional[str] = None
    og_description: Optional[str] = None
    og_image: Optional[str] = None
    twitter_card: Optional[str] = None
    twitter_title: Optional[str] = None
    twitter_description: Optional[str] = None
    twitter_image: Optional[str] = None
    favicon: Optional[str] = None
    used_fallback: bool = False


class IssuePriority(str, Enum):
    """How urgently an issue should be fixed."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class Issue:
    """A scored deduction with a remediation hint."""

    priority: IssuePriority
    message: str

    def to_dict(self) -> dict:
        return {"priority": self.priority.value, "message": self.message}


@dataclass(frozen=True)
class ScoreReport:
    """Score and issues produced by the scorer."""

    score: int
    issues: Tuple[Issue, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class InspectionResult:
    """Final output of a single inspection."""

    metadata: Metadata
    score: int
    issues: Tuple[Issue, ...] = field(default_factory=tuple)
    og_image_reachable: bool = False
    twitter_image_reachable: bool = False

    @property
    def high_priority_issues(self) -> Tuple[Issue, ...]:
        return tuple(i for i in self.issues if i.priority is IssuePriority.HIGH)

    def to_dict(self) -> dict:
        """Convert the result to a JSON-serializable dictionary."""
        return {
            "metadata": asdict(self.metadata),
            "score": self.score,
            "issues": [issue.to_dict() for issue in self.issues],
            "og_image_reachable": self.og_image_reachable,
            "twitter_image_reachable": self.twitter_image_reachable,
        }
