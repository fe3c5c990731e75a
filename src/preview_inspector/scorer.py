"""Scoring of social preview metadata."""

from typing import List, Optional

from preview_inspector.config import ScoringThresholds, default_thresholds
from preview_inspector.constants import (
    BASE_SCORE,
    BROKEN_OG_IMAGE_MESSAGE,
    DESCRIPTION_TOO_LONG_MESSAGE,
    MISSING_DESCRIPTION_MESSAGE,
    MISSING_OG_IMAGE_MESSAGE,
    TITLE_TOO_LONG_MESSAGE,
)
from preview_inspector.models import Issue, IssuePriority, Metadata, ScoreReport


class PreviewScorer:
    """Applies a fixed rule set to metadata and image reachability.

    Rules run in a fixed order and each one subtracts from a base of 100.
    Issues are reported in rule order, not sorted by priority.
    """

    def __init__(self, thresholds: Optional[ScoringThresholds] = None):
        """Initialize scorer with configurable limits.

        Args:
            thresholds: Scoring limits and penalties
        """
        self.thresholds = thresholds or default_thresholds

    def score(
        self,
        metadata: Metadata,
        og_reachable: bool,
        twitter_reachable: bool = False,
    ) -> ScoreReport:
        """Score a page's social preview.

        Args:
            metadata: Extracted metadata
            og_reachable: Whether the og:image candidate is fetchable
            twitter_reachable: Whether the twitter:image candidate is fetchable.
                Recorded by callers but not used by any rule yet.

        Returns:
            ScoreReport with a score in [0, 100] and ordered issues
        """
        t = self.thresholds
        score = BASE_SCORE
        issues: List[Issue] = []

        if not metadata.og_image:
            score -= t.og_image_penalty
            issues.append(Issue(IssuePriority.HIGH, MISSING_OG_IMAGE_MESSAGE))
        elif not og_reachable:
            score -= t.og_image_penalty
            issues.append(Issue(IssuePriority.HIGH, BROKEN_OG_IMAGE_MESSAGE))

        if not metadata.description and not metadata.og_description:
            score -= t.missing_description_penalty
            issues.append(Issue(IssuePriority.HIGH, MISSING_DESCRIPTION_MESSAGE))

        if metadata.title and len(metadata.title) > t.title_max:
            score -= t.long_title_penalty
            issues.append(Issue(
                IssuePriority.MEDIUM, TITLE_TOO_LONG_MESSAGE.format(limit=t.title_max)
            ))

        if metadata.description and len(metadata.description) > t.description_max:
            score -= t.long_description_penalty
            issues.append(Issue(
                IssuePriority.MEDIUM, DESCRIPTION_TOO_LONG_MESSAGE.format(limit=t.description_max)
            ))

        return ScoreReport(score=max(0, score), issues=tuple(issues))
