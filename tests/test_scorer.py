"""Tests for preview scoring."""

import itertools

import pytest

from preview_inspector.config import ScoringThresholds
from preview_inspector.models import Issue, IssuePriority, Metadata
from preview_inspector.scorer import PreviewScorer


@pytest.fixture
def scorer():
    """Create a PreviewScorer with default thresholds."""
    return PreviewScorer()


def make_metadata(**overrides):
    """Metadata for a well-formed page, with overrides."""
    values = dict(
        url="https://example.com/",
        hostname="example.com",
        title="Example Site - Home",
        description="Welcome to Example Site, your source for quality content.",
        og_image="https://example.com/og.png",
        twitter_image="https://example.com/og.png",
    )
    values.update(overrides)
    return Metadata(**values)


class TestPreviewScorer:
    """Test cases for PreviewScorer."""

    def test_perfect_page(self, scorer):
        """Test a complete page scores 100 with no issues."""
        report = scorer.score(make_metadata(), og_reachable=True, twitter_reachable=True)
        assert report.score == 100
        assert report.issues == ()

    def test_missing_description_only(self, scorer):
        """Test missing description and og:description costs 20."""
        metadata = make_metadata(description=None, og_description=None, title="Short title")
        report = scorer.score(metadata, og_reachable=True, twitter_reachable=True)

        assert report.score == 80
        assert report.issues == (Issue(IssuePriority.HIGH, "Missing meta description"),)

    def test_missing_image_and_long_title(self, scorer):
        """Test missing og:image plus a 70 character title."""
        metadata = make_metadata(
            og_image=None,
            twitter_image=None,
            description="d" * 120,
            title="t" * 70,
        )
        report = scorer.score(metadata, og_reachable=False, twitter_reachable=False)

        assert report.score == 60
        assert report.issues == (
            Issue(IssuePriority.HIGH, "Missing social share image (og:image)"),
            Issue(IssuePriority.MEDIUM, "Title is too long (> 60 chars)"),
        )

    def test_broken_og_image(self, scorer):
        """Test an unreachable og:image is reported as broken, not missing."""
        report = scorer.score(make_metadata(), og_reachable=False, twitter_reachable=True)

        assert report.score == 70
        assert len(report.issues) == 1
        assert report.issues[0].priority is IssuePriority.HIGH
        assert "broken or inaccessible" in report.issues[0].message

    def test_og_description_counts_as_description(self, scorer):
        """Test og:description alone avoids the missing description issue."""
        metadata = make_metadata(description=None, og_description="From OG")
        report = scorer.score(metadata, og_reachable=True)
        assert report.score == 100

    def test_long_description(self, scorer):
        """Test a description over 160 characters costs 10."""
        report = scorer.score(make_metadata(description="d" * 161), og_reachable=True)
        assert report.score == 90
        assert report.issues == (
            Issue(IssuePriority.MEDIUM, "Description is too long (> 160 chars)"),
        )

    def test_length_limits_are_inclusive(self, scorer):
        """Test titles of exactly 60 and descriptions of exactly 160 pass."""
        metadata = make_metadata(title="t" * 60, description="d" * 160)
        assert scorer.score(metadata, og_reachable=True).score == 100

    def test_issues_keep_rule_order(self, scorer):
        """Test issues come out in rule order, not priority order."""
        metadata = make_metadata(og_image=None, title="t" * 61, description="d" * 200)
        report = scorer.score(metadata, og_reachable=False)
        assert [i.message for i in report.issues] == [
            "Missing social share image (og:image)",
            "Title is too long (> 60 chars)",
            "Description is too long (> 160 chars)",
        ]

    def test_twitter_reachability_does_not_affect_score(self, scorer):
        """Test flipping twitter reachability leaves the report unchanged."""
        metadata = make_metadata(description=None)
        reachable = scorer.score(metadata, og_reachable=True, twitter_reachable=True)
        unreachable = scorer.score(metadata, og_reachable=True, twitter_reachable=False)
        assert reachable == unreachable

    @pytest.mark.parametrize(
        "og_image,og_reachable,description,title",
        list(itertools.product(
            [None, "https://example.com/og.png"],
            [True, False],
            [None, "short", "d" * 500],
            [None, "short", "t" * 500],
        )),
    )
    def test_score_never_negative(self, og_image, og_reachable, description, title):
        """Test the score stays within [0, 100] even with harsh penalties."""
        thresholds = ScoringThresholds(
            og_image_penalty=60,
            missing_description_penalty=50,
            long_title_penalty=40,
            long_description_penalty=40,
        )
        metadata = make_metadata(og_image=og_image, description=description, title=title)
        report = PreviewScorer(thresholds).score(metadata, og_reachable=og_reachable)
        assert 0 <= report.score <= 100

    def test_custom_thresholds_in_messages(self):
        """Test configured limits show up in issue messages."""
        scorer = PreviewScorer(ScoringThresholds(title_max=50))
        report = scorer.score(make_metadata(title="t" * 55), og_reachable=True)
        assert report.issues == (Issue(IssuePriority.MEDIUM, "Title is too long (> 50 chars)"),)
