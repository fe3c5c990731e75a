"""Tests for the command-line interface."""

import json
from unittest.mock import patch

import pytest

from preview_inspector import cli
from preview_inspector.exceptions import RetrievalError
from preview_inspector.models import InspectionResult, Issue, IssuePriority, Metadata

PAGE_URL = "https://example.com/"


def make_result():
    return InspectionResult(
        metadata=Metadata(url=PAGE_URL, hostname="example.com", title="Example"),
        score=50,
        issues=(
            Issue(IssuePriority.HIGH, "Missing social share image (og:image)"),
            Issue(IssuePriority.HIGH, "Missing meta description"),
        ),
    )


class FakeInspector:
    """Replaces PreviewInspector, recording its configuration."""

    instances = []

    def __init__(self, config=None, browser_config=None, thresholds=None):
        self.config = config
        self.browser_config = browser_config
        self.thresholds = thresholds
        FakeInspector.instances.append(self)

    async def inspect_many(self, urls):
        outcomes = {}
        for url in urls:
            if "broken" in url:
                outcomes[url] = RetrievalError("HTTP 404", url=url, status_code=404)
            else:
                outcomes[url] = make_result()
        return outcomes


@pytest.fixture(autouse=True)
def fake_inspector():
    """Patch the CLI to use FakeInspector and leave logging alone."""
    FakeInspector.instances = []
    with patch.object(cli, "PreviewInspector", FakeInspector), \
            patch.object(cli, "setup_logging"):
        yield


class TestCli:
    """Test cases for the CLI entry point."""

    def test_text_output(self, capsys):
        """Test the human-readable report."""
        with pytest.raises(SystemExit) as exc_info:
            cli.main([PAGE_URL])

        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "Score: 50/100" in out
        assert "[high] Missing meta description" in out

    def test_json_output(self, capsys):
        """Test --json prints one entry per URL."""
        with pytest.raises(SystemExit):
            cli.main([PAGE_URL, "--json"])

        data = json.loads(capsys.readouterr().out)
        assert data[0]["url"] == PAGE_URL
        assert data[0]["success"] is True
        assert data[0]["score"] == 50
        assert data[0]["issues"][1] == {"priority": "high", "message": "Missing meta description"}

    def test_failure_is_generic(self, capsys):
        """Test failed inspections print the generic message and exit 1."""
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["https://example.com/broken", "--json"])

        assert exc_info.value.code == 1
        data = json.loads(capsys.readouterr().out)
        assert data == [{
            "url": "https://example.com/broken",
            "success": False,
            "error": "Failed to scrape URL",
        }]

    def test_options_reach_configuration(self):
        """Test flags override the environment configuration."""
        with pytest.raises(SystemExit):
            cli.main([PAGE_URL, "--no-fallback", "--primary-timeout", "3", "--settle-delay", "0.5", "--headed"])

        inspector = FakeInspector.instances[0]
        assert inspector.config.fallback_enabled is False
        assert inspector.config.primary_timeout == 3.0
        assert inspector.browser_config.settle_delay == 0.5
        assert inspector.browser_config.headless is False

    def test_thresholds_file(self, tmp_path):
        """Test --thresholds loads scoring limits from JSON."""
        path = tmp_path / "t.json"
        path.write_text(json.dumps({"thresholds": {"title_max": 45}}))

        with pytest.raises(SystemExit):
            cli.main([PAGE_URL, "--thresholds", str(path)])

        assert FakeInspector.instances[0].thresholds.title_max == 45

    def test_fast_preset(self):
        """Test --fast uses the fast browser preset."""
        with pytest.raises(SystemExit):
            cli.main([PAGE_URL, "--fast"])

        browser_config = FakeInspector.instances[0].browser_config
        assert browser_config.timeout == 15000
        assert browser_config.settle_delay == 0.5

    @pytest.mark.parametrize("delay", ["-1", "100"])
    def test_out_of_range_settle_delay_is_usage_error(self, delay, capsys):
        """Test an out-of-range --settle-delay exits with a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            cli.main([PAGE_URL, "--settle-delay", delay])

        assert exc_info.value.code == 2
        assert "settle_delay" in capsys.readouterr().err
        assert FakeInspector.instances == []
