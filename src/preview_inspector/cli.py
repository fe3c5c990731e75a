"""Command-line interface for the preview inspector."""

import asyncio
import json
import sys
from typing import Dict, Optional, Union

from pydantic import ValidationError

from preview_inspector.browser_config import FAST_CONFIG, BrowserConfig
from preview_inspector.config import InspectorConfig, ScoringThresholds, settings
from preview_inspector.exceptions import InspectionError
from preview_inspector.inspector import PreviewInspector
from preview_inspector.logging_config import setup_logging
from preview_inspector.models import InspectionResult

PRIORITY_ICONS = {"high": "🔴", "medium": "🟠", "low": "🔵"}


def print_inspection(url: str, outcome: Union[InspectionResult, InspectionError]):
    """Print an inspection result in a formatted way.

    Args:
        url: The inspected URL
        outcome: InspectionResult, or the error that aborted the inspection
    """
    if isinstance(outcome, InspectionError):
        print(f"\n❌ {outcome.user_message}: {url}")
        return

    metadata = outcome.metadata

    print(f"\n{'=' * 60}")
    print(f"Social Preview for: {url}")
    print(f"{'=' * 60}")
    print(f"\n📊 Score: {outcome.score}/100")
    print(f"\nMetadata:")
    print(f"  • Title: {metadata.title or '-'}")
    print(f"  • Description: {metadata.description or '-'}")
    print(f"  • og:image: {metadata.og_image or '-'} "
          f"({'reachable' if outcome.og_image_reachable else 'unreachable'})")
    print(f"  • twitter:image: {metadata.twitter_image or '-'} "
          f"({'reachable' if outcome.twitter_image_reachable else 'unreachable'})")
    print(f"  • twitter:card: {metadata.twitter_card or '-'}")
    print(f"  • Favicon: {metadata.favicon or '-'}")
    if metadata.used_fallback:
        print(f"  • Retrieved with headless browser fallback")

    if outcome.issues:
        print(f"\n⚠️  Issues ({len(outcome.high_priority_issues)} high priority):")
        for issue in outcome.issues:
            icon = PRIORITY_ICONS.get(issue.priority.value, "•")
            print(f"  {icon} [{issue.priority.value}] {issue.message}")
    else:
        print(f"\n✅ No issues found")

    print(f"\n{'=' * 60}\n")


def _to_json(outcomes: Dict[str, Union[InspectionResult, InspectionError]]) -> str:
    results = []
    for url, outcome in outcomes.items():
        if isinstance(outcome, InspectionError):
            results.append({"url": url, "success": False, "error": outcome.user_message})
        else:
            results.append({"url": url, "success": True, **outcome.to_dict()})
    return json.dumps(results, indent=2, default=str)


def inspect_command(args) -> int:
    """Inspect one or more URLs and print the results.

    Returns:
        Process exit status: 1 if any inspection failed
    """
    config = InspectorConfig.from_env()
    config.fallback_enabled = config.fallback_enabled and not args.no_fallback
    if args.primary_timeout is not None:
        config.primary_timeout = args.primary_timeout

    browser_config = FAST_CONFIG.model_copy() if args.fast else BrowserConfig.from_env()
    if args.settle_delay is not None:
        browser_config.settle_delay = args.settle_delay
    if args.headed:
        browser_config.headless = False

    thresholds = (
        ScoringThresholds.from_file(args.thresholds)
        if args.thresholds
        else ScoringThresholds.from_env()
    )

    inspector = PreviewInspector(
        config=config,
        browser_config=browser_config,
        thresholds=thresholds,
    )
    outcomes = asyncio.run(inspector.inspect_many(args.urls))

    if args.json:
        print(_to_json(outcomes))
    else:
        for url, outcome in outcomes.items():
            print_inspection(url, outcome)

    failed = any(isinstance(outcome, InspectionError) for outcome in outcomes.values())
    return 1 if failed else 0


def main(argv: Optional[list] = None):
    """Main CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Preview Inspector - Audit a URL's social share preview"
    )
    parser.add_argument(
        "urls", nargs="+", help="URLs to inspect (one or more)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as a JSON array",
    )
    parser.add_argument(
        "--no-fallback",
        action="store_true",
        help="Never fall back to a headless browser",
    )
    parser.add_argument(
        "--primary-timeout",
        type=float,
        help="Timeout in seconds for the lightweight fetch (default: 5)",
    )
    parser.add_argument(
        "--settle-delay",
        type=float,
        help="Seconds to wait after browser navigation (default: 2)",
    )
    parser.add_argument(
        "--fast",
        action="store_true",
        help="Use a shorter browser timeout and settle delay for the fallback",
    )
    parser.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window when the fallback runs",
    )
    parser.add_argument(
        "--thresholds",
        help="JSON file with scoring thresholds",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=settings.LOG_LEVEL.upper(),
        help="Set logging verbosity (default: INFO)",
    )
    parser.add_argument(
        "--log-file",
        default=settings.LOG_FILE,
        help="Write logs to file in addition to console",
    )

    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    try:
        status = inspect_command(args)
    except ValidationError as e:
        error = e.errors()[0]
        option = ".".join(str(part) for part in error["loc"])
        parser.error(f"invalid value for {option}: {error['msg']}")

    sys.exit(status)


if __name__ == "__main__":
    main()
