"""CLI entry point for re-rendering a saved test report."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from structure_test.models.output import OutputValue, UnsupportedFormatError
from structure_test.models.result import JUnitTestSuite, SummaryObject
from structure_test.reporting import load_json, render, suite_to_xml

STATUS_SYMBOLS = {
    True: "✓",
    False: "✗",
}


def output_format(value: str) -> OutputValue:
    """Argparse type for the output format flag."""
    try:
        return OutputValue.parse(value)
    except UnsupportedFormatError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def log_results_summary(log: logging.Logger, summary: SummaryObject) -> None:
    """Log one line per result followed by the totals."""
    log.info("=" * 80)
    log.info("Test Results Summary:")
    log.info("=" * 80)

    for result in summary.results:
        log.info(
            "%s %s (%.2fs)",
            STATUS_SYMBOLS[result.is_pass()],
            result.name,
            result.duration.total_seconds(),
        )
        for message in result.errors:
            log.info("  Error: %s", message)

    log.info(
        "Passes: %d, Failures: %d, Total: %d",
        summary.passed,
        summary.failed,
        summary.total,
    )
    if not summary.reconciles():
        log.warning(
            "Summary counts do not match its %d result(s)", len(summary.results)
        )


def run(report_path: Path, output: OutputValue, junit_suite: str | None) -> int:
    """Render a saved JSON report and return the exit code."""
    log = logging.getLogger("structure_test")

    log.info("Loading report: %s", report_path)
    try:
        summary = load_json(report_path.read_bytes())
    except (OSError, ValidationError) as e:
        log.error("Could not read report %s: %s", report_path, e)
        return 2

    log_results_summary(log, summary)

    if output is OutputValue.JUNIT and junit_suite is not None:
        print(suite_to_xml(JUnitTestSuite.from_results(junit_suite, summary.results)))
    else:
        print(render(summary, output))

    has_failures = summary.failed > 0 or any(
        not result.is_pass() for result in summary.results
    )
    return 1 if has_failures else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render a container structure test report"
    )
    parser.add_argument(
        "report",
        type=Path,
        help="Path to a JSON report",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=output_format,
        default=OutputValue.default(),
        metavar=OutputValue.type_name(),
        help=f"Output format, one of: {', '.join(OutputValue.choices())}",
    )
    parser.add_argument(
        "--junit-suite",
        default=None,
        metavar="NAME",
        help="With --output junit, render a single named JUnit test suite",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    sys.exit(run(args.report, args.output, args.junit_suite))


if __name__ == "__main__":  # pragma: no cover
    main()
