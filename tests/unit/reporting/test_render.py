"""Tests for output format dispatch."""

import json
import logging

import pytest

from structure_test.models.output import OutputValue
from structure_test.models.result import SummaryObject, TestResult
from structure_test.reporting import render


@pytest.fixture
def summary() -> SummaryObject:
    """Summary with one passing and one failing result."""
    return SummaryObject.from_results(
        [
            TestResult(name="first", passed=True),
            TestResult(name="second", errors=["oops"]),
        ]
    )


def test_render_text(summary: SummaryObject) -> None:
    """Text output concatenates result blocks in order."""
    assert render(summary, OutputValue.TEXT) == (
        "\nTest Name:first\nTest Status:Pass\nErrors:\nDuration:0s\n"
        "\nTest Name:second\nTest Status:Fail\nErrors:oops\nDuration:0s\n"
    )


def test_render_text_empty() -> None:
    """An empty summary renders no text."""
    assert render(SummaryObject(), OutputValue.TEXT) == ""


def test_render_json(summary: SummaryObject) -> None:
    """JSON output includes the pass count."""
    data = json.loads(render(summary, OutputValue.JSON))

    assert data["Pass"] == 1
    assert data["Fail"] == 1


def test_render_junit(summary: SummaryObject) -> None:
    """JUnit output is the testsuites document."""
    assert render(summary, OutputValue.JUNIT).startswith(
        '<testsuites failures="1" tests="2"'
    )


def test_render_logs_format(
    summary: SummaryObject, caplog: pytest.LogCaptureFixture
) -> None:
    """Rendering is logged at debug level."""
    with caplog.at_level(logging.DEBUG, logger="structure_test"):
        render(summary, OutputValue.JSON)

    assert "Rendering 2 result(s) as json" in caplog.text
