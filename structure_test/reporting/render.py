"""Dispatch of a summary to the selected output format."""

import logging
from typing import assert_never

from structure_test.models.output import OutputValue
from structure_test.models.result import SummaryObject
from structure_test.reporting.json_report import to_json
from structure_test.reporting.junit import summary_to_xml
from structure_test.reporting.text import to_text

log = logging.getLogger(__name__)


def render(summary: SummaryObject, output: OutputValue) -> str:
    """Render a summary in the given output format."""
    log.debug("Rendering %d result(s) as %s", len(summary.results), output)
    match output:
        case OutputValue.TEXT:
            return to_text(summary)
        case OutputValue.JSON:
            return to_json(summary)
        case OutputValue.JUNIT:
            return summary_to_xml(summary)
        case _:
            assert_never(output)
