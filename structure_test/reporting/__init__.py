"""Report rendering for test summaries."""

from structure_test.reporting.json_report import load_json, to_json
from structure_test.reporting.junit import suite_to_xml, summary_to_xml
from structure_test.reporting.render import render
from structure_test.reporting.text import to_text

__all__ = [
    "load_json",
    "render",
    "suite_to_xml",
    "summary_to_xml",
    "to_json",
    "to_text",
]
