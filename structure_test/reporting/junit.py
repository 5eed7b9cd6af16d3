"""JUnit XML renderings of test results."""

import re
import xml.etree.ElementTree as ET

from structure_test.duration import format_seconds, to_nanoseconds
from structure_test.models.result import JUnitTestSuite, SummaryObject

# Characters outside the XML 1.0 Char production.
_INVALID_XML_CHARS = re.compile(
    r"[^\t\n\r\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]"
)


def _xml_text(value: str) -> str:
    """Replace characters XML cannot carry, such as ANSI escapes, with U+FFFD."""
    return _INVALID_XML_CHARS.sub("\uFFFD", value)


def summary_to_xml(summary: SummaryObject) -> str:
    """Render a summary as ``<testsuites>``.

    Counts of failures and tests and the run time (in nanoseconds) are
    attributes of the root. Each result becomes a ``<testcase>`` inside a
    single ``<testsuite>``, with one ``<failure>`` per recorded error.
    Captured output and pass counts are not part of this document.
    """
    root = ET.Element(
        "testsuites",
        {
            "failures": str(summary.failed),
            "tests": str(summary.total),
            "time": str(to_nanoseconds(summary.duration)),
        },
    )
    if summary.results:
        suite = ET.SubElement(root, "testsuite")
        for result in summary.results:
            case = ET.SubElement(
                suite,
                "testcase",
                {
                    "name": _xml_text(result.name),
                    "time": str(to_nanoseconds(result.duration)),
                },
            )
            for message in result.errors:
                ET.SubElement(case, "failure").text = _xml_text(message)
    return ET.tostring(root, encoding="unicode")


def suite_to_xml(suite: JUnitTestSuite) -> str:
    """Render a JUnit-native suite, with times in seconds and captured output.

    Every test case carries ``<system-out>`` and ``<system-err>``, empty when
    nothing was captured.
    """
    root = ET.Element("testsuite", {"name": _xml_text(suite.name)})
    for test_case in suite.results:
        case = ET.SubElement(
            root,
            "testcase",
            {
                "name": _xml_text(test_case.name),
                "time": format_seconds(test_case.duration),
            },
        )
        for message in test_case.errors:
            ET.SubElement(case, "failure").text = _xml_text(message)
        ET.SubElement(case, "system-out").text = _xml_text(test_case.stdout)
        ET.SubElement(case, "system-err").text = _xml_text(test_case.stderr)
    return ET.tostring(root, encoding="unicode")
